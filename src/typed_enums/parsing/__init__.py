"""Parsing module for display name literals."""

from typed_enums.parsing.name_lexer import NameListLexer
from typed_enums.parsing.name_parser import NameListParser, fit_names

__all__ = [
    "NameListLexer",
    "NameListParser",
    "fit_names",
]
