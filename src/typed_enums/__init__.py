"""Typed Enums - Integer enumerations with iteration order and display names."""

from typed_enums.declaration import SymbolDeclaration, declare_enum
from typed_enums.enum_class import EnumClass, smart_enum
from typed_enums.errors import EnumDeclarationError, ItemIndexError
from typed_enums.metadata import EnumMetadata
from typed_enums.parsing import NameListParser
from typed_enums.types import (
    PRIMITIVE_TYPE_NAMES,
    EnumDefinition,
    PrimitiveType,
    SymbolDefinition,
)

__all__ = [
    # Main API
    "EnumClass",
    "smart_enum",
    # Declaration model
    "EnumDefinition",
    "PrimitiveType",
    "PRIMITIVE_TYPE_NAMES",
    "SymbolDeclaration",
    "SymbolDefinition",
    "declare_enum",
    # Metadata
    "EnumMetadata",
    "NameListParser",
    # Errors
    "EnumDeclarationError",
    "ItemIndexError",
]

__version__ = "0.1.0"
