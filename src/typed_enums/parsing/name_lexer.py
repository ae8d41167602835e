"""Lexer for comma-separated display name literals."""

import ply.lex as lex


class NameListLexer:
    """Lexer for tokenizing a comma-separated list of display names.

    A separator swallows the blanks (spaces and tabs) that immediately
    follow it. Everything else is name text, kept verbatim.
    """

    tokens = [
        "SEPARATOR",
        "TEXT",
    ]

    def __init__(self) -> None:
        self.lexer: lex.LexToken = None  # type: ignore

    def t_SEPARATOR(self, t: lex.LexToken) -> lex.LexToken:
        r",[ \t]*"
        return t

    def t_TEXT(self, t: lex.LexToken) -> lex.LexToken:
        r"[^,]+"
        t.lexer.lineno += t.value.count("\n")
        return t

    def t_error(self, t: lex.LexToken) -> None:
        raise SyntaxError(f"Illegal character '{t.value[0]}' at line {t.lineno}")

    def build(self, **kwargs) -> None:  # type: ignore
        """Build the lexer."""
        self.lexer = lex.lex(module=self, **kwargs)

    def input(self, data: str) -> None:
        """Set the input string to tokenize."""
        self.lexer.input(data)

    def token(self) -> lex.LexToken | None:
        """Return the next token."""
        return self.lexer.token()

    def tokenize(self, data: str) -> list[lex.LexToken]:
        """Tokenize the input and return all tokens."""
        self.input(data)
        tokens = []
        while True:
            tok = self.token()
            if tok is None:
                break
            tokens.append(tok)
        return tokens
