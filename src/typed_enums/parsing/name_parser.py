"""Parser turning display name literals into position-aligned name tables."""

from __future__ import annotations

from collections.abc import Sequence

from typed_enums.parsing.name_lexer import NameListLexer


def fit_names(names: Sequence[str], count: int) -> list[str]:
    """Pad with empty strings or truncate so exactly count names remain."""
    fitted = list(names[:count])
    fitted.extend("" for _ in range(count - len(fitted)))
    return fitted


class NameListParser:
    """Parser for comma-separated display name literals.

    ``"Str0, , , Str3"`` parses to ``["Str0", "", "", "Str3"]``: a blank
    slot between two separators stays in place as an empty name.
    """

    def __init__(self) -> None:
        self.lexer = NameListLexer()
        self.lexer.build()

    def parse(self, data: str) -> list[str]:
        """Split a literal into names. An empty literal yields one empty name."""
        names = [""]
        for tok in self.lexer.tokenize(data):
            if tok.type == "SEPARATOR":
                names.append("")
            else:
                names[-1] += tok.value
        return names

    def parse_table(self, data: str, count: int) -> list[str]:
        """Parse a literal into a table of exactly count names."""
        return fit_names(self.parse(data), count)
