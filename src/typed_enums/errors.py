"""Exceptions raised by typed_enums."""


class EnumDeclarationError(ValueError):
    """An enumeration was declared inconsistently.

    Raised while the enumeration class is being created, never by lookups.
    """


class ItemIndexError(IndexError):
    """Indexed access past the end of the active item list."""

    def __init__(self, enum_name: str, index: int, count: int) -> None:
        super().__init__(
            f"Item index {index} out of range for '{enum_name}' ({count} items)"
        )
        self.enum_name = enum_name
        self.index = index
        self.count = count
