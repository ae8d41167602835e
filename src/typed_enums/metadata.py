"""Active item list, name table and the lookups built on them."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Sequence
from enum import IntEnum

from typed_enums.errors import EnumDeclarationError, ItemIndexError
from typed_enums.parsing import NameListParser, fit_names
from typed_enums.types import EnumDefinition

logger = logging.getLogger(__name__)


class EnumMetadata:
    """Iteration and string metadata for one enumeration.

    ``items`` names the declared symbols to expose, in iteration order.
    It may omit, reorder or repeat symbols. ``strings`` holds the display
    names aligned by position to ``items``: either one comma-separated
    literal or a ready-made sequence. The name table is built on first
    use and shared afterwards.
    """

    def __init__(
        self,
        definition: EnumDefinition,
        enum_type: type[IntEnum],
        items: Sequence[str] = (),
        strings: str | Sequence[str] | None = None,
    ) -> None:
        self.definition = definition
        self.enum_type = enum_type
        if isinstance(items, str):
            raise EnumDeclarationError(
                f"Enum '{definition.name}': items must be a list of symbol names, "
                f"not the string {items!r}"
            )
        self.item_names: tuple[str, ...] = tuple(items)
        self.strings = strings if isinstance(strings, str) or strings is None else tuple(strings)
        self._items = tuple(self._bind_item(name) for name in self.item_names)
        self._names: tuple[str, ...] | None = None
        self._names_lock = threading.Lock()

    def _bind_item(self, name: str) -> IntEnum:
        if self.definition.get_symbol(name) is None:
            raise EnumDeclarationError(
                f"Enum '{self.definition.name}': item '{name}' is not a declared symbol"
            )
        return self.enum_type[name]

    @property
    def items(self) -> tuple[IntEnum, ...]:
        return self._items

    @property
    def names(self) -> tuple[str, ...]:
        """Display names, one per item."""
        if self._names is None:
            with self._names_lock:
                if self._names is None:
                    self._names = self._build_names()
        return self._names

    def _build_names(self) -> tuple[str, ...]:
        count = len(self._items)
        if self.strings is None:
            names = fit_names([], count)
        elif isinstance(self.strings, str):
            names = NameListParser().parse_table(self.strings, count)
        else:
            names = fit_names(self.strings, count)
        logger.debug("Built name table for '%s' (%d entries)", self.definition.name, count)
        return tuple(names)

    @property
    def items_count(self) -> int:
        return len(self._items)

    def item(self, index: int) -> IntEnum:
        if index < 0 or index >= len(self._items):
            raise ItemIndexError(self.definition.name, index, len(self._items))
        return self._items[index]

    def name_at(self, index: int) -> str:
        if index < 0 or index >= len(self._items):
            raise ItemIndexError(self.definition.name, index, len(self._items))
        return self.names[index]

    def __iter__(self) -> Iterator[IntEnum]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[IntEnum]:
        return reversed(self._items)

    def to_string(self, value: int) -> str:
        """Return the name of the first item equal to value, or ''."""
        for i, item in enumerate(self._items):
            if item == value:
                return self.names[i]
        return ""

    def from_string(self, text: str) -> IntEnum | None:
        """Return the item whose name is exactly text, or None."""
        for i, name in enumerate(self.names):
            if name == text:
                return self._items[i]
        return None
