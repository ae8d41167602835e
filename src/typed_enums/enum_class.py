"""Class-based declaration surface for enumerations.

Example::

    class Color(EnumClass, underlying="uint8",
                symbols=["Red", ("Green", 5), "Blue"],
                items=["Blue", "Red"],
                strings="blue, red"):
        pass

    Color.element_count()        # 3
    list(Color())                # [Color.Enum.Blue, Color.Enum.Red]
    Color.to_string(Color.Red)   # "red"
"""

from __future__ import annotations

import logging
import types
from collections.abc import Iterable, Iterator, Sequence
from enum import IntEnum
from typing import Any, ClassVar

from typed_enums.declaration import SymbolLike, declare_enum, to_declaration
from typed_enums.errors import EnumDeclarationError
from typed_enums.metadata import EnumMetadata
from typed_enums.types import EnumDefinition, PrimitiveType

logger = logging.getLogger(__name__)

# Class attributes set on every enumeration; symbols cannot use these names
_RESERVED_NAMES = frozenset({"definition", "metadata", "Enum", "underlying_type"})


class EnumClass:
    """Base class for enumerations with iteration and string metadata.

    Subclasses declare themselves through class keywords:

    - ``symbols``: every declared symbol, as names or ``(name, value)`` pairs.
    - ``underlying``: a PrimitiveType or its name (default ``int32``).
    - ``items``: declared names to expose for iteration and indexing.
    - ``strings``: display names aligned to ``items``, either one
      comma-separated literal or a sequence of strings.

    A subclass of a declared enumeration that passes no ``symbols``
    inherits the parent's declaration (and items and strings unless it
    overrides them).
    """

    definition: ClassVar[EnumDefinition]
    metadata: ClassVar[EnumMetadata]
    Enum: ClassVar[type[IntEnum]]
    underlying_type: ClassVar[PrimitiveType]

    def __init_subclass__(
        cls,
        *,
        symbols: Iterable[SymbolLike] | None = None,
        underlying: PrimitiveType | str | None = None,
        items: Sequence[str] | None = None,
        strings: str | Sequence[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)

        parent_metadata: EnumMetadata | None = None
        if symbols is not None:
            definition = declare_enum(cls.__name__, underlying, symbols)
        else:
            parent_metadata = getattr(cls, "metadata", None)
            if parent_metadata is None:
                raise EnumDeclarationError(f"Enum '{cls.__name__}' declares no symbols")
            if underlying is not None:
                raise EnumDeclarationError(
                    f"Enum '{cls.__name__}': underlying type requires a symbol list"
                )
            definition = parent_metadata.definition

        reserved = [
            n for n in definition.symbol_names if n in _RESERVED_NAMES or hasattr(EnumClass, n)
        ]
        if reserved:
            raise EnumDeclarationError(
                f"Enum '{cls.__name__}': symbol names clash with class attributes: {reserved}"
            )

        if parent_metadata is not None:
            enum_type = parent_metadata.enum_type
            if items is None:
                items = parent_metadata.item_names
            if strings is None:
                strings = parent_metadata.strings
        else:
            enum_type = definition.build_enum()
            enum_type.__module__ = cls.__module__
            enum_type.__qualname__ = f"{cls.__qualname__}.Enum"

        if strings is not None and not items:
            raise EnumDeclarationError(
                f"Enum '{cls.__name__}': strings are aligned to items, but no items are declared"
            )

        cls.definition = definition
        cls.Enum = enum_type
        cls.underlying_type = definition.underlying
        cls.metadata = EnumMetadata(
            definition, enum_type, items if items is not None else (), strings
        )
        for s in definition.symbols:
            setattr(cls, s.name, enum_type[s.name])

        logger.debug(
            "Declared enum '%s' (%s): %d symbols, %d items",
            cls.__name__,
            definition.underlying.value,
            definition.element_count,
            cls.metadata.items_count,
        )

    @classmethod
    def element_count(cls) -> int:
        """Number of declared symbols, whatever the item list holds."""
        return cls.definition.element_count

    @classmethod
    def items_count(cls) -> int:
        return cls.metadata.items_count

    @classmethod
    def item(cls, index: int) -> IntEnum:
        """Return the item at a position; raises ItemIndexError past the end."""
        return cls.metadata.item(index)

    @classmethod
    def items(cls) -> tuple[IntEnum, ...]:
        return cls.metadata.items

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return cls.metadata.names

    @classmethod
    def to_string(cls, value: int) -> str:
        return cls.metadata.to_string(value)

    @classmethod
    def from_string(cls, text: str) -> IntEnum | None:
        return cls.metadata.from_string(text)

    def __iter__(self) -> Iterator[IntEnum]:
        return iter(self.metadata)

    def __reversed__(self) -> Iterator[IntEnum]:
        return reversed(self.metadata)


def smart_enum(
    name: str,
    underlying: PrimitiveType | str | None,
    *symbols: str,
    module: str | None = None,
) -> type[EnumClass]:
    """Declare an enumeration whose items and names mirror its symbols.

    Symbols are bare names; explicit values are not accepted here.
    """
    names: list[str] = []
    for symbol in symbols:
        decl = to_declaration(symbol)
        if decl.explicit_value is not None:
            raise EnumDeclarationError(
                f"smart_enum '{name}': symbol '{decl.name}' cannot carry an explicit value"
            )
        names.append(decl.name)

    def exec_body(ns: dict[str, Any]) -> None:
        if module is not None:
            ns["__module__"] = module

    return types.new_class(
        name,
        (EnumClass,),
        {"symbols": names, "underlying": underlying, "items": names, "strings": names},
        exec_body,
    )
