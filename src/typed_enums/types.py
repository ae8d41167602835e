"""Type definitions for the typed_enums library."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class PrimitiveType(Enum):
    """Integer primitive types an enumeration can be represented with."""

    UINT8 = "uint8"
    INT8 = "int8"
    UINT16 = "uint16"
    INT16 = "int16"
    UINT32 = "uint32"
    INT32 = "int32"
    UINT64 = "uint64"
    INT64 = "int64"
    UINT128 = "uint128"
    INT128 = "int128"

    @property
    def size_bytes(self) -> int:
        """Return the size in bytes for this primitive type."""
        sizes = {
            PrimitiveType.UINT8: 1,
            PrimitiveType.INT8: 1,
            PrimitiveType.UINT16: 2,
            PrimitiveType.INT16: 2,
            PrimitiveType.UINT32: 4,
            PrimitiveType.INT32: 4,
            PrimitiveType.UINT64: 8,
            PrimitiveType.INT64: 8,
            PrimitiveType.UINT128: 16,
            PrimitiveType.INT128: 16,
        }
        return sizes[self]

    @property
    def is_signed(self) -> bool:
        return not self.value.startswith("u")

    @property
    def min_value(self) -> int:
        if self.is_signed:
            return -(1 << (self.size_bytes * 8 - 1))
        return 0

    @property
    def max_value(self) -> int:
        bits = self.size_bytes * 8
        if self.is_signed:
            return (1 << (bits - 1)) - 1
        return (1 << bits) - 1

    def contains(self, value: int) -> bool:
        """Return whether value is representable in this type."""
        return self.min_value <= value <= self.max_value


# Mapping from type name strings to PrimitiveType enum values
PRIMITIVE_TYPE_NAMES: dict[str, PrimitiveType] = {pt.value: pt for pt in PrimitiveType}

DEFAULT_UNDERLYING_TYPE = PrimitiveType.INT32


@dataclass(frozen=True)
class SymbolDefinition:
    """A declared symbol with its resolved value."""

    name: str
    value: int
    has_explicit_value: bool = False


@dataclass
class EnumDefinition:
    """Declaration of one enumeration: its underlying type and every symbol.

    Symbols are kept in declaration order. Two symbols may share a value
    when explicit values collide.
    """

    name: str
    underlying: PrimitiveType = DEFAULT_UNDERLYING_TYPE
    symbols: list[SymbolDefinition] = field(default_factory=list)

    @property
    def element_count(self) -> int:
        """Number of declared symbols, duplicates by value included."""
        return len(self.symbols)

    @property
    def symbol_names(self) -> list[str]:
        return [s.name for s in self.symbols]

    def get_symbol(self, name: str) -> SymbolDefinition | None:
        for s in self.symbols:
            if s.name == name:
                return s
        return None

    def build_enum(self) -> type[IntEnum]:
        """Create the IntEnum type holding the declared symbols.

        Symbols whose values collide with an earlier symbol become aliases
        of it, so they compare equal.
        """
        return IntEnum(self.name, [(s.name, s.value) for s in self.symbols])
