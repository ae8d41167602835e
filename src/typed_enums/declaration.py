"""Resolution of symbol declarations into an EnumDefinition."""

from __future__ import annotations

import keyword
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from typed_enums.errors import EnumDeclarationError
from typed_enums.types import (
    DEFAULT_UNDERLYING_TYPE,
    PRIMITIVE_TYPE_NAMES,
    EnumDefinition,
    PrimitiveType,
    SymbolDefinition,
)


@dataclass(frozen=True)
class SymbolDeclaration:
    """Specification for a symbol before resolution."""

    name: str
    explicit_value: int | None = None


# A bare name, a (name, value) pair, or a SymbolDeclaration
SymbolLike = Union[str, tuple[str, int], SymbolDeclaration]


def resolve_underlying(underlying: PrimitiveType | str | None) -> PrimitiveType:
    """Resolve an underlying type given as a PrimitiveType or its name."""
    if underlying is None:
        return DEFAULT_UNDERLYING_TYPE
    if isinstance(underlying, PrimitiveType):
        return underlying
    prim = PRIMITIVE_TYPE_NAMES.get(underlying)
    if prim is None:
        valid = ", ".join(PRIMITIVE_TYPE_NAMES)
        raise EnumDeclarationError(
            f"Unknown underlying type '{underlying}' (expected one of: {valid})"
        )
    return prim


def to_declaration(symbol: SymbolLike) -> SymbolDeclaration:
    """Normalize one symbol argument into a SymbolDeclaration."""
    if isinstance(symbol, SymbolDeclaration):
        decl = symbol
    elif isinstance(symbol, str):
        decl = SymbolDeclaration(name=symbol)
    elif isinstance(symbol, tuple) and len(symbol) == 2:
        decl = SymbolDeclaration(name=symbol[0], explicit_value=symbol[1])
    else:
        raise EnumDeclarationError(f"Invalid symbol declaration: {symbol!r}")

    if not isinstance(decl.name, str) or not decl.name.isidentifier() or keyword.iskeyword(decl.name):
        raise EnumDeclarationError(f"Invalid symbol name: {decl.name!r}")
    if decl.name.startswith("_"):
        # Underscore names are reserved by IntEnum for its own attributes
        raise EnumDeclarationError(
            f"Symbol name {decl.name!r} cannot start with '_' (reserved for IntEnum internals)"
        )
    value = decl.explicit_value
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise EnumDeclarationError(
            f"Symbol '{decl.name}': explicit value must be an integer, got {value!r}"
        )
    return decl


def resolve_symbols(
    declarations: Iterable[SymbolDeclaration], underlying: PrimitiveType
) -> list[SymbolDefinition]:
    """Assign a value to every declared symbol.

    A symbol without an explicit value takes the previous symbol's value
    plus one; the first such symbol takes 0.
    """
    symbols: list[SymbolDefinition] = []
    seen: set[str] = set()
    auto_value = 0
    for decl in declarations:
        if decl.name in seen:
            raise EnumDeclarationError(f"Symbol '{decl.name}' is declared more than once")
        seen.add(decl.name)

        if decl.explicit_value is not None:
            value = decl.explicit_value
            auto_value = value + 1
        else:
            value = auto_value
            auto_value += 1

        if not underlying.contains(value):
            raise EnumDeclarationError(
                f"Symbol '{decl.name}' value {value} does not fit in {underlying.value} "
                f"[{underlying.min_value}, {underlying.max_value}]"
            )
        symbols.append(SymbolDefinition(
            name=decl.name, value=value, has_explicit_value=decl.explicit_value is not None
        ))
    return symbols


def declare_enum(
    name: str,
    underlying: PrimitiveType | str | None,
    symbols: Iterable[SymbolLike],
) -> EnumDefinition:
    """Build an EnumDefinition from its name, underlying type and symbols."""
    if isinstance(symbols, str):
        raise EnumDeclarationError(
            f"Enum '{name}': symbols must be a list of declarations, not the string {symbols!r}"
        )
    prim = resolve_underlying(underlying)
    declarations = [to_declaration(s) for s in symbols]
    if not declarations:
        raise EnumDeclarationError(f"Enum '{name}' must declare at least one symbol")
    return EnumDefinition(
        name=name, underlying=prim, symbols=resolve_symbols(declarations, prim)
    )
