"""Tests for resolving symbol declarations."""

from __future__ import annotations

import pytest

from typed_enums.declaration import (
    SymbolDeclaration,
    declare_enum,
    resolve_symbols,
    resolve_underlying,
    to_declaration,
)
from typed_enums.errors import EnumDeclarationError
from typed_enums.types import PrimitiveType


def _values(enum_def):
    return {s.name: s.value for s in enum_def.symbols}


class TestValueResolution:
    def test_implicit_values_are_positions(self):
        """Without explicit values, each symbol's value is its position."""
        enum_def = declare_enum("E", "int32", ["A", "B", "C", "D"])
        assert [s.value for s in enum_def.symbols] == [0, 1, 2, 3]
        assert not any(s.has_explicit_value for s in enum_def.symbols)

    def test_explicit_values_restart_counting(self):
        """An explicit value sets the base for the symbols after it."""
        enum_def = declare_enum("E", "int32", ["A", ("B", 5), "C", ("D", 99)])
        assert _values(enum_def) == {"A": 0, "B": 5, "C": 6, "D": 99}
        assert [s.has_explicit_value for s in enum_def.symbols] == [False, True, False, True]

    def test_first_explicit_value(self):
        """An explicit value on the first symbol shifts the whole sequence."""
        enum_def = declare_enum("E", "uint8", [("A", 10), "B", "C"])
        assert _values(enum_def) == {"A": 10, "B": 11, "C": 12}

    def test_non_monotonic_values(self):
        """Explicit values may go backwards."""
        enum_def = declare_enum("E", "int32", [("A", 10), ("B", 3), "C"])
        assert _values(enum_def) == {"A": 10, "B": 3, "C": 4}

    def test_colliding_values_are_kept(self):
        """Symbols resolving to the same value are all declared."""
        enum_def = declare_enum("E", "int32", ["A", "B", ("C", 0), "D"])
        assert _values(enum_def) == {"A": 0, "B": 1, "C": 0, "D": 1}
        assert enum_def.element_count == 4

    def test_negative_values(self):
        """Counting continues upward from a negative explicit value."""
        enum_def = declare_enum("E", "int8", [("A", -2), "B", "C"])
        assert _values(enum_def) == {"A": -2, "B": -1, "C": 0}

    def test_symbol_declaration_objects(self):
        """SymbolDeclaration instances are accepted as-is."""
        symbols = [SymbolDeclaration("A"), SymbolDeclaration("B", explicit_value=7)]
        assert _values(declare_enum("E", None, symbols)) == {"A": 0, "B": 7}

    def test_resolve_symbols_directly(self):
        """resolve_symbols works on declarations without declare_enum."""
        symbols = resolve_symbols(
            [SymbolDeclaration("X", 3), SymbolDeclaration("Y")], PrimitiveType.UINT8
        )
        assert [(s.name, s.value) for s in symbols] == [("X", 3), ("Y", 4)]


class TestUnderlyingType:
    def test_default(self):
        """No underlying type means int32."""
        assert resolve_underlying(None) is PrimitiveType.INT32

    def test_by_name(self):
        """Underlying types can be given by name."""
        assert resolve_underlying("uint8") is PrimitiveType.UINT8
        assert declare_enum("E", "int64", ["A"]).underlying is PrimitiveType.INT64

    def test_by_member(self):
        """PrimitiveType members pass through unchanged."""
        assert resolve_underlying(PrimitiveType.UINT32) is PrimitiveType.UINT32

    def test_unknown_name(self):
        """Non-integer or unknown type names are rejected."""
        with pytest.raises(EnumDeclarationError, match="Unknown underlying type"):
            resolve_underlying("float32")

    def test_value_out_of_range(self):
        """An implicit value past the type's maximum is rejected."""
        with pytest.raises(EnumDeclarationError, match="does not fit in uint8"):
            declare_enum("E", "uint8", [("A", 255), "B"])

    def test_negative_value_in_unsigned(self):
        """Negative values do not fit unsigned types."""
        with pytest.raises(EnumDeclarationError, match="does not fit"):
            declare_enum("E", "uint16", [("A", -1)])


class TestDeclarationErrors:
    def test_empty(self):
        """An enumeration needs at least one symbol."""
        with pytest.raises(EnumDeclarationError, match="at least one symbol"):
            declare_enum("E", None, [])

    def test_symbols_as_string(self):
        """A bare string is rejected instead of being split into characters."""
        with pytest.raises(EnumDeclarationError, match="symbols must be a list"):
            declare_enum("E", None, "Cat")

    def test_duplicate_name(self):
        """The same name cannot be declared twice."""
        with pytest.raises(EnumDeclarationError, match="declared more than once"):
            declare_enum("E", None, ["A", "B", "A"])

    @pytest.mark.parametrize("name", ["", "1abc", "has space", "class"])
    def test_invalid_names(self, name):
        """Names must be identifiers and not keywords."""
        with pytest.raises(EnumDeclarationError, match="Invalid symbol name"):
            to_declaration(name)

    def test_underscore_name(self):
        """Underscore-prefixed names are rejected with the reason."""
        with pytest.raises(EnumDeclarationError, match="reserved for IntEnum internals"):
            to_declaration("_Foo")

    def test_non_integer_value(self):
        """Explicit values must be integers."""
        with pytest.raises(EnumDeclarationError, match="must be an integer"):
            to_declaration(("A", "5"))

    def test_bool_value(self):
        """Booleans are not accepted as explicit values."""
        with pytest.raises(EnumDeclarationError, match="must be an integer"):
            to_declaration(("A", True))

    def test_malformed_entry(self):
        """Tuples must be exactly (name, value)."""
        with pytest.raises(EnumDeclarationError, match="Invalid symbol declaration"):
            to_declaration(("A", 1, 2))
