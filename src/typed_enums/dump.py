"""Tool for dumping enumeration metadata to the console."""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from typing import Any

from typed_enums.enum_class import EnumClass

logger = logging.getLogger(__name__)


def load_enum_class(target: str) -> type[EnumClass]:
    """Import an enumeration class given as 'package.module:ClassName'."""
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Expected 'module:ClassName', got '{target}'")

    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)

    if not (isinstance(obj, type) and issubclass(obj, EnumClass) and obj is not EnumClass):
        raise TypeError(f"'{target}' is not an enumeration class")
    return obj


def enum_to_dict(enum_cls: type[EnumClass], reverse: bool = False) -> dict[str, Any]:
    """Describe an enumeration's declaration and metadata as plain data."""
    definition = enum_cls.definition
    positions = list(range(enum_cls.items_count()))
    if reverse:
        positions.reverse()
    return {
        "name": definition.name,
        "underlying": definition.underlying.value,
        "element_count": enum_cls.element_count(),
        "items_count": enum_cls.items_count(),
        "symbols": [
            {"name": s.name, "value": s.value, "explicit": s.has_explicit_value}
            for s in definition.symbols
        ],
        "items": [
            {
                "index": i,
                "symbol": enum_cls.item(i).name,
                "value": int(enum_cls.item(i)),
                "string": enum_cls.metadata.name_at(i),
            }
            for i in positions
        ],
    }


def format_enum(enum_cls: type[EnumClass], reverse: bool = False) -> str:
    """Render an enumeration's declaration and metadata as text."""
    data = enum_to_dict(enum_cls, reverse)
    lines = [
        f"Enum: {data['name']}",
        f"Underlying: {data['underlying']}",
        "-" * 60,
        f"Symbols: {data['element_count']}",
    ]
    for s in data["symbols"]:
        marker = " (explicit)" if s["explicit"] else ""
        lines.append(f"  {s['name']} = {s['value']}{marker}")
    lines.append("")
    lines.append(f"Items: {data['items_count']}")
    for item in data["items"]:
        string = json.dumps(item["string"])
        lines.append(f"  [{item['index']}] {item['symbol']} = {item['value']}  {string}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Dump enumeration declarations and metadata to the console"
    )
    parser.add_argument(
        "target",
        help="Enumeration class to dump, as 'package.module:ClassName'",
    )
    parser.add_argument(
        "-r", "--reverse",
        action="store_true",
        help="List items in reverse iteration order",
    )
    parser.add_argument(
        "-j", "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "-l", "--lookup",
        metavar="TEXT",
        help="Resolve a display name to its symbol instead of dumping",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        enum_cls = load_enum_class(args.target)
    except (ImportError, AttributeError, TypeError, ValueError) as e:
        print(f"Error loading enumeration: {e}", file=sys.stderr)
        return 1
    logger.debug("Loaded %s", args.target)

    if args.lookup is not None:
        value = enum_cls.from_string(args.lookup)
        if value is None:
            print(f"Error: No item named {json.dumps(args.lookup)}", file=sys.stderr)
            return 1
        print(f"{value.name} = {int(value)}")
        return 0

    if args.json:
        print(json.dumps(enum_to_dict(enum_cls, args.reverse), indent=2))
    else:
        print(format_enum(enum_cls, args.reverse))
    return 0


if __name__ == "__main__":
    sys.exit(main())
