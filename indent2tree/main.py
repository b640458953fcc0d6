"""CLI entry point for converting between indented and tree-glyph outlines."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .indent_parser import convert_indent_to_tree, parse_outline
from .renderer import render_json
from .tree_parser import convert_tree_to_indent


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="indent2tree",
        description="Convert an indented outline to a box-drawing tree, or back.",
    )
    parser.add_argument(
        "command",
        choices=["convert", "convert-back"],
        help="convert: indentation -> tree; convert-back: tree -> indentation",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Input file (default: read stdin)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format for convert (default: text)",
    )
    parser.add_argument(
        "--in-place", "-i",
        action="store_true",
        help="Write the result back to the input file",
    )
    return parser.parse_args(argv)


def read_input(path: str) -> Optional[str]:
    """Read input text from a file or stdin. Returns None if unreadable."""
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read '{path}': {e}", file=sys.stderr)
        return None


def convert(command: str, text: str, format_type: str = "text") -> str:
    """Run the requested conversion, keeping a single trailing newline intact."""
    trailing = "\n" if text.endswith("\n") else ""
    body = text[:-1] if trailing else text

    if format_type == "json":
        return render_json(parse_outline(body)) + "\n"
    if command == "convert":
        return convert_indent_to_tree(body) + trailing
    return convert_tree_to_indent(body) + trailing


def main(argv: Optional[List[str]] = None) -> None:
    """Read the outline, convert it, and write the result."""
    args = parse_args(argv)

    if args.format == "json" and args.command != "convert":
        print("Error: --format json is only supported for convert", file=sys.stderr)
        sys.exit(1)

    if args.in_place and args.path == "-":
        print("Error: --in-place requires an input file", file=sys.stderr)
        sys.exit(1)

    if args.path != "-" and not Path(args.path).exists():
        print(f"Error: path '{args.path}' does not exist", file=sys.stderr)
        sys.exit(1)

    text = read_input(args.path)
    if text is None:
        sys.exit(1)
    if not text:
        print("Error: nothing to convert", file=sys.stderr)
        sys.exit(1)

    result = convert(args.command, text, args.format)

    if args.in_place:
        with open(args.path, "w", encoding="utf-8", newline="") as f:
            f.write(result)
    else:
        sys.stdout.write(result)
        if not result.endswith("\n"):
            sys.stdout.write("\n")


if __name__ == "__main__":
    main()
