"""Parsing of box-drawing tree text for the tree -> indent conversion."""

from __future__ import annotations

import re
from typing import Optional

from .models import BLANK_PAD, BRANCH, INDENT_UNIT, LAST_BRANCH, split_lines


BRANCH_PATTERN = re.compile(r"((?:│   |    )*)(?:├── |└── )(.*)")


def parse_tree_line(line: str) -> Optional[tuple[int, str]]:
    """Return ``(depth, content)`` for a connector line, or None if malformed.

    The prefix before the connector must consist solely of 4-character
    ``"│   "`` / ``"    "`` units; each unit adds one level.
    """
    match = BRANCH_PATTERN.match(line)
    if not match:
        return None
    prefix, content = match.groups()
    return len(prefix) // len(BLANK_PAD) + 1, content


def reindent_line(line: str) -> str:
    """Convert a single tree-glyph line to its indented form."""
    if line.strip() == "":
        return ""
    if BRANCH not in line and LAST_BRANCH not in line:
        return line
    parsed = parse_tree_line(line)
    if parsed is None:
        return line
    depth, content = parsed
    return INDENT_UNIT * depth + content


def convert_tree_to_indent(text: str) -> str:
    """Convert box-drawing tree text into 2-space indented text."""
    return "\n".join(reindent_line(line.raw) for line in split_lines(text))
