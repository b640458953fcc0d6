"""Line and node model shared by both outline conversions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_PAD = "│   "
BLANK_PAD = "    "

INDENT_UNIT = "  "
SPACE_WIDTH = 2

# Level sentinel for blank source lines
BLANK_LEVEL = -1


class IndentStyle(Enum):
    """How nesting depth is encoded in the indentation form."""
    TAB = "tab"
    SPACE = "space"


@dataclass(frozen=True)
class Line:
    """A raw source line and its zero-based position in the input."""

    index: int
    raw: str

    @property
    def is_blank(self) -> bool:
        return self.raw.strip() == ""


@dataclass
class Node:
    """An outline entry; blank lines carry ``level == BLANK_LEVEL``."""

    level: int
    text: str
    index: int
    children: list[Node] = field(default_factory=list)

    @property
    def is_blank(self) -> bool:
        return self.level == BLANK_LEVEL


@dataclass
class Outline:
    """A parsed indentation outline: detected style, every line, and the roots."""

    style: IndentStyle
    nodes: list[Node] = field(default_factory=list)
    roots: list[Node] = field(default_factory=list)


def split_lines(text: str) -> list[Line]:
    """Split text on newlines into indexed lines."""
    return [Line(index, raw) for index, raw in enumerate(text.split("\n"))]
