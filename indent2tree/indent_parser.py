"""Indentation parsing and forest building for the indent -> tree conversion."""

from __future__ import annotations

from .models import (
    BLANK_LEVEL,
    SPACE_WIDTH,
    IndentStyle,
    Line,
    Node,
    Outline,
    split_lines,
)
from .renderer import render_forest


def detect_indent_style(lines: list[Line]) -> IndentStyle:
    """Return the style of the first indented line, defaulting to SPACE."""
    for line in lines:
        if line.raw.startswith("\t"):
            return IndentStyle.TAB
        if line.raw.startswith("  "):
            return IndentStyle.SPACE
    return IndentStyle.SPACE


def compute_level(raw: str, style: IndentStyle) -> int:
    """Compute nesting depth from the leading indentation of a line."""
    if style is IndentStyle.TAB:
        return len(raw) - len(raw.lstrip("\t"))
    return (len(raw) - len(raw.lstrip(" "))) // SPACE_WIDTH


def tokenize(lines: list[Line], style: IndentStyle) -> list[Node]:
    """Turn every line into a leveled node, blank lines included."""
    nodes = []
    for line in lines:
        if line.is_blank:
            nodes.append(Node(level=BLANK_LEVEL, text="", index=line.index))
            continue
        nodes.append(
            Node(
                level=compute_level(line.raw, style),
                text=line.raw.strip(),
                index=line.index,
            )
        )
    return nodes


def build_forest(nodes: list[Node]) -> list[Node]:
    """Attach nodes to their parents with a depth stack and return the roots.

    A node closes every open entry at its own level or deeper, so equal
    levels become siblings and only strictly deeper levels nest.
    """
    roots: list[Node] = []
    stack: list[Node] = []
    for node in nodes:
        if node.is_blank:
            continue
        while stack and stack[-1].level >= node.level:
            stack.pop()
        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)
    return roots


def parse_outline(text: str) -> Outline:
    """Detect the indent style, tokenize and build the forest."""
    lines = split_lines(text)
    style = detect_indent_style(lines)
    nodes = tokenize(lines, style)
    return Outline(style=style, nodes=nodes, roots=build_forest(nodes))


def convert_indent_to_tree(text: str) -> str:
    """Convert indented text into box-drawing tree text."""
    if not text:
        return ""
    outline = parse_outline(text)
    return "\n".join(render_forest(outline.roots))
