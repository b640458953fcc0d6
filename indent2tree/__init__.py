"""Conversion between indented outlines and box-drawing trees."""

from .indent_parser import convert_indent_to_tree, parse_outline
from .models import IndentStyle, Line, Node, Outline
from .renderer import render_json
from .tree_parser import convert_tree_to_indent

__all__ = [
    "convert_indent_to_tree",
    "convert_tree_to_indent",
    "parse_outline",
    "render_json",
    "IndentStyle",
    "Line",
    "Node",
    "Outline",
]
