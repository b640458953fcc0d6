"""
Tests for the tree -> indent conversion and round trips through both directions.
"""

import pytest

from indent2tree.indent_parser import convert_indent_to_tree
from indent2tree.tree_parser import (
    convert_tree_to_indent,
    parse_tree_line,
    reindent_line,
)


class TestParseTreeLine:
    """Test suite for connector prefix parsing."""

    @pytest.mark.parametrize("line,expected", [
        ("├── a", (1, "a")),
        ("└── a", (1, "a")),
        ("│   ├── a", (2, "a")),
        ("    └── a", (2, "a")),
        ("│       │   └── a b c", (4, "a b c")),
    ])
    def test_depth_from_prefix_units(self, line, expected):
        """Test that each 4-character prefix unit adds one level."""
        assert parse_tree_line(line) == expected

    @pytest.mark.parametrize("line", [
        " ├── a",
        "│  ├── a",
        "A ├── B",
        "plain",
    ])
    def test_malformed_lines(self, line):
        """Test that lines not starting with prefix units and a connector are rejected."""
        assert parse_tree_line(line) is None


class TestReindentLine:
    """Test suite for single-line conversion rules."""

    def test_whitespace_line_becomes_empty(self):
        """Test that all-whitespace lines map to empty lines."""
        assert reindent_line("   \t ") == ""

    def test_root_line_unchanged(self):
        """Test that lines without connectors pass through untouched."""
        assert reindent_line("  plain text") == "  plain text"

    def test_malformed_connector_line_unchanged(self):
        """Test that a connector not at a unit boundary passes through."""
        assert reindent_line("  ├── X") == "  ├── X"
        assert reindent_line("A ├── B") == "A ├── B"


class TestConvertTreeToIndent:
    """Test suite for the full tree -> indent conversion."""

    def test_nested_chain(self):
        """Test a chain of last children."""
        assert convert_tree_to_indent("A\n└── B\n    └── C") == "A\n  B\n    C"

    def test_mixed_prefixes(self):
        """Test siblings under a last child."""
        text = "A\n├── B\n└── C\n    ├── D\n    └── E"
        assert convert_tree_to_indent(text) == "A\n  B\n  C\n    D\n    E"

    def test_blank_lines_preserved(self):
        """Test that blank lines are kept in position."""
        assert convert_tree_to_indent("A\n   \n└── B") == "A\n\n  B"

    def test_empty_input(self):
        """Test that empty input yields empty output."""
        assert convert_tree_to_indent("") == ""


class TestRoundTrip:
    """Test suite for indent -> tree -> indent."""

    def test_two_space_outline_round_trips(self):
        """Test that a canonical 2-space outline survives a round trip."""
        text = "A\n  B\n    C\n  D\nE\n  F"
        assert convert_tree_to_indent(convert_indent_to_tree(text)) == text

    def test_round_trip_keeps_gaps_between_roots(self):
        """Test that blank gaps between top-level groups survive."""
        text = "A\n  B\n\nC\n  D"
        assert convert_tree_to_indent(convert_indent_to_tree(text)) == text

    def test_tabs_become_two_spaces(self):
        """Test that tab indentation comes back as 2-space indentation."""
        tree = convert_indent_to_tree("A\n\tB\n\t\tC")
        assert tree == "A\n└── B\n    └── C"
        assert convert_tree_to_indent(tree) == "A\n  B\n    C"

    def test_wide_indent_normalizes(self):
        """Test that 4-space units come back as 2-space units."""
        tree = convert_indent_to_tree("A\n    B\n        C")
        assert convert_tree_to_indent(tree) == "A\n  B\n    C"
