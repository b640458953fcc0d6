"""Tree-glyph and JSON rendering for parsed outlines."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from .models import BLANK_PAD, BRANCH, LAST_BRANCH, PIPE_PAD, Node, Outline


@dataclass
class RenderState:
    """Output lines plus the highest source index already accounted for."""

    lines: list[str] = field(default_factory=list)
    watermark: int = -1


def render_forest(roots: list[Node]) -> list[str]:
    """Render every root in order, keeping blank gaps between top-level groups."""
    state = RenderState()
    for root in roots:
        render_root(root, state)
    return state.lines


def render_root(root: Node, state: RenderState) -> None:
    """Render one root and its subtree into ``state``.

    Source lines between the watermark and the root are blank by
    construction and are emitted as empty lines. Blank lines that fall
    inside the subtree's own index range are not reproduced.
    """
    state.lines.extend("" for _ in range(state.watermark + 1, root.index))
    state.lines.append(root.text)
    for i, child in enumerate(root.children):
        state.lines.extend(
            render_subtree(child, "", i == len(root.children) - 1)
        )
    state.watermark = max_index(root)


def render_subtree(node: Node, prefix: str, is_last: bool) -> list[str]:
    """Render a non-root subtree as tree-glyph lines, in pre-order.

    Walks an explicit stack of ``(node, prefix, is_last)`` entries so
    nesting depth is not bounded by the interpreter's recursion limit.
    """
    lines = []
    stack = [(node, prefix, is_last)]
    while stack:
        current, current_prefix, current_is_last = stack.pop()
        connector = LAST_BRANCH if current_is_last else BRANCH
        lines.append(current_prefix + connector + current.text)
        child_prefix = current_prefix + (BLANK_PAD if current_is_last else PIPE_PAD)
        last = len(current.children) - 1
        # Reversed so the first child is popped first
        for i in range(last, -1, -1):
            stack.append((current.children[i], child_prefix, i == last))
    return lines


def _walk(node: Node):
    """Yield ``(node, depth)`` for every node in the subtree, depth 0 at ``node``."""
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        yield current, depth
        stack.extend((child, depth + 1) for child in current.children)


def max_index(node: Node) -> int:
    """Highest source line index in the subtree rooted at ``node``."""
    return max(current.index for current, _ in _walk(node))


def _count_nodes(node: Node) -> int:
    """Number of nodes in the subtree, ``node`` included."""
    return sum(1 for _ in _walk(node))


def _max_depth(node: Node) -> int:
    """Longest parent-to-descendant edge count below ``node``."""
    return max(depth for _, depth in _walk(node))


def render_json(outline: Outline) -> str:
    """Render a parsed outline as a JSON string."""
    output = {
        "indent_style": outline.style.value,
        "root_count": len(outline.roots),
        "node_count": sum(_count_nodes(root) for root in outline.roots),
        "max_depth": max((_max_depth(root) for root in outline.roots), default=0),
        "roots": [_node_to_dict(root) for root in outline.roots],
    }
    return json.dumps(output, indent=2, ensure_ascii=False)


def _node_to_dict(node: Node) -> dict:
    """Convert a Node and its descendants to a JSON-serializable dictionary."""
    root = {}
    stack = [(node, root)]
    while stack:
        current, target = stack.pop()
        target.update(
            index=current.index,
            level=current.level,
            text=current.text,
            children=[{} for _ in current.children],
        )
        stack.extend(zip(current.children, target["children"]))
    return root
