"""Plain-text rendering of binary trees, one row per level."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from bintrees_kit.node import Node

LINE_WIDTH = 254
LABEL_WIDTH = 5
_RIGHT_SHIFT = LABEL_WIDTH + 1


def _label(value: int) -> str:
    return f"({value:03d})"[:LABEL_WIDTH]


def _draw(node: Optional[Node], offset: int, depth: int, rows: List[List[str]]) -> None:
    if node is None:
        return
    _draw(node.left, offset, depth + 1, rows)
    end = offset + LABEL_WIDTH
    if end > LINE_WIDTH:
        raise ValueError(
            f"node {node.value} at column {offset} does not fit in {LINE_WIDTH} columns"
        )
    rows[depth][offset:end] = _label(node.value)
    _draw(node.right, offset + _RIGHT_SHIFT, depth + 1, rows)


def render(tree: Optional[Node]) -> str:
    """Render a tree as fixed-width text rows, one per level plus a blank row.

    Each node is shown as ``(nnn)``. A left child sits under its parent's
    column and a right child six columns further right. Returns an empty
    string for an empty tree.
    """
    if tree is None:
        return ""
    rows = [[" "] * LINE_WIDTH for _ in range(tree.height() + 2)]
    _draw(tree, 0, 0, rows)
    return "".join("".join(row) + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendering of ``tree`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))