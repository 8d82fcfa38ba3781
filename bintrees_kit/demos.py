"""Small demonstration programs exercising the tree operations."""

from __future__ import annotations

import argparse
import sys
from functools import partial
from typing import Callable, Dict, List, Optional, TextIO

from bintrees_kit.node import Node
from bintrees_kit.printer import print_tree

_NONE_TEXT = "(nil)"


def _base_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    return root


def _query_tree() -> Node:
    root = _base_tree()
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _full_tree() -> Node:
    root = _base_tree()
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _family_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def _demo_node(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    print_tree(root, out)


def _demo_insert_left(out: TextIO) -> None:
    root = _base_tree()
    print_tree(root, out)
    out.write("\n")
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


def _demo_insert_right(out: TextIO) -> None:
    root = _base_tree()
    print_tree(root, out)
    out.write("\n")
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


def _demo_delete(out: TextIO) -> None:
    root = _query_tree()
    print_tree(root, out)
    root.delete()


def _demo_flag(label: str, check: Callable[[Node], bool], out: TextIO) -> None:
    root = _query_tree()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        out.write(f"Is {node.value} a {label}: {int(check(node))}\n")


def _demo_traversal(order: Callable[[Node], object], out: TextIO) -> None:
    root = _full_tree()
    print_tree(root, out)
    for value in order(root):
        out.write(f"{value}\n")


def _demo_measure(label: str, measure: Callable[[Node], int], out: TextIO) -> None:
    root = _query_tree()
    print_tree(root, out)
    for node in (root, root.right, root.left.right):
        out.write(f"{label} {node.value}: {measure(node)}\n")


def _demo_balance(out: TextIO) -> None:
    root = _query_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        out.write(f"Balance of {node.value}: {node.balance():+d}\n")


def _demo_is_full(out: TextIO) -> None:
    root = _query_tree()
    root.left.left = Node(10, root.left)
    print_tree(root, out)
    for node in (root, root.left, root.right):
        out.write(f"Is {node.value} full: {int(node.is_full())}\n")


def _demo_is_perfect(out: TextIO) -> None:
    root = _query_tree()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)
    print_tree(root, out)
    out.write(f"Perfect: {int(root.is_perfect())}\n\n")

    root.right.right.left = Node(10, root.right.right)
    print_tree(root, out)
    out.write(f"Perfect: {int(root.is_perfect())}\n\n")

    root.right.right.right = Node(10, root.right.right)
    print_tree(root, out)
    out.write(f"Perfect: {int(root.is_perfect())}\n")


def _describe(node: Optional[Node]) -> str:
    return _NONE_TEXT if node is None else str(node.value)


def _demo_sibling(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        out.write(f"Sibling of {node.value}: {_describe(node.sibling())}\n")


def _demo_uncle(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        out.write(f"Uncle of {node.value}: {_describe(node.uncle())}\n")


_DEMOS: Dict[int, Callable[[TextIO], None]] = {
    0: _demo_node,
    1: _demo_insert_left,
    2: _demo_insert_right,
    3: _demo_delete,
    4: partial(_demo_flag, "leaf", Node.is_leaf),
    5: partial(_demo_flag, "root", Node.is_root),
    6: partial(_demo_traversal, Node.preorder),
    7: partial(_demo_traversal, Node.inorder),
    8: partial(_demo_traversal, Node.postorder),
    9: partial(_demo_measure, "Height from", Node.height),
    10: partial(_demo_measure, "Depth of", Node.depth),
    11: partial(_demo_measure, "Size of", Node.size),
    12: partial(_demo_measure, "Leaves in", Node.leaves),
    13: partial(_demo_measure, "Nodes in", Node.internal_nodes),
    14: _demo_balance,
    15: _demo_is_full,
    16: _demo_is_perfect,
    17: _demo_sibling,
    18: _demo_uncle,
}


def run_demo(number: int, out: Optional[TextIO] = None) -> None:
    """Run demonstration ``number`` (0 to 18), writing its output to ``out``."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number!r}") from None
    demo(out if out is not None else sys.stdout)


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point: run the demos named on the command line."""
    parser = argparse.ArgumentParser(description="Run binary tree demonstrations.")
    parser.add_argument(
        "numbers",
        nargs="+",
        type=int,
        choices=sorted(_DEMOS),
        metavar="N",
        help="demo number, 0 to 18",
    )
    args = parser.parse_args(argv)
    for number in args.numbers:
        run_demo(number, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())