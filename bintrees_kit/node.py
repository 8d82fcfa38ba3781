"""Binary tree nodes with parent links and the usual structural queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node records its parent but does not attach it as a child.
    Attach it by assigning to ``parent.left`` or ``parent.right``, or use
    :meth:`insert_left` and :meth:`insert_right`, which do both.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child becomes its left child."""
        new = Node(value, parent=self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child becomes its right child."""
        new = Node(value, parent=self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def delete(self) -> None:
        """Detach this node from its parent and dismantle its whole subtree."""
        if self.parent is not None:
            if self.parent.left is self:
                self.parent.left = None
            elif self.parent.right is self:
                self.parent.right = None
        for child in (self.right, self.left):
            if child is not None:
                child.delete()
        self.parent = None

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left subtree, right subtree."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left subtree, node, right subtree."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left subtree, right subtree, node."""
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.value

    def height(self) -> int:
        """Number of edges on the longest downward path; a leaf has height 0."""
        return self._levels() - 1

    def depth(self) -> int:
        """Number of edges from this node up to the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def size(self) -> int:
        """Number of nodes in the subtree rooted here."""
        return 1 + sum(child.size() for child in self._children())

    def leaves(self) -> int:
        """Number of leaves in the subtree rooted here."""
        if self.is_leaf():
            return 1
        return sum(child.leaves() for child in self._children())

    def internal_nodes(self) -> int:
        """Number of nodes in the subtree that have at least one child."""
        if self.is_leaf():
            return 0
        return 1 + sum(child.internal_nodes() for child in self._children())

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return _levels_of(self.left) - _levels_of(self.right)

    def is_full(self) -> bool:
        """True if every node in the subtree has either zero or two children."""
        if self.is_leaf():
            return True
        if self.left is None or self.right is None:
            return False
        return self.left.is_full() and self.right.is_full()

    def is_perfect(self) -> bool:
        """True if every internal node has two children and all leaves share a level."""
        if self.is_leaf():
            return True
        if _levels_of(self.left) != _levels_of(self.right):
            return False
        if self.left is None or self.right is None:
            return False
        return self.left.is_perfect() and self.right.is_perfect()

    def sibling(self) -> Optional[Node]:
        """The other child of this node's parent, or None."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[Node]:
        """The sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def _levels(self) -> int:
        return 1 + max((child._levels() for child in self._children()), default=0)


def _levels_of(node: Optional[Node]) -> int:
    return 0 if node is None else node._levels()