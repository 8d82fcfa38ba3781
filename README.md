# bintrees_kit

A small library of linked binary tree nodes. Each `Node` holds an integer
value and links to its parent and two children. The library also measures
trees, checks their shape, walks them and draws them as text.

## Installing

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintrees_kit.node import Node

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)   # 128 goes between the root and 402
```

`insert_left` and `insert_right` return the new node. When the slot is
already taken, the old child moves down one level and hangs off the new
node on the same side.

`Node(value, parent)` records the parent but does not attach the node as a
child; attach it yourself by assigning to `parent.left` or `parent.right`.

## Measuring and checking

| Method             | Result                                                |
|--------------------|-------------------------------------------------------|
| `height()`         | number of edges on the longest downward path          |
| `depth()`          | number of edges up to the root                        |
| `size()`           | number of nodes in the subtree                        |
| `leaves()`         | number of nodes that have no children                 |
| `internal_nodes()` | number of nodes that have at least one child          |
| `balance()`        | levels on the left side minus levels on the right     |
| `is_leaf()`        | whether the node has no children                      |
| `is_root()`        | whether the node has no parent                        |
| `is_full()`        | whether every node has either 0 or 2 children         |
| `is_perfect()`     | whether the tree is full and all its leaves are level |
| `sibling()`        | the parent's other child, or `None`                   |
| `uncle()`          | the parent's sibling, or `None`                       |

`preorder()`, `inorder()` and `postorder()` are generators that yield the
values in each order. `delete()` detaches the node from its parent and
unlinks every node in its subtree.

## Printing

```python
from bintrees_kit.printer import render, print_tree

print(render(root), end="")
print_tree(root)            # standard output
print_tree(root, some_file) # any text stream
```

Each value is drawn as `(%03d)`, cut to five characters. A left child sits
in its parent's column and a right child six columns further right. The
output has one row for each level of the tree followed by one blank row,
and every row is padded with spaces to 254 columns. `render(None)` returns
an empty string. A tree too wide for 254 columns raises `ValueError`.

## Demonstrations

The package ships with numbered demonstrations, 0 to 18. Each one builds a
tree, prints it, and shows one of the operations above. Name one or more
numbers on the command line:

```
bintrees-demo 14
bintrees-demo 6 7 8
```

From Python, `run_demo(number, out)` in `bintrees_kit.demos` writes the
same output to any text stream (standard output by default); an unknown
number raises `ValueError`.