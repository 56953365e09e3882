# rbtreelab

A red-black tree that holds ordered keys: any values that support `<` and `==`, such as integers. The leaves are a single shared black sentinel node. Duplicate keys are allowed. An equal key goes into the right subtree, so duplicates come out in insertion order when the tree is walked in order.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Usage

```python
from rbtreelab.rbtree import RBTree, Color

tree = RBTree()
for key in (10, 5, 8, 34, 67, 23):
    tree.insert(key)

tree.min().key        # 5
tree.max().key        # 67
8 in tree             # True
len(tree)             # 6
list(tree)            # [5, 8, 10, 23, 34, 67]
tree.to_list()        # all keys, in ascending order
tree.to_list(3)       # [5, 8, 10]  (at most n keys)

node = tree.find(23)  # a Node holding 23, or None
tree.erase(node)
tree.find(23)         # None

tree.root.color is Color.BLACK  # the root is always black
tree.is_nil(tree.root.parent)   # True: the root's parent is the sentinel

tree.clear()
tree.is_nil(tree.root)          # True
len(tree)                       # 0
```

## API

`rbtreelab.rbtree` has these names:

- `Color`: an enum with the members `RED` and `BLACK`.
- `Node`: a tree node with the attributes `key`, `color`, `parent`, `left` and `right`. Nodes are compared by identity.
- `RBTree`: the tree.
  - `insert(key)` adds a key and returns its new `Node`.
  - `find(key)` returns a node holding `key`, or `None`.
  - `min()` and `max()` return the node with the smallest or largest key, or `None` when the tree is empty.
  - `erase(node)` removes a node returned by this tree. It raises `ValueError` when given `None`, the sentinel, or a node that has already been erased.
  - `to_list(n=None)` returns the keys in ascending order, at most `n` of them when `n` is given. A negative `n` raises `ValueError`.
  - Iterating over the tree yields its keys in ascending order. `len(tree)` gives the number of keys, and `key in tree` tests for a key.
  - `clear()` removes every node.
  - `is_nil(node)` tells whether `node` is the tree's sentinel.
  - `root` is the root node. It is the sentinel when the tree is empty.

## What it does not do

The package is an in-memory data structure only. It has no command-line tool and it does not save trees to disk.

## Running the tests

```
pytest
```