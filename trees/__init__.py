"""
AlgoLab Trees Module
====================
In-memory balanced search trees.

Components:
  - btree: B-Tree with insert, search, ordered traversal, range scan
"""

from trees.btree import BTreeNode, OrderedTree, MIN_DEGREE

__all__ = ["BTreeNode", "OrderedTree", "MIN_DEGREE"]
