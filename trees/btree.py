"""
AlgoLab B-Tree
==============
In-memory B-Tree keyed by any totally ordered type, supporting insert,
exact search, ordered traversal and range scan.

Architecture:
  - Minimum degree t (t >= 2) fixed at construction.
  - Every node holds at most 2t-1 keys; every non-root node at least t-1.
  - Internal node with N keys has exactly N+1 children.
    Invariant: keys in child i are <= keys[i] <= keys in child i+1.

Insertion splits any full child BEFORE descending into it, so the
recursion never has to propagate a split back up. The tree only grows
in height when the root itself splits.

Duplicates: permitted. An equal key is placed after existing equal keys.
Delete: not implemented.
Concurrency: single-writer, no locking.
"""

import logging
from typing import Any, Iterator, List, Optional, Tuple

from common.errors import InvalidParameterError

logger = logging.getLogger(__name__)

MIN_DEGREE = 2


# ─── Node ───────────────────────────────────────────────────────────────────

class BTreeNode:
    """
    One B-Tree node (leaf or internal).
    Children are owned exclusively by their parent; there are no parent links.
    """
    __slots__ = ('is_leaf', 'keys', 'children')

    def __init__(self, is_leaf: bool):
        self.is_leaf = is_leaf
        self.keys: List[Any] = []
        self.children: List['BTreeNode'] = []   # internal only

    @property
    def key_count(self) -> int:
        return len(self.keys)

    def is_full(self, degree: int) -> bool:
        return len(self.keys) == 2 * degree - 1

    def find_key_pos(self, key: Any) -> int:
        """Find position of first key >= key."""
        i = 0
        while i < len(self.keys) and key > self.keys[i]:
            i += 1
        return i

    def find_insert_pos(self, key: Any) -> int:
        """Find position after the last key <= key (duplicates go right)."""
        i = len(self.keys)
        while i > 0 and key < self.keys[i - 1]:
            i -= 1
        return i

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf else "internal"
        return f"BTreeNode({kind}, keys={self.keys})"


# ─── B-Tree ────────────────────────────────────────────────────────────────

class OrderedTree:
    """
    In-memory B-Tree.

    Usage:
        tree = OrderedTree(3)
        for k in [10, 20, 5, 6]:
            tree.insert(k)
        tree.search(6)          # -> (node, index)
        list(tree.traverse())   # -> [5, 6, 10, 20]
    """

    def __init__(self, degree: int):
        if isinstance(degree, bool) or not isinstance(degree, int) or degree < MIN_DEGREE:
            raise InvalidParameterError(
                "degree", degree, f"minimum degree must be an integer >= {MIN_DEGREE}")
        self._degree = degree
        self._root: Optional[BTreeNode] = None
        self._entry_count: int = 0
        self._node_count: int = 0
        self._tree_height: int = 0

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def root(self) -> Optional[BTreeNode]:
        return self._root

    @property
    def entry_count(self) -> int:
        return self._entry_count

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def tree_height(self) -> int:
        return self._tree_height

    @property
    def max_keys(self) -> int:
        return 2 * self._degree - 1

    @property
    def min_keys(self) -> int:
        return self._degree - 1

    def __len__(self) -> int:
        return self._entry_count

    def __iter__(self) -> Iterator[Any]:
        return self.traverse()

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __repr__(self) -> str:
        return (f"OrderedTree(degree={self._degree}, entries={self._entry_count}, "
                f"height={self._tree_height})")

    # ─── Search ─────────────────────────────────────────────────────

    def search(self, key: Any) -> Optional[Tuple[BTreeNode, int]]:
        """
        Exact-match search. Returns (node, index) of a matching key,
        or None if the key is absent (including when the tree is empty).
        """
        node = self._root
        while node is not None:
            i = node.find_key_pos(key)
            if i < len(node.keys) and node.keys[i] == key:
                return node, i
            if node.is_leaf:
                return None
            node = node.children[i]
        return None

    def contains(self, key: Any) -> bool:
        return self.search(key) is not None

    # ─── Traversal ──────────────────────────────────────────────────

    def traverse(self) -> Iterator[Any]:
        """Yield every key in ascending order. Each call starts a fresh walk."""
        if self._root is None:
            return
        yield from self._walk(self._root)

    def _walk(self, node: BTreeNode) -> Iterator[Any]:
        for i, key in enumerate(node.keys):
            if not node.is_leaf:
                yield from self._walk(node.children[i])
            yield key
        if not node.is_leaf:
            yield from self._walk(node.children[-1])

    def range_scan(self, low: Any = None, high: Any = None,
                   low_inclusive: bool = True,
                   high_inclusive: bool = True) -> Iterator[Any]:
        """
        Yield keys within [low, high] in ascending order.

        - low=None means unbounded below.
        - high=None means unbounded above.
        Subtrees lying entirely outside the range are not visited.
        """
        if self._root is None:
            return
        yield from self._scan(self._root, low, high, low_inclusive, high_inclusive)

    def _scan(self, node: BTreeNode, low: Any, high: Any,
              low_inclusive: bool, high_inclusive: bool) -> Iterator[Any]:
        for i, key in enumerate(node.keys):
            # Child i only holds keys <= key; skip it when key is below low
            if not node.is_leaf and (low is None or key >= low):
                yield from self._scan(node.children[i], low, high,
                                      low_inclusive, high_inclusive)

            if high is not None and (key > high or (key == high and not high_inclusive)):
                return

            if low is None or key > low or (key == low and low_inclusive):
                yield key

        if not node.is_leaf:
            yield from self._scan(node.children[-1], low, high,
                                  low_inclusive, high_inclusive)

    # ─── Insert ─────────────────────────────────────────────────────

    def insert(self, key: Any) -> None:
        """
        Insert a key. Full nodes met on the way down are split first,
        so the target leaf always has room.
        """
        if self._root is None:
            self._root = self._new_node(is_leaf=True)
            self._root.keys.append(key)
            self._tree_height = 1
            self._entry_count = 1
            return

        if self._root.is_full(self._degree):
            new_root = self._new_node(is_leaf=False)
            new_root.children.append(self._root)
            self._split_child(new_root, 0)
            self._root = new_root
            self._tree_height += 1
            logger.debug("Root split: height=%d, root key=%r",
                         self._tree_height, new_root.keys[0])

        self._insert_non_full(self._root, key)
        self._entry_count += 1

    def _insert_non_full(self, node: BTreeNode, key: Any) -> None:
        """Insert into a node known to have fewer than 2t-1 keys."""
        while not node.is_leaf:
            i = node.find_insert_pos(key)
            if node.children[i].is_full(self._degree):
                self._split_child(node, i)
                if key > node.keys[i]:
                    i += 1
            node = node.children[i]

        node.keys.insert(node.find_insert_pos(key), key)

    # ─── Split ──────────────────────────────────────────────────────

    def _split_child(self, parent: BTreeNode, index: int) -> None:
        """
        Split the full child at parent.children[index] around its median.
        Median key is PUSHED UP into parent (removed from the child).

        Before split (t=3): child keys=[k0,k1,k2,k3,k4], children=[c0..c5]
        Median=k2
        Left:  keys=[k0,k1],    children=[c0,c1,c2]
        Right: keys=[k3,k4],    children=[c3,c4,c5]
        """
        t = self._degree
        child = parent.children[index]
        sibling = self._new_node(is_leaf=child.is_leaf)

        median = child.keys[t - 1]
        sibling.keys = child.keys[t:]
        if not child.is_leaf:
            sibling.children = child.children[t:]
            child.children = child.children[:t]
        child.keys = child.keys[:t - 1]

        parent.keys.insert(index, median)
        parent.children.insert(index + 1, sibling)

    def _new_node(self, is_leaf: bool) -> BTreeNode:
        self._node_count += 1
        return BTreeNode(is_leaf)

    # ─── Debug / Verification ───────────────────────────────────────

    def verify_structure(self) -> List[str]:
        """
        Verify structural integrity.
        Returns list of issues found (empty = healthy).
        """
        issues: List[str] = []
        if self._root is None:
            if self._entry_count:
                issues.append("Empty root but entry_count is non-zero")
            return issues

        leaf_depths: List[int] = []
        total = self._verify_node(self._root, None, None, issues, 1, leaf_depths)

        if len(set(leaf_depths)) > 1:
            issues.append(f"Leaves at unequal depths: {sorted(set(leaf_depths))}")
        elif leaf_depths and leaf_depths[0] != self._tree_height:
            issues.append(
                f"Leaf depth {leaf_depths[0]} does not match height {self._tree_height}")
        if total != self._entry_count:
            issues.append(f"Counted {total} keys, expected {self._entry_count}")
        return issues

    def _verify_node(self, node: BTreeNode, min_key: Any, max_key: Any,
                     issues: List[str], depth: int,
                     leaf_depths: List[int]) -> int:
        """Recursively verify a node and its children. Returns keys counted."""
        label = f"Node at depth {depth} {node.keys}"

        if len(node.keys) > self.max_keys:
            issues.append(f"{label}: more than {self.max_keys} keys")
        if node is not self._root and len(node.keys) < self.min_keys:
            issues.append(f"{label}: fewer than {self.min_keys} keys")

        # Keys must be sorted
        for i in range(1, len(node.keys)):
            if node.keys[i] < node.keys[i - 1]:
                issues.append(f"{label}: keys not sorted at position {i}")

        # Keys must be within parent separators
        for k in node.keys:
            if min_key is not None and k < min_key:
                issues.append(f"{label}: key below parent separator")
            if max_key is not None and k > max_key:
                issues.append(f"{label}: key above parent separator")

        if node.is_leaf:
            if node.children:
                issues.append(f"{label}: leaf has children")
            leaf_depths.append(depth)
            return len(node.keys)

        if len(node.children) != len(node.keys) + 1:
            issues.append(f"{label}: children count mismatch")
            return len(node.keys)

        total = len(node.keys)
        for i, child in enumerate(node.children):
            lo = node.keys[i - 1] if i > 0 else min_key
            hi = node.keys[i] if i < len(node.keys) else max_key
            total += self._verify_node(child, lo, hi, issues, depth + 1, leaf_depths)
        return total
