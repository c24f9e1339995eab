from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from olelo.records import Record, normalize_key


class BinaryTree(ABC):
    """Abstract base class representing a binary tree of records."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the total number of records in the tree."""
        pass

    @abstractmethod
    def root(self):
        """Return the root node of the tree (or None if tree is empty)."""
        pass

    def is_empty(self) -> bool:
        """Return True if the tree is empty."""
        return len(self) == 0

    def __iter__(self) -> Iterable[Record]:
        """Generate an iteration of the tree's records in inorder."""
        for node in self.inorder():
            yield node.record

    def inorder(self) -> Iterable["BalancedIndex._Node"]:
        """Generate an inorder iteration of the nodes in the tree."""
        if not self.is_empty():
            yield from self._subtree_inorder(self.root())

    def _subtree_inorder(self, node) -> Iterable["BalancedIndex._Node"]:
        """Generate an inorder iteration of the nodes of the subtree rooted at node."""
        if node.left is not None:
            yield from self._subtree_inorder(node.left)

        yield node

        if node.right is not None:
            yield from self._subtree_inorder(node.right)


class BalancedIndex(BinaryTree):
    """
    AVL tree of Records keyed by the NFC form of their primary text.

    Insert only. Duplicate keys are ignored (the first record inserted for a
    key is kept). Every query normalizes its key the same way insert does.
    Not safe for concurrent use; callers must serialize access.
    """

    class _Node:
        """One record plus its two children and the cached subtree height."""
        __slots__ = 'record', 'left', 'right', 'height'

        def __init__(self, record: Record):
            self.record = record
            self.left: Optional["BalancedIndex._Node"] = None
            self.right: Optional["BalancedIndex._Node"] = None
            self.height = 0

        @property
        def key(self) -> str:
            return self.record.key

    def __init__(self):
        self._root: Optional[BalancedIndex._Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def root(self) -> Optional["BalancedIndex._Node"]:
        return self._root

    def __contains__(self, key: str) -> bool:
        return self.member(key)

    # ------------------ Height / balance helpers ------------------
    def _get_height(self, node: Optional[_Node]) -> int:
        """Return the height of node (or 0 if None)."""
        if node is None:
            return 0
        return node.height

    def _update_height(self, node: _Node) -> None:
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _balance_factor(self, node: Optional[_Node]) -> int:
        if node is None:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def height(self) -> int:
        """Return the height of the whole tree (0 when empty)."""
        return self._get_height(self._root)

    # ------------------ Rotations ------------------
    def _rotate_right(self, z: _Node) -> _Node:
        y = z.left
        z.left = y.right
        y.right = z

        self._update_height(z)
        self._update_height(y)
        return y

    def _rotate_left(self, z: _Node) -> _Node:
        y = z.right
        z.right = y.left
        y.left = z

        self._update_height(z)
        self._update_height(y)
        return y

    def _rebalance(self, node: _Node) -> _Node:
        """Restore the AVL property at node and return the new local root."""
        balance = self._balance_factor(node)

        if balance > 1:
            if self._balance_factor(node.left) < 0:
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if balance < -1:
            if self._balance_factor(node.right) > 0:
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    # ------------------ Insertion ------------------
    def _insert(self, node: Optional[_Node], record: Record) -> _Node:
        if node is None:
            new_node = self._Node(record)
            self._update_height(new_node)
            self._size += 1
            return new_node

        if record.key < node.key:
            node.left = self._insert(node.left, record)
        elif record.key > node.key:
            node.right = self._insert(node.right, record)
        else:
            return node  # duplicate key: keep the existing record

        self._update_height(node)
        return self._rebalance(node)

    def insert(self, record: Record) -> None:
        """Insert record, ignoring it if a record with the same key is present."""
        self._root = self._insert(self._root, record)

    # ------------------ Lookup ------------------
    def _find_position(self, key: str) -> Optional[_Node]:
        """Return the node holding the (already normalized) key, or None."""
        walk = self._root
        while walk is not None:
            if key == walk.key:
                return walk
            elif key < walk.key:
                walk = walk.left
            else:
                walk = walk.right
        return None

    def member(self, key: str) -> bool:
        """Return True if a record with this key is in the tree."""
        return self._find_position(normalize_key(key)) is not None

    def get(self, key: str) -> Optional[Record]:
        """Return the record stored under key, or None."""
        node = self._find_position(normalize_key(key))
        if node is None:
            return None
        return node.record

    # ------------------ Substring search ------------------
    def _search(self, substring: str, field: str) -> List[Record]:
        needle = normalize_key(substring)
        return [
            record for record in self
            if needle in normalize_key(getattr(record, field))
        ]

    def search_primary_field(self, substring: str) -> List[Record]:
        """Return records whose primary text contains substring, in key order."""
        return self._search(substring, "text")

    def search_translated_field(self, substring: str) -> List[Record]:
        """Return records whose translation contains substring, in key order."""
        return self._search(substring, "translation")

    # ------------------ Min / max ------------------
    def _subtree_first_position(self, node: _Node) -> _Node:
        """Return the node of the first item in the subtree rooted at node."""
        walk = node
        while walk.left is not None:
            walk = walk.left
        return walk

    def _subtree_last_position(self, node: _Node) -> _Node:
        """Return the node of the last item in the subtree rooted at node."""
        walk = node
        while walk.right is not None:
            walk = walk.right
        return walk

    def min(self) -> Optional[Record]:
        if self._root is None:
            return None
        return self._subtree_first_position(self._root).record

    def max(self) -> Optional[Record]:
        if self._root is None:
            return None
        return self._subtree_last_position(self._root).record

    # ------------------ Predecessor / successor ------------------
    def predecessor(self, key: str) -> Optional[Record]:
        """
        Return the record immediately before key in key order.

        None if key is not in the tree or is the smallest key.
        """
        target = normalize_key(key)
        node = self._find_position(target)
        if node is None:
            return None
        if node.left is not None:
            return self._subtree_last_position(node.left).record

        # last ancestor at which the descent turned right
        candidate = None
        walk = self._root
        while walk is not node:
            if target > walk.key:
                candidate = walk
                walk = walk.right
            else:
                walk = walk.left
        return candidate.record if candidate is not None else None

    def successor(self, key: str) -> Optional[Record]:
        """
        Return the record immediately after key in key order.

        None if key is not in the tree or is the largest key.
        """
        target = normalize_key(key)
        node = self._find_position(target)
        if node is None:
            return None
        if node.right is not None:
            return self._subtree_first_position(node.right).record

        # last ancestor at which the descent turned left
        candidate = None
        walk = self._root
        while walk is not node:
            if target < walk.key:
                candidate = walk
                walk = walk.left
            else:
                walk = walk.right
        return candidate.record if candidate is not None else None
