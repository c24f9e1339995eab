"""
olelo: an in-memory phrase dictionary backed by an AVL tree index.
"""

from olelo.records import Record, normalize_key
from olelo.indexing import BalancedIndex
from olelo.dictionary import Dictionary

__all__ = ["Record", "normalize_key", "BalancedIndex", "Dictionary"]
