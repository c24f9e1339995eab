"""
Query engine.

Use Dictionary for storage/indexing. This module orchestrates
compound queries (searches across both fields, neighbour lookups)
on top of the core dictionary.
"""

from typing import List, Optional, Tuple

from olelo.records import Record


# ------------------ Query Engine ------------------
class QueryEngine:
    def __init__(self, dictionary):
        self.dictionary = dictionary

    def by_text(self, substring: str) -> List[Record]:
        return self.dictionary.search(substring, field="primary")

    def by_translation(self, substring: str) -> List[Record]:
        return self.dictionary.search(substring, field="translated")

    def anywhere(self, substring: str) -> List[Record]:
        """Records matching in either field, in key order, each at most once."""
        matches = set(self.by_text(substring))
        matches.update(self.by_translation(substring))
        return sorted(matches)

    def neighbours(self, text: str) -> Tuple[Optional[Record], Optional[Record]]:
        return self.dictionary.previous(text), self.dictionary.next(text)
