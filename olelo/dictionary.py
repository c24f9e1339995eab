import csv
import logging
import os
from typing import Iterable, List, Optional

from olelo.indexing import BalancedIndex
from olelo.records import Record

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("text", "translation")
SEARCH_FIELDS = ("primary", "translated")


class Dictionary:
    # ------------------ Initialization ------------------

    def __init__(self):
        """Initializes an empty dictionary over a fresh AVL index."""
        self.index: BalancedIndex = BalancedIndex()

    # ------------------ Accessors ------------------
    def __len__(self) -> int:
        """Return the number of distinct phrases in the dictionary."""
        return len(self.index)

    def __iter__(self) -> Iterable[Record]:
        return iter(self.index)

    def __contains__(self, text: str) -> bool:
        return self.index.member(text)

    # ------------------ Core mutations ------------------
    def insert(self, record: Record) -> bool:
        """Insert a record. Returns False if its key was already present."""
        before = len(self.index)
        self.index.insert(record)
        if len(self.index) == before:
            logger.debug("Duplicate key ignored: %r", record.text)
            return False
        return True

    def add_entry(self, text: str, translation: str, explanation: str = "",
                  translated_explanation: str = "") -> Record:
        """Build a record from raw fields and insert it; returns the stored record."""
        record = Record(text, translation, explanation, translated_explanation)
        self.insert(record)
        return self.index.get(text)

    # ------------------ Data ingestion ------------------
    def ingest_csv(self, file_path: str) -> int:
        """
        Reads phrases from a UTF-8 CSV file with the columns
        text, translation, explanation, translated_explanation.
        Returns the number of new records indexed.
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"CSV not found: {file_path}")

        logger.info("Ingesting phrases from: %s", file_path)
        added = 0
        skipped = 0

        with open(file_path, mode='r', newline='', encoding='utf-8') as csvfile:
            reader = csv.DictReader(csvfile)

            fieldnames = reader.fieldnames or []
            missing = [c for c in REQUIRED_COLUMNS if c not in fieldnames]
            if missing:
                raise ValueError(f"CSV is missing required columns {missing}; found {fieldnames}")

            for line_no, row in enumerate(reader, start=2):
                text = (row.get("text") or "").strip()
                translation = (row.get("translation") or "").strip()
                if not text or not translation:
                    logger.warning("Skipping line %d: text and translation are required", line_no)
                    skipped += 1
                    continue

                record = Record(
                    text,
                    translation,
                    (row.get("explanation") or "").strip(),
                    (row.get("translated_explanation") or "").strip(),
                )
                if self.insert(record):
                    added += 1

        logger.info("Ingested %d new phrases (%d skipped, %d total)", added, skipped, len(self))
        return added

    # ------------------ Core queries ------------------
    def first(self) -> Optional[Record]:
        """Return the phrase that sorts first, or None when empty."""
        return self.index.min()

    def last(self) -> Optional[Record]:
        """Return the phrase that sorts last, or None when empty."""
        return self.index.max()

    def lookup(self, text: str) -> Optional[Record]:
        return self.index.get(text)

    def previous(self, text: str) -> Optional[Record]:
        return self.index.predecessor(text)

    def next(self, text: str) -> Optional[Record]:
        return self.index.successor(text)

    def search(self, substring: str, field: str = "primary") -> List[Record]:
        """Substring search over the primary text or the translation."""
        if field == "primary":
            return self.index.search_primary_field(substring)
        if field == "translated":
            return self.index.search_translated_field(substring)
        raise ValueError(f"field must be one of {SEARCH_FIELDS}, got {field!r}")
