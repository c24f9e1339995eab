import unicodedata
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Dict


def normalize_key(text: str) -> str:
    """Return the canonical (NFC) form of text used for every key comparison."""
    return unicodedata.normalize("NFC", text)


@total_ordering
@dataclass(frozen=True, eq=False)
class Record:
    """
    One dictionary phrase.

    Equality, hashing and ordering only look at the NFC form of `text`, so two
    records spelled with different code-point sequences for the same visible
    phrase are the same key.
    """
    text: str
    translation: str
    explanation: str = ""
    translated_explanation: str = ""
    key: str = field(init=False, repr=False)

    def __post_init__(self):
        for name in ("text", "translation", "explanation", "translated_explanation"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"Record.{name} must be str, got {type(value).__name__}")
        object.__setattr__(self, "key", normalize_key(self.text))

    def __eq__(self, other):
        if not isinstance(other, Record):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other):
        if not isinstance(other, Record):
            return NotImplemented
        return self.key < other.key

    def __hash__(self):
        return hash(self.key)

    def __str__(self):
        return (
            f"Text: {self.text}\n"
            f"Translation: {self.translation}\n"
            f"Explanation: {self.explanation}\n"
            f"Translated explanation: {self.translated_explanation}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "translation": self.translation,
            "explanation": self.explanation,
            "translated_explanation": self.translated_explanation,
        }
