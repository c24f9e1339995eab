"""
Sample and synthetic phrase records.

sample_records() gives a handful of real Hawaiian phrases for the demo
and the API warm start; generate() builds larger synthetic sets with
distinct keys for load and balance checks.
"""

import random
from typing import List, Optional

from olelo.records import Record

SAMPLES = [
    ("A hui hou kākou", "Until we meet again",
     "He ʻōlelo aloha i ka wā e kaʻawale ai.", "A farewell used when parting from a group."),
    ("Mālama ʻāina", "Care for the land",
     "E mālama i ka honua a me kona mau waiwai.", "Stewardship of the Earth and its resources."),
    ("Aloha kakahiaka", "Good morning",
     "He aloha no ke kakahiaka.", "A greeting used in the morning."),
    ("Mahalo nui loa", "Thank you very much",
     "He ʻōlelo hoʻomaikaʻi.", "An expression of deep gratitude."),
    ("E komo mai", "Welcome, come in",
     "He kono e komo i loko.", "An invitation to enter."),
    ("Ka honua", "The Earth",
     "Ka ʻāina a pau a kākou e noho nei.", "The whole world we live on."),
    ("ʻOhana", "Family",
     "Nā makua, nā keiki a me nā hoahānau.", "Family in the widest sense, including chosen kin."),
]


def sample_records() -> List[Record]:
    return [Record(*fields) for fields in SAMPLES]


def pad_width(n: int) -> int:
    """Digits needed so that every index below n pads to the same length."""
    return max(6, len(str(max(n - 1, 0))))


def generate(n: int, shuffle: bool = False, seed: Optional[int] = None) -> List[Record]:
    """
    Return n synthetic records with distinct keys.

    Keys are zero-padded to a common width so list order is ascending key
    order unless shuffle is set.
    """
    width = pad_width(n)
    records = [
        Record(f"phrase {i:0{width}d}", f"translation {i:0{width}d}", f"explanation {i}", f"translated explanation {i}")
        for i in range(n)
    ]
    if shuffle:
        random.Random(seed).shuffle(records)
    return records
