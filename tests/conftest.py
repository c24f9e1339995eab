import os
import shutil
import tempfile

import pytest

from olelo.dictionary import Dictionary
from olelo.generator import sample_records
from olelo.indexing import BalancedIndex


@pytest.fixture
def tmpdir():
    d = tempfile.mkdtemp(prefix="olelo_")
    yield d
    shutil.rmtree(d, ignore_errors=True)

@pytest.fixture
def index():
    return BalancedIndex()

@pytest.fixture
def samples():
    return sample_records()

@pytest.fixture
def filled_dictionary(samples):
    dictionary = Dictionary()
    for record in samples:
        dictionary.insert(record)
    return dictionary

@pytest.fixture
def write_csv(tmpdir):
    """Helper: write CSV text to a file in tmpdir and return its path."""
    def _write(content, name="phrases.csv"):
        path = os.path.join(tmpdir, name)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return path
    return _write
