# tests/conftest.py
import sys
from pathlib import Path
import pytest

# Make "src" importable
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import counter
from undoable import Store, undoable_reducer

@pytest.fixture
def reducer():
    # counter domain, unbounded, default comparator
    return undoable_reducer(counter.reduce, counter.init())

@pytest.fixture
def store(reducer):
    # Fresh store per test
    return Store(reducer)
