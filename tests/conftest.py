# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so the top-level solver modules import in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from puzzles import BOX_CONFLICT, CLASSIC_PUZZLE, CLASSIC_SOLUTION, digits  # noqa: E402


@pytest.fixture
def classic_puzzle():
    return digits(CLASSIC_PUZZLE)


@pytest.fixture
def classic_solution():
    return digits(CLASSIC_SOLUTION)


@pytest.fixture
def box_conflict_text():
    return BOX_CONFLICT
