"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed visually package.
"""

import copy
import json
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def sample_path() -> Path:
    return FIXTURES / "field_trip.visual"


@pytest.fixture
def sample_doc(sample_path) -> dict:
    """A fresh, mutable copy of the field trip document for each test."""
    return copy.deepcopy(json.loads(sample_path.read_text(encoding="utf-8")))


@pytest.fixture
def to_text():
    """Serialize a dict the way an editor would save it."""
    def _to_text(doc) -> str:
        return json.dumps(doc, indent=2)
    return _to_text
