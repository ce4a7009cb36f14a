import sys
from pathlib import Path

import pytest

# Add the repository root to sys.path so we can import seen_jeem
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from seen_jeem.repository import TriviaRepository  # noqa: E402
from seen_jeem.storage import MemoryStore  # noqa: E402


@pytest.fixture
def memory_store():
    """Return an empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def repo(memory_store):
    """Return a repository seeded with the application defaults."""
    repository = TriviaRepository(memory_store)
    repository.init_defaults()
    return repository
