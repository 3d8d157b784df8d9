"""
Pytest configuration and fixtures.

Every test gets its own seeded store and an application built around
it, so no state leaks between tests.
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from student_course_api.app.core.store import InMemoryStore  # noqa: E402
from student_course_api.app.main import create_app  # noqa: E402


@pytest.fixture
def store():
    """A store loaded with the 3 seed students and 3 seed courses."""
    store = InMemoryStore()
    store.seed()
    return store


@pytest.fixture
def app(store):
    return create_app(store=store, seed=False)


@pytest.fixture
def client(app):
    """Test client that turns unhandled errors into 500 responses."""
    return TestClient(app, raise_server_exceptions=False)
