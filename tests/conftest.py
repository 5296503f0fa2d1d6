"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so `tests.unit.*` helpers import cleanly.
"""

import pytest

from adjacent_overloads.infrastructure.di.container import AdjacencyContainer


@pytest.fixture(autouse=True)
def _reset_container():
    """Each test gets a fresh container singleton."""
    AdjacencyContainer.reset()
    yield
    AdjacencyContainer.reset()
