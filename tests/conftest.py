"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("STORAGE_BACKEND", "memory")

import random  # noqa: E402
from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from wordbook.core import container  # noqa: E402
from wordbook.infrastructure.vocabulary.storage.in_memory_storage import (  # noqa: E402
    InMemoryWordStorage,
)
from wordbook.main import app  # noqa: E402


@pytest.fixture
def storage() -> InMemoryWordStorage:
    """Fresh in-memory word storage."""
    return InMemoryWordStorage()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator for reproducible quizzes."""
    return random.Random(1234)


@pytest.fixture
def client(storage: InMemoryWordStorage, rng: random.Random) -> Generator[TestClient, Any, None]:
    """Create a test client backed by in-memory storage."""
    container.word_storage.override(providers.Object(storage))
    container.quiz_rng.override(providers.Object(rng))
    container.reset_singletons()

    with TestClient(app) as test_client:
        yield test_client

    container.reset_singletons()
    container.word_storage.reset_override()
    container.quiz_rng.reset_override()
