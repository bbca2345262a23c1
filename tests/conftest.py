"""
Pytest configuration and shared fixtures for the Fam.ly backend tests.

Testing Standards:
- All async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Every test gets its own in-memory MongoDB from mongomock-motor
- Unit tests go in tests/unit/, route tests in tests/integration/
"""

from uuid import uuid4

import pytest
from bson import ObjectId
from mongomock_motor import AsyncMongoMockClient

from app.config.profiling import DEFAULT_PROFILING_QUESTION
from app.services.concepts import Concepts, build_concepts


@pytest.fixture
def database():
    """Create a fresh in-memory database for each test."""
    return AsyncMongoMockClient()[f"famly_test_{uuid4().hex}"]


@pytest.fixture
def concepts(database) -> Concepts:
    return build_concepts(database, profiling_question=DEFAULT_PROFILING_QUESTION)


@pytest.fixture
def threading_service(concepts: Concepts):
    return concepts.threading


@pytest.fixture
def posting_service(concepts: Concepts):
    return concepts.posting


@pytest.fixture
def alice() -> ObjectId:
    return ObjectId()


@pytest.fixture
def bob() -> ObjectId:
    return ObjectId()
