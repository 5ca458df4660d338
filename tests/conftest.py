"""Pytest configuration and shared fixtures for MCP DocDB tests."""

import tempfile
from pathlib import Path
from typing import AsyncGenerator, Generator
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from mcp_docdb.config.settings import Settings
from mcp_docdb.store import DocumentationStore
from tests.utils import FakeMongoClient, MockCursorHelper


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_settings(temp_dir: Path) -> Settings:
    """Create test settings with temporary directories."""
    return Settings(
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        LOG_DIR=temp_dir / "logs",
        MONGODB_URL="mongodb://mock-mongo:27017",
        MONGODB_DATABASE="test_documentation_db",
        MONGODB_COLLECTION="documentations",
        DEFAULT_SEARCH_LIMIT=10,
        RESOURCE_LIST_LIMIT=10,
        FUZZY_RESULT_LIMIT=10,
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    """Create mock logger."""
    return MagicMock()


@pytest.fixture
def mock_collection() -> MagicMock:
    """Create a mock MongoDB collection with an empty cursor."""
    return MockCursorHelper.collection()


@pytest.fixture
def fake_client() -> FakeMongoClient:
    """Create an in-memory MongoDB client."""
    return FakeMongoClient()


@pytest_asyncio.fixture
async def store(test_settings: Settings, fake_client: FakeMongoClient) -> AsyncGenerator[DocumentationStore, None]:
    """Create and initialize a documentation store over the in-memory client."""
    store = DocumentationStore(test_settings, client=fake_client)
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture
def fake_collection(fake_client: FakeMongoClient, test_settings: Settings):
    """The in-memory collection the ``store`` fixture writes to."""
    return fake_client[test_settings.MONGODB_DATABASE][test_settings.MONGODB_COLLECTION]
