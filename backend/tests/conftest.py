"""
Test configuration and fixtures.

The environment is prepared before the application is imported so the
module-level ``settings`` select the in-memory storage backend.
"""

import os

os.environ.setdefault("APP_STORAGE_BACKEND", "memory")
os.environ.setdefault("APP_LOG_LEVEL", "WARNING")

from typing import Any, AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import settings
from app.core.repositories.implementations.memory.repositories import (
    InMemoryCategoryRepository,
    InMemoryNoteRepository,
    InMemoryTagRepository,
)
from app.core.services.category_service import CategoryService
from app.core.services.note_service import NoteService
from app.core.services.tag_service import TagService
from app.db.base import get_memory_store
from app.main import app


# ==================== Fixtures ====================

@pytest.fixture(autouse=True)
def memory_store():
    """Fresh in-memory store per test, shared with the app's dependencies."""
    get_memory_store.cache_clear()
    store = get_memory_store()
    yield store
    store.clear()
    get_memory_store.cache_clear()


@pytest.fixture(autouse=True)
def restore_settings():
    """Undo any per-test settings tweaks (cascade/strict flags)."""
    snapshot = settings.model_dump()
    yield
    for key, value in snapshot.items():
        setattr(settings, key, value)


@pytest.fixture
def category_repo(memory_store) -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository(memory_store)


@pytest.fixture
def note_repo(memory_store) -> InMemoryNoteRepository:
    return InMemoryNoteRepository(memory_store)


@pytest.fixture
def tag_repo(memory_store) -> InMemoryTagRepository:
    return InMemoryTagRepository(memory_store)


@pytest.fixture
def category_service(category_repo, note_repo, tag_repo) -> CategoryService:
    return CategoryService(category_repo, note_repo, tag_repo)


@pytest.fixture
def note_service(note_repo, tag_repo) -> NoteService:
    return NoteService(note_repo, tag_repo)


@pytest.fixture
def tag_service(tag_repo) -> TagService:
    return TagService(tag_repo)


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async test client bound to the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ==================== Helpers ====================

async def execute_graphql(client: AsyncClient, query: str, variables: Optional[dict] = None) -> dict[str, Any]:
    """POST a GraphQL document and return the decoded response body."""
    response = await client.post(
        settings.graphql_path,
        json={"query": query, "variables": variables or {}},
    )
    return response.json()
