from __future__ import annotations

from fastapi import Depends

from app.config import settings
from app.core.repositories.category_repository import CategoryRepository  # noqa: TCH001
from app.core.repositories.implementations.memory.repositories import (
    InMemoryCategoryRepository,
    InMemoryNoteRepository,
    InMemoryTagRepository,
)
from app.core.repositories.implementations.supabase.category_repository import (
    SupabaseCategoryRepository,
)
from app.core.repositories.implementations.supabase.note_repository import (
    SupabaseNoteRepository,
)
from app.core.repositories.implementations.supabase.tag_repository import (
    SupabaseTagRepository,
)
from app.core.repositories.note_repository import NoteRepository  # noqa: TCH001
from app.core.repositories.tag_repository import TagRepository  # noqa: TCH001
from app.core.services.category_service import CategoryService
from app.core.services.note_service import NoteService
from app.core.services.tag_service import TagService
from app.db.base import get_memory_store, get_supabase_client


def _use_memory_backend() -> bool:
    return settings.storage_backend == "memory"


def get_category_repository() -> CategoryRepository:
    """Get a category repository for the configured storage backend."""
    if _use_memory_backend():
        return InMemoryCategoryRepository(get_memory_store())
    return SupabaseCategoryRepository(get_supabase_client())


def get_note_repository() -> NoteRepository:
    """Get a note repository for the configured storage backend."""
    if _use_memory_backend():
        return InMemoryNoteRepository(get_memory_store())
    return SupabaseNoteRepository(get_supabase_client())


def get_tag_repository() -> TagRepository:
    """Get a tag repository for the configured storage backend."""
    if _use_memory_backend():
        return InMemoryTagRepository(get_memory_store())
    return SupabaseTagRepository(get_supabase_client())


def get_category_service(
    repo: CategoryRepository = Depends(get_category_repository),
    notes: NoteRepository = Depends(get_note_repository),
    tags: TagRepository = Depends(get_tag_repository),
) -> CategoryService:
    """Get a request-scoped category service instance."""
    return CategoryService(repo, notes, tags, cascade=settings.cascade_deletes)


def get_note_service(
    repo: NoteRepository = Depends(get_note_repository),
    tags: TagRepository = Depends(get_tag_repository),
) -> NoteService:
    """Get a request-scoped note service instance."""
    return NoteService(repo, tags, cascade=settings.cascade_deletes)


def get_tag_service(repo: TagRepository = Depends(get_tag_repository)) -> TagService:
    """Get a request-scoped tag service instance."""
    return TagService(repo)
