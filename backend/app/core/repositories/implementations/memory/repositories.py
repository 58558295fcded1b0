from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from app.core.errors import StorageError
from app.core.models.category import Category
from app.core.models.note import Note
from app.core.models.tag import Tag
from app.core.repositories.category_repository import CategoryRepository
from app.core.repositories.note_repository import NoteRepository
from app.core.repositories.tag_repository import TagRepository

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from uuid import UUID

    from app.core.repositories.implementations.memory.store import InMemoryStore

ModelT = TypeVar("ModelT", bound=BaseModel)


class InMemoryRepository(Generic[ModelT]):
    """CRUD over one ``InMemoryStore`` table.

    Records are deep-copied on the way in and out so callers never share
    mutable state with the store.
    """

    TABLE_NAME: ClassVar[str]
    MODEL: ClassVar[type[BaseModel]]
    IMMUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"id", "created_at", "updated_at"})

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @property
    def _table(self) -> dict[UUID, ModelT]:
        return self._store.tables[self.TABLE_NAME]  # type: ignore[return-value]

    async def create(self, entity: ModelT) -> ModelT:
        async with self._store.lock:
            if entity.id in self._table:
                raise StorageError(
                    f"duplicate key {entity.id} in {self.TABLE_NAME}",
                    table=self.TABLE_NAME,
                    operation="insert",
                )
            self._table[entity.id] = entity.model_copy(deep=True)
            return entity.model_copy(deep=True)

    async def get(self, entity_id: UUID) -> ModelT | None:
        found = self._table.get(entity_id)
        return found.model_copy(deep=True) if found else None

    async def list(self, *, limit: int | None = None) -> Sequence[ModelT]:
        items = [e.model_copy(deep=True) for e in self._table.values()]
        return items if limit is None else items[:limit]

    async def update_fields(self, entity_id: UUID, changes: dict) -> ModelT | None:
        sanitized: dict[str, Any] = {
            k: v for k, v in (changes or {}).items()
            if k in self.MODEL.model_fields and k not in self.IMMUTABLE_FIELDS
        }
        return await self._modify(entity_id, lambda _current: sanitized)

    async def delete(self, entity_id: UUID) -> ModelT | None:
        async with self._store.lock:
            removed = self._table.pop(entity_id, None)
            return removed.model_copy(deep=True) if removed else None

    async def _modify(self, entity_id: UUID, compute: Callable[[ModelT], dict[str, Any]]) -> ModelT | None:
        """Apply ``compute(current)`` as a partial update while holding the store lock."""
        async with self._store.lock:
            current = self._table.get(entity_id)
            if current is None:
                return None
            changes = compute(current)
            if not changes:
                return current.model_copy(deep=True)
            updated = current.model_copy(update={**changes, "updated_at": datetime.now(UTC)}, deep=True)
            # Revalidate so bad values fail here rather than on the next read
            updated = self.MODEL.model_validate(updated.model_dump())
            self._table[entity_id] = updated
            return updated.model_copy(deep=True)

    def _select(self, predicate: Callable[[ModelT], bool]) -> list[ModelT]:
        return [e.model_copy(deep=True) for e in self._table.values() if predicate(e)]


class InMemoryCategoryRepository(InMemoryRepository[Category], CategoryRepository):
    TABLE_NAME = "categories"
    MODEL = Category


class InMemoryNoteRepository(InMemoryRepository[Note], NoteRepository):
    TABLE_NAME = "notes"
    MODEL = Note

    async def list_by_category(self, category_id: str) -> Sequence[Note]:
        return self._select(lambda n: n.category_id == category_id)

    async def delete_by_category(self, category_id: str) -> Sequence[Note]:
        async with self._store.lock:
            doomed = [nid for nid, n in self._table.items() if n.category_id == category_id]
            return [self._table.pop(nid).model_copy(deep=True) for nid in doomed]


class InMemoryTagRepository(InMemoryRepository[Tag], TagRepository):
    TABLE_NAME = "tags"
    MODEL = Tag
    IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at", "note_ids"})

    async def list_by_note(self, note_id: str) -> Sequence[Tag]:
        return self._select(lambda t: note_id in t.note_ids)

    async def append_note_id(self, tag_id: UUID, note_id: str) -> Tag | None:
        return await self._modify(tag_id, lambda tag: {"note_ids": [*tag.note_ids, note_id]})

    async def remove_note_id(self, tag_id: UUID, note_id: str) -> Tag | None:
        return await self._modify(
            tag_id, lambda tag: {"note_ids": [n for n in tag.note_ids if n != note_id]}
        )

    async def remove_note_id_everywhere(self, note_id: str) -> int:
        async with self._store.lock:
            changed = 0
            for tag_id, tag in self._table.items():
                if note_id in tag.note_ids:
                    self._table[tag_id] = tag.model_copy(
                        update={
                            "note_ids": [n for n in tag.note_ids if n != note_id],
                            "updated_at": datetime.now(UTC),
                        },
                        deep=True,
                    )
                    changed += 1
            return changed
