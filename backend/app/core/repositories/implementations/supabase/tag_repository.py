from __future__ import annotations

from typing import TYPE_CHECKING

from app.core.models.tag import Tag
from app.core.repositories.implementations.supabase.base import SupabaseRepository
from app.core.repositories.tag_repository import TagRepository

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID


class SupabaseTagRepository(SupabaseRepository[Tag], TagRepository):
    """Supabase implementation of the TagRepository.

    Assumes a `tags` table with a `note_ids text[]` column. Membership edits go
    through the `append_tag_note_id` / `remove_tag_note_id` RPCs, which use
    `array_append` / `array_remove` in a single UPDATE so they are atomic.
    """

    TABLE_NAME = "tags"
    MODEL = Tag
    IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at", "note_ids"})

    async def list_by_note(self, note_id: str) -> Sequence[Tag]:
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .select("*")
            .contains("note_ids", [note_id])
            .order("created_at")
            .execute(),
            "select",
        )
        return self._rows_to_models(resp.data)

    async def append_note_id(self, tag_id: UUID, note_id: str) -> Tag | None:
        resp = await self._rpc(
            "append_tag_note_id",
            {"p_tag_id": str(tag_id), "p_note_id": note_id},
        )
        row = self._first(resp.data)
        return self._row_to_model(row) if row else None

    async def remove_note_id(self, tag_id: UUID, note_id: str) -> Tag | None:
        resp = await self._rpc(
            "remove_tag_note_id",
            {"p_tag_id": str(tag_id), "p_note_id": note_id},
        )
        row = self._first(resp.data)
        return self._row_to_model(row) if row else None

    async def remove_note_id_everywhere(self, note_id: str) -> int:
        resp = await self._rpc("remove_note_id_from_tags", {"p_note_id": note_id})
        return int(resp.data or 0)
