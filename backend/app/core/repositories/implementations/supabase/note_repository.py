from __future__ import annotations

from typing import TYPE_CHECKING

from app.core.models.note import Note
from app.core.repositories.implementations.supabase.base import SupabaseRepository
from app.core.repositories.note_repository import NoteRepository

if TYPE_CHECKING:
    from collections.abc import Sequence


class SupabaseNoteRepository(SupabaseRepository[Note], NoteRepository):
    """Supabase implementation of the NoteRepository.

    Assumes a `notes` table with columns matching the `Note` model fields.
    `category_id` carries no foreign key constraint.
    """

    TABLE_NAME = "notes"
    MODEL = Note

    async def list_by_category(self, category_id: str) -> Sequence[Note]:
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .select("*")
            .eq("category_id", category_id)
            .order("created_at")
            .execute(),
            "select",
        )
        return self._rows_to_models(resp.data)

    async def delete_by_category(self, category_id: str) -> Sequence[Note]:
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .delete()
            .eq("category_id", category_id)
            .execute(),
            "delete",
        )
        return self._rows_to_models(resp.data)
