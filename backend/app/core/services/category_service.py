from __future__ import annotations

from typing import TYPE_CHECKING

from app.core.errors import NotFoundError
from app.core.models.category import Category
from app.core.services.ids import parse_id
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from app.api.v1.schemas.category import CategoryCreate, CategoryUpdate
    from app.core.repositories.category_repository import CategoryRepository
    from app.core.repositories.note_repository import NoteRepository
    from app.core.repositories.tag_repository import TagRepository

logger = get_logger(__name__)


class CategoryService:
    """Service for categories.

    With ``cascade=True`` deleting a category also deletes the notes it owns
    and strips those notes from every tag. Without it the notes are left in
    place with a dangling ``category_id``.
    """

    def __init__(
        self,
        repo: CategoryRepository,
        notes: NoteRepository,
        tags: TagRepository,
        *,
        cascade: bool = False,
    ) -> None:
        self._repo = repo
        self._notes = notes
        self._tags = tags
        self._cascade = cascade

    async def create_category(self, create_dto: CategoryCreate) -> Category:
        category = await self._repo.create(Category(category_name=create_dto.category_name))
        logger.info("Category created", extra={"category_id": str(category.id)})
        return category

    async def get_category(self, category_id: str | UUID | None) -> Category | None:
        parsed = parse_id(category_id)
        if parsed is None:
            return None
        return await self._repo.get(parsed)

    async def list_categories(self) -> Sequence[Category]:
        return await self._repo.list()

    async def update_category(self, category_id: str | UUID, update_dto: CategoryUpdate) -> Category:
        parsed = parse_id(category_id)
        updated = (
            await self._repo.update_fields(parsed, {"category_name": update_dto.category_name})
            if parsed is not None
            else None
        )
        if updated is None:
            raise NotFoundError("Category", category_id)
        logger.info("Category updated", extra={"category_id": str(parsed)})
        return updated

    async def delete_category(self, category_id: str | UUID) -> Category:
        """Delete a category, removing its dependents first when cascading.

        Dependents go before the owner so that a storage failure part way
        through leaves the category in place and the delete can be retried.
        """
        parsed = parse_id(category_id)
        existing = await self._repo.get(parsed) if parsed is not None else None
        if existing is None:
            raise NotFoundError("Category", category_id)

        notes_removed = 0
        if self._cascade:
            owner_key = str(existing.id)
            owned = await self._notes.list_by_category(owner_key)
            for note in owned:
                await self._tags.remove_note_id_everywhere(str(note.id))
            notes_removed = len(await self._notes.delete_by_category(owner_key))

        removed = await self._repo.delete(existing.id)
        if removed is None:
            raise NotFoundError("Category", category_id)
        logger.info(
            "Category deleted",
            extra={
                "category_id": str(removed.id),
                "cascade": self._cascade,
                "notes_removed": notes_removed,
            },
        )
        return removed
