from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from app.core.models.category import Category


class CategoryRepository(ABC):
    """Abstract repository interface for categories."""

    @abstractmethod
    async def create(self, category: Category) -> Category:  # pragma: no cover - interface only
        """Persist a new category and return the stored entity."""

    @abstractmethod
    async def get(self, category_id: UUID) -> Category | None:  # pragma: no cover
        """Fetch a category by id or return None if not found."""

    @abstractmethod
    async def list(self, *, limit: int | None = None) -> Sequence[Category]:  # pragma: no cover
        """Return categories in insertion order."""

    @abstractmethod
    async def update_fields(self, category_id: UUID, changes: dict) -> Category | None:  # pragma: no cover
        """Partially update fields and return the updated entity, or None if missing."""

    @abstractmethod
    async def delete(self, category_id: UUID) -> Category | None:  # pragma: no cover
        """Delete a category by id and return the removed entity, or None if missing."""
