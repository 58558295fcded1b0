from __future__ import annotations

from typing import TYPE_CHECKING

from app.api.v1.schemas.tag import TagMembership
from app.core.errors import NotFoundError
from app.core.models.tag import Tag
from app.core.services.ids import parse_id
from app.utils.logging import get_logger
from app.utils.validation import validate_input

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from app.api.v1.schemas.tag import TagCreate, TagUpdate
    from app.core.repositories.tag_repository import TagRepository

logger = get_logger(__name__)


class TagService:
    """Service for tags and their note membership.

    Membership is only edited through ``add_note_to_tag`` and
    ``remove_note_from_tag``; ``update_tag`` never touches ``note_ids``.
    """

    def __init__(self, repo: TagRepository) -> None:
        self._repo = repo

    async def create_tag(self, create_dto: TagCreate) -> Tag:
        tag = Tag(
            tag_name=create_dto.tag_name,
            tag_color=create_dto.tag_color,
            note_ids=list(create_dto.note_ids),
        )
        created = await self._repo.create(tag)
        logger.info("Tag created", extra={"tag_id": str(created.id), "notes": len(created.note_ids)})
        return created

    async def get_tag(self, tag_id: str | UUID | None) -> Tag | None:
        parsed = parse_id(tag_id)
        if parsed is None:
            return None
        return await self._repo.get(parsed)

    async def list_tags(self) -> Sequence[Tag]:
        return await self._repo.list()

    async def list_tags_for_note(self, note_id: str | UUID) -> Sequence[Tag]:
        """Return tags whose note ids contain ``note_id``."""
        return await self._repo.list_by_note(str(note_id))

    async def update_tag(self, tag_id: str | UUID, update_dto: TagUpdate) -> Tag:
        parsed = parse_id(tag_id)
        changes = {"tag_name": update_dto.tag_name, "tag_color": update_dto.tag_color}
        updated = await self._repo.update_fields(parsed, changes) if parsed is not None else None
        if updated is None:
            raise NotFoundError("Tag", tag_id)
        logger.info("Tag updated", extra={"tag_id": str(parsed)})
        return updated

    async def delete_tag(self, tag_id: str | UUID) -> Tag:
        parsed = parse_id(tag_id)
        removed = await self._repo.delete(parsed) if parsed is not None else None
        if removed is None:
            raise NotFoundError("Tag", tag_id)
        logger.info("Tag deleted", extra={"tag_id": str(removed.id)})
        return removed

    async def add_note_to_tag(self, tag_id: str | UUID, note_id: str | None) -> Tag:
        """Append ``note_id`` to the tag. Duplicates are kept and the note need not exist."""
        membership = validate_input(TagMembership, note_id=note_id)
        parsed = parse_id(tag_id)
        updated = (
            await self._repo.append_note_id(parsed, membership.note_id)
            if parsed is not None
            else None
        )
        if updated is None:
            raise NotFoundError("Tag", tag_id)
        logger.info(
            "Note added to tag",
            extra={"tag_id": str(parsed), "note_id": str(membership.note_id)},
        )
        return updated

    async def remove_note_from_tag(self, tag_id: str | UUID, note_id: str | None) -> Tag:
        """Drop every occurrence of ``note_id`` from the tag."""
        membership = validate_input(TagMembership, note_id=note_id)
        parsed = parse_id(tag_id)
        updated = (
            await self._repo.remove_note_id(parsed, membership.note_id)
            if parsed is not None
            else None
        )
        if updated is None:
            raise NotFoundError("Tag", tag_id)
        logger.info(
            "Note removed from tag",
            extra={"tag_id": str(parsed), "note_id": str(membership.note_id)},
        )
        return updated
