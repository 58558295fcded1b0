from __future__ import annotations

from fastapi import Depends
from strawberry.fastapi import BaseContext

from app.config import settings
from app.core.services.category_service import CategoryService  # noqa: TCH001
from app.core.services.note_service import NoteService  # noqa: TCH001
from app.core.services.tag_service import TagService  # noqa: TCH001
from app.dependencies import get_category_service, get_note_service, get_tag_service


class GraphQLContext(BaseContext):
    """Per-request services handed to every resolver."""

    def __init__(
        self,
        category_service: CategoryService,
        note_service: NoteService,
        tag_service: TagService,
        *,
        strict: bool = True,
    ) -> None:
        super().__init__()
        self.category_service = category_service
        self.note_service = note_service
        self.tag_service = tag_service
        self.strict = strict


async def get_graphql_context(
    category_service: CategoryService = Depends(get_category_service),
    note_service: NoteService = Depends(get_note_service),
    tag_service: TagService = Depends(get_tag_service),
) -> GraphQLContext:
    return GraphQLContext(
        category_service,
        note_service,
        tag_service,
        strict=settings.strict_mutations,
    )
