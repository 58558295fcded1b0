from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, TypeVar

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from app.api.v1.graphql.context import get_graphql_context
from app.api.v1.graphql.types import CategoryType, NoteType, TagType
from app.api.v1.schemas.category import CategoryCreate, CategoryUpdate
from app.api.v1.schemas.note import NoteCreate, NoteUpdate
from app.api.v1.schemas.tag import TagCreate, TagUpdate
from app.config import settings
from app.core.errors import NotesError
from app.utils.logging import get_logger
from app.utils.validation import validate_input

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = get_logger(__name__)

T = TypeVar("T")


async def _guarded(info: Info, operation: str, action: Callable[[], Awaitable[T]]) -> T | None:
    """Run an update/delete/membership mutation under the configured error policy.

    Strict mode lets ``NotesError`` reach the executor, which reports it with
    its ``extensions.code``. Otherwise the error is logged and the mutation
    resolves to null.
    """
    try:
        return await action()
    except NotesError as err:
        if info.context.strict:
            raise
        logger.warning(
            "Mutation %s failed: %s",
            operation,
            err,
            extra={"operation": operation, "code": err.code},
        )
        return None


@strawberry.type(name="RootQueryType")
class Query:
    @strawberry.field
    async def category(self, info: Info, id: strawberry.ID | None = None) -> CategoryType | None:
        category = await info.context.category_service.get_category(id)
        return CategoryType.from_model(category) if category else None

    @strawberry.field
    async def note(self, info: Info, id: strawberry.ID | None = None) -> NoteType | None:
        note = await info.context.note_service.get_note(id)
        return NoteType.from_model(note) if note else None

    @strawberry.field
    async def tag(self, info: Info, id: strawberry.ID | None = None) -> TagType | None:
        tag = await info.context.tag_service.get_tag(id)
        return TagType.from_model(tag) if tag else None

    @strawberry.field
    async def categories(self, info: Info) -> list[CategoryType]:
        return [CategoryType.from_model(c) for c in await info.context.category_service.list_categories()]

    @strawberry.field
    async def notes(self, info: Info) -> list[NoteType]:
        return [NoteType.from_model(n) for n in await info.context.note_service.list_notes()]

    @strawberry.field
    async def tags(self, info: Info) -> list[TagType]:
        return [TagType.from_model(t) for t in await info.context.tag_service.list_tags()]


@strawberry.type
class Mutation:
    # Categories
    @strawberry.mutation
    async def add_category(self, info: Info, category_name: str | None = None) -> CategoryType | None:
        dto = validate_input(CategoryCreate, category_name=category_name)
        return CategoryType.from_model(await info.context.category_service.create_category(dto))

    @strawberry.mutation
    async def update_category(self, info: Info, id: strawberry.ID, category_name: str) -> CategoryType | None:
        service = info.context.category_service
        category = await _guarded(
            info,
            "updateCategory",
            lambda: service.update_category(id, validate_input(CategoryUpdate, category_name=category_name)),
        )
        return CategoryType.from_model(category) if category else None

    @strawberry.mutation
    async def delete_category(self, info: Info, id: strawberry.ID) -> CategoryType | None:
        service = info.context.category_service
        category = await _guarded(info, "deleteCategory", lambda: service.delete_category(id))
        return CategoryType.from_model(category) if category else None

    # Notes
    @strawberry.mutation
    async def add_note(
        self, info: Info, note_title: str, note_body: str, category_id: strawberry.ID
    ) -> NoteType | None:
        dto = validate_input(NoteCreate, note_title=note_title, note_body=note_body, category_id=category_id)
        return NoteType.from_model(await info.context.note_service.create_note(dto))

    @strawberry.mutation
    async def update_note(self, info: Info, id: strawberry.ID, note_title: str, note_body: str) -> NoteType | None:
        service = info.context.note_service
        note = await _guarded(
            info,
            "updateNote",
            lambda: service.update_note(
                id, validate_input(NoteUpdate, note_title=note_title, note_body=note_body)
            ),
        )
        return NoteType.from_model(note) if note else None

    @strawberry.mutation
    async def delete_note(self, info: Info, id: strawberry.ID) -> NoteType | None:
        service = info.context.note_service
        note = await _guarded(info, "deleteNote", lambda: service.delete_note(id))
        return NoteType.from_model(note) if note else None

    # Tags
    @strawberry.mutation
    async def add_tag(
        self,
        info: Info,
        tag_name: str,
        tag_color: str,
        note_id: list[strawberry.ID | None] | None = None,
    ) -> TagType | None:
        dto = validate_input(TagCreate, tag_name=tag_name, tag_color=tag_color, note_ids=note_id)
        return TagType.from_model(await info.context.tag_service.create_tag(dto))

    @strawberry.mutation
    async def update_tag(self, info: Info, tag_id: strawberry.ID, tag_name: str, tag_color: str) -> TagType | None:
        service = info.context.tag_service
        tag = await _guarded(
            info,
            "updateTag",
            lambda: service.update_tag(tag_id, validate_input(TagUpdate, tag_name=tag_name, tag_color=tag_color)),
        )
        return TagType.from_model(tag) if tag else None

    @strawberry.mutation
    async def update_tag_with_note_id(
        self, info: Info, tag_id: strawberry.ID, note_id: strawberry.ID | None = None
    ) -> TagType | None:
        service = info.context.tag_service
        tag = await _guarded(info, "updateTagWithNoteId", lambda: service.add_note_to_tag(tag_id, note_id))
        return TagType.from_model(tag) if tag else None

    @strawberry.mutation
    async def delete_note_id_from_tag(
        self,
        info: Info,
        tag_id: strawberry.ID,
        note_id: Annotated[strawberry.ID, strawberry.argument(name="noteID")],
    ) -> TagType | None:
        service = info.context.tag_service
        tag = await _guarded(info, "deleteNoteIdFromTag", lambda: service.remove_note_from_tag(tag_id, note_id))
        return TagType.from_model(tag) if tag else None

    @strawberry.mutation
    async def delete_tag(self, info: Info, id: strawberry.ID) -> TagType | None:
        service = info.context.tag_service
        tag = await _guarded(info, "deleteTag", lambda: service.delete_tag(id))
        return TagType.from_model(tag) if tag else None


schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_graphql_context,
        graphql_ide="graphiql" if settings.graphiql else None,
    )
