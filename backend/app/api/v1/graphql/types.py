from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from strawberry.types import Info

if TYPE_CHECKING:
    from app.core.models.category import Category
    from app.core.models.note import Note
    from app.core.models.tag import Tag


@strawberry.type(name="Category")
class CategoryType:
    id: strawberry.ID
    category_name: str | None

    @strawberry.field(description="Notes whose categoryId points at this category.")
    async def notes(self, info: Info) -> list[NoteType]:
        notes = await info.context.note_service.list_notes_for_category(self.id)
        return [NoteType.from_model(n) for n in notes]

    @classmethod
    def from_model(cls, category: Category) -> CategoryType:
        return cls(id=strawberry.ID(str(category.id)), category_name=category.category_name)


@strawberry.type(name="Note")
class NoteType:
    id: strawberry.ID
    note_title: str | None
    note_body: str | None
    category_id: strawberry.ID | None

    @strawberry.field(description="Tags that list this note among their note ids.")
    async def tags(self, info: Info) -> list[TagType]:
        tags = await info.context.tag_service.list_tags_for_note(self.id)
        return [TagType.from_model(t) for t in tags]

    @strawberry.field(description="Owning category, or null if it no longer exists.")
    async def category(self, info: Info) -> CategoryType | None:
        category = await info.context.category_service.get_category(self.category_id)
        return CategoryType.from_model(category) if category else None

    @classmethod
    def from_model(cls, note: Note) -> NoteType:
        return cls(
            id=strawberry.ID(str(note.id)),
            note_title=note.note_title,
            note_body=note.note_body,
            category_id=strawberry.ID(str(note.category_id)),
        )


@strawberry.type(name="Tag")
class TagType:
    id: strawberry.ID
    tag_name: str | None
    tag_color: str | None
    note_ids: list[strawberry.ID]

    @strawberry.field(description="Existing notes referenced by this tag; dangling ids are skipped.")
    async def notes(self, info: Info) -> list[NoteType]:
        resolved: list[NoteType] = []
        for note_id in dict.fromkeys(self.note_ids):
            note = await info.context.note_service.get_note(note_id)
            if note is not None:
                resolved.append(NoteType.from_model(note))
        return resolved

    @classmethod
    def from_model(cls, tag: Tag) -> TagType:
        return cls(
            id=strawberry.ID(str(tag.id)),
            tag_name=tag.tag_name,
            tag_color=tag.tag_color,
            note_ids=[strawberry.ID(str(n)) for n in tag.note_ids],
        )
