"""
In-memory storage backend tests.
"""

import asyncio
from uuid import uuid4

import pytest

from app.core.errors import StorageError
from app.core.models.category import Category
from app.core.models.note import Note
from app.core.models.tag import Tag


class TestInMemoryCrud:

    @pytest.mark.asyncio
    async def test_create_and_get(self, category_repo):
        created = await category_repo.create(Category(category_name="Inbox"))
        fetched = await category_repo.get(created.id)
        assert fetched == created
        assert await category_repo.get(uuid4()) is None

    @pytest.mark.asyncio
    async def test_duplicate_id_is_storage_error(self, category_repo):
        category = Category(category_name="Inbox")
        await category_repo.create(category)
        with pytest.raises(StorageError):
            await category_repo.create(category)

    @pytest.mark.asyncio
    async def test_list_preserves_insertion_order(self, category_repo):
        names = ["a", "b", "c"]
        for name in names:
            await category_repo.create(Category(category_name=name))
        listed = await category_repo.list()
        assert [c.category_name for c in listed] == names
        assert len(await category_repo.list(limit=2)) == 2

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, tag_repo):
        tag = await tag_repo.create(Tag(tag_name="t", tag_color="#fff"))
        tag.note_ids.append("n1")
        stored = await tag_repo.get(tag.id)
        assert stored.note_ids == []

    @pytest.mark.asyncio
    async def test_update_fields_ignores_immutable_columns(self, category_repo):
        created = await category_repo.create(Category(category_name="old"))
        updated = await category_repo.update_fields(
            created.id, {"category_name": "new", "id": uuid4(), "bogus": 1}
        )
        assert updated.id == created.id
        assert updated.category_name == "new"
        assert updated.updated_at is not None
        assert updated.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_update_and_delete_missing(self, note_repo):
        assert await note_repo.update_fields(uuid4(), {"note_title": "x"}) is None
        assert await note_repo.delete(uuid4()) is None

    @pytest.mark.asyncio
    async def test_delete_returns_removed_record(self, note_repo):
        note = await note_repo.create(Note(note_title="t", note_body="b", category_id="c1"))
        removed = await note_repo.delete(note.id)
        assert removed.id == note.id
        assert await note_repo.get(note.id) is None


class TestInMemoryRelations:

    @pytest.mark.asyncio
    async def test_list_by_category(self, note_repo):
        a1 = await note_repo.create(Note(note_title="1", note_body="b", category_id="a"))
        await note_repo.create(Note(note_title="2", note_body="b", category_id="b"))
        a2 = await note_repo.create(Note(note_title="3", note_body="b", category_id="a"))
        assert [n.id for n in await note_repo.list_by_category("a")] == [a1.id, a2.id]
        assert await note_repo.list_by_category(str(uuid4())) == []

    @pytest.mark.asyncio
    async def test_delete_by_category(self, note_repo):
        category_id = str(uuid4())
        await note_repo.create(Note(note_title="1", note_body="b", category_id=category_id))
        keep = await note_repo.create(Note(note_title="2", note_body="b", category_id="other"))
        removed = await note_repo.delete_by_category(category_id)
        assert len(removed) == 1
        assert [n.id for n in await note_repo.list()] == [keep.id]

    @pytest.mark.asyncio
    async def test_delete_by_category_returns_copies(self, note_repo, memory_store):
        note = await note_repo.create(Note(note_title="1", note_body="b", category_id="c1"))
        stored = memory_store.tables["notes"][note.id]
        removed = await note_repo.delete_by_category("c1")
        assert removed[0] == stored
        assert removed[0] is not stored

    @pytest.mark.asyncio
    async def test_list_by_note_uses_containment(self, tag_repo):
        tagged = await tag_repo.create(Tag(tag_name="a", tag_color="#000", note_ids=["n0", "n1"]))
        await tag_repo.create(Tag(tag_name="b", tag_color="#000", note_ids=["n2"]))
        assert [t.id for t in await tag_repo.list_by_note("n1")] == [tagged.id]

    @pytest.mark.asyncio
    async def test_append_keeps_duplicates(self, tag_repo):
        tag = await tag_repo.create(Tag(tag_name="a", tag_color="#000"))
        await tag_repo.append_note_id(tag.id, "n1")
        updated = await tag_repo.append_note_id(tag.id, "n1")
        assert updated.note_ids == ["n1", "n1"]

    @pytest.mark.asyncio
    async def test_remove_drops_all_occurrences(self, tag_repo):
        tag = await tag_repo.create(Tag(tag_name="a", tag_color="#000", note_ids=["n1", "n2", "n1"]))
        updated = await tag_repo.remove_note_id(tag.id, "n1")
        assert updated.note_ids == ["n2"]

    @pytest.mark.asyncio
    async def test_membership_edits_on_missing_tag(self, tag_repo):
        assert await tag_repo.append_note_id(uuid4(), "n1") is None
        assert await tag_repo.remove_note_id(uuid4(), "n1") is None

    @pytest.mark.asyncio
    async def test_update_fields_cannot_replace_note_ids(self, tag_repo):
        tag = await tag_repo.create(Tag(tag_name="a", tag_color="#000", note_ids=["n1"]))
        updated = await tag_repo.update_fields(tag.id, {"tag_name": "b", "note_ids": []})
        assert updated.tag_name == "b"
        assert updated.note_ids == ["n1"]

    @pytest.mark.asyncio
    async def test_remove_note_id_everywhere(self, tag_repo):
        t1 = await tag_repo.create(Tag(tag_name="a", tag_color="#000", note_ids=["n1", "n1"]))
        t2 = await tag_repo.create(Tag(tag_name="b", tag_color="#000", note_ids=["n2"]))
        assert await tag_repo.remove_note_id_everywhere("n1") == 1
        assert (await tag_repo.get(t1.id)).note_ids == []
        assert (await tag_repo.get(t2.id)).note_ids == ["n2"]

    @pytest.mark.asyncio
    async def test_concurrent_appends_are_not_lost(self, tag_repo):
        tag = await tag_repo.create(Tag(tag_name="busy", tag_color="#000"))
        note_ids = [str(uuid4()) for _ in range(50)]
        await asyncio.gather(*(tag_repo.append_note_id(tag.id, n) for n in note_ids))
        stored = await tag_repo.get(tag.id)
        assert sorted(stored.note_ids) == sorted(note_ids)
