"""
Supabase repository tests against a recording fake of the PostgREST client.
"""

from types import SimpleNamespace
from uuid import uuid4

import pytest

from app.core.errors import StorageError
from app.core.models.category import Category
from app.core.models.tag import Tag
from app.core.repositories.implementations.supabase.category_repository import (
    SupabaseCategoryRepository,
)
from app.core.repositories.implementations.supabase.note_repository import (
    SupabaseNoteRepository,
)
from app.core.repositories.implementations.supabase.tag_repository import (
    SupabaseTagRepository,
)


class FakeQuery:
    """Records chained builder calls and returns canned data on execute()."""

    def __init__(self, client, data):
        self._client = client
        self._data = data

    def __getattr__(self, name):
        def _call(*args, **kwargs):
            self._client.calls.append((name, args, kwargs))
            return self
        return _call

    def execute(self):
        if self._client.error is not None:
            raise self._client.error
        return SimpleNamespace(data=self._data)


class FakeClient:
    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error
        self.calls = []

    def table(self, name):
        self.calls.append(("table", (name,), {}))
        return FakeQuery(self, self.data)

    def rpc(self, name, params=None):
        self.calls.append(("rpc", (name,), {"params": params}))
        return FakeQuery(self, self.data)

    def names(self):
        return [c[0] for c in self.calls]


def _tag_row(**overrides):
    row = {
        "id": str(uuid4()),
        "tag_name": "work",
        "tag_color": "#fff",
        "note_ids": None,
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": None,
    }
    row.update(overrides)
    return row


class TestSupabaseRepositories:

    @pytest.mark.asyncio
    async def test_create_serialises_row(self):
        category = Category(category_name="Work")
        client = FakeClient(data=[category.model_dump(mode="json")])
        repo = SupabaseCategoryRepository(client)

        created = await repo.create(category)

        assert created == category
        insert = next(c for c in client.calls if c[0] == "insert")
        row = insert[1][0]
        assert row["id"] == str(category.id)
        assert isinstance(row["created_at"], str)
        assert "updated_at" not in row

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self):
        repo = SupabaseCategoryRepository(FakeClient(data=[]))
        assert await repo.get(uuid4()) is None

    @pytest.mark.asyncio
    async def test_list_orders_by_creation(self):
        client = FakeClient(data=[])
        await SupabaseNoteRepository(client).list()
        assert ("order", ("created_at",), {}) in client.calls

    @pytest.mark.asyncio
    async def test_list_by_category_filters(self):
        category_id = "c1"
        client = FakeClient(data=[])
        await SupabaseNoteRepository(client).list_by_category(category_id)
        assert ("eq", ("category_id", "c1"), {}) in client.calls

    @pytest.mark.asyncio
    async def test_list_by_note_uses_contains(self):
        note_id = "n1"
        client = FakeClient(data=[_tag_row(note_ids=[note_id])])
        tags = await SupabaseTagRepository(client).list_by_note(note_id)
        assert ("contains", ("note_ids", ["n1"]), {}) in client.calls
        assert tags[0].note_ids == ["n1"]

    @pytest.mark.asyncio
    async def test_update_strips_immutable_and_stamps_updated_at(self):
        client = FakeClient(data=[_tag_row(tag_name="home")])
        updated = await SupabaseTagRepository(client).update_fields(
            uuid4(), {"tag_name": "home", "note_ids": [], "id": "x"}
        )
        payload = next(c for c in client.calls if c[0] == "update")[1][0]
        assert set(payload) == {"tag_name", "updated_at"}
        assert updated.tag_name == "home"

    @pytest.mark.asyncio
    async def test_append_note_id_calls_rpc(self):
        tag_id, note_id = uuid4(), "n1"
        client = FakeClient(data=[_tag_row(id=str(tag_id), note_ids=[note_id])])
        tag = await SupabaseTagRepository(client).append_note_id(tag_id, note_id)
        assert client.calls[0] == (
            "rpc",
            ("append_tag_note_id",),
            {"params": {"p_tag_id": str(tag_id), "p_note_id": "n1"}},
        )
        assert isinstance(tag, Tag)
        assert tag.note_ids == ["n1"]

    @pytest.mark.asyncio
    async def test_remove_note_id_missing_tag(self):
        client = FakeClient(data=[])
        assert await SupabaseTagRepository(client).remove_note_id(uuid4(), "n1") is None
        assert client.calls[0][1] == ("remove_tag_note_id",)

    @pytest.mark.asyncio
    async def test_remove_note_id_everywhere_returns_count(self):
        client = FakeClient(data=3)
        assert await SupabaseTagRepository(client).remove_note_id_everywhere("n1") == 3

    @pytest.mark.asyncio
    async def test_client_failure_becomes_storage_error(self):
        client = FakeClient(error=ConnectionError("boom"))
        with pytest.raises(StorageError) as exc:
            await SupabaseCategoryRepository(client).list()
        assert exc.value.context["table"] == "categories"
        assert isinstance(exc.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_unknown_columns_are_ignored(self):
        client = FakeClient(data=[_tag_row(lexeme="ignored")])
        tag = await SupabaseTagRepository(client).get(uuid4())
        assert tag.note_ids == []
