from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from app.core.errors import StorageError
from app.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from uuid import UUID

    from supabase import Client

ModelT = TypeVar("ModelT", bound=BaseModel)


class SupabaseRepository(Generic[ModelT]):
    """Shared PostgREST CRUD for one table whose columns mirror ``MODEL`` fields.

    The supabase client is synchronous, so every request runs in a worker
    thread. Any client failure is logged and re-raised as ``StorageError``.
    """

    TABLE_NAME: ClassVar[str]
    MODEL: ClassVar[type[BaseModel]]
    IMMUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"id", "created_at", "updated_at"})

    def __init__(self, client: Client) -> None:
        self._client: Client = client

    async def create(self, entity: ModelT) -> ModelT:
        row = self._model_to_row(entity)
        # Insert and return the created row
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .insert(row)
            .execute(),
            "insert",
        )
        data = self._first(resp.data)
        if not data:
            raise StorageError(f"insert on {self.TABLE_NAME} returned no row", table=self.TABLE_NAME)
        return self._row_to_model(data)

    async def get(self, entity_id: UUID) -> ModelT | None:
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .select("*")
            .eq("id", str(entity_id))
            .limit(1)
            .execute(),
            "select",
        )
        items = resp.data or []
        if not items:
            return None
        return self._row_to_model(items[0])

    async def list(self, *, limit: int | None = None) -> Sequence[ModelT]:
        def _query():
            q = self._client.table(self.TABLE_NAME).select("*").order("created_at")
            if limit is not None:
                q = q.limit(limit)
            return q.execute()

        resp = await self._run(_query, "select")
        return self._rows_to_models(resp.data)

    async def update_fields(self, entity_id: UUID, changes: dict) -> ModelT | None:
        # Only send columns that exist on the model and never touch id/timestamps
        sanitized: dict[str, Any] = {
            k: v for k, v in (changes or {}).items()
            if k in self.MODEL.model_fields and k not in self.IMMUTABLE_FIELDS
        }
        if not sanitized:
            # No-op; return current row if exists
            return await self.get(entity_id)
        sanitized["updated_at"] = datetime.now(UTC).isoformat()

        # Update and return the updated row
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .update(sanitized)
            .eq("id", str(entity_id))
            .execute(),
            "update",
        )
        items = resp.data or []
        if not items:
            return None
        return self._row_to_model(items[0])

    async def delete(self, entity_id: UUID) -> ModelT | None:
        # PostgREST returns the deleted rows
        resp = await self._run(
            lambda: self._client.table(self.TABLE_NAME)
            .delete()
            .eq("id", str(entity_id))
            .execute(),
            "delete",
        )
        items = resp.data or []
        if not items:
            return None
        return self._row_to_model(items[0])

    async def _rpc(self, name: str, params: dict[str, Any]) -> Any:
        return await self._run(lambda: self._client.rpc(name, params=params).execute(), name)

    async def _run(self, func: Callable[[], Any], operation: str) -> Any:
        try:
            return await asyncio.to_thread(func)
        except Exception as err:
            logger.error(
                "Supabase %s on %s failed: %s",
                operation,
                self.TABLE_NAME,
                err,
                extra={"table": self.TABLE_NAME, "operation": operation},
            )
            raise StorageError(
                f"{operation} on {self.TABLE_NAME} failed: {err}",
                table=self.TABLE_NAME,
                operation=operation,
            ) from err

    @staticmethod
    def _first(data: Any) -> dict[str, Any]:
        if isinstance(data, list) and data:
            return data[0]
        if isinstance(data, dict):
            return data
        return {}

    def _rows_to_models(self, rows: Any) -> list[ModelT]:
        return [self._row_to_model(r) for r in (rows or [])]

    def _row_to_model(self, row: dict[str, Any]) -> ModelT:
        # Drop database-only columns the model does not declare
        normalized = {k: v for k, v in row.items() if k in self.MODEL.model_fields}
        return self.MODEL.model_validate(normalized)

    @staticmethod
    def _model_to_row(entity: BaseModel) -> dict[str, Any]:
        # JSON mode turns UUID and datetime values into strings PostgREST accepts
        data = entity.model_dump(mode="json")
        if data.get("updated_at") is None:
            data.pop("updated_at", None)
        return data
