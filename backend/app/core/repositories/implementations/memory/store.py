from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uuid import UUID

    from pydantic import BaseModel


class InMemoryStore:
    """Process-local tables keyed by record id.

    Dicts preserve insertion order, which gives list queries the same ordering
    as the Supabase backend. A single lock serialises writes so that
    read-modify-write sequences (tag membership edits) are atomic.
    """

    TABLES = ("categories", "notes", "tags")

    def __init__(self) -> None:
        self.tables: dict[str, dict[UUID, BaseModel]] = {name: {} for name in self.TABLES}
        self.lock = asyncio.Lock()

    def clear(self) -> None:
        for table in self.tables.values():
            table.clear()
