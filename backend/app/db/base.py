from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client
from supabase.lib.client_options import ClientOptions

from app.config import settings
from app.core.repositories.implementations.memory.store import InMemoryStore
from app.utils.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Return a cached Supabase client shared by all requests.

    There is no per-user session, so the client never refreshes or persists
    auth state.
    """
    logger.debug("Initializing Supabase client")
    if not settings.supabase_url or not settings.supabase_key:
        raise RuntimeError("supabase_url and supabase_key are required for the supabase backend")
    return create_client(
        settings.supabase_url,
        settings.supabase_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )


@lru_cache(maxsize=1)
def get_memory_store() -> InMemoryStore:
    """Return the process-wide in-memory store used by the ``memory`` backend."""
    logger.debug("Initializing in-memory store")
    return InMemoryStore()
