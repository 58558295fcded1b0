from __future__ import annotations

from uuid import UUID


def parse_id(raw: str | UUID | None) -> UUID | None:
    """Coerce an opaque API id into a UUID; malformed ids yield None."""
    if raw is None:
        return None
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError:
        return None
