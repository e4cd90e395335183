"""In-process per-boarder locks serialising balance read-modify-write cycles."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

_LOCKS: dict[str, asyncio.Lock] = {}
_HOLDERS: dict[str, int] = {}


@asynccontextmanager
async def hold(boarder_id: str) -> AsyncIterator[None]:
    """Serialise callers working on the same boarder.

    Callers for different boarders never wait on each other. Entries are
    dropped as soon as nobody holds or awaits them, so locks are never
    shared across event loops.
    """
    lock = _LOCKS.get(boarder_id)
    if lock is None:
        lock = _LOCKS[boarder_id] = asyncio.Lock()
    _HOLDERS[boarder_id] = _HOLDERS.get(boarder_id, 0) + 1
    try:
        async with lock:
            yield
    finally:
        _HOLDERS[boarder_id] -= 1
        if _HOLDERS[boarder_id] == 0:
            del _HOLDERS[boarder_id]
            _LOCKS.pop(boarder_id, None)


def active_keys() -> list[str]:
    """Return boarder ids that currently have a lock entry (mainly for tests)."""
    return sorted(_LOCKS)
