"""
Per-owner serialization for check-then-act sequences.

Lecture creation counts the owner's lectures and inserts a new one; the
lock for that owner must be held from before the count until after commit
so the next creator sees the committed row. Different owners never contend.
Entries are dropped once nobody holds or waits on them.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Hashable


class OwnerLockRegistry:
    def __init__(self):
        self._locks: Dict[Hashable, asyncio.Lock] = {}
        self._holders: Dict[Hashable, int] = {}

    @asynccontextmanager
    async def hold(self, owner_id: Hashable) -> AsyncIterator[None]:
        lock = self._locks.get(owner_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[owner_id] = lock
        self._holders[owner_id] = self._holders.get(owner_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[owner_id] -= 1
            if self._holders[owner_id] == 0:
                del self._holders[owner_id]
                del self._locks[owner_id]

    def __len__(self) -> int:
        return len(self._locks)


lecture_owner_locks = OwnerLockRegistry()
