"""Bounded kill history with a rotating read cursor."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .entity import KillRingEntity

DEFAULT_CAPACITY = 60


class KillRing:
    """Most recent entry first; ``pop_next`` walks toward older entries.

    Pushing beyond ``capacity`` silently drops the oldest entry. With
    ``wrap=True`` the cursor cycles back to the most recent entry after the
    oldest one; with ``wrap=False`` it stops there and ``pop_next`` returns
    ``None``.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, *, wrap: bool = True) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.wrap = wrap
        self._entries: List[KillRingEntity] = []
        self._pointer = 0

    def push(self, entity: KillRingEntity) -> None:
        self._entries.insert(0, entity)
        del self._entries[self.capacity :]
        self._pointer = 0

    def get_top(self) -> Optional[KillRingEntity]:
        """Entry under the read cursor; the most recent one until ``pop_next``."""

        if not self._entries:
            return None
        return self._entries[self._pointer]

    def pop_next(self) -> Optional[KillRingEntity]:
        if not self._entries:
            return None
        following = self._pointer + 1
        if following >= len(self._entries):
            if not self.wrap:
                return None
            following = 0
        self._pointer = following
        return self._entries[self._pointer]

    def entries(self) -> Iterator[KillRingEntity]:
        return iter(list(self._entries))

    def clear(self) -> None:
        self._entries.clear()
        self._pointer = 0

    def __len__(self) -> int:
        return len(self._entries)
