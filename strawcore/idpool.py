"""Allocation of small integer identifiers with reuse of freed ones."""

from __future__ import annotations

import heapq


class IDPool:
    """Hands out identifiers counting up from zero, reusing the smallest freed one first."""

    __slots__ = ("_next", "_free_heap", "_free_set")

    def __init__(self) -> None:
        self._next = 0
        self._free_heap: list[int] = []
        self._free_set: set[int] = set()

    def allocate(self) -> int:
        """Return the smallest freed identifier, or a fresh one when none is free."""
        if not self._free_heap:
            ident = self._next
            self._next += 1
            return ident
        ident = heapq.heappop(self._free_heap)
        self._free_set.discard(ident)
        return ident

    def free(self, ident: int) -> None:
        """Make ``ident`` available again; freeing it twice has no further effect."""
        if ident not in self._free_set:
            self._free_set.add(ident)
            heapq.heappush(self._free_heap, ident)

    def __repr__(self) -> str:
        return f"IDPool(next={self._next}, free={sorted(self._free_set)})"