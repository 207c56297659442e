"""
Bounded linear undo/redo history over grid snapshots
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .grid_state import GridState

MAX_HISTORY = 20


@dataclass(frozen=True)
class History:
    """
    Ordered snapshots plus a cursor. Every transition returns a new History;
    undo/redo return None when there is nowhere to move.
    """
    entries: Tuple[GridState, ...] = ()
    cursor: int = -1
    capacity: int = MAX_HISTORY

    @classmethod
    def start(cls, state: GridState, capacity: int = MAX_HISTORY) -> 'History':
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        return cls(entries=(state,), cursor=0, capacity=capacity)

    @property
    def current(self) -> GridState:
        if self.cursor < 0:
            raise IndexError("History is empty")
        return self.entries[self.cursor]

    @property
    def can_undo(self) -> bool:
        return self.cursor > 0

    @property
    def can_redo(self) -> bool:
        return self.cursor < len(self.entries) - 1

    def __len__(self):
        return len(self.entries)

    def push(self, state: GridState) -> 'History':
        # anything after the cursor is discarded, then the oldest entries
        # are evicted past capacity
        entries = self.entries[:self.cursor + 1] + (state,)
        if len(entries) > self.capacity:
            entries = entries[len(entries) - self.capacity:]
        return History(entries=entries, cursor=len(entries) - 1, capacity=self.capacity)

    def undo(self) -> Optional['History']:
        if not self.can_undo:
            return None
        return History(entries=self.entries, cursor=self.cursor - 1, capacity=self.capacity)

    def redo(self) -> Optional['History']:
        if not self.can_redo:
            return None
        return History(entries=self.entries, cursor=self.cursor + 1, capacity=self.capacity)
