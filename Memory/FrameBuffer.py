# Memory/frame_buffer.py
from __future__ import annotations
from typing import Any, Iterator, List

from Logger.Errors import CapacityExceeded


class FrameBuffer:
    """
    Append-only sequence with a hard capacity.
    - add() appends, raises CapacityExceeded once len == capacity
    - storage grows with use, nothing is pre-allocated
    """
    def __init__(self, capacity: int, kind: str = "frames"):
        self.capacity = int(capacity)
        if self.capacity < 0:
            raise ValueError(f"FrameBuffer capacity must be >= 0, got {capacity}")
        self.kind = kind
        self.items: List[Any] = []

    def __len__(self): return len(self.items)
    def __iter__(self) -> Iterator[Any]: return iter(self.items)
    def __getitem__(self, i): return self.items[i]

    @property
    def full(self) -> bool:
        return len(self) >= self.capacity

    def add(self, item: Any) -> int:
        if self.full:
            raise CapacityExceeded(self.kind, self.capacity)
        self.items.append(item)
        return len(self.items) - 1
