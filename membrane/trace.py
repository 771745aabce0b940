"""
synapse_sim module: membrane/trace.py

Fixed-length voltage history for the graph:
- oldest sample first
- every append drops the oldest sample, so the length never changes
"""

from __future__ import annotations
from collections import deque
from typing import Iterator, List


class VoltageTrace:
    def __init__(self, capacity: int, initial: float):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._samples: deque[float] = deque([float(initial)] * capacity, maxlen=capacity)

    def append(self, voltage: float) -> None:
        # maxlen deque evicts from the left
        self._samples.append(float(voltage))

    def fill(self, voltage: float) -> None:
        self._samples.extend([float(voltage)] * self.capacity)

    @property
    def latest(self) -> float:
        return self._samples[-1]

    def as_list(self) -> List[float]:
        return list(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[float]:
        return iter(self._samples)

    def __getitem__(self, index: int) -> float:
        return self._samples[index]

    def __repr__(self) -> str:
        return f"VoltageTrace(capacity={self.capacity}, latest={self.latest:.1f})"
