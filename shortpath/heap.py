"""Vertices and the indexed min-heap used by the shortest-path search."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Color(Enum):
    """Search state of a vertex."""

    WHITE = "white"
    GRAY = "gray"
    BLACK = "black"


@dataclass(eq=False)
class Vertex:
    """A graph vertex carrying the search state.

    ``key`` is the length of the best path found so far, ``pi`` the index of
    the predecessor on that path (``None`` when there is none) and
    ``position`` the 1-based slot of the vertex in a heap (0 when absent).
    """

    index: int
    color: Color = Color.WHITE
    key: float = math.inf
    pi: int | None = None
    position: int = 0


class HeapError(Exception):
    """Raised on heap overflow, underflow or an invalid key update."""


class MinHeap:
    """A bounded binary min-heap of vertices ordered by ``key``.

    Each vertex records its own position, so ``decrease_key`` runs in
    logarithmic time without searching the heap.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Vertex] = []

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, vertex: Vertex) -> None:
        """Add a vertex, keeping the heap order."""
        if len(self._items) >= self.capacity:
            raise HeapError("heap overflow")
        self._items.append(vertex)
        vertex.position = len(self._items)
        self._sift_up(len(self._items) - 1)

    def extract_min(self) -> Vertex:
        """Remove and return the vertex with the smallest key."""
        if not self._items:
            raise HeapError("heap underflow")
        smallest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            last.position = 1
            self._sift_down(0)
        smallest.position = 0
        return smallest

    def decrease_key(self, vertex: Vertex, key: float) -> None:
        """Lower the key of a vertex already in the heap."""
        if not self._holds(vertex):
            raise HeapError(f"vertex {vertex.index} is not in the heap")
        if key > vertex.key:
            raise HeapError("new key is larger than current key")
        vertex.key = key
        self._sift_up(vertex.position - 1)

    def build(self, vertices: Iterable[Vertex]) -> None:
        """Replace the contents with ``vertices`` and restore heap order."""
        items = list(vertices)
        if len(items) > self.capacity:
            raise HeapError("heap overflow")
        self._items = items
        for position, vertex in enumerate(items, start=1):
            vertex.position = position
        for i in reversed(range(len(items) // 2)):
            self._sift_down(i)

    def _holds(self, vertex: Vertex) -> bool:
        position = vertex.position
        return 1 <= position <= len(self._items) and self._items[position - 1] is vertex

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]
        items[i].position = i + 1
        items[j].position = j + 1

    def _sift_up(self, i: int) -> None:
        items = self._items
        while i > 0:
            parent = (i - 1) // 2
            if items[parent].key <= items[i].key:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left, right = 2 * i + 1, 2 * i + 2
            smallest = i
            if left < size and items[left].key < items[smallest].key:
                smallest = left
            if right < size and items[right].key < items[smallest].key:
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest