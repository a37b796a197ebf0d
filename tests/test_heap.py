import math
import random

import pytest

from shortpath.heap import Color, HeapError, MinHeap, Vertex


def _vertices(keys):
    return [Vertex(index=i, key=k) for i, k in enumerate(keys, start=1)]


def _drain(heap):
    out = []
    while len(heap):
        out.append(heap.extract_min())
    return out


def test_insert_then_extract_yields_sorted_keys():
    rng = random.Random(7)
    keys = [rng.uniform(-50, 50) for _ in range(40)]
    heap = MinHeap(len(keys))
    for vertex in _vertices(keys):
        heap.insert(vertex)
    assert len(heap) == len(keys)
    assert [v.key for v in _drain(heap)] == sorted(keys)


def test_build_then_extract_yields_sorted_keys():
    rng = random.Random(11)
    keys = [rng.randint(0, 20) for _ in range(33)]
    heap = MinHeap(50)
    heap.build(_vertices(keys))
    assert len(heap) == len(keys)
    assert [v.key for v in _drain(heap)] == sorted(keys)


def test_positions_track_slots_after_build():
    vertices = _vertices([5.0, 3.0, 8.0, 1.0, 9.0])
    heap = MinHeap(5)
    heap.build(vertices)
    assert sorted(v.position for v in vertices) == [1, 2, 3, 4, 5]
    assert min(vertices, key=lambda v: v.key).position == 1


def test_extracted_vertex_leaves_heap():
    vertices = _vertices([2.0, 1.0])
    heap = MinHeap(2)
    for vertex in vertices:
        heap.insert(vertex)
    first = heap.extract_min()
    assert first is vertices[1]
    assert first.position == 0
    assert len(heap) == 1
    with pytest.raises(HeapError):
        heap.decrease_key(first, 0.0)


def test_decrease_key_moves_vertex_to_front():
    vertices = _vertices([10.0, 20.0, 30.0, 40.0])
    heap = MinHeap(4)
    for vertex in vertices:
        heap.insert(vertex)
    heap.decrease_key(vertices[3], 5.0)
    assert vertices[3].key == 5.0
    assert heap.extract_min() is vertices[3]
    assert [v.index for v in _drain(heap)] == [1, 2, 3]


def test_decrease_key_to_equal_value_is_allowed():
    vertex = Vertex(index=1, key=3.0)
    heap = MinHeap(1)
    heap.insert(vertex)
    heap.decrease_key(vertex, 3.0)
    assert heap.extract_min() is vertex


def test_decrease_key_rejects_larger_key():
    vertex = Vertex(index=1, key=3.0)
    heap = MinHeap(1)
    heap.insert(vertex)
    with pytest.raises(HeapError):
        heap.decrease_key(vertex, 4.0)
    assert vertex.key == 3.0


def test_decrease_key_rejects_foreign_vertex():
    heap = MinHeap(2)
    heap.insert(Vertex(index=1, key=1.0))
    stranger = Vertex(index=2, key=2.0, position=1)
    with pytest.raises(HeapError):
        heap.decrease_key(stranger, 0.0)


def test_overflow_raises():
    heap = MinHeap(1)
    heap.insert(Vertex(index=1, key=1.0))
    with pytest.raises(HeapError):
        heap.insert(Vertex(index=2, key=2.0))
    assert len(heap) == 1


def test_underflow_raises():
    with pytest.raises(HeapError):
        MinHeap(3).extract_min()


def test_build_over_capacity_raises():
    with pytest.raises(HeapError):
        MinHeap(2).build(_vertices([1.0, 2.0, 3.0]))


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        MinHeap(-1)


def test_infinite_keys_sort_last():
    vertices = [Vertex(index=1), Vertex(index=2, key=1.0, color=Color.GRAY)]
    heap = MinHeap(2)
    for vertex in vertices:
        heap.insert(vertex)
    first, second = _drain(heap)
    assert first.index == 2
    assert math.isinf(second.key)