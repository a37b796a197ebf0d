"""Graph loading, Dijkstra's shortest paths and result formatting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

from .heap import Color, MinHeap, Vertex

GRAPH_TYPES = ("DirectedGraph", "UndirectedGraph")


@dataclass(frozen=True)
class Edge:
    """A weighted edge from ``u`` to ``v`` with its input index."""

    index: int
    u: int
    v: int
    w: float


@dataclass
class Graph:
    """Vertices numbered from 1 and their adjacency lists."""

    vertices: dict[int, Vertex]
    adjacency: dict[int, list[Edge]]
    edge_count: int

    def format_adjacency(self) -> str:
        """Render every adjacency list, one line per vertex."""
        lines = []
        for index in sorted(self.vertices):
            entries = "".join(
                f"-->[{edge.u} {edge.v}: {edge.w:.2f}]" for edge in self.adjacency[index]
            )
            lines.append(f"ADJ[{index}]:{entries}\n")
        return "".join(lines)


def _attach(edges: list[Edge], edge: Edge, append: bool) -> None:
    if append:
        edges.append(edge)
    else:
        edges.insert(0, edge)


def parse_graph(text: str, graph_type: str, append: bool) -> Graph:
    """Build a graph from ``n m`` followed by ``m`` lines ``index u v w``.

    With ``append`` false each new edge goes to the front of its list,
    otherwise to the back. An undirected graph stores every edge twice.
    """
    if graph_type not in GRAPH_TYPES:
        raise ValueError(f"unknown graph type: {graph_type!r}")
    undirected = graph_type == "UndirectedGraph"

    tokens = text.split()
    try:
        n, m = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError) as exc:
        raise ValueError("graph must start with vertex and edge counts") from exc
    if n < 0 or m < 0:
        raise ValueError("vertex and edge counts must not be negative")
    fields = tokens[2 : 2 + 4 * m]
    if len(fields) < 4 * m:
        raise ValueError(f"expected {m} edges")

    vertices = {i: Vertex(index=i) for i in range(1, n + 1)}
    adjacency: dict[int, list[Edge]] = {i: [] for i in vertices}

    it = iter(fields)
    for raw_index, raw_u, raw_v, raw_w in zip(it, it, it, it):
        try:
            index, u, v, w = int(raw_index), int(raw_u), int(raw_v), float(raw_w)
        except ValueError as exc:
            raise ValueError(f"malformed edge: {raw_index} {raw_u} {raw_v} {raw_w}") from exc
        if u not in vertices or v not in vertices:
            raise ValueError(f"edge {index} has an endpoint outside 1..{n}")
        _attach(adjacency[u], Edge(index, u, v, w), append)
        if undirected:
            _attach(adjacency[v], Edge(index, v, u, w), append)

    return Graph(vertices=vertices, adjacency=adjacency, edge_count=m)


def read_graph(path: str | Path, graph_type: str, append: bool) -> Graph:
    """Read a graph file; see ``parse_graph`` for the format."""
    return parse_graph(Path(path).read_text(), graph_type, append)


def dijkstra(graph: Graph, source: int, destination: int | None = None) -> dict[int, Vertex]:
    """Compute shortest paths from ``source`` into the graph's vertices.

    The search stops once ``destination`` is extracted; with ``None`` it
    covers every reachable vertex. Returns the updated vertices.
    """
    vertices = graph.vertices
    if source not in vertices:
        raise ValueError(f"source {source} is not a vertex")
    for vertex in vertices.values():
        vertex.key = math.inf
        vertex.pi = None
        vertex.color = Color.WHITE
        vertex.position = 0

    heap = MinHeap(len(vertices))
    start = vertices[source]
    start.key = 0.0
    start.color = Color.GRAY
    heap.insert(start)

    while heap:
        u = heap.extract_min()
        u.color = Color.BLACK
        if destination is not None and u.index == destination:
            break
        for edge in graph.adjacency[u.index]:
            v = vertices[edge.v]
            new_key = u.key + edge.w
            if v.color is Color.WHITE:
                v.key = new_key
                v.pi = u.index
                v.color = Color.GRAY
                heap.insert(v)
            elif v.color is Color.GRAY and new_key < v.key:
                v.pi = u.index
                heap.decrease_key(v, new_key)
    return vertices


def _lookup(vertices: dict[int, Vertex], index: int) -> Vertex:
    try:
        return vertices[index]
    except KeyError:
        raise ValueError(f"{index} is not a vertex") from None


def _no_path(source: int, target: int) -> str:
    return f"There is no path from {source} to {target}.\n"


def format_path(vertices: dict[int, Vertex], source: int, target: int) -> str:
    """Describe the computed path from ``source`` to ``target``."""
    start = _lookup(vertices, source)
    end = _lookup(vertices, target)
    if end.key == math.inf:
        return _no_path(source, target)

    trail = []
    current: int | None = target
    while current is not None and current != source:
        trail.append(current)
        current = vertices[current].pi
    trail.append(source)

    parts = [f"The shortest path from {source} to {target} is:\n", f"[{source}:{start.key:8.2f}]"]
    parts.extend(
        f"-->[{index}:{vertices[index].key:8.2f}]"
        for index in reversed(trail)
        if index != source
    )
    parts.append(".\n")
    return "".join(parts)


def format_length(vertices: dict[int, Vertex], source: int, target: int) -> str:
    """Describe the length of the computed path from ``source`` to ``target``."""
    end = _lookup(vertices, target)
    if end.key == math.inf:
        return _no_path(source, target)
    return f"The length of the shortest path from {source} to {target} is: {end.key:8.2f}\n"