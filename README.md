# shortpath

Shortest paths over weighted directed or undirected graphs. The paths are
computed with Dijkstra's algorithm over an indexed binary min-heap.

## Installing

```
pip install .
```

## Running

```
shortpath <InputFile> <GraphType> <Flag>
```

You can also run it as `python -m shortpath.cli <InputFile> <GraphType> <Flag>`.

- `InputFile` is the graph file.
- `GraphType` is either `DirectedGraph` or `UndirectedGraph`. An undirected
  graph stores each edge in both directions.
- `Flag` is `0` to put each new edge at the front of its adjacency list. It is
  `1` to add each new edge at the end. Only the leading integer of the
  argument is read.

The command prints a message on standard error and exits with status 1 in
these cases:

- there is the wrong number of arguments;
- the graph type or the flag is invalid;
- the graph file cannot be read or is malformed.

### Graph file

The file is a sequence of whitespace-separated numbers:

- first, the number of vertices `n` and the number of edges `m`;
- then `m` groups of four, `index u v w`, one group per edge.

The four fields of an edge are the edge number, the tail vertex, the head
vertex and the weight. Vertices are numbered from 1 to `n`. An edge whose
endpoint lies outside that range is an error.

```
4 5
1 1 2 3.0
2 1 3 1.5
3 3 2 1.0
4 2 4 2.0
5 3 4 5.0
```

### Instructions

Instructions are read from standard input, one per line:

| Instruction             | Effect                                                         |
|-------------------------|----------------------------------------------------------------|
| `PrintADJ`              | print every adjacency list                                     |
| `SingleSource s`        | compute shortest paths from `s` to every vertex                |
| `SinglePair s t`        | compute shortest paths from `s`, stopping once `t` is settled  |
| `PrintPath s t`         | print the path from `s` to `t` found by the last computation   |
| `PrintLength s t`       | print the length to `t` found by the last computation          |
| `Stop`                  | end the run                                                    |

Reading stops at `Stop`, at the end of input, or at the first line that is
not a well-formed instruction. Text after the last argument of a line is
ignored.

`PrintPath` reports `Error: Invalid source for PrintPath` on standard error
when `s` is not the source of the last computation. A vertex number outside
the graph is reported on standard error, and reading goes on.

```
$ printf 'SingleSource 1\nPrintPath 1 4\nPrintLength 1 4\nStop\n' | shortpath graph.txt DirectedGraph 0
The shortest path from 1 to 4 is:
[1:    0.00]-->[3:    1.50]-->[2:    2.50]-->[4:    4.50].
The length of the shortest path from 1 to 4 is:     4.50
```

When the target has not been reached, both print commands give
`There is no path from s to t.`

## Using it from Python

```python
from shortpath.graph import parse_graph, dijkstra, format_path, format_length

text = "3 2\n1 1 2 1.0\n2 2 3 2.0\n"
graph = parse_graph(text, "DirectedGraph", append=False)
vertices = dijkstra(graph, 1, None)
print(format_path(vertices, 1, 3), end="")
print(format_length(vertices, 1, 3), end="")
print(graph.format_adjacency(), end="")
```

### Graphs

- `read_graph(path, graph_type, append)` loads a file in the format above.
- `parse_graph(text, graph_type, append)` reads the same format from a string.
- Both raise `ValueError` on malformed input.
- Both return a `Graph` with these attributes:
  - `vertices`, a dict from index to `Vertex`;
  - `adjacency`, a dict from index to a list of `Edge` objects;
  - `edge_count`.
- `dijkstra(graph, source, destination)` resets the search state of every
  vertex, runs the search, and returns the vertices. Each vertex holds its
  distance in `key` and its predecessor in `pi`.

### Heap and instructions

`shortpath.heap.MinHeap` is the indexed min-heap behind the search. It
supports these methods:

- `insert`;
- `extract_min`;
- `decrease_key`;
- `build`.

It raises `HeapError` in these cases:

- it overflows its capacity;
- it underflows;
- a key is raised instead of lowered;
- the vertex is not in the heap.

`shortpath.instructions.parse_instruction` parses a single line into an
`Instruction`. It returns `None` for an invalid line.
`shortpath.instructions.read_instructions` yields instructions until `Stop`,
until an invalid line, or until the end of input.

## Tests

```
pip install .[test]
pytest
```