"""Command-line entry point: load a graph and answer shortest-path queries."""

from __future__ import annotations

import re
import sys

from .graph import GRAPH_TYPES, dijkstra, format_length, format_path, read_graph
from .instructions import read_instructions

USAGE = "Usage: shortpath <InputFile> <GraphType> <Flag>"


def _error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Run the tool on ``argv``, reading instructions from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        _error(USAGE)
        return 1

    path, graph_type, raw_flag = args
    flag = _leading_int(raw_flag)
    if graph_type not in GRAPH_TYPES or flag not in (0, 1):
        _error("Invalid arguments")
        return 1

    try:
        graph = read_graph(path, graph_type, append=bool(flag))
    except (OSError, ValueError) as exc:
        _error(str(exc))
        return 1

    vertices = graph.vertices
    last_source: int | None = None
    out = sys.stdout

    for instruction in read_instructions(sys.stdin):
        command = instruction.command
        try:
            if command == "PrintADJ":
                out.write(graph.format_adjacency())
            elif command == "SingleSource":
                last_source = instruction.source
                vertices = dijkstra(graph, instruction.source)
            elif command == "SinglePair":
                last_source = instruction.source
                vertices = dijkstra(graph, instruction.source, instruction.target)
            elif command == "PrintPath":
                if instruction.source != last_source:
                    _error("Invalid source for PrintPath")
                    continue
                out.write(format_path(vertices, instruction.source, instruction.target))
            elif command == "PrintLength":
                out.write(format_length(vertices, instruction.source, instruction.target))
        except ValueError as exc:
            _error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())