"""Dijkstra shortest paths over weighted graphs, with an indexed min-heap and an instruction-driven command line."""

__version__ = "0.1.0"
__all__ = ["heap", "graph", "instructions", "cli"]