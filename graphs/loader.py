"""
Module used to build graphs from JSON documents

Document layout:
    {
        "undirected": false,
        "vertices": [0, 1, 2],
        "edges": [[0, 1, 4], [1, 2]]
    }

"vertices" lists isolated vertices and may be omitted. Each edge is
[source, destination] or [source, destination, weight]. Undirected documents
get both directions of every edge.
"""

import json
from typing import NotRequired, TypedDict

from .constants import DEFAULT_WEIGHT
from .graph import Graph


class GraphData(TypedDict):
    edges: list[list[int | float]]
    vertices: NotRequired[list[int]]
    undirected: NotRequired[bool]


def _is_vertex(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_weight(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def graph_from_dict(data: GraphData) -> Graph:
    if not isinstance(data, dict):
        raise ValueError(f"Graph document must be an object, got {data!r}")
    if not isinstance(data.get("edges"), list):
        raise ValueError("Graph document needs an 'edges' list")

    vertices = data.get("vertices", [])
    if not isinstance(vertices, list) or not all(_is_vertex(v) for v in vertices):
        raise ValueError(f"Graph 'vertices' must be a list of integers, got {vertices!r}")

    undirected = bool(data.get("undirected", False))
    graph = Graph(vertices)

    for entry in data["edges"]:
        if not isinstance(entry, list) or len(entry) not in (2, 3):
            raise ValueError(f"Edge must be [source, destination(, weight)], got {entry!r}")
        source, destination = entry[0], entry[1]
        weight = entry[2] if len(entry) == 3 else DEFAULT_WEIGHT
        if not _is_vertex(source) or not _is_vertex(destination):
            raise ValueError(f"Edge endpoints must be integers, got {entry!r}")
        if not _is_weight(weight):
            raise ValueError(f"Edge weight must be a number, got {entry!r}")
        if undirected:
            graph.add_undirected_edge(source, destination, weight)
        else:
            graph.add_edge(source, destination, weight)

    return graph


def load_graph(path: str) -> Graph:
    with open(path, "r") as file:
        data = json.load(file)
    return graph_from_dict(data)


__all__ = ["GraphData", "graph_from_dict", "load_graph"]
