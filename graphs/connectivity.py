"""
Connected and strongly connected components.

Functions:
    connected_components(graph)             - DFS labelling (undirected graphs)
    connected_components_union_find(graph)  - Union-find labelling (undirected graphs)
    component_groups(labels)                - Canonical partition from a labelling
    is_connected(graph)                     - Single component check
    strongly_connected_components(graph)    - Kosaraju's two-pass algorithm (directed graphs)

Labellings map each vertex to a component id. Ids are arbitrary; two
labellings describe the same components iff their component_groups are equal.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import TypeVar

from .graph import Graph
from .traversal import DepthFirstSearch, Discover, depth_first_postorder
from .types import Vertex
from .union_find import UnionFind

logger = logging.getLogger(__name__)

L = TypeVar("L")


def _label_walks(search: DepthFirstSearch, roots: Iterable[Vertex]) -> dict[Vertex, int]:
    """Gives every vertex discovered by the walk from the n-th fresh root the label n."""
    labels: dict[Vertex, int] = {}
    component = 0
    for root in roots:
        if root in search.visited:
            continue
        for event in search.walk(root):
            if isinstance(event, Discover):
                labels[event.vertex] = component
        component += 1
    return labels


def connected_components(graph: Graph) -> dict[Vertex, int]:
    """
    Labels connected components with one depth-first walk per unvisited vertex.

    The graph is read as undirected: every edge (u, v) is expected to come
    with its reverse (v, u).

    Returns:
        Mapping from each vertex to its component id, ids numbered 0, 1, ...
        in discovery order.
    """
    labels = _label_walks(DepthFirstSearch(graph), graph.vertices())
    logger.debug(f"Found {len(set(labels.values()))} connected component(s) by DFS")
    return labels


def connected_components_union_find(graph: Graph) -> dict[Vertex, Vertex]:
    """
    Labels connected components by union of every edge's endpoints.

    Edge direction is ignored, so on a graph built from symmetric edge pairs
    this matches connected_components.

    Returns:
        Mapping from each vertex to the representative vertex of its component.
    """
    uf = UnionFind(graph.vertices())
    for edge in graph.edges():
        uf.union(edge.source, edge.destination)

    logger.debug(f"Found {uf.component_count()} connected component(s) by union-find")
    return {vertex: uf.find(vertex) for vertex in graph.vertices()}


def component_groups(labels: Mapping[Vertex, L]) -> frozenset[frozenset[Vertex]]:
    """Turns a labelling into the partition of vertices it induces."""
    groups: dict[L, set[Vertex]] = {}
    for vertex, label in labels.items():
        groups.setdefault(label, set()).add(vertex)
    return frozenset(frozenset(group) for group in groups.values())


def is_connected(graph: Graph) -> bool:
    """True if the graph, read as undirected, has at most one component."""
    return len(set(connected_components_union_find(graph).values())) <= 1


def strongly_connected_components(graph: Graph) -> dict[Vertex, int]:
    """
    Labels strongly connected components with Kosaraju's algorithm.

    Pass 1 records the DFS finish order of the graph. Pass 2 walks the
    transposed graph, starting walks in reverse finish order; each walk of
    pass 2 covers exactly one strongly connected component.

    The last vertex to finish in pass 1 belongs to a source component of the
    condensation graph. Transposition turns the edges leaving that component
    into incoming ones, so the pass 2 walk started there cannot leave it. The
    same holds for every later walk once the earlier components are visited.

    Returns:
        Mapping from each vertex to its component id, ids numbered 0, 1, ...
        in the order pass 2 finds them.
    """
    finish_order = list(depth_first_postorder(graph))

    search = DepthFirstSearch(graph.reversed())
    labels = _label_walks(search, reversed(finish_order))
    logger.debug(f"Found {len(set(labels.values()))} strongly connected component(s)")
    return labels


__all__ = [
    "connected_components",
    "connected_components_union_find",
    "component_groups",
    "is_connected",
    "strongly_connected_components",
]
