"""
Minimum and maximum spanning trees of undirected weighted graphs.

Functions:
    kruskal(graph, maximum)         - Sorted edges, union-find loop avoidance
    prim(graph, maximum, root)      - Growing tree with a lazy priority queue
    spanning_tree(graph, method)    - Dispatch on SpanningMethod

The input holds each undirected edge as a pair (u, v), (v, u) of equal
weight. A connected input gives a SpanningTree with |V| - 1 edges; a
disconnected one gives a SpanningForest, one tree per component.

Ties between equal weights are broken on (source, destination) so that both
algorithms are deterministic.
"""

import heapq
import logging
from collections.abc import Callable, Sequence
from enum import Enum
from typing import TypeAlias

from .graph import Graph
from .results import SpanningForest, SpanningTree
from .types import Edge, Vertex, Weight
from .union_find import UnionFind

logger = logging.getLogger(__name__)

SpanningResult: TypeAlias = SpanningTree | SpanningForest


class SpanningMethod(Enum):
    KRUSKAL = "kruskal"
    PRIM = "prim"


def _edge_key(maximum: bool) -> Callable[[Edge], tuple[Weight, Vertex, Vertex]]:
    """Strict ordering key: lightest first, or heaviest first when maximum."""
    sign = -1 if maximum else 1
    return lambda edge: (sign * edge.weight, edge.source, edge.destination)


def _candidate_edges(graph: Graph, maximum: bool) -> list[Edge]:
    """
    One edge per unordered endpoint pair, the best of any parallel edges.

    Self-loops never join two trees and are left out.
    """
    key = _edge_key(maximum)
    best: dict[tuple[Vertex, Vertex], Edge] = {}
    for edge in graph.edges():
        if edge.source == edge.destination:
            continue
        pair = edge.endpoints()
        if pair not in best or key(edge) < key(best[pair]):
            best[pair] = edge
    return sorted(best.values(), key=key)


def _spanning_result(
    graph: Graph, accepted: Sequence[Edge], tree_count: int
) -> SpanningResult:
    """Builds the output graph, holding each accepted edge in both directions."""
    tree = Graph(graph.vertices())
    for edge in accepted:
        tree.add_undirected_edge(edge.source, edge.destination, edge.weight)
    total_weight = sum(edge.weight for edge in accepted)

    if tree_count <= 1:
        return SpanningTree(tree, tuple(accepted), total_weight)

    logger.debug(f"Input is disconnected: spanning forest of {tree_count} trees")
    return SpanningForest(tree, tuple(accepted), total_weight, tree_count)


def kruskal(graph: Graph, *, maximum: bool = False) -> SpanningResult:
    """
    Kruskal's spanning tree.

    Edges deduplicated by endpoint pair are examined by weight (ascending,
    or descending when maximum). An edge is accepted iff its endpoints are
    not yet connected, as accepting it otherwise would close a loop.
    """
    uf = UnionFind(graph.vertices())
    accepted: list[Edge] = []
    target = len(graph) - 1

    for edge in _candidate_edges(graph, maximum):
        if len(accepted) == target:
            break
        if uf.union(edge.source, edge.destination):
            logger.debug(f"Kruskal accepts {edge}")
            accepted.append(edge)

    return _spanning_result(graph, accepted, uf.component_count())


def prim(
    graph: Graph, *, maximum: bool = False, root: Vertex | None = None
) -> SpanningResult:
    """
    Prim's spanning tree.

    The tree grows from root (the first vertex by default). A priority queue
    holds the edges leaving the tree; the best one whose destination is not in
    the tree yet is accepted and the destination's edges are pushed. Entries
    whose destination joined the tree after they were pushed are discarded
    when popped.

    When the queue runs dry with vertices left over, growth restarts from the
    next vertex outside the tree and the result is a forest.
    """
    starts = graph.vertices()
    if root is not None:
        graph.require_vertex(root)
        starts = (root, *starts)

    key = _edge_key(maximum)
    in_tree: set[Vertex] = set()
    accepted: list[Edge] = []
    tree_count = 0

    def push_edges(
        frontier: list[tuple[tuple[Weight, Vertex, Vertex], Edge]], vertex: Vertex
    ) -> None:
        for edge in graph.edges_from(vertex):
            if edge.destination not in in_tree:
                heapq.heappush(frontier, (key(edge), edge))

    for start in starts:
        if start in in_tree:
            continue
        tree_count += 1
        in_tree.add(start)
        frontier: list[tuple[tuple[Weight, Vertex, Vertex], Edge]] = []
        push_edges(frontier, start)

        while frontier:
            _, edge = heapq.heappop(frontier)
            if edge.destination in in_tree:
                continue
            logger.debug(f"Prim accepts {edge}")
            accepted.append(edge)
            in_tree.add(edge.destination)
            push_edges(frontier, edge.destination)

    return _spanning_result(graph, accepted, tree_count)


def spanning_tree(
    graph: Graph,
    *,
    method: SpanningMethod = SpanningMethod.KRUSKAL,
    maximum: bool = False,
) -> SpanningResult:
    match method:
        case SpanningMethod.KRUSKAL:
            return kruskal(graph, maximum=maximum)
        case SpanningMethod.PRIM:
            return prim(graph, maximum=maximum)
        case _:
            raise ValueError(f"Unknown spanning tree method: {method}")


__all__ = [
    "SpanningMethod",
    "SpanningResult",
    "kruskal",
    "prim",
    "spanning_tree",
]
