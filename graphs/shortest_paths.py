"""
Shortest path algorithms.

Single source:
    bfs_distances(graph, source)              - Hop counts, edge weights ignored
    bfs_shortest_path(graph, source, target)  - Level-order search stopping at target
    dijkstra(graph, source)                   - Non-negative weights
    bellman_ford(graph, source)               - Any weights, detects negative cycles

All pairs:
    floyd_warshall(graph)                     - Any weights, detects negative cycles

Unreached vertices are at distance INFINITY. Since inf + w == inf for every
finite w, relaxing an edge out of an unreached vertex never improves anything.
"""

import heapq
import logging
from collections import deque

import numpy as np

from .constants import INFINITY
from .exceptions import NegativeWeightError
from .graph import Graph
from .results import (
    AllPairsShortestPaths,
    NegativeCycle,
    Path,
    ShortestPaths,
    Unreachable,
)
from .types import Vertex, Weight

logger = logging.getLogger(__name__)


# =============================================================================
# Breadth-first search
# =============================================================================


def _breadth_first(
    graph: Graph, source: Vertex, target: Vertex | None = None
) -> ShortestPaths:
    """
    Level-order search from source, stopping once target is dequeued.

    Every vertex of level k is dequeued before any vertex of level k + 1, so
    the level a vertex is first reached at is its hop distance.
    """
    distances: dict[Vertex, Weight] = {vertex: INFINITY for vertex in graph.vertices()}
    distances[source] = 0
    predecessors: dict[Vertex, Vertex] = {}

    queue = deque([source])
    level = 0
    while queue:
        for _ in range(len(queue)):
            current = queue.popleft()
            if current == target:
                return ShortestPaths(source, distances, predecessors)
            for edge in graph.edges_from(current):
                if distances[edge.destination] == INFINITY:
                    distances[edge.destination] = level + 1
                    predecessors[edge.destination] = current
                    queue.append(edge.destination)
        level += 1

    return ShortestPaths(source, distances, predecessors)


def bfs_distances(graph: Graph, source: Vertex) -> ShortestPaths:
    """Hop distances from source to every vertex."""
    graph.require_vertex(source)
    return _breadth_first(graph, source)


def bfs_shortest_path(graph: Graph, source: Vertex, target: Vertex) -> Path | Unreachable:
    """Fewest-edges path from source to target."""
    graph.require_vertex(source)
    graph.require_vertex(target)
    return _breadth_first(graph, source, target).path_to(target)


# =============================================================================
# Dijkstra
# =============================================================================


def dijkstra(graph: Graph, source: Vertex) -> ShortestPaths:
    """
    Dijkstra's single-source shortest paths.

    A min-heap orders (distance, vertex) pairs, smaller vertex first on equal
    distances. Popping a vertex relaxes its outgoing edges and pushes every
    improved destination again; entries made stale by a later improvement are
    skipped when popped.

    Raises:
        NegativeWeightError: If any edge has a negative weight.
    """
    graph.require_vertex(source)
    for edge in graph.edges():
        if edge.weight < 0:
            raise NegativeWeightError(
                f"Dijkstra requires non-negative weights, got {edge}"
            )

    distances: dict[Vertex, Weight] = {vertex: INFINITY for vertex in graph.vertices()}
    distances[source] = 0
    predecessors: dict[Vertex, Vertex] = {}
    queue: list[tuple[Weight, Vertex]] = [(0, source)]

    while queue:
        distance, vertex = heapq.heappop(queue)
        if distance > distances[vertex]:
            continue

        for edge in graph.edges_from(vertex):
            candidate = distance + edge.weight
            if candidate < distances[edge.destination]:
                distances[edge.destination] = candidate
                predecessors[edge.destination] = vertex
                heapq.heappush(queue, (candidate, edge.destination))

    return ShortestPaths(source, distances, predecessors)


# =============================================================================
# Bellman-Ford
# =============================================================================


def _trace_negative_cycle(
    predecessors: dict[Vertex, Vertex], relaxed: Vertex
) -> tuple[Vertex, ...]:
    """
    Extracts the cycle behind a vertex still relaxable after |V| - 1 rounds.

    Walking predecessors back from such a vertex runs into a cycle of the
    predecessor graph, and every such cycle has negative weight. The cycle is
    read off by walking once around it from the first repeated vertex.
    """
    seen: set[Vertex] = set()
    vertex = relaxed
    while vertex not in seen:
        seen.add(vertex)
        vertex = predecessors[vertex]

    cycle = [vertex]
    current = predecessors[vertex]
    while current != vertex:
        cycle.append(current)
        current = predecessors[current]
    cycle.append(vertex)
    cycle.reverse()
    return tuple(cycle)


def bellman_ford(graph: Graph, source: Vertex) -> ShortestPaths | NegativeCycle:
    """
    Bellman-Ford single-source shortest paths.

    A shortest path has at most |V| - 1 edges, so |V| - 1 rounds of relaxing
    every edge settle all distances; rounds stop early once one changes
    nothing. An edge still relaxable afterwards lies behind a negative cycle
    reachable from source.

    Returns:
        The shortest path tree, or NegativeCycle holding the cycle found.
    """
    graph.require_vertex(source)
    distances: dict[Vertex, Weight] = {vertex: INFINITY for vertex in graph.vertices()}
    distances[source] = 0
    predecessors: dict[Vertex, Vertex] = {}
    edges = tuple(graph.edges())

    for round_index in range(len(graph) - 1):
        changed = False
        for edge in edges:
            candidate = distances[edge.source] + edge.weight
            if candidate < distances[edge.destination]:
                distances[edge.destination] = candidate
                predecessors[edge.destination] = edge.source
                changed = True
        if not changed:
            logger.debug(f"Bellman-Ford settled after {round_index + 1} round(s)")
            break

    for edge in edges:
        if distances[edge.source] + edge.weight < distances[edge.destination]:
            predecessors[edge.destination] = edge.source
            cycle = _trace_negative_cycle(predecessors, edge.destination)
            logger.debug(f"Negative cycle reachable from {source}: {cycle}")
            return NegativeCycle(source, cycle)

    return ShortestPaths(source, distances, predecessors)


# =============================================================================
# Floyd-Warshall
# =============================================================================


def floyd_warshall(graph: Graph) -> AllPairsShortestPaths | NegativeCycle:
    """
    Floyd-Warshall all-pairs shortest paths.

    For each intermediate vertex k in turn, every pair (i, j) takes the path
    through k when dist[i, k] + dist[k, j] < dist[i, j]. The row of k is
    computed as a whole with numpy; row k and column k do not change during
    step k unless a negative cycle runs through k, which the diagonal check
    reports anyway.

    last[i, j] holds the vertex before j on the best path from i; taking the
    path through k copies last[k, j].

    Returns:
        The distance and path tables, or NegativeCycle listing the vertices
        whose distance to themselves ended up negative.
    """
    vertices = graph.vertices()
    n = len(vertices)
    indices = np.arange(n)

    distances = graph.to_weight_matrix()
    last = np.where(np.isfinite(distances), indices[:, None], -1)
    distances[indices, indices] = np.minimum(distances[indices, indices], 0)
    last[indices, indices] = indices

    for k in range(n):
        through_k = distances[:, k, None] + distances[None, k, :]
        improved = through_k < distances
        distances = np.where(improved, through_k, distances)
        last = np.where(improved, last[None, k, :], last)

    negative = np.flatnonzero(np.diagonal(distances) < 0)
    if negative.size:
        witness = tuple(vertices[i] for i in negative)
        logger.debug(f"Negative cycle through {witness}")
        return NegativeCycle(None, witness)

    integral = all(isinstance(edge.weight, int) for edge in graph.edges())
    return AllPairsShortestPaths(vertices, distances, last, integral)


__all__ = [
    "bfs_distances",
    "bfs_shortest_path",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
]
