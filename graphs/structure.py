"""
Structural properties of a graph: cycles, topological order, bipartiteness.

Functions:
    find_directed_cycle(graph)              - Back edge search, returns the cycle
    has_directed_cycle(graph)
    find_undirected_cycle(graph)            - Back edge search ignoring the edge back to the parent
    has_undirected_cycle(graph)
    has_undirected_cycle_union_find(graph)  - Union-find over deduplicated edges (undirected only)
    topological_sort(graph)                 - Reversed DFS postorder
    topological_sort_kahn(graph)            - Kahn's algorithm, ties broken on ascending vertex id
    two_coloring(graph)                     - Level-parity colouring, None if not bipartite
    is_bipartite(graph)

Cycles are returned closed: the first vertex is repeated at the end.
Both topological sorts return an empty tuple when the graph has a cycle.
"""

import heapq
import logging

from .constants import COLORS
from .graph import Graph
from .traversal import DepthFirstSearch, EdgeKind, Examine, breadth_first_levels
from .types import Color, Vertex
from .union_find import UnionFind

logger = logging.getLogger(__name__)


# =============================================================================
# Cycle detection
# =============================================================================


def _find_back_edge_cycle(graph: Graph, undirected: bool) -> tuple[Vertex, ...] | None:
    """
    Walks the whole graph and returns the cycle closed by the first back edge.

    A back edge v -> w points to an ancestor w of v still open on the DFS
    path, so w -> ... -> v -> w is a cycle. In undirected mode the edge from a
    vertex back to its DFS parent is the reverse of the tree edge just taken
    and is skipped.
    """
    search = DepthFirstSearch(graph)
    for event in search.walk_all():
        if not isinstance(event, Examine) or event.kind is not EdgeKind.BACK:
            continue
        source, destination, _ = event.edge
        if undirected and search.parent.get(source) == destination:
            continue
        cycle = search.path_to_ancestor(source, destination) + (destination,)
        logger.debug(f"Back edge {source} -> {destination} closes cycle {cycle}")
        return cycle
    return None


def find_directed_cycle(graph: Graph) -> tuple[Vertex, ...] | None:
    """Returns a directed cycle of the graph, or None if it is a DAG."""
    return _find_back_edge_cycle(graph, undirected=False)


def has_directed_cycle(graph: Graph) -> bool:
    return find_directed_cycle(graph) is not None


def find_undirected_cycle(graph: Graph) -> tuple[Vertex, ...] | None:
    """
    Returns a cycle of an undirected graph, or None if it is a forest.

    The graph is expected to hold each undirected edge as a pair (u, v), (v, u).
    The pair itself is not reported as a 2-cycle. A self-loop is a cycle.
    """
    return _find_back_edge_cycle(graph, undirected=True)


def has_undirected_cycle(graph: Graph) -> bool:
    return find_undirected_cycle(graph) is not None


def has_undirected_cycle_union_find(graph: Graph) -> bool:
    """
    Cycle check for undirected graphs using union-find.

    A cycle exists as soon as a deduplicated edge joins two vertices that are
    already connected. Edge direction is ignored, which makes this check wrong
    for directed graphs: use has_directed_cycle there.
    """
    uf = UnionFind(graph.vertices())
    for edge in graph.all_edges():
        if not uf.union(edge.source, edge.destination):
            logger.debug(f"Edge {edge.source} - {edge.destination} closes a cycle")
            return True
    return False


# =============================================================================
# Topological sort
# =============================================================================


def topological_sort(graph: Graph) -> tuple[Vertex, ...]:
    """
    Returns vertices in topological order from the reversed DFS postorder.

    A vertex finishes only after every vertex reachable from it has finished,
    so reversing the finish order puts each edge's source before its
    destination.

    Returns:
        Vertices ordered so sources come before destinations, or an empty
        tuple if the graph has a cycle.
    """
    search = DepthFirstSearch(graph)
    for event in search.walk_all():
        if isinstance(event, Examine) and event.kind is EdgeKind.BACK:
            logger.debug(f"No topological order: back edge {event.edge}")
            return ()
    return tuple(reversed(search.postorder))


def topological_sort_kahn(graph: Graph) -> tuple[Vertex, ...]:
    """
    Returns nodes in topological order using Kahn's algorithm.

    Among the vertices ready at any point, the smallest id is emitted first,
    so the result is deterministic.

    Returns:
        Vertices ordered so sources come before destinations, or an empty
        tuple if the graph has a cycle.
    """
    in_degree: dict[Vertex, int] = {vertex: 0 for vertex in graph.vertices()}
    for edge in graph.edges():
        in_degree[edge.destination] += 1

    ready = [vertex for vertex, degree in in_degree.items() if degree == 0]
    heapq.heapify(ready)
    sorted_list: list[Vertex] = []

    while ready:
        vertex = heapq.heappop(ready)
        sorted_list.append(vertex)

        for edge in graph.edges_from(vertex):
            in_degree[edge.destination] -= 1
            if in_degree[edge.destination] == 0:
                heapq.heappush(ready, edge.destination)

    if len(sorted_list) != len(in_degree):
        logger.debug(
            f"No topological order: {len(in_degree) - len(sorted_list)} vertices on or behind a cycle"
        )
        return ()

    return tuple(sorted_list)


# =============================================================================
# Bipartiteness
# =============================================================================


def two_coloring(graph: Graph) -> dict[Vertex, Color] | None:
    """
    Two-colours an undirected graph, component by component.

    Each component is walked breadth-first from its first vertex and each
    vertex gets the colour of its level parity. The graph is bipartite iff no
    edge then joins two vertices of the same colour.

    Returns:
        Mapping from each vertex to one of COLORS, or None if the graph is
        not bipartite.
    """
    colors: dict[Vertex, Color] = {}
    for root in graph.vertices():
        if root in colors:
            continue
        for depth, level in enumerate(breadth_first_levels(graph, root)):
            for vertex in level:
                colors.setdefault(vertex, COLORS[depth % 2])

    for edge in graph.edges():
        if colors[edge.source] == colors[edge.destination]:
            logger.debug(
                f"Edge {edge.source} - {edge.destination} joins two vertices "
                f"of colour {colors[edge.source]}"
            )
            return None
    return colors


def is_bipartite(graph: Graph) -> bool:
    return two_coloring(graph) is not None


__all__ = [
    "find_directed_cycle",
    "has_directed_cycle",
    "find_undirected_cycle",
    "has_undirected_cycle",
    "has_undirected_cycle_union_find",
    "topological_sort",
    "topological_sort_kahn",
    "two_coloring",
    "is_bipartite",
]
