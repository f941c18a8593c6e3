"""
Graph traversal primitives.

Depth-first:
    DepthFirstSearch(graph)            - Stateful walk yielding Discover / Examine / Finish events
    depth_first_preorder(graph, root)  - Vertices in discovery order
    depth_first_postorder(graph)       - Vertices in finish order, across all DFS trees

Breadth-first:
    breadth_first_levels(graph, root)  - Vertices grouped by hop distance from root
    breadth_first_order(graph, root)   - Vertices level by level, root first

The depth-first walk keeps an explicit stack of (vertex, edge iterator) frames
instead of recursing, so its memory use does not depend on the interpreter's
recursion limit. Callers act on vertices and edges by consuming the events.
"""

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from .graph import Graph
from .types import Edge, Vertex


# =============================================================================
# Events
# =============================================================================


class EdgeKind(Enum):
    """Classification of an edge examined during a depth-first walk."""

    TREE = "tree"  # destination unvisited, the walk descends into it
    BACK = "back"  # destination is open on the current path: a cycle
    FORWARD_OR_CROSS = "forward_or_cross"  # destination already finished


@dataclass(frozen=True, slots=True)
class Discover:
    vertex: Vertex
    parent: Vertex | None


@dataclass(frozen=True, slots=True)
class Examine:
    edge: Edge
    kind: EdgeKind


@dataclass(frozen=True, slots=True)
class Finish:
    vertex: Vertex


DfsEvent: TypeAlias = Discover | Examine | Finish


# =============================================================================
# Depth-first search
# =============================================================================


class DepthFirstSearch:
    """
    Depth-first walk over a graph with ancestor tracking.

    State shared across successive walks:
        visited:   vertices ever discovered
        on_stack:  vertices whose frame is still open (ancestors of the current vertex)
        parent:    tree-edge parent of each discovered non-root vertex
        postorder: vertices in the order their frames finished

    A caller that stops consuming a walk early leaves on_stack holding the
    path that was open at that point.

    Example:
        >>> graph = Graph()
        >>> _ = graph.add_edge(0, 1)
        >>> _ = graph.add_edge(1, 0)
        >>> search = DepthFirstSearch(graph)
        >>> [e.kind for e in search.walk(0) if isinstance(e, Examine)]
        [<EdgeKind.TREE: 'tree'>, <EdgeKind.BACK: 'back'>]
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self.visited: set[Vertex] = set()
        self.on_stack: set[Vertex] = set()
        self.parent: dict[Vertex, Vertex] = {}
        self.postorder: list[Vertex] = []

    def walk(self, root: Vertex) -> Iterator[DfsEvent]:
        """Walks the DFS tree rooted at root. Yields nothing if root was already visited."""
        self.graph.require_vertex(root)
        if root in self.visited:
            return

        self.visited.add(root)
        self.on_stack.add(root)
        yield Discover(root, None)
        stack: list[tuple[Vertex, Iterator[Edge]]] = [
            (root, iter(self.graph.edges_from(root)))
        ]

        while stack:
            vertex, edges = stack[-1]
            edge = next(edges, None)

            if edge is None:
                stack.pop()
                self.on_stack.discard(vertex)
                self.postorder.append(vertex)
                yield Finish(vertex)
                continue

            destination = edge.destination
            if destination not in self.visited:
                yield Examine(edge, EdgeKind.TREE)
                self.visited.add(destination)
                self.on_stack.add(destination)
                self.parent[destination] = vertex
                yield Discover(destination, vertex)
                stack.append((destination, iter(self.graph.edges_from(destination))))
            elif destination in self.on_stack:
                yield Examine(edge, EdgeKind.BACK)
            else:
                yield Examine(edge, EdgeKind.FORWARD_OR_CROSS)

    def walk_all(self, roots: Iterable[Vertex] | None = None) -> Iterator[DfsEvent]:
        """Walks from every root in turn (all vertices by default), skipping visited ones."""
        for root in self.graph.vertices() if roots is None else roots:
            yield from self.walk(root)

    def path_to_ancestor(self, vertex: Vertex, ancestor: Vertex) -> tuple[Vertex, ...]:
        """Tree path ancestor -> ... -> vertex, rebuilt from the parent mapping."""
        path = [vertex]
        while path[-1] != ancestor:
            path.append(self.parent[path[-1]])
        path.reverse()
        return tuple(path)


def depth_first_preorder(graph: Graph, root: Vertex) -> Iterator[Vertex]:
    """Yields vertices reachable from root in discovery order."""
    for event in DepthFirstSearch(graph).walk(root):
        if isinstance(event, Discover):
            yield event.vertex


def depth_first_postorder(
    graph: Graph, roots: Iterable[Vertex] | None = None
) -> Iterator[Vertex]:
    """Yields vertices as their DFS frames finish, covering every DFS tree."""
    for event in DepthFirstSearch(graph).walk_all(roots):
        if isinstance(event, Finish):
            yield event.vertex


# =============================================================================
# Breadth-first search
# =============================================================================


def breadth_first_levels(graph: Graph, root: Vertex) -> Iterator[tuple[Vertex, ...]]:
    """
    Yields vertices level by level: level k holds the vertices k hops from root.

    Level-synchronous: every vertex of level k is dequeued before any vertex of
    level k + 1. Vertices are marked when enqueued, so each appears once.
    """
    graph.require_vertex(root)
    seen = {root}
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            current = queue.popleft()
            level.append(current)
            for edge in graph.edges_from(current):
                if edge.destination not in seen:
                    seen.add(edge.destination)
                    queue.append(edge.destination)
        yield tuple(level)


def breadth_first_order(graph: Graph, root: Vertex) -> Iterator[Vertex]:
    """Yields vertices level by level, root first."""
    for level in breadth_first_levels(graph, root):
        yield from level


__all__ = [
    "EdgeKind",
    "Discover",
    "Examine",
    "Finish",
    "DfsEvent",
    "DepthFirstSearch",
    "depth_first_preorder",
    "depth_first_postorder",
    "breadth_first_levels",
    "breadth_first_order",
]
