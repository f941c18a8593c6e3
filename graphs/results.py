"""
Structured outputs of the algorithms.

Outcomes that depend on the data rather than on a caller mistake are values:
    Unreachable     - no path between a source and a target
    NegativeCycle   - shortest paths are undefined
    SpanningForest  - spanning tree requested on a disconnected graph

Presentation of these values lives in display.py.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property

import numpy as np

from .constants import INFINITY
from .exceptions import UnknownVertexError
from .graph import Graph
from .types import Edge, Vertex, Weight


# =============================================================================
# Paths
# =============================================================================


@dataclass(frozen=True, slots=True)
class Path:
    """A path source -> ... -> target and its total weight (hop count for BFS)."""

    vertices: tuple[Vertex, ...]
    distance: Weight

    @property
    def source(self) -> Vertex:
        return self.vertices[0]

    @property
    def target(self) -> Vertex:
        return self.vertices[-1]


@dataclass(frozen=True, slots=True)
class Unreachable:
    """No path leads from source to target."""

    source: Vertex
    target: Vertex


@dataclass(frozen=True, slots=True)
class NegativeCycle:
    """
    A negative-weight cycle makes shortest paths undefined.

    Attributes:
        source: Vertex the cycle is reachable from, None for all-pairs queries.
        witness: For single-source queries, the cycle in edge order with the
            first vertex repeated at the end. For all-pairs queries, the
            vertices lying on some negative cycle.
    """

    source: Vertex | None
    witness: tuple[Vertex, ...]


# =============================================================================
# Shortest paths
# =============================================================================


@dataclass(frozen=True)
class ShortestPaths:
    """
    Single-source shortest path tree.

    Attributes:
        source: The vertex distances are measured from.
        distances: Every vertex of the graph to its distance, INFINITY if unreachable.
        predecessors: Each reached vertex other than source to its parent in the tree.
    """

    source: Vertex
    distances: Mapping[Vertex, Weight]
    predecessors: Mapping[Vertex, Vertex]

    def distance_to(self, target: Vertex) -> Weight:
        if target not in self.distances:
            raise UnknownVertexError(target)
        return self.distances[target]

    def is_reachable(self, target: Vertex) -> bool:
        return self.distance_to(target) != INFINITY

    def path_to(self, target: Vertex) -> Path | Unreachable:
        if not self.is_reachable(target):
            return Unreachable(self.source, target)
        vertices = [target]
        while vertices[-1] != self.source:
            vertices.append(self.predecessors[vertices[-1]])
        vertices.reverse()
        return Path(tuple(vertices), self.distances[target])


@dataclass(frozen=True)
class AllPairsShortestPaths:
    """
    Distances between every ordered pair of vertices.

    Attributes:
        vertices: Row/column order of the matrices.
        distances: distances[i, j] is the shortest distance from vertices[i]
            to vertices[j], inf if there is no path.
        last: last[i, j] is the index of the vertex preceding vertices[j] on
            the shortest path from vertices[i], -1 if there is no path.
        integral: Every input weight was an int, so finite distances are
            reported as ints like the single-source algorithms do.
    """

    vertices: tuple[Vertex, ...]
    distances: np.ndarray
    last: np.ndarray
    integral: bool = False

    @cached_property
    def positions(self) -> dict[Vertex, int]:
        """Row/column index of each vertex."""
        return {vertex: i for i, vertex in enumerate(self.vertices)}

    def _index(self, vertex: Vertex) -> int:
        if vertex not in self.positions:
            raise UnknownVertexError(vertex)
        return self.positions[vertex]

    def distance(self, source: Vertex, target: Vertex) -> Weight:
        value = self.distances[self._index(source), self._index(target)]
        if np.isinf(value):
            return INFINITY
        return int(value) if self.integral else value.item()

    def path(self, source: Vertex, target: Vertex) -> Path | Unreachable:
        i, j = self._index(source), self._index(target)
        if self.last[i, j] < 0:
            return Unreachable(source, target)
        indices = [j]
        while indices[-1] != i:
            indices.append(int(self.last[i, indices[-1]]))
        indices.reverse()
        return Path(
            tuple(self.vertices[k] for k in indices), self.distance(source, target)
        )

    def to_dict(self) -> dict[Vertex, dict[Vertex, Weight]]:
        return {
            u: {v: self.distance(u, v) for v in self.vertices} for u in self.vertices
        }


# =============================================================================
# Spanning trees
# =============================================================================


@dataclass(frozen=True)
class SpanningTree:
    """
    Spanning tree of a connected graph.

    The tree graph holds every input vertex and each accepted edge in both
    directions.
    """

    graph: Graph
    edges: tuple[Edge, ...]
    total_weight: Weight


@dataclass(frozen=True)
class SpanningForest:
    """
    Spanning forest of a disconnected graph: one tree per connected component.

    Returned instead of SpanningTree so that a forest is never mistaken for a
    tree.
    """

    graph: Graph
    edges: tuple[Edge, ...]
    total_weight: Weight
    component_count: int


__all__ = [
    "Path",
    "Unreachable",
    "NegativeCycle",
    "ShortestPaths",
    "AllPairsShortestPaths",
    "SpanningTree",
    "SpanningForest",
]
