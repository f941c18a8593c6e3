"""
Weighted directed graph stored as adjacency lists.

The graph owns its vertex identities and, for each vertex, the ordered
sequence of its outgoing edges. It carries no algorithmic logic: every
algorithm of the package reads it without mutating it.

Iteration order is insertion order, so every algorithm run on the same
graph visits vertices and edges in the same order.
"""

from collections.abc import Iterable, Iterator

import numpy as np
from scipy.sparse import csr_array

from .constants import DEFAULT_WEIGHT, INFINITY
from .exceptions import UnknownVertexError
from .types import Edge, Vertex, Weight


class Graph:
    """
    Directed weighted graph with integer vertices.

    An undirected relation is represented by two edges (u, v) and (v, u) of
    equal weight. The graph never adds the reverse edge on its own; use
    add_undirected_edge to insert both.

    Example:
        >>> graph = Graph([0, 1, 2])
        >>> graph.add_edge(0, 1, 4)
        Edge(source=0, destination=1, weight=4)
        >>> graph.edges_from(0)
        (Edge(source=0, destination=1, weight=4),)
        >>> graph.edges_from(7)
        ()
    """

    def __init__(self, vertices: Iterable[Vertex] = ()) -> None:
        self._adjacency: dict[Vertex, list[Edge]] = {}
        for vertex in vertices:
            self.add_vertex(vertex)

    # =========================================================================
    # Construction
    # =========================================================================

    def add_vertex(self, vertex: Vertex) -> None:
        """Registers a vertex. Adding an existing vertex is a no-op."""
        if not isinstance(vertex, int) or isinstance(vertex, bool):
            raise TypeError(f"Vertices are integers, got {vertex!r}")
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []

    def add_edge(
        self, source: Vertex, destination: Vertex, weight: Weight = DEFAULT_WEIGHT
    ) -> Edge:
        """Adds the directed edge source -> destination, registering both endpoints."""
        self.add_vertex(source)
        self.add_vertex(destination)
        edge = Edge(source, destination, weight)
        self._adjacency[source].append(edge)
        return edge

    def add_undirected_edge(
        self, u: Vertex, v: Vertex, weight: Weight = DEFAULT_WEIGHT
    ) -> tuple[Edge, Edge]:
        """Adds u -> v and v -> u with the same weight."""
        return self.add_edge(u, v, weight), self.add_edge(v, u, weight)

    # =========================================================================
    # Accessors
    # =========================================================================

    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(self._adjacency)

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._adjacency

    def require_vertex(self, vertex: Vertex) -> None:
        """Raises UnknownVertexError if the vertex is not in the graph."""
        if vertex not in self._adjacency:
            raise UnknownVertexError(vertex)

    def edges_from(self, vertex: Vertex) -> tuple[Edge, ...]:
        """Outgoing edges of a vertex. Unknown vertices have none."""
        return tuple(self._adjacency.get(vertex, ()))

    def edges(self) -> Iterator[Edge]:
        """Every directed edge, grouped by source in vertex insertion order."""
        for edges in self._adjacency.values():
            yield from edges

    def all_edges(self) -> tuple[Edge, ...]:
        """
        Edges deduplicated by unordered endpoint pair.

        (u, v) and (v, u) count as the same edge; the first one met in
        edges() order is kept. Used by the algorithms that read the graph as
        undirected.
        """
        seen: set[tuple[Vertex, Vertex]] = set()
        unique: list[Edge] = []
        for edge in self.edges():
            key = edge.endpoints()
            if key in seen:
                continue
            seen.add(key)
            unique.append(edge)
        return tuple(unique)

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())

    # =========================================================================
    # Derived graphs
    # =========================================================================

    def reversed(self) -> "Graph":
        """Transposed graph: same vertices, every edge reversed."""
        transposed = Graph(self._adjacency)
        for edge in self.edges():
            transposed._adjacency[edge.destination].append(edge.reversed())
        return transposed

    def copy(self) -> "Graph":
        duplicate = Graph()
        duplicate._adjacency = {
            vertex: list(edges) for vertex, edges in self._adjacency.items()
        }
        return duplicate

    # =========================================================================
    # Matrix export
    # =========================================================================

    def vertex_index(self) -> dict[Vertex, int]:
        """Row/column index of each vertex in the matrix exports."""
        return {vertex: i for i, vertex in enumerate(self._adjacency)}

    def to_weight_matrix(self) -> np.ndarray:
        """
        Dense weight matrix in vertices() order.

        Missing edges are infinite. Among parallel edges the lightest is kept.
        The diagonal holds self-loop weights only, it is not zeroed.
        """
        index = self.vertex_index()
        n = len(index)
        matrix = np.full((n, n), INFINITY, dtype=float)
        for edge in self.edges():
            i, j = index[edge.source], index[edge.destination]
            matrix[i, j] = min(matrix[i, j], edge.weight)
        return matrix

    def to_sparse_matrix(self) -> csr_array:
        """
        Sparse weight matrix in vertices() order.

        Same content as to_weight_matrix, with absent edges left implicit.
        Zero-weight edges cannot be told apart from absent ones in this form.
        """
        matrix = self.to_weight_matrix()
        present = np.isfinite(matrix)
        rows, cols = np.nonzero(present)
        n = len(self._adjacency)
        return csr_array((matrix[rows, cols], (rows, cols)), shape=(n, n))

    # =========================================================================
    # Protocols
    # =========================================================================

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._adjacency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adjacency == other._adjacency

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self)}, edges={self.edge_count()})"


__all__ = ["Graph"]
