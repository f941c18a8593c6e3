"""
Type definitions shared by the graph algorithms.

Vertices are plain integers. Edges are directed (source, destination, weight)
triples; an undirected relation is two edges with equal weight.
"""

from typing import NamedTuple, TypeAlias

Vertex: TypeAlias = int
Weight: TypeAlias = int | float
Color: TypeAlias = int


class Edge(NamedTuple):
    source: Vertex
    destination: Vertex
    weight: Weight = 1

    def reversed(self) -> "Edge":
        """Same edge with source and destination swapped."""
        return Edge(self.destination, self.source, self.weight)

    def endpoints(self) -> tuple[Vertex, Vertex]:
        """Unordered endpoint pair, used to deduplicate undirected edges."""
        if self.source <= self.destination:
            return (self.source, self.destination)
        return (self.destination, self.source)


__all__ = ["Vertex", "Weight", "Color", "Edge"]
