"""
Exceptions raised on contract violations.

Data-dependent outcomes (unreachable targets, negative cycles, disconnected
inputs) are returned as values, see results.py.
"""


class GraphError(Exception):
    """Base class of the package errors."""

    pass


class UnknownVertexError(GraphError, KeyError):
    """Raised when an operation references a vertex that was never added."""

    def __init__(self, vertex: object) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"Unknown vertex: {self.vertex!r}"


class NegativeWeightError(GraphError, ValueError):
    """Raised when an algorithm requiring non-negative weights meets a negative edge."""

    pass


__all__ = ["GraphError", "UnknownVertexError", "NegativeWeightError"]
