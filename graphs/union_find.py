"""
Disjoint-set forest over hashable elements.

Operations, all amortized O(α(n)) with α the inverse Ackermann function:
    make(e)          - Register e as a singleton set
    find(e)          - Representative of the set holding e
    union(a, b)      - Merge the sets of a and b
    connected(a, b)  - Whether a and b share a set

Kruskal's spanning tree, the union-find component labelling and the
undirected cycle check each build one forest per run.
"""

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

from .exceptions import UnknownVertexError

Element = TypeVar("Element", bound=Hashable)


class UnionFind(Generic[Element]):
    """
    Disjoint sets with path compression and union by rank.

    Unlike a lazily initialised forest, elements must be registered first,
    through the constructor or make(); any other element raises
    UnknownVertexError.

    Example:
        >>> uf = UnionFind[int]([1, 2, 3, 4])
        >>> uf.union(1, 2), uf.union(2, 3), uf.union(3, 1)
        (True, True, False)
        >>> uf.connected(1, 3), uf.connected(1, 4)
        (True, False)
        >>> uf.component_count()
        2
    """

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self._parent: dict[Element, Element] = {}
        self._rank: dict[Element, int] = {}
        self._count = 0
        for element in elements:
            self.make(element)

    def make(self, element: Element) -> None:
        if element in self._parent:
            return
        self._parent[element] = element
        self._rank[element] = 0
        self._count += 1

    def find(self, element: Element) -> Element:
        """
        Root of the tree holding element.

        Every element met on the way up is re-pointed at the root, so the next
        lookup for any of them is a single step.
        """
        if element not in self._parent:
            raise UnknownVertexError(element)

        path = []
        while self._parent[element] != element:
            path.append(element)
            element = self._parent[element]
        for visited in path:
            self._parent[visited] = element
        return element

    def union(self, a: Element, b: Element) -> bool:
        """
        Merges the sets of a and b; False if they were already one set.

        The root of lower rank goes under the other. On equal ranks b's root
        goes under a's, whose rank grows by one.
        """
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False

        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1

        self._count -= 1
        return True

    def connected(self, a: Element, b: Element) -> bool:
        return self.find(a) == self.find(b)

    def component_count(self) -> int:
        """Number of disjoint sets, one less after every merging union."""
        return self._count

    def rank(self, element: Element) -> int:
        """Upper bound on the height of the tree rooted at element."""
        if element not in self._rank:
            raise UnknownVertexError(element)
        return self._rank[element]

    def sets(self) -> dict[Element, set[Element]]:
        """Members of every set, keyed by representative."""
        members: dict[Element, set[Element]] = {}
        for element in self._parent:
            members.setdefault(self.find(element), set()).add(element)
        return members

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def __len__(self) -> int:
        return len(self._parent)


__all__ = ["UnionFind"]
