"""Tests for graphs/union_find.py"""

import math
import random

import pytest

from graphs import UnionFind, UnknownVertexError


class TestUnionFind:
    def test_singletons(self):
        uf = UnionFind([1, 2, 3])
        assert uf.component_count() == 3
        assert len(uf) == 3
        assert not uf.connected(1, 2)
        assert uf.find(3) == 3

    def test_union_merges(self):
        uf = UnionFind([1, 2, 3])
        assert uf.union(1, 2)
        assert uf.connected(1, 2)
        assert uf.connected(2, 1)
        assert not uf.connected(1, 3)
        assert uf.component_count() == 2

    def test_union_same_set_is_noop(self):
        uf = UnionFind([1, 2])
        uf.union(1, 2)
        assert not uf.union(2, 1)
        assert not uf.union(1, 1)
        assert uf.component_count() == 1

    def test_make_is_idempotent(self):
        uf = UnionFind([1, 2])
        uf.union(1, 2)
        uf.make(1)
        assert uf.connected(1, 2)
        assert uf.component_count() == 1

    def test_unknown_element(self):
        uf = UnionFind([1])
        with pytest.raises(UnknownVertexError):
            uf.find(2)
        with pytest.raises(UnknownVertexError):
            uf.union(1, 2)

    def test_equal_ranks_increment(self):
        uf = UnionFind([1, 2])
        uf.union(1, 2)
        root = uf.find(1)
        assert uf.rank(root) == 1

    def test_lower_rank_goes_under_higher(self):
        uf = UnionFind([1, 2, 3])
        uf.union(1, 2)
        tall = uf.find(1)
        uf.union(3, 1)
        assert uf.find(3) == tall
        assert uf.rank(tall) == 1

    def test_sets(self):
        uf = UnionFind(range(5))
        uf.union(0, 1)
        uf.union(3, 4)
        groups = {frozenset(members) for members in uf.sets().values()}
        assert groups == {frozenset({0, 1}), frozenset({2}), frozenset({3, 4})}

    def test_works_with_any_hashable(self):
        uf = UnionFind[str](["a", "b"])
        uf.union("a", "b")
        assert uf.connected("a", "b")


class TestUnionFindProperties:
    @pytest.mark.parametrize("seed", range(5))
    def test_equivalence_relation_and_count(self, seed):
        """connected is an equivalence; the count drops by one per effective union."""
        rng = random.Random(seed)
        n = 30
        uf = UnionFind(range(n))
        naive = [{i} for i in range(n)]

        for _ in range(40):
            x, y = rng.randrange(n), rng.randrange(n)
            before = uf.component_count()
            merged = uf.union(x, y)
            assert merged == (naive[x] is not naive[y])
            assert uf.component_count() == before - (1 if merged else 0)
            if merged:
                union = naive[x] | naive[y]
                for member in union:
                    naive[member] = union

        for x in range(n):
            assert uf.connected(x, x)
            for y in range(n):
                assert uf.connected(x, y) == (y in naive[x])
                assert uf.connected(x, y) == uf.connected(y, x)

    def test_rank_is_logarithmic(self):
        """Union by rank keeps every rank under log2(n)."""
        n = 1024
        uf = UnionFind(range(n))
        step = 1
        while step < n:
            for i in range(0, n, 2 * step):
                uf.union(i, i + step)
            step *= 2
        assert uf.component_count() == 1
        assert max(uf.rank(i) for i in range(n)) <= math.log2(n)

    def test_path_compression_flattens(self):
        """After find, every element on the walked path points at the root."""
        n = 256
        uf = UnionFind(range(n))
        for i in range(1, n):
            uf.union(0, i)
        for i in range(n):
            uf.find(i)
        root = uf.find(0)
        assert all(uf._parent[i] == root for i in range(n))
