import math
import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import numpy as np
import pytest

from coursealgs.union_find import (
    UNION_FIND_TYPES,
    QuickFind,
    QuickUnion,
    UnionFind,
    WeightedQuickUnion,
    make_union_find,
)

VARIANTS = [QuickFind, QuickUnion, WeightedQuickUnion]


def random_pairs(n: int, m: int, seed: int) -> list[tuple[int, int]]:
    rng = np.random.default_rng(seed)
    values = rng.integers(0, n, size=(m, 2))
    return [(int(p), int(q)) for p, q in values]


@pytest.mark.parametrize("variant", VARIANTS)
def test_initial_state(variant):
    uf = variant(10)
    assert isinstance(uf, UnionFind)
    assert len(uf) == 10
    assert uf.count() == 10
    assert all(uf.find(i) == i for i in range(10))
    assert not uf.connected(0, 1)


@pytest.mark.parametrize("variant", VARIANTS)
def test_single_site(variant):
    uf = variant(1)
    assert uf.count() == 1
    assert uf.connected(0, 0)


@pytest.mark.parametrize("variant", VARIANTS)
def test_empty_universe(variant):
    uf = variant(0)
    assert uf.count() == 0
    with pytest.raises(IndexError):
        uf.find(0)


@pytest.mark.parametrize("variant", VARIANTS)
def test_negative_size_rejected(variant):
    with pytest.raises(ValueError):
        variant(-1)


@pytest.mark.parametrize("variant", VARIANTS)
@pytest.mark.parametrize("site", [-1, 5, 100])
def test_out_of_range_site_rejected(variant, site):
    uf = variant(5)
    with pytest.raises(IndexError):
        uf.find(site)
    with pytest.raises(IndexError):
        uf.union(0, site)
    with pytest.raises(IndexError):
        uf.connected(site, 0)
    assert uf.count() == 5


@pytest.mark.parametrize("variant", VARIANTS)
@pytest.mark.parametrize("site", [1.9, "3", None])
def test_non_integer_site_rejected(variant, site):
    uf = variant(5)
    with pytest.raises(TypeError):
        uf.find(site)
    with pytest.raises(TypeError):
        uf.union(site, 0)
    assert uf.count() == 5


@pytest.mark.parametrize("variant", VARIANTS)
def test_numpy_integer_sites(variant):
    uf = variant(4)
    uf.union(np.int64(0), np.int32(3))
    assert uf.connected(np.int64(3), 0)


def test_engine_base_requires_find_and_union():
    from coursealgs.union_find import _Engine

    with pytest.raises(TypeError):
        _Engine()

    class FindOnly(_Engine):
        def find(self, site):
            return site

    with pytest.raises(TypeError):
        FindOnly()


@pytest.mark.parametrize("variant", VARIANTS)
def test_count_decreases_only_on_effective_union(variant):
    uf = variant(10)
    assert uf.union(4, 3) is True
    assert uf.count() == 9
    assert uf.union(3, 4) is False
    assert uf.count() == 9
    assert uf.union(3, 8) is True
    assert uf.union(4, 8) is False
    assert uf.count() == 8


@pytest.mark.parametrize("variant", VARIANTS)
def test_tiny_scenario(variant):
    uf = variant(10)
    for p, q in [(4, 3), (3, 8), (6, 5), (9, 4)]:
        uf.union(p, q)
    assert uf.count() == 6
    assert uf.connected(4, 8)
    assert uf.connected(9, 3)
    assert not uf.connected(4, 5)
    assert uf.connected(6, 5)


@pytest.mark.parametrize("variant", VARIANTS)
def test_chain_collapses_to_one_component(variant):
    uf = variant(5)
    for p in range(4):
        uf.union(p, p + 1)
    assert uf.count() == 1
    assert all(uf.connected(0, q) for q in range(5))


@pytest.mark.parametrize("variant", VARIANTS)
def test_connected_is_an_equivalence(variant):
    uf = variant(6)
    uf.union(0, 1)
    uf.union(1, 2)
    assert all(uf.connected(p, p) for p in range(6))
    assert uf.connected(0, 2) and uf.connected(2, 0)
    assert uf.connected(1, 0)
    assert not uf.connected(0, 3)


def test_variants_agree_on_random_input():
    n = 60
    pairs = random_pairs(n, 45, seed=7)
    engines = [variant(n) for variant in VARIANTS]
    for p, q in pairs:
        results = {uf.union(p, q) for uf in engines}
        assert len(results) == 1
    assert len({uf.count() for uf in engines}) == 1
    for p in range(n):
        for q in range(n):
            answers = {uf.connected(p, q) for uf in engines}
            assert len(answers) == 1


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_count_matches_number_of_distinct_roots(seed):
    n = 100
    uf = WeightedQuickUnion(n)
    for p, q in random_pairs(n, 80, seed):
        uf.union(p, q)
    roots = {uf.find(i) for i in range(n)}
    assert len(roots) == uf.count()


@pytest.mark.parametrize("n", [1, 2, 7, 64, 500])
def test_weighted_height_is_logarithmic(n):
    uf = WeightedQuickUnion(n)
    for p, q in random_pairs(n, 3 * n, seed=n):
        uf.union(p, q)
    bound = math.floor(math.log2(n)) + 1
    assert max(uf.height(i) for i in range(n)) <= bound


def test_weighted_height_on_balanced_merges():
    # merging equal sized trees is the worst case for the height bound
    n = 16
    uf = WeightedQuickUnion(n)
    step = 1
    while step < n:
        for p in range(0, n, 2 * step):
            uf.union(p, p + step)
        step *= 2
    assert uf.count() == 1
    assert max(uf.height(i) for i in range(n)) == 5


def test_quick_union_can_degenerate():
    n = 8
    uf = QuickUnion(n)
    for p in range(n - 1):
        uf.union(p, p + 1)
    assert uf.height(0) == n
    assert uf.find(0) == n - 1


def test_weighted_attaches_smaller_tree():
    uf = WeightedQuickUnion(5)
    uf.union(0, 1)
    uf.union(2, 0)
    assert uf.find(2) == 0
    assert uf.component_size(2) == 3
    assert uf.component_size(4) == 1


def test_quick_find_relabels_component():
    uf = QuickFind(4)
    uf.union(0, 1)
    uf.union(1, 2)
    assert uf.find(0) == uf.find(1) == uf.find(2) == 2
    assert uf.find(3) == 3


def test_make_union_find():
    assert set(UNION_FIND_TYPES) == {"quickfind", "quickunion", "weighted"}
    assert isinstance(make_union_find("weighted", 3), WeightedQuickUnion)
    assert isinstance(make_union_find("quickfind", 3), QuickFind)
    with pytest.raises(ValueError, match="unknown union-find type"):
        make_union_find("bogus", 3)


def test_repr():
    uf = QuickUnion(3)
    uf.union(0, 1)
    assert repr(uf) == "QuickUnion(size=3, count=2)"
