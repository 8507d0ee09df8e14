"""Pipelines wiring a token source into the union-find and sort engines."""

from __future__ import annotations

from contextlib import closing

from .sorting import ArraySequence, get_sort_func, is_sorted
from .tokens import TokenSource, pairs
from .union_find import UnionFind, union_find_type


def count_components(
    source: TokenSource,
    kind: str = "weighted",
    verbose: bool = False,
) -> UnionFind:
    """Feed every ``(p, q)`` pair of ``source`` to a fresh union-find.

    The first token is the number of sites; the remaining tokens are consumed
    two at a time until the stream closes. Returns the populated structure.
    """
    factory = union_find_type(kind)
    n = source.read_sites()
    uf = factory(n)
    if verbose:
        print(f"Using unionfind of type {kind} on {n} sites.")
    merged = 0
    with closing(source.ints()) as values:
        for p, q in pairs(values):
            if uf.connected(p, q):
                continue
            uf.union(p, q)
            merged += 1
            if verbose:
                print(f"{p} {q}")
    if verbose:
        print(f"{merged} unions, {uf.count()} components.")
    return uf


def sort_tokens(
    source: TokenSource,
    algorithm: str = "selection",
    numeric: bool = False,
    verbose: bool = False,
) -> list:
    tokens = source.ints() if numeric else source.strings()
    values = list(tokens)
    if verbose:
        print(f"Read {len(values)} values from {source.name}.")
    data = ArraySequence(values)
    get_sort_func(algorithm)(data)
    if verbose:
        print(f"Sorted: {is_sorted(data)}")
    return values


__all__ = ["count_components", "sort_tokens"]
