"""Union-Find data structures: quick-find, quick-union and weighted quick-union.

All three variants share one contract (:class:`UnionFind`) and differ only in
how components are represented:

* :class:`QuickFind` stores the component id of every site, so ``find`` is a
  lookup and ``union`` rewrites every site of the absorbed component.
* :class:`QuickUnion` stores parent links; ``find`` walks to the root and
  ``union`` links one root under the other. Trees may degenerate into chains.
* :class:`WeightedQuickUnion` also tracks tree sizes and always links the
  smaller tree under the larger, which keeps every tree at most
  ``floor(log2(n)) + 1`` nodes tall.
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class UnionFind(Protocol):
    def __len__(self) -> int: ...

    def count(self) -> int: ...

    def find(self, site: int) -> int: ...

    def connected(self, p: int, q: int) -> bool: ...

    def union(self, p: int, q: int) -> bool: ...


class _Sites:
    """Site table shared by every variant: ids/parents plus the live count."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.id = np.arange(size, dtype=np.int64)
        self.count = size

    def __len__(self) -> int:
        return self.id.shape[0]

    def check(self, site: int) -> int:
        site = operator.index(site)
        if not 0 <= site < self.id.shape[0]:
            raise IndexError(f"site {site} outside [0, {self.id.shape[0]})")
        return site


def _root(parent: np.ndarray, site: int) -> int:
    while parent[site] != site:
        site = int(parent[site])
    return site


def _depth(parent: np.ndarray, site: int) -> int:
    depth = 1
    while parent[site] != site:
        site = int(parent[site])
        depth += 1
    return depth


class _Engine(ABC):
    """Operations every variant answers the same way from its site table.

    Variants hold their state in a :class:`_Sites` and supply only ``find``
    and ``union``; none of them derives from another.
    """

    _sites: _Sites

    def __len__(self) -> int:
        return len(self._sites)

    def count(self) -> int:
        return self._sites.count

    @abstractmethod
    def find(self, site: int) -> int: ...

    @abstractmethod
    def union(self, p: int, q: int) -> bool: ...

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)}, count={self.count()})"


class QuickFind(_Engine):
    def __init__(self, size: int) -> None:
        self._sites = _Sites(size)

    def find(self, site: int) -> int:
        sites = self._sites
        return int(sites.id[sites.check(site)])

    def union(self, p: int, q: int) -> bool:
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False
        ids = self._sites.id
        ids[ids == root_p] = root_q
        self._sites.count -= 1
        return True


class QuickUnion(_Engine):
    def __init__(self, size: int) -> None:
        self._sites = _Sites(size)

    def find(self, site: int) -> int:
        sites = self._sites
        return _root(sites.id, sites.check(site))

    def height(self, site: int) -> int:
        """Number of nodes on the path from ``site`` to its root."""
        sites = self._sites
        return _depth(sites.id, sites.check(site))

    def union(self, p: int, q: int) -> bool:
        i = self.find(p)
        j = self.find(q)
        if i == j:
            return False
        self._sites.id[i] = j
        self._sites.count -= 1
        return True


class WeightedQuickUnion(_Engine):
    def __init__(self, size: int) -> None:
        self._sites = _Sites(size)
        self._size = np.ones(size, dtype=np.int64)

    def find(self, site: int) -> int:
        sites = self._sites
        return _root(sites.id, sites.check(site))

    def height(self, site: int) -> int:
        """Number of nodes on the path from ``site`` to its root."""
        sites = self._sites
        return _depth(sites.id, sites.check(site))

    def component_size(self, site: int) -> int:
        return int(self._size[self.find(site)])

    def union(self, p: int, q: int) -> bool:
        i = self.find(p)
        j = self.find(q)
        if i == j:
            return False
        size = self._size
        parent = self._sites.id
        # smaller root points to the larger one
        if size[i] < size[j]:
            parent[i] = j
            size[j] += size[i]
        else:
            parent[j] = i
            size[i] += size[j]
        self._sites.count -= 1
        return True


UNION_FIND_TYPES: dict[str, type] = {
    "quickfind": QuickFind,
    "quickunion": QuickUnion,
    "weighted": WeightedQuickUnion,
}


def union_find_type(kind: str) -> type:
    try:
        return UNION_FIND_TYPES[kind]
    except KeyError:
        choices = ", ".join(UNION_FIND_TYPES)
        raise ValueError(f"unknown union-find type {kind!r}; choose one of {choices}") from None


def make_union_find(kind: str, size: int) -> UnionFind:
    return union_find_type(kind)(size)


__all__ = [
    "QuickFind",
    "QuickUnion",
    "UNION_FIND_TYPES",
    "UnionFind",
    "WeightedQuickUnion",
    "make_union_find",
    "union_find_type",
]
