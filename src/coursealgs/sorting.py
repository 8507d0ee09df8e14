"""Elementary comparison sorts over an abstract sortable sequence."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Protocol, runtime_checkable

import numpy as np

MERGE_CUTOFF = 7  # ranges of at most CUTOFF + 1 elements go to insertion sort


@runtime_checkable
class Sortable(Protocol):
    def __len__(self) -> int: ...

    def less(self, i: int, j: int) -> bool: ...

    def exchange(self, i: int, j: int) -> None: ...

    def get(self, i: int) -> Any: ...

    def set(self, i: int, value: Any) -> None: ...

    def copy(self) -> "Sortable": ...


class ArraySequence:
    """Sortable view over a list or a 1D numpy array.

    Elements are compared directly, or through ``key`` when one is given.
    """

    def __init__(self, values: MutableSequence | np.ndarray, key: Callable[[Any], Any] | None = None) -> None:
        if isinstance(values, np.ndarray) and values.ndim != 1:
            raise ValueError("values must be a 1D array")
        self.values = values
        self.key = key

    def __len__(self) -> int:
        return len(self.values)

    def less(self, i: int, j: int) -> bool:
        a = self.values[i]
        b = self.values[j]
        if self.key is not None:
            return bool(self.key(a) < self.key(b))
        return bool(a < b)

    def exchange(self, i: int, j: int) -> None:
        values = self.values
        values[i], values[j] = values[j], values[i]

    def get(self, i: int) -> Any:
        return self.values[i]

    def set(self, i: int, value: Any) -> None:
        self.values[i] = value

    def copy(self) -> "ArraySequence":
        values = self.values.copy() if isinstance(self.values, np.ndarray) else list(self.values)
        return ArraySequence(values, key=self.key)

    def __repr__(self) -> str:
        return f"ArraySequence({list(self.values)!r})"


SortFunc = Callable[[Sortable], None]


def is_sorted(data: Sortable) -> bool:
    return not any(data.less(i, i - 1) for i in range(1, len(data)))


def selection_sort(data: Sortable) -> None:
    n = len(data)
    for i in range(n):
        smallest = i
        for j in range(i + 1, n):
            if data.less(j, smallest):
                smallest = j
        data.exchange(i, smallest)


def _insertion_sort(data: Sortable, lo: int, hi: int) -> None:
    # sorts data[lo..hi], both ends inclusive
    for i in range(lo + 1, hi + 1):
        j = i
        while j > lo and data.less(j, j - 1):
            data.exchange(j, j - 1)
            j -= 1


def insertion_sort(data: Sortable) -> None:
    _insertion_sort(data, 0, len(data) - 1)


def _shell_gaps(n: int) -> list[int]:
    h = 1
    gaps = [h]
    while h < n // 3:
        h = 3 * h + 1  # 1, 4, 13, 40, 121, 364, 1093, ...
        gaps.append(h)
    return gaps[::-1]


def shell_sort(data: Sortable) -> None:
    n = len(data)
    for h in _shell_gaps(n):
        for i in range(h, n):
            j = i
            while j >= h and data.less(j, j - h):
                data.exchange(j, j - h)
                j -= h


def _merge(src: Sortable, dst: Sortable, lo: int, mid: int, hi: int) -> None:
    i = lo
    j = mid + 1
    for k in range(lo, hi + 1):
        if i > mid:
            dst.set(k, src.get(j))
            j += 1
        elif j > hi:
            dst.set(k, src.get(i))
            i += 1
        elif src.less(j, i):
            dst.set(k, src.get(j))
            j += 1
        else:
            dst.set(k, src.get(i))
            i += 1


def _merge_sort(src: Sortable, dst: Sortable, lo: int, hi: int) -> None:
    # src and dst hold the same elements on [lo, hi]; the sorted run ends up in dst
    if hi <= lo + MERGE_CUTOFF:
        _insertion_sort(dst, lo, hi)
        return
    mid = lo + (hi - lo) // 2
    _merge_sort(dst, src, lo, mid)
    _merge_sort(dst, src, mid + 1, hi)
    if not src.less(mid + 1, mid):
        for k in range(lo, hi + 1):
            dst.set(k, src.get(k))
        return
    _merge(src, dst, lo, mid, hi)


def merge_sort(data: Sortable) -> None:
    aux = data.copy()
    _merge_sort(aux, data, 0, len(data) - 1)


def _partition(data: Sortable, lo: int, hi: int) -> int:
    i = lo
    j = hi + 1
    while True:
        i += 1
        while data.less(i, lo) and i != hi:
            i += 1
        j -= 1
        while data.less(lo, j) and j != lo:
            j -= 1
        if i >= j:
            break
        data.exchange(i, j)
    data.exchange(lo, j)
    return j


def _quick_sort(data: Sortable, lo: int, hi: int) -> None:
    # recurse into the smaller side and loop on the larger one, depth stays O(log n)
    while lo < hi:
        j = _partition(data, lo, hi)
        if j - lo < hi - j:
            _quick_sort(data, lo, j - 1)
            lo = j + 1
        else:
            _quick_sort(data, j + 1, hi)
            hi = j - 1


def quick_sort(data: Sortable) -> None:
    _quick_sort(data, 0, len(data) - 1)


SORT_FUNCS: dict[str, SortFunc] = {
    "selection": selection_sort,
    "insertion": insertion_sort,
    "shell": shell_sort,
    "merge": merge_sort,
    "quick": quick_sort,
}


def get_sort_func(name: str, *, strict: bool = False) -> SortFunc:
    """Return the sort registered under ``name``.

    Unknown names fall back to :func:`selection_sort`, or raise ``ValueError``
    when ``strict`` is set.
    """
    try:
        return SORT_FUNCS[name]
    except KeyError:
        if strict:
            choices = ", ".join(SORT_FUNCS)
            raise ValueError(f"unknown sort type {name!r}; choose one of {choices}") from None
        return selection_sort


__all__ = [
    "ArraySequence",
    "SORT_FUNCS",
    "Sortable",
    "get_sort_func",
    "insertion_sort",
    "is_sorted",
    "merge_sort",
    "quick_sort",
    "selection_sort",
    "shell_sort",
]
