"""Union-find and elementary sorting algorithms fed from token streams."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS = {
    "QuickFind": "coursealgs.union_find",
    "QuickUnion": "coursealgs.union_find",
    "WeightedQuickUnion": "coursealgs.union_find",
    "make_union_find": "coursealgs.union_find",
    "ArraySequence": "coursealgs.sorting",
    "get_sort_func": "coursealgs.sorting",
    "TokenSource": "coursealgs.tokens",
    "count_components": "coursealgs.core",
    "sort_tokens": "coursealgs.core",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    if name in _EXPORTS:
        module = import_module(_EXPORTS[name])
        return getattr(module, name)
    raise AttributeError(f"module 'coursealgs' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
