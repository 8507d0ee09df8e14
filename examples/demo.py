"""Small demonstration of the three union-find variants and the sorts."""

from __future__ import annotations

import io

import numpy as np

from coursealgs import TokenSource, count_components, sort_tokens
from coursealgs.sorting import SORT_FUNCS
from coursealgs.union_find import UNION_FIND_TYPES

TINY_UF = "10 4 3 3 8 6 5 9 4 2 1 8 9 5 0 7 2 6 1 1 0 6 7"


def make_pairs(n: int, m: int, seed: int = 0) -> str:
    rng = np.random.default_rng(seed)
    values = rng.integers(0, n, size=2 * m)
    return " ".join([str(n)] + [str(v) for v in values])


def main() -> None:
    for kind in UNION_FIND_TYPES:
        uf = count_components(TokenSource(io.StringIO(TINY_UF)), kind)
        print(f"{kind:>10}: {uf.count()} components")

    medium = make_pairs(625, 900)
    for kind in UNION_FIND_TYPES:
        uf = count_components(TokenSource(io.StringIO(medium)), kind)
        print(f"{kind:>10}: {uf.count()} components on 625 sites")

    words = "it was the best of times it was the worst of times"
    for name in SORT_FUNCS:
        print(f"{name:>10}:", " ".join(sort_tokens(TokenSource(io.StringIO(words)), name)))


if __name__ == "__main__":
    main()
