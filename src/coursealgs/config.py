"""Explicit run settings for the command-line programs."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class UnionFindConfig:
    filename: str = "stdin"
    kind: str = "weighted"
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "UnionFindConfig":
        return cls(filename=args.file, kind=args.union_find, verbose=args.verbose)


@dataclass(frozen=True)
class SortConfig:
    filename: str = "stdin"
    algorithm: str = "selection"
    numeric: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "SortConfig":
        return cls(
            filename=args.file,
            algorithm=args.sort,
            numeric=args.numeric,
            verbose=args.verbose,
        )


__all__ = ["SortConfig", "UnionFindConfig"]
