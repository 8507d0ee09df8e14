"""Command-line programs: ``unionfind`` and ``sortwords``."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from .config import SortConfig, UnionFindConfig
from .core import count_components, sort_tokens
from .sorting import SORT_FUNCS
from .tokens import TokenSource
from .union_find import UNION_FIND_TYPES

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s | %(message)s",
    )


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-f", "--file", default="stdin", help="filename or stdin.")
    parser.add_argument("-v", "--verbose", action="store_true", help="print progress details")


def union_find_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unionfind",
        description="Count connected components of a stream of integer pairs.",
    )
    _add_common_arguments(parser)
    parser.add_argument(
        "-u",
        "--union-find",
        choices=list(UNION_FIND_TYPES),
        default="weighted",
        help="unionfind type",
    )
    return parser


def sort_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortwords",
        description="Sort whitespace separated tokens.",
    )
    _add_common_arguments(parser)
    parser.add_argument(
        "-s",
        "--sort",
        default="selection",
        help=f"sort type: {', '.join(SORT_FUNCS)} (unknown names use selection)",
    )
    parser.add_argument("-n", "--numeric", action="store_true", help="compare tokens as integers")
    return parser


def run_union_find(config: UnionFindConfig) -> int:
    try:
        with TokenSource.open(config.filename) as source:
            print(f"Opened {config.filename} for input.")
            print(f"Using unionfind of type {config.kind}.")
            uf = count_components(source, config.kind, verbose=config.verbose)
    except (OSError, ValueError, IndexError) as exc:
        logger.error(exc)
        return 1
    print(f"{uf.count()} components.")
    return 0


def run_sort(config: SortConfig) -> int:
    if config.algorithm not in SORT_FUNCS:
        logger.warning("unknown sort type %r, falling back to selection", config.algorithm)
    try:
        with TokenSource.open(config.filename) as source:
            values = sort_tokens(
                source,
                config.algorithm,
                numeric=config.numeric,
                verbose=config.verbose,
            )
    except (OSError, ValueError) as exc:
        logger.error(exc)
        return 1
    print(" ".join(str(v) for v in values))
    return 0


def union_find_main(argv: Sequence[str] | None = None) -> int:
    args = union_find_parser().parse_args(argv)
    _configure_logging(args.verbose)
    return run_union_find(UnionFindConfig.from_args(args))


def sort_main(argv: Sequence[str] | None = None) -> int:
    args = sort_parser().parse_args(argv)
    _configure_logging(args.verbose)
    return run_sort(SortConfig.from_args(args))

