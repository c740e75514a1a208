"""Command line entry point for a few array exercises."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from arraykata.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)
from arraykata.stats import duplicates, mean

_SORTS = {
    "insertion": insertion_sort,
    "selection": selection_sort,
    "bubble": bubble_sort,
    "quick": quick_sort,
    "merge": merge_sort,
}

_DEFAULT_MEAN_VALUES = [1, 3, 4, 2, 6, 5, 8, 7]
_DEFAULT_SORT_VALUES = [4, 1, 3, 9, 7]
_DEFAULT_DUPLICATE_VALUES = [2, 3, 1, 2, 3]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arraykata", description="Run array exercises on integers."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    mean_cmd = commands.add_parser("mean", help="print the mean of the values")
    mean_cmd.add_argument("values", nargs="*", type=int)

    sort_cmd = commands.add_parser("sort", help="print the values sorted")
    sort_cmd.add_argument(
        "--algorithm", choices=sorted(_SORTS), default="insertion"
    )
    sort_cmd.add_argument("values", nargs="*", type=int)

    dup_cmd = commands.add_parser("duplicates", help="print repeated values")
    dup_cmd.add_argument("values", nargs="*", type=int)
    return parser


def _join(values: Sequence[int]) -> str:
    return ", ".join(str(v) for v in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the chosen exercise and print its result."""
    args = _build_parser().parse_args(argv)

    if args.command == "mean":
        values = args.values or _DEFAULT_MEAN_VALUES
        print(f"mean: {mean(values):g}")
    elif args.command == "sort":
        values = args.values or _DEFAULT_SORT_VALUES
        print(_join(_SORTS[args.algorithm](values)))
    else:
        values = args.values or _DEFAULT_DUPLICATE_VALUES
        repeated = duplicates(values)
        if repeated:
            print(_join(repeated))
    return 0


if __name__ == "__main__":
    sys.exit(main())