"""Command line entry point.

Example Usage:
    python -m pathfinder data/facebook_combined.txt.gz --start 0
    python -m pathfinder edges.txt --algorithm dijkstra --export out.edgelist
    python -m pathfinder edges.txt --add 1 5 10 --remove 2 4 --update 3 6 2
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import get_config
from .domain.errors import PathfinderError
from .pipeline import ALGORITHMS, Mutation, configure_logging, solve_from_file


class _MutationAction(argparse.Action):
    """Append a Mutation named after the option, in command line order."""

    def __call__(self, parser, namespace, values, option_string=None):
        mutations = list(getattr(namespace, self.dest, None) or [])
        mutations.append(Mutation(option_string.lstrip("-"), *values))
        setattr(namespace, self.dest, mutations)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathfinder",
        description="Shortest paths over an undirected edge-list graph.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Edge-list file (.gz is decompressed). Defaults to the configured input.",
    )
    parser.add_argument("--start", type=int, help="Start node")
    parser.add_argument("--algorithm", choices=ALGORITHMS, help="Engine(s) to run")
    parser.add_argument("--export", metavar="PATH", help="Write the loaded graph here")
    parser.add_argument(
        "--add",
        nargs=3,
        type=int,
        action=_MutationAction,
        dest="mutations",
        metavar=("U", "V", "W"),
        help="Add edge U-V with weight W, then rerun",
    )
    parser.add_argument(
        "--remove",
        nargs=2,
        type=int,
        action=_MutationAction,
        dest="mutations",
        metavar=("U", "V"),
        help="Remove every edge U-V, then rerun",
    )
    parser.add_argument(
        "--update",
        nargs=3,
        type=int,
        action=_MutationAction,
        dest="mutations",
        metavar=("U", "V", "W"),
        help="Set the weight of edge U-V to W, then rerun",
    )
    parser.add_argument("--log-level", help="Override PATHFINDER_LOG_LEVEL")
    parser.set_defaults(mutations=[])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    observability = get_config().observability
    if args.log_level:
        observability = observability.model_copy(update={"level": args.log_level})
    configure_logging(observability)

    try:
        print(
            solve_from_file(
                args.input,
                start=args.start,
                algorithm=args.algorithm,
                export_path=args.export,
                mutations=args.mutations,
            )
        )
    except PathfinderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
