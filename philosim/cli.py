"""Command-line entry point of the dining philosophers simulation."""

from __future__ import annotations

import sys

from .parsing import ArgumentError, parse_args
from .simulation import Table


def main(argv: list[str] | None = None) -> int:
    """Parse the arguments, run the simulation and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
    except ArgumentError as error:
        print(f"Error: {error}")
        return 1
    try:
        completed = Table(config, sys.stdout).run()
    except RuntimeError:
        return 1
    return 0 if completed else 1


if __name__ == "__main__":
    sys.exit(main())