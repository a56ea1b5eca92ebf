"""Command-line entry point: load a save game and report the result."""

from __future__ import annotations

import argparse
import sys

from .savefile import InvalidSaveFileError, read_sve_file

__all__ = ["DEFAULT_SAVE_PATH", "main"]

DEFAULT_SAVE_PATH = "./save_files/CIVIL0.SVE"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="civsve", description="Load a Civilization save game (.SVE)."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_SAVE_PATH,
        help=f"save game to load (default: {DEFAULT_SAVE_PATH})",
    )
    return parser


def main(argv=None):
    """Load the save game named on the command line; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        read_sve_file(args.path)
    except (InvalidSaveFileError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"SVE file loaded successfully from {args.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())