#!/usr/bin/env python3
"""text-score main entry point

Usage:
    python -m text_score score --candidate "the cat sat" --reference "the cat sat down" -n 1
    python -m text_score batch pairs.jsonl -n 2 --aggregation average
"""

from __future__ import annotations

import sys

from text_score.cli import create_parser, run


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
