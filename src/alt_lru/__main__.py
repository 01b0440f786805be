#!/usr/bin/env python3
"""alt-lru main entry point

Usage:
    uv run python -m alt_lru run script.txt --capacity 2
    uv run python -m alt_lru run --thread-safe < script.txt
    uv run python -m alt_lru demo
"""

from __future__ import annotations

import sys

from alt_lru.cli import cmd_demo, cmd_run, create_parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "run":
        return cmd_run(args)
    elif args.command == "demo":
        return cmd_demo(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
