"""CLI command handling

Provides the run and demo commands.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import structlog

from alt_lru.config import CacheConfig
from alt_lru.exceptions import CacheError
from alt_lru.factory import create_cache
from alt_lru.script import EvictionRecorder, parse_script, run_script

logger = structlog.get_logger()

# (title, capacity, script)
DEMO_SCENARIOS: list[tuple[str, int, str]] = [
    (
        "recency and eviction",
        2,
        """
        put 1 A
        put 2 B
        get 1
        keys
        put 3 C
        get 2
        keys
        put 1 Z
        get 1
        size
        """,
    ),
    (
        "single slot",
        1,
        """
        put 1 A
        put 2 B
        get 1
        get 2
        """,
    ),
    ("invalid capacity", 0, ""),
]


def configure_logging(verbose: bool = False) -> None:
    """Route structlog through stdlib logging on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer() if verbose else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def run_lines(lines: list[str], config: CacheConfig) -> list[str]:
    """Replay script lines against a fresh cache and return formatted results.

    Raises:
        InvalidCapacityError: If the configured capacity is below 1
        ScriptError: If a line cannot be parsed
    """
    operations = parse_script(lines)
    evictions = EvictionRecorder()
    cache = create_cache(config, on_evict=evictions)
    log = logger.bind(capacity=config.capacity, thread_safe=config.thread_safe)
    log.debug("cache_created")

    results = run_script(cache, operations, evictions)
    log.info("script_completed", operations=len(results), evictions=len(evictions), size=cache.size())
    return [result.format() for result in results]


def cmd_run(args: argparse.Namespace) -> int:
    """Execute the run command"""
    configure_logging(args.verbose)
    try:
        env_config = CacheConfig.from_env()
        config = CacheConfig(
            capacity=args.capacity if args.capacity is not None else env_config.capacity,
            thread_safe=args.thread_safe if args.thread_safe is not None else env_config.thread_safe,
        )
        if args.script is None or str(args.script) == "-":
            lines = sys.stdin.read().splitlines()
        else:
            lines = args.script.read_text(encoding="utf-8").splitlines()

        log = logger.bind(capacity=config.capacity, thread_safe=config.thread_safe)
        log.info("script_started", lines=len(lines))
        for line in run_lines(lines, config):
            print(line)
        return 0

    except CacheError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: cannot read script: {e}", file=sys.stderr)
        return 1


def cmd_demo(args: argparse.Namespace) -> int:
    """Execute the demo command"""
    configure_logging(args.verbose)
    for title, capacity, script in DEMO_SCENARIOS:
        print(f"== {title} (capacity={capacity})")
        try:
            for line in run_lines(script.splitlines(), CacheConfig(capacity=capacity)):
                print(f"  {line}")
        except CacheError as e:
            print(f"  rejected: {e}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI parser"""
    parser = argparse.ArgumentParser(
        prog="alt-lru",
        description="alt-lru - replay operation scripts against an in-memory LRU cache",
    )
    subparsers = parser.add_subparsers(dest="command", help="available commands")

    run_parser = subparsers.add_parser(
        "run",
        help="run an operation script (file or stdin)",
    )
    run_parser.add_argument(
        "script",
        nargs="?",
        type=Path,
        default=None,
        help="script file; omit or pass - to read stdin",
    )
    run_parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="cache capacity (default: ALT_LRU_CAPACITY or 128)",
    )
    run_parser.add_argument(
        "--thread-safe",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="use the lock-guarded cache variant (default: ALT_LRU_THREAD_SAFE or off)",
    )
    run_parser.add_argument(
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )

    demo_parser = subparsers.add_parser(
        "demo",
        help="run the built-in eviction scenarios",
    )
    demo_parser.add_argument(
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )

    return parser
