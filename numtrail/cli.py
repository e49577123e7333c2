"""Command-line interface for numtrail."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Callable, List, NoReturn, Optional

import yaml

from numtrail.algorithms.trails import find_longest_trails
from numtrail.config import OUTPUT_FORMATS, TrailConfig
from numtrail.errors import NumTrailError
from numtrail.io import read_input, read_interactive, render_json, render_text
from numtrail.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _fail(message: str) -> NoReturn:
    logger.error(message)
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def _run(
    config: TrailConfig,
    input_path: Optional[Path] = None,
    input_fn: Optional[Callable[[str], str]] = None,
) -> None:
    """Read values, compute the longest trails and print the report."""
    start = perf_counter()
    try:
        if input_path is None:
            values = read_interactive(input_fn, config)
        else:
            values = read_input(input_path, config)

        report = find_longest_trails(values)
    except FileNotFoundError:
        _fail(f"Input file not found: {input_path}")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Failed to read input {input_path}: {type(e).__name__}: {e}")
    except yaml.YAMLError as e:
        _fail(f"Failed to parse YAML input: {e}")
    except NumTrailError as e:
        _fail(f"{type(e).__name__}: {e}")

    if config.output_format == "json":
        print(render_json(report))
    else:
        sys.stdout.write(render_text(report, show_edges=config.show_edges))

    logger.debug(
        f"Processed {len(report.numbers)} values into {len(report.trails)} "
        f"trail(s) in {_format_duration(perf_counter() - start)}"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``numtrail`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="numtrail",
        description=(
            "Find the longest trails through numbers that differ by one digit "
            "edit. Prompts for a count and values unless --input is given."
        ),
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log errors"
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=None,
        help=(
            "Read values from a file instead of prompting: whitespace-separated"
            " '<count> <values...>', or YAML with a 'numbers' list; '-' for stdin"
        ),
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Report format (default: text)",
    )
    parser.add_argument(
        "--no-edges",
        action="store_true",
        help="Omit the adjacency listing from the text report",
    )
    parser.add_argument(
        "--max-vertices",
        type=int,
        default=TrailConfig.max_vertices,
        help="Reject inputs with more values than this (default: %(default)s)",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.ERROR)
    else:
        disable_debug_logging()

    if args.max_vertices < 1:
        parser.error("--max-vertices must be positive")

    config = TrailConfig(
        output_format=args.format,
        show_edges=not args.no_edges,
        max_vertices=args.max_vertices,
    )
    _run(config, input_path=args.input)


if __name__ == "__main__":
    main()
