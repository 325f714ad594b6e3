"""CLI for concurrency sweeps."""

import argparse
import logging
import math
import sys
from typing import Dict, List, Optional

from ..core.errors import BenchmarkError
from ..core.models import SweepConfig
from ..core.preflight import preflight
from ..results.charts import generate_chart
from ..sweeps.concurrency_sweep import ConcurrencySweep, resolve_tools
from ..sweeps.presets import SWEEP_DEFAULTS, TOOL_PRESETS


def positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def non_negative_float(value: str) -> float:
    """argparse type for floats >= 0."""
    number = float(value)
    if not math.isfinite(number) or number < 0:
        raise argparse.ArgumentTypeError(
            f"must be a finite non-negative number, got {value}"
        )
    return number


def parse_tools(tools_str: str) -> List[str]:
    """Parse comma-separated tool names."""
    return [t.strip() for t in tools_str.split(",") if t.strip()]


def parse_commands(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parse repeated NAME=PATH executable overrides."""
    commands = {}
    for pair in pairs or []:
        name, sep, command = pair.partition("=")
        if not sep or not name.strip() or not command.strip():
            raise argparse.ArgumentTypeError(
                f"expected NAME=PATH for --command, got {pair!r}"
            )
        commands[name.strip()] = command.strip()
    return commands


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abbench sweep",
        description="Compare HTTP load-testing tools across a concurrency sweep",
    )
    parser.add_argument(
        "-u",
        "--url",
        type=str,
        default=SWEEP_DEFAULTS["url"],
        help=f"Target URL (default: {SWEEP_DEFAULTS['url']})",
    )
    parser.add_argument(
        "-n",
        "--requests",
        type=positive_int,
        default=SWEEP_DEFAULTS["requests"],
        help=f"Requests per tool run (default: {SWEEP_DEFAULTS['requests']})",
    )
    parser.add_argument(
        "-c",
        "--max-concurrency",
        type=positive_int,
        default=SWEEP_DEFAULTS["max_concurrency"],
        help=f"Maximum concurrency (default: {SWEEP_DEFAULTS['max_concurrency']})",
    )
    parser.add_argument(
        "-s",
        "--step",
        type=positive_int,
        default=SWEEP_DEFAULTS["step"],
        help=f"Concurrency step size (default: {SWEEP_DEFAULTS['step']})",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=non_negative_float,
        default=SWEEP_DEFAULTS["interval"],
        help=(
            "Seconds to wait between concurrency levels "
            f"(default: {SWEEP_DEFAULTS['interval']})"
        ),
    )
    default_tools = ",".join(SWEEP_DEFAULTS["tools"])
    parser.add_argument(
        "-t",
        "--tools",
        type=str,
        default=default_tools,
        help=(
            f"Comma-separated tools to run, in order (default: {default_tools}; "
            f"available: {', '.join(TOOL_PRESETS)})"
        ),
    )
    parser.add_argument(
        "--command",
        action="append",
        metavar="NAME=PATH",
        help="Override a tool's executable, e.g. --command hey=/opt/bin/hey",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Record 0.0 and continue when a tool cannot be run or exits non-zero",
    )
    parser.add_argument(
        "--preflight",
        action="store_true",
        help="Check that the target URL answers before starting the sweep",
    )
    parser.add_argument(
        "--tsv-output",
        type=str,
        default=None,
        help="Also write the TSV report to this file",
    )
    parser.add_argument(
        "--chart",
        type=str,
        default=None,
        metavar="PATH",
        help="Render a throughput chart to this PNG file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the sweep CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        commands = parse_commands(args.command)
        config = SweepConfig(
            url=args.url,
            requests=args.requests,
            max_concurrency=args.max_concurrency,
            step=args.step,
            interval=args.interval,
            tools=tuple(parse_tools(args.tools)),
            keep_going=args.keep_going,
        )
        tools = resolve_tools(config.tools, commands=commands)
    except (argparse.ArgumentTypeError, BenchmarkError) as e:
        parser.error(str(e))

    sweep = ConcurrencySweep(config, tools=tools)

    try:
        if args.preflight:
            preflight(config.url)
        sweep.run()
    except KeyboardInterrupt:
        print("\nSweep interrupted by user", file=sys.stderr)
        # Still print the levels that completed
        if sweep.table.concurrencies:
            sweep.output()
        return 130
    except BenchmarkError as e:
        print(f"Error running sweep: {e}", file=sys.stderr)
        return 1

    sweep.output()

    if args.tsv_output:
        sweep.get_aggregator().to_tsv(args.tsv_output)
    if args.chart:
        generate_chart(sweep.table, output_path=args.chart)

    return 0


if __name__ == "__main__":
    sys.exit(main())
