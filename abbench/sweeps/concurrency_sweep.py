"""Concurrency sweep orchestration across external load-testing tools."""

import dataclasses
import logging
import shlex
import sys
import time
from typing import Callable, Dict, List, Mapping, Optional, Sequence, TextIO

from ..core.errors import ConfigError, ToolInvocationError
from ..core.models import ResultTable, SweepConfig, ToolDescriptor
from ..core.runner import ProcessRunner, SubprocessRunner
from ..results.aggregator import ResultAggregator
from .presets import TOOL_PRESETS


def resolve_tools(
    names: Sequence[str],
    presets: Optional[Mapping[str, ToolDescriptor]] = None,
    commands: Optional[Mapping[str, str]] = None,
) -> List[ToolDescriptor]:
    """
    Look up tool descriptors by name, in the given order.

    Args:
        names: Tool names to run
        presets: Available tools (defaults to the built-in presets)
        commands: Optional executable overrides, e.g. {"hey": "/opt/bin/hey"}

    Returns:
        Tool descriptors in the order of ``names``
    """
    presets = TOOL_PRESETS if presets is None else presets
    commands = commands or {}

    unknown = [name for name in list(names) + list(commands) if name not in presets]
    if unknown:
        raise ConfigError(
            f"Unknown tool(s): {', '.join(unknown)} "
            f"(available: {', '.join(presets)})"
        )

    tools = []
    for name in names:
        tool = presets[name]
        if name in commands:
            command = tuple(shlex.split(commands[name]))
            if not command:
                raise ConfigError(f"Empty command for tool {name!r}")
            tool = dataclasses.replace(tool, command=command)
        tools.append(tool)
    return tools


class ConcurrencySweep:
    """
    Runs every configured tool at each concurrency level and collects throughput.

    Tools are invoked one at a time, in configured order, and every tool runs
    at a given concurrency before the sweep moves on to the next level.
    """

    def __init__(
        self,
        config: SweepConfig,
        runner: Optional[ProcessRunner] = None,
        tools: Optional[Sequence[ToolDescriptor]] = None,
        sleep: Callable[[float], None] = time.sleep,
        progress: Optional[TextIO] = None,
    ):
        """
        Initialize the sweep orchestrator.

        Args:
            config: Sweep configuration
            runner: Process runner (defaults to a subprocess runner)
            tools: Tool descriptors (defaults to the presets named in config)
            sleep: Function used to wait between concurrency levels
            progress: Stream for the progress line (defaults to stderr)
        """
        self.config = config
        self.runner = runner or SubprocessRunner()
        self.tools = list(tools) if tools is not None else resolve_tools(config.tools)
        self.sleep = sleep
        self.progress = progress
        self.concurrencies = config.concurrencies
        self.table = ResultTable(tools=tuple(tool.name for tool in self.tools))
        self.aggregator = ResultAggregator(self.table)
        self.logger = logging.getLogger(__name__)

    def run(self) -> ResultTable:
        """
        Run the full sweep and return the completed result table.

        With a positive interval the sweep waits after every level, the last
        one included, before moving on.
        """
        self.logger.info("=" * 60)
        self.logger.info("Starting Concurrency Sweep")
        self.logger.info("=" * 60)
        self.logger.info(f"  URL: {self.config.url}")
        self.logger.info(f"  Requests per run: {self.config.requests}")
        self.logger.info(f"  Concurrency levels: {self.concurrencies}")
        self.logger.info(f"  Tools: {', '.join(self.table.tools)}")
        self.logger.info(f"  Interval: {self.config.interval} seconds")
        self.logger.info("=" * 60)

        table = ResultTable(tools=self.table.tools)
        self._set_table(table)
        for concurrency in self.concurrencies:
            self._report_progress(concurrency)
            column = self.measure_column(concurrency)
            table = table.with_column(concurrency, column)
            self._set_table(table)
            self.aggregator.print_column(concurrency, column)

            if self.config.interval > 0:
                self.logger.info(
                    f"Waiting {self.config.interval} seconds to let the target settle..."
                )
                self.sleep(self.config.interval)

        self._end_progress()
        return table

    def measure_column(self, concurrency: int) -> Dict[str, float]:
        """Run each tool once at ``concurrency``; returns tool name -> req/s."""
        return {tool.name: self.measure(tool, concurrency) for tool in self.tools}

    def measure(self, tool: ToolDescriptor, concurrency: int) -> float:
        """
        Run one tool once and read its throughput.

        A report without a throughput line counts as 0.0. A tool that cannot
        be launched or exits non-zero raises ToolInvocationError, unless the
        sweep is configured to keep going.
        """
        arguments = tool.build_arguments(
            self.config.url, self.config.requests, concurrency
        )
        try:
            result = self.runner.invoke(tool.command, arguments)
        except OSError as e:
            return self._handle_failure(
                ToolInvocationError(tool.name, concurrency, f"could not launch: {e}")
            )

        if not result.ok:
            return self._handle_failure(
                ToolInvocationError(
                    tool.name,
                    concurrency,
                    f"exited with status {result.returncode}",
                    returncode=result.returncode,
                    output=result.output,
                )
            )

        throughput = tool.extract(result.output)
        if throughput is None:
            self.logger.warning(
                f"No throughput found in {tool.name} output at "
                f"concurrency={concurrency}, recording 0.0"
            )
            return 0.0
        return throughput

    def output(self, stream: Optional[TextIO] = None) -> None:
        """Print the TSV report of the collected results."""
        self.aggregator.print_report(stream)

    def get_aggregator(self) -> ResultAggregator:
        """Get the result aggregator for additional processing."""
        return self.aggregator

    def _handle_failure(self, error: ToolInvocationError) -> float:
        if not self.config.keep_going:
            raise error
        self.logger.warning(f"{error}; recording 0.0 and continuing")
        return 0.0

    def _set_table(self, table: ResultTable) -> None:
        self.table = table
        self.aggregator.set_table(table)

    def _report_progress(self, concurrency: int) -> None:
        stream = sys.stderr if self.progress is None else self.progress
        # Erase the previous line only on a terminal
        erase = "\033[2K" if stream.isatty() else ""
        stream.write(f"{erase}concurrency: {concurrency}\r")
        stream.flush()

    def _end_progress(self) -> None:
        stream = sys.stderr if self.progress is None else self.progress
        stream.write("\n")
        stream.flush()
