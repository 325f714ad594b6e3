"""Exceptions raised by the benchmarking harness."""

from typing import Optional


class BenchmarkError(Exception):
    """Base class for harness errors."""


class ConfigError(BenchmarkError, ValueError):
    """Raised when a sweep configuration is invalid."""


class ToolInvocationError(BenchmarkError):
    """Raised when an external load-testing tool cannot be run or exits non-zero."""

    def __init__(
        self,
        tool: str,
        concurrency: int,
        message: str,
        returncode: Optional[int] = None,
        output: Optional[str] = None,
    ):
        super().__init__(f"{tool} failed at concurrency {concurrency}: {message}")
        self.tool = tool
        self.concurrency = concurrency
        self.returncode = returncode
        self.output = output
