"""Core benchmarking components."""

from .errors import BenchmarkError, ConfigError, ToolInvocationError
from .models import ResultTable, SweepConfig, ToolDescriptor, concurrency_sequence
from .parsers import parse_ab, parse_hey
from .runner import InvocationResult, ProcessRunner, SubprocessRunner

__all__ = [
    "BenchmarkError",
    "ConfigError",
    "ToolInvocationError",
    "ResultTable",
    "SweepConfig",
    "ToolDescriptor",
    "concurrency_sequence",
    "parse_ab",
    "parse_hey",
    "InvocationResult",
    "ProcessRunner",
    "SubprocessRunner",
]
