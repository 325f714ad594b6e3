"""Concurrency sweep orchestration."""

from .concurrency_sweep import ConcurrencySweep, resolve_tools
from .presets import (
    DEFAULT_TOOLS,
    SERVER_DEFAULTS,
    SWEEP_DEFAULTS,
    TOOL_PRESETS,
)

__all__ = [
    "ConcurrencySweep",
    "resolve_tools",
    "DEFAULT_TOOLS",
    "SERVER_DEFAULTS",
    "SWEEP_DEFAULTS",
    "TOOL_PRESETS",
]
