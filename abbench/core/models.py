"""Data models for benchmarking."""

import math
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from .errors import ConfigError

Extractor = Callable[[str], Optional[float]]


@dataclass(frozen=True)
class SweepConfig:
    """Configuration for a full concurrency sweep."""

    url: str = "http://127.0.0.1:8000/"
    requests: int = 1000
    max_concurrency: int = 100
    step: int = 10

    # Seconds to wait between concurrency levels
    interval: float = 30

    tools: Tuple[str, ...] = ("ab", "go-ab", "hey")

    # Record 0.0 instead of aborting when a tool cannot be run
    keep_going: bool = False

    def __post_init__(self):
        if not self.url:
            raise ConfigError("url must not be empty")
        for name in ("requests", "max_concurrency", "step"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if not math.isfinite(self.interval) or self.interval < 0:
            raise ConfigError(
                f"interval must be a finite non-negative number, got {self.interval!r}"
            )
        if not self.tools:
            raise ConfigError("at least one tool must be configured")
        if len(set(self.tools)) != len(self.tools):
            raise ConfigError(f"duplicate tool names in {list(self.tools)}")

    @property
    def concurrencies(self) -> List[int]:
        """Concurrency levels swept by this configuration."""
        return concurrency_sequence(self.max_concurrency, self.step)


def concurrency_sequence(max_concurrency: int, step: int) -> List[int]:
    """
    Build the ascending list of concurrency levels.

    Always starts at 1, followed by every multiple of ``step`` up to and
    including ``max_concurrency``.
    """
    if step < 1:
        raise ConfigError(f"step must be a positive integer, got {step!r}")
    return [n for n in range(1, max_concurrency + 1) if n == 1 or n % step == 0]


@dataclass(frozen=True)
class ToolDescriptor:
    """An external load generator and how to read its throughput."""

    name: str
    command: Tuple[str, ...]
    extract: Extractor
    extra_args: Tuple[str, ...] = ()

    def build_arguments(self, url: str, requests: int, concurrency: int) -> List[str]:
        """Arguments passed after ``command`` for one measurement."""
        return [
            *self.extra_args,
            "-n",
            str(requests),
            "-c",
            str(concurrency),
            url,
        ]


@dataclass(frozen=True)
class ResultTable:
    """Throughput per tool, aligned by position with ``concurrencies``."""

    tools: Tuple[str, ...]
    concurrencies: Tuple[int, ...] = ()
    rows: Mapping[str, Tuple[float, ...]] = field(default_factory=dict)

    def __post_init__(self):
        # Every tool gets a row, even before the first column is added
        rows = {name: tuple(self.rows.get(name, ())) for name in self.tools}
        object.__setattr__(self, "rows", rows)

    def with_column(self, concurrency: int, column: Mapping[str, float]) -> "ResultTable":
        """Return a new table with one more concurrency column appended."""
        missing = [name for name in self.tools if name not in column]
        if missing:
            raise ValueError(f"Column for concurrency {concurrency} is missing {missing}")
        return ResultTable(
            tools=self.tools,
            concurrencies=self.concurrencies + (concurrency,),
            rows={
                name: self.rows[name] + (float(column[name]),) for name in self.tools
            },
        )

    def row(self, tool: str) -> Tuple[float, ...]:
        return self.rows[tool]

    @classmethod
    def from_rows(
        cls, concurrencies: Sequence[int], rows: Mapping[str, Sequence[float]]
    ) -> "ResultTable":
        """Build a table from already collected rows."""
        for name, values in rows.items():
            if len(values) != len(concurrencies):
                raise ValueError(
                    f"Row {name!r} has {len(values)} values for "
                    f"{len(concurrencies)} concurrency levels"
                )
        return cls(
            tools=tuple(rows),
            concurrencies=tuple(concurrencies),
            rows={name: tuple(float(v) for v in values) for name, values in rows.items()},
        )
