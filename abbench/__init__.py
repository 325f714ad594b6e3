"""Benchmark harness comparing external HTTP load-testing tools."""

__version__ = "0.1.0"
