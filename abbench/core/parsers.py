"""Throughput extraction from load-testing tool output."""

import re
from typing import Optional, Pattern

# ab and go-ab: "Requests per second:    1234.56 [#/sec] (mean)"
AB_PATTERN = re.compile(r"Requests per second:\s+([\d.]+)\s+\[#/sec\]")

# hey: "  Requests/sec:\t987.65"
HEY_PATTERN = re.compile(r"Requests/sec:\s+([\d.]+)")


def extract_throughput(pattern: Pattern[str], text: str) -> Optional[float]:
    """Return the first captured throughput figure, or None when absent."""
    match = pattern.search(text)
    if match is None:
        return None
    try:
        return float(match.group(1))
    except ValueError:
        # The capture group also accepts strings such as "1.2.3"
        return None


def parse_ab(text: str) -> Optional[float]:
    """Parse ``ab``-style output."""
    return extract_throughput(AB_PATTERN, text)


def parse_hey(text: str) -> Optional[float]:
    """Parse ``hey`` output."""
    return extract_throughput(HEY_PATTERN, text)
