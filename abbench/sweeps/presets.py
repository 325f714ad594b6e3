"""Predefined tools and sweep defaults."""

from ..core.models import ToolDescriptor
from ..core.parsers import parse_ab, parse_hey

# Apache Bench; -q suppresses the progress counter on stderr
AB = ToolDescriptor(name="ab", command=("ab",), extract=parse_ab, extra_args=("-q",))

# Go clone of ab, same report format but only -v/-n/-c are accepted
GO_AB = ToolDescriptor(name="go-ab", command=("go-ab",), extract=parse_ab)

HEY = ToolDescriptor(name="hey", command=("hey",), extract=parse_hey)

TOOL_PRESETS = {tool.name: tool for tool in (AB, GO_AB, HEY)}

DEFAULT_TOOLS = ("ab", "go-ab", "hey")

# Concurrency sweep defaults
SWEEP_DEFAULTS = {
    "url": "http://127.0.0.1:8000/",
    "requests": 1000,
    "max_concurrency": 100,
    "step": 10,
    "interval": 30,
    "tools": DEFAULT_TOOLS,
}

# Hello-world target server
SERVER_DEFAULTS = {
    "host": "127.0.0.1",
    "port": 8000,
}
