from __future__ import annotations

from typing import Dict, List, Sequence, Tuple, Union

import matplotlib

matplotlib.use("Agg")

import pytest

from abbench.core.runner import InvocationResult

AB_OUTPUT = """This is ApacheBench, Version 2.3 <$Revision: 1879490 $>

Server Software:
Server Hostname:        127.0.0.1
Server Port:            8000

Document Path:          /
Document Length:        13 bytes

Concurrency Level:      10
Time taken for tests:   0.123 seconds
Complete requests:      1000
Failed requests:        0
Total transferred:      130000 bytes
Requests per second:    {rps} [#/sec] (mean)
Time per request:       1.230 [ms] (mean)
Transfer rate:          1032.11 [Kbytes/sec] received
"""

HEY_OUTPUT = """
Summary:
  Total:\t0.0412 secs
  Slowest:\t0.0120 secs
  Fastest:\t0.0002 secs
  Average:\t0.0019 secs
  Requests/sec:\t{rps}

  Total data:\t13000 bytes
  Size/request:\t13 bytes
"""


class FakeRunner:
    """Returns canned output per executable and records every call."""

    def __init__(self, responses: Dict[str, Union[str, InvocationResult, Exception]]):
        self.responses = responses
        self.calls: List[Tuple[Tuple[str, ...], List[str]]] = []

    def invoke(self, command: Sequence[str], arguments: Sequence[str]) -> InvocationResult:
        self.calls.append((tuple(command), list(arguments)))
        response = self.responses[command[0]]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, InvocationResult):
            return response
        return InvocationResult(output=response, returncode=0)


@pytest.fixture
def fake_runner_factory():
    return FakeRunner
