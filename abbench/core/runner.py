"""Process invocation for external load-testing tools."""

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol, Sequence


@dataclass(frozen=True)
class InvocationResult:
    """Captured output of one tool run."""

    output: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ProcessRunner(Protocol):
    """Anything that can run a command and hand back its textual output."""

    def invoke(self, command: Sequence[str], arguments: Sequence[str]) -> InvocationResult:
        ...


class SubprocessRunner:
    """Runs tools with :func:`subprocess.run`, blocking until they exit."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def invoke(self, command: Sequence[str], arguments: Sequence[str]) -> InvocationResult:
        """
        Run ``command`` with ``arguments`` and capture stdout and stderr together.

        No timeout is applied: a tool that never exits blocks the caller.

        Raises:
            OSError: if the executable cannot be launched (e.g. not installed)
        """
        cmd = [*command, *arguments]
        self.logger.debug(f"Running: {' '.join(cmd)}")

        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )

        if result.returncode != 0:
            self.logger.debug(f"{cmd[0]} exited with status {result.returncode}")

        return InvocationResult(output=result.stdout or "", returncode=result.returncode)
