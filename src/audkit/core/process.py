"""
External command execution.

All delegated tools (``dart``, ``git``) are invoked through a
``CommandRunner`` so that tests can substitute a runner that records
invocations and returns scripted results.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from .errors import ExternalToolError

logger = logging.getLogger(__name__)

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        return shlex.join(self.args)


@runtime_checkable
class CommandRunner(Protocol):
    """Runs a command synchronously and captures its output."""

    def run(self, args: Sequence[str], cwd: Path) -> CommandResult:
        """Run ``args`` in ``cwd`` and wait for it to exit."""
        ...


class SubprocessRunner:
    """CommandRunner backed by ``subprocess.run``."""

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout

    def run(self, args: Sequence[str], cwd: Path) -> CommandResult:
        argv = tuple(str(a) for a in args)
        logger.debug("Running %s in %s", shlex.join(argv), cwd)

        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            return CommandResult(
                args=argv,
                returncode=COMMAND_NOT_FOUND,
                stderr=f"{argv[0]}: command not found",
            )
        except subprocess.TimeoutExpired as e:
            raise ExternalToolError(
                f'"{shlex.join(argv)}" timed out after {self.timeout} seconds'
            ) from e

        logger.debug("%s exited with %d", argv[0], completed.returncode)
        return CommandResult(
            args=argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


def run_checked(
    runner: CommandRunner,
    args: Sequence[str],
    cwd: Path,
    error_message: str | None = None,
) -> CommandResult:
    """
    Run a command and raise if it exits non-zero.

    Args:
        runner: Runner to execute with
        args: Command and arguments
        cwd: Working directory
        error_message: Message for the raised error (defaults to the command line)

    Returns:
        The successful CommandResult

    Raises:
        ExternalToolError: If the command exits with a non-zero code
    """
    result = runner.run(args, cwd)
    if not result.ok:
        message = error_message or f'Error while running "{result.command_line}"'
        raise ExternalToolError(message, result)
    return result
