"""
Base class for package creation stages.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ...config import ScaffoldConfig
from ...errors import FileSystemError, ScaffoldError
from ...process import CommandResult, CommandRunner, run_checked
from ..models import PackageSpec, StageResult, StageStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageContext:
    """Shared, read-only context passed to every stage."""

    spec: PackageSpec
    config: ScaffoldConfig
    runner: CommandRunner
    log: Callable[[str], None]
    assets_dir: Path

    @property
    def package_dir(self) -> Path:
        return self.spec.package_dir


class CreateStage(ABC):
    """Base class for package creation stages."""

    def __init__(self, context: StageContext):
        """Initialize the stage with shared context."""
        self.context = context
        self._result: StageResult | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the stage name."""
        ...

    @property
    def result(self) -> StageResult:
        """Get the stage result."""
        if self._result is None:
            self._result = StageResult(name=self.name)
        return self._result

    @property
    def spec(self) -> PackageSpec:
        return self.context.spec

    @property
    def config(self) -> ScaffoldConfig:
        return self.context.config

    def should_skip(self) -> tuple[bool, str | None]:
        """
        Check if this stage should be skipped.

        Returns:
            Tuple of (should_skip, reason)
        """
        return False, None

    def run(self) -> StageResult:
        """
        Execute the stage.

        Returns:
            StageResult with status and, on failure, the error
        """
        self._result = StageResult(name=self.name)

        should_skip, skip_reason = self.should_skip()
        if should_skip:
            self._result.status = StageStatus.SKIPPED
            self._result.skip_reason = skip_reason
            return self._result

        self._result.status = StageStatus.RUNNING
        start_time = time.time()

        try:
            self._execute()
            self._result.status = StageStatus.PASSED
        except ScaffoldError as e:
            logger.error("Stage %s failed: %s", self.name, e.message)
            self._result.status = StageStatus.FAILED
            self._result.error = e
        except (OSError, UnicodeDecodeError) as e:
            error = FileSystemError.from_os_error(e)
            logger.error("Stage %s failed: %s", self.name, error.message)
            self._result.status = StageStatus.FAILED
            self._result.error = error
        finally:
            elapsed = time.time() - start_time
            self._result.duration_ms = int(elapsed * 1000)

        return self._result

    @abstractmethod
    def _execute(self) -> None:
        """
        Execute the stage logic.

        Implementations raise ScaffoldError to fail the stage. File
        system errors are reported as FileSystemError.
        """
        ...

    def log(self, message: str) -> None:
        """Send a progress message to the caller."""
        self.context.log(message)

    def run_command(
        self,
        args: Sequence[str],
        cwd: Path | None = None,
        error_message: str | None = None,
    ) -> CommandResult:
        """Run a command (in the package directory by default), raising on failure."""
        return run_checked(
            self.context.runner,
            args,
            cwd or self.context.package_dir,
            error_message,
        )
