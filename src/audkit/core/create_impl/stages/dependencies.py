"""
Stage 7: Dev dependency installation via ``dart pub add``.
"""

from __future__ import annotations

from ..models import STAGE_INSTALL_DEPENDENCIES
from .base import CreateStage


class InstallDependenciesStage(CreateStage):
    """Adds the configured dev dependencies to the generated package."""

    @property
    def name(self) -> str:
        return STAGE_INSTALL_DEPENDENCIES

    def should_skip(self) -> tuple[bool, str | None]:
        if not self.config.dev_dependencies:
            return True, "No dev dependencies configured"
        return False, None

    def _execute(self) -> None:
        self.log("Install dependencies...")
        args = ["dart", "pub", "add", "--dev", *self.config.dev_dependencies]
        self.run_command(args, error_message=f'Error while running "{" ".join(args)}"')
