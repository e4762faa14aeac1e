"""
Stage 9: Fix, analyze and format.

Runs ``dart fix``, ``dart analyze`` and ``dart format``, then checks
that formatting left nothing to change.
"""

from __future__ import annotations

from ..models import STAGE_QUALITY_GATE
from .base import CreateStage


class QualityGateStage(CreateStage):
    """Brings the generated package to a clean analyze and format state."""

    @property
    def name(self) -> str:
        return STAGE_QUALITY_GATE

    def _execute(self) -> None:
        self.log("Fix errors and warnings...")
        package_dir = str(self.context.package_dir)

        self.run_command(
            ["dart", "fix", "--apply", package_dir],
            error_message="Error while running dart fix",
        )
        self.run_command(
            ["dart", "analyze", package_dir],
            error_message=(
                "Error while running dart analyze. "
                "Please adapt the bundled audkit templates to fix the issues."
            ),
        )
        self.run_command(
            ["dart", "format", package_dir],
            error_message="Error while running dart format",
        )
        self.run_command(
            ["dart", "format", package_dir, "--set-exit-if-changed"],
            error_message="Unformatted files left after running dart format",
        )
