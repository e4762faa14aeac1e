"""
Stage 3: Package skeleton generation via ``dart create``.
"""

from __future__ import annotations

from ...errors import ExternalToolError
from ..models import STAGE_CREATE_PACKAGE
from .base import CreateStage


class CreatePackageStage(CreateStage):
    """Creates the package skeleton with the dart package template."""

    @property
    def name(self) -> str:
        return STAGE_CREATE_PACKAGE

    def _execute(self) -> None:
        self.log("Create package...")

        result = self.context.runner.run(
            ["dart", "create", "-t", "package", self.spec.package_name, "--no-pub"],
            self.spec.output_dir,
        )
        if result.ok:
            return

        # Forward the tool output before failing; later stages need the skeleton
        if result.stderr:
            self.log(result.stderr)
        if result.stdout:
            self.log(result.stdout)
        raise ExternalToolError("Error while running dart create", result)
