"""
Stage 5: pubspec.yaml patching.
"""

from __future__ import annotations

from ..models import STAGE_PREPARE_PUBSPEC
from ..templates import replace_in_file
from .base import CreateStage

REPOSITORY_PATTERN = r"^#\s*repository:.*"
DESCRIPTION_PATTERN = r"^description:.*"


class PreparePubspecStage(CreateStage):
    """Activates the repository line and sets the description in pubspec.yaml."""

    @property
    def name(self) -> str:
        return STAGE_PREPARE_PUBSPEC

    def _execute(self) -> None:
        self.log("Prepare pubspec.yaml...")
        pubspec = self.context.package_dir / "pubspec.yaml"

        replace_in_file(
            pubspec,
            REPOSITORY_PATTERN,
            f"repository: {self.config.github_https_url(self.spec.package_name)}",
        )
        replace_in_file(pubspec, DESCRIPTION_PATTERN, f"description: {self.spec.description}")
