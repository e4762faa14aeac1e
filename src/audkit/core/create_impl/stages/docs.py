"""
Stage 6: README.md and CHANGELOG.md.
"""

from __future__ import annotations

from ..models import STAGE_WRITE_DOCS
from .base import CreateStage

INITIAL_VERSION = "1.0.0"


class WriteDocsStage(CreateStage):
    """Replaces the generated README and CHANGELOG."""

    @property
    def name(self) -> str:
        return STAGE_WRITE_DOCS

    def _execute(self) -> None:
        self.log("Prepare README.md...")
        readme = f"# {self.spec.package_name}\n\n{self.spec.description}\n"
        (self.context.package_dir / "README.md").write_text(readme, encoding="utf-8")

        self.log("Prepare CHANGELOG.md...")
        changelog = f"# Change Log\n\n## {INITIAL_VERSION}\n\n- Initial version.\n"
        (self.context.package_dir / "CHANGELOG.md").write_text(changelog, encoding="utf-8")
