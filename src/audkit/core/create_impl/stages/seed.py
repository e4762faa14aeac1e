"""
Stage 8: Base source file.
"""

from __future__ import annotations

from ..models import STAGE_SEED_SOURCE
from ..snippets import base_dart_source
from .base import CreateStage


class SeedSourceStage(CreateStage):
    """Writes lib/src/<name>_base.dart from the file header and base snippet."""

    @property
    def name(self) -> str:
        return STAGE_SEED_SOURCE

    def _execute(self) -> None:
        self.log("Prepare base_dart.dart...")
        target = self.context.package_dir / "lib" / "src" / f"{self.spec.package_name}_base.dart"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(base_dart_source(), encoding="utf-8")
