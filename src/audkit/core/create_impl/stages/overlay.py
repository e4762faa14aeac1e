"""
Stage 4: Asset overlay.

Copies editor settings, ignore rules, analysis options, license, check
scripts and GitHub workflows into the freshly generated package.
"""

from __future__ import annotations

from datetime import date

from ..models import STAGE_COPY_ASSETS
from ..snippets import license_text
from ..templates import copy_directory, copy_file, find_check_files
from .base import CreateStage


class CopyAssetsStage(CreateStage):
    """Overlays the bundled assets on the package skeleton."""

    @property
    def name(self) -> str:
        return STAGE_COPY_ASSETS

    def _execute(self) -> None:
        self._copy_vscode_settings()
        self._copy_named_file(".gitignore")
        self._copy_named_file("analysis_options.yaml")
        self._write_license()
        self._copy_checks()
        self._copy_github_actions()

    def _copy_vscode_settings(self) -> None:
        self.log("Copy VSCode settings...")
        copy_directory(self.context.assets_dir / ".vscode", self.context.package_dir / ".vscode")

    def _copy_named_file(self, file_name: str) -> None:
        self.log(f"Copy {file_name}...")
        copy_file(self.context.assets_dir / file_name, self.context.package_dir / file_name)

    def _write_license(self) -> None:
        self.log("Copy LICENSE...")
        text = license_text(self.spec.is_open_source, date.today().year)
        (self.context.package_dir / "LICENSE").write_text(text, encoding="utf-8")

    def _copy_checks(self) -> None:
        self.log("Copy checks...")
        for check_file in find_check_files(self.context.assets_dir):
            copy_file(check_file, self.context.package_dir / check_file.name)

    def _copy_github_actions(self) -> None:
        self.log("Copy GitHub Actions...")
        copy_directory(self.context.assets_dir / ".github", self.context.package_dir / ".github")
