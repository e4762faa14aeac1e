"""
Stage 1: Input validation.

Checks naming convention and description length, optionally deletes
a previous package, then checks directories. Nothing on disk changes
until the name and description are accepted.
"""

from __future__ import annotations

from ..models import STAGE_VALIDATE
from ..validation import (
    check_description,
    check_directories,
    check_package_name,
    delete_existing_package,
)
from .base import CreateStage


class ValidateStage(CreateStage):
    """Validates the package spec before anything is generated."""

    @property
    def name(self) -> str:
        return STAGE_VALIDATE

    def _execute(self) -> None:
        self.log("Check package names...")
        check_package_name(self.spec.package_name, self.spec.is_open_source, self.config)

        self.log("Check description ...")
        check_description(self.spec.description, self.config)

        if self.spec.force:
            self.log("Delete existing package...")
            delete_existing_package(self.spec.package_dir, self.spec.output_dir)

        self.log("Check directories...")
        check_directories(self.spec.output_dir, self.spec.package_dir)
