"""
Data models for dart package creation.

These models define the validated package input, per-stage results,
and the final report of a run.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..errors import ScaffoldError, ValidationFailedError

# Dart package names: lowercase letters, digits and underscores
PACKAGE_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")


class PackageSpec(BaseModel):
    """
    Input of one package creation run.

    Attributes:
        output_dir: Existing parent directory of the new package
        package_name: Package identifier, prefixed by license kind
        description: Manifest and README description
        is_open_source: Selects license text and naming prefix
        prepare_github: Check the GitHub origin and register it after commit
        force: Delete an existing package directory before generating
    """

    output_dir: Path
    package_name: str
    description: str
    is_open_source: bool = False
    prepare_github: bool = True
    force: bool = False

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("output_dir")
    @classmethod
    def _expand_output_dir(cls, value: Path) -> Path:
        return value.expanduser().absolute()

    @field_validator("package_name")
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        if not PACKAGE_NAME_PATTERN.fullmatch(value):
            raise ValueError(
                f'"{value}" is not a valid package name. Use lowercase letters, '
                "digits and underscores, starting with a letter."
            )
        return value

    @property
    def package_dir(self) -> Path:
        return self.output_dir / self.package_name


def build_spec(**fields: Any) -> PackageSpec:
    """
    Build a PackageSpec, reporting bad input as a scaffolding error.

    Raises:
        ValidationFailedError: If any field is invalid
    """
    try:
        return PackageSpec(**fields)
    except PydanticValidationError as e:
        messages = [str(err["msg"]).removeprefix("Value error, ") for err in e.errors()]
        raise ValidationFailedError("; ".join(messages)) from e


class StageStatus(StrEnum):
    """Status of a creation stage."""

    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class StageResult:
    """Result from a single creation stage."""

    name: str
    status: StageStatus = StageStatus.PENDING
    duration_ms: int = 0
    error: ScaffoldError | None = None
    skip_reason: str | None = None

    @property
    def passed(self) -> bool:
        return self.status == StageStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == StageStatus.FAILED

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "status": self.status.value,
            "duration_ms": self.duration_ms,
            "error": self.error.to_dict() if self.error else None,
            "skip_reason": self.skip_reason,
        }


@dataclass
class CreateReport:
    """Outcome of a complete package creation run."""

    package_name: str
    package_dir: Path
    stages: list[StageResult] = field(default_factory=list)

    @property
    def failed_stage(self) -> StageResult | None:
        """First stage that failed, if any."""
        return next((s for s in self.stages if s.failed), None)

    @property
    def error(self) -> ScaffoldError | None:
        stage = self.failed_stage
        return stage.error if stage else None

    @property
    def succeeded(self) -> bool:
        return self.failed_stage is None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        failed = self.failed_stage
        return {
            "package_name": self.package_name,
            "package_dir": str(self.package_dir),
            "status": "passed" if failed is None else "failed",
            "failed_stage": failed.name if failed else None,
            "stages": [s.to_dict() for s in self.stages],
        }


# Stage names as constants
STAGE_VALIDATE = "validate"
STAGE_CHECK_ORIGIN = "check_origin"
STAGE_CREATE_PACKAGE = "create_package"
STAGE_COPY_ASSETS = "copy_assets"
STAGE_PREPARE_PUBSPEC = "prepare_pubspec"
STAGE_WRITE_DOCS = "write_docs"
STAGE_INSTALL_DEPENDENCIES = "install_dependencies"
STAGE_SEED_SOURCE = "seed_source"
STAGE_QUALITY_GATE = "quality_gate"
STAGE_INIT_GIT = "init_git"
