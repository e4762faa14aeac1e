"""
Scaffolding configuration.

Defaults match the inlavigo package conventions. A TOML file with an
``[audkit]`` table can override any of them.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import NotFoundError, ValidationFailedError

CONFIG_TABLE = "audkit"


class ScaffoldConfig(BaseModel):
    """Conventions applied to every generated package."""

    github_org: str = "inlavigo"
    open_source_prefix: str = "gg_"
    proprietary_prefix: str = "aud_"
    min_description_length: int = Field(default=60, ge=0)
    dev_dependencies: list[str] = Field(
        default_factory=lambda: ["args", "coverage", "pana", "yaml"]
    )
    main_branch: str = "main"
    commit_message: str = "Initial boilerplate"
    assets_dir: Path | None = None
    command_timeout: float | None = Field(default=None, gt=0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def github_ssh_url(self, package_name: str) -> str:
        """Git remote used for the origin check and ``git remote add``."""
        return f"git@github.com:{self.github_org}/{package_name}.git"

    def github_https_url(self, package_name: str) -> str:
        """Repository URL written into the manifest."""
        return f"{self.github_org_url}/{package_name}"

    @property
    def github_org_url(self) -> str:
        return f"https://github.com/{self.github_org}"

    def required_prefix(self, is_open_source: bool) -> str:
        return self.open_source_prefix if is_open_source else self.proprietary_prefix


def load_config(path: Path) -> ScaffoldConfig:
    """
    Load configuration from a TOML file.

    Args:
        path: TOML file with an optional ``[audkit]`` table

    Returns:
        ScaffoldConfig with file values applied over the defaults

    Raises:
        NotFoundError: If the file does not exist
        ValidationFailedError: If the file is not valid TOML or has bad values
    """
    if not path.is_file():
        raise NotFoundError(f'The config file "{path}" does not exist.')

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValidationFailedError(f'Invalid TOML in "{path}": {e}') from e

    table = data.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ValidationFailedError(f'"[{CONFIG_TABLE}]" in "{path}" must be a table.')

    # Relative asset paths are resolved against the config file location
    assets_dir = table.get("assets_dir")
    if isinstance(assets_dir, str):
        assets_path = Path(assets_dir).expanduser()
        if not assets_path.is_absolute():
            assets_path = path.parent / assets_path
        table = {**table, "assets_dir": assets_path}

    try:
        return ScaffoldConfig.model_validate(table)
    except PydanticValidationError as e:
        raise ValidationFailedError(f'Invalid configuration in "{path}"', str(e)) from e
