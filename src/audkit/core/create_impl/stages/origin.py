"""
Stage 2: GitHub origin check.

Makes sure the GitHub repository exists before any file is written,
so the final push can succeed.
"""

from __future__ import annotations

from ...errors import ExternalToolError, NotFoundError
from ..models import STAGE_CHECK_ORIGIN
from .base import CreateStage

# git exits with 128 when the remote repository cannot be read
GIT_REPOSITORY_NOT_FOUND = 128


class CheckOriginStage(CreateStage):
    """Verifies the GitHub repository for the package exists."""

    @property
    def name(self) -> str:
        return STAGE_CHECK_ORIGIN

    def should_skip(self) -> tuple[bool, str | None]:
        if not self.spec.prepare_github:
            return True, "GitHub preparation disabled"
        return False, None

    def _execute(self) -> None:
        self.log("Check GitHub origin...")

        repo = self.config.github_ssh_url(self.spec.package_name)
        result = self.context.runner.run(["git", "ls-remote", repo, "origin"], self.spec.output_dir)

        if result.returncode == GIT_REPOSITORY_NOT_FOUND:
            raise NotFoundError(
                f'The github repository "{repo}" does not exist. '
                f'Please visit "{self.config.github_org_url}" and create the repository.'
            )
        if not result.ok:
            raise ExternalToolError(f'Error while running "{result.command_line}".', result)
