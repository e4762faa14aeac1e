"""
Stage 10: Git repository initialization.

Commits the generated package and, when preparing GitHub, registers the
origin and verifies the first push with a dry run.
"""

from __future__ import annotations

from ..models import STAGE_INIT_GIT
from .base import CreateStage


class InitGitStage(CreateStage):
    """Initializes git, makes the initial commit and prepares the push."""

    @property
    def name(self) -> str:
        return STAGE_INIT_GIT

    def _execute(self) -> None:
        self.log("Init git...")
        branch = self.config.main_branch

        self._git("init")
        self._git("branch", "-M", branch)
        self._git("config", "advice.addIgnoredFile", "false")
        self._git("add", ".")
        self._git("commit", "-m", self.config.commit_message)

        if self.spec.prepare_github:
            origin = self.config.github_ssh_url(self.spec.package_name)
            self.run_command(
                ["git", "remote", "add", "origin", origin],
                error_message=f'Error add GitHub origin "{origin}"',
            )
            self._git("push", "-u", "origin", branch, "--dry-run")

        self._log_next_steps()

    def _git(self, *args: str) -> None:
        command = ["git", *args]
        self.run_command(command, error_message=f'Error while running "{" ".join(command)}"')

    def _log_next_steps(self) -> None:
        self.log("\nSuccess! To open the project with visual studio code, call ")
        self.log(f"code {self.context.package_dir}\n")

        if self.spec.prepare_github:
            self.log("To push the project to GitHub, call")
            self.log(f"git push -u origin {self.config.main_branch}\n")
            self.log("Happy coding!")
