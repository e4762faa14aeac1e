"""
Dart package creation runner.

Orchestrates the execution of all creation stages.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..config import ScaffoldConfig
from ..process import CommandRunner, SubprocessRunner
from .models import CreateReport, PackageSpec, StageStatus, build_spec
from .stages import (
    CheckOriginStage,
    CopyAssetsStage,
    CreatePackageStage,
    CreateStage,
    InitGitStage,
    InstallDependenciesStage,
    PreparePubspecStage,
    QualityGateStage,
    SeedSourceStage,
    StageContext,
    ValidateStage,
    WriteDocsStage,
)
from .templates import ASSETS_DIR

logger = logging.getLogger(__name__)


class PackageCreator:
    """
    Orchestrates dart package creation.

    Runs stages in sequence. The first failing stage stops the run and
    every later stage is reported as skipped.
    """

    def __init__(
        self,
        spec: PackageSpec,
        config: ScaffoldConfig | None = None,
        runner: CommandRunner | None = None,
        progress_callback: Callable[[str], None] | None = None,
    ):
        """
        Initialize the creator.

        Args:
            spec: Validated package input
            config: Scaffolding conventions (defaults to ScaffoldConfig())
            runner: External command runner (defaults to SubprocessRunner)
            progress_callback: Optional callback for progress messages
        """
        self.spec = spec
        self.config = config or ScaffoldConfig()
        self.runner = runner or SubprocessRunner(timeout=self.config.command_timeout)
        self.progress_callback = progress_callback

        self.context = StageContext(
            spec=self.spec,
            config=self.config,
            runner=self.runner,
            log=self._log,
            assets_dir=self.config.assets_dir or ASSETS_DIR,
        )

    def _log(self, message: str) -> None:
        if self.progress_callback:
            self.progress_callback(message)

    def run(self) -> CreateReport:
        """
        Execute all creation stages.

        Returns:
            CreateReport with all stage results
        """
        self._log("\nCreate dart package...\n")
        logger.info("Creating package %s in %s", self.spec.package_name, self.spec.output_dir)

        report = CreateReport(
            package_name=self.spec.package_name,
            package_dir=self.spec.package_dir,
        )

        failed = False
        for stage in self._get_stages():
            if failed:
                result = stage.result
                result.status = StageStatus.SKIPPED
                result.skip_reason = "Skipped due to previous stage failure"
                report.stages.append(result)
                continue

            result = stage.run()
            report.stages.append(result)
            if result.failed:
                failed = True

        if report.succeeded:
            logger.info("Package %s created at %s", self.spec.package_name, self.spec.package_dir)
        return report

    def _get_stages(self) -> list[CreateStage]:
        return [
            ValidateStage(self.context),
            CheckOriginStage(self.context),
            CreatePackageStage(self.context),
            CopyAssetsStage(self.context),
            PreparePubspecStage(self.context),
            WriteDocsStage(self.context),
            InstallDependenciesStage(self.context),
            SeedSourceStage(self.context),
            QualityGateStage(self.context),
            InitGitStage(self.context),
        ]


def create_dart_package(
    output_dir: Path,
    package_name: str,
    description: str,
    is_open_source: bool = False,
    prepare_github: bool = True,
    force: bool = False,
    config: ScaffoldConfig | None = None,
    runner: CommandRunner | None = None,
    progress_callback: Callable[[str], None] | None = None,
) -> CreateReport:
    """
    Convenience function to create a dart package.

    Args:
        output_dir: Existing parent directory
        package_name: Package name
        description: Package description
        is_open_source: Use the open source license and prefix
        prepare_github: Check origin and prepare the push
        force: Delete an existing package first
        config: Scaffolding conventions
        runner: External command runner
        progress_callback: Optional callback for progress messages

    Returns:
        CreateReport of the successful run

    Raises:
        ValidationFailedError: If the package input is malformed
        ScaffoldError: The error of the first failing stage
    """
    spec = build_spec(
        output_dir=output_dir,
        package_name=package_name,
        description=description,
        is_open_source=is_open_source,
        prepare_github=prepare_github,
        force=force,
    )
    report = PackageCreator(
        spec,
        config=config,
        runner=runner,
        progress_callback=progress_callback,
    ).run()

    if report.error is not None:
        raise report.error
    return report
