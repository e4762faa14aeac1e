"""Shared pytest fixtures for audkit tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from audkit.core.create_impl import PackageSpec
from audkit.core.process import CommandResult

DESCRIPTION = "Reusable widgets shared between the inlavigo dart packages and apps."

# What `dart create -t package` writes into pubspec.yaml
PUBSPEC_TEMPLATE = """name: {name}
description: A starting point for Dart libraries or applications.
version: 1.0.0
# repository: https://github.com/my_org/my_repo

environment:
  sdk: ^3.5.0

dev_dependencies:
  lints: ^4.0.0
  test: ^1.24.0
"""


def create_skeleton(package_dir: Path) -> None:
    """Write the files `dart create -t package` would create."""
    name = package_dir.name
    (package_dir / "lib" / "src").mkdir(parents=True)
    (package_dir / "test").mkdir()
    (package_dir / "pubspec.yaml").write_text(PUBSPEC_TEMPLATE.format(name=name))
    (package_dir / "README.md").write_text("TODO: Put a short description of the package here.\n")
    (package_dir / "CHANGELOG.md").write_text("## 1.0.0\n\n- Initial version.\n")
    (package_dir / "analysis_options.yaml").write_text("include: package:lints/recommended.yaml\n")
    (package_dir / "lib" / f"{name}.dart").write_text(f"export 'src/{name}_base.dart';\n")
    (package_dir / "lib" / "src" / f"{name}_base.dart").write_text("class Awesome {}\n")
    (package_dir / "test" / f"{name}_test.dart").write_text("void main() {}\n")


class FakeRunner:
    """
    CommandRunner double that records invocations.

    Commands succeed unless a result was scripted for a matching prefix.
    A successful ``dart create`` writes a package skeleton.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[str, ...], Path]] = []
        self._scripted: dict[tuple[str, ...], tuple[int, str, str]] = {}

    def script(self, *prefix: str, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self._scripted[prefix] = (returncode, stdout, stderr)

    def run(self, args: Sequence[str], cwd: Path) -> CommandResult:
        argv = tuple(str(a) for a in args)
        self.calls.append((argv, cwd))

        scripted = self._match(argv)
        if scripted is not None:
            returncode, stdout, stderr = scripted
            if returncode != 0:
                return CommandResult(argv, returncode, stdout, stderr)
        else:
            stdout, stderr = "", ""

        if argv[:2] == ("dart", "create"):
            create_skeleton(cwd / argv[4])
        return CommandResult(argv, 0, stdout, stderr)

    def _match(self, argv: tuple[str, ...]) -> tuple[int, str, str] | None:
        for prefix in sorted(self._scripted, key=len, reverse=True):
            if argv[: len(prefix)] == prefix:
                return self._scripted[prefix]
        return None

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [argv for argv, _ in self.calls]

    def ran(self, *prefix: str) -> bool:
        return any(argv[: len(prefix)] == prefix for argv in self.commands)


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Return a runner that records commands instead of running them."""
    return FakeRunner()


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Return an existing, empty output directory."""
    directory = tmp_path / "dev"
    directory.mkdir()
    return directory


@pytest.fixture
def messages() -> list[str]:
    """Collect progress messages."""
    return []


def make_spec(output_dir: Path, **overrides: object) -> PackageSpec:
    """Build an open source PackageSpec for gg_widgets with overrides."""
    values: dict[str, object] = {
        "output_dir": output_dir,
        "package_name": "gg_widgets",
        "description": DESCRIPTION,
        "is_open_source": True,
        "prepare_github": True,
        "force": False,
    }
    values.update(overrides)
    return PackageSpec(**values)


@pytest.fixture
def description() -> str:
    """Return a description long enough to pass validation."""
    return DESCRIPTION


@pytest.fixture
def spec_factory(output_dir: Path):
    """Return a factory for PackageSpecs rooted at output_dir."""

    def factory(**overrides: object) -> PackageSpec:
        return make_spec(output_dir, **overrides)

    return factory
