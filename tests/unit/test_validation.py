"""Tests for package input validation."""

from pathlib import Path

import pytest

from audkit.core.config import ScaffoldConfig
from audkit.core.create_impl.models import StageStatus
from audkit.core.create_impl.stages import StageContext, ValidateStage
from audkit.core.create_impl.templates import ASSETS_DIR
from audkit.core.create_impl.validation import (
    check_description,
    check_directories,
    check_package_name,
    delete_existing_package,
)
from audkit.core.errors import (
    AlreadyExistsError,
    ErrorKind,
    NotFoundError,
    ValidationFailedError,
)


class TestCheckDirectories:
    """Tests for check_directories."""

    def test_fresh_target_passes(self, output_dir: Path):
        check_directories(output_dir, output_dir / "gg_widgets")

    def test_missing_output_dir(self, tmp_path: Path):
        """A missing output directory is a not-found error."""
        missing = tmp_path / "missing"

        with pytest.raises(NotFoundError) as exc_info:
            check_directories(missing, missing / "gg_widgets")

        assert exc_info.value.kind == ErrorKind.NOT_FOUND
        assert str(missing) in str(exc_info.value)

    def test_output_dir_is_a_file(self, tmp_path: Path):
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")

        with pytest.raises(NotFoundError):
            check_directories(file_path, file_path / "gg_widgets")

    def test_existing_package_dir(self, output_dir: Path):
        """An existing package directory is an already-exists error."""
        package_dir = output_dir / "gg_widgets"
        package_dir.mkdir()

        with pytest.raises(AlreadyExistsError) as exc_info:
            check_directories(output_dir, package_dir)

        assert exc_info.value.kind == ErrorKind.ALREADY_EXISTS
        assert "already exists" in exc_info.value.message


class TestCheckPackageName:
    """Tests for the naming convention."""

    @pytest.fixture
    def config(self) -> ScaffoldConfig:
        return ScaffoldConfig()

    def test_open_source_prefix(self, config: ScaffoldConfig):
        check_package_name("gg_widgets", True, config)

    def test_proprietary_prefix(self, config: ScaffoldConfig):
        check_package_name("aud_widgets", False, config)

    @pytest.mark.parametrize("name", ["aud_widgets", "widgets", "GG_widgets"])
    def test_open_source_without_prefix(self, config: ScaffoldConfig, name: str):
        with pytest.raises(ValidationFailedError, match='start with "gg_"'):
            check_package_name(name, True, config)

    @pytest.mark.parametrize("name", ["gg_widgets", "widgets"])
    def test_proprietary_without_prefix(self, config: ScaffoldConfig, name: str):
        with pytest.raises(ValidationFailedError, match='start with "aud_"'):
            check_package_name(name, False, config)

    def test_custom_prefixes(self):
        config = ScaffoldConfig(open_source_prefix="oss_", proprietary_prefix="acme_")

        check_package_name("oss_tools", True, config)
        check_package_name("acme_tools", False, config)
        with pytest.raises(ValidationFailedError):
            check_package_name("gg_tools", True, config)


class TestCheckDescription:
    """Tests for the description length rule."""

    def test_exactly_minimum_length(self):
        check_description("x" * 60, ScaffoldConfig())

    def test_too_short(self):
        with pytest.raises(ValidationFailedError) as exc_info:
            check_description("x" * 59, ScaffoldConfig())

        assert exc_info.value.kind == ErrorKind.VALIDATION
        assert "at least 60 characters" in exc_info.value.message

    def test_configured_minimum(self):
        check_description("short enough", ScaffoldConfig(min_description_length=5))


class TestDeleteExistingPackage:
    def test_deletes_tree(self, output_dir: Path):
        package_dir = output_dir / "gg_widgets"
        (package_dir / "lib").mkdir(parents=True)
        (package_dir / "lib" / "a.dart").write_text("x")

        assert delete_existing_package(package_dir, output_dir) is True
        assert not package_dir.exists()

    def test_missing_is_noop(self, output_dir: Path):
        assert delete_existing_package(output_dir / "gg_widgets", output_dir) is False

    @pytest.mark.parametrize("relative", ["../victim", "gg_widgets/nested", "."])
    def test_refuses_paths_outside_output_dir(
        self, tmp_path: Path, output_dir: Path, relative: str
    ):
        """Only a direct child of the output directory may be deleted."""
        victim = tmp_path / "victim"
        victim.mkdir()
        (victim / "precious.txt").write_text("keep")
        (output_dir / "gg_widgets" / "nested").mkdir(parents=True)

        with pytest.raises(ValidationFailedError, match="Refusing to delete"):
            delete_existing_package(output_dir / relative, output_dir)

        assert (victim / "precious.txt").read_text() == "keep"
        assert (output_dir / "gg_widgets" / "nested").is_dir()


class TestValidateStage:
    """Tests for the validation stage as a whole."""

    def _context(self, spec, fake_runner, messages) -> StageContext:
        return StageContext(
            spec=spec,
            config=ScaffoldConfig(),
            runner=fake_runner,
            log=messages.append,
            assets_dir=ASSETS_DIR,
        )

    def test_passes_and_logs(self, spec_factory, fake_runner, messages):
        result = ValidateStage(self._context(spec_factory(), fake_runner, messages)).run()

        assert result.status == StageStatus.PASSED
        assert messages == [
            "Check package names...",
            "Check description ...",
            "Check directories...",
        ]
        assert fake_runner.calls == []

    def test_bad_name_creates_nothing(self, spec_factory, output_dir, fake_runner, messages):
        spec = spec_factory(package_name="gg_widgets", is_open_source=False)

        result = ValidateStage(self._context(spec, fake_runner, messages)).run()

        assert result.failed
        assert isinstance(result.error, ValidationFailedError)
        assert list(output_dir.iterdir()) == []

    def test_existing_dir_untouched_without_force(
        self, spec_factory, output_dir, fake_runner, messages
    ):
        marker = output_dir / "gg_widgets" / "keep.txt"
        marker.parent.mkdir()
        marker.write_text("keep")

        result = ValidateStage(self._context(spec_factory(), fake_runner, messages)).run()

        assert result.failed
        assert isinstance(result.error, AlreadyExistsError)
        assert marker.read_text() == "keep"

    def test_force_deletes_existing_dir(self, spec_factory, output_dir, fake_runner, messages):
        marker = output_dir / "gg_widgets" / "old.txt"
        marker.parent.mkdir()
        marker.write_text("old")

        result = ValidateStage(self._context(spec_factory(force=True), fake_runner, messages)).run()

        assert result.passed
        assert not (output_dir / "gg_widgets").exists()
        assert messages == [
            "Check package names...",
            "Check description ...",
            "Delete existing package...",
            "Check directories...",
        ]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"package_name": "aud_widgets"},
            {"description": "Too short."},
        ],
    )
    def test_force_keeps_existing_dir_on_invalid_input(
        self, spec_factory, output_dir, fake_runner, messages, overrides
    ):
        """A rejected name or description never triggers the forced delete."""
        marker = output_dir / overrides.get("package_name", "gg_widgets") / "keep.txt"
        marker.parent.mkdir()
        marker.write_text("keep")

        spec = spec_factory(force=True, **overrides)
        result = ValidateStage(self._context(spec, fake_runner, messages)).run()

        assert result.failed
        assert isinstance(result.error, ValidationFailedError)
        assert marker.read_text() == "keep"
        assert "Delete existing package..." not in messages
