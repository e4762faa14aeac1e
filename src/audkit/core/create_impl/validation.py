"""
Package input validation.

Each check is independent and raises on the first rule it finds violated.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from ..config import ScaffoldConfig
from ..errors import AlreadyExistsError, NotFoundError, ValidationFailedError


def delete_existing_package(package_dir: Path, output_dir: Path) -> bool:
    """
    Delete a previously generated package directory.

    Only a direct child of output_dir is ever deleted.

    Returns:
        True if a directory was deleted

    Raises:
        ValidationFailedError: If package_dir is not directly inside output_dir
    """
    if package_dir.resolve().parent != output_dir.resolve():
        raise ValidationFailedError(
            f'Refusing to delete "{package_dir}": it is not inside "{output_dir}".'
        )
    if not package_dir.is_dir():
        return False
    shutil.rmtree(package_dir)
    return True


def check_directories(output_dir: Path, package_dir: Path) -> None:
    """
    Check the output directory exists and the package directory does not.

    Raises:
        NotFoundError: If output_dir is not an existing directory
        AlreadyExistsError: If package_dir already exists
    """
    if not output_dir.is_dir():
        raise NotFoundError(f'The directory "{output_dir}" does not exist.')

    if package_dir.exists():
        raise AlreadyExistsError(f'The directory "{package_dir}" already exists.')


def check_package_name(package_name: str, is_open_source: bool, config: ScaffoldConfig) -> None:
    """
    Check the package name carries the prefix required for its license kind.

    Examples:
        check_package_name("gg_widgets", True, config)  # ok
        check_package_name("gg_widgets", False, config)  # raises
    """
    prefix = config.required_prefix(is_open_source)
    if package_name.startswith(prefix):
        return

    if is_open_source:
        raise ValidationFailedError(f'Open source packages should start with "{prefix}"')
    raise ValidationFailedError(f'Non open source packages should start with "{prefix}"')


def check_description(description: str, config: ScaffoldConfig) -> None:
    """Check the description reaches the minimum length."""
    minimum = config.min_description_length
    if len(description) < minimum:
        raise ValidationFailedError(
            f"The description must be at least {minimum} characters long. "
            f"Got {len(description)}."
        )
