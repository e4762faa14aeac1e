"""
audkit - Scaffolding for inlavigo dart packages.

Creates a dart package, overlays the shared assets, prepares the
manifest and initializes the git repository.
"""

from __future__ import annotations

from ._version import get_version
from .core.config import ScaffoldConfig, load_config
from .core.create_impl import CreateReport, PackageCreator, PackageSpec, create_dart_package
from .core.errors import (
    AlreadyExistsError,
    AudkitError,
    ErrorKind,
    ExternalToolError,
    FileSystemError,
    NotFoundError,
    ScaffoldError,
    ValidationFailedError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "AudkitError",
    "ScaffoldError",
    "ErrorKind",
    "ValidationFailedError",
    "NotFoundError",
    "AlreadyExistsError",
    "ExternalToolError",
    "FileSystemError",
    "ScaffoldConfig",
    "load_config",
    "PackageSpec",
    "PackageCreator",
    "CreateReport",
    "create_dart_package",
]
