"""Installed audkit version."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = "audkit"


def get_version() -> str:
    """Version of the installed distribution, or 0.0.0 when running from a bare checkout."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"
