"""
Error types for audkit package scaffolding.

Every failure carries an ``ErrorKind`` so callers can branch on the kind
of failure instead of parsing messages.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .process import CommandResult


class AudkitError(Exception):
    """Base exception for all audkit errors."""

    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with detail if available."""
        if self.detail:
            return f"{self.message}\n{self.detail}"
        return self.message


class ErrorKind(StrEnum):
    """Kinds of scaffolding failures."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    EXTERNAL_TOOL = "external_tool"
    FILESYSTEM = "filesystem"


class ScaffoldError(AudkitError):
    """Raised when a package creation stage fails."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary for JSON serialization."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "detail": self.detail,
        }


class ValidationFailedError(ScaffoldError):
    """
    Raised when input violates a naming or content rule.

    Examples:
    - Open source package without the open source prefix
    - Description shorter than the required minimum
    - Malformed configuration file
    """

    kind = ErrorKind.VALIDATION


class NotFoundError(ScaffoldError):
    """
    Raised when something the run depends on is missing.

    Examples:
    - Output directory does not exist
    - GitHub repository has not been created yet
    - Manifest line to patch is absent
    """

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(ScaffoldError):
    """Raised when the target package directory is already taken."""

    kind = ErrorKind.ALREADY_EXISTS


class FileSystemError(ScaffoldError):
    """
    Raised when reading, writing or deleting package files fails.

    Examples:
    - Permission denied while deleting an existing package
    - A generated file path is taken by a directory
    - pubspec.yaml is not valid UTF-8
    """

    kind = ErrorKind.FILESYSTEM

    @classmethod
    def from_os_error(cls, error: OSError | UnicodeDecodeError) -> FileSystemError:
        if isinstance(error, UnicodeDecodeError):
            return cls("Could not decode file contents", str(error))
        if error.filename:
            return cls(f'File operation failed on "{error.filename}"', error.strerror or str(error))
        return cls("File operation failed", str(error))


class ExternalToolError(ScaffoldError):
    """Raised when a delegated command exits with a non-zero code."""

    kind = ErrorKind.EXTERNAL_TOOL

    def __init__(self, message: str, result: CommandResult | None = None):
        self.result = result
        super().__init__(message, _format_result(result) if result else None)


def _format_result(result: CommandResult) -> str:
    lines = [f"Command: {result.command_line}", f"Exit code: {result.returncode}"]
    if result.stderr.strip():
        lines.append(f"Error: {result.stderr.strip()}")
    if result.stdout.strip():
        lines.append(f"Output: {result.stdout.strip()}")
    return "\n".join(lines)
