"""
Asset copying and literal text substitution.

Handles copying the bundled dart package assets and patching
generated files line by line.
"""

from __future__ import annotations

import re
import shutil
from pathlib import Path

from ..errors import NotFoundError

# Assets bundled with audkit, overlaid on every generated package
ASSETS_DIR = Path(__file__).parent.parent.parent / "templates" / "dart_package"

# Prefix of check scripts copied into the package root
CHECK_FILE_PREFIX = "check"


def substitute_template_vars(content: str, variables: dict[str, str]) -> str:
    """
    Substitute literal placeholders in template content.

    Examples:
        substitute_template_vars("Copyright YEAR", {"YEAR": "2024"})
        # -> "Copyright 2024"
    """
    for key, value in variables.items():
        content = content.replace(key, value)
    return content


def copy_directory(source: Path, target: Path) -> list[Path]:
    """
    Mirror a directory tree into target.

    Target and all intermediate directories are created before the first
    file is copied.

    Returns:
        Copied files, relative to target

    Raises:
        NotFoundError: If source is not a directory
    """
    if not source.is_dir():
        raise NotFoundError(f'Asset directory "{source}" does not exist.')

    target.mkdir(parents=True, exist_ok=True)

    copied: list[Path] = []
    for src_path in sorted(source.rglob("*")):
        rel_path = src_path.relative_to(source)
        dst_path = target / rel_path
        if src_path.is_dir():
            dst_path.mkdir(parents=True, exist_ok=True)
        elif src_path.is_file():
            dst_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src_path, dst_path)
            copied.append(rel_path)
    return copied


def copy_file(source: Path, target: Path) -> None:
    """Copy a single asset file, keeping its permissions."""
    if not source.is_file():
        raise NotFoundError(f'Asset file "{source}" does not exist.')
    shutil.copy2(source, target)


def find_check_files(assets_dir: Path) -> list[Path]:
    """List files directly inside assets_dir whose name starts with "check"."""
    if not assets_dir.is_dir():
        raise NotFoundError(f'Asset directory "{assets_dir}" does not exist.')
    return sorted(
        p for p in assets_dir.iterdir() if p.is_file() and p.name.startswith(CHECK_FILE_PREFIX)
    )


def replace_in_text(content: str, pattern: str, replacement: str, source: str = "text") -> str:
    """
    Replace every line matching pattern with a literal replacement.

    The pattern is matched in multi-line mode, so ``^`` and ``$`` anchor
    at line boundaries.

    Args:
        content: Text to patch
        pattern: Regular expression expected to match at least once
        replacement: Literal replacement (no group references)
        source: Name of the text for error messages

    Returns:
        Patched text

    Raises:
        NotFoundError: If pattern does not match
    """
    compiled = re.compile(pattern, re.MULTILINE)
    if not compiled.search(content):
        raise NotFoundError(f'Search string "{pattern}" not found in {source}')
    return compiled.sub(lambda _match: replacement, content)


def replace_in_file(path: Path, pattern: str, replacement: str) -> None:
    """
    Patch a file in place via replace_in_text.

    The file is left untouched when the pattern does not match.
    """
    if not path.is_file():
        raise NotFoundError(f'File "{path}" does not exist.')

    content = path.read_text(encoding="utf-8")
    updated = replace_in_text(content, pattern, replacement, source=f'file "{path}"')
    path.write_text(updated, encoding="utf-8")
