"""
Dart package creation for audkit.

This package contains modular implementations for package creation:
- models.py - PackageSpec, stage results and the run report
- validation.py - Directory, naming and description checks
- templates.py - Asset copying and manifest patching
- snippets.py - License texts and seeded source
- stages/ - One module per pipeline stage
- runner.py - Stage orchestration
"""

from __future__ import annotations

from .models import CreateReport, PackageSpec, StageResult, StageStatus, build_spec
from .runner import PackageCreator, create_dart_package
from .templates import (
    ASSETS_DIR,
    copy_directory,
    replace_in_file,
    replace_in_text,
    substitute_template_vars,
)
from .validation import check_description, check_directories, check_package_name

__all__ = [
    # Models
    "PackageSpec",
    "build_spec",
    "StageResult",
    "StageStatus",
    "CreateReport",
    # Validation
    "check_directories",
    "check_package_name",
    "check_description",
    # Templates
    "ASSETS_DIR",
    "copy_directory",
    "replace_in_text",
    "replace_in_file",
    "substitute_template_vars",
    # Runner
    "PackageCreator",
    "create_dart_package",
]
