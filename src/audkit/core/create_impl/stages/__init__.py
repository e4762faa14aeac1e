"""
Package creation stages.

Each stage implements one step of the pipeline; stages run in sequence.
"""

from .base import CreateStage, StageContext
from .dependencies import InstallDependenciesStage
from .docs import WriteDocsStage
from .generate import CreatePackageStage
from .manifest import PreparePubspecStage
from .origin import CheckOriginStage
from .overlay import CopyAssetsStage
from .quality import QualityGateStage
from .repository import InitGitStage
from .seed import SeedSourceStage
from .validate import ValidateStage

__all__ = [
    "CreateStage",
    "StageContext",
    "ValidateStage",
    "CheckOriginStage",
    "CreatePackageStage",
    "CopyAssetsStage",
    "PreparePubspecStage",
    "WriteDocsStage",
    "InstallDependenciesStage",
    "SeedSourceStage",
    "QualityGateStage",
    "InitGitStage",
]
