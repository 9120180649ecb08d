"""Core building blocks: naming, configuration, errors and aggregator patching."""

from nestgen.core.config import GeneratorConfig
from nestgen.core.errors import (
    DirectoryExistsError,
    InvalidNameError,
    NestgenError,
    UnsupportedArtifactError,
)
from nestgen.core.names import NameSet, derive
from nestgen.core.patcher import PatchOutcome, patch, register_module
from nestgen.core.types import ArtifactKind, Backend

__all__ = [
    "ArtifactKind",
    "Backend",
    "DirectoryExistsError",
    "GeneratorConfig",
    "InvalidNameError",
    "NameSet",
    "NestgenError",
    "PatchOutcome",
    "UnsupportedArtifactError",
    "derive",
    "patch",
    "register_module",
]
