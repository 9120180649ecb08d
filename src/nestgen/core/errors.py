"""Exception hierarchy raised by the generator building blocks."""

from __future__ import annotations

from pathlib import Path


class NestgenError(Exception):
    """Base class for every error raised by nestgen."""


class InvalidNameError(NestgenError, ValueError):
    """Raised when a module name cannot be used as an identifier or route segment."""

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid module name {raw!r}: {reason}")


class UnsupportedArtifactError(NestgenError, LookupError):
    """
    Raised when the template registry has no render function for a backend/kind pair.

    This signals a broken registry, never a user mistake.
    """


class DirectoryExistsError(NestgenError, FileExistsError):
    """Raised when the target directory of a module already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory '{path}' already exists.")
