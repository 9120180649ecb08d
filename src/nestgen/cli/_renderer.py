"""Writes rendered artifacts to a fresh module directory."""

from __future__ import annotations

import logging
from pathlib import Path

from nestgen.cli.templates import Artifact
from nestgen.core.errors import DirectoryExistsError

logger = logging.getLogger(__name__)


def materialize(target_dir: Path, artifacts: list[Artifact]) -> list[str]:
    """
    Create ``target_dir`` and write every artifact into it.

    Nothing is written when ``target_dir`` already exists. A failing write
    leaves the files written so far on disk.

    Returns:
        The written file names, in order.

    Raises:
        DirectoryExistsError: If ``target_dir`` already exists.
    """
    try:
        target_dir.mkdir(parents=True)
    except FileExistsError:
        raise DirectoryExistsError(target_dir) from None
    logger.debug("Created %s", target_dir)

    written: list[str] = []
    for artifact in artifacts:
        (target_dir / artifact.filename).write_text(artifact.content.strip(), encoding="utf-8")
        logger.debug("Wrote %s", artifact.filename)
        written.append(artifact.filename)

    return written
