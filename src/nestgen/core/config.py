"""Generator configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from nestgen.core.names import NameSet
from nestgen.core.types import Backend

DEFAULT_SRC_DIR = Path("apps/api/src")
DEFAULT_AGGREGATOR = "app.module.ts"


@dataclass(kw_only=True)
class GeneratorConfig:
    """
    Where modules are generated and registered.

    Attributes:
        root: Workspace root. Defaults to the current working directory.
        src_dir: Source directory of the API app, relative to ``root``.
        aggregator: File name of the root module inside ``src_dir``.
        backend: Data-access strategy used for the templates.
    """

    root: Path = field(default_factory=Path.cwd)
    src_dir: Path = DEFAULT_SRC_DIR
    aggregator: str = DEFAULT_AGGREGATOR
    backend: Backend = Backend.PRISMA

    @property
    def source_root(self) -> Path:
        return self.root / self.src_dir

    @property
    def aggregator_path(self) -> Path:
        return self.source_root / self.aggregator

    def target_dir(self, names: NameSet) -> Path:
        return self.source_root / names.kebab
