"""Template registry: one set of render functions per data-access backend."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, fields
import logging
from typing import NamedTuple

from nestgen.cli.templates import _prisma, _typeorm
from nestgen.core.errors import UnsupportedArtifactError
from nestgen.core.names import NameSet
from nestgen.core.types import ArtifactKind, Backend

logger = logging.getLogger(__name__)

RenderFn = Callable[[NameSet], str]


@dataclass(frozen=True)
class BackendTemplates:
    """Render functions for every artifact kind of one backend."""

    service: RenderFn
    service_spec: RenderFn
    controller: RenderFn
    controller_spec: RenderFn
    module: RenderFn

    def renderer(self, kind: ArtifactKind) -> RenderFn:
        attr = getattr(kind, "name", "").lower()
        fn = getattr(self, attr, None) if attr in {f.name for f in fields(self)} else None
        if not callable(fn):
            raise UnsupportedArtifactError(f"No render function for artifact kind {kind!r}")
        return fn


class Artifact(NamedTuple):
    """One generated file, relative to the module directory."""

    filename: str
    content: str


def _from_module(mod: object) -> BackendTemplates:
    return BackendTemplates(**{f.name: getattr(mod, f.name) for f in fields(BackendTemplates)})


TEMPLATES: dict[Backend, BackendTemplates] = {
    Backend.PRISMA: _from_module(_prisma),
    Backend.TYPEORM: _from_module(_typeorm),
}

# Order in which artifacts are written and reported.
ARTIFACT_ORDER: tuple[ArtifactKind, ...] = (
    ArtifactKind.SERVICE,
    ArtifactKind.SERVICE_SPEC,
    ArtifactKind.CONTROLLER,
    ArtifactKind.CONTROLLER_SPEC,
    ArtifactKind.MODULE,
)


def check_registry(registry: dict[Backend, BackendTemplates] = TEMPLATES) -> None:
    """Ensure every backend provides a render function for every artifact kind."""
    for backend in Backend:
        if backend not in registry:
            raise UnsupportedArtifactError(f"No templates registered for backend {backend.value!r}")
        for kind in ArtifactKind:
            registry[backend].renderer(kind)


def render(backend: Backend, kind: ArtifactKind, names: NameSet) -> str:
    """Render one artifact. Pure: no I/O."""
    try:
        templates = TEMPLATES[backend]
    except KeyError:
        raise UnsupportedArtifactError(
            f"No templates registered for backend {backend!r}"
        ) from None
    return templates.renderer(kind)(names)


def build_artifacts(backend: Backend, names: NameSet) -> list[Artifact]:
    """Render the full artifact set of a module, in write order."""
    artifacts = [
        Artifact(f"{names.kebab}{kind.suffix}", render(backend, kind, names))
        for kind in ARTIFACT_ORDER
    ]
    filenames = [a.filename for a in artifacts]
    if len(set(filenames)) != len(filenames):
        raise UnsupportedArtifactError(f"Duplicate artifact filenames: {filenames}")

    logger.debug(
        "Rendered %d artifacts for %s with %s", len(artifacts), names.pascal, backend.value
    )
    return artifacts


check_registry()
