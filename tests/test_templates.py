"""Unit tests for the template registry."""

from __future__ import annotations

import pytest

from nestgen.cli.templates import (
    TEMPLATES,
    Artifact,
    build_artifacts,
    check_registry,
    render,
)
from nestgen.core.errors import UnsupportedArtifactError
from nestgen.core.names import NameSet
from nestgen.core.types import ArtifactKind, Backend


class TestRegistry:
    def test_registry_is_total(self) -> None:
        check_registry()

    def test_missing_backend_is_detected(self) -> None:
        partial = {Backend.PRISMA: TEMPLATES[Backend.PRISMA]}
        with pytest.raises(UnsupportedArtifactError, match="typeorm"):
            check_registry(partial)

    def test_unknown_kind_raises(self, media: NameSet) -> None:
        with pytest.raises(UnsupportedArtifactError):
            render(Backend.PRISMA, "entity", media)  # type: ignore[arg-type]

    def test_unknown_backend_raises(self, media: NameSet) -> None:
        with pytest.raises(UnsupportedArtifactError):
            render("mongoose", ArtifactKind.SERVICE, media)  # type: ignore[arg-type]


class TestRender:
    @pytest.mark.parametrize("backend", list(Backend))
    @pytest.mark.parametrize("kind", list(ArtifactKind))
    def test_every_artifact_names_the_module(
        self, backend: Backend, kind: ArtifactKind, media_user: NameSet
    ) -> None:
        content = render(backend, kind, media_user)

        assert "MediaUser" in content
        assert "{" in content and "}" in content
        # f-string escapes must not leak into the TypeScript output
        assert "{{" not in content
        assert "}}" not in content

    @pytest.mark.parametrize("backend", list(Backend))
    def test_render_is_pure(self, backend: Backend, media: NameSet) -> None:
        assert render(backend, ArtifactKind.SERVICE, media) == render(
            backend, ArtifactKind.SERVICE, media
        )

    def test_prisma_service_uses_camel_client(self, media_user: NameSet) -> None:
        content = render(Backend.PRISMA, ArtifactKind.SERVICE, media_user)

        assert "this.prisma.mediaUser.findMany" in content
        assert "mediaUserId: BigInt(id)" in content
        assert "Prisma.MediaUserCreateInput" in content

    def test_prisma_controller_route_and_guard(self, media_user: NameSet) -> None:
        content = render(Backend.PRISMA, ArtifactKind.CONTROLLER, media_user)

        assert "@Controller('media-users')" in content
        assert "@UseGuards(JwtAuthGuard)" in content
        assert "from './media-user.service'" in content

    def test_prisma_module_exports_service(self, media: NameSet) -> None:
        content = render(Backend.PRISMA, ArtifactKind.MODULE, media)

        assert "export class MediaModule {}" in content
        assert "exports: [MediaService]" in content

    def test_typeorm_service_injects_repository(self, media: NameSet) -> None:
        content = render(Backend.TYPEORM, ArtifactKind.SERVICE, media)

        assert "@InjectRepository(MediaEntity)" in content
        assert "Repository<MediaEntity>" in content
        assert "./entities/media.entity" in content

    def test_typeorm_module_registers_entity(self, media: NameSet) -> None:
        content = render(Backend.TYPEORM, ArtifactKind.MODULE, media)

        assert "TypeOrmModule.forFeature([MediaEntity])" in content
        assert "export class MediaModule {}" in content

    @pytest.mark.parametrize("kind", [ArtifactKind.SERVICE_SPEC, ArtifactKind.CONTROLLER_SPEC])
    @pytest.mark.parametrize("backend", list(Backend))
    def test_specs_use_nest_testing(
        self, backend: Backend, kind: ArtifactKind, media: NameSet
    ) -> None:
        content = render(backend, kind, media)

        assert "from '@nestjs/testing'" in content
        assert "describe('Media" in content


class TestBuildArtifacts:
    def test_order_and_filenames(self, media_user: NameSet) -> None:
        artifacts = build_artifacts(Backend.PRISMA, media_user)

        assert [a.filename for a in artifacts] == [
            "media-user.service.ts",
            "media-user.service.spec.ts",
            "media-user.controller.ts",
            "media-user.controller.spec.ts",
            "media-user.module.ts",
        ]
        assert all(isinstance(a, Artifact) for a in artifacts)

    def test_backends_differ_only_in_content(self, media: NameSet) -> None:
        prisma = build_artifacts(Backend.PRISMA, media)
        typeorm = build_artifacts(Backend.TYPEORM, media)

        assert [a.filename for a in prisma] == [a.filename for a in typeorm]
        assert prisma[0].content != typeorm[0].content
