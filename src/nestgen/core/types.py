"""Enums shared by the CLI, the template registry and the configuration."""

from enum import Enum


class Backend(str, Enum):
    """Supported data-access strategies."""

    PRISMA = "prisma"
    TYPEORM = "typeorm"

    @property
    def label(self) -> str:
        labels: dict[Backend, str] = {
            Backend.PRISMA: "Prisma",
            Backend.TYPEORM: "TypeORM",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[Backend, str] = {
            Backend.PRISMA: "Generated Prisma client accessed through PrismaService. CRUD service + JWT-guarded controller.",  # noqa: E501
            Backend.TYPEORM: "Entity repository injected with @InjectRepository. Registers the entity via TypeOrmModule.forFeature.",  # noqa: E501
        }
        return descriptions[self]


class ArtifactKind(str, Enum):
    """Source files rendered for every generated module."""

    SERVICE = "service"
    SERVICE_SPEC = "service-spec"
    CONTROLLER = "controller"
    CONTROLLER_SPEC = "controller-spec"
    MODULE = "module"

    @property
    def suffix(self) -> str:
        suffixes: dict[ArtifactKind, str] = {
            ArtifactKind.SERVICE: ".service.ts",
            ArtifactKind.SERVICE_SPEC: ".service.spec.ts",
            ArtifactKind.CONTROLLER: ".controller.ts",
            ArtifactKind.CONTROLLER_SPEC: ".controller.spec.ts",
            ArtifactKind.MODULE: ".module.ts",
        }
        return suffixes[self]
