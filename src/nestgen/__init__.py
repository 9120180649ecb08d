"""nestgen: NestJS module scaffolding with automatic app.module registration."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("nestgen")
except PackageNotFoundError:
    __version__ = "0.0.0"
