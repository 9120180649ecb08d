"""Typer CLI application for nestgen."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import nestgen
from nestgen.cli._renderer import materialize
from nestgen.cli.templates import build_artifacts
from nestgen.core.config import DEFAULT_AGGREGATOR, DEFAULT_SRC_DIR, GeneratorConfig
from nestgen.core.errors import DirectoryExistsError, InvalidNameError, UnsupportedArtifactError
from nestgen.core.names import NameSet, derive
from nestgen.core.patcher import PatchOutcome, patch
from nestgen.core.types import Backend

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


@app.callback()
def main() -> None:
    """nestgen: NestJS module generator with app.module auto-registration."""


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("nestgen")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    if verbose:
        logger.addHandler(RichHandler(console=_console, show_path=False))
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)


def _print_backends() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available backends")
    _console.print("[dim]│[/]")
    for b in Backend:
        _console.print(f"[dim]│[/]  [bold cyan]{b.value:<10}[/] [bold]{b.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 10} [dim]{b.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_backends_callback(value: bool) -> None:
    if value:
        _print_backends()
        raise Exit()


def _exists_error(target: Path) -> Exit:
    _console.print(f"[bold yellow]Error:[/] Directory '{escape(str(target))}' already exists.")
    _console.print("[dim]Remove it or choose another module name.[/]")
    return Exit(code=1)


def _report_registration(config: GeneratorConfig, names: NameSet) -> None:
    aggregator = escape(str(config.aggregator_path))
    manual = f"add {names.module_class} to the imports array of {aggregator}"

    try:
        outcome = patch(config.aggregator_path, names)
    except OSError as exc:
        _console.print(f"[bold yellow]▲[/]  Could not update {aggregator}: {escape(str(exc))}")
        _console.print(f"[dim]│[/]  Manual step: {manual}")
        _console.print("[dim]│[/]")
        return

    if outcome is PatchOutcome.INSERTED:
        _console.print(
            f"[bold green]◇[/]  Registered {names.module_class} in {config.aggregator}"
        )
    elif outcome is PatchOutcome.ALREADY_PRESENT:
        _console.print(
            f"[bold green]◇[/]  {names.module_class} already registered in {config.aggregator}"
        )
    elif outcome is PatchOutcome.SKIPPED:
        _console.print(f"[bold green]◇[/]  No {config.aggregator} found, registration skipped")
    else:
        _console.print(f"[bold yellow]▲[/]  No imports list found in {aggregator}")
        _console.print(f"[dim]│[/]  Manual step: {manual}")
    _console.print("[dim]│[/]")


@app.command()
def generate(
    name: Annotated[
        str | None,
        Argument(help="Module name, e.g. 'media' or 'MediaUser'", show_default=False),
    ] = None,
    orm: Annotated[
        str | None,
        Option(
            "--orm",
            "-o",
            help="Data-access backend. Run with --list-backends / -l to see all options.",
            show_default=False,
        ),
    ] = None,
    typeorm: Annotated[bool, Option("--typeorm", help="Shorthand for --orm typeorm.")] = False,
    root: Annotated[
        Path | None,
        Option(
            "--root",
            "-r",
            envvar="NESTGEN_ROOT",
            help="Workspace root. Defaults to the current directory.",
            show_default=False,
        ),
    ] = None,
    src_dir: Annotated[
        Path,
        Option(
            "--src-dir", envvar="NESTGEN_SRC_DIR", help="API source directory, relative to root"
        ),
    ] = DEFAULT_SRC_DIR,
    aggregator: Annotated[
        str, Option("--aggregator", help="Root module file inside the source directory")
    ] = DEFAULT_AGGREGATOR,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Show debug logs.")] = False,
    list_backends: Annotated[
        bool,
        Option(
            "--list-backends",
            "-l",
            help="List all available backends and exit.",
            callback=_list_backends_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Generate a NestJS module and register it in the root module."""
    _configure_logging(verbose)

    if name is None:
        _console.print("[bold red]Error:[/] Missing module name.")
        _console.print("[dim]Usage:[/] nestgen generate NAME [--orm prisma|typeorm]")
        raise Exit(code=1)

    backend = Backend.PRISMA
    if orm is not None:
        try:
            backend = Backend(orm)
        except ValueError:
            valid = ", ".join(f"'{b.value}'" for b in Backend)
            _console.print()
            _console.print(
                f"[bold red]Error:[/] [bold]{escape(repr(orm))}[/] is not a valid backend."
            )
            _console.print(f"[dim]Valid values:[/] {valid}")
            _print_backends()
            raise Exit(code=2) from None
    if typeorm:
        backend = Backend.TYPEORM

    try:
        names = derive(name)
    except InvalidNameError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=1) from None

    config = GeneratorConfig(
        root=root if root is not None else Path.cwd(),
        src_dir=src_dir,
        aggregator=aggregator,
        backend=backend,
    )
    target = config.target_dir(names)

    if target.exists():
        raise _exists_error(target)

    try:
        artifacts = build_artifacts(config.backend, names)
    except UnsupportedArtifactError as exc:
        _console.print(f"[bold red]Internal error:[/] {escape(str(exc))}")
        raise Exit(code=3) from None

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  nestgen v{nestgen.__version__}")
    _console.print("[dim]│[/]")
    _console.print(f"[bold green]◇[/]  Creating {names.kebab}/ with {backend.label}...")

    try:
        created = materialize(target, artifacts)
    except DirectoryExistsError:
        raise _exists_error(target) from None
    except OSError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        _console.print(f"[dim]Inspect and remove '{escape(str(target))}' before retrying.[/]")
        raise Exit(code=1) from None

    for filename in created:
        _console.print(f"[dim]│[/]  {filename} [dim]— generated with {backend.value}[/]")
    _console.print("[dim]│[/]")

    _report_registration(config, names)

    _console.print(f"[bold cyan]●[/]  Done! Module {names.pascal} created in {names.kebab}/")
    _console.print()
