"""
scaffoldkit.cli - Command Line Interface
========================================

Typer application exposing the generation engine.

Architecture
------------
    app (main entry point)
    ├── generate - Render a template directory into a destination directory
    └── list     - Show which file each template would generate

``generate`` streams every written file as it happens and asks before
overwriting anything that already exists. ``--yes`` answers every such
question with yes, for scripted use.

Usage Examples
--------------
    $ scaffoldkit generate -t _templates -o . -e .j2
    $ scaffoldkit generate -t _templates -o . --var name=demo --yes
    $ scaffoldkit list -t _templates -e .j2

Exit Codes
----------
0 when every template was generated or deliberately skipped, 1 when an error
other than an existing destination stopped the run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

import questionary
import typer
from jinja2 import TemplateError
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from scaffoldkit import __version__
from scaffoldkit.controller import OverwriteController
from scaffoldkit.errors import ConfigError, ScaffoldError
from scaffoldkit.generator import Generator
from scaffoldkit.models import (
    GeneratedFile,
    GeneratorConfig,
    build_config,
    load_config_file,
    parse_variables,
)
from scaffoldkit.rendering import JinjaRenderer, identity_render


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="scaffoldkit",
    help="Generate files from a directory of templates.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

console = Console()


# =============================================================================
# Callbacks and Adapters
# =============================================================================

def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(Panel(
            f"[bold green]scaffoldkit[/] version [cyan]{__version__}[/]",
            border_style="green",
        ))
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send library logs to the console through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def confirm_overwrite(message: str) -> bool:
    """
    Ask the user whether an existing file should be overwritten.

    Raises
    ------
    typer.Abort
        If the prompt is cancelled (Ctrl-C).
    """
    result = questionary.confirm(message, default=False).ask()

    if result is None:
        raise typer.Abort()

    return result


def always_confirm(message: str) -> bool:
    return True


def report_generated(result: GeneratedFile) -> None:
    console.print(
        f"📁 {result.destination_path}",
        soft_wrap=True,
        highlight=False,
        markup=False,
    )


def fail(error: Exception) -> typer.Exit:
    rprint(f"[red]Error:[/] {escape(str(error))}")
    return typer.Exit(1)


def resolve_config(
    config_file: Path | None,
    template_dir: Path | None,
    destination_dir: Path | None,
    extensions: list[str] | None,
    sort: bool,
) -> GeneratorConfig:
    """
    Merge the optional config file with command-line options.

    Command-line options win over the file.

    Raises
    ------
    ConfigError
        If a directory is missing or the template directory doesn't exist.
    """
    settings: dict[str, Any] = load_config_file(config_file) if config_file else {}

    if template_dir is None and "template_dir" not in settings:
        raise ConfigError("Missing option '--template-dir' / '-t'")
    if destination_dir is None and "destination_dir" not in settings:
        raise ConfigError("Missing option '--destination-dir' / '-o'")

    config = build_config(
        settings,
        template_dir=template_dir,
        destination_dir=destination_dir,
        template_extensions=extensions,
        sort_templates=sort,
    )

    if not config.template_dir.is_dir():
        raise ConfigError(f"Template directory '{config.template_dir}' not found")

    return config


# =============================================================================
# Main Application Callback
# =============================================================================

@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Log every discovered and generated template.",
        ),
    ] = False,
) -> None:
    """
    [bold]scaffoldkit[/] - Generate files from a directory of templates.

    Existing files are never overwritten without asking.
    """
    configure_logging(verbose)


# =============================================================================
# Generate Command
# =============================================================================

@app.command()
def generate(
    template_dir: Annotated[
        Path | None,
        typer.Option(
            "--template-dir",
            "-t",
            help="The directory where all your templates live (required)",
        ),
    ] = None,
    destination_dir: Annotated[
        Path | None,
        typer.Option(
            "--destination-dir",
            "-o",
            help="The directory where to generate files (required)",
        ),
    ] = None,
    extensions: Annotated[
        list[str] | None,
        typer.Option(
            "--extension",
            "-e",
            help="Template extension to remove from file names (repeatable)",
        ),
    ] = None,
    only: Annotated[
        list[str] | None,
        typer.Option(
            "--only",
            help="Only generate this template name (repeatable)",
        ),
    ] = None,
    variables: Annotated[
        list[str] | None,
        typer.Option(
            "--var",
            "-v",
            help="Extra template variable as KEY=VALUE (repeatable)",
        ),
    ] = None,
    sort: Annotated[
        bool,
        typer.Option(
            "--sort/--no-sort",
            help="Generate templates in sorted order",
        ),
    ] = True,
    raw: Annotated[
        bool,
        typer.Option(
            "--raw",
            help="Copy templates without rendering them",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Overwrite existing files without asking",
        ),
    ] = False,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="TOML file with [tool.scaffoldkit] settings",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """
    Generate every template into the destination directory.

    Each template is rendered with Jinja2. The template context holds the
    command's own settings ([cyan]template_dir[/], [cyan]destination_dir[/],
    [cyan]template_extensions[/]) plus any [cyan]--var[/] values.

    [bold]Examples:[/]

        scaffoldkit generate -t _templates -o . -e .j2

        scaffoldkit generate -t _templates -o out --var name=demo --yes
    """
    try:
        config = resolve_config(
            config_file,
            template_dir,
            destination_dir,
            extensions,
            sort,
        )
        context: dict[str, Any] = {
            "template_dir": str(config.template_dir),
            "destination_dir": str(config.destination_dir),
            "template_extensions": list(config.template_extensions),
            **parse_variables(variables or []),
        }

        controller = OverwriteController(
            Generator(config, render=identity_render if raw else JinjaRenderer()),
            context,
            confirm=always_confirm if yes else confirm_overwrite,
            report=report_generated,
            template_filter=set(only) if only else None,
        )
        controller.generate_all()

    except (ScaffoldError, OSError, TemplateError) as e:
        raise fail(e) from e


# =============================================================================
# List Command
# =============================================================================

@app.command(name="list")
def list_templates(
    template_dir: Annotated[
        Path,
        typer.Option(
            "--template-dir",
            "-t",
            help="The directory where all your templates live",
            exists=True,
            file_okay=False,
            dir_okay=True,
        ),
    ],
    extensions: Annotated[
        list[str] | None,
        typer.Option(
            "--extension",
            "-e",
            help="Template extension to remove from file names (repeatable)",
        ),
    ] = None,
) -> None:
    """
    Show every template and the file it would generate.
    """
    generator = Generator(
        GeneratorConfig(
            template_dir=template_dir,
            destination_dir=Path("."),
            template_extensions=extensions or [],
            sort_templates=True,
        ),
        render=identity_render,
    )

    table = Table(title="Templates", show_header=True)
    table.add_column("Template", style="cyan")
    table.add_column("File", style="green")

    try:
        for template_name in generator.template_names():
            table.add_row(
                escape(template_name),
                escape(generator.remove_template_extension(template_name)),
            )
    except OSError as e:
        raise fail(e) from e

    console.print(table)
