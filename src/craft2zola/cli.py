"""Command line interface for craft2zola."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from craft2zola.config import DEFAULT_ROOT_TEMPLATE, DEFAULT_ROOT_TITLE, ConvertConfig
from craft2zola.converter import ConversionStats, Converter
from craft2zola.exceptions import ConversionError


console = Console()
app = typer.Typer(help="craft2zola - turn a Craft markdown export into Zola content")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(exc: ConversionError) -> None:
    console.print(f"[bold red]Conversion failed:[/bold red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def _summary(stats: ConversionStats) -> str:
    return (
        f"Notes: {stats.documents}, folders: {stats.directories}, "
        f"media: {stats.assets}, links: {stats.references}"
    )


@app.command()
def convert(
    input_dir: Path = typer.Option(
        ..., "--input", "-i", help="Craft export directory.",
        exists=True, file_okay=False, resolve_path=True,
    ),
    output_dir: Path = typer.Option(
        ..., "--output", "-o", help="Zola content/ directory.", file_okay=False, resolve_path=True
    ),
    root_title: str = typer.Option(DEFAULT_ROOT_TITLE, help="Title of the top-level section"),
    root_template: str = typer.Option(DEFAULT_ROOT_TEMPLATE, help="Template of the top-level section"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Convert a Craft export into a Zola section."""
    _setup_logging(verbose)
    config = ConvertConfig(
        input_dir=input_dir,
        output_dir=output_dir,
        root_title=root_title,
        root_template=root_template,
    )

    console.print(f"Converting into [bold]{escape(str(config.content_root))}[/bold]...")
    try:
        stats = Converter(config).convert()
    except ConversionError as exc:
        _fail(exc)
        return

    console.print(f"{_summary(stats)}, sections: {stats.sections}")


@app.command()
def check(
    input_dir: Path = typer.Option(
        ..., "--input", "-i", help="Craft export directory.",
        exists=True, file_okay=False, resolve_path=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Validate an export without writing anything."""
    _setup_logging(verbose)
    # The output directory is never touched by a check
    config = ConvertConfig(input_dir=input_dir, output_dir=input_dir)
    try:
        stats = Converter(config).check()
    except ConversionError as exc:
        _fail(exc)
        return

    console.print(f"[green]Export is valid.[/green] {_summary(stats)}")
