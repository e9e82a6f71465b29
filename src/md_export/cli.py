"""Command-line interface for md-export."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from md_export import __version__
from md_export.config import get_settings
from md_export.core.exporter import (
    DocumentExporter,
    EmptyContentError,
    ExportError,
    validate_content,
)
from md_export.parsing.ir import ExportRequest
from md_export.renderers import SUPPORTED_FORMATS

app = typer.Typer(
    name="md-export",
    help="Export Markdown text as plain text, PDF, or Word documents.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"md-export v{__version__}")
        raise typer.Exit()


def list_formats_callback(value: bool) -> None:
    """Print supported formats and exit."""
    if value:
        for name in SUPPORTED_FORMATS:
            console.print(name)
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def read_content(source: str) -> str:
    """Read Markdown from a file path, or from stdin when source is '-'."""
    if source == "-":
        return typer.get_text_stream("stdin").read()
    return Path(source).read_text(encoding="utf-8")


@app.command()
def main(
    source: str = typer.Argument(
        ...,
        help="Markdown file to export, or '-' to read from stdin",
    ),
    format_name: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: txt, pdf or docx (default: MD_EXPORT_FORMAT or txt)",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the exported document (default: MD_EXPORT_OUTPUT_DIR or .)",
        file_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    list_formats: bool = typer.Option(
        False,
        "--list-formats",
        callback=list_formats_callback,
        is_eager=True,
        help="List supported formats and exit",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Export a Markdown document.

    Examples:

        md-export notes.md  # Writes document.txt

        md-export notes.md --format pdf -o build/

        cat notes.md | md-export - -f docx
    """
    configure_logging(verbose)
    settings = get_settings()
    use_format = format_name or settings.default_format
    use_output_dir = output_dir or settings.output_dir

    try:
        content = validate_content(read_content(source))
    except EmptyContentError as e:
        console.print(f"[yellow]Nothing to export:[/yellow] {e}")
        raise typer.Exit(1)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Cannot read {source}: {e}")
        raise typer.Exit(1)

    if verbose:
        console.print(f"[blue]Input:[/blue] {source}")
        console.print(f"[blue]Format:[/blue] {use_format}")
        console.print(f"[blue]Output directory:[/blue] {use_output_dir}")

    exporter = DocumentExporter(layout=settings.page_layout())
    try:
        artifact = exporter.export(ExportRequest(content=content, format=use_format))
        path = artifact.save(use_output_dir)
    except ExportError as e:
        console.print(f"[red]Export failed:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot write to {use_output_dir}: {e}")
        raise typer.Exit(1)

    console.print(f"[green]Saved:[/green] {path}")


if __name__ == "__main__":
    app()
