"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from cv_pdf.clients.cv_client import CVClient
from cv_pdf.config import AppConfig, load_config
from cv_pdf.export.exporter import ResumeExporter
from cv_pdf.export.inspector import inspect_pdf
from cv_pdf.export.pdf_renderer import SECTIONS
from cv_pdf.models.resume import ResumeDocument
from cv_pdf.parsers.document_loader import load_document

app = typer.Typer(
    name="cv-pdf",
    help="Export a portfolio resume to a paginated PDF with clickable links",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _document_source(config: AppConfig, url: str | None, file: Path | None):
    if file is not None:
        async def from_file() -> ResumeDocument:
            return load_document(file)

        return from_file

    return CVClient.from_config(config.source, url).fetch_document


@app.command()
def generate(
    url: str = typer.Option(None, "--url", help="Resume data endpoint (JSON)"),
    file: Path = typer.Option(None, "--file", "-f", help="Resume data file (JSON/YAML)"),
    output_dir: Path = typer.Option(None, "--output-dir", "-o", help="Directory for the PDF"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate {Name}_CV.pdf from the resume data."""
    _setup_logging(verbose)
    if url and file:
        console.print("[red]Use either --url or --file, not both.[/red]")
        raise typer.Exit(2)
    if file is not None and not file.exists():
        console.print(f"[red]Resume file not found: {file}[/red]")
        raise typer.Exit(1)

    config = load_config(config_path)
    target = output_dir or config.output.resolved_directory

    def on_notice(level: str, message: str) -> None:
        color = "green" if level == "success" else "red"
        console.print(f"[{color}]{message}[/{color}]")

    exporter = ResumeExporter(_document_source(config, url, file), config, on_notice=on_notice)
    with console.status("Generating..."):
        result = asyncio.run(exporter.export(target))

    if not result.success:
        console.print(f"[dim]{result.error_message}[/dim]")
        raise typer.Exit(1)
    console.print(f"[green]Saved: {result.path}[/green] [dim]({result.elapsed_seconds:.1f}s)[/dim]")


@app.command()
def inspect(
    pdf: Path = typer.Argument(help="PDF file to inspect"),
) -> None:
    """List the pages of a PDF with their link targets and rectangles."""
    if not pdf.exists():
        console.print(f"[red]File not found: {pdf}[/red]")
        raise typer.Exit(1)

    pages = inspect_pdf(pdf)
    table = Table(title=f"{pdf.name}: {len(pages)} page(s)")
    table.add_column("Page", justify="right")
    table.add_column("First line")
    table.add_column("Link")
    table.add_column("Rect [x0, y0, x1, y1]")
    for page in pages:
        first_line = next((line for line in page.text.splitlines() if line.strip()), "")
        if not page.links:
            table.add_row(str(page.number), first_line, "-", "-")
        for i, link in enumerate(page.links):
            rect = f"[{link.x0:.1f}, {link.y0:.1f}, {link.x1:.1f}, {link.y1:.1f}]"
            table.add_row(str(page.number) if i == 0 else "", first_line if i == 0 else "", link.uri, rect)
    console.print(table)


@app.command()
def sections(
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
) -> None:
    """Show the section order and which sections start on a new page."""
    config = load_config(config_path)
    for i, section in enumerate(SECTIONS, 1):
        forced = config.sections.forces_new_page(section.name)
        marker = " [yellow](new page)[/yellow]" if forced else ""
        console.print(f"  {i}. [bold]{section.name}[/bold]: {section.title}{marker}")


if __name__ == "__main__":
    app()
