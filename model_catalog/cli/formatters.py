"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from model_catalog.assets.integrity import ArchiveReport
from model_catalog.models.model_info import ModelInfo
from model_catalog.models.stats import CatalogStats
from model_catalog.utils.formatting import format_count, format_size, truncate


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "UnknownModelError": [
            "• Run `model-catalog list` to see every available model id.",
            "• Model ids are lowercase, e.g. `dragon`.",
        ],
        "CatalogFileError": [
            "• Run `model-catalog validate <file>` for a detailed report.",
            "• Check the `catalog_file` setting with `model-catalog --show-config`.",
        ],
        "RecordValidationError": [
            "• Every record needs all nine fields and no others.",
            "• Run `model-catalog schema schema.json` to get the record schema.",
        ],
        "ConfigurationError": [
            "• Run `model-catalog init --force` to write a fresh configuration.",
        ],
        "ArchiveIntegrityError": [
            "• Re-download the archive and run `verify` again.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(suggestions)))

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_config(config_path: Path, config_data: dict[str, Any]):
    """Displays the current configuration."""
    console = Console()
    content = "\n".join(f"{key} = {value}" for key, value in config_data.items())
    console.print(
        Panel(
            content,
            title=f"Configuration ([dim]{config_path}[/dim])",
            border_style="cyan",
        )
    )


def print_catalog_table(records: list[tuple[str, ModelInfo]], title: str = "Models"):
    """Displays one row per model."""
    console = Console()
    if not records:
        console.print("[dim]No models found.[/dim]")
        return

    table = Table(title=title, box=box.ROUNDED)
    table.add_column("ID", style="bold magenta", no_wrap=True)
    table.add_column("Title", style="cyan")
    table.add_column("Triangles", justify="right", style="green")
    table.add_column("Vertices", justify="right", style="green")
    table.add_column("Download")
    table.add_column("Updated", style="dim")

    for model_id, record in records:
        table.add_row(
            model_id,
            escape(record.title),
            format_count(record.triangles),
            format_count(record.vertices),
            escape(f"{record.download_filename} ({record.download_size})"),
            record.updated_date,
        )
    console.print(table)


def _format_links(links: list[tuple[str, str]]) -> str:
    return "\n".join(
        f"{escape(text)} [dim]<{escape(href)}>[/dim]" for text, href in links
    )


def print_model_panel(model_id: str, record: ModelInfo):
    """Displays every field of one record, with markup rendered as plain text."""
    console = Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()

    table.add_row("Title:", escape(record.title))
    table.add_row(
        "Download:",
        f"{escape(record.download_filename)} "
        f"[dim]({escape(record.download_size)})[/dim]",
    )
    table.add_row("Triangles:", f"[green]{format_count(record.triangles)}[/green]")
    table.add_row("Vertices:", f"[green]{format_count(record.vertices)}[/green]")
    table.add_row("Copyright:", Text(record.copyright_text()))
    table.add_row("Updated:", record.updated_date)

    if license_links := record.license_links():
        table.add_row("License:", _format_links(license_links))
    else:
        table.add_row("License:", Text(record.license))

    table.add_row("", "")
    table.add_row("Description:", Text(record.description_text()))

    if links := record.description_links():
        table.add_row("Links:", _format_links(links))

    console.print(
        Panel(
            table,
            title=f"[bold]{escape(record.title)}[/bold] [dim]({model_id})[/dim]",
            border_style="cyan",
            expand=False,
        )
    )


def print_stats_table(stats: CatalogStats):
    """Displays aggregate catalog statistics."""
    console = Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()

    table.add_row("Models:", f"[green]{stats.model_count}[/green]")
    table.add_row("Total Triangles:", format_count(stats.total_triangles))
    table.add_row("Total Vertices:", format_count(stats.total_vertices))
    table.add_row("Avg. Triangles:", format_count(int(stats.average_triangles)))
    if stats.largest_model_id:
        table.add_row(
            "Largest Model:",
            f"{stats.largest_model_id} "
            f"[dim]({format_count(stats.largest_triangles)} triangles)[/dim]",
        )

    console.print(
        Panel(table, title="[bold]Catalog Statistics[/bold]", border_style="green")
    )


def print_validation_report(source: str, problems: list[str]):
    """Displays the result of validating a catalog document."""
    console = Console()
    if not problems:
        console.print(f"[green]✓ {escape(source)} is valid.[/green]")
        return

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column(style="red")
    for problem in problems:
        table.add_row(Text(f"✗ {truncate(problem, 200)}"))
    console.print(
        Panel(
            table,
            title=f"[bold red]{len(problems)} problem(s) in {escape(source)}[/bold red]",
            border_style="red",
        )
    )


def print_archive_report(model_id: str, record: ModelInfo, report: ArchiveReport):
    """Displays the outcome of an archive integrity check."""
    console = Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()

    table.add_row("Archive:", str(report.path))
    if not report.exists:
        table.add_row("Status:", "[red]✗ Missing[/red]")
    elif report.valid:
        table.add_row("Status:", "[green]✓ Valid[/green]")
        table.add_row("Members:", str(report.member_count))
    else:
        table.add_row("Status:", f"[red]✗ {escape(report.error or 'Invalid')}[/red]")

    if report.exists:
        table.add_row(
            "Size:",
            f"{format_size(report.size_bytes)} "
            f"[dim](catalog lists {record.download_size})[/dim]",
        )

    console.print(
        Panel(
            table,
            title=f"[bold]Archive Check[/bold] [dim]({model_id})[/dim]",
            border_style="green" if report.valid else "red",
            expand=False,
        )
    )
