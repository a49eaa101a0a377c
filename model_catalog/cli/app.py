"""
Defines the command-line interface for the application using Typer.
"""

import logging
import os
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from model_catalog import __version__
from model_catalog.assets.integrity import ArchiveIntegrityChecker
from model_catalog.catalog.catalog import ModelCatalog
from model_catalog.catalog.export import render_info_js, write_info_js_tree
from model_catalog.exceptions import ModelCatalogError
from model_catalog.models.config import CatalogConfig
from model_catalog.storage.catalog_file import CatalogFile, check_catalog_document
from model_catalog.storage.config_manager import ConfigManager
from model_catalog.utils.schema import export_schema
from model_catalog.utils.structured_logger import (
    CatalogEventLogger,
    StructuredLogger,
    create_structured_logger,
)

from .formatters import (
    format_error_with_suggestions,
    print_archive_report,
    print_catalog_table,
    print_config,
    print_model_panel,
    print_stats_table,
    print_validation_report,
)

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("model_catalog")

app = typer.Typer(
    name="model-catalog",
    help=(
        "Browse, validate and export metadata for downloadable 3D models. Use"
        " 'model-catalog <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "model-catalog"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


def _fail(error: ModelCatalogError) -> typer.Exit:
    console.print(format_error_with_suggestions(error))
    return typer.Exit(code=1)


def _load_config(cli_options: dict | None = None) -> CatalogConfig:
    options = {k: v for k, v in (cli_options or {}).items() if v is not None}
    return ConfigManager(CONFIG_FILE).load_config(options)


def _open_event_logger(
    config: CatalogConfig,
) -> tuple[StructuredLogger, CatalogEventLogger]:
    log_dir = Path(config.config_path) / "logs" if config.json_logs else None
    return create_structured_logger(log_dir, enable_json=config.json_logs)


def _load_catalog(config: CatalogConfig, events: CatalogEventLogger) -> ModelCatalog:
    """Returns the built-in catalog, overlaid with the configured catalog file."""
    catalog = ModelCatalog.builtin()
    events.catalog_loaded("builtin", len(catalog))
    if config.catalog_file:
        catalog_path = Path(config.catalog_file).expanduser()
        records = CatalogFile(catalog_path).load()
        events.catalog_loaded(str(catalog_path), len(records))
        catalog = catalog.merged(records)
    return catalog


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the current configuration."
    ),
):
    """3D Model Catalog CLI"""
    if version:
        console.print(
            f"[bold]model-catalog[/bold] version [cyan]{__version__}[/cyan]"
        )
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("model_catalog").setLevel(log_level)

    if show_config:
        config_data = ConfigManager(CONFIG_FILE).get_config_as_dict()
        print_config(CONFIG_FILE, config_data)
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def init(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing configuration."
    ),
    catalog_file: str | None = typer.Option(
        None, "--catalog", help="JSON catalog to merge over the built-in models."
    ),
    assets_dir: str | None = typer.Option(
        None, "--assets-dir", help="Directory holding downloaded model archives."
    ),
):
    """Write a configuration file with default settings."""
    if (
        CONFIG_FILE.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    settings = {
        key: value
        for key, value in {
            "catalog_file": catalog_file,
            "assets_dir": assets_dir,
        }.items()
        if value is not None
    }
    try:
        # Validate before writing anything
        CatalogConfig(**settings, config_path=str(CONFIG_DIR))
        ConfigManager(CONFIG_FILE).save_new_config(settings)
    except ValidationError as e:
        console.print(f"[red]✗ Invalid settings:[/red]\n{e}")
        raise typer.Exit(code=1) from e
    except ModelCatalogError as e:
        raise _fail(e) from e
    console.print(f"[bold green]✓ Configuration saved to '{CONFIG_FILE}'[/bold green]")


@app.command(name="list")
def list_command(
    catalog_file: str | None = typer.Option(
        None, "--catalog", "-c", help="JSON catalog to merge over the built-in models."
    ),
):
    """List every model in the catalog."""
    try:
        config = _load_config({"catalog_file": catalog_file})
        base, events = _open_event_logger(config)
        with base:
            catalog = _load_catalog(config, events)
    except ModelCatalogError as e:
        raise _fail(e) from e
    print_catalog_table(list(catalog.items()), title=f"Models ({len(catalog)})")


@app.command()
def show(
    model_id: str = typer.Argument(..., help="Id of the model, e.g. 'dragon'."),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: table, json or js."
    ),
    catalog_file: str | None = typer.Option(
        None, "--catalog", "-c", help="JSON catalog to merge over the built-in models."
    ),
):
    """Show every field of one model record."""
    try:
        config = _load_config(
            {"catalog_file": catalog_file, "output_format": output_format}
        )
        base, events = _open_event_logger(config)
        with base:
            record = _load_catalog(config, events).get_record(model_id)
    except ModelCatalogError as e:
        raise _fail(e) from e

    if config.output_format == "json":
        typer.echo(record.to_json())
    elif config.output_format == "js":
        typer.echo(render_info_js(record), nl=False)
    else:
        print_model_panel(model_id, record)


@app.command()
def search(
    text: str = typer.Argument(
        ..., help="Text to look for in ids, titles and descriptions."
    ),
    catalog_file: str | None = typer.Option(
        None, "--catalog", "-c", help="JSON catalog to merge over the built-in models."
    ),
):
    """Search the catalog."""
    try:
        config = _load_config({"catalog_file": catalog_file})
        base, events = _open_event_logger(config)
        with base:
            matches = _load_catalog(config, events).search(text)
    except ModelCatalogError as e:
        raise _fail(e) from e
    print_catalog_table(matches, title=f"Matches for '{text}'")


@app.command()
def stats(
    catalog_file: str | None = typer.Option(
        None, "--catalog", "-c", help="JSON catalog to merge over the built-in models."
    ),
):
    """Show aggregate triangle and vertex counts."""
    try:
        config = _load_config({"catalog_file": catalog_file})
        base, events = _open_event_logger(config)
        with base:
            catalog = _load_catalog(config, events)
    except ModelCatalogError as e:
        raise _fail(e) from e
    print_stats_table(catalog.stats())


@app.command()
def export(
    destination: Path = typer.Argument(
        ..., help="JSON file (json format) or directory (js format) to write."
    ),
    output_format: str = typer.Option(
        "json", "--format", "-f", help="Export format: json or js."
    ),
    model_ids: list[str] | None = typer.Option(  # noqa: B008
        None, "--model", "-m", help="Only export these model ids."
    ),
    catalog_file: str | None = typer.Option(
        None, "--catalog", "-c", help="JSON catalog to merge over the built-in models."
    ),
):
    """Export the catalog as a JSON document or as an info.js tree."""
    output_format = output_format.lower()
    if output_format not in ("json", "js"):
        console.print("[red]✗ Export format must be 'json' or 'js'.[/red]")
        raise typer.Exit(code=1)

    try:
        config = _load_config({"catalog_file": catalog_file})
        base, events = _open_event_logger(config)
        with base:
            catalog = _load_catalog(config, events)
            if model_ids:
                records = {mid: catalog.get_record(mid) for mid in model_ids}
            else:
                records = dict(catalog)

            if output_format == "json":
                CatalogFile(destination).save(records)
            else:
                write_info_js_tree(records, destination)
            events.catalog_exported(str(destination), output_format, len(records))
    except ModelCatalogError as e:
        raise _fail(e) from e

    console.print(
        f"[green]✓ Exported {len(records)} model(s) to '{destination}'.[/green]"
    )


@app.command()
def validate(
    path: Path | None = typer.Argument(
        None, help="Catalog JSON file to check (defaults to the configured one)."
    ),
):
    """Validate a catalog document, or the built-in records."""
    try:
        config = _load_config()
    except ModelCatalogError as e:
        raise _fail(e) from e

    if path is None and config.catalog_file:
        path = Path(config.catalog_file).expanduser()

    base, events = _open_event_logger(config)
    with base:
        if path is None:
            document = {
                model_id: record.to_dict()
                for model_id, record in ModelCatalog.builtin().items()
            }
            problems = check_catalog_document(document)
            source = "built-in catalog"
        else:
            problems = CatalogFile(path).check()
            source = str(path)

        if problems:
            events.validation_failed(source, problems)

    print_validation_report(source, problems)
    if problems:
        raise typer.Exit(code=1)


@app.command()
def schema(
    destination: Path = typer.Argument(..., help="Where to write the JSON schema."),
):
    """Write the JSON schema of catalog documents."""
    try:
        export_schema(destination)
    except OSError as e:
        console.print(f"[red]✗ Failed to write schema: {e}[/red]")
        raise typer.Exit(code=1) from e
    console.print(f"[green]✓ Schema written to '{destination}'.[/green]")


@app.command()
def verify(
    model_id: str = typer.Argument(..., help="Id of the model whose archive to check."),
    assets_dir: Path | None = typer.Option(
        None, "--assets-dir", "-d", help="Directory holding downloaded archives."
    ),
    catalog_file: str | None = typer.Option(
        None, "--catalog", "-c", help="JSON catalog to merge over the built-in models."
    ),
):
    """Check that a downloaded model archive is present and intact."""
    try:
        config = _load_config(
            {
                "catalog_file": catalog_file,
                "assets_dir": str(assets_dir) if assets_dir else None,
            }
        )
        base, events = _open_event_logger(config)
        with base:
            record = _load_catalog(config, events).get_record(model_id)
            report = ArchiveIntegrityChecker.check_record_archive(
                record, Path(config.assets_dir).expanduser()
            )
            events.archive_verified(
                model_id, str(report.path), report.valid, report.size_bytes, report.error
            )
    except ModelCatalogError as e:
        raise _fail(e) from e

    print_archive_report(model_id, record, report)
    if not report.valid:
        raise typer.Exit(code=1)
