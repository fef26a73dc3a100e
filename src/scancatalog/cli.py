"""Typer-based command line interface for scan-catalog."""
from __future__ import annotations

from pathlib import Path

import typer

from .scanner import build_catalog
from .schema import CatalogSummary
from .store import load_catalog
from .utils.config import AppConfig, load_config
from .utils.logging import configure_logging

app = typer.Typer(add_completion=False)

DEFAULT_CONFIG = Path("scancatalog.yml")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    ctx.obj = {"verbose": verbose}


def _setup(ctx: typer.Context, config_path: Path) -> AppConfig:
    config = load_config(config_path)
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    configure_logging("DEBUG" if verbose else config.log_level)
    return config


@app.command()
def build(
    ctx: typer.Context,
    config_path: Path = typer.Option(DEFAULT_CONFIG, "--config", help="YAML configuration file."),
) -> None:
    """Rescan the models tree and rewrite the catalogue."""

    config = _setup(ctx, config_path)
    scan_config = config.scan_config()
    build_catalog(scan_config)
    typer.echo(f"Scan catalogue written to {scan_config.catalog_path}")


@app.command()
def summarize(
    ctx: typer.Context,
    config_path: Path = typer.Option(DEFAULT_CONFIG, "--config", help="YAML configuration file."),
) -> None:
    config = _setup(ctx, config_path)
    catalog_path = config.scan_config().catalog_path
    if not catalog_path.exists():
        raise typer.BadParameter(f"Catalogue {catalog_path} not found")
    summary = CatalogSummary.from_entries(load_catalog(catalog_path))
    typer.echo(summary.model_dump_json(indent=2))


if __name__ == "__main__":
    app()
