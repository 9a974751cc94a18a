"""Typer-based command line interface for inspecting default application lists."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from utils.config import AppConfig, load_config
from utils.logging import configure_logging

from .loader import load_default_apps
from .schema import CATEGORIES, AppsSummary, DefaultApps

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging.")) -> None:
    configure_logging("DEBUG" if verbose else "INFO")


def _resolve_config(apps_dir: Optional[Path], config_path: Optional[Path]) -> AppConfig:
    config = load_config(config_path) if config_path is not None else AppConfig()
    if apps_dir is not None:
        config = config.model_copy(update={"apps_dir": apps_dir.expanduser()})
    return config


def _load(apps_dir: Optional[Path], config_path: Optional[Path]) -> DefaultApps:
    if config_path is not None and not config_path.exists():
        raise typer.BadParameter(f"Config {config_path} not found")
    return load_default_apps(_resolve_config(apps_dir, config_path))


APPS_DIR_OPTION = typer.Option(None, "--apps-dir", help="Directory holding the *.xml documents.")
CONFIG_OPTION = typer.Option(None, "--config", help="YAML configuration file.")


@app.command("list")
def list_apps(
    apps_dir: Optional[Path] = APPS_DIR_OPTION,
    config_path: Optional[Path] = CONFIG_OPTION,
    category: Optional[str] = typer.Option(None, "--category", help="Only show one category."),
) -> None:
    if category is not None and category not in CATEGORIES:
        raise typer.BadParameter(f"category must be one of {', '.join(CATEGORIES)}")
    apps = _load(apps_dir, config_path)
    table = Table("category", "name", "executable", "command")
    for name, items in apps.collections().items():
        if category is not None and name != category:
            continue
        for item in items:
            table.add_row(name, item.generic.name or "", item.generic.executable, item.generic.command or "")
    console.print(table)


@app.command()
def summarize(
    apps_dir: Optional[Path] = APPS_DIR_OPTION,
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    summary = AppsSummary.from_apps(_load(apps_dir, config_path))
    typer.echo(summary.model_dump_json(indent=2))


@app.command()
def export(
    out: Path = typer.Option(Path("default-apps.json"), "--out", help="Output JSON path."),
    apps_dir: Optional[Path] = APPS_DIR_OPTION,
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    apps = _load(apps_dir, config_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(apps.json_dump(), encoding="utf-8")
    typer.echo(f"Exported {apps.total} entries to {out}")


if __name__ == "__main__":
    app()
