"""
cli.py - Typer-based CLI for intl-extract.

Commands:
  extract <paths...> [--tag-name NAME]...   Extract messages from files / directories
  files   <paths...>                        List the files that would be scanned
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from intl_extract.extractor import MessageExtractor
from intl_extract.models import ExtractorConfig, FileMessages, ProjectConfig
from intl_extract.output import get_formatter
from intl_extract.ts_parser import walk_source_files

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="intl-extract",
    help="Extract react-intl message descriptors from TypeScript / TSX sources.",
    add_completion=False,
)
err_console = Console(stderr=True)

DEFAULT_CONFIG_FILE = "intl_extract_config.json"


# ---------------------------------------------------------------------------
# Configuration helpers
# ---------------------------------------------------------------------------


def _load_config(config_path: Optional[str] = None) -> ProjectConfig:
    """Load project config from JSON file or return defaults."""
    if config_path:
        if not Path(config_path).exists():
            err_console.print(f"[red]Config file not found: {config_path}[/red]")
            raise typer.Exit(1)
        return ProjectConfig.model_validate_json(Path(config_path).read_text())
    # Check for intl_extract_config.json in CWD
    default = Path(DEFAULT_CONFIG_FILE)
    if default.exists():
        return ProjectConfig.model_validate_json(default.read_text())
    return ProjectConfig()


def _collect_files(paths: list[str], cfg: ProjectConfig) -> list[str]:
    files: list[str] = []
    for p in paths:
        if not os.path.exists(p):
            err_console.print(f"[red]Path not found: {p}[/red]")
            raise typer.Exit(1)
        files.extend(walk_source_files(
            p, extensions=cfg.extensions, exclude_dirs=cfg.exclude_patterns,
        ))
    return files


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Extract react-intl message descriptors from TypeScript / TSX sources."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


# ---------------------------------------------------------------------------
# extract command
# ---------------------------------------------------------------------------


@app.command()
def extract(
    paths: list[str] = typer.Argument(..., help="Files or directories to scan"),
    tag_name: Optional[list[str]] = typer.Option(
        None, "--tag-name", "-t",
        help="Additional JSX tag name carrying message attributes (repeatable)",
    ),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config JSON"),
    humanize: bool = typer.Option(
        False, "--humanize", "-H",
        help="Use human-readable output (tables) instead of JSON",
    ),
) -> None:
    """Extract message descriptors from every source file under PATHS."""
    cfg = _load_config(config)
    extractor_cfg = ExtractorConfig(
        additional_tag_names=[*cfg.extractor.additional_tag_names, *(tag_name or [])],
    )
    files = _collect_files(paths, cfg)
    extractor = MessageExtractor(extractor_cfg)

    results: list[FileMessages] = []
    for fp in files:
        found = extractor.extract_file(fp)
        if found is None or not found.messages:
            continue
        results.append(found)

    logger.info(
        "Scanned %d file(s), %d with messages", len(files), len(results),
    )
    get_formatter(humanize).format_messages(results)


# ---------------------------------------------------------------------------
# files command
# ---------------------------------------------------------------------------


@app.command()
def files(
    paths: list[str] = typer.Argument(..., help="Files or directories to scan"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config JSON"),
    humanize: bool = typer.Option(False, "--humanize", "-H"),
) -> None:
    """List the source files EXTRACT would scan."""
    cfg = _load_config(config)
    get_formatter(humanize).format_files(_collect_files(paths, cfg))
