"""
output.py - Output formatters for the CLI.

- JSON (default, machine-friendly)
- Human-readable Rich tables (--humanize)
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from intl_extract.models import FileMessages


console = Console()


class OutputFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format_messages(self, results: list[FileMessages]) -> None:
        """Format extracted messages, grouped by file."""

    @abstractmethod
    def format_files(self, files: list[str]) -> None:
        """Format the list of files that would be scanned."""


class JSONFormatter(OutputFormatter):

    def format_messages(self, results: list[FileMessages]) -> None:
        output = {
            "count": sum(len(r.messages) for r in results),
            "files": [
                {
                    "file": r.file_path,
                    "count": len(r.messages),
                    "messages": [m.to_dict() for m in r.messages],
                }
                for r in results
            ],
        }
        print(json.dumps(output, indent=2, ensure_ascii=False))

    def format_files(self, files: list[str]) -> None:
        print(json.dumps({"count": len(files), "files": files}, indent=2, ensure_ascii=False))


class HumanFormatter(OutputFormatter):
    """Rich table output."""

    def format_messages(self, results: list[FileMessages]) -> None:
        total = sum(len(r.messages) for r in results)
        table = Table(
            "File",
            "Id",
            "Default Message",
            "Description",
            title=f"{total} message(s)",
        )
        for r in results:
            for m in r.messages:
                table.add_row(
                    f"[cyan]{escape(r.file_path)}[/cyan]",
                    f"[bold]{escape(m.id)}[/bold]",
                    escape(m.default_message),
                    escape(m.description or ""),
                )
        console.print(table)

    def format_files(self, files: list[str]) -> None:
        for fp in files:
            console.print(f"[cyan]{escape(fp)}[/cyan]")
        console.print(f"[bold]{len(files)}[/bold] file(s)")


def get_formatter(humanize: bool = False) -> OutputFormatter:
    """Get the appropriate formatter based on flags."""
    if humanize:
        return HumanFormatter()
    return JSONFormatter()
