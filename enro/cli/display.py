#!/usr/bin/env python3
"""
enro CLI Display Module

Rich console rendering for scan results, summaries and statistics.

Copyright (C) 2025 The enro authors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import sys
from typing import IO, Any, cast

import pyfiglet
from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)
from rich.rule import Rule
from rich.table import Table

from ..core.constants import HIGH_ENTROPY_THRESHOLD, MEDIUM_ENTROPY_THRESHOLD
from ..core.result_aggregator import Summary
from ..domain.classification import FileAnalysis
from ..utils.formatting import display_path, format_entropy, format_size


class _StdoutProxy:
    def write(self, data: str) -> int:
        return sys.stdout.write(data)

    def flush(self) -> None:
        sys.stdout.flush()

    def isatty(self) -> bool:
        return sys.stdout.isatty()

    @property
    def encoding(self) -> str:
        return getattr(sys.stdout, "encoding", "utf-8")

    @property
    def errors(self) -> str:
        return getattr(sys.stdout, "errors", "strict")


console = Console(file=cast(IO[str], _StdoutProxy()))
error_console = Console(stderr=True)

THRESHOLD_WARNING = "Warning: Invalid threshold format. Expected format: min-max (e.g., 7.5-8.0)"


def entropy_style(
    entropy: float,
    high: float = HIGH_ENTROPY_THRESHOLD,
    medium: float = MEDIUM_ENTROPY_THRESHOLD,
) -> str:
    """Color for an entropy value: red above ``high``, yellow above ``medium``"""
    if entropy > high:
        return "red"
    if entropy > medium:
        return "yellow"
    return "green"


def print_banner() -> None:
    """Print enro banner"""
    banner = pyfiglet.figlet_format("enro", font="slant")
    console.print(f"[bold blue]{banner}[/bold blue]")
    console.print("[bold]File Encryption & Randomness Observer[/bold]")
    console.print("[dim]Signature and entropy based content triage[/dim]\n")


def display_threshold_warning() -> None:
    error_console.print(f"[yellow]{THRESHOLD_WARNING}[/yellow]")


def display_no_files_message() -> None:
    console.print("[yellow]No files to analyze.[/yellow]")


def display_analysis_start(file_count: int) -> None:
    console.print(f"Analyzing {file_count} file(s)...\n")


def create_progress() -> Progress:
    """Progress bar used while files are classified"""
    return Progress(
        SpinnerColumn(style="green"),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(complete_style="cyan", finished_style="blue"),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        TimeRemainingColumn(),
        console=console,
        transient=True,
    )


def create_results_table(
    results: list[FileAnalysis],
    high: float = HIGH_ENTROPY_THRESHOLD,
    medium: float = MEDIUM_ENTROPY_THRESHOLD,
) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("File", style="white", overflow="fold")
    table.add_column("Type", style="cyan")
    table.add_column("Entropy", justify="right")
    table.add_column("Size", justify="right")

    for record in results:
        style = entropy_style(record.entropy, high, medium)
        table.add_row(
            display_path(record.path),
            record.classification.display_name,
            f"[{style}]{format_entropy(record.entropy)}[/{style}]",
            format_size(record.size),
        )
    return table


def _display_statistics(summary: Summary, include_total: bool) -> None:
    if include_total:
        console.print(f"  [cyan]•[/cyan] [bold]Total Files: {summary.file_count}[/bold]")
    console.print(
        f"  [cyan]•[/cyan] [bold]Average Entropy: "
        f"{format_entropy(summary.average_entropy())}[/bold]"
    )
    if summary.high_entropy_count > 0:
        console.print(
            f"  [bold yellow]⚠ {summary.high_entropy_count} file(s) with high entropy "
            f"(possibly encrypted/compressed)[/bold yellow]"
        )


def _display_type_counts(summary: Summary) -> None:
    for label, count in sorted(summary.label_counts.items()):
        console.print(f"  [cyan]•[/cyan] [bold]{label}: {count}[/bold]")


def display_results(
    results: list[FileAnalysis],
    summary: Summary,
    high: float = HIGH_ENTROPY_THRESHOLD,
    medium: float = MEDIUM_ENTROPY_THRESHOLD,
) -> None:
    """
    Display the per-file table followed by the summary.

    Args:
        results: Classified files in display order
        summary: Aggregated statistics for ``results``
        high: Entropy above which values are shown in red
        medium: Entropy above which values are shown in yellow
    """
    console.print(Rule("[bold cyan]ANALYSIS RESULTS[/bold cyan]", style="cyan"))
    console.print(create_results_table(results, high, medium))

    console.print()
    console.print(Rule("[bold]SUMMARY[/bold]", style="dim"))
    _display_type_counts(summary)
    console.print()
    _display_statistics(summary, include_total=False)
    console.print()


def display_summary_only(summary: Summary) -> None:
    """Display only the aggregated statistics"""
    console.print(Rule("[bold cyan]SUMMARY[/bold cyan]", style="cyan"))
    console.print("\n[bold]File Types:[/bold]")
    _display_type_counts(summary)
    console.print("\n[bold]Statistics:[/bold]")
    _display_statistics(summary, include_total=True)
    console.print(Rule(style="dim"))


def display_failures(failed_files: list[tuple[str, str]]) -> None:
    """Display files that could not be read"""
    if not failed_files:
        return
    table = Table(title="Failed Files", show_header=True)
    table.add_column("File", style="cyan", overflow="fold")
    table.add_column("Error", style="red")
    for path, error in failed_files:
        table.add_row(display_path(path), error)
    console.print(table)


def display_error_statistics(error_stats: dict[str, Any]) -> None:
    """Display error statistics in verbose mode"""
    console.print("\n[bold yellow]Error Statistics[/bold yellow]")

    table = Table(title="Scan Error Summary", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="red")
    table.add_row("Total Errors", str(error_stats["total_errors"]))
    table.add_row("Recent Errors", str(error_stats["recent_errors"]))
    console.print(table)

    if error_stats["errors_by_category"]:
        category_table = Table(title="Errors by Category", show_header=True)
        category_table.add_column("Category", style="cyan")
        category_table.add_column("Count", style="red")
        for category, count in error_stats["errors_by_category"].items():
            name = getattr(category, "value", str(category))
            category_table.add_row(name.replace("_", " ").title(), str(count))
        console.print(category_table)

    if error_stats["errors_by_severity"]:
        severity_table = Table(title="Errors by Severity", show_header=True)
        severity_table.add_column("Severity", style="cyan")
        severity_table.add_column("Count", style="red")
        for severity, count in error_stats["errors_by_severity"].items():
            if severity == "critical":
                color = "red"
            elif severity == "high":
                color = "yellow"
            else:
                color = "dim"
            severity_table.add_row(f"[{color}]{severity.title()}[/{color}]", str(count))
        console.print(severity_table)
