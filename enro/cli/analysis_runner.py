#!/usr/bin/env python3
"""
enro CLI Analysis Runner Module

Runs the scan service with progress reporting and writes results in the
selected output format.

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
import threading
from pathlib import Path

from ..application.options import ScanOptions
from ..application.scan_service import ScanOutcome, ScanService
from ..schemas.report import ScanReport
from ..utils.logger import configure_batch_logging, reset_logging_levels
from ..utils.output_csv import CsvOutputFormatter
from ..utils.output_json import JsonOutputFormatter
from .display import console, create_progress


def run_scan(service: ScanService, files: list[Path], options: ScanOptions) -> ScanOutcome:
    """
    Scan files, showing a progress bar when enabled.

    Engine loggers are quieted while more than one worker runs.
    """
    batch = options.threads > 1 and len(files) > 1
    if batch:
        configure_batch_logging()
    try:
        if not options.show_progress:
            return service.scan(files, options)

        progress_lock = threading.Lock()
        with create_progress() as progress:
            task = progress.add_task("Analyzing files...", total=len(files))

            def on_file_done(path: Path) -> None:
                with progress_lock:
                    progress.update(task, advance=1, description=f"[cyan]{path.name}[/cyan]")

            return service.scan(files, options, on_file_done=on_file_done)
    finally:
        if batch:
            reset_logging_levels()


def output_csv_results(outcome: ScanOutcome) -> None:
    """Write ``Path,Type,Entropy,Size`` rows to stdout"""
    csv_output = CsvOutputFormatter(outcome.results).to_csv()
    sys.stdout.write(csv_output)
    sys.stdout.flush()


def output_json_results(outcome: ScanOutcome, indent: int) -> None:
    report = ScanReport.build(
        outcome.results,
        outcome.summary,
        failed_files=outcome.failed_files,
        elapsed_time=outcome.elapsed_time,
    )
    print(JsonOutputFormatter(report).to_json(indent=indent))


def handle_main_error(e: Exception, verbose: bool) -> None:
    """
    Handle errors in main function.

    Args:
        e: Exception that occurred
        verbose: Enable verbose error output
    """
    console.print(f"[red]Error: {str(e)}[/red]")
    if verbose:
        import traceback

        traceback.print_exc()
    sys.exit(1)
