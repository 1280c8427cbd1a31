#!/usr/bin/env python3
"""
enro CLI Commands - Scan Command

Classifies a single file or every file in a directory tree and renders the
results as a table, a summary, CSV or JSON.

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

from typing import Any

from ...application.discovery import collect_files
from ...application.options import build_scan_options
from ...application.scan_service import ScanOutcome, ScanService
from ...config import Config
from ...core.result_aggregator import Summary
from ...modules.classifier import FileClassifier
from ...utils.error_handler import get_error_stats, reset_error_stats
from ..analysis_runner import output_csv_results, output_json_results, run_scan
from ..display import (
    display_analysis_start,
    display_error_statistics,
    display_failures,
    display_no_files_message,
    display_results,
    display_summary_only,
)
from ..validators import parse_threshold
from .base import Command


class ScanCommand(Command):
    """
    Command for classifying files.

    Responsibilities:
    - Merge CLI flags into the loaded configuration
    - Discover files and run the parallel scan
    - Dispatch to the selected output format
    """

    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute the scan.

        Args:
            args: Dictionary containing:
                - path: File or directory to scan
                - config: Optional config file path
                - recursive, min_size, max_bytes, threads: Scan overrides
                - threshold: Optional ``MIN-MAX`` entropy filter
                - simple, summary_only, output_json: Output selection
                - verbose, quiet: Verbosity

        Returns:
            0 on success (including an empty file set), 1 when the path is missing
        """
        config = self._get_config(args.get("config"))
        config.apply_overrides(self._build_overrides(args))

        machine_output = bool(args.get("simple") or args.get("output_json"))
        interactive = not machine_output and not args.get("quiet")

        entropy_range = parse_threshold(args.get("threshold"))

        scan_cfg = config.scan
        try:
            files = collect_files(
                args["path"],
                recursive=scan_cfg.recursive,
                min_size=scan_cfg.min_size,
                follow_links=scan_cfg.follow_links,
            )
        except FileNotFoundError as e:
            self.context.console.print(f"[red]Error: {e}[/red]")
            return 1

        self.context.logger.debug(f"Collected {len(files)} files with {scan_cfg}")
        options = build_scan_options(config, entropy_range, show_progress=interactive)

        if not files:
            if args.get("output_json"):
                empty = ScanOutcome(
                    results=[],
                    failed_files=[],
                    summary=Summary(high_entropy_threshold=config.output.high_entropy_threshold),
                    elapsed_time=0.0,
                    files_scanned=0,
                )
                output_json_results(empty, config.output.json_indent)
            elif not args.get("simple"):
                display_no_files_message()
            return 0

        if interactive:
            display_analysis_start(len(files))

        reset_error_stats()
        service = ScanService(
            classifier=FileClassifier(config.classifier),
            high_entropy_threshold=config.output.high_entropy_threshold,
        )
        outcome = run_scan(service, files, options)

        self._output_results(outcome, config, args)

        verbose = args.get("verbose") or config.typed_config.general.verbose
        if verbose and not machine_output:
            display_failures(outcome.failed_files)
            if outcome.failed_files:
                display_error_statistics(get_error_stats())
        return 0

    def _build_overrides(self, args: dict[str, Any]) -> dict[str, Any]:
        """Translate CLI flags into config sections; unset flags keep file values"""
        scan: dict[str, Any] = {}
        if args.get("recursive"):
            scan["recursive"] = True
        for key in ("min_size", "max_bytes", "threads"):
            if args.get(key) is not None:
                scan[key] = args[key]

        overrides: dict[str, Any] = {"scan": scan}
        if args.get("verbose"):
            overrides["general"] = {"verbose": True}
        return overrides

    def _output_results(self, outcome: ScanOutcome, config: Config, args: dict[str, Any]) -> None:
        output_cfg = config.output
        if args.get("output_json"):
            output_json_results(outcome, output_cfg.json_indent)
        elif args.get("simple"):
            output_csv_results(outcome)
        elif args.get("summary_only"):
            display_summary_only(outcome.summary)
        else:
            display_results(
                outcome.results,
                outcome.summary,
                high=output_cfg.high_entropy_threshold,
                medium=output_cfg.medium_entropy_threshold,
            )
