#!/usr/bin/env python3
"""JSON output formatting helpers."""

from __future__ import annotations

from ..schemas.report import ScanReport


class JsonOutputFormatter:
    """Format a scan report as JSON."""

    def __init__(self, report: ScanReport):
        self.report = report

    def to_json(self, indent: int | None = 2) -> str:
        return self.report.to_json(indent=indent or None)
