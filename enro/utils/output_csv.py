#!/usr/bin/env python3
"""CSV output formatting helpers."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from pathlib import Path

from ..domain.classification import FileAnalysis
from .formatting import display_path


class CsvOutputFormatter:
    """Format classification results as ``Path,Type,Entropy,Size`` rows."""

    fieldnames = ["Path", "Type", "Entropy", "Size"]

    def __init__(self, results: Iterable[FileAnalysis], base: str | Path | None = None):
        self.results = list(results)
        self.base = base

    def _row(self, record: FileAnalysis) -> dict[str, str | int]:
        return {
            "Path": display_path(record.path, self.base),
            "Type": record.classification.short_name,
            "Entropy": f"{record.entropy:.2f}",
            "Size": record.size,
        }

    def to_csv(self) -> str:
        """Convert results to CSV; the header is always present"""
        output = io.StringIO()
        try:
            writer = csv.DictWriter(output, fieldnames=self.fieldnames, lineterminator="\n")
            writer.writeheader()
            for record in self.results:
                writer.writerow(self._row(record))
            return output.getvalue()
        finally:
            output.close()
