#!/usr/bin/env python3
"""
Pydantic Schemas for Scan Reports

Type-safe, serializable views of per-file classifications and the scan
summary, used for JSON output.

Copyright (C) 2025 The enro authors
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..core.result_aggregator import Summary
from ..domain.classification import Category, FileAnalysis


class FileResultSchema(BaseModel):
    """Classification of a single file."""

    path: str = Field(..., description="Analyzed file path")

    category: Category = Field(..., description="Top-level content category")

    label: str | None = Field(None, description="Recognized format label, e.g. ZIP")

    type: str = Field(..., description="Display label, e.g. 'Archive (ZIP)'")

    entropy: float = Field(..., ge=0.0, le=8.0, description="Shannon entropy (0.0-8.0)")

    size: int = Field(..., ge=0, description="File size in bytes")

    bytes_analyzed: int = Field(0, ge=0, description="Bytes read for the analysis")

    @field_validator("entropy")
    @classmethod
    def round_entropy(cls, v: float) -> float:
        """Keep four decimals, enough to compare against thresholds"""
        return round(v, 4)

    @classmethod
    def from_analysis(cls, record: FileAnalysis) -> "FileResultSchema":
        return cls(**record.to_dict())


class SummarySchema(BaseModel):
    """Aggregated scan statistics."""

    file_count: int = Field(0, ge=0, description="Number of classified files")

    total_size: int = Field(0, ge=0, description="Sum of file sizes in bytes")

    counts: dict[str, int] = Field(default_factory=dict, description="Files per category")

    label_counts: dict[str, int] = Field(
        default_factory=dict, description="Files per display label"
    )

    average_entropy: float = Field(0.0, ge=0.0, le=8.0, description="Mean entropy")

    high_entropy_count: int = Field(0, ge=0, description="Files above the high entropy threshold")

    high_entropy_threshold: float = Field(..., ge=0.0, le=8.0)

    @field_validator("average_entropy")
    @classmethod
    def round_average(cls, v: float) -> float:
        return round(v, 2)

    @classmethod
    def from_summary(cls, summary: Summary) -> "SummarySchema":
        return cls(**summary.to_dict())

    def count(self, category: Category) -> int:
        return self.counts.get(category.value, 0)


class FailedFileSchema(BaseModel):
    path: str
    error: str


class ScanReport(BaseModel):
    """Complete scan report."""

    files: list[FileResultSchema] = Field(default_factory=list)

    summary: SummarySchema

    failed: list[FailedFileSchema] = Field(default_factory=list)

    elapsed_time: float | None = Field(None, ge=0.0, description="Scan duration in seconds")

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Report creation time"
    )

    @classmethod
    def build(
        cls,
        results: list[FileAnalysis],
        summary: Summary,
        failed_files: list[tuple[str, str]] | None = None,
        elapsed_time: float | None = None,
    ) -> "ScanReport":
        return cls(
            files=[FileResultSchema.from_analysis(record) for record in results],
            summary=SummarySchema.from_summary(summary),
            failed=[FailedFileSchema(path=p, error=e) for p, e in failed_files or []],
            elapsed_time=elapsed_time,
        )

    def to_json(self, indent: int | None = 2, **kwargs: Any) -> str:
        return self.model_dump_json(indent=indent, **kwargs)
