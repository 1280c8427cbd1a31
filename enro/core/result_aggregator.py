#!/usr/bin/env python3
"""Result aggregation for scan summaries."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import reduce
from typing import Any

from ..domain.classification import Category, FileAnalysis
from .constants import HIGH_ENTROPY_THRESHOLD


@dataclass
class Summary:
    """
    Running statistics over classified files.

    A Summary is owned by one worker at a time; partial summaries from
    different workers are combined with ``merge``. Both operations only add
    counters, so the final result does not depend on fold or merge order.
    """

    counts: dict[Category, int] = field(default_factory=dict)
    label_counts: dict[str, int] = field(default_factory=dict)
    total_entropy_sum: float = 0.0
    file_count: int = 0
    high_entropy_count: int = 0
    total_size: int = 0
    high_entropy_threshold: float = HIGH_ENTROPY_THRESHOLD

    def add(self, record: FileAnalysis) -> Summary:
        """Fold one record in place and return self"""
        category = record.classification.category
        label = record.classification.display_name
        self.counts[category] = self.counts.get(category, 0) + 1
        self.label_counts[label] = self.label_counts.get(label, 0) + 1
        self.total_entropy_sum += record.entropy
        self.file_count += 1
        self.total_size += record.size
        if record.entropy > self.high_entropy_threshold:
            self.high_entropy_count += 1
        return self

    def average_entropy(self) -> float:
        if self.file_count == 0:
            return 0.0
        return self.total_entropy_sum / self.file_count

    def count(self, category: Category) -> int:
        return self.counts.get(category, 0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "counts": {category.value: n for category, n in self.counts.items()},
            "label_counts": dict(self.label_counts),
            "file_count": self.file_count,
            "total_size": self.total_size,
            "average_entropy": self.average_entropy(),
            "high_entropy_count": self.high_entropy_count,
            "high_entropy_threshold": self.high_entropy_threshold,
        }


def fold(summary: Summary, record: FileAnalysis) -> Summary:
    """Return a new summary with ``record`` folded in; ``summary`` is untouched"""
    return copy.deepcopy(summary).add(record)


def _add_counts(left: dict, right: dict) -> dict:
    merged = dict(left)
    for key, value in right.items():
        merged[key] = merged.get(key, 0) + value
    return merged


def merge(left: Summary, right: Summary) -> Summary:
    """Combine two partial summaries"""
    if left.high_entropy_threshold != right.high_entropy_threshold:
        raise ValueError("Cannot merge summaries with different high entropy thresholds")
    return Summary(
        counts=_add_counts(left.counts, right.counts),
        label_counts=_add_counts(left.label_counts, right.label_counts),
        total_entropy_sum=left.total_entropy_sum + right.total_entropy_sum,
        file_count=left.file_count + right.file_count,
        high_entropy_count=left.high_entropy_count + right.high_entropy_count,
        total_size=left.total_size + right.total_size,
        high_entropy_threshold=left.high_entropy_threshold,
    )


def merge_all(
    summaries: Iterable[Summary], high_entropy_threshold: float = HIGH_ENTROPY_THRESHOLD
) -> Summary:
    return reduce(merge, summaries, Summary(high_entropy_threshold=high_entropy_threshold))


def summarize(
    records: Iterable[FileAnalysis], high_entropy_threshold: float = HIGH_ENTROPY_THRESHOLD
) -> Summary:
    summary = Summary(high_entropy_threshold=high_entropy_threshold)
    for record in records:
        summary.add(record)
    return summary
