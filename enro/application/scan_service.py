#!/usr/bin/env python3
"""Application service for parallel scan orchestration."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from ..core.constants import HIGH_ENTROPY_THRESHOLD
from ..core.result_aggregator import Summary, merge_all
from ..domain.classification import FileAnalysis
from ..modules.classifier import FileClassifier, default_classifier
from ..utils.error_handler import record_error
from ..utils.logger import get_logger
from .file_reader import analyze_file, optimal_chunk_size
from .options import ScanOptions

logger = get_logger(__name__)

ProgressCallback = Callable[[Path], None]


@dataclass
class WorkerOutcome:
    """Results of one worker's partition"""

    results: list[tuple[int, FileAnalysis]] = field(default_factory=list)
    failures: list[tuple[int, str, str]] = field(default_factory=list)
    summary: Summary = field(default_factory=Summary)


@dataclass
class ScanOutcome:
    results: list[FileAnalysis]
    failed_files: list[tuple[str, str]]
    summary: Summary
    elapsed_time: float
    files_scanned: int


def partition(files: Sequence[Path], workers: int) -> list[list[tuple[int, Path]]]:
    """Split files round-robin, keeping each file's position"""
    buckets: list[list[tuple[int, Path]]] = [[] for _ in range(max(workers, 1))]
    for index, path in enumerate(files):
        buckets[index % len(buckets)].append((index, path))
    return [bucket for bucket in buckets if bucket]


class ScanService:
    """Classify many files with per-worker partial summaries"""

    def __init__(
        self,
        classifier: FileClassifier | None = None,
        high_entropy_threshold: float = HIGH_ENTROPY_THRESHOLD,
    ):
        self.classifier = classifier or default_classifier
        self.high_entropy_threshold = high_entropy_threshold

    def _run_partition(
        self,
        bucket: list[tuple[int, Path]],
        options: ScanOptions,
        chunk_size: int,
        on_file_done: ProgressCallback | None,
    ) -> WorkerOutcome:
        outcome = WorkerOutcome(summary=Summary(high_entropy_threshold=self.high_entropy_threshold))
        for index, path in bucket:
            try:
                record = analyze_file(path, options.max_bytes, self.classifier, chunk_size)
            except OSError as e:
                record_error(e, {"file": str(path)})
                outcome.failures.append((index, str(path), str(e)))
            else:
                if options.entropy_range is None or options.entropy_range.contains(record.entropy):
                    outcome.results.append((index, record))
                    outcome.summary.add(record)
            if on_file_done is not None:
                on_file_done(path)
        return outcome

    def scan(
        self,
        files: Sequence[Path],
        options: ScanOptions,
        on_file_done: ProgressCallback | None = None,
    ) -> ScanOutcome:
        """
        Classify ``files`` in parallel.

        Args:
            files: Files to classify, in display order
            options: Read limits, worker count and entropy filter
            on_file_done: Called once per file from the worker thread

        Returns:
            ScanOutcome with results in input order and the merged summary
        """
        start_time = time.time()
        buckets = partition(files, options.threads)
        chunk_size = optimal_chunk_size(options.threads)

        outcomes: list[WorkerOutcome] = []
        if len(buckets) <= 1:
            outcomes = [
                self._run_partition(bucket, options, chunk_size, on_file_done) for bucket in buckets
            ]
        else:
            with ThreadPoolExecutor(max_workers=len(buckets)) as executor:
                futures = [
                    executor.submit(self._run_partition, bucket, options, chunk_size, on_file_done)
                    for bucket in buckets
                ]
                outcomes = [future.result() for future in futures]

        results = sorted(
            (item for outcome in outcomes for item in outcome.results), key=lambda item: item[0]
        )
        failures = sorted(
            (item for outcome in outcomes for item in outcome.failures), key=lambda item: item[0]
        )
        summary = merge_all(
            (outcome.summary for outcome in outcomes),
            high_entropy_threshold=self.high_entropy_threshold,
        )
        elapsed = time.time() - start_time
        logger.info(
            f"Scanned {len(files)} files with {len(buckets)} workers in {elapsed:.2f}s "
            f"({len(failures)} failed)"
        )
        return ScanOutcome(
            results=[record for _, record in results],
            failed_files=[(path, error) for _, path, error in failures],
            summary=summary,
            elapsed_time=elapsed,
            files_scanned=len(files),
        )
