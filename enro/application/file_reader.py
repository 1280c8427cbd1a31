"""Capture file content for classification."""

from __future__ import annotations

import functools
import os
from pathlib import Path

import psutil

from ..core.constants import MAX_CHUNK_SIZE, MIN_CHUNK_SIZE
from ..domain.classification import FileAnalysis
from ..modules.classifier import FileClassifier, default_classifier
from ..modules.entropy import ByteHistogram
from ..utils.logger import get_logger

logger = get_logger(__name__)


@functools.lru_cache(maxsize=None)
def optimal_chunk_size(threads: int = 1) -> int:
    """
    Read chunk size for whole-file scans.

    Available memory is shared between ``threads`` readers with headroom
    for one extra chunk each, clamped to [1MB, 1GB].
    """
    try:
        available = psutil.virtual_memory().available
    except (OSError, RuntimeError) as e:
        logger.debug(f"Could not query available memory: {e}")
        return MIN_CHUNK_SIZE
    divisor = max(threads * 2, 4)
    return min(max(available // divisor, MIN_CHUNK_SIZE), MAX_CHUNK_SIZE)


def read_prefix(path: str | Path, max_bytes: int) -> bytes:
    """Read at most ``max_bytes`` leading bytes of a file"""
    with open(path, "rb") as f:
        return f.read(max_bytes)


def analyze_file(
    path: str | Path,
    max_bytes: int | None = None,
    classifier: FileClassifier | None = None,
    chunk_size: int | None = None,
) -> FileAnalysis:
    """
    Classify one file.

    Args:
        path: File to analyze
        max_bytes: Leading bytes to capture; ``None`` or 0 reads the whole file
        classifier: Classifier to use (default policy when omitted)
        chunk_size: Streaming chunk size for large reads

    Returns:
        FileAnalysis record

    Raises:
        OSError: When the file cannot be read
    """
    path = Path(path)
    classifier = classifier or default_classifier
    size = os.stat(path).st_size
    to_read = min(max_bytes, size) if max_bytes else size
    chunk_size = chunk_size or optimal_chunk_size()

    if to_read <= chunk_size:
        data = read_prefix(path, to_read)
        classification, entropy = classifier.analyze(data)
        return FileAnalysis(
            path=path,
            classification=classification,
            entropy=entropy,
            size=size,
            bytes_analyzed=len(data),
        )

    # Large reads: signatures and text checks see the first chunk,
    # entropy covers every byte read
    histogram = ByteHistogram()
    head = b""
    with open(path, "rb") as f:
        while histogram.total < to_read:
            chunk = f.read(min(chunk_size, to_read - histogram.total))
            if not chunk:
                break
            if not head:
                head = chunk
            histogram.update(chunk)

    entropy = histogram.entropy()
    return FileAnalysis(
        path=path,
        classification=classifier.decide(head, entropy),
        entropy=entropy,
        size=size,
        bytes_analyzed=histogram.total,
    )
