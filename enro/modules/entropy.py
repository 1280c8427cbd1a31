#!/usr/bin/env python3
"""Shannon entropy over byte buffers."""

import math
from collections import Counter
from collections.abc import Sequence

from ..core.constants import MAX_ENTROPY


def entropy_from_counts(counts: Sequence[int], total: int) -> float:
    """Entropy in bits per byte from a 256-bucket histogram"""
    if total <= 0:
        return 0.0
    entropy = 0.0
    for count in counts:
        if count:
            p = count / total
            entropy -= p * math.log2(p)
    return min(max(entropy, 0.0), MAX_ENTROPY)


class ByteHistogram:
    """Byte-value frequencies accumulated over one or more chunks"""

    __slots__ = ("counts", "total")

    def __init__(self) -> None:
        self.counts = [0] * 256
        self.total = 0

    def update(self, chunk: bytes) -> None:
        for value, count in Counter(chunk).items():
            self.counts[value] += count
        self.total += len(chunk)

    def entropy(self) -> float:
        return entropy_from_counts(self.counts, self.total)

    @classmethod
    def from_bytes(cls, data: bytes) -> "ByteHistogram":
        histogram = cls()
        histogram.update(data)
        return histogram


def shannon_entropy(data: bytes) -> float:
    if not data:
        return 0.0
    return ByteHistogram.from_bytes(data).entropy()
