"""Scan option models."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..config import Config


@dataclass(frozen=True)
class EntropyRange:
    """Inclusive entropy interval used to filter results"""

    minimum: float
    maximum: float

    def __post_init__(self):
        if self.minimum > self.maximum:
            raise ValueError("minimum must be <= maximum")

    def contains(self, entropy: float) -> bool:
        return self.minimum <= entropy <= self.maximum

    @classmethod
    def parse(cls, text: str) -> EntropyRange:
        """Parse ``"7.5-8.0"``; raises ValueError on malformed input"""
        minimum, sep, maximum = text.strip().partition("-")
        if not sep:
            raise ValueError(f"Invalid threshold format: {text!r}")
        return cls(float(minimum), float(maximum))


@dataclass(frozen=True)
class ScanOptions:
    max_bytes: int | None
    threads: int
    entropy_range: EntropyRange | None = None
    show_progress: bool = True


def build_scan_options(
    config: Config, entropy_range: EntropyRange | None = None, show_progress: bool = True
) -> ScanOptions:
    """Resolve scan options from the effective configuration"""
    scan = config.scan
    return ScanOptions(
        max_bytes=scan.max_bytes or None,
        threads=scan.threads or os.cpu_count() or 1,
        entropy_range=entropy_range,
        show_progress=show_progress and config.output.show_progress,
    )
