#!/usr/bin/env python3
"""Human-readable formatting helpers shared by the output formatters."""

from __future__ import annotations

from pathlib import Path

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_size(size_bytes: int) -> str:
    """
    Format a byte count with binary units.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted size string (e.g., "1.50 KB")
    """
    size_value = float(size_bytes)
    unit = 0
    while size_value >= 1024.0 and unit < len(SIZE_UNITS) - 1:
        size_value /= 1024.0
        unit += 1
    return f"{size_value:.2f} {SIZE_UNITS[unit]}"


def format_entropy(entropy: float) -> str:
    return f"{entropy:.2f}/8.0"


def display_path(path: str | Path, base: str | Path | None = None) -> str:
    """Path relative to ``base`` (the working directory by default) when it lies beneath it"""
    path = Path(path)
    try:
        base_path = Path(base) if base is not None else Path.cwd()
    except OSError:
        return str(path)
    try:
        return str(path.relative_to(base_path))
    except ValueError:
        return str(path)
