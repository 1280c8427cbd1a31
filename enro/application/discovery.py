"""File discovery for scans."""

from __future__ import annotations

import os
from pathlib import Path

from ..utils.logger import get_logger

logger = get_logger(__name__)


def _size_ok(path: Path, min_size: int) -> bool:
    try:
        return path.stat().st_size >= min_size
    except OSError as exc:
        logger.debug(f"Skipping {path}: {exc}")
        return False


def _iter_directory(directory: Path, recursive: bool, follow_links: bool) -> list[Path]:
    if not recursive:
        return sorted(entry for entry in directory.iterdir() if entry.is_file())

    files: list[Path] = []
    visited: set[tuple[int, int]] = set()
    for root, dirs, names in os.walk(directory, followlinks=follow_links):
        try:
            stat = os.stat(root)
        except OSError as exc:
            logger.debug(f"Skipping directory {root}: {exc}")
            dirs.clear()
            continue
        # A directory reached twice through symlinks is walked once
        key = (stat.st_dev, stat.st_ino)
        if key in visited:
            logger.debug(f"Skipping already visited directory {root}")
            dirs.clear()
            continue
        visited.add(key)

        dirs.sort()
        root_path = Path(root)
        for name in sorted(names):
            candidate = root_path / name
            if candidate.is_file():
                files.append(candidate)
    return files


def collect_files(
    path: str | Path,
    recursive: bool = False,
    min_size: int = 0,
    follow_links: bool = True,
) -> list[Path]:
    """
    Collect regular files to analyze.

    Args:
        path: A file or a directory
        recursive: Descend into sub-directories
        min_size: Files smaller than this many bytes are skipped
        follow_links: Follow directory symlinks while walking

    Returns:
        Files in a stable order

    Raises:
        FileNotFoundError: When ``path`` does not exist
    """
    path = Path(path)
    if path.is_file():
        candidates = [path]
    elif path.is_dir():
        candidates = _iter_directory(path, recursive, follow_links)
    else:
        raise FileNotFoundError(f"Path does not exist: {path}")

    files = [candidate for candidate in candidates if _size_ok(candidate, min_size)]
    logger.debug(f"Collected {len(files)} of {len(candidates)} files under {path}")
    return files
