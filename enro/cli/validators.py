#!/usr/bin/env python3
"""
enro CLI Input Validation Module

Copyright (C) 2025 The enro authors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from pathlib import Path

from ..application.options import EntropyRange
from ..utils.logger import get_logger
from .display import console, display_threshold_warning

logger = get_logger(__name__)


def validate_inputs(
    path: str | None,
    min_size: int | None,
    max_bytes: int | None,
    threads: int | None,
    config: str | None,
) -> list[str]:
    """
    Validate all user inputs.

    Args:
        path: File or directory to scan
        min_size: Minimum file size in bytes
        max_bytes: Bytes to read per file
        threads: Number of worker threads
        config: Config file path

    Returns:
        List of validation error messages (empty if all valid)
    """
    errors: list[str] = []

    errors.extend(validate_path_input(path))
    errors.extend(validate_size_input("--min-size", min_size))
    errors.extend(validate_size_input("--max-bytes", max_bytes))
    errors.extend(validate_threads_input(threads))
    errors.extend(validate_config_input(config))

    return errors


def validate_path_input(path: str | None) -> list[str]:
    errors: list[str] = []
    if not path:
        errors.append("Must provide a file or directory to analyze")
        return errors
    try:
        target = Path(path)
        if not target.exists():
            errors.append(f"Path does not exist: {path}")
        elif not (target.is_file() or target.is_dir()):
            errors.append(f"Path is not a regular file or directory: {path}")
    except OSError as e:
        errors.append(f"File access error: {e}")
    return errors


def validate_size_input(option: str, value: int | None) -> list[str]:
    errors: list[str] = []
    if value is not None and value < 0:
        errors.append(f"{option} must be zero or a positive number of bytes")
    return errors


def validate_threads_input(threads: int | None) -> list[str]:
    """
    Validate threads input.

    Args:
        threads: Number of threads

    Returns:
        List of validation error messages (empty if valid)
    """
    errors: list[str] = []
    if threads is not None and threads < 1:
        errors.append("Threads must be a positive integer")
    return errors


def validate_config_input(config: str | None) -> list[str]:
    """
    Validate config file input.

    Args:
        config: Config file path

    Returns:
        List of validation error messages (empty if valid)
    """
    errors: list[str] = []
    if config:
        config_path = Path(config)
        if config_path.exists() and not config_path.is_file():
            errors.append(f"Config path is not a file: {config}")
        elif config_path.suffix.lower() != ".json":
            errors.append(f"Config file must be JSON: {config}")
    return errors


def display_validation_errors(validation_errors: list[str]) -> None:
    """
    Display validation errors.

    Args:
        validation_errors: List of error messages
    """
    for error in validation_errors:
        console.print(f"[red]Error: {error}[/red]")


def parse_threshold(threshold: str | None) -> EntropyRange | None:
    """
    Parse the ``--threshold`` entropy range.

    A malformed range prints a warning and disables filtering.
    """
    if threshold is None:
        return None
    try:
        return EntropyRange.parse(threshold)
    except ValueError as e:
        logger.debug(f"Ignoring threshold {threshold!r}: {e}")
        display_threshold_warning()
        return None
