#!/usr/bin/env python3
"""
JSON persistence for the enro configuration file.

The file holds one JSON object per section (``general``, ``classifier``,
``scan``, ``output``). Loading drops known sections that are not objects so a
hand-edited file cannot replace a whole section with a scalar; the typed
config then uses that section's defaults.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .config_schemas.schemas import _SECTIONS
from .utils.logger import get_logger

logger = get_logger(__name__)


class ConfigStore:
    """Load and save enro configuration files."""

    @staticmethod
    def load(path: str) -> dict[str, Any] | None:
        """
        Read a config file.

        Returns:
            The section mapping, or None when the file is unreadable or its
            top level is not a JSON object
        """
        try:
            with open(path) as handle:
                data = json.load(handle)
        except (OSError, ValueError) as exc:
            logger.warning(f"Could not load enro config from {path}: {exc}")
            return None

        if not isinstance(data, dict):
            logger.warning(
                f"Ignoring enro config {path}: expected an object with "
                f"{', '.join(_SECTIONS)} sections"
            )
            return None

        sections: dict[str, Any] = {}
        for section, settings in data.items():
            if section in _SECTIONS and not isinstance(settings, dict):
                logger.warning(
                    f"Ignoring '{section}' section in {path}: expected an object, "
                    f"got {type(settings).__name__}"
                )
                continue
            if section not in _SECTIONS:
                logger.debug(f"Keeping unknown config section '{section}' from {path}")
            sections[section] = settings
        return sections

    @staticmethod
    def save(path: str, payload: dict[str, Any]) -> None:
        """Write the section mapping, creating the parent directory (``~/.enro``) if needed."""
        try:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as handle:
                json.dump(payload, handle, indent=2)
        except OSError as exc:
            logger.warning(f"Could not save enro config to {path}: {exc}")
