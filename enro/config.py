#!/usr/bin/env python3
"""
enro Configuration Management
"""

import copy
import os
from pathlib import Path
from typing import Any

from .config_schemas.schemas import _SECTIONS, EnroConfig
from .config_store import ConfigStore
from .utils.logger import get_logger

logger = get_logger(__name__)


class Config:
    """Configuration manager for enro"""

    DEFAULT_CONFIG: dict[str, Any] = EnroConfig().to_dict()

    def __init__(self, config_path: str | None = None):
        self.config: dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path or self._get_default_config_path()
        self.typed_config = EnroConfig()

        # Load configuration if exists
        if os.path.exists(self.config_path):
            self.load_config()
        else:
            self.save_config()  # Create default config

    def _get_default_config_path(self) -> str:
        """Get default configuration file path"""
        return str(Path.home() / ".enro" / "config.json")

    def load_config(self) -> None:
        """Load configuration from file"""
        user_config = ConfigStore.load(self.config_path)
        if user_config is not None:
            self._merge_config(user_config)

    def save_config(self) -> None:
        """Save configuration to file"""
        ConfigStore.save(self.config_path, self.config)

    def apply_overrides(self, overrides: dict[str, Any]) -> None:
        """Apply in-memory overrides (e.g. from CLI flags) without saving"""
        self._merge_config(overrides)

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merge user configuration with current values, section by section"""
        for section, settings in user_config.items():
            if section in self.config and isinstance(settings, dict):
                self.config[section].update(settings)
            else:
                self.config[section] = settings
        self._rebuild_typed_config()

    def _rebuild_typed_config(self) -> None:
        """Validate each known section, falling back to defaults on bad values"""
        sections: dict[str, Any] = {}
        for section, section_type in _SECTIONS.items():
            values = self.config.get(section)
            if not isinstance(values, dict):
                sections[section] = section_type()
                continue
            known = {k: v for k, v in values.items() if k in section_type.__dataclass_fields__}
            try:
                sections[section] = section_type(**known)
            except (TypeError, ValueError) as e:
                logger.warning(f"Invalid '{section}' configuration ({e}); using defaults")
                sections[section] = section_type()
                self.config[section] = copy.deepcopy(self.DEFAULT_CONFIG[section])
        self.typed_config = EnroConfig(**sections)

    def get(self, section: str, key: str | None = None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value) -> None:
        """Set configuration value"""
        self.apply_overrides({section: {key: value}})

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self.config)

    @property
    def classifier(self):
        return self.typed_config.classifier

    @property
    def scan(self):
        return self.typed_config.scan

    @property
    def output(self):
        return self.typed_config.output

    def __getitem__(self, key):
        """Allow dict-like access"""
        return self.config[key]

    def __contains__(self, key):
        """Allow 'in' operator"""
        return key in self.config
