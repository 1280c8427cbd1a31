#!/usr/bin/env python3
"""
enro Configuration Schemas - Typed Dataclasses
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

from dataclasses import asdict, dataclass, field
from typing import Any

from ..core.constants import (
    DEFAULT_MAX_BYTES,
    ENCRYPTED_ENTROPY_THRESHOLD,
    HIGH_ENTROPY_THRESHOLD,
    MAX_ENTROPY,
    MEDIUM_ENTROPY_THRESHOLD,
    RANDOM_ENTROPY_THRESHOLD,
    TEXT_PRINTABLE_RATIO,
    TEXT_SAMPLE_SIZE,
    UTF8_PRINTABLE_RATIO,
)


@dataclass(frozen=True)
class GeneralConfig:
    """General configuration settings"""

    verbose: bool = False


@dataclass(frozen=True)
class ClassifierConfig:
    """Classification policy thresholds"""

    encrypted_threshold: float = ENCRYPTED_ENTROPY_THRESHOLD
    random_threshold: float = RANDOM_ENTROPY_THRESHOLD
    text_ratio: float = TEXT_PRINTABLE_RATIO
    utf8_text_ratio: float = UTF8_PRINTABLE_RATIO
    text_sample_size: int = TEXT_SAMPLE_SIZE
    detect_compressed_streams: bool = True

    def __post_init__(self):
        """Validate configuration values"""
        if not (0.0 <= self.random_threshold <= MAX_ENTROPY):
            raise ValueError("random_threshold must be between 0.0 and 8.0")
        if not (0.0 <= self.encrypted_threshold <= MAX_ENTROPY):
            raise ValueError("encrypted_threshold must be between 0.0 and 8.0")
        if self.encrypted_threshold < self.random_threshold:
            raise ValueError("encrypted_threshold must be >= random_threshold")
        if not (0.0 < self.text_ratio <= 1.0):
            raise ValueError("text_ratio must be in (0.0, 1.0]")
        if not (0.0 < self.utf8_text_ratio <= 1.0):
            raise ValueError("utf8_text_ratio must be in (0.0, 1.0]")
        if self.text_sample_size < 0:
            raise ValueError("text_sample_size must be non-negative")


@dataclass(frozen=True)
class ScanConfig:
    """File reading and traversal configuration"""

    max_bytes: int = DEFAULT_MAX_BYTES
    min_size: int = 0
    recursive: bool = False
    threads: int = 0
    follow_links: bool = True

    def __post_init__(self):
        """Validate configuration values"""
        if self.max_bytes < 0:
            raise ValueError("max_bytes must be non-negative (0 reads whole files)")
        if self.min_size < 0:
            raise ValueError("min_size must be non-negative")
        if self.threads < 0:
            raise ValueError("threads must be non-negative (0 uses all CPU cores)")


@dataclass(frozen=True)
class OutputConfig:
    """Output formatting configuration"""

    high_entropy_threshold: float = HIGH_ENTROPY_THRESHOLD
    medium_entropy_threshold: float = MEDIUM_ENTROPY_THRESHOLD
    json_indent: int = 2
    show_progress: bool = True

    def __post_init__(self):
        """Validate configuration values"""
        if not (0.0 <= self.high_entropy_threshold <= MAX_ENTROPY):
            raise ValueError("high_entropy_threshold must be between 0.0 and 8.0")
        if not (0.0 <= self.medium_entropy_threshold <= self.high_entropy_threshold):
            raise ValueError("medium_entropy_threshold must be between 0.0 and high_entropy_threshold")
        if self.json_indent < 0:
            raise ValueError("json_indent must be non-negative")


_SECTIONS: dict[str, type] = {
    "general": GeneralConfig,
    "classifier": ClassifierConfig,
    "scan": ScanConfig,
    "output": OutputConfig,
}


@dataclass(frozen=True)
class EnroConfig:
    """Main enro configuration container"""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "EnroConfig":
        """Create configuration from dictionary, ignoring unknown sections"""
        if not isinstance(config_dict, dict):
            raise TypeError("config_dict must be a dictionary")

        kwargs: dict[str, Any] = {}
        for section, section_type in _SECTIONS.items():
            if section in config_dict:
                kwargs[section] = section_type(**config_dict[section])
        return cls(**kwargs)

    def merge(self, other: "EnroConfig") -> "EnroConfig":
        """Merge with another configuration, with other taking precedence"""
        return EnroConfig.from_dict({**self.to_dict(), **other.to_dict()})
