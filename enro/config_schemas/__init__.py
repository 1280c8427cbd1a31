"""Typed configuration schemas for enro."""

from .schemas import ClassifierConfig, EnroConfig, GeneralConfig, OutputConfig, ScanConfig

__all__ = [
    "ClassifierConfig",
    "EnroConfig",
    "GeneralConfig",
    "OutputConfig",
    "ScanConfig",
]
