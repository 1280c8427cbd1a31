#!/usr/bin/env python3
"""
enro Utilities
"""

from .logger import get_logger, setup_logger
from .magic_detector import MagicByteDetector, SignatureMatch, match

__all__ = [
    "get_logger",
    "setup_logger",
    "MagicByteDetector",
    "SignatureMatch",
    "match",
]
