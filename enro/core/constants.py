#!/usr/bin/env python3
"""
enro Core Constants - Classification thresholds and read limits

This module contains the policy constants used by the classification engine
and by the file reading collaborators.

Copyright (C) 2025 The enro authors
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# =============================================================================
# Entropy Analysis Constants
# =============================================================================
# Shannon entropy is measured in bits per byte (0-8 scale)
MAX_ENTROPY = 8.0  # Theoretical maximum for uniformly random byte data
ENCRYPTED_ENTROPY_THRESHOLD = 7.9  # Above this: encrypted or cryptographically random
RANDOM_ENTROPY_THRESHOLD = 7.5  # Above this: compressed/random, format not recognized
HIGH_ENTROPY_THRESHOLD = 7.5  # Files above this are counted as high entropy
MEDIUM_ENTROPY_THRESHOLD = 6.0  # Display hint only

# =============================================================================
# Text Heuristic Constants
# =============================================================================
TEXT_PRINTABLE_RATIO = 0.95  # Minimum printable ASCII fraction for text
UTF8_PRINTABLE_RATIO = 0.90  # Minimum printable character fraction for UTF-8 text
TEXT_SAMPLE_SIZE = 0  # 0 = inspect the whole captured buffer

# =============================================================================
# Signature Confidence Levels
# =============================================================================
CONFIDENCE_STRONG = 0.95  # Four or more significant signature bytes
CONFIDENCE_WEAK = 0.6  # Two or three significant signature bytes
STRONG_SIGNATURE_LENGTH = 4

# =============================================================================
# Read Limits
# =============================================================================
DEFAULT_MAX_BYTES = 1024 * 1024  # Leading bytes captured per file
MIN_CHUNK_SIZE = 1024 * 1024  # 1MB
MAX_CHUNK_SIZE = 1024 * 1024 * 1024  # 1GB

__all__ = [
    # Entropy analysis
    "MAX_ENTROPY",
    "ENCRYPTED_ENTROPY_THRESHOLD",
    "RANDOM_ENTROPY_THRESHOLD",
    "HIGH_ENTROPY_THRESHOLD",
    "MEDIUM_ENTROPY_THRESHOLD",
    # Text heuristic
    "TEXT_PRINTABLE_RATIO",
    "UTF8_PRINTABLE_RATIO",
    "TEXT_SAMPLE_SIZE",
    # Signature confidence
    "CONFIDENCE_STRONG",
    "CONFIDENCE_WEAK",
    "STRONG_SIGNATURE_LENGTH",
    # Read limits
    "DEFAULT_MAX_BYTES",
    "MIN_CHUNK_SIZE",
    "MAX_CHUNK_SIZE",
]
