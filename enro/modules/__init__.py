"""
enro classification modules
"""

from .classifier import FileClassifier, classify, default_classifier, entropy
from .entropy import ByteHistogram, entropy_from_counts, shannon_entropy
from .text_heuristic import is_text, printable_ratio

__all__ = [
    "ByteHistogram",
    "FileClassifier",
    "classify",
    "default_classifier",
    "entropy",
    "entropy_from_counts",
    "is_text",
    "printable_ratio",
    "shannon_entropy",
]
