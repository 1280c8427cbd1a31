#!/usr/bin/env python3
"""
enro - File Encryption & Randomness Observer
Signature and entropy based classification of file contents

License: GPL-3.0
"""

from .__version__ import __author__, __license__, __version__

__description__ = "Classify files as archives, documents, compressed, encrypted or random data"

from .core import Summary, fold, merge, summarize
from .domain import Category, Classification, FileAnalysis
from .modules import FileClassifier, classify, entropy

__all__ = [
    "Category",
    "Classification",
    "FileAnalysis",
    "FileClassifier",
    "Summary",
    "classify",
    "entropy",
    "fold",
    "merge",
    "summarize",
    "__version__",
    "__author__",
    "__license__",
    "__description__",
]
