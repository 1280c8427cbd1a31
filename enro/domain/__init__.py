"""Domain values shared by the engine and the reporting layer."""

from .classification import (
    BINARY,
    COMPRESSED,
    ENCRYPTED,
    LABELLED_CATEGORIES,
    PLAIN_TEXT,
    RANDOM,
    Category,
    Classification,
    FileAnalysis,
)

__all__ = [
    "BINARY",
    "COMPRESSED",
    "ENCRYPTED",
    "LABELLED_CATEGORIES",
    "PLAIN_TEXT",
    "RANDOM",
    "Category",
    "Classification",
    "FileAnalysis",
]
