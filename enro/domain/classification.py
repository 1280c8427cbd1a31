"""Classification values produced by the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class Category(Enum):
    """Top-level content categories"""

    ARCHIVE = "archive"
    DOCUMENT = "document"
    IMAGE = "image"
    COMPRESSED = "compressed"
    ENCRYPTED = "encrypted"
    RANDOM = "random"
    PLAIN_TEXT = "plain_text"
    BINARY = "binary"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    @property
    def is_labelled(self) -> bool:
        return self in LABELLED_CATEGORIES


_DISPLAY_NAMES = {
    Category.ARCHIVE: "Archive",
    Category.DOCUMENT: "Document",
    Category.IMAGE: "Image",
    Category.COMPRESSED: "Compressed",
    Category.ENCRYPTED: "Encrypted",
    Category.RANDOM: "Random Data",
    Category.PLAIN_TEXT: "Plain Text",
    Category.BINARY: "Binary",
}

_SHORT_NAMES = {
    Category.ARCHIVE: "Archive",
    Category.DOCUMENT: "Document",
    Category.IMAGE: "Image",
    Category.COMPRESSED: "Compressed",
    Category.ENCRYPTED: "Encrypted",
    Category.RANDOM: "Random",
    Category.PLAIN_TEXT: "PlainText",
    Category.BINARY: "Binary",
}

LABELLED_CATEGORIES = frozenset({Category.ARCHIVE, Category.DOCUMENT, Category.IMAGE})


@dataclass(frozen=True)
class Classification:
    """
    Verdict for one buffer.

    Archive, document and image verdicts carry the recognized format label
    (``Archive("ZIP")``); every other category is label-free.
    """

    category: Category
    label: str | None = None

    def __post_init__(self):
        if self.category.is_labelled and not self.label:
            raise ValueError(f"{self.category.display_name} classification requires a label")
        if not self.category.is_labelled and self.label is not None:
            raise ValueError(f"{self.category.display_name} classification takes no label")

    @classmethod
    def archive(cls, label: str) -> Classification:
        return cls(Category.ARCHIVE, label)

    @classmethod
    def document(cls, label: str) -> Classification:
        return cls(Category.DOCUMENT, label)

    @classmethod
    def image(cls, label: str) -> Classification:
        return cls(Category.IMAGE, label)

    @property
    def display_name(self) -> str:
        """Human readable form, e.g. ``Archive (ZIP)`` or ``Random Data``"""
        if self.label:
            return f"{self.category.display_name} ({self.label})"
        return self.category.display_name

    @property
    def short_name(self) -> str:
        """Compact form used in CSV output, e.g. ``Archive(ZIP)`` or ``PlainText``"""
        if self.label:
            return f"{self.category.short_name}({self.label})"
        return self.category.short_name

    def __str__(self) -> str:
        return self.display_name


COMPRESSED = Classification(Category.COMPRESSED)
ENCRYPTED = Classification(Category.ENCRYPTED)
RANDOM = Classification(Category.RANDOM)
PLAIN_TEXT = Classification(Category.PLAIN_TEXT)
BINARY = Classification(Category.BINARY)


@dataclass(frozen=True)
class FileAnalysis:
    """Classification record for a single file."""

    path: Path
    classification: Classification
    entropy: float
    size: int
    bytes_analyzed: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "category": self.classification.category.value,
            "label": self.classification.label,
            "type": self.classification.display_name,
            "entropy": self.entropy,
            "size": self.size,
            "bytes_analyzed": self.bytes_analyzed,
        }
