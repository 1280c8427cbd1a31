#!/usr/bin/env python3
"""Magic byte patterns for content classification.

Signatures are tried longest first, counting only significant (non-wildcard)
bytes, so a short offset-0 magic never shadows a longer one such as the TAR
header at offset 257. Declaration order breaks ties. Patterns written with
``hex_pattern`` may use ``??`` for a byte that can take any value.
"""

from dataclasses import dataclass, field
from typing import Any

from ..core.constants import CONFIDENCE_STRONG, CONFIDENCE_WEAK, STRONG_SIGNATURE_LENGTH
from ..domain.classification import Category


def hex_pattern(text: str) -> tuple[bytes, frozenset[int]]:
    """Parse ``"2D 6C ?? ?? 2D"`` into pattern bytes and wildcard indexes"""
    values = bytearray()
    wildcards = set()
    for index, token in enumerate(text.split()):
        if token == "??":
            wildcards.add(index)
            values.append(0)
        else:
            values.append(int(token, 16))
    return bytes(values), frozenset(wildcards)


MAGIC_PATTERNS: dict[str, dict[str, Any]] = {
    # Archive formats
    "ZIP": {
        "signatures": [
            (0, b"PK\x03\x04"),  # Local file header
            (0, b"PK\x05\x06"),  # Empty archive
            (0, b"PK\x07\x08"),  # Spanned archive
        ],
        "category": Category.ARCHIVE,
        "description": "ZIP Archive",
        "extensions": [".zip", ".jar", ".apk", ".docx", ".xlsx", ".odt"],
    },
    "RAR": {
        "signatures": [
            (0, b"Rar!\x1a\x07"),  # RAR 1.5+ and 5.0+
        ],
        "category": Category.ARCHIVE,
        "description": "RAR Archive",
        "extensions": [".rar"],
    },
    "7Z": {
        "signatures": [
            (0, b"7z\xbc\xaf\x27\x1c"),
        ],
        "category": Category.ARCHIVE,
        "description": "7-Zip Archive",
        "extensions": [".7z"],
    },
    "XZ": {
        "signatures": [
            (0, b"\xfd7zXZ\x00"),
        ],
        "category": Category.ARCHIVE,
        "description": "XZ Compressed Data",
        "extensions": [".xz", ".txz"],
    },
    "ZSTD": {
        "signatures": [
            (0, b"\x28\xb5\x2f\xfd"),
        ],
        "category": Category.ARCHIVE,
        "description": "Zstandard Frame",
        "extensions": [".zst"],
    },
    "LZ4": {
        "signatures": [
            (0, b"\x04\x22\x4d\x18"),
        ],
        "category": Category.ARCHIVE,
        "description": "LZ4 Frame",
        "extensions": [".lz4"],
    },
    "CAB": {
        "signatures": [
            (0, b"MSCF"),
        ],
        "category": Category.ARCHIVE,
        "description": "Microsoft Cabinet Archive",
        "extensions": [".cab"],
    },
    "BZIP2": {
        "signatures": [
            (0, b"BZh"),
        ],
        "category": Category.ARCHIVE,
        "description": "BZIP2 Compressed Data",
        "extensions": [".bz2", ".tbz2"],
    },
    "GZIP": {
        "signatures": [
            (0, b"\x1f\x8b"),
        ],
        "category": Category.ARCHIVE,
        "description": "GZIP Compressed Data",
        "extensions": [".gz", ".tgz"],
    },
    "ARJ": {
        "signatures": [
            (0, b"\x60\xea"),
        ],
        "category": Category.ARCHIVE,
        "description": "ARJ Archive",
        "extensions": [".arj"],
    },
    "LZH": {
        "signatures": [
            (2, *hex_pattern("2D 6C ?? ?? 2D")),  # -lh5-, -lzs- ...
        ],
        "category": Category.ARCHIVE,
        "description": "LHA/LZH Archive",
        "extensions": [".lzh", ".lha"],
    },
    "TAR": {
        "signatures": [
            (257, b"ustar"),  # POSIX header magic
        ],
        "category": Category.ARCHIVE,
        "description": "POSIX TAR Archive",
        "extensions": [".tar"],
    },
    "ISO": {
        "signatures": [
            (32769, b"CD001"),  # Primary volume descriptor
        ],
        "category": Category.ARCHIVE,
        "description": "ISO 9660 Disk Image",
        "extensions": [".iso"],
    },
    # Document formats
    "PDF": {
        "signatures": [
            (0, b"%PDF-"),
        ],
        "category": Category.DOCUMENT,
        "description": "PDF Document",
        "extensions": [".pdf"],
    },
    "OLE": {
        "signatures": [
            (0, b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"),  # OLE/COM compound document
        ],
        "category": Category.DOCUMENT,
        "description": "Microsoft Office Document (OLE format)",
        "extensions": [".doc", ".xls", ".ppt", ".msi"],
    },
    # Image formats
    "PNG": {
        "signatures": [
            (0, b"\x89PNG\r\n\x1a\n"),
        ],
        "category": Category.IMAGE,
        "description": "PNG Image",
        "extensions": [".png"],
    },
    "WEBP": {
        "signatures": [
            (0, *hex_pattern("52 49 46 46 ?? ?? ?? ?? 57 45 42 50")),  # RIFF....WEBP
        ],
        "category": Category.IMAGE,
        "description": "WebP Image",
        "extensions": [".webp"],
    },
    "GIF": {
        "signatures": [
            (0, b"GIF87a"),
            (0, b"GIF89a"),
        ],
        "category": Category.IMAGE,
        "description": "GIF Image",
        "extensions": [".gif"],
    },
    "JPEG": {
        "signatures": [
            (0, b"\xff\xd8\xff"),
        ],
        "category": Category.IMAGE,
        "description": "JPEG Image",
        "extensions": [".jpg", ".jpeg"],
    },
}

# Weak headers trusted only for high-entropy data that matched nothing above
COMPRESSED_STREAM_MARKERS: dict[str, dict[str, Any]] = {
    "ZLIB": {
        "signatures": [
            (0, b"\x78\x01"),  # No compression / low
            (0, b"\x78\x5e"),  # Fast
            (0, b"\x78\x9c"),  # Default
            (0, b"\x78\xda"),  # Best
        ],
        "description": "zlib Stream",
    },
    "COMPRESS": {
        "signatures": [
            (0, b"\x1f\x9d"),  # Unix compress (.Z)
        ],
        "description": "Unix compress (LZW) Data",
    },
    "LZMA": {
        "signatures": [
            (0, b"\x5d\x00\x00"),  # LZMA-alone properties byte + dictionary size
        ],
        "description": "LZMA Stream",
    },
}


@dataclass(frozen=True)
class Signature:
    """A byte pattern expected at a fixed offset."""

    label: str
    category: Category | None
    offset: int
    pattern: bytes
    wildcards: frozenset[int] = field(default_factory=frozenset)
    description: str = ""

    def __post_init__(self):
        if self.offset < 0:
            raise ValueError("offset must be non-negative")
        if not self.pattern:
            raise ValueError("pattern cannot be empty")
        if any(index >= len(self.pattern) for index in self.wildcards):
            raise ValueError("wildcard index outside of pattern")

    @property
    def end(self) -> int:
        return self.offset + len(self.pattern)

    @property
    def significant_length(self) -> int:
        return len(self.pattern) - len(self.wildcards)

    @property
    def confidence(self) -> float:
        if self.significant_length >= STRONG_SIGNATURE_LENGTH:
            return CONFIDENCE_STRONG
        return CONFIDENCE_WEAK

    def matches(self, data: bytes) -> bool:
        """Check every non-wildcard byte against ``data`` at ``offset``"""
        if len(data) < self.end:
            return False
        window = data[self.offset : self.end]
        if not self.wildcards:
            return window == self.pattern
        return all(
            index in self.wildcards or window[index] == expected
            for index, expected in enumerate(self.pattern)
        )


def _build_signatures(patterns: dict[str, dict[str, Any]]) -> tuple[Signature, ...]:
    signatures = []
    for label, info in patterns.items():
        for entry in info["signatures"]:
            offset, pattern = entry[0], entry[1]
            wildcards = entry[2] if len(entry) > 2 else frozenset()
            signatures.append(
                Signature(
                    label=label,
                    category=info.get("category"),
                    offset=offset,
                    pattern=pattern,
                    wildcards=wildcards,
                    description=info.get("description", ""),
                )
            )
    # Stable sort keeps declaration order among equal lengths
    signatures.sort(key=lambda signature: signature.significant_length, reverse=True)
    return tuple(signatures)


SIGNATURES: tuple[Signature, ...] = _build_signatures(MAGIC_PATTERNS)
COMPRESSED_MARKERS: tuple[Signature, ...] = _build_signatures(COMPRESSED_STREAM_MARKERS)

LABEL_CATEGORIES: dict[str, Category] = {
    label: info["category"] for label, info in MAGIC_PATTERNS.items()
}
