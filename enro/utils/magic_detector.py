#!/usr/bin/env python3
"""
Signature lookup over captured byte buffers
"""

from collections.abc import Iterable
from dataclasses import dataclass

from ..domain.classification import Category, Classification
from .logger import get_logger
from .magic_patterns import COMPRESSED_MARKERS, SIGNATURES, Signature

logger = get_logger(__name__)


@dataclass(frozen=True)
class SignatureMatch:
    """A signature found in a buffer"""

    label: str
    category: Category | None
    confidence: float
    offset: int
    description: str = ""

    def to_classification(self) -> Classification:
        if self.category is None:
            raise ValueError(f"Signature {self.label} has no category")
        return Classification(self.category, self.label)


class MagicByteDetector:
    """Magic byte matching against a static signature table"""

    def __init__(
        self,
        signatures: Iterable[Signature] = SIGNATURES,
        compressed_markers: Iterable[Signature] = COMPRESSED_MARKERS,
    ):
        self.signatures = tuple(signatures)
        self.compressed_markers = tuple(compressed_markers)

    def match(self, data: bytes) -> list[SignatureMatch]:
        """
        Match every known signature against a buffer

        Args:
            data: Captured leading bytes of a file

        Returns:
            Matches in priority order (longest signature first), at most one per label
        """
        matches: list[SignatureMatch] = []
        seen: set[str] = set()
        for signature in self.signatures:
            if signature.label in seen:
                continue
            if signature.matches(data):
                seen.add(signature.label)
                matches.append(self._to_match(signature))
        return matches

    def detect(self, data: bytes) -> SignatureMatch | None:
        """Return the highest priority match, if any"""
        for signature in self.signatures:
            if signature.matches(data):
                logger.debug(f"Signature {signature.label} matched at offset {signature.offset}")
                return self._to_match(signature)
        return None

    def detect_compressed_stream(self, data: bytes) -> SignatureMatch | None:
        """Check the weak compressed-stream headers"""
        for marker in self.compressed_markers:
            if marker.matches(data):
                return self._to_match(marker)
        return None

    @staticmethod
    def _to_match(signature: Signature) -> SignatureMatch:
        return SignatureMatch(
            label=signature.label,
            category=signature.category,
            confidence=signature.confidence,
            offset=signature.offset,
            description=signature.description,
        )


default_detector = MagicByteDetector()


def match(data: bytes) -> list[SignatureMatch]:
    """Match ``data`` against the default signature table"""
    return default_detector.match(data)
