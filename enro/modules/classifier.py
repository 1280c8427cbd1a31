#!/usr/bin/env python3
"""
enro Classifier - Signature and entropy decision policy

Produces exactly one Classification per buffer:

1. A recognized signature is authoritative (archive, document or image).
2. Otherwise entropy decides between compressed stream, encrypted and
   random data.
3. Low-entropy content is plain text when the text heuristic agrees and
   generic binary otherwise.

Copyright (C) 2025 The enro authors
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from ..config_schemas.schemas import ClassifierConfig
from ..domain.classification import (
    BINARY,
    COMPRESSED,
    ENCRYPTED,
    PLAIN_TEXT,
    RANDOM,
    Classification,
)
from ..utils.logger import get_logger
from ..utils.magic_detector import MagicByteDetector, default_detector
from .entropy import shannon_entropy
from .text_heuristic import is_text

logger = get_logger(__name__)


class FileClassifier:
    """Stateless classifier, safe to share between worker threads"""

    def __init__(
        self,
        config: ClassifierConfig | None = None,
        detector: MagicByteDetector | None = None,
    ):
        self.config = config or ClassifierConfig()
        self.detector = detector or default_detector

    def classify(self, data: bytes) -> Classification:
        return self.analyze(data)[0]

    def analyze(self, data: bytes) -> tuple[Classification, float]:
        """
        Classify a buffer and report its entropy.

        Entropy is computed once and shared by the decision and the report,
        also for buffers whose signature already decided the verdict.
        """
        entropy = shannon_entropy(data)
        return self.decide(data, entropy), entropy

    def decide(self, head: bytes, entropy: float) -> Classification:
        """
        Apply the decision policy to a buffer with a known entropy.

        Args:
            head: Leading bytes used for signature and text checks
            entropy: Entropy of the analyzed content (may cover more than ``head``)

        Returns:
            The Classification for the content
        """
        signature = self.detector.detect(head)
        if signature is not None:
            return signature.to_classification()

        cfg = self.config
        if entropy > cfg.random_threshold:
            if cfg.detect_compressed_streams:
                marker = self.detector.detect_compressed_stream(head)
                if marker is not None:
                    logger.debug(f"High entropy data with {marker.label} stream header")
                    return COMPRESSED
            if entropy > cfg.encrypted_threshold:
                return ENCRYPTED
            return RANDOM

        if is_text(
            head,
            threshold=cfg.text_ratio,
            utf8_threshold=cfg.utf8_text_ratio,
            sample_size=cfg.text_sample_size,
        ):
            return PLAIN_TEXT
        return BINARY


default_classifier = FileClassifier()


def classify(data: bytes) -> Classification:
    """Classify ``data`` with the default policy"""
    return default_classifier.classify(data)


def entropy(data: bytes) -> float:
    """Shannon entropy of ``data`` in bits per byte"""
    return shannon_entropy(data)
