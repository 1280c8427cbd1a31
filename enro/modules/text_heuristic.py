#!/usr/bin/env python3
"""Printable-text estimation for byte buffers."""

import unicodedata

from ..core.constants import TEXT_PRINTABLE_RATIO, TEXT_SAMPLE_SIZE, UTF8_PRINTABLE_RATIO

# ASCII printable range plus tab, newline and carriage return
TEXT_BYTES = bytes(range(0x20, 0x7F)) + b"\t\n\r"
_NON_ASCII = bytes(range(0x80, 0x100))
# Single-byte code pages (Latin-1, Windows-1251 ...) place letters at 0xA0-0xFF
EIGHT_BIT_TEXT_BYTES = TEXT_BYTES + bytes(range(0xA0, 0x100))


def printable_ratio(data: bytes, allowed: bytes = TEXT_BYTES) -> float:
    """Fraction of bytes that are ASCII printable or common whitespace"""
    if not data:
        return 1.0
    non_text = len(data.translate(None, allowed))
    return (len(data) - non_text) / len(data)


def eight_bit_printable_ratio(data: bytes) -> float:
    """Fraction of bytes that are printable in a single-byte code page"""
    return printable_ratio(data, EIGHT_BIT_TEXT_BYTES)


def _decode_utf8(data: bytes) -> str | None:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        # A multi-byte sequence cut by the sample boundary is still text
        if exc.reason == "unexpected end of data" and exc.start >= len(data) - 3:
            try:
                return data[: exc.start].decode("utf-8")
            except UnicodeDecodeError:
                return None
        return None


def utf8_printable_ratio(data: bytes) -> float | None:
    """Fraction of printable characters when ``data`` decodes as UTF-8"""
    text = _decode_utf8(data)
    if text is None:
        return None
    if not text:
        return 1.0
    printable = sum(
        1 for char in text if char.isspace() or unicodedata.category(char) != "Cc"
    )
    return printable / len(text)


def is_text(
    data: bytes,
    threshold: float = TEXT_PRINTABLE_RATIO,
    utf8_threshold: float = UTF8_PRINTABLE_RATIO,
    sample_size: int = TEXT_SAMPLE_SIZE,
) -> bool:
    """
    Estimate whether a buffer is human-readable text

    Args:
        data: Captured buffer
        threshold: Minimum printable fraction for ASCII and single-byte code page content
        utf8_threshold: Minimum printable fraction for non-ASCII UTF-8 content
        sample_size: Inspect only this many leading bytes (0 = everything)

    Returns:
        True for text-like buffers; an empty buffer is text-like
    """
    sample = data[:sample_size] if sample_size > 0 else data
    if not sample:
        return True

    if printable_ratio(sample) >= threshold:
        return True

    # Pure ASCII content is decided by the ratio above
    if len(sample.translate(None, _NON_ASCII)) == len(sample):
        return False

    ratio = utf8_printable_ratio(sample)
    if ratio is not None and ratio >= utf8_threshold:
        return True

    return eight_bit_printable_ratio(sample) >= threshold
