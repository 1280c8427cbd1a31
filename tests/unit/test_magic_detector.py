import io
import tarfile

import pytest

from enro.domain.classification import Category, Classification
from enro.utils.magic_detector import MagicByteDetector, SignatureMatch, match
from enro.utils.magic_patterns import (
    COMPRESSED_MARKERS,
    LABEL_CATEGORIES,
    SIGNATURES,
    Signature,
    hex_pattern,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "payload, label",
    [
        (b"PK\x03\x04rest", "ZIP"),
        (b"PK\x05\x06" + b"\x00" * 18, "ZIP"),
        (b"PK\x07\x08data", "ZIP"),
        (b"Rar!\x1a\x07\x01\x00", "RAR"),
        (b"7z\xbc\xaf\x27\x1c\x00\x04", "7Z"),
        (b"\x1f\x8b\x08\x00\x00\x00", "GZIP"),
        (b"BZh91AY&SY", "BZIP2"),
        (b"\xfd7zXZ\x00\x00\x04", "XZ"),
        (b"MSCF\x00\x00\x00\x00", "CAB"),
        (b"\x60\xea\x26\x00", "ARJ"),
        (b"\x28\xb5\x2f\xfd\x04\x00", "ZSTD"),
        (b"\x04\x22\x4d\x18\x64\x40", "LZ4"),
        (b"%PDF-1.4\n", "PDF"),
        (b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1\x00", "OLE"),
        (b"\x89PNG\r\n\x1a\n\x00\x00", "PNG"),
        (b"\xff\xd8\xff\xe0\x00\x10JFIF", "JPEG"),
        (b"GIF87a\x01\x00", "GIF"),
        (b"GIF89a\x01\x00", "GIF"),
        (b"RIFF\x24\x00\x00\x00WEBPVP8 ", "WEBP"),
    ],
)
def test_detects_leading_signatures(payload, label):
    result = MagicByteDetector().detect(payload)
    assert result is not None
    assert result.label == label
    assert result.category == LABEL_CATEGORIES[label]


def test_detects_lzh_with_wildcards():
    for method in (b"lh5", b"lzs", b"lh0"):
        payload = b"\x20\x00-" + method + b"-" + b"\x00" * 16
        result = MagicByteDetector().detect(payload)
        assert result is not None
        assert result.label == "LZH"


def test_detects_tar_at_offset_257():
    payload = b"\x00" * 257 + b"ustar\x0000" + b"\x00" * 100
    assert MagicByteDetector().detect(payload).label == "TAR"


def test_tar_needs_the_full_pattern_in_the_buffer():
    exact = b"\x00" * 257 + b"ustar"
    assert MagicByteDetector().detect(exact).label == "TAR"
    assert MagicByteDetector().detect(exact[:-1]) is None


def test_detects_iso_at_offset_32769():
    payload = b"\x00" * 32769 + b"CD001\x01"
    assert MagicByteDetector().detect(payload).label == "ISO"


def test_short_buffer_never_matches():
    assert match(b"P") == []
    assert match(b"") == []


def test_riff_without_webp_is_not_an_image():
    assert MagicByteDetector().detect(b"RIFF\x24\x00\x00\x00WAVEfmt ") is None


def test_match_returns_longer_signatures_first():
    # A ZIP header whose TAR field is also populated
    payload = bytearray(b"PK\x03\x04" + b"\x00" * 300)
    payload[257:262] = b"ustar"
    labels = [m.label for m in match(bytes(payload))]
    assert labels == ["TAR", "ZIP"]


def test_match_returns_at_most_one_entry_per_label():
    labels = [m.label for m in match(b"PK\x03\x04" + b"\x00" * 10)]
    assert labels.count("ZIP") == 1


def test_confidence_depends_on_significant_length():
    gzip = MagicByteDetector().detect(b"\x1f\x8b\x08")
    zip_match = MagicByteDetector().detect(b"PK\x03\x04")
    assert gzip.confidence == 0.6
    assert zip_match.confidence == 0.95


def test_compressed_markers_are_not_part_of_match():
    assert match(b"\x78\x9c" + b"\x00" * 10) == []
    marker = MagicByteDetector().detect_compressed_stream(b"\x78\x9c" + b"\x00" * 10)
    assert marker is not None
    assert marker.label == "ZLIB"
    assert marker.category is None


@pytest.mark.parametrize(
    "payload, label",
    [
        (b"\x78\x01abc", "ZLIB"),
        (b"\x78\x5eabc", "ZLIB"),
        (b"\x78\xdaabc", "ZLIB"),
        (b"\x1f\x9d\x90", "COMPRESS"),
        (b"\x5d\x00\x00\x80\x00", "LZMA"),
    ],
)
def test_compressed_stream_markers(payload, label):
    assert MagicByteDetector().detect_compressed_stream(payload).label == label


def test_signature_match_to_classification():
    result = SignatureMatch("ZIP", Category.ARCHIVE, 0.95, 0)
    assert result.to_classification() == Classification.archive("ZIP")


def test_marker_match_cannot_become_a_classification():
    with pytest.raises(ValueError):
        SignatureMatch("ZLIB", None, 0.6, 0).to_classification()


def test_hex_pattern_parses_wildcards():
    pattern, wildcards = hex_pattern("2D 6C ?? ?? 2D")
    assert pattern == b"\x2d\x6c\x00\x00\x2d"
    assert wildcards == frozenset({2, 3})


def test_signature_validation():
    with pytest.raises(ValueError):
        Signature("X", Category.ARCHIVE, -1, b"x")
    with pytest.raises(ValueError):
        Signature("X", Category.ARCHIVE, 0, b"")
    with pytest.raises(ValueError):
        Signature("X", Category.ARCHIVE, 0, b"ab", frozenset({5}))


def test_custom_signature_table():
    custom = Signature("ELF", Category.BINARY, 0, b"\x7fELF")
    detector = MagicByteDetector(signatures=[custom], compressed_markers=[])
    assert detector.detect(b"\x7fELF\x02").label == "ELF"
    assert detector.detect(b"PK\x03\x04") is None
    assert detector.detect_compressed_stream(b"\x78\x9c") is None


def test_tables_are_immutable_tuples():
    assert isinstance(SIGNATURES, tuple)
    assert isinstance(COMPRESSED_MARKERS, tuple)
    assert all(s.category is not None for s in SIGNATURES)


def _tar_with_member(name: str) -> bytes:
    buffer = io.BytesIO()
    payload = b"print('hello')\n"
    with tarfile.open(fileobj=buffer, mode="w", format=tarfile.USTAR_FORMAT) as archive:
        info = tarfile.TarInfo(name)
        info.size = len(payload)
        archive.addfile(info, io.BytesIO(payload))
    return buffer.getvalue()


@pytest.mark.parametrize(
    "member",
    ["py-log-1.0/setup.py", "BZhelp.txt", "MSCF_notes.txt", "readme.txt"],
)
def test_tar_header_wins_over_short_leading_magic(member):
    result = MagicByteDetector().detect(_tar_with_member(member))
    assert result.label == "TAR"


def test_signatures_are_ordered_by_significant_length():
    lengths = [signature.significant_length for signature in SIGNATURES]
    assert lengths == sorted(lengths, reverse=True)


def test_equal_length_signatures_keep_declaration_order():
    labels = [s.label for s in SIGNATURES if s.significant_length == 4]
    assert labels.index("ZIP") < labels.index("ZSTD") < labels.index("CAB")
