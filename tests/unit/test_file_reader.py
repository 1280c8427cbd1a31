import psutil
import pytest

from enro.application.file_reader import analyze_file, optimal_chunk_size, read_prefix
from enro.core.constants import MAX_CHUNK_SIZE, MIN_CHUNK_SIZE
from enro.domain.classification import ENCRYPTED, PLAIN_TEXT, Classification
from enro.modules.entropy import shannon_entropy


def test_read_prefix_is_bounded(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"0123456789")
    assert read_prefix(path, 4) == b"0123"
    assert read_prefix(path, 100) == b"0123456789"


def test_analyze_file_records_size_and_bytes_read(tmp_path, random_bytes):
    path = tmp_path / "blob.bin"
    path.write_bytes(random_bytes(5000))
    record = analyze_file(path, max_bytes=1000)
    assert record.size == 5000
    assert record.bytes_analyzed == 1000
    assert record.path == path


def test_analyze_file_whole_file_when_max_bytes_is_none(tmp_path, random_bytes):
    path = tmp_path / "blob.bin"
    path.write_bytes(random_bytes(65536))
    record = analyze_file(path, max_bytes=None)
    assert record.bytes_analyzed == 65536
    assert record.classification == ENCRYPTED


def test_analyze_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    record = analyze_file(path)
    assert record.classification == PLAIN_TEXT
    assert record.entropy == 0.0
    assert record.size == 0


def test_chunked_read_matches_single_read(tmp_path, random_bytes):
    data = b"PK\x03\x04" + random_bytes(50000)
    path = tmp_path / "archive.zip"
    path.write_bytes(data)
    chunked = analyze_file(path, max_bytes=None, chunk_size=4096)
    single = analyze_file(path, max_bytes=None, chunk_size=len(data))
    assert chunked.classification == Classification.archive("ZIP")
    assert chunked.bytes_analyzed == len(data)
    assert chunked.entropy == pytest.approx(single.entropy)
    assert chunked.entropy == pytest.approx(shannon_entropy(data))


def test_chunked_read_respects_max_bytes(tmp_path):
    path = tmp_path / "text.txt"
    path.write_bytes(b"hello world\n" * 1000)
    record = analyze_file(path, max_bytes=5000, chunk_size=1024)
    assert record.bytes_analyzed == 5000
    assert record.classification == PLAIN_TEXT


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        analyze_file(tmp_path / "missing.bin")


def test_optimal_chunk_size_is_clamped():
    for threads in (1, 4, 64):
        size = optimal_chunk_size(threads)
        assert MIN_CHUNK_SIZE <= size <= MAX_CHUNK_SIZE


def test_optimal_chunk_size_falls_back_when_memory_is_unknown(monkeypatch):
    def boom():
        raise OSError("no /proc")

    monkeypatch.setattr(psutil, "virtual_memory", boom)
    optimal_chunk_size.cache_clear()
    try:
        assert optimal_chunk_size(3) == MIN_CHUNK_SIZE
    finally:
        optimal_chunk_size.cache_clear()
