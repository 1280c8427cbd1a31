"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import os
import random
from pathlib import Path

import pytest

from enro.utils.error_handler import reset_error_stats
from enro.utils.logger import setup_logger


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests without filesystem side effects")
    config.addinivalue_line("markers", "integration: end-to-end CLI and scan workflows")


@pytest.fixture(autouse=True, scope="session")
def isolated_home(tmp_path_factory: pytest.TempPathFactory):
    """
    Point HOME at a scratch directory for the whole session.

    The default config file and the log directory live under ``~/.enro``.
    """
    home = tmp_path_factory.mktemp("home")
    with pytest.MonkeyPatch.context() as mp:
        mp.setenv("HOME", str(home))
        # Bind the console handler while the session-wide stderr is active
        setup_logger()
        yield home


@pytest.fixture(autouse=True)
def clean_error_stats():
    reset_error_stats()
    yield
    reset_error_stats()


@pytest.fixture
def random_bytes():
    """Deterministic pseudo-random payloads"""

    def _make(size: int, seed: int = 1337) -> bytes:
        return random.Random(seed).randbytes(size)

    return _make


@pytest.fixture
def sample_tree(tmp_path: Path, random_bytes) -> Path:
    """A small directory with one file per common category"""
    root = tmp_path / "samples"
    nested = root / "nested"
    nested.mkdir(parents=True)
    (root / "archive.zip").write_bytes(b"PK\x03\x04" + random_bytes(4096, seed=1))
    (root / "notes.txt").write_text("The quick brown fox jumps over the lazy dog.\n" * 40)
    (root / "secret.bin").write_bytes(random_bytes(65536, seed=2))
    (root / "empty.dat").write_bytes(b"")
    (nested / "report.pdf").write_bytes(b"%PDF-1.7\n" + b"0 obj << >> endobj\n" * 20)
    return root


@pytest.fixture
def config_file(tmp_path: Path) -> str:
    """Path for a per-test config file; Config creates it with defaults"""
    return os.fspath(tmp_path / "enro-config.json")
