"""Application services that feed files to the classification engine."""

from .discovery import collect_files
from .file_reader import analyze_file, optimal_chunk_size, read_prefix
from .options import EntropyRange, ScanOptions, build_scan_options
from .scan_service import ScanOutcome, ScanService

__all__ = [
    "EntropyRange",
    "ScanOptions",
    "ScanOutcome",
    "ScanService",
    "analyze_file",
    "build_scan_options",
    "collect_files",
    "optimal_chunk_size",
    "read_prefix",
]
