"""
Pydantic schemas for enro reports
"""

from .report import FailedFileSchema, FileResultSchema, ScanReport, SummarySchema

__all__ = ["FailedFileSchema", "FileResultSchema", "ScanReport", "SummarySchema"]
