#!/usr/bin/env python3
"""
Error classification and statistics for file reading collaborators
"""

import threading
from collections import defaultdict, deque
from enum import Enum
from typing import Any

from .logger import get_logger

logger = get_logger(__name__)


class ErrorSeverity(Enum):
    """Error severity levels"""

    LOW = "low"  # File skipped, scan continues
    MEDIUM = "medium"  # Some files could not be analyzed
    HIGH = "high"  # Input missing or not accessible
    CRITICAL = "critical"  # Scan should be aborted


class ErrorCategory(Enum):
    """Error categories for classification"""

    INPUT_VALIDATION = "input_validation"
    FILE_ACCESS = "file_access"
    MEMORY = "memory"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class ErrorInfo:
    """Information about an error"""

    def __init__(
        self,
        exception: BaseException,
        severity: ErrorSeverity,
        category: ErrorCategory,
        context: dict[str, Any] | None = None,
        suggested_action: str | None = None,
    ):
        self.exception = exception
        self.severity = severity
        self.category = category
        self.context = context or {}
        self.suggested_action = suggested_action

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization"""
        return {
            "exception_type": type(self.exception).__name__,
            "exception_message": str(self.exception),
            "severity": self.severity.value,
            "category": self.category.value,
            "context": self.context,
            "suggested_action": self.suggested_action,
        }


class ErrorClassifier:
    """Classify exceptions into categories and severities"""

    # Most specific types first
    EXCEPTION_MAPPING: tuple[tuple[type[BaseException], ErrorCategory, ErrorSeverity], ...] = (
        (FileNotFoundError, ErrorCategory.FILE_ACCESS, ErrorSeverity.HIGH),
        (PermissionError, ErrorCategory.FILE_ACCESS, ErrorSeverity.HIGH),
        (IsADirectoryError, ErrorCategory.FILE_ACCESS, ErrorSeverity.MEDIUM),
        (MemoryError, ErrorCategory.MEMORY, ErrorSeverity.CRITICAL),
        (OSError, ErrorCategory.FILE_ACCESS, ErrorSeverity.MEDIUM),
        (ValueError, ErrorCategory.INPUT_VALIDATION, ErrorSeverity.MEDIUM),
        (TypeError, ErrorCategory.INPUT_VALIDATION, ErrorSeverity.MEDIUM),
    )

    SUGGESTED_ACTIONS = {
        FileNotFoundError: "File was removed during the scan",
        PermissionError: "Check read permissions or run with elevated privileges",
        MemoryError: "Lower --max-bytes or the number of threads",
    }

    @classmethod
    def classify(
        cls, exception: BaseException, context: dict[str, Any] | None = None
    ) -> ErrorInfo:
        """
        Classify an exception

        Args:
            exception: The exception to classify
            context: Additional context information

        Returns:
            ErrorInfo object with classification
        """
        category, severity = ErrorCategory.UNKNOWN, ErrorSeverity.MEDIUM
        for exc_type, mapped_category, mapped_severity in cls.EXCEPTION_MAPPING:
            if isinstance(exception, exc_type):
                category, severity = mapped_category, mapped_severity
                break

        suggested_action = None
        for exc_type, action in cls.SUGGESTED_ACTIONS.items():
            if isinstance(exception, exc_type):
                suggested_action = action
                break

        return ErrorInfo(
            exception=exception,
            severity=severity,
            category=category,
            context=context,
            suggested_action=suggested_action,
        )


class ErrorStats:
    """Thread-safe error counters"""

    def __init__(self, history_size: int = 100):
        self.lock = threading.Lock()
        self.total_errors = 0
        self.errors_by_category: dict[ErrorCategory, int] = defaultdict(int)
        self.errors_by_severity: dict[str, int] = defaultdict(int)
        self.recent: deque[ErrorInfo] = deque(maxlen=history_size)

    def record(self, error_info: ErrorInfo) -> None:
        with self.lock:
            self.total_errors += 1
            self.errors_by_category[error_info.category] += 1
            self.errors_by_severity[error_info.severity.value] += 1
            self.recent.append(error_info)

    def snapshot(self) -> dict[str, Any]:
        with self.lock:
            return {
                "total_errors": self.total_errors,
                "recent_errors": len(self.recent),
                "errors_by_category": dict(self.errors_by_category),
                "errors_by_severity": dict(self.errors_by_severity),
            }

    def reset(self) -> None:
        with self.lock:
            self.total_errors = 0
            self.errors_by_category.clear()
            self.errors_by_severity.clear()
            self.recent.clear()


_error_stats = ErrorStats()


def record_error(exception: BaseException, context: dict[str, Any] | None = None) -> ErrorInfo:
    """Classify an exception, log it and count it"""
    error_info = ErrorClassifier.classify(exception, context)
    _error_stats.record(error_info)
    log = logger.error if error_info.severity == ErrorSeverity.CRITICAL else logger.debug
    log(f"{error_info.category.value}: {exception} ({error_info.context})")
    return error_info


def get_error_stats() -> dict[str, Any]:
    return _error_stats.snapshot()


def reset_error_stats() -> None:
    _error_stats.reset()
