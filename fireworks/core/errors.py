"""Error Hierarchy — typed exceptions for the fatal failure modes of the model.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Launch validation failures are NOT exceptions: add_firework returns False
    - Only lookup and variant mismatches on a Town raise

Design Decisions:
    - Single hierarchy with FireworksError base: callers catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    TYPE_MISMATCH = "type_mismatch"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    show_index: int | None = None
    show_name: str | None = None
    launch_time: int | None = None


class FireworksError(Exception):
    """Base exception for all fireworks model errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Flat JSON-safe representation for structured logging."""
        return {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {
                "show_index": self.context.show_index,
                "show_name": self.context.show_name,
                "launch_time": self.context.launch_time,
            },
        }


class ShowNotFoundError(FireworksError):
    """Town has no show at the requested index."""
    def __init__(self, show_index: int, show_count: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.show_index = show_index
        super().__init__(
            f"Show index {show_index} out of range (town has {show_count} show(s))",
            "SHOW_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.show_index = show_index


class VendorTaggingUnsupportedError(FireworksError):
    """Vendor-tagged launch aimed at a show that does not track vendors."""
    def __init__(
        self, show_index: int, show_name: str, vendor: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.show_index = show_index
        ctx.show_name = show_name
        super().__init__(
            f"Show '{show_name}' at index {show_index} does not accept "
            f"vendor-tagged fireworks (vendor '{vendor}')",
            "VENDOR_TAGGING_UNSUPPORTED", ErrorCategory.TYPE_MISMATCH,
            ErrorSeverity.ERROR, ctx,
        )
        self.vendor = vendor
