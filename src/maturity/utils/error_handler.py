"""Graceful error handling for input failures with user-friendly messages.

The scoring core itself never raises; these errors cover the edges where
catalog and answer files are read.
"""
from __future__ import annotations

import sys
import structlog

logger = structlog.get_logger(__name__)


class EngineError(Exception):
    """Base class for engine input errors with user-friendly messaging."""

    def __init__(self, error_type: str, message: str, details: str = ""):
        self.error_type = error_type
        self.message = message
        self.details = details
        super().__init__(self.message)

    def get_user_message(self) -> str:
        """Return a user-friendly error message."""
        msg = f"\nError: {self.message}"
        if self.details:
            msg += f"\n   Details: {self.details}"
        return msg


class CatalogLoadError(EngineError):
    """Catalog file missing, unreadable or not valid YAML/JSON."""

    def __init__(self, path: str, reason: str = ""):
        super().__init__(
            error_type="CATALOG_LOAD",
            message=f"Could not load catalog file: {path}",
            details=reason,
        )


class CatalogValidationError(EngineError):
    """Catalog content failed model validation."""

    def __init__(self, validation_error: str):
        super().__init__(
            error_type="CATALOG_VALIDATION",
            message="Catalog content failed validation",
            details=f"Validation error: {validation_error[:500]}",
        )


class AnswersLoadError(EngineError):
    """Answer snapshot missing, unreadable or malformed."""

    def __init__(self, path: str, reason: str = ""):
        super().__init__(
            error_type="ANSWERS_LOAD",
            message=f"Could not load answers file: {path}",
            details=reason,
        )


def exit_with_error(error: EngineError, context: str = "") -> int:
    """Log error and exit gracefully with user-friendly message."""
    logger.error(
        "run_failed",
        error_type=error.error_type,
        message=error.message,
        details=error.details,
        context=context,
    )

    print(error.get_user_message(), file=sys.stderr)

    print("\nNext steps:", file=sys.stderr)
    if error.error_type == "ANSWERS_LOAD":
        print("   1. Check the --answers path", file=sys.stderr)
        print("   2. Provide a JSON list of answers or an object keyed by questionId", file=sys.stderr)
    else:
        print("   1. Check the --catalog path", file=sys.stderr)
        print("   2. Verify domains, subcategories and questions match the catalog schema", file=sys.stderr)

    print("", file=sys.stderr)
    return 1
