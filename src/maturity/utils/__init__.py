"""Utility helpers."""
from maturity.utils.error_handler import (
    AnswersLoadError,
    CatalogLoadError,
    CatalogValidationError,
    EngineError,
    exit_with_error,
)

__all__ = [
    "AnswersLoadError",
    "CatalogLoadError",
    "CatalogValidationError",
    "EngineError",
    "exit_with_error",
]
