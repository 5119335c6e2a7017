"""Data access layer: JSON definitions and their repositories."""

from .errors import DataError, DataLoadError, DataReferenceError, DataValidationError

__all__ = [
    "DataError",
    "DataLoadError",
    "DataReferenceError",
    "DataValidationError",
]
