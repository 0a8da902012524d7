"""RSS 2.0 conformance checking."""

from archor.validation.engine import (
    ConformanceChecker,
    ValidationFailure,
    ValidationReport,
    is_valid,
    validate,
)

__all__ = [
    "ConformanceChecker",
    "ValidationFailure",
    "ValidationReport",
    "is_valid",
    "validate",
]
