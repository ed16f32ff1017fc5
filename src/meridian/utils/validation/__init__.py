"""
Validation package for Meridian.

This package provides validation utilities for ensuring data integrity and
type safety of payloads and configuration throughout the system.
"""

from .base import (
    DataclassRule,
    RangeRule,
    ValidationResult,
    ValidationRule,
    validate_dataclass,
)
from .schema import PayloadSchemaValidator

__all__ = [
    "DataclassRule",
    "PayloadSchemaValidator",
    "RangeRule",
    "ValidationResult",
    "ValidationRule",
    "validate_dataclass",
]
