"""Validation code constants for visually.api.validate().

These constants prevent stringly-typed error codes and ensure
client code uses the correct validation codes.
"""

from enum import Enum


class ValidationCode(str, Enum):
    """Validation error and warning codes."""

    # Errors (blocking)
    MALFORMED_INPUT = "MALFORMED_INPUT"
    SCHEMA_VIOLATION = "SCHEMA_VIOLATION"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"

    # Warnings (non-blocking)
    DUPLICATE_ID = "DUPLICATE_ID"
