"""
Validation modules for CODE128 encoder.
"""

from .validators import (
    calculate_checksum,
    validate_symbols,
    split_modules,
    ValidationResult,
    START_SYMBOLS,
)

__all__ = [
    "calculate_checksum",
    "validate_symbols",
    "split_modules",
    "ValidationResult",
    "START_SYMBOLS",
]
