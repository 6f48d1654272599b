# -*- coding: utf-8 -*-
"""
Blueprint Validation - Grading of wired chains.
"""

from .path_validator import (
    PathValidator,
    ValidationResult,
    DiagnosticCode,
    payload_denotes_pointer,
)

__all__ = [
    "PathValidator",
    "ValidationResult",
    "DiagnosticCode",
    "payload_denotes_pointer",
]
