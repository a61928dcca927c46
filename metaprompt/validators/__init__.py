"""Validation package for prompt requests and generated documents."""

from .base import OutputCheck, ValidationError
from .input import REQUIRED_FIELDS, InputValidator
from .output import (
    CONTEXT_TOO_SHORT,
    SAFETY_MISSING,
    TOO_FEW_INSTRUCTIONS,
    OutputValidator,
)
from .schema import load_schema

__all__ = [
    "CONTEXT_TOO_SHORT",
    "InputValidator",
    "OutputCheck",
    "OutputValidator",
    "REQUIRED_FIELDS",
    "SAFETY_MISSING",
    "TOO_FEW_INSTRUCTIONS",
    "ValidationError",
    "load_schema",
]
