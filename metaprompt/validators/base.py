"""Core validation data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence


class ValidationError(RuntimeError):
    """Raised when a request is missing required input."""

    def __init__(self, message: str, fields: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.fields = list(fields)


@dataclass
class OutputCheck:
    """Outcome of checking an assembled document."""

    issues: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues
