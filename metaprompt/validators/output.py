"""Minimum-content checks for assembled documents."""

from __future__ import annotations

from ..models import PromptDocument
from .base import OutputCheck

CONTEXT_TOO_SHORT = "Context section needs more detail"
TOO_FEW_INSTRUCTIONS = "Instructions section needs at least 3 items"
SAFETY_MISSING = "Safety constraints must be included"

MIN_CONTEXT_LENGTH = 10
MIN_INSTRUCTIONS = 3


class OutputValidator:
    """Evaluates every rule independently and reports one issue per failed rule."""

    def check(self, document: PromptDocument) -> OutputCheck:
        issues = []
        if not document.context or len(document.context) < MIN_CONTEXT_LENGTH:
            issues.append(CONTEXT_TOO_SHORT)
        if not document.instructions or len(document.instructions) < MIN_INSTRUCTIONS:
            issues.append(TOO_FEW_INSTRUCTIONS)
        # Presence of the key is enough; an empty list still passes.
        if not document.constraints or "safety" not in document.constraints:
            issues.append(SAFETY_MISSING)
        return OutputCheck(issues=issues)
