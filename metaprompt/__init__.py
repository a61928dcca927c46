"""Domain-aware prompt document generation."""

from .models import PromptDocument, PromptRequest
from .orchestrator import Orchestrator
from .tools.registry import CapabilityRegistry
from .validators import ValidationError

__all__ = [
    "CapabilityRegistry",
    "Orchestrator",
    "PromptDocument",
    "PromptRequest",
    "ValidationError",
]
