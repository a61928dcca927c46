"""External capability catalog referenced by generated prompts."""

from .registry import DEFAULT_CAPABILITIES, CapabilityInfo, CapabilityRegistry

__all__ = ["CapabilityInfo", "CapabilityRegistry", "DEFAULT_CAPABILITIES"]
