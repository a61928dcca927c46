"""Pure builders for each section of a prompt document."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..models import Environment, Preferences, UserProfile
from ..tools.registry import CapabilityRegistry
from .constants import (
    BASE_INSTRUCTIONS,
    CONTEXT_TEMPLATES,
    DEFAULT_FORMAT,
    DEFAULT_PROFILE_CONTEXT,
    DEFAULT_VERBOSITY,
    DOMAIN_INSTRUCTIONS,
    EXAMPLES_TEMPLATE,
    FORMAT_DESCRIPTIONS,
    GENERIC_CONTEXT_TEMPLATE,
    OPTIONAL_SECTIONS,
    QUALITY_CRITERIA,
    REQUIRED_SECTIONS,
    SAFETY_CONSTRAINT_BASELINE,
    SAFETY_GUIDELINE_BASELINE,
    TONE_INSTRUCTION,
    USAGE_HINT_RULES,
    VERBOSITY_GUIDANCE,
    Domain,
)


def build_title(domain: str) -> str:
    return f"Generated Prompt for {domain.replace('_', ' ').upper()}"


def build_context(
    domain: str,
    profile: UserProfile,
    environment: Environment,
    *,
    default_runtime: str,
) -> str:
    """Describe the assistant's situation, falling back to a generic sentence."""
    resolved = Domain.resolve(domain)
    template = CONTEXT_TEMPLATES.get(resolved) if resolved is not None else None
    if template is None:
        return GENERIC_CONTEXT_TEMPLATE.format(domain=domain)
    return template.format(
        expertise=profile.expertise,
        profile_context=profile.context or DEFAULT_PROFILE_CONTEXT,
        tool_count=len(environment.tools),
        runtime=environment.runtime or default_runtime,
    )


def build_instructions(domain: str, preferences: Preferences) -> List[str]:
    """Return numbered directives: base first, domain next, tone last."""
    resolved = Domain.resolve(domain)
    directives: List[str] = list(BASE_INSTRUCTIONS)
    if resolved is not None:
        directives.extend(DOMAIN_INSTRUCTIONS.get(resolved, ()))
    if preferences.tone:
        directives.append(TONE_INSTRUCTION.format(tone=preferences.tone))
    return [f"{index}. {directive}" for index, directive in enumerate(directives, start=1)]


def build_constraints(
    constraints: Mapping[str, Any],
    domain_specific: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    result: Dict[str, Any] = dict(constraints)
    if domain_specific is not None:
        result["domain_specific"] = dict(domain_specific)
    # Baseline always leads; caller entries are appended as given, duplicates included.
    result["safety"] = [*SAFETY_CONSTRAINT_BASELINE, *_as_list(constraints.get("safety"))]
    return result


def build_output_format(verbosity: Optional[str], fmt: Optional[str]) -> Dict[str, Any]:
    """Describe the expected response shape.

    Unknown formats and verbosity levels quietly fall back to the defaults.
    """
    format_text = FORMAT_DESCRIPTIONS.get(fmt or DEFAULT_FORMAT, FORMAT_DESCRIPTIONS[DEFAULT_FORMAT])
    verbosity_text = VERBOSITY_GUIDANCE.get(
        verbosity or DEFAULT_VERBOSITY, VERBOSITY_GUIDANCE[DEFAULT_VERBOSITY]
    )
    return {
        "format": format_text,
        "verbosity": verbosity_text,
        "structure": {
            "required_sections": list(REQUIRED_SECTIONS),
            "optional_sections": list(OPTIONAL_SECTIONS),
        },
    }


def build_examples(domain: str) -> str:
    return EXAMPLES_TEMPLATE.format(domain=domain)


def build_quality_criteria() -> Dict[str, str]:
    return dict(QUALITY_CRITERIA)


def build_tools_integration(domain: str, registry: CapabilityRegistry) -> Optional[Dict[str, Any]]:
    """Advertise registered capabilities, or None when nothing is registered."""
    available = registry.available()
    if not available:
        return None
    resolved = Domain.resolve(domain)
    rules = USAGE_HINT_RULES.get(resolved, ()) if resolved is not None else ()
    hints = [hint for capability, hint in rules if capability in available]
    return {"available_mcp_tools": available, "usage_hints": hints}


def build_safety_guidelines(additions: Sequence[str] | None = None) -> List[str]:
    return [*SAFETY_GUIDELINE_BASELINE, *_as_list(additions)]


def build_metadata(
    domain: str,
    profile: UserProfile,
    *,
    model: str,
    runtime: str,
    now: datetime | None = None,
) -> Dict[str, Any]:
    timestamp = (now or datetime.now(UTC)).isoformat().replace("+00:00", "Z")
    return {
        "generated_at": timestamp,
        "model": model,
        "runtime": runtime,
        "domain": domain,
        "user_expertise": profile.expertise,
    }


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    # Scalars and strings count as a single entry.
    return [value]


__all__ = [
    "build_constraints",
    "build_context",
    "build_examples",
    "build_instructions",
    "build_metadata",
    "build_output_format",
    "build_quality_criteria",
    "build_safety_guidelines",
    "build_title",
    "build_tools_integration",
]
