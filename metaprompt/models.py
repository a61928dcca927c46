"""Core data models shared across metaprompt components."""

from __future__ import annotations

import copy
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class UserProfile:
    """Who the generated prompt is written for."""

    expertise: str
    context: Optional[str] = None


@dataclass(frozen=True)
class Preferences:
    """Stylistic choices supplied by the caller."""

    tone: Optional[str] = None
    verbosity: Optional[str] = None
    examples: bool = False


@dataclass(frozen=True)
class Environment:
    """Caller runtime details."""

    runtime: Optional[str] = None
    model: Optional[str] = None
    tools: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PromptRequest:
    """Validated request accepted by the document assembler."""

    domain: str
    objective: str
    user_profile: UserProfile
    constraints: Dict[str, Any] = field(default_factory=dict)
    preferences: Preferences = field(default_factory=Preferences)
    environment: Environment = field(default_factory=Environment)
    domain_specific: Optional[Dict[str, Any]] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "PromptRequest":
        """Build a request from a raw mapping that already passed input validation.

        Nested caller data is deep-copied so documents never alias the raw request.
        """
        raw = copy.deepcopy(dict(raw))
        profile = _as_mapping(raw.get("user_profile"))
        preferences = _as_mapping(raw.get("preferences"))
        environment = _as_mapping(raw.get("environment"))
        domain_specific = raw.get("domain_specific")
        return cls(
            domain=str(raw["domain"]),
            objective=str(raw["objective"]),
            user_profile=UserProfile(
                expertise=str(profile["expertise"]),
                context=profile.get("context") or None,
            ),
            constraints=dict(_as_mapping(raw.get("constraints"))),
            preferences=Preferences(
                tone=preferences.get("tone") or None,
                verbosity=preferences.get("verbosity") or None,
                examples=bool(preferences.get("examples")),
            ),
            environment=Environment(
                runtime=environment.get("runtime") or None,
                model=environment.get("model") or None,
                tools=_as_tools(environment.get("tools")),
            ),
            domain_specific=dict(domain_specific) if isinstance(domain_specific, Mapping) else None,
        )


@dataclass
class PromptDocument:
    """Multi-section prompt produced for a single request."""

    title: str
    context: str
    objective: str
    instructions: List[str]
    constraints: Dict[str, Any]
    output_format: Dict[str, Any]
    examples: Optional[str]
    quality_criteria: Dict[str, str]
    tools_integration: Optional[Dict[str, Any]]
    safety_guidelines: List[str]
    metadata: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the document, leaving out sections that were not produced."""
        payload = asdict(self)
        for optional in ("examples", "tools_integration"):
            if payload[optional] is None:
                del payload[optional]
        return payload


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_tools(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [str(value)]
