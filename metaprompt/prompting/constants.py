"""Lookup tables that drive domain-aware prompt sections."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class Domain(str, Enum):
    """Domains with dedicated composition rules."""

    CREATIVE_WRITING = "creative_writing"
    TECHNICAL_DOCUMENTATION = "technical_documentation"
    CUSTOMER_SERVICE = "customer_service"
    AI_AGENT_INSTRUCTIONS = "ai_agent_instructions"
    SOFTWARE_DEVELOPMENT = "software_development"
    CUSTOM = "custom"

    @classmethod
    def resolve(cls, value: str) -> Optional["Domain"]:
        """Return the matching member, or None for free-form domains."""
        try:
            return cls(value)
        except ValueError:
            return None


# Menu order used by the interactive CLI.
DOMAIN_MENU: tuple[Domain, ...] = (
    Domain.CREATIVE_WRITING,
    Domain.TECHNICAL_DOCUMENTATION,
    Domain.CUSTOMER_SERVICE,
    Domain.AI_AGENT_INSTRUCTIONS,
    Domain.SOFTWARE_DEVELOPMENT,
    Domain.CUSTOM,
)

# Placeholders: expertise, profile_context, tool_count, runtime.
CONTEXT_TEMPLATES: Dict[Domain, str] = {
    Domain.CREATIVE_WRITING: (
        "You are assisting with creative writing tasks. The user has {expertise} level expertise."
    ),
    Domain.TECHNICAL_DOCUMENTATION: (
        "You are helping create technical documentation. Target audience expertise: {expertise}."
    ),
    Domain.CUSTOMER_SERVICE: (
        "You are designing customer service interactions. User context: {profile_context}."
    ),
    Domain.AI_AGENT_INSTRUCTIONS: (
        "You are creating AI agent instructions. Available tools: {tool_count} MCP servers."
    ),
    Domain.SOFTWARE_DEVELOPMENT: "You are assisting with software development using {runtime}.",
}
GENERIC_CONTEXT_TEMPLATE = "You are assisting with {domain} tasks."
DEFAULT_PROFILE_CONTEXT = "individual"

BASE_INSTRUCTIONS: tuple[str, ...] = (
    "Analyze the provided context and requirements carefully",
    "Structure your response according to the specified format",
    "Include all required elements while respecting constraints",
)

DOMAIN_INSTRUCTIONS: Dict[Domain, tuple[str, ...]] = {
    Domain.CREATIVE_WRITING: (
        "Consider genre, voice, and pacing requirements",
        "Ensure character and plot development guidelines are clear",
        "Include content safety considerations for creative expression",
    ),
    Domain.TECHNICAL_DOCUMENTATION: (
        "Match technical depth to audience expertise level",
        "Include code examples and API references where appropriate",
        "Ensure accuracy and provide citation guidelines",
    ),
    Domain.CUSTOMER_SERVICE: (
        "Maintain brand voice and empathy balance",
        "Include escalation protocols and compliance requirements",
        "Address PII handling and privacy concerns",
    ),
    Domain.AI_AGENT_INSTRUCTIONS: (
        "Define clear tool schemas and function signatures",
        "Include comprehensive error handling and safety rails",
        "Specify MCP server integration patterns",
    ),
    Domain.SOFTWARE_DEVELOPMENT: (
        "Specify language, framework, and coding standards",
        "Include testing and security requirements",
        "Ensure reproducible and well-documented outputs",
    ),
}
TONE_INSTRUCTION = "Maintain {tone} tone throughout"

SAFETY_CONSTRAINT_BASELINE: tuple[str, ...] = (
    "Respect privacy and PII handling requirements",
    "Comply with platform and organizational policies",
)

DEFAULT_FORMAT = "markdown"
FORMAT_DESCRIPTIONS: Dict[str, str] = {
    "json": "Provide response as valid JSON with specified structure",
    "markdown": "Use clean Markdown formatting with headers and sections",
    "plain_text": "Provide plain text response with clear organization",
    "structured_template": "Follow the specified template structure exactly",
}

DEFAULT_VERBOSITY = "detailed"
VERBOSITY_GUIDANCE: Dict[str, str] = {
    "concise": "Be brief and direct, include only essential information",
    "detailed": "Provide comprehensive information with explanations",
    "comprehensive": "Include extensive detail, examples, and context",
}

REQUIRED_SECTIONS: tuple[str, ...] = ("context", "instructions", "constraints", "quality_criteria")
OPTIONAL_SECTIONS: tuple[str, ...] = ("examples", "tools_integration")

EXAMPLES_TEMPLATE = "Include 1-2 relevant examples for {domain} context"

QUALITY_CRITERIA: Dict[str, str] = {
    "clarity": "Instructions are unambiguous and easy to follow",
    "completeness": "All necessary elements are included",
    "actionability": "Response can be immediately implemented",
    "safety": "Complies with all safety and policy requirements",
    "domain_appropriateness": "Content is suitable for the specified domain",
}

# Each domain emits its hint only when the named capability is registered.
USAGE_HINT_RULES: Dict[Domain, tuple[tuple[str, str], ...]] = {
    Domain.CREATIVE_WRITING: (
        ("sequentialthinking", "Use sequentialthinking for complex plot development"),
    ),
    Domain.TECHNICAL_DOCUMENTATION: (
        ("firecrawl_search", "Use firecrawl_search to gather current documentation"),
    ),
    Domain.SOFTWARE_DEVELOPMENT: (
        ("byterover-store-knowledge", "Store implementation patterns with byterover-store-knowledge"),
    ),
}

SAFETY_GUIDELINE_BASELINE: tuple[str, ...] = (
    "Respect user privacy and data protection",
    "Ensure inclusive language",
)


__all__ = [
    "BASE_INSTRUCTIONS",
    "CONTEXT_TEMPLATES",
    "DEFAULT_FORMAT",
    "DEFAULT_PROFILE_CONTEXT",
    "DEFAULT_VERBOSITY",
    "DOMAIN_INSTRUCTIONS",
    "DOMAIN_MENU",
    "Domain",
    "EXAMPLES_TEMPLATE",
    "FORMAT_DESCRIPTIONS",
    "GENERIC_CONTEXT_TEMPLATE",
    "OPTIONAL_SECTIONS",
    "QUALITY_CRITERIA",
    "REQUIRED_SECTIONS",
    "SAFETY_CONSTRAINT_BASELINE",
    "SAFETY_GUIDELINE_BASELINE",
    "TONE_INSTRUCTION",
    "USAGE_HINT_RULES",
    "VERBOSITY_GUIDANCE",
]
