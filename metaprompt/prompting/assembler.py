"""Composes section builders into a complete prompt document."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from ..logging import get_logger
from ..models import PromptDocument, PromptRequest
from ..tools.registry import CapabilityRegistry
from . import sections

SectionBuilder = Callable[..., Any]

DEFAULT_BUILDERS: Mapping[str, SectionBuilder] = {
    "title": sections.build_title,
    "context": sections.build_context,
    "instructions": sections.build_instructions,
    "constraints": sections.build_constraints,
    "output_format": sections.build_output_format,
    "examples": sections.build_examples,
    "quality_criteria": sections.build_quality_criteria,
    "tools_integration": sections.build_tools_integration,
    "safety_guidelines": sections.build_safety_guidelines,
    "metadata": sections.build_metadata,
}


class DocumentAssembler:
    """Builds a PromptDocument from a validated request.

    ``overrides`` replaces individual builders by section name; a replacement
    must accept the same arguments as the builder it stands in for.
    """

    def __init__(
        self,
        registry: CapabilityRegistry,
        *,
        model: str,
        runtime: str,
        overrides: Mapping[str, SectionBuilder] | None = None,
    ) -> None:
        unknown = set(overrides or {}) - set(DEFAULT_BUILDERS)
        if unknown:
            raise ValueError(f"Unknown section builders: {', '.join(sorted(unknown))}")
        self.registry = registry
        self.model = model
        self.runtime = runtime
        self._builders: Dict[str, SectionBuilder] = {**DEFAULT_BUILDERS, **(overrides or {})}
        self.logger = get_logger("assembler")

    def assemble(self, request: PromptRequest) -> PromptDocument:
        build = self._builders
        domain = request.domain
        constraints = request.constraints
        preferences = request.preferences

        title = build["title"](domain)
        context = build["context"](
            domain,
            request.user_profile,
            request.environment,
            default_runtime=self.runtime,
        )
        instructions = build["instructions"](domain, preferences)
        merged_constraints = build["constraints"](constraints, request.domain_specific)
        output_format = build["output_format"](preferences.verbosity, constraints.get("format"))
        examples = build["examples"](domain) if preferences.examples else None
        quality_criteria = build["quality_criteria"]()
        tools_integration = build["tools_integration"](domain, self.registry)
        safety_guidelines = build["safety_guidelines"](constraints.get("safety"))
        metadata = build["metadata"](
            domain,
            request.user_profile,
            model=self.model,
            runtime=self.runtime,
        )

        self.logger.debug(
            "Assembled %s document with %d instructions", domain, len(instructions)
        )
        return PromptDocument(
            title=title,
            context=context,
            objective=request.objective,
            instructions=instructions,
            constraints=merged_constraints,
            output_format=output_format,
            examples=examples,
            quality_criteria=quality_criteria,
            tools_integration=tools_integration,
            safety_guidelines=safety_guidelines,
            metadata=metadata,
        )
