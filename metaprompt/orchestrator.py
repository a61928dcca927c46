"""Pipeline orchestration: validate, assemble, check, refine."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .config import MetaPromptConfig, load_config
from .logging import get_logger
from .models import PromptDocument, PromptRequest
from .prompting.assembler import DocumentAssembler
from .refiner import Refiner
from .tools.registry import CapabilityRegistry
from .validators import InputValidator, OutputValidator, load_schema


class Orchestrator:
    """Single entry point for prompt generation.

    Every collaborator can be injected; defaults are derived from ``config``.
    ``generate`` keeps no state between calls, so one instance may serve
    concurrent requests once ``load_schema`` (if used) has run.
    """

    def __init__(
        self,
        config: MetaPromptConfig | None = None,
        *,
        registry: CapabilityRegistry | None = None,
        assembler: DocumentAssembler | None = None,
        input_validator: InputValidator | None = None,
        output_validator: OutputValidator | None = None,
        refiner: Refiner | None = None,
    ) -> None:
        self.config = config or load_config(Path.cwd())
        self.registry = registry if registry is not None else CapabilityRegistry(self.config.tools.available)
        self.assembler = assembler or DocumentAssembler(
            self.registry,
            model=self.config.model,
            runtime=self.config.runtime,
        )
        self.input_validator = input_validator or InputValidator()
        self.output_validator = output_validator or OutputValidator()
        self.refiner = refiner or Refiner()
        self.logger = get_logger("orchestrator")

    def load_schema(self) -> Optional[Dict[str, Any]]:
        """Load the optional request schema; failures leave built-in rules in place."""
        schema = load_schema(self.config.schema_path)
        self.input_validator.use_schema(schema)
        return schema

    def generate(self, raw: Mapping[str, Any]) -> PromptDocument:
        self.input_validator.validate(raw)
        request = PromptRequest.from_mapping(raw)
        self.logger.info("Generating prompt for domain %s", request.domain)

        document = self.assembler.assemble(request)
        check = self.output_validator.check(document)
        if check.is_valid:
            self.logger.debug("Document passed output checks")
            return document

        self.logger.info("Refining prompt based on validation")
        # One repair pass only; the refined document is not checked again.
        return self.refiner.refine(document, check.issues)
