"""Request validation performed before any assembly work."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from jsonschema import Draft202012Validator

from ..logging import get_logger
from .base import ValidationError

REQUIRED_FIELDS: tuple[str, ...] = ("domain", "objective", "user_profile")


class InputValidator:
    """Checks raw requests against required-field rules and an optional JSON schema."""

    def __init__(self, schema: Optional[Dict[str, Any]] = None) -> None:
        self.logger = get_logger("validators.input")
        self._schema_validator: Optional[Draft202012Validator] = None
        self.use_schema(schema)

    def use_schema(self, schema: Optional[Dict[str, Any]]) -> None:
        self._schema_validator = Draft202012Validator(schema) if schema else None

    @property
    def has_schema(self) -> bool:
        return self._schema_validator is not None

    def validate(self, raw: Mapping[str, Any]) -> None:
        if not isinstance(raw, Mapping):
            raise ValidationError("Request must be a mapping", REQUIRED_FIELDS)

        missing = [name for name in REQUIRED_FIELDS if _is_missing(name, raw.get(name))]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}", missing)

        profile = raw["user_profile"]
        if not isinstance(profile, Mapping) or not profile.get("expertise"):
            raise ValidationError("user_profile.expertise is required", ["user_profile.expertise"])

        if self._schema_validator is not None:
            self._check_schema(raw)

    def _check_schema(self, raw: Mapping[str, Any]) -> None:
        errors = sorted(self._schema_validator.iter_errors(raw), key=lambda err: [str(part) for part in err.path])
        if not errors:
            return
        fields: List[str] = []
        details: List[str] = []
        for error in errors:
            location = ".".join(str(part) for part in error.path) or "<request>"
            fields.append(location)
            details.append(f"{location}: {error.message}")
        self.logger.debug("Schema rejected request with %d errors", len(errors))
        raise ValidationError("Request does not match schema: " + "; ".join(details), fields)


def _is_missing(name: str, value: Any) -> bool:
    # An empty profile is present; its expertise check reports it instead.
    if name == "user_profile":
        return value is None
    return not value
