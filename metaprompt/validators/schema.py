"""Optional JSON schema loading for request validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from ..logging import get_logger

logger = get_logger("validators.schema")


def load_schema(path: Path | None) -> Optional[Dict[str, Any]]:
    """Read a request schema, returning None (with a warning) when it is unusable."""
    if path is None:
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Schema file %s not found, using built-in validation", path)
        return None
    except OSError as exc:
        logger.warning("Schema file %s could not be read (%s), using built-in validation", path, exc)
        return None

    try:
        schema = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Schema file %s is not valid JSON (%s), using built-in validation", path, exc)
        return None

    if not isinstance(schema, dict):
        logger.warning("Schema file %s must contain a JSON object, using built-in validation", path)
        return None

    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as exc:
        logger.warning("Schema file %s is not a valid JSON schema (%s), using built-in validation", path, exc.message)
        return None

    logger.debug("Loaded request schema from %s", path)
    return schema
