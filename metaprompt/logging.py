"""Console logging for the metaprompt CLI."""

from __future__ import annotations

import logging

ROOT_LOGGER = "metaprompt"

_PLAIN_FORMAT = "[metaprompt] %(levelname)s %(message)s"
# Verbose runs name the pipeline stage (orchestrator, refiner, validators.schema, ...).
_STAGE_FORMAT = "[metaprompt] %(levelname)s %(stage)s: %(message)s"


class _StageFilter(logging.Filter):
    """Exposes the logger name relative to the metaprompt root as ``stage``."""

    def filter(self, record: logging.LogRecord) -> bool:
        prefix = f"{ROOT_LOGGER}."
        record.stage = record.name[len(prefix):] if record.name.startswith(prefix) else record.name
        return True


def get_logger(stage: str | None = None) -> logging.Logger:
    """Return the logger for one pipeline stage, or the package root logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{stage}" if stage else ROOT_LOGGER)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Send metaprompt records to stderr; verbose adds debug output and stage names."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    # The CLI may run several times in one process (tests); keep a single handler.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.addFilter(_StageFilter())
    handler.setFormatter(logging.Formatter(_STAGE_FORMAT if verbose else _PLAIN_FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
