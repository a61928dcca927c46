from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import pytest

from metaprompt.config import MetaPromptConfig
from metaprompt.orchestrator import Orchestrator


@pytest.fixture(autouse=True)
def _reset_metaprompt_logger() -> Iterator[None]:
    """Undo configure_logging so caplog keeps seeing metaprompt records."""
    yield
    logger = logging.getLogger("metaprompt")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def config(tmp_path: Path) -> MetaPromptConfig:
    """Config rooted at tmp_path with fixed model/runtime identifiers."""
    return MetaPromptConfig(root=tmp_path, model="test-model", runtime="Python 3.12.0")


@pytest.fixture
def orchestrator(config: MetaPromptConfig) -> Orchestrator:
    return Orchestrator(config)


@pytest.fixture
def basic_request() -> Dict[str, Any]:
    return {
        "domain": "software_development",
        "objective": "ship a CLI",
        "user_profile": {"expertise": "expert"},
    }
