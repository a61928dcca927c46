"""Tests for persisting generated documents."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from metaprompt.orchestrator import Orchestrator
from metaprompt.writer import write_document


def test_write_json_document(orchestrator: Orchestrator, basic_request, tmp_path: Path) -> None:
    document = orchestrator.generate(basic_request)

    path = write_document(document, tmp_path / "out", timestamp_ms=1700000000000)

    assert path == tmp_path / "out" / "generated-prompt-1700000000000.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["title"] == document.title
    assert "examples" not in data
    assert data["tools_integration"]["available_mcp_tools"]


def test_write_markdown_document(orchestrator: Orchestrator, basic_request, tmp_path: Path) -> None:
    document = orchestrator.generate(basic_request)

    path = write_document(document, tmp_path, fmt="markdown", timestamp_ms=42)

    assert path.name == "generated-prompt-42.md"
    assert path.read_text(encoding="utf-8").startswith("# Generated Prompt for SOFTWARE DEVELOPMENT")


def test_write_rejects_unknown_format(orchestrator: Orchestrator, basic_request, tmp_path: Path) -> None:
    document = orchestrator.generate(basic_request)

    with pytest.raises(ValueError):
        write_document(document, tmp_path, fmt="xml")
