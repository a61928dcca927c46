"""Tests for Markdown rendering of prompt documents."""

from __future__ import annotations

from pathlib import Path

from metaprompt.models import PromptRequest
from metaprompt.prompting import DocumentAssembler, render_markdown
from metaprompt.tools import CapabilityRegistry


def _document(registry: CapabilityRegistry, **preferences):
    request = PromptRequest.from_mapping(
        {
            "domain": "software_development",
            "objective": "ship a CLI",
            "user_profile": {"expertise": "expert"},
            "constraints": {"max_words": 300},
            "preferences": preferences,
            "domain_specific": {"language": "python"},
        }
    )
    assembler = DocumentAssembler(registry, model="test-model", runtime="Python 3.12.0")
    return assembler.assemble(request)


def test_render_markdown_includes_sections() -> None:
    markdown = render_markdown(_document(CapabilityRegistry(), examples=True))

    assert markdown.startswith("# Generated Prompt for SOFTWARE DEVELOPMENT\n")
    assert "## Objective\n\nship a CLI" in markdown
    assert "1. Analyze the provided context and requirements carefully" in markdown
    assert "- **max_words**: 300" in markdown
    assert "- **language** (domain specific): python" in markdown
    assert "- Respect privacy and PII handling requirements" in markdown
    assert "## Examples" in markdown
    assert "## Tools Integration" in markdown
    assert "- Store implementation patterns with byterover-store-knowledge" in markdown
    assert "- **Domain Appropriateness**:" in markdown
    assert markdown.endswith("on Python 3.12.0.\n")


def test_render_markdown_skips_absent_sections() -> None:
    markdown = render_markdown(_document(CapabilityRegistry([])))

    assert "## Examples" not in markdown
    assert "## Tools Integration" not in markdown


def test_render_markdown_prefers_custom_template(tmp_path: Path) -> None:
    (tmp_path / "document.md.j2").write_text("{{ document.title }} only", encoding="utf-8")

    markdown = render_markdown(_document(CapabilityRegistry()), templates_dir=tmp_path)

    assert markdown == "Generated Prompt for SOFTWARE DEVELOPMENT only\n"
