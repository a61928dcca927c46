"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from metaprompt.cli import _build_parser, main


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "tools"])
    assert args.verbose is True
    assert args.command == "tools"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["generate", "--verbose"])
    assert args.verbose is True
    assert args.command == "generate"


def test_cli_generate_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(
        ["generate", "--domain", "custom", "--examples", "--format", "json", "--output-format", "markdown"]
    )
    assert args.domain == "custom"
    assert args.examples is True
    assert args.response_format == "json"
    assert args.output_format == "markdown"


def test_generate_from_flags_writes_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(
        [
            "--config",
            str(tmp_path),
            "generate",
            "--domain",
            "technical_documentation",
            "--objective",
            "document the API",
            "--expertise",
            "beginner",
            "--tone",
            "friendly",
            "--output-dir",
            str(tmp_path / "out"),
        ]
    )

    written = list((tmp_path / "out").glob("generated-prompt-*.json"))
    assert len(written) == 1
    data = json.loads(written[0].read_text(encoding="utf-8"))
    assert data["title"] == "Generated Prompt for TECHNICAL DOCUMENTATION"
    assert data["instructions"][-1] == "7. Maintain friendly tone throughout"
    assert "Prompt saved to" in capsys.readouterr().out


def test_generate_from_yaml_request_prints(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    request_file = tmp_path / "request.yml"
    request_file.write_text(
        """
domain: customer_service
objective: handle refund requests
user_profile:
  expertise: intermediate
  context: retail chain
constraints:
  safety:
    - no legal advice
""",
        encoding="utf-8",
    )

    main(["--config", str(tmp_path), "generate", "--request", str(request_file), "--examples", "--print"])

    data = json.loads(capsys.readouterr().out)
    assert data["context"].endswith("User context: retail chain.")
    assert data["constraints"]["safety"][-1] == "no legal advice"
    assert data["examples"] == "Include 1-2 relevant examples for customer_service context"
    assert list(tmp_path.glob("generated-prompt-*")) == []


def test_generate_reports_missing_fields(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "generate", "--domain", "custom"])

    assert excinfo.value.code == 1
    assert "Missing required fields: objective, user_profile" in capsys.readouterr().err


def test_generate_reports_unreadable_request(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "generate", "--request", str(tmp_path / "nope.json")])

    assert excinfo.value.code == 1
    assert "Could not read request" in capsys.readouterr().err


def test_interactive_flow_writes_document(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    answers = iter(["5", "build a CLI", "", "", "concise"])

    main(["--config", str(tmp_path), "interactive"], ask=lambda _prompt: next(answers))

    written = list(tmp_path.glob("generated-prompt-*.json"))
    assert len(written) == 1
    data = json.loads(written[0].read_text(encoding="utf-8"))
    assert data["metadata"]["domain"] == "software_development"
    assert data["metadata"]["user_expertise"] == "intermediate"
    assert data["instructions"][-1] == "7. Maintain professional tone throughout"
    assert data["output_format"]["verbosity"] == "Be brief and direct, include only essential information"
    output = capsys.readouterr().out
    assert "Title: Generated Prompt for SOFTWARE DEVELOPMENT" in output
    assert "Instructions: 7 steps" in output
    assert "Tools: 5 MCP servers available" in output


def test_interactive_rejects_bad_domain(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "interactive"], ask=lambda _prompt: "9")

    assert excinfo.value.code == 1
    assert "Invalid domain selection" in capsys.readouterr().err


def test_tools_command_lists_registry(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / ".metaprompt.yml").write_text("tools:\n  available: [logo_search]\n", encoding="utf-8")

    main(["--config", str(tmp_path), "tools"])

    assert capsys.readouterr().out.startswith("logo_search: ")


def test_bad_config_exits(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / ".metaprompt.yml").write_text("- nope\n", encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["--config", str(tmp_path), "tools"])

    assert "must contain a mapping" in capsys.readouterr().err


def test_interactive_reports_closed_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    def closed_stdin(_prompt: str) -> str:
        raise EOFError

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "interactive"], ask=closed_stdin)

    assert excinfo.value.code == 1
    assert "Error: input closed" in capsys.readouterr().err
    assert list(tmp_path.glob("generated-prompt-*")) == []
