"""CLI entrypoints for metaprompt commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import yaml

from .config import ConfigError, MetaPromptConfig, load_config
from .logging import configure_logging
from .models import PromptDocument
from .orchestrator import Orchestrator
from .prompting.constants import DOMAIN_MENU, FORMAT_DESCRIPTIONS, VERBOSITY_GUIDANCE
from .prompting.render import render_markdown
from .writer import OUTPUT_FORMATS, write_document


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for generated prompt files (defaults to the config directory).",
    )
    parser.add_argument(
        "--output-format",
        choices=OUTPUT_FORMATS,
        default="json",
        help="File format for the generated prompt.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metaprompt",
        description="Generate domain-specific prompt documents for language models.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("."),
        help="Path to .metaprompt.yml or the directory containing it.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a prompt from a request file and/or command-line fields.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_output_options(generate_parser)
    generate_parser.add_argument(
        "--request",
        type=Path,
        help="JSON or YAML file holding the request record.",
    )
    generate_parser.add_argument("--domain", help="Target domain, e.g. software_development.")
    generate_parser.add_argument("--objective", help="Primary objective of the prompt.")
    generate_parser.add_argument("--expertise", help="User expertise level.")
    generate_parser.add_argument("--tone", help="Preferred tone.")
    generate_parser.add_argument(
        "--verbosity",
        choices=sorted(VERBOSITY_GUIDANCE),
        help="Detail level of the expected response.",
    )
    generate_parser.add_argument(
        "--format",
        dest="response_format",
        choices=sorted(FORMAT_DESCRIPTIONS),
        help="Format the downstream model should answer in.",
    )
    generate_parser.add_argument(
        "--examples",
        action="store_true",
        default=None,
        help="Ask for illustrative examples in the prompt.",
    )
    generate_parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the document to stdout instead of writing a file.",
    )

    interactive_parser = subparsers.add_parser(
        "interactive",
        help="Answer a few questions and generate a prompt.",
    )
    _add_verbose_option(interactive_parser, suppress_default=True)
    _add_output_options(interactive_parser)

    tools_parser = subparsers.add_parser(
        "tools",
        help="List capabilities advertised to generated prompts.",
    )
    _add_verbose_option(tools_parser, suppress_default=True)

    return parser


def main(argv: list[str] | None = None, *, ask: Callable[[str], str] = input) -> None:
    """CLI entrypoint for metaprompt commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    orchestrator = Orchestrator(config)

    if args.command == "tools":
        for name in orchestrator.registry:
            info = orchestrator.registry.lookup(name)
            print(f"{name}: {info.hint}" if info.hint else name)
        return

    orchestrator.load_schema()
    output_dir = args.output_dir or config.output_dir

    if args.command == "generate":
        try:
            raw = _request_from_args(args)
            document = orchestrator.generate(raw)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            parser.exit(1, f"Could not read request: {exc}\n")
        except RuntimeError as exc:
            parser.exit(1, f"metaprompt generate failed: {exc}\n")
        if args.print_only:
            if args.output_format == "markdown":
                print(render_markdown(document), end="")
            else:
                print(json.dumps(document.to_dict(), indent=2))
            return
        path = write_document(document, output_dir, fmt=args.output_format)
        print(f"Prompt saved to {_relativize(path)}")
    elif args.command == "interactive":
        try:
            raw = _ask_request(ask, config, orchestrator.registry.available())
            document = orchestrator.generate(raw)
        except EOFError:
            parser.exit(1, "Error: input closed before all questions were answered\n")
        except (RuntimeError, ValueError) as exc:
            parser.exit(1, f"Error: {exc}\n")
        path = write_document(document, output_dir, fmt=args.output_format)
        print("Prompt generated successfully!")
        print(f"Saved to: {_relativize(path)}")
        _print_preview(document)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _request_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    raw: Dict[str, Any] = {}
    if args.request is not None:
        raw = _load_request_file(args.request)
    if args.domain:
        raw["domain"] = args.domain
    if args.objective:
        raw["objective"] = args.objective
    if args.expertise:
        raw.setdefault("user_profile", {})["expertise"] = args.expertise
    preferences = {
        key: value
        for key, value in (
            ("tone", args.tone),
            ("verbosity", args.verbosity),
            ("examples", args.examples),
        )
        if value is not None
    }
    if preferences:
        raw.setdefault("preferences", {}).update(preferences)
    if args.response_format:
        raw.setdefault("constraints", {})["format"] = args.response_format
    return raw


def _load_request_file(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a mapping at the root")
    return data


def _ask_request(
    ask: Callable[[str], str],
    config: MetaPromptConfig,
    tools: list[str],
) -> Dict[str, Any]:
    print("Available domains:")
    for number, domain in enumerate(DOMAIN_MENU, start=1):
        print(f"   {number}. {domain.value}")

    choice = ask(f"Select domain (1-{len(DOMAIN_MENU)}): ").strip()
    if not choice.isdigit() or not 1 <= int(choice) <= len(DOMAIN_MENU):
        raise ValueError("Invalid domain selection")
    domain = DOMAIN_MENU[int(choice) - 1].value

    objective = ask("What is your primary objective? ").strip()
    expertise = ask("Your expertise level (beginner/intermediate/expert): ").strip()
    tone = ask("Preferred tone (professional/friendly/empathetic) [professional]: ").strip()
    verbosity = ask("Detail level (concise/detailed/comprehensive) [detailed]: ").strip()

    return {
        "domain": domain,
        "objective": objective,
        "user_profile": {"expertise": expertise or "intermediate"},
        "preferences": {
            "tone": tone or "professional",
            "verbosity": verbosity or "detailed",
            "examples": True,
        },
        "environment": {
            "runtime": config.runtime,
            "model": config.model,
            "tools": tools,
        },
    }


def _print_preview(document: PromptDocument) -> None:
    tools = document.tools_integration or {}
    print("Preview:")
    print("=" * 50)
    print(f"Title: {document.title}")
    print(f"Context: {document.context[:100]}...")
    print(f"Instructions: {len(document.instructions)} steps")
    print(f"Tools: {len(tools.get('available_mcp_tools', []))} MCP servers available")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
