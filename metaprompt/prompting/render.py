"""Markdown rendering of prompt documents via Jinja templates."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ..models import PromptDocument

_TEMPLATES_DIR = Path(__file__).with_name("templates")


def _create_env(templates_dir: Path | None = None) -> Environment:
    directories = []
    if templates_dir:
        directories.append(str(templates_dir))
    directories.append(str(_TEMPLATES_DIR))
    loader = FileSystemLoader(directories)
    return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


def render_markdown(document: PromptDocument, *, templates_dir: Path | None = None) -> str:
    """Render a document as Markdown; ``templates_dir`` may shadow document.md.j2."""
    template = _create_env(templates_dir).get_template("document.md.j2")
    return template.render(document=document.to_dict()).strip() + "\n"


__all__ = ["render_markdown"]
