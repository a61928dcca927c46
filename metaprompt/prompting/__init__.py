"""Prompt document construction."""

from .assembler import DEFAULT_BUILDERS, DocumentAssembler
from .constants import Domain
from .render import render_markdown

__all__ = ["DEFAULT_BUILDERS", "DocumentAssembler", "Domain", "render_markdown"]
