"""Persists generated prompt documents to disk."""

from __future__ import annotations

import json
import time
from pathlib import Path

from .models import PromptDocument
from .prompting.render import render_markdown

OUTPUT_FORMATS = ("json", "markdown")


def write_document(
    document: PromptDocument,
    output_dir: Path,
    *,
    fmt: str = "json",
    timestamp_ms: int | None = None,
) -> Path:
    """Write ``generated-prompt-<epoch ms>`` as JSON or Markdown and return its path."""
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {fmt}")
    stamp = timestamp_ms if timestamp_ms is not None else int(time.time() * 1000)
    output_dir.mkdir(parents=True, exist_ok=True)
    if fmt == "markdown":
        path = output_dir / f"generated-prompt-{stamp}.md"
        path.write_text(render_markdown(document), encoding="utf-8")
    else:
        path = output_dir / f"generated-prompt-{stamp}.json"
        path.write_text(json.dumps(document.to_dict(), indent=2) + "\n", encoding="utf-8")
    return path


__all__ = ["OUTPUT_FORMATS", "write_document"]
