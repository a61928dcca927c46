"""Configuration loading for metaprompt (.metaprompt.yml)."""

from __future__ import annotations

import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .tools.registry import DEFAULT_CAPABILITIES

CONFIG_FILENAME = ".metaprompt.yml"
DEFAULT_MODEL = "claude-sonnet-4"
DEFAULT_SCHEMA_FILENAME = "meta-prompt-schema.json"


def default_runtime() -> str:
    return f"Python {platform.python_version()}"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ToolsConfig:
    """Capabilities advertised to generated prompts."""

    available: List[str] = field(default_factory=lambda: list(DEFAULT_CAPABILITIES))


@dataclass
class MetaPromptConfig:
    """Represents the settings defined in .metaprompt.yml."""

    root: Path
    model: str = DEFAULT_MODEL
    runtime: str = field(default_factory=default_runtime)
    schema_path: Optional[Path] = None
    output_dir: Optional[Path] = None
    tools: ToolsConfig = field(default_factory=ToolsConfig)

    def __post_init__(self) -> None:
        if self.schema_path is None:
            self.schema_path = self.root / DEFAULT_SCHEMA_FILENAME
        if self.output_dir is None:
            self.output_dir = self.root


def load_config(config_path: Path) -> MetaPromptConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return MetaPromptConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    model = _as_str(data.get("model")) or DEFAULT_MODEL
    runtime = _as_str(data.get("runtime")) or default_runtime()

    schema_str = _as_str(data.get("schema"))
    schema_path = root / schema_str if schema_str else None
    output_str = _as_str(data.get("output_dir"))
    output_dir = root / output_str if output_str else None

    tools = ToolsConfig()
    tools_data = data.get("tools")
    if isinstance(tools_data, dict) and "available" in tools_data:
        # An explicit empty list disables the tools section entirely.
        tools.available = _as_str_list(tools_data.get("available"))

    return MetaPromptConfig(
        root=root,
        model=model,
        runtime=runtime,
        schema_path=schema_path,
        output_dir=output_dir,
        tools=tools,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
