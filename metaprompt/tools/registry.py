"""Read-only registry of capabilities a downstream model may call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from ..logging import get_logger

DEFAULT_CAPABILITIES: tuple[str, ...] = (
    "firecrawl_search",
    "brave_web_search",
    "logo_search",
    "byterover-store-knowledge",
    "sequentialthinking",
)

_CAPABILITY_HINTS: Dict[str, str] = {
    "firecrawl_search": "Crawl and search web pages for up-to-date reference material",
    "brave_web_search": "General web search for recent facts and sources",
    "logo_search": "Look up brand logos and visual identity assets",
    "byterover-store-knowledge": "Persist reusable implementation knowledge between sessions",
    "sequentialthinking": "Break complex problems into explicit reasoning steps",
}


@dataclass(frozen=True)
class CapabilityInfo:
    """Lookup result for a single capability name."""

    name: str
    available: bool
    hint: Optional[str]


class CapabilityRegistry:
    """Catalog of named capabilities fixed at construction time."""

    def __init__(self, names: Iterable[str] = DEFAULT_CAPABILITIES) -> None:
        self._names: tuple[str, ...] = tuple(names)
        self.logger = get_logger("tools")

    def available(self) -> List[str]:
        return list(self._names)

    def lookup(self, name: str) -> CapabilityInfo:
        return CapabilityInfo(
            name=name,
            available=name in self._names,
            hint=_CAPABILITY_HINTS.get(name),
        )

    def invoke(self, name: str, params: Mapping[str, Any] | None = None) -> Dict[str, Any]:
        """Simulate a capability call; no external service is contacted."""
        if name not in self._names:
            raise KeyError(f"Capability {name!r} is not registered")
        payload = dict(params or {})
        self.logger.info("Would invoke %s with %s", name, payload)
        return {"status": "simulated", "tool": name, "params": payload}

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)
