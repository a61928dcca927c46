"""Tests for the capability registry."""

from __future__ import annotations

import logging

import pytest

from metaprompt.tools import DEFAULT_CAPABILITIES, CapabilityRegistry


def test_default_registry_lists_seed_capabilities_in_order() -> None:
    registry = CapabilityRegistry()

    assert registry.available() == list(DEFAULT_CAPABILITIES)
    assert len(registry) == 5
    assert "sequentialthinking" in registry


def test_available_returns_a_fresh_list() -> None:
    registry = CapabilityRegistry(["logo_search"])

    first = registry.available()
    first.append("injected")

    assert registry.available() == ["logo_search"]


def test_lookup_reports_availability_and_hint() -> None:
    registry = CapabilityRegistry(["firecrawl_search"])

    known = registry.lookup("firecrawl_search")
    absent = registry.lookup("brave_web_search")
    unknown = registry.lookup("telepathy")

    assert known.available is True
    assert known.hint
    assert absent.available is False
    assert absent.hint
    assert unknown.available is False
    assert unknown.hint is None


def test_empty_registry() -> None:
    registry = CapabilityRegistry([])

    assert registry.available() == []
    assert len(registry) == 0
    assert list(registry) == []


def test_invoke_simulates_registered_capability(caplog: pytest.LogCaptureFixture) -> None:
    registry = CapabilityRegistry()

    with caplog.at_level(logging.INFO, logger="metaprompt.tools"):
        result = registry.invoke("brave_web_search", {"query": "python packaging"})

    assert result == {
        "status": "simulated",
        "tool": "brave_web_search",
        "params": {"query": "python packaging"},
    }
    assert "Would invoke brave_web_search" in caplog.text


def test_invoke_rejects_unregistered_capability() -> None:
    registry = CapabilityRegistry(["logo_search"])

    with pytest.raises(KeyError):
        registry.invoke("firecrawl_search")
