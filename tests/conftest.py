"""Pytest configuration and shared fixtures for crate packing tests."""

from __future__ import annotations

from typing import Callable

import pytest

from crates.application import (
    ManifestLine,
    PackCratesCommand,
    PackingOutput,
    demo_manifest,
)
from crates.domain import CrateConfig, Item


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests across layers")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def default_config() -> CrateConfig:
    """Standard 250 x 84 pallet framed with 2x4 stock."""
    return CrateConfig()


@pytest.fixture
def make_item() -> Callable[..., Item]:
    """Factory for unit items with sensible defaults.

    Each call without an explicit uid gets a fresh one.
    """
    counter = {"n": 0}

    def _make(
        length: float = 120.0,
        width: float = 4.0,
        height: float = 4.0,
        weight: float = 50.0,
        item_number: str = "PART",
        uid: str | None = None,
    ) -> Item:
        if uid is None:
            uid = f"{item_number}-{counter['n']}"
            counter["n"] += 1
        return Item(
            item_number=item_number,
            height=height,
            width=width,
            length=length,
            weight=weight,
            uid=uid,
        )

    return _make


@pytest.fixture
def demo_output() -> PackingOutput:
    """Packing output for the built-in demo manifest."""
    return PackCratesCommand().execute(demo_manifest(), CrateConfig())


@pytest.fixture
def failed_output() -> PackingOutput:
    """Packing output where one oversized item cannot be placed."""
    lines = [
        ManifestLine("PIPE-120", height=4, width=4, length=120, weight=80, quantity=2),
        ManifestLine("TANK", height=90, width=90, length=120, weight=400),
    ]
    return PackCratesCommand().execute(lines, CrateConfig())
