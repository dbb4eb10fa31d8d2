"""Shared pytest fixtures for timeslicr tests."""

from __future__ import annotations

from collections.abc import Callable
from itertools import count
from pathlib import Path

import pytest

from timeslicr.core.config.models import AppConfig, TimelineConfig
from timeslicr.core.timeline.models import Section, Segment
from timeslicr.core.timeline.store import TimelineStore

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Deterministic id generator: id-1, id-2, ..."""
    counter = count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def store(id_factory: Callable[[], str]) -> TimelineStore:
    """Empty store with a 60s timeline and overlap prevention on."""
    return TimelineStore(total_duration_s=60.0, id_factory=id_factory)


@pytest.fixture
def demo_store(id_factory: Callable[[], str]) -> TimelineStore:
    """Store seeded with the demo timeline (Intro + Main Content)."""
    store = TimelineStore(total_duration_s=60.0, id_factory=id_factory)
    store.seed_demo()
    return store


@pytest.fixture
def two_sections() -> list[Section]:
    """Sections [0, 0.25] and [0.25, 0.8] with no gaps."""
    return [
        Section(id="a", name="A", start=0.0, end=0.25),
        Section(id="b", name="B", start=0.25, end=0.8),
    ]


@pytest.fixture
def gapped_segments() -> list[Segment]:
    """Three segments with gaps 0.1, 0.05, 0.2 before each slot."""
    return [
        Segment(id="x", name="X", start=0.1, end=0.3),
        Segment(id="y", name="Y", start=0.35, end=0.45),
        Segment(id="z", name="Z", start=0.65, end=0.7),
    ]


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def app_config() -> AppConfig:
    """App config with default settings and the demo seed disabled."""
    return AppConfig(timeline=TimelineConfig(seed_demo=False))
