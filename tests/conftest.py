"""Shared fixtures for the property store test suite."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

TESTS_DIR = Path(__file__).resolve().parent
SRC_DIR = TESTS_DIR.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from rich.console import Console  # noqa: E402

from property_store import PropertyKind, PropertyRegistry  # noqa: E402


@pytest.fixture
def registry() -> PropertyRegistry:
    return PropertyRegistry("alfa")


@pytest.fixture
def seeded_registry() -> PropertyRegistry:
    """Registry pre-registered the way the console bootstrap does it."""
    return PropertyRegistry(
        "alfa",
        seed={
            "str": PropertyKind.TEXT,
            "number": PropertyKind.INT32,
            "very_long": PropertyKind.INT64,
            "dbl": PropertyKind.FLOAT64,
        },
    )


@pytest.fixture
def transcript() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def rich_console(transcript: io.StringIO) -> Console:
    return Console(file=transcript, width=200, color_system=None, force_terminal=False)
