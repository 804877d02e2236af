"""Pytest fixtures for Skycover tests."""

import pytest

from skycover.conditions.models import (
    Broken,
    CeilingType,
    Clear,
    Few,
    Indefinite,
    NoSignificantClouds,
    Overcast,
    Scattered,
    SkyClear,
)


@pytest.fixture
def all_variants() -> list:
    """One value of every condition variant."""
    return [
        Clear(),
        SkyClear(),
        NoSignificantClouds(),
        Few(height=500),
        Scattered(height=3500, type=CeilingType.TOWERING_CUMULUS),
        Broken(height=2500, type=CeilingType.CUMULONIMBUS),
        Overcast(height=800),
        Indefinite(ceiling=200),
    ]


@pytest.fixture
def layered_sky() -> list:
    """A typical multi-layer report: FEW015 BKN025CB OVC100."""
    return [
        Few(height=1500),
        Broken(height=2500, type=CeilingType.CUMULONIMBUS),
        Overcast(height=10000),
    ]
