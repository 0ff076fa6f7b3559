"""
Shared test fixtures.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from blockdraft.core.normalizer import normalize
from blockdraft.models.schemas import RawMeasurements, Unit


@pytest.fixture
def canonical_raw() -> RawMeasurements:
    """Reference body: 179 cm tall, 100/90/102 girths, 64 cm sleeve."""
    return RawMeasurements(
        body_height=179,
        chest_girth=100,
        waist_girth=90,
        hip_girth=102,
        sleeve_length=64,
        unit=Unit.centimeters,
    )


@pytest.fixture
def derived(canonical_raw):
    return normalize(canonical_raw)
