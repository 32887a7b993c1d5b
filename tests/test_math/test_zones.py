"""Tests for the intensity → zone lookup."""

from __future__ import annotations

import pytest

from progression_engine.math.zones import TRAINING_ZONES, zone_for_intensity
from progression_engine.models.enums import ZoneType


class TestZoneLookup:
    @pytest.mark.parametrize(
        ("intensity", "zone"),
        [
            (50, ZoneType.RECOVERY),
            (59.9, ZoneType.RECOVERY),
            (60, ZoneType.EASY),
            (75, ZoneType.STEADY),
            (85, ZoneType.TEMPO),
            (92, ZoneType.THRESHOLD),
            (95, ZoneType.VO2_MAX),
            (98, ZoneType.NEUROMUSCULAR),
            (100, ZoneType.NEUROMUSCULAR),
        ],
    )
    def test_boundaries(self, intensity: float, zone: ZoneType) -> None:
        assert zone_for_intensity(intensity) == zone

    def test_monotonic(self) -> None:
        zones = [zone_for_intensity(i) for i in range(40, 101)]
        assert zones == sorted(zones)


class TestZoneMetadata:
    def test_every_zone_described(self) -> None:
        assert set(TRAINING_ZONES) == set(ZoneType)

    def test_rpe_matches_zone_number(self) -> None:
        for zone, meta in TRAINING_ZONES.items():
            assert meta.rpe == int(zone)
