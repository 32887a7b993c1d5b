"""Training zone metadata and intensity → zone lookup.

Seven-zone effort model (recovery to neuromuscular) keyed on % effort.
Personalised HR/pace boundaries are the physiological calculators' job;
this module only labels intensities.
"""

from __future__ import annotations

from dataclasses import dataclass

from progression_engine.models.enums import ZoneType


@dataclass(frozen=True)
class TrainingZone:
    """Descriptive metadata for a zone."""

    zone: ZoneType
    name: str
    rpe: int  # 1-7 relative perceived exertion
    description: str


TRAINING_ZONES: dict[ZoneType, TrainingZone] = {
    ZoneType.RECOVERY: TrainingZone(
        ZoneType.RECOVERY, "Recovery", 1, "Very easy effort, conversational",
    ),
    ZoneType.EASY: TrainingZone(
        ZoneType.EASY, "Easy", 2, "Comfortable, conversational pace",
    ),
    ZoneType.STEADY: TrainingZone(
        ZoneType.STEADY, "Steady", 3, "Moderate effort, slightly harder breathing",
    ),
    ZoneType.TEMPO: TrainingZone(
        ZoneType.TEMPO, "Tempo", 4, "Comfortably hard, controlled discomfort",
    ),
    ZoneType.THRESHOLD: TrainingZone(
        ZoneType.THRESHOLD, "Threshold", 5, "Hard effort, sustainable for ~1 hour",
    ),
    ZoneType.VO2_MAX: TrainingZone(
        ZoneType.VO2_MAX, "VO2 Max", 6, "Very hard, heavy breathing",
    ),
    ZoneType.NEUROMUSCULAR: TrainingZone(
        ZoneType.NEUROMUSCULAR, "Neuromuscular", 7, "Maximum effort, short duration",
    ),
}

# Upper (exclusive) intensity bound for each zone, checked in order
_ZONE_UPPER_BOUNDS: tuple[tuple[float, ZoneType], ...] = (
    (60.0, ZoneType.RECOVERY),
    (70.0, ZoneType.EASY),
    (80.0, ZoneType.STEADY),
    (90.0, ZoneType.TEMPO),
    (93.0, ZoneType.THRESHOLD),
    (97.0, ZoneType.VO2_MAX),
)


def zone_for_intensity(intensity: float) -> ZoneType:
    """Return the zone an effort percentage falls into."""
    for upper, zone in _ZONE_UPPER_BOUNDS:
        if intensity < upper:
            return zone
    return ZoneType.NEUROMUSCULAR
