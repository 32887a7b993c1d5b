"""Workout and segment models — the values every engine call transforms."""

from __future__ import annotations

from dataclasses import dataclass, field

from progression_engine.models.enums import WorkoutType, ZoneType


@dataclass(frozen=True)
class WorkoutSegment:
    """A single block of a workout (warm-up, work interval, cool-down...).

    Durations are in minutes; intensity is a 0-100 effort percentage.
    """

    duration_min: float
    intensity: float
    zone: ZoneType
    description: str = ""


@dataclass(frozen=True)
class Workout:
    """A structured workout.

    Segment order is meaningful (warm-up → work → cool-down) and every
    transformation preserves it. ``estimated_tss`` and
    ``recovery_time_hours`` are derived from the segments.
    """

    workout_type: WorkoutType
    primary_zone: ZoneType
    segments: tuple[WorkoutSegment, ...] = field(default_factory=tuple)
    adaptation_target: str = ""
    estimated_tss: float = 0.0
    recovery_time_hours: float = 0.0

    @property
    def total_duration_min(self) -> float:
        return sum(seg.duration_min for seg in self.segments)

    @property
    def average_intensity(self) -> float:
        """Duration-weighted mean intensity (0.0 for an empty workout)."""
        total = self.total_duration_min
        if total <= 0:
            return 0.0
        return sum(seg.intensity * seg.duration_min for seg in self.segments) / total

    @property
    def max_intensity(self) -> float:
        return max((seg.intensity for seg in self.segments), default=0.0)
