"""Training stress formulas: TSS, recovery time, and rounding helpers.

TSS here uses quadratic intensity weighting normalised per minute:

    TSS = Σ duration_min × (intensity / 100)² × 100 / 60

so an hour at 100% effort scores 100 (Coggan's convention).
"""

from __future__ import annotations

import math
from typing import Iterable

from progression_engine.models.enums import (
    DEFAULT_RECOVERY_MULTIPLIER,
    RECOVERY_BASE_HOURS,
    RECOVERY_MULTIPLIERS,
    RECOVERY_REFERENCE_DURATION_MIN,
    RECOVERY_REFERENCE_INTENSITY,
    WorkoutType,
)
from progression_engine.models.workout import WorkoutSegment


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up (0.5 → 1), unlike Python's banker's rounding."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_minutes(value: float) -> float:
    """Round a duration to the nearest whole minute, never below one minute."""
    return max(1.0, round_half_up(value))


def segment_tss(segment: WorkoutSegment) -> float:
    intensity_factor = segment.intensity / 100.0
    return segment.duration_min * intensity_factor ** 2 * 100.0 / 60.0


def calculate_tss(segments: Iterable[WorkoutSegment]) -> float:
    """Sum segment TSS for a workout.

    Example:
        A single 20-minute segment at 90% → 20 × 0.81 × 100/60 = 27.0
    """
    return sum(segment_tss(seg) for seg in segments)


def calculate_recovery_time(
    workout_type: WorkoutType,
    segments: Iterable[WorkoutSegment],
) -> float:
    """Estimate hours of recovery needed after a workout.

    recovery = 24 h × type multiplier × (avg intensity / 80) × (duration / 60)

    Args:
        workout_type: Selects the base multiplier (easy 1.0, vo2max 4.0, ...).
        segments: Segments of the workout; intensity is duration-weighted.

    Returns:
        Whole hours, 0.0 for a zero-duration workout.
    """
    segments = tuple(segments)
    total_duration = sum(seg.duration_min for seg in segments)
    if total_duration <= 0:
        return 0.0
    avg_intensity = sum(seg.intensity * seg.duration_min for seg in segments) / total_duration

    base = RECOVERY_MULTIPLIERS.get(workout_type, DEFAULT_RECOVERY_MULTIPLIER)
    intensity_multiplier = avg_intensity / RECOVERY_REFERENCE_INTENSITY
    duration_multiplier = total_duration / RECOVERY_REFERENCE_DURATION_MIN
    return round_half_up(RECOVERY_BASE_HOURS * base * intensity_multiplier * duration_multiplier)
