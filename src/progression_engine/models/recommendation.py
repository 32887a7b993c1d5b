"""Recovery recommendation output and per-methodology recovery baselines."""

from __future__ import annotations

from dataclasses import dataclass, field

from progression_engine.models.enums import WorkoutType


@dataclass(frozen=True)
class MethodologyRecoveryProfile:
    """Baseline recovery-day ceilings for a methodology."""

    max_intensity: float
    max_duration_min: float
    philosophy: str


@dataclass(frozen=True)
class RecoveryRecommendation:
    """What a recovery day should look like.

    Pure output value; the engine does not keep it.
    """

    recommended_intensity: float
    recommended_duration_min: float
    workout_types: tuple[WorkoutType, ...]
    rationale: str
    restrictions: tuple[str, ...] = field(default_factory=tuple)
