"""Athlete-side inputs produced upstream: fitness, completed work, load."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from progression_engine.models.enums import LoadTrend, WorkoutType


@dataclass(frozen=True)
class FitnessAssessment:
    """Snapshot of an athlete's current capability.

    ``overall_score`` short-circuits the fitness scorer when set; it is
    the override used by tests and by callers with their own scoring.
    """

    weekly_mileage: float = 0.0
    vdot: float | None = None
    training_age: float | None = None  # years
    longest_recent_run: float | None = None
    overall_score: float | None = None


@dataclass(frozen=True)
class CompletedWorkout:
    """A workout the athlete actually did."""

    completed_on: date
    workout_type: WorkoutType
    duration_min: float
    tss: float


@dataclass(frozen=True)
class TrainingLoad:
    """Acute/chronic load summary.

    Consumed by the recovery recommendation; see
    ``progression_engine.math.training_load`` for how it is built.
    """

    acute: float
    chronic: float
    ratio: float
    trend: LoadTrend = LoadTrend.STABLE
    recommendation: str = ""
