"""Progression and substitution models: per-call parameters and rule rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from progression_engine.models.enums import (
    ProgressionCurve,
    RecoveryState,
    TrainingMethodology,
    TrainingPhase,
    WorkoutType,
)
from progression_engine.models.fitness import CompletedWorkout, FitnessAssessment
from progression_engine.models.workout import Workout


@dataclass(frozen=True)
class ProgressionParameters:
    """Inputs for a single progress/substitute call.

    ``current_week`` is the week index within the plan; ``total_weeks``
    is only used to place the default plateau week.
    """

    current_week: int
    total_weeks: int
    phase: TrainingPhase
    methodology: TrainingMethodology
    fitness: FitnessAssessment
    completed_workouts: tuple[CompletedWorkout, ...] = field(default_factory=tuple)
    previous_workout: Workout | None = None


@dataclass(frozen=True)
class ProgressionRule:
    """How one workout type progresses under one methodology.

    Attributes:
        workout_type: Workout type the rule applies to.
        methodology: Methodology the rule applies to.
        curve: Shape of the progression.
        base_increase: Fractional increase per week (or per step).
        max_increase: Maximum total fractional increase.
        step_size: Weeks per step for STEPPED curves.
        plateau_week: Week the PLATEAU curve freezes at.
        phase_modifiers: Phase → multiplier; 0 means no progression.
    """

    workout_type: WorkoutType
    methodology: TrainingMethodology
    curve: ProgressionCurve
    base_increase: float
    max_increase: float
    step_size: int | None = None
    plateau_week: float | None = None
    phase_modifiers: Mapping[TrainingPhase, float] = field(
        default_factory=lambda: MappingProxyType({}),
    )

    @property
    def key(self) -> tuple[WorkoutType, TrainingMethodology]:
        return (self.workout_type, self.methodology)


@dataclass(frozen=True)
class SubstitutionConditions:
    """All set fields must hold for a candidate to be chosen."""

    phases: frozenset[TrainingPhase] | None = None
    methodologies: frozenset[TrainingMethodology] | None = None
    recovery_state: RecoveryState | None = None
    min_fitness_score: float | None = None


@dataclass(frozen=True)
class SubstitutionCandidate:
    """One replacement option; lower priority values are tried first."""

    workout_type: WorkoutType
    priority: int
    conditions: SubstitutionConditions = field(default_factory=SubstitutionConditions)
    intensity_adjustment: float = 0.0  # percentage points


@dataclass(frozen=True)
class SubstitutionRule:
    """Priority-ordered replacements for one original workout type."""

    original_type: WorkoutType
    candidates: tuple[SubstitutionCandidate, ...]


@dataclass(frozen=True)
class WorkoutConstraints:
    """External limits on a substitution or generated workout."""

    available_time_min: float | None = None
    max_intensity: float | None = None
    equipment: tuple[str, ...] = field(default_factory=tuple)
    weather: str | None = None


@dataclass(frozen=True)
class SubstitutionResult:
    """Outcome of a substitution call.

    ``substituted`` is False when the original workout was returned.
    """

    workout: Workout
    rationale: str
    substituted: bool = False
