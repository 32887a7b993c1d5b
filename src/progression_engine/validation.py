"""Boundary validation: fail fast on caller bugs before any rule runs."""

from __future__ import annotations

from progression_engine.exceptions import InvalidParametersError, InvalidWorkoutError
from progression_engine.models.enums import (
    RecoveryState,
    TrainingMethodology,
    TrainingPhase,
)
from progression_engine.models.fitness import FitnessAssessment
from progression_engine.models.progression import (
    ProgressionParameters,
    WorkoutConstraints,
)
from progression_engine.models.workout import Workout


def validate_workout(workout: Workout | None) -> Workout:
    """Check a workout has at least one positive-duration segment.

    Raises:
        InvalidWorkoutError: On a None/non-Workout value, an empty segment
            list, a non-positive duration or an intensity outside (0, 100].
    """
    if workout is None:
        raise InvalidWorkoutError("Workout is required, got None")
    if not isinstance(workout, Workout):
        raise InvalidWorkoutError(
            f"Expected a Workout, got {type(workout).__name__}"
        )
    if not workout.segments:
        raise InvalidWorkoutError(
            f"{workout.workout_type.label} workout has no segments"
        )
    for index, segment in enumerate(workout.segments):
        if segment.duration_min <= 0:
            raise InvalidWorkoutError(
                f"Segment {index} of {workout.workout_type.label} workout has "
                f"non-positive duration {segment.duration_min}"
            )
        if not 0 < segment.intensity <= 100:
            raise InvalidWorkoutError(
                f"Segment {index} of {workout.workout_type.label} workout has "
                f"intensity {segment.intensity} outside (0, 100]"
            )
    return workout


def validate_phase(phase: object) -> TrainingPhase:
    if not isinstance(phase, TrainingPhase):
        raise InvalidParametersError(
            f"phase must be a TrainingPhase, got {phase!r}", field_name="phase",
        )
    return phase


def validate_methodology(methodology: object) -> TrainingMethodology:
    if not isinstance(methodology, TrainingMethodology):
        raise InvalidParametersError(
            f"methodology must be a TrainingMethodology, got {methodology!r}",
            field_name="methodology",
        )
    return methodology


def validate_parameters(params: ProgressionParameters | None) -> ProgressionParameters:
    """Check progression parameters are complete and in range.

    Raises:
        InvalidParametersError: On missing parameters, a missing phase or
            methodology, a negative week, fewer than one plan week, or a
            fitness value that is not a FitnessAssessment.
    """
    if params is None:
        raise InvalidParametersError("Progression parameters are required, got None")
    validate_phase(params.phase)
    validate_methodology(params.methodology)
    if params.current_week < 0:
        raise InvalidParametersError(
            f"current_week must be >= 0, got {params.current_week}",
            field_name="current_week",
        )
    if params.total_weeks < 1:
        raise InvalidParametersError(
            f"total_weeks must be >= 1, got {params.total_weeks}",
            field_name="total_weeks",
        )
    if not isinstance(params.fitness, FitnessAssessment):
        raise InvalidParametersError(
            f"fitness must be a FitnessAssessment, got {params.fitness!r}",
            field_name="fitness",
        )
    return params


def coerce_recovery_state(value: RecoveryState | str | None) -> RecoveryState:
    """Accept a RecoveryState or its label ("low", "medium", "high").

    Raises:
        InvalidParametersError: On None or an unknown label.
    """
    if isinstance(value, RecoveryState):
        return value
    if isinstance(value, str):
        try:
            return RecoveryState[value.strip().upper()]
        except KeyError:
            pass
    raise InvalidParametersError(
        f"recovery_state must be one of low/medium/high, got {value!r}",
        field_name="recovery_state",
    )


def validate_constraints(constraints: WorkoutConstraints | None) -> WorkoutConstraints | None:
    if constraints is None:
        return None
    if constraints.available_time_min is not None and constraints.available_time_min <= 0:
        raise InvalidParametersError(
            f"available_time_min must be positive, got {constraints.available_time_min}",
            field_name="available_time_min",
        )
    return constraints
