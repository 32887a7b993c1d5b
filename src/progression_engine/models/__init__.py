"""Data models for the progression engine."""

from progression_engine.models.enums import (
    LoadTrend,
    ProgressionCurve,
    RecoveryState,
    TrainingMethodology,
    TrainingPhase,
    WorkoutType,
    ZoneType,
)
from progression_engine.models.fitness import (
    CompletedWorkout,
    FitnessAssessment,
    TrainingLoad,
)
from progression_engine.models.progression import (
    ProgressionParameters,
    ProgressionRule,
    SubstitutionCandidate,
    SubstitutionConditions,
    SubstitutionResult,
    SubstitutionRule,
    WorkoutConstraints,
)
from progression_engine.models.recommendation import (
    MethodologyRecoveryProfile,
    RecoveryRecommendation,
)
from progression_engine.models.workout import Workout, WorkoutSegment

__all__ = [
    "CompletedWorkout",
    "FitnessAssessment",
    "LoadTrend",
    "MethodologyRecoveryProfile",
    "ProgressionCurve",
    "ProgressionParameters",
    "ProgressionRule",
    "RecoveryRecommendation",
    "RecoveryState",
    "SubstitutionCandidate",
    "SubstitutionConditions",
    "SubstitutionResult",
    "SubstitutionRule",
    "TrainingLoad",
    "TrainingMethodology",
    "TrainingPhase",
    "Workout",
    "WorkoutConstraints",
    "WorkoutSegment",
    "WorkoutType",
    "ZoneType",
]
