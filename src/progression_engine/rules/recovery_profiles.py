"""Recovery-day baselines per methodology and phase-appropriate workouts."""

from __future__ import annotations

from progression_engine.models.enums import (
    TrainingMethodology,
    TrainingPhase,
    WorkoutType,
)
from progression_engine.models.recommendation import MethodologyRecoveryProfile

_DEFAULT_PROFILE = MethodologyRecoveryProfile(
    max_intensity=70.0,
    max_duration_min=60.0,
    philosophy="easy aerobic activity",
)

RECOVERY_PROFILES: dict[TrainingMethodology, MethodologyRecoveryProfile] = {
    # Easy pace emphasis; E pace tops out near 70% of max
    TrainingMethodology.DANIELS: MethodologyRecoveryProfile(
        max_intensity=70.0,
        max_duration_min=60.0,
        philosophy="easy running at E pace for active recovery",
    ),
    # Aerobic volume is the recovery tool
    TrainingMethodology.LYDIARD: MethodologyRecoveryProfile(
        max_intensity=70.0,
        max_duration_min=90.0,
        philosophy="complete rest or very easy aerobic movement",
    ),
    TrainingMethodology.PFITZINGER: MethodologyRecoveryProfile(
        max_intensity=68.0,
        max_duration_min=75.0,
        philosophy="easy running with focus on maintaining aerobic base",
    ),
    TrainingMethodology.HUDSON: _DEFAULT_PROFILE,
    TrainingMethodology.CUSTOM: _DEFAULT_PROFILE,
}

_CORE_WORKOUTS = (WorkoutType.EASY, WorkoutType.STEADY, WorkoutType.TEMPO)

PHASE_APPROPRIATE_WORKOUTS: dict[TrainingPhase, tuple[WorkoutType, ...]] = {
    TrainingPhase.BASE: (*_CORE_WORKOUTS, WorkoutType.LONG_RUN),
    TrainingPhase.BUILD: (
        *_CORE_WORKOUTS,
        WorkoutType.THRESHOLD,
        WorkoutType.VO2MAX,
        WorkoutType.HILL_REPEATS,
    ),
    TrainingPhase.PEAK: (
        *_CORE_WORKOUTS,
        WorkoutType.SPEED,
        WorkoutType.RACE_PACE,
        WorkoutType.TIME_TRIAL,
    ),
    TrainingPhase.TAPER: (WorkoutType.EASY, WorkoutType.STEADY, WorkoutType.RACE_PACE),
    TrainingPhase.RECOVERY: (
        WorkoutType.RECOVERY,
        WorkoutType.EASY,
        WorkoutType.CROSS_TRAINING,
    ),
}
