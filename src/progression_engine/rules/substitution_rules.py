"""Substitution rule rows keyed by the original workout type.

Candidates are tried in ascending priority; the first whose conditions
all hold wins. Intensity adjustments are additive percentage points.
"""

from __future__ import annotations

from progression_engine.models.enums import (
    RecoveryState,
    TrainingMethodology,
    TrainingPhase,
    WorkoutType,
)
from progression_engine.models.progression import (
    SubstitutionCandidate,
    SubstitutionConditions,
    SubstitutionRule,
)

_LOW = SubstitutionConditions(recovery_state=RecoveryState.LOW)
_MEDIUM = SubstitutionConditions(recovery_state=RecoveryState.MEDIUM)
_BUILD_OR_PEAK = frozenset({TrainingPhase.BUILD, TrainingPhase.PEAK})


SUBSTITUTION_RULES: tuple[SubstitutionRule, ...] = (
    SubstitutionRule(
        original_type=WorkoutType.TEMPO,
        candidates=(
            SubstitutionCandidate(
                WorkoutType.STEADY, priority=1, conditions=_LOW,
                intensity_adjustment=-10,
            ),
            # Pfitzinger swaps tempo for LT work once the build starts
            SubstitutionCandidate(
                WorkoutType.THRESHOLD, priority=2,
                conditions=SubstitutionConditions(
                    phases=_BUILD_OR_PEAK,
                    methodologies=frozenset({TrainingMethodology.PFITZINGER}),
                ),
            ),
            SubstitutionCandidate(
                WorkoutType.EASY, priority=3, conditions=_LOW,
                intensity_adjustment=-20,
            ),
        ),
    ),
    SubstitutionRule(
        original_type=WorkoutType.VO2MAX,
        candidates=(
            SubstitutionCandidate(
                WorkoutType.HILL_REPEATS, priority=1,
                conditions=SubstitutionConditions(
                    phases=_BUILD_OR_PEAK,
                    methodologies=frozenset({TrainingMethodology.LYDIARD}),
                ),
            ),
            SubstitutionCandidate(
                WorkoutType.FARTLEK, priority=2, conditions=_MEDIUM,
                intensity_adjustment=-5,
            ),
            SubstitutionCandidate(
                WorkoutType.TEMPO, priority=3, conditions=_LOW,
                intensity_adjustment=-15,
            ),
        ),
    ),
    SubstitutionRule(
        original_type=WorkoutType.LONG_RUN,
        candidates=(
            SubstitutionCandidate(
                WorkoutType.STEADY, priority=1, conditions=_LOW,
                intensity_adjustment=-10,
            ),
            SubstitutionCandidate(
                WorkoutType.STEADY, priority=2, conditions=_MEDIUM,
                intensity_adjustment=-5,
            ),
            SubstitutionCandidate(WorkoutType.EASY, priority=3, conditions=_LOW),
            SubstitutionCandidate(WorkoutType.EASY, priority=4, conditions=_MEDIUM),
            SubstitutionCandidate(
                WorkoutType.CROSS_TRAINING, priority=5, conditions=_LOW,
            ),
        ),
    ),
    SubstitutionRule(
        original_type=WorkoutType.SPEED,
        candidates=(
            SubstitutionCandidate(
                WorkoutType.FARTLEK, priority=1, conditions=_MEDIUM,
                intensity_adjustment=-10,
            ),
            SubstitutionCandidate(
                WorkoutType.HILL_REPEATS, priority=2,
                conditions=SubstitutionConditions(
                    methodologies=frozenset({TrainingMethodology.LYDIARD}),
                ),
            ),
            SubstitutionCandidate(WorkoutType.VO2MAX, priority=3, conditions=_MEDIUM),
        ),
    ),
)
