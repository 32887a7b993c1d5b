"""Recovery recommendation engine — what a recovery day may contain.

Ceilings come from the methodology's recovery profile; the recovery
state picks how far below that baseline to stay.
"""

from __future__ import annotations

from progression_engine.models.enums import (
    ACWR_DANGER_THRESHOLD,
    LOW_RECOVERY_MAX_DURATION_MIN,
    LOW_RECOVERY_MAX_INTENSITY,
    MEDIUM_RECOVERY_MAX_DURATION_MIN,
    MEDIUM_RECOVERY_MAX_INTENSITY,
    RecoveryState,
    TrainingMethodology,
    TrainingPhase,
    WorkoutType,
)
from progression_engine.models.fitness import TrainingLoad
from progression_engine.models.recommendation import RecoveryRecommendation
from progression_engine.registry import RuleTables


def _load_note(load: TrainingLoad) -> str:
    return f"Current acute:chronic load ratio is {load.ratio:.2f} ({load.trend.label})."


class RecoveryAdvisor:
    """Derives recovery-day ceilings and allowed workout types."""

    def __init__(self, tables: RuleTables) -> None:
        self.tables = tables

    def recommend(
        self,
        recovery_state: RecoveryState,
        methodology: TrainingMethodology,
        phase: TrainingPhase,
        training_load: TrainingLoad,
    ) -> RecoveryRecommendation:
        """Recommend intensity/duration ceilings for the recovery state.

        LOW caps at 50% / 30 min, MEDIUM at 65% / 60 min, both never above
        the methodology baseline; HIGH uses the baseline itself with
        phase-appropriate workout types. The training load does not move
        the ceilings; it only shapes the rationale and, past the ACWR
        danger threshold, adds a restriction.
        """
        profile = self.tables.recovery_profile(methodology)

        if recovery_state == RecoveryState.LOW:
            recommendation = RecoveryRecommendation(
                recommended_intensity=min(LOW_RECOVERY_MAX_INTENSITY, profile.max_intensity),
                recommended_duration_min=min(LOW_RECOVERY_MAX_DURATION_MIN, profile.max_duration_min),
                workout_types=(WorkoutType.RECOVERY, WorkoutType.CROSS_TRAINING),
                rationale=(
                    f"Low recovery state requires gentle movement. {methodology.label} "
                    f"methodology emphasizes {profile.philosophy}."
                ),
                restrictions=(
                    "Avoid all high-intensity work",
                    "Keep effort conversational",
                    "Stop if fatigue increases",
                ),
            )
        elif recovery_state == RecoveryState.MEDIUM:
            recommendation = RecoveryRecommendation(
                recommended_intensity=min(MEDIUM_RECOVERY_MAX_INTENSITY, profile.max_intensity),
                recommended_duration_min=min(MEDIUM_RECOVERY_MAX_DURATION_MIN, profile.max_duration_min),
                workout_types=(WorkoutType.EASY, WorkoutType.RECOVERY, WorkoutType.STEADY),
                rationale=(
                    "Medium recovery allows for easy aerobic work. "
                    "Focus on maintaining movement quality."
                ),
                restrictions=(
                    "No tempo or harder efforts",
                    "Monitor fatigue levels",
                    "Shorten if needed",
                ),
            )
        else:
            recommendation = RecoveryRecommendation(
                recommended_intensity=profile.max_intensity,
                recommended_duration_min=profile.max_duration_min,
                workout_types=self.tables.phase_workouts(phase),
                rationale=(
                    f"Good recovery state allows for normal training progression "
                    f"in the {phase.label} phase."
                ),
                restrictions=("Follow planned intensity", "Adjust based on feel"),
            )

        restrictions = recommendation.restrictions
        if training_load.ratio > ACWR_DANGER_THRESHOLD:
            restrictions = (*restrictions, "Training load is very high; prefer the lower end of these limits")

        return RecoveryRecommendation(
            recommended_intensity=recommendation.recommended_intensity,
            recommended_duration_min=recommendation.recommended_duration_min,
            workout_types=recommendation.workout_types,
            rationale=f"{recommendation.rationale} {_load_note(training_load)}",
            restrictions=restrictions,
        )
