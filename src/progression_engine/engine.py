"""WorkoutProgressionSystem — the entry point that wires the three engines."""

from __future__ import annotations

from typing import Iterable

from progression_engine.math.training_load import (
    daily_loads_from_completed,
    summarize_training_load,
)
from progression_engine.models.enums import RecoveryState, TrainingMethodology, TrainingPhase
from progression_engine.models.fitness import CompletedWorkout, TrainingLoad
from progression_engine.models.progression import (
    ProgressionParameters,
    SubstitutionResult,
    WorkoutConstraints,
)
from progression_engine.models.recommendation import RecoveryRecommendation
from progression_engine.models.workout import Workout
from progression_engine.progression.progressor import ProgressionEngine
from progression_engine.progression.recovery import RecoveryAdvisor
from progression_engine.progression.substitution import SubstitutionEngine
from progression_engine.registry import RuleTables
from progression_engine.validation import (
    coerce_recovery_state,
    validate_constraints,
    validate_methodology,
    validate_parameters,
    validate_phase,
    validate_workout,
)
from progression_engine.workouts.generator import BasicWorkoutGenerator, WorkoutGenerator
from progression_engine.workouts.templates import WORKOUT_TEMPLATES, TemplateCatalog


class WorkoutProgressionSystem:
    """Validates boundary input and dispatches to the progression,
    substitution and recovery engines.

    Rule tables are built once here and shared read-only by every engine,
    so a single instance may serve concurrent callers.

    Usage:
        system = WorkoutProgressionSystem(TrainingMethodology.DANIELS)
        harder = system.progress(workout, params)
        result = system.substitute(harder, params, "low")
        advice = system.recommend("medium", TrainingMethodology.DANIELS,
                                  TrainingPhase.BUILD, load)
    """

    def __init__(
        self,
        methodology: TrainingMethodology = TrainingMethodology.CUSTOM,
        *,
        tables: RuleTables | None = None,
        catalog: TemplateCatalog | None = None,
        generator: WorkoutGenerator | None = None,
    ) -> None:
        self.methodology = validate_methodology(methodology)
        self.tables = tables or RuleTables.default()
        self.catalog = WORKOUT_TEMPLATES if catalog is None else catalog
        self.generator = generator or BasicWorkoutGenerator(self.methodology)

        self.progression = ProgressionEngine(self.tables)
        self.substitution = SubstitutionEngine(self.tables, self.catalog, self.generator)
        self.recovery = RecoveryAdvisor(self.tables)

    def progress(self, workout: Workout, params: ProgressionParameters) -> Workout:
        """Progress a workout for the week described by ``params``.

        Raises:
            InvalidWorkoutError: If the workout is missing or malformed.
            InvalidParametersError: If the parameters are malformed.
        """
        return self.progression.progress(validate_workout(workout), validate_parameters(params))

    def substitute(
        self,
        original: Workout,
        params: ProgressionParameters,
        recovery_state: RecoveryState | str,
        constraints: WorkoutConstraints | None = None,
    ) -> SubstitutionResult:
        """Replace ``original`` with a methodology-appropriate alternative.

        ``recovery_state`` may be a RecoveryState or its label.
        """
        return self.substitution.substitute(
            validate_workout(original),
            validate_parameters(params),
            coerce_recovery_state(recovery_state),
            validate_constraints(constraints),
        )

    def recommend(
        self,
        recovery_state: RecoveryState | str,
        methodology: TrainingMethodology,
        phase: TrainingPhase,
        training_load: TrainingLoad,
    ) -> RecoveryRecommendation:
        """Recovery-day ceilings for the given state, methodology and phase."""
        return self.recovery.recommend(
            coerce_recovery_state(recovery_state),
            validate_methodology(methodology),
            validate_phase(phase),
            training_load,
        )

    def training_load(self, completed_workouts: Iterable[CompletedWorkout]) -> TrainingLoad:
        """Acute/chronic load summary from a completed-workout history."""
        return summarize_training_load(daily_loads_from_completed(completed_workouts))
