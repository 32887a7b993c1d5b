"""Substitution engine — swap a planned workout for a methodology-appropriate one.

Used when recovery state or external constraints (time, equipment,
weather) make the planned session unsuitable.
"""

from __future__ import annotations

import dataclasses
import logging

from progression_engine.math.fitness import calculate_fitness_score
from progression_engine.math.training_stress import calculate_tss, round_half_up, round_minutes
from progression_engine.models.enums import (
    RECOVERY_STATE_MAX_INTENSITY,
    SUBSTITUTION_MAX_INTENSITY,
    SUBSTITUTION_MIN_INTENSITY,
    RecoveryState,
    TrainingMethodology,
    TrainingPhase,
    WorkoutType,
)
from progression_engine.models.progression import (
    ProgressionParameters,
    SubstitutionCandidate,
    SubstitutionResult,
    WorkoutConstraints,
)
from progression_engine.models.workout import Workout
from progression_engine.registry import RuleTables
from progression_engine.workouts.generator import WorkoutGenerator, WorkoutRequest
from progression_engine.workouts.templates import TemplateCatalog, get_template

logger = logging.getLogger(__name__)


def candidate_matches(
    candidate: SubstitutionCandidate,
    params: ProgressionParameters,
    recovery_state: RecoveryState,
    fitness_score: float,
) -> bool:
    """True when every condition the candidate sets is satisfied."""
    conditions = candidate.conditions
    if conditions.phases is not None and params.phase not in conditions.phases:
        return False
    if conditions.methodologies is not None and params.methodology not in conditions.methodologies:
        return False
    if conditions.recovery_state is not None and conditions.recovery_state != recovery_state:
        return False
    if conditions.min_fitness_score is not None and fitness_score < conditions.min_fitness_score:
        return False
    return True


def adjust_intensity(workout: Workout, adjustment: float) -> Workout:
    """Shift every segment's intensity by ``adjustment`` points, within [50, 100]."""
    segments = tuple(
        dataclasses.replace(
            seg,
            intensity=max(
                SUBSTITUTION_MIN_INTENSITY,
                min(SUBSTITUTION_MAX_INTENSITY, seg.intensity + adjustment),
            ),
        )
        for seg in workout.segments
    )
    return dataclasses.replace(workout, segments=segments, estimated_tss=calculate_tss(segments))


def fit_to_time(workout: Workout, available_time_min: float) -> Workout:
    """Shrink a workout uniformly so it fits the available time.

    Every segment is scaled by ``available / total`` and rounded to whole
    minutes (at least one). Any surplus is taken back one minute at a
    time, always from the segment furthest above its exact share, until
    the total fits. The total only stays above the available time when
    every segment is already down to one minute. TSS shrinks by the same
    ratio.
    """
    total = workout.total_duration_min
    if total <= available_time_min:
        return workout

    scale = available_time_min / total
    exact = [seg.duration_min * scale for seg in workout.segments]
    durations = [round_minutes(value) for value in exact]

    surplus = sum(durations) - available_time_min
    while surplus > 0:
        trimmable = [i for i, duration in enumerate(durations) if duration > 1]
        if not trimmable:
            break
        # Largest round-up first, longest segment on ties
        index = max(trimmable, key=lambda i: (durations[i] - exact[i], durations[i]))
        durations[index] -= 1
        surplus -= 1

    segments = tuple(
        dataclasses.replace(seg, duration_min=duration)
        for seg, duration in zip(workout.segments, durations)
    )
    return dataclasses.replace(
        workout,
        segments=segments,
        estimated_tss=round_half_up(workout.estimated_tss * scale),
    )


def build_rationale(
    original_type: WorkoutType,
    substitute_type: WorkoutType,
    recovery_state: RecoveryState,
    phase: TrainingPhase,
    methodology: TrainingMethodology,
) -> str:
    return (
        f"Substituted {original_type.label} with {substitute_type.label} due to "
        f"{recovery_state.label} recovery state. This maintains {methodology.label} "
        f"methodology principles while respecting current {phase.label} phase needs."
    )


class SubstitutionEngine:
    """Replaces workouts using the priority-ordered substitution tables.

    Usage::

        engine = SubstitutionEngine(tables, WORKOUT_TEMPLATES, BasicWorkoutGenerator())
        result = engine.substitute(workout, params, RecoveryState.LOW)
    """

    def __init__(
        self,
        tables: RuleTables,
        catalog: TemplateCatalog,
        generator: WorkoutGenerator,
    ) -> None:
        self.tables = tables
        self.catalog = catalog
        self.generator = generator

    def substitute(
        self,
        original: Workout,
        params: ProgressionParameters,
        recovery_state: RecoveryState,
        constraints: WorkoutConstraints | None = None,
    ) -> SubstitutionResult:
        """Pick and build a replacement for ``original``.

        Algorithm:
        1. Look up the substitution rule; none → original unchanged
        2. First candidate (ascending priority) whose conditions hold;
           none → original unchanged
        3. Template exists → copy it and apply the intensity adjustment
        4. No template → delegate to the generator, capped by recovery state
        5. Still longer than the available time → scale down uniformly

        Returns:
            SubstitutionResult with the workout and an explanation naming
            both types, the recovery state, phase and methodology.
        """
        rule = self.tables.substitution_rule(original.workout_type)
        if rule is None:
            logger.debug("No substitution rule for %s", original.workout_type.label)
            return SubstitutionResult(
                workout=original,
                rationale=(
                    f"No substitution rule available for {original.workout_type.label} "
                    f"workouts; keeping the planned session."
                ),
            )

        fitness_score = calculate_fitness_score(params.fitness)
        candidate = next(
            (
                c for c in rule.candidates
                if candidate_matches(c, params, recovery_state, fitness_score)
            ),
            None,
        )
        if candidate is None:
            logger.debug(
                "No suitable substitution for %s (%s recovery, %s, %s)",
                original.workout_type.label, recovery_state.label,
                params.phase.label, params.methodology.label,
            )
            return SubstitutionResult(
                workout=original,
                rationale=(
                    f"No suitable substitution found for {original.workout_type.label} "
                    f"with {recovery_state.label} recovery state in {params.phase.label} "
                    f"phase ({params.methodology.label}); keeping the planned session."
                ),
            )

        rationale = build_rationale(
            original.workout_type,
            candidate.workout_type,
            recovery_state,
            params.phase,
            params.methodology,
        )

        template = get_template(candidate.workout_type, self.catalog)
        if template is not None:
            workout = template
            if candidate.intensity_adjustment:
                workout = adjust_intensity(workout, candidate.intensity_adjustment)
        else:
            workout, generator_rationale = self._generate(
                candidate.workout_type, original, params, recovery_state, constraints,
            )
            rationale = f"{rationale} {generator_rationale}"

        if constraints is not None and constraints.available_time_min is not None:
            workout = fit_to_time(workout, constraints.available_time_min)

        logger.debug(
            "Substituted %s → %s (priority %d)",
            original.workout_type.label, candidate.workout_type.label, candidate.priority,
        )
        return SubstitutionResult(workout=workout, rationale=rationale, substituted=True)

    def _generate(
        self,
        workout_type: WorkoutType,
        original: Workout,
        params: ProgressionParameters,
        recovery_state: RecoveryState,
        constraints: WorkoutConstraints | None,
    ) -> tuple[Workout, str]:
        """Delegate to the generator when the catalog has no template."""
        available = constraints.available_time_min if constraints is not None else None
        target_duration = original.total_duration_min
        if available is not None:
            target_duration = min(target_duration, available)

        # The stricter of the caller's cap and the recovery-state cap
        caps = [
            cap for cap in (
                RECOVERY_STATE_MAX_INTENSITY[recovery_state],
                constraints.max_intensity if constraints is not None else None,
            )
            if cap is not None
        ]

        request = WorkoutRequest(
            workout_type=workout_type,
            phase=params.phase,
            methodology=params.methodology,
            target_duration_min=target_duration,
            constraints=WorkoutConstraints(
                available_time_min=available,
                max_intensity=min(caps) if caps else None,
                equipment=constraints.equipment if constraints is not None else (),
                weather=constraints.weather if constraints is not None else None,
            ),
        )
        logger.debug("No template for %s, delegating to generator", workout_type.label)
        generated = self.generator.generate(request)
        return generated.workout, generated.rationale
