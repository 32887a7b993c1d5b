"""Progression engine — scale a workout for the current week of a plan.

References:
    Daniels (2014), Daniels' Running Formula, 3rd ed.
    Pfitzinger & Douglas (2009), Advanced Marathoning, 2nd ed.
"""

from __future__ import annotations

import dataclasses
import logging
import math

from progression_engine.math.fitness import (
    calculate_fitness_score,
    fitness_progression_modifier,
)
from progression_engine.math.training_stress import (
    calculate_recovery_time,
    calculate_tss,
    round_half_up,
    round_minutes,
)
from progression_engine.models.enums import (
    DEFAULT_DURATION_MULTIPLIER_CAP,
    DEFAULT_PLATEAU_FRACTION,
    DEFAULT_STEP_SIZE_WEEKS,
    DURATION_MULTIPLIER_CAP,
    INTENSITY_PROGRESSION_FRACTION,
    NO_PROGRESSION_PHASES,
    PHASE_INTENSITY_CEILING,
    PROGRESSION_ANNOTATION_THRESHOLD,
    ProgressionCurve,
    TrainingPhase,
    WorkoutType,
)
from progression_engine.models.progression import ProgressionParameters, ProgressionRule
from progression_engine.models.workout import Workout, WorkoutSegment
from progression_engine.registry import RuleTables

logger = logging.getLogger(__name__)

# e^50 is far above any 1 + max_increase, even after the smallest modifiers
_MAX_CURVE_EXPONENT = 50.0


def curve_multiplier(rule: ProgressionRule, current_week: int, total_weeks: int) -> float:
    """Raw multiplier from the rule's curve, before modifiers and clamping.

    linear:      1 + b·w
    exponential: (1 + b)^w
    stepped:     1 + b·floor(w / step)
    plateau:     linear until the plateau week, then frozen
    """
    b = rule.base_increase
    if rule.curve == ProgressionCurve.LINEAR:
        return 1.0 + b * current_week
    if rule.curve == ProgressionCurve.EXPONENTIAL:
        if b <= 0:
            return (1.0 + b) ** current_week
        # Bounded exponent keeps far-out weeks finite; the clamp decides them anyway
        return math.exp(min(current_week * math.log1p(b), _MAX_CURVE_EXPONENT))
    if rule.curve == ProgressionCurve.STEPPED:
        step = rule.step_size or DEFAULT_STEP_SIZE_WEEKS
        return 1.0 + b * math.floor(current_week / step)
    if rule.curve == ProgressionCurve.PLATEAU:
        plateau_week = rule.plateau_week or total_weeks * DEFAULT_PLATEAU_FRACTION
        return 1.0 + b * min(current_week, plateau_week)
    return 1.0


def duration_multiplier_cap(workout_type: WorkoutType) -> float:
    """Per-type cap on how far segment durations may stretch."""
    return DURATION_MULTIPLIER_CAP.get(workout_type, DEFAULT_DURATION_MULTIPLIER_CAP)


def progressed_intensity(intensity: float, multiplier: float, phase: TrainingPhase) -> float:
    """Apply half the multiplier's excess to intensity, capped by phase."""
    scaled = intensity * (1.0 + (multiplier - 1.0) * INTENSITY_PROGRESSION_FRACTION)
    return min(scaled, PHASE_INTENSITY_CEILING[phase])


class ProgressionEngine:
    """Makes a workout harder week over week following its progression rule.

    Usage::

        engine = ProgressionEngine(RuleTables.default())
        harder = engine.progress(workout, params)
    """

    def __init__(self, tables: RuleTables) -> None:
        self.tables = tables

    def progress(self, workout: Workout, params: ProgressionParameters) -> Workout:
        """Return a progressed copy of ``workout``.

        Algorithm:
        1. Look up the rule for (workout type, methodology); none → copy
        2. Taper/recovery → durations frozen, intensities capped only
        3. Multiplier = curve × phase modifier × fitness modifier,
           clamped to [1.0, 1 + max_increase]
        4. Duration per segment × min(multiplier, type cap), whole minutes
        5. Intensity per segment × (1 + half the excess), phase ceiling
        6. Recompute TSS and recovery time

        Args:
            workout: Base workout (already validated).
            params: Week, phase, methodology and fitness for this call.

        Returns:
            A new Workout with the same type, zone, target and segment order.
        """
        rule = self.tables.progression_rule(workout.workout_type, params.methodology)
        if rule is None:
            logger.debug(
                "No progression rule for %s/%s, returning copy",
                workout.workout_type.label, params.methodology.label,
            )
            return dataclasses.replace(workout)

        if params.phase in NO_PROGRESSION_PHASES:
            return self._hold(workout, params.phase)

        multiplier = self.calculate_multiplier(rule, params)
        duration_factor = min(multiplier, duration_multiplier_cap(workout.workout_type))

        segments = tuple(
            WorkoutSegment(
                duration_min=round_minutes(seg.duration_min * duration_factor),
                intensity=progressed_intensity(seg.intensity, multiplier, params.phase),
                zone=seg.zone,
                description=self._annotate(seg.description, multiplier),
            )
            for seg in workout.segments
        )
        logger.debug(
            "Progressed %s week %d (%s): multiplier %.3f",
            workout.workout_type.label, params.current_week, params.phase.label, multiplier,
        )
        return self._with_segments(workout, segments)

    def calculate_multiplier(self, rule: ProgressionRule, params: ProgressionParameters) -> float:
        """Overall progression multiplier, always within [1.0, 1 + max_increase].

        Taper and recovery phases return exactly 1.0.
        """
        if params.phase in NO_PROGRESSION_PHASES:
            return 1.0

        multiplier = curve_multiplier(rule, params.current_week, params.total_weeks)
        phase_modifier = rule.phase_modifiers.get(params.phase, 1.0)
        fitness_modifier = fitness_progression_modifier(calculate_fitness_score(params.fitness))
        multiplier *= phase_modifier * fitness_modifier

        multiplier = min(multiplier, 1.0 + rule.max_increase)
        return max(multiplier, 1.0)

    def _hold(self, workout: Workout, phase: TrainingPhase) -> Workout:
        """Freeze durations; only enforce the phase intensity ceiling."""
        ceiling = PHASE_INTENSITY_CEILING[phase]
        segments = tuple(
            dataclasses.replace(seg, intensity=min(seg.intensity, ceiling))
            for seg in workout.segments
        )
        return self._with_segments(workout, segments)

    @staticmethod
    def _with_segments(workout: Workout, segments: tuple[WorkoutSegment, ...]) -> Workout:
        return dataclasses.replace(
            workout,
            segments=segments,
            estimated_tss=calculate_tss(segments),
            recovery_time_hours=calculate_recovery_time(workout.workout_type, segments),
        )

    @staticmethod
    def _annotate(description: str, multiplier: float) -> str:
        if multiplier > PROGRESSION_ANNOTATION_THRESHOLD:
            return f"{description} (progressed +{round_half_up((multiplier - 1.0) * 100):.0f}%)"
        return description
