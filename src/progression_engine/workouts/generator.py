"""Custom workout generation — fallback when no static template exists.

The substitution engine only depends on the ``WorkoutGenerator`` protocol;
``BasicWorkoutGenerator`` is the default implementation. It decomposes a
target duration into warm-up / main set / cool-down the same way for
every methodology, differing only in the default effort per workout type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from progression_engine.math.training_stress import round_half_up
from progression_engine.math.zones import TRAINING_ZONES, zone_for_intensity
from progression_engine.models.enums import (
    TrainingMethodology,
    TrainingPhase,
    WorkoutType,
    ZoneType,
)
from progression_engine.models.progression import WorkoutConstraints
from progression_engine.models.workout import Workout, WorkoutSegment
from progression_engine.workouts.templates import build_workout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkoutRequest:
    """What the caller wants generated."""

    workout_type: WorkoutType
    phase: TrainingPhase
    methodology: TrainingMethodology
    target_duration_min: float | None = None
    constraints: WorkoutConstraints = field(default_factory=WorkoutConstraints)


@dataclass(frozen=True)
class GeneratedWorkout:
    workout: Workout
    rationale: str


class WorkoutGenerator(Protocol):
    """Anything that can build a workout for a request."""

    def generate(self, request: WorkoutRequest) -> GeneratedWorkout:
        ...


# Default session length in minutes before phase adjustment
_DEFAULT_DURATION_MIN: dict[WorkoutType, float] = {
    WorkoutType.RECOVERY: 30,
    WorkoutType.EASY: 60,
    WorkoutType.STEADY: 75,
    WorkoutType.TEMPO: 50,
    WorkoutType.THRESHOLD: 60,
    WorkoutType.VO2MAX: 50,
    WorkoutType.SPEED: 45,
    WorkoutType.HILL_REPEATS: 60,
    WorkoutType.FARTLEK: 45,
    WorkoutType.PROGRESSION: 60,
    WorkoutType.LONG_RUN: 120,
    WorkoutType.RACE_PACE: 70,
    WorkoutType.TIME_TRIAL: 40,
    WorkoutType.CROSS_TRAINING: 45,
    WorkoutType.STRENGTH: 30,
}

_PHASE_DURATION_FACTOR = {
    TrainingPhase.BASE: 0.8,
    TrainingPhase.PEAK: 1.1,
}

# Main-set effort (% of max) by workout type; Daniels values are the default
_DEFAULT_INTENSITY: dict[WorkoutType, float] = {
    WorkoutType.RECOVERY: 60,
    WorkoutType.EASY: 65,
    WorkoutType.STEADY: 75,
    WorkoutType.TEMPO: 88,
    WorkoutType.THRESHOLD: 88,
    WorkoutType.VO2MAX: 95,
    WorkoutType.SPEED: 98,
    WorkoutType.HILL_REPEATS: 90,
    WorkoutType.FARTLEK: 80,
    WorkoutType.PROGRESSION: 75,
    WorkoutType.LONG_RUN: 65,
    WorkoutType.RACE_PACE: 85,
    WorkoutType.TIME_TRIAL: 92,
    WorkoutType.CROSS_TRAINING: 65,
    WorkoutType.STRENGTH: 70,
}

_METHODOLOGY_INTENSITY: dict[TrainingMethodology, dict[WorkoutType, float]] = {
    # Lydiard keeps everything a notch more aerobic
    TrainingMethodology.LYDIARD: {
        **_DEFAULT_INTENSITY,
        WorkoutType.RECOVERY: 55,
        WorkoutType.STEADY: 70,
        WorkoutType.TEMPO: 80,
        WorkoutType.THRESHOLD: 82,
        WorkoutType.VO2MAX: 90,
        WorkoutType.SPEED: 92,
        WorkoutType.HILL_REPEATS: 85,
        WorkoutType.FARTLEK: 75,
        WorkoutType.PROGRESSION: 70,
        WorkoutType.RACE_PACE: 80,
        WorkoutType.TIME_TRIAL: 85,
        WorkoutType.CROSS_TRAINING: 60,
        WorkoutType.STRENGTH: 65,
    },
    TrainingMethodology.PFITZINGER: {
        **_DEFAULT_INTENSITY,
        WorkoutType.EASY: 68,
        WorkoutType.TEMPO: 85,
        WorkoutType.VO2MAX: 94,
        WorkoutType.SPEED: 96,
        WorkoutType.HILL_REPEATS: 88,
        WorkoutType.PROGRESSION: 78,
        WorkoutType.LONG_RUN: 70,
        WorkoutType.RACE_PACE: 86,
        WorkoutType.TIME_TRIAL: 90,
    },
    TrainingMethodology.HUDSON: {**_DEFAULT_INTENSITY, WorkoutType.TEMPO: 85},
    TrainingMethodology.CUSTOM: {**_DEFAULT_INTENSITY, WorkoutType.TEMPO: 85},
}

# Types run as a single continuous block, without warm-up/cool-down
_CONTINUOUS_TYPES = frozenset({
    WorkoutType.RECOVERY,
    WorkoutType.EASY,
    WorkoutType.LONG_RUN,
    WorkoutType.CROSS_TRAINING,
    WorkoutType.STRENGTH,
})

_ADAPTATION_TARGETS: dict[WorkoutType, str] = {
    WorkoutType.RECOVERY: "Active recovery and regeneration",
    WorkoutType.EASY: "Aerobic base development",
    WorkoutType.STEADY: "Aerobic capacity improvement",
    WorkoutType.TEMPO: "Lactate threshold development",
    WorkoutType.THRESHOLD: "Lactate clearance improvement",
    WorkoutType.VO2MAX: "Maximum oxygen uptake",
    WorkoutType.SPEED: "Neuromuscular power",
    WorkoutType.HILL_REPEATS: "Strength and power development",
    WorkoutType.FARTLEK: "Speed variation and lactate tolerance",
    WorkoutType.PROGRESSION: "Fatigue resistance",
    WorkoutType.LONG_RUN: "Endurance and glycogen utilization",
    WorkoutType.RACE_PACE: "Race-specific adaptations",
    WorkoutType.TIME_TRIAL: "Competitive readiness",
    WorkoutType.CROSS_TRAINING: "Active recovery and variety",
    WorkoutType.STRENGTH: "Muscular strength",
}

WARMUP_MAX_MIN = 15.0
WARMUP_MAX_FRACTION = 0.4
COOLDOWN_MAX_MIN = 10.0
COOLDOWN_MAX_FRACTION = 0.2
WARMUP_INTENSITY = 65.0
COOLDOWN_INTENSITY = 60.0


class BasicWorkoutGenerator:
    """Default WorkoutGenerator used when no template exists.

    Usage::

        generator = BasicWorkoutGenerator(TrainingMethodology.DANIELS)
        result = generator.generate(WorkoutRequest(WorkoutType.RACE_PACE, ...))
    """

    def __init__(self, methodology: TrainingMethodology = TrainingMethodology.CUSTOM) -> None:
        self.methodology = methodology

    def generate(self, request: WorkoutRequest) -> GeneratedWorkout:
        """Build a warm-up / main / cool-down workout for a request.

        Algorithm:
        1. Duration = request target, or the type default scaled by phase
        2. Clamp duration to ``constraints.available_time_min``
        3. Intensity = methodology default for the type, clamped to
           ``constraints.max_intensity``
        4. Continuous types get one block; others get warm-up (≤15 min,
           ≤40%), main set and cool-down (≤10 min, ≤20%)
        """
        constraints = request.constraints
        duration = request.target_duration_min or self.default_duration(
            request.workout_type, request.phase,
        )
        if constraints.available_time_min is not None:
            duration = min(duration, constraints.available_time_min)

        intensity = self.default_intensity(request.workout_type, request.methodology)
        if constraints.max_intensity is not None:
            intensity = min(intensity, constraints.max_intensity)

        segments = self._build_segments(request.workout_type, duration, intensity)
        workout = build_workout(
            request.workout_type,
            zone_for_intensity(intensity),
            segments,
            _ADAPTATION_TARGETS.get(request.workout_type, "General fitness improvement"),
        )
        logger.debug(
            "Generated %s workout: %.0f min at %.0f%%",
            request.workout_type.label, duration, intensity,
        )
        return GeneratedWorkout(
            workout=workout,
            rationale=self._build_rationale(request, duration, intensity),
        )

    @staticmethod
    def default_duration(workout_type: WorkoutType, phase: TrainingPhase) -> float:
        duration = _DEFAULT_DURATION_MIN.get(workout_type, 60.0)
        return round_half_up(duration * _PHASE_DURATION_FACTOR.get(phase, 1.0))

    def default_intensity(
        self, workout_type: WorkoutType, methodology: TrainingMethodology | None = None,
    ) -> float:
        table = _METHODOLOGY_INTENSITY.get(methodology or self.methodology, _DEFAULT_INTENSITY)
        return table.get(workout_type, 70.0)

    def _build_segments(
        self, workout_type: WorkoutType, duration: float, intensity: float,
    ) -> tuple[WorkoutSegment, ...]:
        main_zone = zone_for_intensity(intensity)
        label = workout_type.label.replace("_", " ")

        if workout_type in _CONTINUOUS_TYPES:
            return (
                WorkoutSegment(round_half_up(duration, 1), intensity, main_zone, f"Custom {label} workout"),
            )

        warmup = min(WARMUP_MAX_MIN, duration * WARMUP_MAX_FRACTION)
        cooldown = min(COOLDOWN_MAX_MIN, duration * COOLDOWN_MAX_FRACTION)
        main = duration - warmup - cooldown
        return (
            WorkoutSegment(
                round_half_up(warmup, 1), min(WARMUP_INTENSITY, intensity), ZoneType.EASY, "Warm-up",
            ),
            WorkoutSegment(round_half_up(main, 1), intensity, main_zone, f"{label.capitalize()} main set"),
            WorkoutSegment(
                round_half_up(cooldown, 1), min(COOLDOWN_INTENSITY, intensity), ZoneType.RECOVERY, "Cool-down",
            ),
        )

    @staticmethod
    def _build_rationale(request: WorkoutRequest, duration: float, intensity: float) -> str:
        parts = [
            f"Generated {request.workout_type.label} workout for {request.phase.label} "
            f"phase following {request.methodology.label} guidelines "
            f"({duration:.0f} min, main set at {intensity:.0f}%)."
        ]
        zone = TRAINING_ZONES[zone_for_intensity(intensity)]
        parts.append(f"{zone.name} zone: {zone.description}.")
        constraints = request.constraints
        if constraints.max_intensity is not None and intensity >= constraints.max_intensity:
            parts.append(f"Intensity capped at {constraints.max_intensity:.0f}%.")
        if constraints.available_time_min is not None and duration >= constraints.available_time_min:
            parts.append(f"Fitted to {constraints.available_time_min:.0f} min available.")
        return " ".join(parts)
