"""Static workout template catalog — canonical Workout per workout type.

Templates are the base case for both progression and substitution. TSS
and recovery time are derived from the segments with the same formulas
the engines use, so a template progressed at multiplier 1.0 keeps its
metrics.

Race pace, time trial, cross-training and strength have no template;
substitutions into those types go through the workout generator.
"""

from __future__ import annotations

from typing import Mapping

from progression_engine.math.training_stress import calculate_recovery_time, calculate_tss
from progression_engine.models.enums import WorkoutType, ZoneType
from progression_engine.models.workout import Workout, WorkoutSegment

TemplateCatalog = Mapping[WorkoutType, Workout]


def build_workout(
    workout_type: WorkoutType,
    primary_zone: ZoneType,
    segments: tuple[WorkoutSegment, ...],
    adaptation_target: str,
) -> Workout:
    """Assemble a Workout and derive its TSS and recovery time."""
    return Workout(
        workout_type=workout_type,
        primary_zone=primary_zone,
        segments=segments,
        adaptation_target=adaptation_target,
        estimated_tss=calculate_tss(segments),
        recovery_time_hours=calculate_recovery_time(workout_type, segments),
    )


def _warmup(duration_min: float = 10) -> WorkoutSegment:
    return WorkoutSegment(duration_min, 65, ZoneType.EASY, "Warm-up")


def _cooldown(duration_min: float = 10) -> WorkoutSegment:
    return WorkoutSegment(duration_min, 60, ZoneType.RECOVERY, "Cool-down")


def _repeats(
    count: int, work: WorkoutSegment, recovery: WorkoutSegment,
) -> tuple[WorkoutSegment, ...]:
    """Interleave ``count`` work reps with recoveries (none after the last rep)."""
    segments: list[WorkoutSegment] = []
    for rep in range(count):
        segments.append(work)
        if rep < count - 1:
            segments.append(recovery)
    return tuple(segments)


WORKOUT_TEMPLATES: dict[WorkoutType, Workout] = {
    WorkoutType.RECOVERY: build_workout(
        WorkoutType.RECOVERY, ZoneType.RECOVERY,
        (WorkoutSegment(30, 50, ZoneType.RECOVERY, "Very easy jog, focus on form"),),
        "Active recovery and blood flow",
    ),
    WorkoutType.EASY: build_workout(
        WorkoutType.EASY, ZoneType.EASY,
        (WorkoutSegment(60, 65, ZoneType.EASY, "Conversational pace, nose breathing"),),
        "Aerobic base, fat oxidation, capillarization",
    ),
    WorkoutType.STEADY: build_workout(
        WorkoutType.STEADY, ZoneType.STEADY,
        (
            _warmup(),
            WorkoutSegment(55, 75, ZoneType.STEADY, "Steady aerobic running"),
            _cooldown(),
        ),
        "Aerobic capacity, mitochondrial density",
    ),
    WorkoutType.LONG_RUN: build_workout(
        WorkoutType.LONG_RUN, ZoneType.EASY,
        (WorkoutSegment(120, 65, ZoneType.EASY, "Steady aerobic effort, maintain form"),),
        "Aerobic endurance, glycogen storage, mental resilience",
    ),
    WorkoutType.TEMPO: build_workout(
        WorkoutType.TEMPO, ZoneType.TEMPO,
        (
            _warmup(),
            WorkoutSegment(30, 84, ZoneType.TEMPO, "Steady tempo effort"),
            _cooldown(),
        ),
        "Lactate clearance, aerobic power",
    ),
    WorkoutType.THRESHOLD: build_workout(
        WorkoutType.THRESHOLD, ZoneType.THRESHOLD,
        (
            _warmup(),
            *_repeats(
                2,
                WorkoutSegment(20, 88, ZoneType.THRESHOLD, "Threshold pace"),
                WorkoutSegment(5, 60, ZoneType.RECOVERY, "Recovery"),
            ),
            _cooldown(),
        ),
        "Lactate threshold improvement",
    ),
    WorkoutType.VO2MAX: build_workout(
        WorkoutType.VO2MAX, ZoneType.VO2_MAX,
        (
            _warmup(15),
            *_repeats(
                4,
                WorkoutSegment(4, 95, ZoneType.VO2_MAX, "VO2max interval"),
                WorkoutSegment(3, 60, ZoneType.RECOVERY, "Recovery"),
            ),
            _cooldown(),
        ),
        "VO2max improvement, aerobic power",
    ),
    WorkoutType.SPEED: build_workout(
        WorkoutType.SPEED, ZoneType.NEUROMUSCULAR,
        (
            _warmup(15),
            *_repeats(
                6,
                WorkoutSegment(0.5, 98, ZoneType.NEUROMUSCULAR, "200m rep"),
                WorkoutSegment(2, 50, ZoneType.RECOVERY, "Walk recovery"),
            ),
            _cooldown(),
        ),
        "Neuromuscular power, running economy",
    ),
    WorkoutType.HILL_REPEATS: build_workout(
        WorkoutType.HILL_REPEATS, ZoneType.VO2_MAX,
        (
            WorkoutSegment(15, 65, ZoneType.EASY, "Warm-up to hills"),
            *_repeats(
                6,
                WorkoutSegment(2, 92, ZoneType.VO2_MAX, "Hill repeat"),
                WorkoutSegment(3, 50, ZoneType.RECOVERY, "Jog down"),
            ),
            _cooldown(),
        ),
        "Power, strength, VO2max",
    ),
    WorkoutType.FARTLEK: build_workout(
        WorkoutType.FARTLEK, ZoneType.TEMPO,
        (
            _warmup(),
            WorkoutSegment(2, 90, ZoneType.THRESHOLD, "Hard surge"),
            WorkoutSegment(3, 65, ZoneType.EASY, "Easy recovery"),
            WorkoutSegment(1, 95, ZoneType.VO2_MAX, "Sprint"),
            WorkoutSegment(4, 65, ZoneType.EASY, "Easy recovery"),
            WorkoutSegment(3, 85, ZoneType.TEMPO, "Tempo surge"),
            WorkoutSegment(2, 65, ZoneType.EASY, "Easy recovery"),
            WorkoutSegment(0.5, 98, ZoneType.NEUROMUSCULAR, "Sprint"),
            WorkoutSegment(4.5, 65, ZoneType.EASY, "Easy recovery"),
            _cooldown(),
        ),
        "Speed variation, mental adaptation",
    ),
    WorkoutType.PROGRESSION: build_workout(
        WorkoutType.PROGRESSION, ZoneType.TEMPO,
        (
            WorkoutSegment(20, 65, ZoneType.EASY, "Easy start"),
            WorkoutSegment(20, 78, ZoneType.STEADY, "Steady pace"),
            WorkoutSegment(20, 85, ZoneType.TEMPO, "Tempo finish"),
            _cooldown(5),
        ),
        "Pacing, fatigue resistance",
    ),
}


def get_template(
    workout_type: WorkoutType, catalog: TemplateCatalog | None = None,
) -> Workout | None:
    """Look up the canonical workout for a type.

    Args:
        workout_type: The type to look up.
        catalog: Catalog to search; defaults to WORKOUT_TEMPLATES.

    Returns:
        The template, or None when the type has no static template.
    """
    if catalog is None:
        catalog = WORKOUT_TEMPLATES
    return catalog.get(workout_type)


def has_template(workout_type: WorkoutType, catalog: TemplateCatalog | None = None) -> bool:
    return get_template(workout_type, catalog) is not None
