"""Weekly progression runner — progresses one template across a training block.

Usage:
    python -m scheduler.weekly tempo                   # env-configured defaults
    python -m scheduler.weekly tempo --weeks 16 --methodology pfitzinger
    python -m scheduler.weekly long_run --fitness-score 7.5 --workers 8
"""

from __future__ import annotations

import argparse
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from progression_engine.engine import WorkoutProgressionSystem
from progression_engine.models.enums import TrainingMethodology, TrainingPhase, WorkoutType
from progression_engine.models.fitness import FitnessAssessment
from progression_engine.models.progression import ProgressionParameters
from progression_engine.models.workout import Workout
from progression_engine.workouts.templates import get_template

from scheduler.config import LOG_LEVEL, METHODOLOGY, PLAN_WEEKS, WORKERS

logger = logging.getLogger(__name__)

# Share of the weeks left after the taper given to each phase
_PEAK_FRACTION = 0.2
_BASE_FRACTION = 0.55
_LONG_PLAN_TAPER_THRESHOLD = 8


@dataclass(frozen=True)
class WeekResult:
    week: int
    phase: TrainingPhase
    workout: Workout


def phase_for_week(week: int, total_weeks: int) -> TrainingPhase:
    """Place a 1-indexed week in a base → build → peak → taper block.

    The taper is carved from the end (2 weeks for plans longer than 8
    weeks, otherwise 1); peak takes ~20% of the rest and base ~55% of
    what remains after that. Very short plans collapse to base + taper.
    """
    if not 1 <= week <= total_weeks:
        raise ValueError(f"Week {week} is outside plan range (1-{total_weeks})")

    taper_weeks = 2 if total_weeks > _LONG_PLAN_TAPER_THRESHOLD else 1
    remaining = total_weeks - taper_weeks
    if remaining < 1:
        return TrainingPhase.TAPER

    peak_weeks = max(1, round(remaining * _PEAK_FRACTION)) if remaining >= 3 else 0
    base_weeks = max(1, round((remaining - peak_weeks) * _BASE_FRACTION))
    build_weeks = remaining - peak_weeks - base_weeks

    if week <= base_weeks:
        return TrainingPhase.BASE
    if week <= base_weeks + build_weeks:
        return TrainingPhase.BUILD
    if week <= remaining:
        return TrainingPhase.PEAK
    return TrainingPhase.TAPER


def progress_block(
    system: WorkoutProgressionSystem,
    workout: Workout,
    total_weeks: int,
    fitness: FitnessAssessment,
    workers: int = 1,
) -> list[WeekResult]:
    """Progress ``workout`` for every week of the block.

    Weeks are independent calls against the same immutable rule tables,
    so they run in a thread pool; results come back in week order.
    """

    def _one_week(week: int) -> WeekResult:
        phase = phase_for_week(week, total_weeks)
        params = ProgressionParameters(
            current_week=week,
            total_weeks=total_weeks,
            phase=phase,
            methodology=system.methodology,
            fitness=fitness,
        )
        return WeekResult(week=week, phase=phase, workout=system.progress(workout, params))

    weeks = range(1, total_weeks + 1)
    with ThreadPoolExecutor(max_workers=max(1, workers)) as pool:
        return list(pool.map(_one_week, weeks))


def _parse_enum(enum_cls, value: str):
    try:
        return enum_cls[value.strip().upper()]
    except KeyError:
        choices = ", ".join(member.label for member in enum_cls)
        raise argparse.ArgumentTypeError(f"invalid choice {value!r} (choose from {choices})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Progress a workout template across a training block")
    parser.add_argument(
        "workout_type",
        type=lambda v: _parse_enum(WorkoutType, v),
        help="Template to progress, e.g. tempo, vo2max, long_run",
    )
    # String defaults go through ``type`` too, so env values are validated
    parser.add_argument(
        "--methodology",
        type=lambda v: _parse_enum(TrainingMethodology, v),
        default=METHODOLOGY,
        help="Coaching methodology (env: PROGRESSION_METHODOLOGY)",
    )
    parser.add_argument(
        "--weeks", type=int, default=PLAN_WEEKS,
        help="Weeks in the block (env: PROGRESSION_PLAN_WEEKS)",
    )
    parser.add_argument(
        "--workers", type=int, default=WORKERS,
        help="Thread pool size (env: PROGRESSION_WORKERS)",
    )
    parser.add_argument(
        "--fitness-score", type=float, default=None,
        help="Override the computed 0-10 fitness score",
    )
    parser.add_argument("--weekly-mileage", type=float, default=0.0)
    parser.add_argument("--vdot", type=float, default=None)
    parser.add_argument("--training-age", type=float, default=None)
    parser.add_argument(
        "--log-level", default=LOG_LEVEL,
        help="Logging level (env: PROGRESSION_LOG_LEVEL)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.weeks < 1:
        parser.error(f"--weeks must be >= 1, got {args.weeks}")

    template = get_template(args.workout_type)
    if template is None:
        logger.error("No template for %s workouts", args.workout_type.label)
        return 1

    fitness = FitnessAssessment(
        weekly_mileage=args.weekly_mileage,
        vdot=args.vdot,
        training_age=args.training_age,
        overall_score=args.fitness_score,
    )
    system = WorkoutProgressionSystem(args.methodology)

    logger.info(
        "Progressing %s over %d weeks (%s, %d workers)",
        args.workout_type.label, args.weeks, args.methodology.label, args.workers,
    )
    results = progress_block(system, template, args.weeks, fitness, workers=args.workers)

    for result in results:
        workout = result.workout
        print(
            f"week {result.week:>2} {result.phase.label:<8} "
            f"{workout.total_duration_min:>5.0f} min  "
            f"avg {workout.average_intensity:>5.1f}%  "
            f"TSS {workout.estimated_tss:>5.1f}  "
            f"recovery {workout.recovery_time_hours:>4.0f} h"
        )

    logger.info("Weekly progression complete")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
