"""Shared test fixtures: workouts, fitness assessments, parameters, loads."""

from __future__ import annotations

from typing import Callable

import pytest

from progression_engine.models.enums import (
    TrainingMethodology,
    TrainingPhase,
    WorkoutType,
    ZoneType,
)
from progression_engine.models.fitness import FitnessAssessment, TrainingLoad
from progression_engine.models.progression import ProgressionParameters
from progression_engine.models.workout import WorkoutSegment
from progression_engine.registry import RuleTables
from progression_engine.workouts.templates import build_workout


@pytest.fixture
def tables() -> RuleTables:
    return RuleTables.default()


@pytest.fixture
def average_fitness() -> FitnessAssessment:
    """Fitness score pinned at 6 → progression modifier 1.0."""
    return FitnessAssessment(weekly_mileage=40.0, vdot=50.0, training_age=4.0, overall_score=6.0)


@pytest.fixture
def elite_fitness() -> FitnessAssessment:
    return FitnessAssessment(weekly_mileage=120.0, vdot=75.0, training_age=12.0, overall_score=9.0)


@pytest.fixture
def novice_fitness() -> FitnessAssessment:
    return FitnessAssessment(weekly_mileage=15.0, overall_score=2.0)


@pytest.fixture
def tempo_workout():
    """Two 20-minute blocks at 88%."""
    return build_workout(
        WorkoutType.TEMPO,
        ZoneType.THRESHOLD,
        (
            WorkoutSegment(20, 88, ZoneType.THRESHOLD, "Tempo block 1"),
            WorkoutSegment(20, 88, ZoneType.THRESHOLD, "Tempo block 2"),
        ),
        "Lactate threshold",
    )


@pytest.fixture
def long_run_workout():
    """90-minute aerobic long run."""
    return build_workout(
        WorkoutType.LONG_RUN,
        ZoneType.EASY,
        (WorkoutSegment(90, 68, ZoneType.EASY, "Long aerobic run"),),
        "Aerobic endurance",
    )


@pytest.fixture
def vo2max_workout():
    return build_workout(
        WorkoutType.VO2MAX,
        ZoneType.VO2_MAX,
        (
            WorkoutSegment(15, 65, ZoneType.EASY, "Warm-up"),
            WorkoutSegment(4, 95, ZoneType.VO2_MAX, "Interval"),
            WorkoutSegment(3, 60, ZoneType.RECOVERY, "Jog"),
            WorkoutSegment(4, 95, ZoneType.VO2_MAX, "Interval"),
            WorkoutSegment(10, 60, ZoneType.RECOVERY, "Cool-down"),
        ),
        "VO2max",
    )


@pytest.fixture
def make_params(average_fitness: FitnessAssessment) -> Callable[..., ProgressionParameters]:
    """Factory for ProgressionParameters with sensible defaults."""

    def _make(
        current_week: int = 4,
        total_weeks: int = 12,
        phase: TrainingPhase = TrainingPhase.BUILD,
        methodology: TrainingMethodology = TrainingMethodology.DANIELS,
        fitness: FitnessAssessment | None = None,
    ) -> ProgressionParameters:
        return ProgressionParameters(
            current_week=current_week,
            total_weeks=total_weeks,
            phase=phase,
            methodology=methodology,
            fitness=fitness or average_fitness,
        )

    return _make


@pytest.fixture
def balanced_load() -> TrainingLoad:
    return TrainingLoad(acute=50.0, chronic=50.0, ratio=1.0)


@pytest.fixture
def spiked_load() -> TrainingLoad:
    return TrainingLoad(acute=90.0, chronic=50.0, ratio=1.8)


@pytest.fixture
def safe_daily_loads() -> tuple[float, ...]:
    """42 days of stable training."""
    return tuple([50.0] * 42)


@pytest.fixture
def spiked_daily_loads() -> tuple[float, ...]:
    """Five light weeks followed by a hard week."""
    return tuple([30.0] * 35 + [120.0] * 7)


@pytest.fixture
def undertrained_daily_loads() -> tuple[float, ...]:
    """Five solid weeks followed by a week off."""
    return tuple([60.0] * 35 + [0.0] * 7)
