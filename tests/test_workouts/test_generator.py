"""Tests for the fallback workout generator."""

from __future__ import annotations

import pytest

from progression_engine.models.enums import (
    TrainingMethodology,
    TrainingPhase,
    WorkoutType,
    ZoneType,
)
from progression_engine.models.progression import WorkoutConstraints
from progression_engine.workouts.generator import BasicWorkoutGenerator, WorkoutRequest


def _request(workout_type: WorkoutType = WorkoutType.TEMPO, **kwargs) -> WorkoutRequest:
    return WorkoutRequest(
        workout_type=workout_type,
        phase=kwargs.pop("phase", TrainingPhase.BUILD),
        methodology=kwargs.pop("methodology", TrainingMethodology.DANIELS),
        **kwargs,
    )


class TestBasicWorkoutGenerator:
    def setup_method(self) -> None:
        self.generator = BasicWorkoutGenerator(TrainingMethodology.DANIELS)

    def test_default_duration_by_phase(self) -> None:
        assert self.generator.default_duration(WorkoutType.TEMPO, TrainingPhase.BUILD) == 50
        assert self.generator.default_duration(WorkoutType.TEMPO, TrainingPhase.BASE) == 40
        assert self.generator.default_duration(WorkoutType.TEMPO, TrainingPhase.PEAK) == 55

    def test_uses_default_duration(self) -> None:
        result = self.generator.generate(_request())
        assert result.workout.total_duration_min == pytest.approx(50)

    def test_target_duration(self) -> None:
        result = self.generator.generate(_request(target_duration_min=70))
        assert result.workout.total_duration_min == pytest.approx(70)

    def test_clamped_to_available_time(self) -> None:
        request = _request(
            target_duration_min=70, constraints=WorkoutConstraints(available_time_min=40),
        )
        result = self.generator.generate(request)
        assert result.workout.total_duration_min == pytest.approx(40)
        assert "Fitted to 40 min" in result.rationale

    def test_intensity_capped(self) -> None:
        request = _request(
            WorkoutType.VO2MAX, constraints=WorkoutConstraints(max_intensity=70),
        )
        result = self.generator.generate(request)
        assert result.workout.max_intensity == 70
        assert "capped at 70%" in result.rationale

    def test_quality_session_structure(self) -> None:
        result = self.generator.generate(_request(target_duration_min=60))
        warmup, main, cooldown = result.workout.segments
        assert warmup.duration_min == 15
        assert warmup.zone == ZoneType.EASY
        assert cooldown.duration_min == 10
        assert main.duration_min == 35
        assert main.intensity == 88
        assert main.zone == ZoneType.TEMPO

    def test_short_session_proportional_warmup(self) -> None:
        result = self.generator.generate(_request(target_duration_min=20))
        warmup, main, cooldown = result.workout.segments
        assert warmup.duration_min == pytest.approx(8)
        assert cooldown.duration_min == pytest.approx(4)
        assert main.duration_min == pytest.approx(8)

    def test_continuous_types_single_segment(self) -> None:
        result = self.generator.generate(_request(WorkoutType.CROSS_TRAINING))
        assert len(result.workout.segments) == 1

    def test_lydiard_softer_than_daniels(self) -> None:
        lydiard = self.generator.default_intensity(WorkoutType.TEMPO, TrainingMethodology.LYDIARD)
        daniels = self.generator.default_intensity(WorkoutType.TEMPO, TrainingMethodology.DANIELS)
        assert lydiard < daniels

    def test_falls_back_to_own_methodology(self) -> None:
        generator = BasicWorkoutGenerator(TrainingMethodology.LYDIARD)
        assert generator.default_intensity(WorkoutType.TEMPO) == 80

    def test_metrics_derived(self) -> None:
        workout = self.generator.generate(_request(WorkoutType.RACE_PACE)).workout
        assert workout.estimated_tss > 0
        assert workout.recovery_time_hours > 0
        assert workout.workout_type == WorkoutType.RACE_PACE

    def test_rationale(self) -> None:
        result = self.generator.generate(_request(WorkoutType.RACE_PACE, phase=TrainingPhase.PEAK))
        assert result.rationale.startswith(
            "Generated race_pace workout for peak phase following daniels guidelines"
        )

    def test_rationale_describes_main_set_zone(self) -> None:
        result = self.generator.generate(_request(WorkoutType.RACE_PACE))
        # Daniels race pace runs at 85%
        assert "Tempo zone: Comfortably hard, controlled discomfort." in result.rationale

    def test_rationale_zone_follows_cap(self) -> None:
        request = _request(WorkoutType.VO2MAX, constraints=WorkoutConstraints(max_intensity=65))
        result = self.generator.generate(request)
        assert "Easy zone:" in result.rationale
