"""Tests for the weekly progression runner."""

from __future__ import annotations

import pytest

from progression_engine.engine import WorkoutProgressionSystem
from progression_engine.models.enums import TrainingMethodology, TrainingPhase, WorkoutType
from progression_engine.models.fitness import FitnessAssessment
from progression_engine.workouts.templates import get_template
from scheduler.weekly import main, phase_for_week, progress_block


class TestPhaseForWeek:
    def test_twelve_week_block(self) -> None:
        phases = [phase_for_week(week, 12) for week in range(1, 13)]
        assert phases == (
            [TrainingPhase.BASE] * 4
            + [TrainingPhase.BUILD] * 4
            + [TrainingPhase.PEAK] * 2
            + [TrainingPhase.TAPER] * 2
        )

    @pytest.mark.parametrize("total_weeks", range(1, 30))
    def test_phases_in_order(self, total_weeks: int) -> None:
        phases = [phase_for_week(week, total_weeks) for week in range(1, total_weeks + 1)]
        assert phases == sorted(phases)
        assert phases[-1] == TrainingPhase.TAPER

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            phase_for_week(13, 12)
        with pytest.raises(ValueError):
            phase_for_week(0, 12)


class TestProgressBlock:
    def test_results_in_week_order(self) -> None:
        system = WorkoutProgressionSystem(TrainingMethodology.DANIELS)
        results = progress_block(
            system, get_template(WorkoutType.TEMPO), 12, FitnessAssessment(overall_score=6.0), workers=4,
        )
        assert [r.week for r in results] == list(range(1, 13))
        assert [r.phase for r in results] == [phase_for_week(w, 12) for w in range(1, 13)]

    def test_taper_weeks_hold_duration(self) -> None:
        template = get_template(WorkoutType.TEMPO)
        system = WorkoutProgressionSystem(TrainingMethodology.DANIELS)
        results = progress_block(system, template, 12, FitnessAssessment(overall_score=6.0), workers=2)
        for result in results:
            if result.phase == TrainingPhase.TAPER:
                assert result.workout.total_duration_min == template.total_duration_min


class TestMain:
    def test_prints_every_week(self, capsys) -> None:
        assert main(["tempo", "--weeks", "6", "--methodology", "daniels", "--workers", "2"]) == 0
        lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("week")]
        assert len(lines) == 6

    def test_type_without_template(self) -> None:
        assert main(["race_pace", "--weeks", "4"]) == 1

    def test_unknown_methodology(self) -> None:
        with pytest.raises(SystemExit):
            main(["tempo", "--methodology", "galloway"])

    def test_invalid_weeks(self) -> None:
        with pytest.raises(SystemExit):
            main(["tempo", "--weeks", "0"])
