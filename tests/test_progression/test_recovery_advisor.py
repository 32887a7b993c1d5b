"""Tests for recovery-day recommendations."""

from __future__ import annotations

import pytest

from progression_engine.models.enums import (
    RecoveryState,
    TrainingMethodology,
    TrainingPhase,
    WorkoutType,
)
from progression_engine.progression.recovery import RecoveryAdvisor
from progression_engine.registry import RuleTables


class TestRecoveryAdvisor:
    def setup_method(self) -> None:
        self.tables = RuleTables.default()
        self.advisor = RecoveryAdvisor(self.tables)

    @pytest.mark.parametrize("methodology", list(TrainingMethodology))
    @pytest.mark.parametrize("phase", list(TrainingPhase))
    def test_intensity_ordering(self, methodology, phase, balanced_load) -> None:
        low, medium, high = (
            self.advisor.recommend(state, methodology, phase, balanced_load)
            for state in (RecoveryState.LOW, RecoveryState.MEDIUM, RecoveryState.HIGH)
        )
        assert low.recommended_intensity < medium.recommended_intensity < high.recommended_intensity

    def test_low_state(self, balanced_load) -> None:
        rec = self.advisor.recommend(
            RecoveryState.LOW, TrainingMethodology.DANIELS, TrainingPhase.BUILD, balanced_load,
        )
        assert rec.recommended_intensity == 50
        assert rec.recommended_duration_min == 30
        assert rec.workout_types == (WorkoutType.RECOVERY, WorkoutType.CROSS_TRAINING)
        assert "Avoid all high-intensity work" in rec.restrictions
        assert "E pace" in rec.rationale

    def test_medium_state(self, balanced_load) -> None:
        rec = self.advisor.recommend(
            RecoveryState.MEDIUM, TrainingMethodology.DANIELS, TrainingPhase.BUILD, balanced_load,
        )
        assert rec.recommended_intensity == 65
        assert rec.recommended_duration_min == 60
        assert rec.workout_types == (WorkoutType.EASY, WorkoutType.RECOVERY, WorkoutType.STEADY)
        assert "easy aerobic work" in rec.rationale

    def test_high_state_uses_baseline(self, balanced_load) -> None:
        rec = self.advisor.recommend(
            RecoveryState.HIGH, TrainingMethodology.PFITZINGER, TrainingPhase.BUILD, balanced_load,
        )
        profile = self.tables.recovery_profile(TrainingMethodology.PFITZINGER)
        assert rec.recommended_intensity == profile.max_intensity
        assert rec.recommended_duration_min == profile.max_duration_min
        assert "normal training progression" in rec.rationale

    @pytest.mark.parametrize("phase", list(TrainingPhase))
    def test_high_state_phase_workouts(self, phase, balanced_load) -> None:
        rec = self.advisor.recommend(RecoveryState.HIGH, TrainingMethodology.CUSTOM, phase, balanced_load)
        assert rec.workout_types == self.tables.phase_workouts(phase)

    def test_peak_phase_allows_race_work(self, balanced_load) -> None:
        rec = self.advisor.recommend(
            RecoveryState.HIGH, TrainingMethodology.DANIELS, TrainingPhase.PEAK, balanced_load,
        )
        assert WorkoutType.RACE_PACE in rec.workout_types
        assert WorkoutType.TIME_TRIAL in rec.workout_types

    def test_lydiard_allows_longer_recovery(self, balanced_load) -> None:
        lydiard = self.advisor.recommend(
            RecoveryState.HIGH, TrainingMethodology.LYDIARD, TrainingPhase.BASE, balanced_load,
        )
        daniels = self.advisor.recommend(
            RecoveryState.HIGH, TrainingMethodology.DANIELS, TrainingPhase.BASE, balanced_load,
        )
        assert lydiard.recommended_duration_min > daniels.recommended_duration_min

    def test_ceilings_never_exceed_baseline(self, balanced_load) -> None:
        for methodology in TrainingMethodology:
            profile = self.tables.recovery_profile(methodology)
            for state in RecoveryState:
                rec = self.advisor.recommend(state, methodology, TrainingPhase.BUILD, balanced_load)
                assert rec.recommended_intensity <= profile.max_intensity
                assert rec.recommended_duration_min <= profile.max_duration_min

    def test_load_does_not_move_ceilings(self, balanced_load, spiked_load) -> None:
        for state in RecoveryState:
            calm = self.advisor.recommend(state, TrainingMethodology.DANIELS, TrainingPhase.BUILD, balanced_load)
            spiked = self.advisor.recommend(state, TrainingMethodology.DANIELS, TrainingPhase.BUILD, spiked_load)
            assert calm.recommended_intensity == spiked.recommended_intensity
            assert calm.recommended_duration_min == spiked.recommended_duration_min
            assert calm.workout_types == spiked.workout_types

    def test_rationale_mentions_load(self, spiked_load) -> None:
        rec = self.advisor.recommend(
            RecoveryState.MEDIUM, TrainingMethodology.DANIELS, TrainingPhase.BUILD, spiked_load,
        )
        assert "1.80" in rec.rationale

    def test_very_high_load_adds_restriction(self, balanced_load, spiked_load) -> None:
        calm = self.advisor.recommend(
            RecoveryState.HIGH, TrainingMethodology.DANIELS, TrainingPhase.BUILD, balanced_load,
        )
        spiked = self.advisor.recommend(
            RecoveryState.HIGH, TrainingMethodology.DANIELS, TrainingPhase.BUILD, spiked_load,
        )
        assert len(spiked.restrictions) == len(calm.restrictions) + 1
        assert any("very high" in r for r in spiked.restrictions)
