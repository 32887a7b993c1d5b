"""Rule tables: frozen lookups over the progression and substitution rows."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from progression_engine.models.enums import (
    TrainingMethodology,
    TrainingPhase,
    WorkoutType,
)
from progression_engine.models.progression import ProgressionRule, SubstitutionRule
from progression_engine.models.recommendation import MethodologyRecoveryProfile
from progression_engine.rules.progression_rules import PROGRESSION_RULES
from progression_engine.rules.recovery_profiles import (
    PHASE_APPROPRIATE_WORKOUTS,
    RECOVERY_PROFILES,
)
from progression_engine.rules.substitution_rules import SUBSTITUTION_RULES


class RuleTables:
    """Immutable rule tables shared by the three engines.

    Rows are indexed once at construction and exposed through read-only
    mappings, so one instance can be shared across threads. Substitution
    candidates are re-sorted by priority on the way in so table authors
    do not have to list them in order.

    Usage::

        tables = RuleTables.default()
        rule = tables.progression_rule(WorkoutType.TEMPO, TrainingMethodology.DANIELS)
    """

    def __init__(
        self,
        progression_rules: Iterable[ProgressionRule] = (),
        substitution_rules: Iterable[SubstitutionRule] = (),
        recovery_profiles: Mapping[TrainingMethodology, MethodologyRecoveryProfile] | None = None,
        phase_workouts: Mapping[TrainingPhase, tuple[WorkoutType, ...]] | None = None,
    ) -> None:
        progression: dict[tuple[WorkoutType, TrainingMethodology], ProgressionRule] = {}
        for rule in progression_rules:
            progression[rule.key] = rule

        substitution: dict[WorkoutType, SubstitutionRule] = {}
        for rule in substitution_rules:
            substitution[rule.original_type] = SubstitutionRule(
                original_type=rule.original_type,
                candidates=tuple(sorted(rule.candidates, key=lambda c: c.priority)),
            )

        self._progression = MappingProxyType(progression)
        self._substitution = MappingProxyType(substitution)
        self._recovery_profiles = MappingProxyType(dict(recovery_profiles or RECOVERY_PROFILES))
        self._phase_workouts = MappingProxyType(dict(phase_workouts or PHASE_APPROPRIATE_WORKOUTS))

    @classmethod
    def default(cls) -> RuleTables:
        """Tables populated with every built-in methodology's rows."""
        return cls(
            progression_rules=PROGRESSION_RULES,
            substitution_rules=SUBSTITUTION_RULES,
        )

    def progression_rule(
        self, workout_type: WorkoutType, methodology: TrainingMethodology,
    ) -> ProgressionRule | None:
        """Look up the progression rule for a (type, methodology) pair."""
        return self._progression.get((workout_type, methodology))

    def substitution_rule(self, original_type: WorkoutType) -> SubstitutionRule | None:
        """Look up the substitution rule for an original workout type."""
        return self._substitution.get(original_type)

    def recovery_profile(self, methodology: TrainingMethodology) -> MethodologyRecoveryProfile:
        """Recovery-day baseline for a methodology, falling back to CUSTOM."""
        return self._recovery_profiles.get(
            methodology, self._recovery_profiles[TrainingMethodology.CUSTOM],
        )

    def phase_workouts(self, phase: TrainingPhase) -> tuple[WorkoutType, ...]:
        """Workout types appropriate for a fully recovered athlete in a phase."""
        return self._phase_workouts.get(phase, (WorkoutType.EASY,))

    @property
    def progression_rules(self) -> Mapping[tuple[WorkoutType, TrainingMethodology], ProgressionRule]:
        return self._progression

    @property
    def substitution_rules(self) -> Mapping[WorkoutType, SubstitutionRule]:
        return self._substitution
