"""Progression rule rows keyed by (workout type, methodology).

Each methodology progresses its signature sessions:

    Daniels (2014), Daniels' Running Formula: tempo and interval (I-pace)
    work, with intervals added in steps rather than weekly.

    Lydiard & Gilmour (1962), Run to the Top: long aerobic runs in base,
    hill resistance work dominating the build.

    Pfitzinger & Douglas (2009), Advanced Marathoning: lactate threshold
    volume compounding through the build.

Taper and recovery modifiers are 0: those phases never progress.
"""

from __future__ import annotations

from types import MappingProxyType

from progression_engine.models.enums import (
    ProgressionCurve,
    TrainingMethodology,
    TrainingPhase,
    WorkoutType,
)
from progression_engine.models.progression import ProgressionRule


def _phase_modifiers(base: float, build: float, peak: float) -> MappingProxyType:
    return MappingProxyType({
        TrainingPhase.BASE: base,
        TrainingPhase.BUILD: build,
        TrainingPhase.PEAK: peak,
        TrainingPhase.TAPER: 0.0,
        TrainingPhase.RECOVERY: 0.0,
    })


PROGRESSION_RULES: tuple[ProgressionRule, ...] = (
    # Daniels: 5%/week tempo, capped at +15%
    ProgressionRule(
        workout_type=WorkoutType.TEMPO,
        methodology=TrainingMethodology.DANIELS,
        curve=ProgressionCurve.LINEAR,
        base_increase=0.05,
        max_increase=0.15,
        phase_modifiers=_phase_modifiers(base=0.5, build=1.0, peak=1.2),
    ),
    # Daniels: 15% steps every 2 weeks for VO2max intervals
    ProgressionRule(
        workout_type=WorkoutType.VO2MAX,
        methodology=TrainingMethodology.DANIELS,
        curve=ProgressionCurve.STEPPED,
        base_increase=0.15,
        max_increase=0.40,
        step_size=2,
        phase_modifiers=_phase_modifiers(base=0.3, build=1.2, peak=1.4),
    ),
    # Lydiard: long run emphasised in base, maintained by peak
    ProgressionRule(
        workout_type=WorkoutType.LONG_RUN,
        methodology=TrainingMethodology.LYDIARD,
        curve=ProgressionCurve.LINEAR,
        base_increase=0.08,
        max_increase=0.30,
        phase_modifiers=_phase_modifiers(base=1.2, build=0.8, peak=0.5),
    ),
    # Lydiard: hill phase, strongest in build
    ProgressionRule(
        workout_type=WorkoutType.HILL_REPEATS,
        methodology=TrainingMethodology.LYDIARD,
        curve=ProgressionCurve.STEPPED,
        base_increase=0.20,
        max_increase=0.50,
        step_size=2,
        phase_modifiers=_phase_modifiers(base=1.0, build=1.8, peak=1.4),
    ),
    # Pfitzinger: compounding LT volume
    ProgressionRule(
        workout_type=WorkoutType.THRESHOLD,
        methodology=TrainingMethodology.PFITZINGER,
        curve=ProgressionCurve.EXPONENTIAL,
        base_increase=0.08,
        max_increase=0.30,
        phase_modifiers=_phase_modifiers(base=0.7, build=1.5, peak=1.2),
    ),
)
