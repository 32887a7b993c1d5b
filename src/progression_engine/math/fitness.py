"""Fitness scoring: reduce a FitnessAssessment to a single 0-10 score.

Weights: VDOT up to 4 points (Daniels' VDOT scale tops out near 80),
weekly mileage up to 3 points, training age up to 2 points. The last
point is reserved for recovery metrics, which are assessed separately.
"""

from __future__ import annotations

from progression_engine.math.training_stress import round_half_up
from progression_engine.models.enums import (
    FITNESS_PROGRESSION_MODIFIER_FLOOR,
    FITNESS_PROGRESSION_MODIFIERS,
    FITNESS_SCORE_MAX,
    MILEAGE_SCORE_POINTS,
    MILEAGE_SCORE_REFERENCE,
    TRAINING_AGE_SCORE_POINTS,
    TRAINING_AGE_SCORE_REFERENCE,
    VDOT_SCORE_POINTS,
    VDOT_SCORE_REFERENCE,
)
from progression_engine.models.fitness import FitnessAssessment


def calculate_fitness_score(fitness: FitnessAssessment) -> float:
    """Score an athlete's capability on a 0-10 scale.

    Args:
        fitness: The assessment to score. Missing fields contribute zero.

    Returns:
        ``fitness.overall_score`` unchanged when set, otherwise the
        weighted sum rounded to one decimal place.
    """
    if fitness.overall_score is not None:
        return fitness.overall_score

    score = 0.0
    if fitness.vdot:
        score += min(fitness.vdot / VDOT_SCORE_REFERENCE * VDOT_SCORE_POINTS, VDOT_SCORE_POINTS)
    if fitness.weekly_mileage:
        score += min(
            fitness.weekly_mileage / MILEAGE_SCORE_REFERENCE * MILEAGE_SCORE_POINTS,
            MILEAGE_SCORE_POINTS,
        )
    if fitness.training_age:
        score += min(
            fitness.training_age / TRAINING_AGE_SCORE_REFERENCE * TRAINING_AGE_SCORE_POINTS,
            TRAINING_AGE_SCORE_POINTS,
        )

    score = max(0.0, min(score, FITNESS_SCORE_MAX))
    return round_half_up(score, 1)


def fitness_progression_modifier(score: float) -> float:
    """Map a fitness score to a progression aggressiveness modifier.

    Fitter athletes progress faster: ≥8 → 1.2, ≥6 → 1.0, ≥4 → 0.8,
    anything lower → 0.6.
    """
    for threshold, modifier in FITNESS_PROGRESSION_MODIFIERS:
        if score >= threshold:
            return modifier
    return FITNESS_PROGRESSION_MODIFIER_FLOOR
