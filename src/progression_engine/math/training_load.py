"""Training load summary: acute/chronic EWMA, ratio, trend, recommendation.

References:
    - Banister (1991): impulse-response fitness/fatigue decay
    - Williams et al. (2017): EWMA-based acute:chronic workload ratio
    - Gabbett (2016): ACWR injury risk bands
"""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Iterable

import numpy as np
import pandas as pd

from progression_engine.math.training_stress import round_half_up
from progression_engine.models.enums import (
    ACUTE_LOAD_DAYS,
    ACWR_CAUTION_HIGH,
    ACWR_DANGER_THRESHOLD,
    ACWR_UNDERTRAINED,
    CHRONIC_LOAD_DAYS,
    LOAD_TREND_TOLERANCE,
    LoadTrend,
)
from progression_engine.models.fitness import CompletedWorkout, TrainingLoad


def calculate_decayed_load(
    daily_loads: list[float] | tuple[float, ...],
    time_constant_days: int,
) -> np.ndarray:
    """Exponentially decayed load series, one value per input day.

    Starts from zero load, so a short history is not mistaken for a
    steady state: load_t = load_{t-1} × e^(-1/τ) + tss_t × (1 - e^(-1/τ)).

    Args:
        daily_loads: Daily TSS values, oldest first.
        time_constant_days: Decay constant τ (7 acute, 28 chronic).

    Returns:
        Array of the same length as ``daily_loads``.
    """
    alpha = 1.0 - math.exp(-1.0 / time_constant_days)
    series = pd.Series([0.0, *daily_loads], dtype=np.float64)
    decayed = series.ewm(alpha=alpha, adjust=False).mean()
    return decayed.to_numpy()[1:]


def classify_load_ratio(ratio: float) -> str:
    """Plain-language advice for an acute:chronic ratio."""
    if ratio < ACWR_UNDERTRAINED:
        return "Training load is low. Consider increasing volume gradually."
    if ratio > ACWR_DANGER_THRESHOLD:
        return "Training load is very high. Risk of overtraining. Consider recovery."
    if ratio > ACWR_CAUTION_HIGH:
        return "Training load is high. Monitor fatigue carefully."
    return "Training load is in optimal range for adaptation."


def summarize_training_load(
    daily_loads: list[float] | tuple[float, ...],
) -> TrainingLoad:
    """Build a TrainingLoad summary from daily TSS values.

    Args:
        daily_loads: Daily TSS values, oldest first. Rest days should be 0.

    Returns:
        TrainingLoad with whole-number acute/chronic loads and a ratio
        rounded to two decimals. An empty history gives zero loads and a
        neutral 1.0 ratio.
    """
    if len(daily_loads) == 0:
        return TrainingLoad(
            acute=0.0,
            chronic=0.0,
            ratio=1.0,
            trend=LoadTrend.STABLE,
            recommendation=classify_load_ratio(1.0),
        )

    acute_series = calculate_decayed_load(daily_loads, ACUTE_LOAD_DAYS)
    chronic_series = calculate_decayed_load(daily_loads, CHRONIC_LOAD_DAYS)
    acute = float(acute_series[-1])
    chronic = float(chronic_series[-1])
    ratio = acute / chronic if chronic > 0 else 1.0

    trend = LoadTrend.STABLE
    if len(acute_series) > ACUTE_LOAD_DAYS:
        week_ago = float(acute_series[-(ACUTE_LOAD_DAYS + 1)])
        if acute > week_ago * (1.0 + LOAD_TREND_TOLERANCE):
            trend = LoadTrend.INCREASING
        elif acute < week_ago * (1.0 - LOAD_TREND_TOLERANCE):
            trend = LoadTrend.DECREASING

    return TrainingLoad(
        acute=round_half_up(acute),
        chronic=round_half_up(chronic),
        ratio=round_half_up(ratio, 2),
        trend=trend,
        recommendation=classify_load_ratio(ratio),
    )


def daily_loads_from_completed(workouts: Iterable[CompletedWorkout]) -> list[float]:
    """Aggregate completed workouts into a contiguous daily TSS series.

    Multiple workouts on one day are summed; days without a workout are 0.
    """
    by_day: dict = {}
    for workout in workouts:
        by_day[workout.completed_on] = by_day.get(workout.completed_on, 0.0) + workout.tss
    if not by_day:
        return []

    first, last = min(by_day), max(by_day)
    days = (last - first).days + 1
    return [by_day.get(first + timedelta(days=offset), 0.0) for offset in range(days)]
