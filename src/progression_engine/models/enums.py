"""Enumerations and tuning constants for the progression engine.

Thresholds follow the coaching literature the methodologies are named after
(Daniels' Running Formula, Lydiard's aerobic base model, Pfitzinger & Douglas'
Advanced Marathoning) and the TSS conventions popularised by Coggan.
"""

from enum import IntEnum, auto


class _LabelledEnum(IntEnum):
    """IntEnum with a lowercase ``label`` used in rationale text."""

    @property
    def label(self) -> str:
        return self.name.lower()


class TrainingPhase(_LabelledEnum):
    """Periodized plan phases."""

    BASE = auto()
    BUILD = auto()
    PEAK = auto()
    TAPER = auto()
    RECOVERY = auto()


class TrainingMethodology(_LabelledEnum):
    """Coaching methodologies that select rule rows.

    DANIELS is pace-based, LYDIARD aerobic-emphasis, PFITZINGER
    threshold-emphasis. HUDSON and CUSTOM use the default tables.
    """

    DANIELS = auto()
    LYDIARD = auto()
    PFITZINGER = auto()
    HUDSON = auto()
    CUSTOM = auto()


class WorkoutType(_LabelledEnum):
    """Workout type tags, roughly ordered by intensity."""

    RECOVERY = auto()
    EASY = auto()
    STEADY = auto()
    TEMPO = auto()
    THRESHOLD = auto()
    VO2MAX = auto()
    SPEED = auto()
    HILL_REPEATS = auto()
    FARTLEK = auto()
    PROGRESSION = auto()
    LONG_RUN = auto()
    RACE_PACE = auto()
    TIME_TRIAL = auto()
    CROSS_TRAINING = auto()
    STRENGTH = auto()


class RecoveryState(_LabelledEnum):
    """Coarse capacity to absorb training stress (LOW = most fatigued)."""

    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()


class ZoneType(_LabelledEnum):
    """Training zones from recovery to neuromuscular."""

    RECOVERY = 1
    EASY = 2
    STEADY = 3
    TEMPO = 4
    THRESHOLD = 5
    VO2_MAX = 6
    NEUROMUSCULAR = 7


class ProgressionCurve(_LabelledEnum):
    """Shape of week-over-week difficulty increase."""

    LINEAR = auto()
    EXPONENTIAL = auto()
    STEPPED = auto()
    PLATEAU = auto()


class LoadTrend(_LabelledEnum):
    """Direction of acute training load over the past week."""

    INCREASING = auto()
    STABLE = auto()
    DECREASING = auto()


# ---------------------------------------------------------------------------
# Progression constants
# ---------------------------------------------------------------------------

# Phases in which progression never advances difficulty
NO_PROGRESSION_PHASES = frozenset({TrainingPhase.TAPER, TrainingPhase.RECOVERY})

# Maximum segment intensity (% effort) allowed in each phase
PHASE_INTENSITY_CEILING = {
    TrainingPhase.BASE: 85.0,
    TrainingPhase.BUILD: 95.0,
    TrainingPhase.PEAK: 100.0,
    TrainingPhase.TAPER: 90.0,
    TrainingPhase.RECOVERY: 70.0,
}

# Cap on the duration multiplier by workout type
DURATION_MULTIPLIER_CAP = {
    WorkoutType.LONG_RUN: 1.5,
    WorkoutType.SPEED: 1.2,
    WorkoutType.VO2MAX: 1.2,
    WorkoutType.TEMPO: 1.3,
    WorkoutType.THRESHOLD: 1.3,
}
DEFAULT_DURATION_MULTIPLIER_CAP = 1.25

# Intensity only takes half of the multiplier's excess over 1.0
INTENSITY_PROGRESSION_FRACTION = 0.5

# Segments progressed beyond this multiplier get a description annotation
PROGRESSION_ANNOTATION_THRESHOLD = 1.1

DEFAULT_STEP_SIZE_WEEKS = 2
DEFAULT_PLATEAU_FRACTION = 0.7  # Plateau begins at 70% of the plan

# Fitness score → progression modifier, checked top-down
FITNESS_PROGRESSION_MODIFIERS = (
    (8.0, 1.2),  # Advanced
    (6.0, 1.0),  # Intermediate
    (4.0, 0.8),  # Beginner
)
FITNESS_PROGRESSION_MODIFIER_FLOOR = 0.6

# ---------------------------------------------------------------------------
# Fitness score weights (out of 10)
# ---------------------------------------------------------------------------
FITNESS_SCORE_MAX = 10.0
VDOT_SCORE_POINTS = 4.0
VDOT_SCORE_REFERENCE = 80.0
MILEAGE_SCORE_POINTS = 3.0
MILEAGE_SCORE_REFERENCE = 100.0
TRAINING_AGE_SCORE_POINTS = 2.0
TRAINING_AGE_SCORE_REFERENCE = 10.0

# ---------------------------------------------------------------------------
# Training stress / recovery time
# ---------------------------------------------------------------------------
RECOVERY_BASE_HOURS = 24.0
RECOVERY_REFERENCE_INTENSITY = 80.0
RECOVERY_REFERENCE_DURATION_MIN = 60.0

# Workout-type multiplier on the 24 h recovery baseline
RECOVERY_MULTIPLIERS = {
    WorkoutType.RECOVERY: 0.5,
    WorkoutType.EASY: 1.0,
    WorkoutType.STEADY: 1.5,
    WorkoutType.TEMPO: 2.0,
    WorkoutType.THRESHOLD: 3.0,
    WorkoutType.VO2MAX: 4.0,
    WorkoutType.SPEED: 3.5,
}
DEFAULT_RECOVERY_MULTIPLIER = 1.0

# ---------------------------------------------------------------------------
# Substitution constants
# ---------------------------------------------------------------------------
SUBSTITUTION_MIN_INTENSITY = 50.0
SUBSTITUTION_MAX_INTENSITY = 100.0

# Intensity cap handed to the generator; HIGH is unconstrained
RECOVERY_STATE_MAX_INTENSITY = {
    RecoveryState.LOW: 70.0,
    RecoveryState.MEDIUM: 85.0,
    RecoveryState.HIGH: None,
}

# ---------------------------------------------------------------------------
# Recovery-day ceilings
# ---------------------------------------------------------------------------
LOW_RECOVERY_MAX_INTENSITY = 50.0
LOW_RECOVERY_MAX_DURATION_MIN = 30.0
MEDIUM_RECOVERY_MAX_INTENSITY = 65.0
MEDIUM_RECOVERY_MAX_DURATION_MIN = 60.0

# ---------------------------------------------------------------------------
# Training load (EWMA) — Banister impulse-response decay constants
# ---------------------------------------------------------------------------
ACUTE_LOAD_DAYS = 7
CHRONIC_LOAD_DAYS = 28
LOAD_TREND_TOLERANCE = 0.10  # ±10% week-over-week counts as stable

# ACWR bands — Gabbett (2016), Br J Sports Med 50(5):273-280
ACWR_UNDERTRAINED = 0.8
ACWR_CAUTION_HIGH = 1.3
ACWR_DANGER_THRESHOLD = 1.5
