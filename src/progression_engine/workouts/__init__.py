"""Workout sources — static templates and the fallback generator."""

from progression_engine.workouts.generator import (
    BasicWorkoutGenerator,
    GeneratedWorkout,
    WorkoutGenerator,
    WorkoutRequest,
)
from progression_engine.workouts.templates import (
    WORKOUT_TEMPLATES,
    build_workout,
    get_template,
    has_template,
)

__all__ = [
    "BasicWorkoutGenerator",
    "GeneratedWorkout",
    "WORKOUT_TEMPLATES",
    "WorkoutGenerator",
    "WorkoutRequest",
    "build_workout",
    "get_template",
    "has_template",
]
