"""Exception hierarchy for the progression engine.

Only malformed boundary input raises; domain edge cases (no rule, no
matching substitution) degrade gracefully instead.
"""

from __future__ import annotations


class ProgressionEngineError(Exception):
    """Base exception for all progression_engine errors."""


class InvalidWorkoutError(ProgressionEngineError, ValueError):
    """The workout handed to the engine is missing or structurally broken."""


class InvalidParametersError(ProgressionEngineError, ValueError):
    """Progression parameters, recovery state or constraints are malformed."""

    def __init__(self, message: str, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name
