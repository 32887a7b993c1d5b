"""Environment-variable-based configuration for the weekly progression runner."""

from __future__ import annotations

import os

METHODOLOGY: str = os.environ.get("PROGRESSION_METHODOLOGY", "daniels")
PLAN_WEEKS: int = int(os.environ.get("PROGRESSION_PLAN_WEEKS", "12"))
WORKERS: int = int(os.environ.get("PROGRESSION_WORKERS", "4"))
LOG_LEVEL: str = os.environ.get("PROGRESSION_LOG_LEVEL", "INFO")
