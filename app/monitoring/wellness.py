"""
Readiness score from a wellness check-in's sub-scores.

Six 1-5 components are averaged and rescaled to 0-100:

- sleep hours, clamped to 4-10 h and mapped linearly onto 1-5,
- sleep quality, mood and hydration as given,
- soreness and fatigue inverted (``6 - x``) so that 5 is always good.
"""

from __future__ import annotations

MIN_SLEEP_HOURS = 4.0
MAX_SLEEP_HOURS = 10.0


def sleep_hours_score(sleep_hours: float) -> float:
    """Map sleep duration onto the 1-5 scale."""
    hours = min(max(sleep_hours, MIN_SLEEP_HOURS), MAX_SLEEP_HOURS)
    return 1 + (hours - MIN_SLEEP_HOURS) / (MAX_SLEEP_HOURS - MIN_SLEEP_HOURS) * 4


def compute_readiness_score(sleep_hours: float, sleep_quality: int, soreness: int, fatigue: int, mood: int,
                            hydration: int, ) -> int:
    """Composite readiness, 0 (worst) to 100 (best)."""
    components = [
        sleep_hours_score(sleep_hours),
        sleep_quality,
        6 - soreness,
        6 - fatigue,
        mood,
        hydration,
    ]
    average = sum(components) / len(components)
    return round((average - 1) / 4 * 100)
