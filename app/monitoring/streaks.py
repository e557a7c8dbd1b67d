"""Consecutive-day training streaks."""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from app.monitoring.windows import ensure_models, resolve_as_of
from app.schemas.achievements import TrainingStreaks
from app.schemas.daily_load import DailyLoadEntry

ONE_DAY = datetime.timedelta(days=1)


def longest_run(days: Iterable[datetime.date]) -> int:
    """Length of the longest run of consecutive calendar days."""
    ordered = sorted(set(days))
    longest = 0
    run = 0
    previous = None
    for day in ordered:
        run = run + 1 if previous is not None and day - previous == ONE_DAY else 1
        longest = max(longest, run)
        previous = day
    return longest


def compute_training_streaks(daily_loads: Iterable, as_of: Optional[datetime.date] = None) -> TrainingStreaks:
    """Current and longest training streaks.

    The current streak must end today or yesterday; a rest day today does
    not break it yet.  Several sessions on one day count once.
    """
    ref = resolve_as_of(as_of)
    days = {e.date for e in ensure_models(daily_loads, DailyLoadEntry, "daily_loads") if e.date <= ref}

    cursor = ref if ref in days else ref - ONE_DAY
    current = 0
    while cursor in days:
        current += 1
        cursor -= ONE_DAY

    return TrainingStreaks(current_streak=current, longest_streak=longest_run(days))
