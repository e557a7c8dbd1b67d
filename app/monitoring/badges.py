"""
Achievement badges.

Each badge is an independent rule over already-computed statistics and
returns an :class:`AchievementBadge` with ``progress`` capped at
``target``.  ``earned_date`` is the reference date for earned badges:
unlock dates are not stored, so a badge is "earned as of" the day it is
evaluated.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from app.monitoring.streaks import compute_training_streaks
from app.monitoring.weekly import compute_compliance_rate
from app.monitoring.windows import ensure_models, in_window, resolve_as_of, trailing_window
from app.schemas.achievements import AchievementBadge, TrainingStreaks
from app.schemas.daily_load import DailyLoadEntry
from app.schemas.performance import PersonalRecord
from app.schemas.weekly import ComplianceRate
from app.schemas.wellness import WellnessCheckin

WEEK_WARRIOR_DAYS = 7
IRON_STREAK_DAYS = 30
PR_MACHINE_RECORDS = 3
PR_MACHINE_WINDOW_DAYS = 30
RECOVERY_PRO_CHECKINS = 14
RECOVERY_PRO_READINESS = 80.0
CONSISTENT_PERCENT = 90
CENTURY_CLUB_SESSIONS = 100


def _badge(badge_id: str, name: str, description: str, icon: str, value: int, target: int,
           as_of: datetime.date, ) -> AchievementBadge:
    earned = value >= target
    return AchievementBadge(id=badge_id, name=name, description=description, icon=icon, earned=earned,
                            earned_date=as_of if earned else None, progress=max(0, min(value, target)),
                            target=target, )


def week_warrior_badge(streaks: TrainingStreaks, as_of: datetime.date) -> AchievementBadge:
    return _badge("week-warrior", "Week Warrior", "7 consecutive training days", "calendar",
                  streaks.longest_streak, WEEK_WARRIOR_DAYS, as_of)


def iron_streak_badge(streaks: TrainingStreaks, as_of: datetime.date) -> AchievementBadge:
    return _badge("iron-streak", "Iron Streak", "30 consecutive training days", "flame", streaks.longest_streak,
                  IRON_STREAK_DAYS, as_of)


def pr_machine_badge(records: Iterable[PersonalRecord], as_of: datetime.date) -> AchievementBadge:
    start, _ = trailing_window(as_of, PR_MACHINE_WINDOW_DAYS)
    recent = sum(1 for r in records if in_window(r.date_achieved, start, as_of))
    return _badge("pr-machine", "PR Machine", "3 personal records in one month", "trophy", recent,
                  PR_MACHINE_RECORDS, as_of)


def recovery_pro_badge(checkins: Iterable[WellnessCheckin], as_of: datetime.date) -> AchievementBadge:
    """Longest run of consecutive check-ins (not calendar days) above 80."""
    best = run = 0
    for checkin in sorted((c for c in checkins if c.date <= as_of), key=lambda c: c.date):
        run = run + 1 if checkin.readiness_score > RECOVERY_PRO_READINESS else 0
        best = max(best, run)
    return _badge("recovery-pro", "Recovery Pro", "Readiness score above 80 for 14 consecutive check-ins", "heart",
                  best, RECOVERY_PRO_CHECKINS, as_of)


def consistent_badge(compliance: ComplianceRate, as_of: datetime.date) -> AchievementBadge:
    return _badge("consistent", "Consistent", "90%+ training compliance over a month", "target",
                  compliance.monthly_percent, CONSISTENT_PERCENT, as_of)


def century_club_badge(daily_loads: Iterable[DailyLoadEntry], as_of: datetime.date) -> AchievementBadge:
    sessions = sum(1 for e in daily_loads if e.date <= as_of)
    return _badge("century-club", "Century Club", "100 logged training sessions", "zap", sessions,
                  CENTURY_CLUB_SESSIONS, as_of)


def compute_achievement_badges(daily_loads: Iterable, personal_records: Iterable[PersonalRecord] = (),
                               wellness_checkins: Iterable = (), as_of: Optional[datetime.date] = None,
                               streaks: Optional[TrainingStreaks] = None,
                               compliance: Optional[ComplianceRate] = None, ) -> list[AchievementBadge]:
    """Evaluate every badge for one athlete.

    ``streaks`` and ``compliance`` are recomputed from ``daily_loads`` when
    the caller has not already computed them.
    """
    ref = resolve_as_of(as_of)
    loads = ensure_models(daily_loads, DailyLoadEntry, "daily_loads")
    checkins = ensure_models(wellness_checkins, WellnessCheckin, "wellness_checkins")
    records = ensure_models(personal_records, PersonalRecord, "personal_records")
    streaks = streaks or compute_training_streaks(loads, as_of=ref)
    compliance = compliance or compute_compliance_rate(loads, as_of=ref)

    return [
        week_warrior_badge(streaks, ref),
        iron_streak_badge(streaks, ref),
        pr_machine_badge(records, ref),
        recovery_pro_badge(checkins, ref),
        consistent_badge(compliance, ref),
        century_club_badge(loads, ref),
    ]
