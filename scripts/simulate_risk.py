"""Simulate ACWR, load zones and risk flags over a hand-entered training block.

Runs the analytics engine directly (no database) for one athlete and
prints the day-by-day picture, including a deliberate load spike in the
final week.

Usage:
    python scripts/simulate_risk.py
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.monitoring.acwr import compute_athlete_risk_indicators
from app.monitoring.flags import compute_risk_flags
from app.monitoring.zones import compute_load_zones
from app.schemas.athlete import Athlete
from app.schemas.daily_load import DailyLoadEntry
from app.schemas.thresholds import ThresholdSettings

ATHLETE = Athlete(id="1", name="Sample Athlete")

# ─── (date, rpe, minutes, session type) ─────────────────────────────
RAW_DATA = [
    # Weeks 1-4: steady base
    ("2025-01-06", 6, 60, "Strength"),
    ("2025-01-07", 5, 45, "Conditioning"),
    ("2025-01-09", 7, 60, "Strength"),
    ("2025-01-11", 6, 75, "Practice"),
    ("2025-01-13", 6, 60, "Strength"),
    ("2025-01-14", 5, 45, "Conditioning"),
    ("2025-01-16", 7, 60, "Strength"),
    ("2025-01-18", 6, 75, "Practice"),
    ("2025-01-20", 6, 60, "Strength"),
    ("2025-01-21", 5, 50, "Conditioning"),
    ("2025-01-23", 7, 60, "Strength"),
    ("2025-01-25", 6, 80, "Practice"),
    ("2025-01-27", 6, 60, "Strength"),
    ("2025-01-28", 5, 50, "Conditioning"),
    ("2025-01-30", 7, 65, "Strength"),
    ("2025-02-01", 6, 80, "Practice"),
    # Week 5: tournament block
    ("2025-02-03", 8, 90, "Practice"),
    ("2025-02-04", 9, 90, "Match"),
    ("2025-02-05", 9, 100, "Match"),
    ("2025-02-06", 9, 95, "Match"),
    ("2025-02-07", 7, 60, "Recovery"),
    ("2025-02-08", 10, 110, "Match"),
]


def main():
    cfg = ThresholdSettings()
    loads = [
        DailyLoadEntry(athlete_id=ATHLETE.id, date=datetime.date.fromisoformat(day), rpe=rpe,
                       duration_minutes=minutes, training_load=rpe * minutes, session_type=session_type, )
        for day, rpe, minutes, session_type in RAW_DATA
    ]

    start = loads[0].date
    end = loads[-1].date

    print()
    print("=" * 78)
    print(f"{'Date':<12} {'Load':>6} {'Acute':>7} {'Chronic':>8} {'ACWR':>6}  {'Risk':<9} {'Trend':<10} Zone")
    print("=" * 78)

    day = start
    while day <= end:
        indicator = compute_athlete_risk_indicators([ATHLETE], loads, [], as_of=day, thresholds=cfg)[0]
        zones = compute_load_zones(loads, as_of=day, thresholds=cfg)
        today = zones.days[-1]
        print(f"{day.isoformat():<12} {today.training_load:>6.0f} {indicator.acute_load:>7} "
              f"{indicator.chronic_load:>8} {indicator.acwr:>6.2f}  {indicator.risk_level:<9} "
              f"{indicator.trajectory:<10} {today.zone}")
        day += datetime.timedelta(days=1)

    indicator = compute_athlete_risk_indicators([ATHLETE], loads, [], as_of=end, thresholds=cfg)[0]
    flags = compute_risk_flags(indicator, [], loads, as_of=end, thresholds=cfg)

    print()
    print(f"Flags as of {end.isoformat()}:")
    for flag in flags:
        print(f"  [{flag.severity.upper():<7}] {flag.title}: {flag.message}")
    if not flags:
        print("  (none)")


if __name__ == "__main__":
    main()
