"""Workload-risk and analytics engine: pure functions over athlete records."""

from app.monitoring.acwr import compute_athlete_risk_indicators, compute_risk_alerts, compute_risk_level
from app.monitoring.badges import compute_achievement_badges
from app.monitoring.flags import compute_risk_flags
from app.monitoring.injuries import compute_days_lost, summarize_injuries
from app.monitoring.kpis import compute_dashboard_kpis
from app.monitoring.performance import compute_athlete_rankings, compute_personal_records, compute_radar_data
from app.monitoring.streaks import compute_training_streaks
from app.monitoring.trends import compute_athlete_load_trends, compute_load_trends
from app.monitoring.weekly import compute_compliance_rate, compute_week_over_week
from app.monitoring.wellness import compute_readiness_score
from app.monitoring.zones import classify_load_series, compute_load_zones

__all__ = [
    "compute_achievement_badges",
    "compute_athlete_load_trends",
    "compute_athlete_rankings",
    "compute_athlete_risk_indicators",
    "compute_compliance_rate",
    "compute_dashboard_kpis",
    "compute_days_lost",
    "compute_load_trends",
    "compute_load_zones",
    "classify_load_series",
    "compute_personal_records",
    "compute_radar_data",
    "compute_readiness_score",
    "compute_risk_alerts",
    "compute_risk_flags",
    "compute_risk_level",
    "compute_training_streaks",
    "compute_week_over_week",
    "summarize_injuries",
]
