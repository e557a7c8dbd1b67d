"""Tests for the analytics and threshold services.

These run against an in-memory SQLite record store (see ``conftest``).
"""

import datetime

import pytest
from fastapi import HTTPException

from app.models.athlete import AthleteDB
from app.models.daily_load import DailyLoadDB
from app.models.injury import InjuryDB
from app.models.testing import MetricDB, TrialResultDB
from app.models.testing import TestingSessionDB as SessionDB
from app.models.threshold_setting import ThresholdSettingDB
from app.models.wellness import WellnessCheckinDB
from app.schemas.thresholds import ThresholdSettings
from app.services.analytics_service import AnalyticsService
from app.services.threshold_service import ThresholdService

AS_OF = datetime.date(2025, 3, 31)


def _day(offset: int) -> datetime.date:
    return AS_OF - datetime.timedelta(days=offset)


# ======================================================================
# Fixtures
# ======================================================================


@pytest.fixture
def seeded(session):
    """Two active athletes and one inactive, with a month of loads."""
    alex = AthleteDB(name="Alex")
    bo = AthleteDB(name="Bo")
    cy = AthleteDB(name="Cy", status="inactive")
    session.add_all([alex, bo, cy])
    session.commit()

    # Alex: steady 300 per day for 28 days -> ACWR 1.0
    for offset in range(28):
        session.add(DailyLoadDB(athlete_id=alex.id, date=_day(offset), rpe=5, duration_minutes=60,
                                training_load=300))
    # Bo: 900 today after a quiet month -> ACWR 2.25
    session.add(DailyLoadDB(athlete_id=bo.id, date=_day(0), rpe=9, duration_minutes=100, training_load=900))
    session.add(DailyLoadDB(athlete_id=bo.id, date=_day(20), rpe=7, duration_minutes=100, training_load=700))

    session.add(InjuryDB(athlete_id=bo.id, status="active", body_region="Knee", date_occurred=_day(4)))
    session.add(InjuryDB(athlete_id=alex.id, status="resolved", body_region="Ankle", type="illness",
                         date_occurred=_day(60), days_lost=6))

    session.add(WellnessCheckinDB(athlete_id=bo.id, date=_day(0), readiness_score=30))

    jump = MetricDB(name="Vertical Jump", unit="cm")
    session.add(jump)
    session.commit()

    for athlete, offset, score in [(alex, 40, 50.0), (alex, 3, 55.0), (bo, 3, 58.0)]:
        testing_session = SessionDB(athlete_id=athlete.id, date=_day(offset))
        session.add(testing_session)
        session.commit()
        session.add(TrialResultDB(session_id=testing_session.id, metric_id=jump.id, best_score=score))
    session.commit()

    return {"alex": alex, "bo": bo, "cy": cy, "jump": jump}


# ======================================================================
# AnalyticsService
# ======================================================================


class TestAnalyticsService:
    def test_risk_indicators_for_active_athletes(self, session, seeded):
        indicators = AnalyticsService(session).get_risk_indicators(AS_OF)
        by_name = {i.athlete_name: i for i in indicators}

        assert set(by_name) == {"Alex", "Bo"}
        assert by_name["Alex"].acwr == 1.0
        assert by_name["Alex"].risk_level == "low"
        assert by_name["Bo"].acwr == 2.25
        assert by_name["Bo"].risk_level == "high"
        assert by_name["Bo"].active_injuries == 1
        assert by_name["Bo"].athlete_id == str(seeded["bo"].id)

    def test_risk_alerts(self, session, seeded):
        [alert] = AnalyticsService(session).get_risk_alerts(AS_OF)
        assert alert.athlete_name == "Bo"
        assert alert.severity == "danger"

    def test_team_load_trends(self, session, seeded):
        points = AnalyticsService(session).get_load_trends(days=7, as_of=AS_OF)
        assert points[-1].date == AS_OF
        assert points[-1].training_load == 600

    def test_athlete_load_trends(self, session, seeded):
        points = AnalyticsService(session).get_load_trends(days=30, athlete_id=seeded["bo"].id, as_of=AS_OF)
        assert [p.training_load for p in points] == [700, 900]
        assert all(p.athlete_name == "Bo" for p in points)

    def test_load_trends_unknown_athlete(self, session, seeded):
        with pytest.raises(HTTPException) as exc:
            AnalyticsService(session).get_load_trends(athlete_id=9999, as_of=AS_OF)
        assert exc.value.status_code == 404

    def test_injury_summary(self, session, seeded):
        summary = AnalyticsService(session).get_injury_summary(AS_OF)
        regions = {s.body_region: s for s in summary.by_body_region}
        assert regions["Knee"].days_lost == 4
        assert regions["Ankle"].days_lost == 6

    def test_kpis(self, session, seeded):
        values = {k.label: k.value for k in AnalyticsService(session).get_kpis(AS_OF)}
        assert values["Active athletes"] == 2
        assert values["Open injuries"] == 1
        assert values["Testing sessions this month"] == 2

    def test_rankings(self, session, seeded):
        rankings = AnalyticsService(session).get_rankings(seeded["jump"].id, AS_OF)
        assert [(r.athlete_name, r.rank) for r in rankings] == [("Bo", 1), ("Alex", 2)]

    def test_rankings_unknown_metric(self, session, seeded):
        with pytest.raises(HTTPException) as exc:
            AnalyticsService(session).get_rankings(9999, AS_OF)
        assert exc.value.status_code == 404

    def test_athlete_bundle(self, session, seeded):
        bundle = AnalyticsService(session).get_athlete_analytics(seeded["bo"].id, AS_OF)

        assert bundle.athlete_name == "Bo"
        assert bundle.risk.risk_level == "high"
        assert [f.id for f in bundle.flags] == ["acwr-high", "low-readiness"]
        assert len(bundle.load_zones.days) == 31
        assert bundle.week_over_week.current_week.total_load == 900
        assert bundle.compliance.weekly_actual == 1
        assert bundle.personal_records[0].pr_value == 58.0
        assert bundle.streaks.current_streak == 1
        assert len(bundle.badges) == 6
        assert bundle.injury_days_lost == 4

    def test_athlete_bundle_unknown_athlete(self, session, seeded):
        with pytest.raises(HTTPException) as exc:
            AnalyticsService(session).get_athlete_analytics(9999, AS_OF)
        assert exc.value.status_code == 404


# ======================================================================
# ThresholdService
# ======================================================================


class TestThresholdService:
    def test_defaults_when_nothing_stored(self, session):
        assert ThresholdService(session).get() == ThresholdSettings()

    def test_update_round_trip(self, session):
        data = ThresholdSettings(acwr_moderate=1.2, acwr_high=1.6, load_spike_percent=40, default_days=14)
        assert ThresholdService(session).update(data) == data
        assert ThresholdService(session).get() == data

    def test_non_numeric_value_skipped(self, session):
        session.add(ThresholdSettingDB(key="acwr_high", value="not-a-number"))
        session.add(ThresholdSettingDB(key="acwr_moderate", value="1.1"))
        session.commit()

        thresholds = ThresholdService(session).get()
        assert thresholds.acwr_moderate == 1.1
        assert thresholds.acwr_high == 1.5

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
    def test_non_finite_value_skipped(self, session, raw):
        session.add(ThresholdSettingDB(key="default_days", value=raw))
        session.add(ThresholdSettingDB(key="load_spike_percent", value="45"))
        session.commit()

        thresholds = ThresholdService(session).get()
        assert thresholds.default_days == 30
        assert thresholds.load_spike_percent == 45.0

    def test_stored_moderate_above_high_falls_back_to_defaults(self, session):
        session.add(ThresholdSettingDB(key="acwr_moderate", value="2.0"))
        session.commit()

        assert ThresholdService(session).get() == ThresholdSettings()

    def test_stored_thresholds_change_classification(self, session, seeded):
        ThresholdService(session).update(ThresholdSettings(acwr_moderate=2.5, acwr_high=3.0))
        indicators = AnalyticsService(session).get_risk_indicators(AS_OF)
        assert all(i.risk_level == "low" for i in indicators)
