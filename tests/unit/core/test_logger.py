"""Tests for the log context carried by every record."""

import pytest
from loguru import logger

from app.core.logger import log_context, setup_logger
from app.models.athlete import AthleteDB


@pytest.fixture
def records():
    """Capture ``context|message`` lines for the duration of a test."""
    lines = []
    sink_id = logger.add(lambda message: lines.append(str(message).rstrip("\n")),
                         format="{extra[context]}|{message}", level="DEBUG")
    yield lines
    logger.remove(sink_id)


class TestSetupLogger:
    def test_file_sink_includes_context(self, tmp_path):
        log_file = tmp_path / "logs" / "monitor.log"
        setup_logger(level="DEBUG", log_file=str(log_file))
        try:
            with log_context("athlete=7"):
                logger.info("[RISK] inside")
            logger.info("[RISK] outside")
        finally:
            setup_logger()

        lines = log_file.read_text().splitlines()
        assert any("| athlete=7 |" in line and line.endswith("inside") for line in lines)
        assert any("| - |" in line and line.endswith("outside") for line in lines)


class TestLogContext:
    def test_nested_context_restored(self, records):
        with log_context("GET /api/v1/analytics/risk"):
            with log_context("athlete=3"):
                logger.info("inner")
            logger.info("outer")
        logger.info("none")

        assert records == ["athlete=3|inner", "GET /api/v1/analytics/risk|outer", "-|none"]

    def test_request_path_attached(self, client, records):
        client.get("/api/v1/analytics/risk", params={"as_of": "2025-03-31"})
        assert any(line.startswith("GET /api/v1/analytics/risk|[ANALYTICS]") for line in records)

    def test_athlete_attached(self, client, session, records):
        athlete = AthleteDB(name="Alex")
        session.add(athlete)
        session.commit()

        client.get(f"/api/v1/analytics/athletes/{athlete.id}", params={"as_of": "2025-03-31"})
        assert any(line.startswith(f"athlete={athlete.id}|[ANALYTICS] Athlete") for line in records)
