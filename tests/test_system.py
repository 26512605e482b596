"""Tests for the health, picker and settings plumbing."""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from tasklist.config import Settings, load_settings
from tasklist.picker import DatePicker, upcoming_dates


def test_health_check(client: TestClient) -> None:
    """Test that health check returns healthy status."""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


def test_get_picker(client: TestClient) -> None:
    """Test reading the picker state."""
    response = client.get("/api/picker")
    assert response.status_code == 200
    data = response.json()
    assert data["selected"] == "2024-03-01T09:30:00"
    assert len(data["upcoming"]) == 7


def test_select_due_date(client: TestClient) -> None:
    """Test changing the selected due date."""
    response = client.put("/api/picker", json={"selected": "2024-12-24T20:00:00"})
    assert response.status_code == 200
    assert response.json()["selected"] == "2024-12-24T20:00:00"
    assert client.get("/api/picker").json()["selected"] == "2024-12-24T20:00:00"


def test_select_due_date_invalid(client: TestClient) -> None:
    """Test that a malformed timestamp is rejected."""
    response = client.put("/api/picker", json={"selected": "next tuesday"})
    assert response.status_code == 422


def test_upcoming_dates() -> None:
    """Test that upcoming dates step one day at a time from the start."""
    start = datetime(2024, 2, 27, 14, 5)
    dates = upcoming_dates(start)

    assert len(dates) == 7
    assert dates[0] == start
    assert dates[2] == datetime(2024, 2, 29, 14, 5)
    assert dates[-1] == start + timedelta(days=6)
    assert upcoming_dates(start, days=1) == [start]


def test_date_picker_select_and_reset() -> None:
    """Test selecting a date and going back to now."""
    picker = DatePicker(datetime(2020, 1, 1))
    picker.select(datetime(2021, 6, 1, 12, 0))
    assert picker.selected == datetime(2021, 6, 1, 12, 0)

    picker.reset()
    assert picker.selected > datetime(2021, 6, 1, 12, 0)


class TestSettings:
    """Settings loading tests."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test defaults when nothing is set."""
        for name in (
            "TASKLIST_LOG_FORMAT",
            "TASKLIST_LOG_LEVEL",
            "TASKLIST_CORS_ORIGINS",
            "TASKLIST_UPCOMING_DAYS",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = load_settings()
        assert settings.log_format == "dev"
        assert settings.log_level == "INFO"
        assert settings.cors_origins == ["http://localhost:3000"]
        assert settings.upcoming_days == 7

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test reading every variable."""
        monkeypatch.setenv("TASKLIST_LOG_FORMAT", "JSON")
        monkeypatch.setenv("TASKLIST_LOG_LEVEL", "debug")
        monkeypatch.setenv("TASKLIST_CORS_ORIGINS", "http://a.test, http://b.test,")
        monkeypatch.setenv("TASKLIST_UPCOMING_DAYS", "14")

        settings = load_settings()
        assert settings.log_format == "json"
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.upcoming_days == 14

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid_upcoming_days_falls_back(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Test that a bad day count keeps the default."""
        monkeypatch.setenv("TASKLIST_UPCOMING_DAYS", value)
        assert load_settings().upcoming_days == 7

    def test_upcoming_days_minimum(self) -> None:
        """Test that the model itself rejects a zero day count."""
        with pytest.raises(ValidationError):
            Settings(upcoming_days=0)
