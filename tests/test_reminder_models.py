# Tests for reminder models, Result and settings
# Created: 2026-10-19

from pathlib import Path

import pytest

from locationreminders import Error, ReminderRecord, Success
from locationreminders.config import Settings, get_config_dir, get_settings


class TestReminderRecord:
    """Tests for the ReminderRecord dataclass."""

    def test_defaults(self):
        record = ReminderRecord()
        assert record.id
        assert record.title is None
        assert record.description is None
        assert record.location is None
        assert record.latitude is None
        assert record.longitude is None
        assert record.has_coordinates is False

    def test_generated_ids_are_unique(self):
        assert ReminderRecord().id != ReminderRecord().id

    def test_positional_order(self):
        record = ReminderRecord("Title", "Desc", "Place", 1.5, 2.5, "id-1")
        assert record.title == "Title"
        assert record.location == "Place"
        assert record.latitude == 1.5
        assert record.longitude == 2.5
        assert record.id == "id-1"
        assert record.has_coordinates is True

    def test_one_coordinate_is_not_enough(self):
        assert ReminderRecord(latitude=1.0).has_coordinates is False

    def test_to_dict(self):
        record = ReminderRecord(title="Buy milk", latitude=1.0, longitude=2.0, id="1")
        assert record.to_dict() == {
            "title": "Buy milk",
            "description": None,
            "location": None,
            "latitude": 1.0,
            "longitude": 2.0,
            "id": "1",
        }

    def test_from_dict(self):
        record = ReminderRecord.from_dict(
            {"id": "1", "title": "Buy milk", "location": "Shop", "extra": "ignored"}
        )
        assert record == ReminderRecord(title="Buy milk", location="Shop", id="1")

    def test_from_dict_requires_id(self):
        with pytest.raises(KeyError):
            ReminderRecord.from_dict({"title": "No id"})


class TestResult:
    """Tests for Success/Error."""

    def test_success(self):
        result = Success([1, 2])
        assert result.data == [1, 2]
        assert result.is_success
        assert not result.is_error

    def test_error(self):
        result = Error("Reminder not found!")
        assert result.message == "Reminder not found!"
        assert result.is_error
        assert not result.is_success

    def test_equality(self):
        assert Success("a") == Success("a")
        assert Error("x") == Error("x")
        assert Success("x") != Error("x")

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Error("x").message = "y"


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        for name in ("STORE_BACKEND", "DATA_DIR", "DB_URL", "JSON_PATH"):
            monkeypatch.delenv(f"LOCATIONREMINDERS_{name}", raising=False)

        settings = Settings()
        assert settings.store_backend == "sqlite"
        assert settings.data_dir == Path.home() / ".locationreminders"
        assert settings.resolved_db_url().endswith("/.locationreminders/reminders.db")
        assert settings.resolved_json_path() == settings.data_dir / "reminders.json"

    def test_explicit_paths_win(self, tmp_path):
        settings = Settings(
            data_dir=tmp_path, db_url="sqlite://", json_path=tmp_path / "other.json"
        )
        assert settings.resolved_db_url() == "sqlite://"
        assert settings.resolved_json_path() == tmp_path / "other.json"

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOCATIONREMINDERS_STORE_BACKEND", "memory")
        monkeypatch.setenv("LOCATIONREMINDERS_DATA_DIR", str(tmp_path))

        settings = Settings()
        assert settings.store_backend == "memory"
        assert settings.data_dir == tmp_path

    def test_invalid_backend_rejected(self):
        with pytest.raises(ValueError):
            Settings(store_backend="postgres")

    def test_get_settings_is_cached(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOCATIONREMINDERS_DATA_DIR", str(tmp_path))
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
            assert get_config_dir() == tmp_path
        finally:
            get_settings.cache_clear()
