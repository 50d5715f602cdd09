"""
Tests for core utilities: configuration, calendar helpers, logging, timestep
parsing and exceptions.
"""

import json
import logging
from datetime import date, datetime

import pytest
import pytz

from reference_et.core import (
    Config,
    DateUtils,
    InvalidInputError,
    InvalidTimestepError,
    LoggerContext,
    MissingArgumentError,
    ReferenceETError,
    setup_logger,
)
from reference_et.models import Timestep


class TestConfig:
    """Configuration loading and overrides."""

    def test_defaults(self):
        config = Config()
        assert config.config_file is None
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.timezone == "UTC"
        assert config.hargreaves_coefficient == 0.0023

    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "calendar": {"timezone": "Europe/Istanbul"},
            "hargreaves_samani": {"coefficient": 0.0025},
        }))

        config = Config(str(config_file))

        assert config.timezone == "Europe/Istanbul"
        assert config.hargreaves_coefficient == 0.0025
        assert config.log_level == "INFO", "Sections absent from the file keep defaults"

    def test_config_file_from_env(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {"level": "debug"}}))
        monkeypatch.setenv("REFERENCE_ET_CONFIG", str(config_file))

        assert Config().log_level == "DEBUG"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "missing.json"))

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("REFERENCE_ET_TIMEZONE", "Asia/Tokyo")
        monkeypatch.setenv("REFERENCE_ET_HS_COEFFICIENT", "0.0030")
        monkeypatch.setenv("REFERENCE_ET_LOG_LEVEL", "warning")

        config = Config()

        assert config.timezone == "Asia/Tokyo"
        assert config.hargreaves_coefficient == 0.0030
        assert config.log_level == "WARNING"

    def test_non_numeric_coefficient_env(self, monkeypatch):
        monkeypatch.setenv("REFERENCE_ET_HS_COEFFICIENT", "abc")
        with pytest.raises(ValueError):
            Config()

    @pytest.mark.parametrize("content", [
        {"hargreaves_samani": {"coefficient": -1}},
        {"calendar": {"timezone": "Mars/Olympus"}},
        {"logging": {"level": "LOUD"}},
    ])
    def test_invalid_values(self, tmp_path, content):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps(content))
        with pytest.raises(ValueError):
            Config(str(config_file))

    def test_get_dot_notation(self):
        config = Config()
        assert config.get("calendar.timezone") == "UTC"
        assert config.get("calendar.missing", "fallback") == "fallback"
        assert config.get("calendar.timezone.deeper", 1) == 1


class TestDateUtils:
    """Calendar helpers."""

    @pytest.mark.parametrize("day,expected", [
        (date(2022, 1, 1), 1),
        (date(2022, 12, 31), 365),
        (date(2024, 12, 31), 366),
        (datetime(2024, 3, 1, 12, 30), 61),
    ])
    def test_day_of_year(self, day, expected):
        assert DateUtils.day_of_year(day) == expected

    @pytest.mark.parametrize("day,expected", [
        (date(2022, 1, 20), 15.5),
        (date(2023, 2, 1), 45.0),
        (date(2024, 2, 1), 45.5),
        (date(2022, 7, 9), 196.5),
        (date(2022, 12, 31), 349.5),
    ])
    def test_mid_month_day(self, day, expected):
        assert DateUtils.mid_month_day(day) == expected

    def test_days_in_month(self):
        assert DateUtils.days_in_month(2024, 2) == 29
        assert DateUtils.days_in_month(2023, 2) == 28
        assert DateUtils.days_in_month(2023, 4) == 30

    def test_aware_datetime_converted(self):
        stamp = datetime(2022, 6, 30, 22, 0, tzinfo=pytz.UTC)
        assert DateUtils.to_calendar_date(stamp, "Europe/Istanbul") == date(2022, 7, 1)
        assert DateUtils.to_calendar_date(stamp) == date(2022, 6, 30)

    def test_naive_datetime_not_converted(self):
        stamp = datetime(2022, 6, 30, 22, 0)
        assert DateUtils.to_calendar_date(stamp, "Europe/Istanbul") == date(2022, 6, 30)

    def test_rejects_non_dates(self):
        with pytest.raises(TypeError):
            DateUtils.to_calendar_date("2022-06-30")

    def test_invalid_timezone(self):
        with pytest.raises(ValueError):
            DateUtils.parse_timezone("Nowhere/Special")


class TestTimestep:

    @pytest.mark.parametrize("value,expected", [
        ("daily", Timestep.DAILY),
        ("Daily", Timestep.DAILY),
        (" MONTHLY ", Timestep.MONTHLY),
        (Timestep.MONTHLY, Timestep.MONTHLY),
    ])
    def test_parse(self, value, expected):
        assert Timestep.parse(value) is expected

    @pytest.mark.parametrize("value", ["hourly", "", None, 1])
    def test_parse_invalid(self, value):
        with pytest.raises(InvalidTimestepError) as exc_info:
            Timestep.parse(value)
        assert "daily" in str(exc_info.value)


class TestExceptions:

    def test_hierarchy(self):
        assert issubclass(MissingArgumentError, ReferenceETError)
        assert issubclass(MissingArgumentError, TypeError)
        assert issubclass(InvalidInputError, ValueError)
        assert issubclass(InvalidTimestepError, ValueError)

    def test_messages(self):
        error = MissingArgumentError("t_mean", "monthly only")
        assert str(error) == "Missing required argument: t_mean (monthly only)"

        error = InvalidInputError("north_latitude", 75, "0 < NL <= 60")
        assert error.value == 75
        assert "north_latitude" in str(error)


class TestLogger:

    def test_setup_console_only(self):
        logger = setup_logger("reference_et_test_console", log_level="DEBUG")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_setup_with_file(self, tmp_path):
        log_file = tmp_path / "logs" / "reference_et.log"
        logger = setup_logger("reference_et_test_file", log_file=str(log_file))
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "hello" in log_file.read_text(encoding="utf-8")

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_setup_is_idempotent(self):
        setup_logger("reference_et_test_repeat")
        logger = setup_logger("reference_et_test_repeat")
        assert len(logger.handlers) == 1

    def test_logger_context_reraises(self, caplog):
        logger = logging.getLogger("reference_et_test_context")
        with caplog.at_level(logging.DEBUG, logger="reference_et_test_context"):
            with pytest.raises(InvalidInputError):
                with LoggerContext(logger, "failing operation"):
                    raise InvalidInputError("x", 1, "something else")

        assert "Starting failing operation" in caplog.text
        assert "Failed failing operation" in caplog.text
