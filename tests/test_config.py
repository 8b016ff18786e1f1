"""Tests for settings and logging setup."""

import json
import logging

import pytest
from pydantic import ValidationError

from familymeals.config import Settings
from familymeals.logging_config import (
    LoggingContext,
    StructuredJsonFormatter,
    configure_logging,
    get_logger,
    meal_day_ctx,
    session_id_ctx,
)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("MEALPLAN_MEALS_PER_PLAN", "MEALPLAN_SELECTION_SEED"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)

        assert settings.meals_per_plan == 5
        assert settings.default_unit_cost == 1.0
        assert settings.selection_seed is None
        assert not settings.is_reproducible

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MEALPLAN_MEALS_PER_PLAN", "3")
        monkeypatch.setenv("MEALPLAN_SELECTION_SEED", "42")
        settings = Settings(_env_file=None)

        assert settings.meals_per_plan == 3
        assert settings.selection_seed == 42
        assert settings.is_reproducible

    def test_rejects_zero_meals(self):
        with pytest.raises(ValidationError):
            Settings(meals_per_plan=0)


class TestLoggingContext:
    def test_nested_context_restores(self):
        with LoggingContext(session_id="outer"):
            with LoggingContext(meal_day=2):
                assert session_id_ctx.get() == "outer"
                assert meal_day_ctx.get() == 2
            assert meal_day_ctx.get() is None
        assert session_id_ctx.get() is None

    def test_configure_logging_sets_package_level(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        package_logger = logging.getLogger("familymeals")
        saved_package_level = package_logger.level
        try:
            configure_logging(log_level="debug", json_format=True)

            assert package_logger.level == logging.DEBUG
            assert isinstance(root.handlers[0].formatter, StructuredJsonFormatter)
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            package_logger.setLevel(saved_package_level)

    def test_json_formatter_includes_context(self):
        record = logging.LogRecord(
            "familymeals.plan", logging.INFO, __file__, 1, "Selected recipe", None, None
        )
        with LoggingContext(session_id="abc", meal_day=3):
            payload = json.loads(StructuredJsonFormatter().format(record))

        assert payload["message"] == "Selected recipe"
        assert payload["session_id"] == "abc"
        assert payload["meal_day"] == 3

    def test_logger_adds_context_fields(self, caplog):
        logger = get_logger("familymeals.test")
        with caplog.at_level(logging.INFO, logger="familymeals.test"):
            with LoggingContext(session_id="abc"):
                logger.info("hello")

        assert caplog.records[-1].session_id == "abc"
