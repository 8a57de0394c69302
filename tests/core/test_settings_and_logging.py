import json
import logging

import pytest
from pydantic import ValidationError

from src.core.config import AppSettings
from src.core.logging_config import CustomJsonFormatter, setup_logging


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("COLOR_ENGINE_STORAGE_BACKEND", raising=False)
    settings = AppSettings()
    assert settings.api_prefix == "/api"
    assert settings.storage_backend == "memory"
    assert settings.questions_path.endswith("quiz_questions.yml")


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("COLOR_ENGINE_STORAGE_BACKEND", "database")
    monkeypatch.setenv("COLOR_ENGINE_DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("COLOR_ENGINE_LOG_FORMAT", "text")

    settings = AppSettings()
    assert settings.storage_backend == "database"
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.log_format == "text"


def test_settings_reject_unknown_backend(monkeypatch):
    monkeypatch.setenv("COLOR_ENGINE_STORAGE_BACKEND", "redis")
    with pytest.raises(ValidationError):
        AppSettings()


def test_json_formatter_adds_fields():
    formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
    record = logging.LogRecord("color_engine", logging.WARNING, __file__, 12, "Scored %s", ("quiz",), None)

    payload = json.loads(formatter.format(record))
    assert payload["message"] == "Scored quiz"
    assert payload["level"] == "WARNING"
    assert payload["lineno"] == 12
    assert "timestamp" in payload


def test_setup_logging_adds_one_handler():
    root_logger = logging.getLogger()
    setup_logging("DEBUG", "text")
    setup_logging("DEBUG", "text")

    ours = [h for h in root_logger.handlers if getattr(h, "_color_engine_handler", False)]
    assert len(ours) == 1
    assert root_logger.level == logging.DEBUG
