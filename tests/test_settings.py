import logging
import os

import pytest
from django.conf import settings

from dailyfile.loggers import DailyFileHandler
from dailyfile.utils import env_flag, format_date


def test_main_logger_writes_to_daily_file():
    handlers = [h for h in logging.getLogger("main").handlers if isinstance(h, DailyFileHandler)]
    assert len(handlers) == 1

    handler = handlers[0]
    assert handler.get_date_pattern() == settings.DAILYFILE_DATE_PATTERN
    assert os.path.dirname(handler.filename) == settings.LOG_DIR
    assert os.path.basename(handler.filename).startswith("daily_")


def test_settings_template_has_single_date_slot():
    config = settings.LOGGING["handlers"]["daily"]
    assert config["filename"].endswith("daily_%s.log")
    assert config["date_pattern"] == "%Y%m%d"
    assert config["append"] is True
    assert len(format_date(config["date_pattern"])) == 8


@pytest.mark.parametrize("value, expected", [
    ("1", True),
    ("true", True),
    (" Yes ", True),
    ("ON", True),
    ("0", False),
    ("false", False),
    ("", False),
])
def test_env_flag_spellings(monkeypatch, value, expected):
    monkeypatch.setenv("DAILYFILE_APPEND", value)
    assert env_flag("DAILYFILE_APPEND", default=True) is expected


def test_env_flag_default_when_unset(monkeypatch):
    monkeypatch.delenv("DAILYFILE_APPEND", raising=False)
    assert env_flag("DAILYFILE_APPEND", default=True) is True
    assert env_flag("DAILYFILE_APPEND") is False
