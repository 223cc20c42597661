# File: tests/test_config.py

import logging

from accounthub.core.config import Settings, get_settings
from accounthub.core.logging import HANDLER_NAME, configure_logging


def test_timeout_parsing():
    assert Settings(api_timeout="2.5").api_timeout == 2.5
    assert Settings(api_timeout="none").api_timeout is None
    assert Settings(api_timeout=10).api_timeout == 10.0


def test_defaults_are_validated():
    settings = Settings()

    assert isinstance(settings.api_timeout, float) or settings.api_timeout is None
    assert settings.log_level == settings.log_level.upper()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_is_idempotent():
    logger = configure_logging("DEBUG")
    configure_logging("WARNING")
    ours = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]

    try:
        assert len(ours) == 1
        assert logger.level == logging.WARNING
    finally:
        for handler in ours:
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
