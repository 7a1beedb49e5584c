import logging

import pytest
from pydantic import ValidationError
from paradigm.config.config import Settings
from paradigm.logger.logger import setup_logger


def test_defaults():
    settings = Settings.load({})
    assert settings.LOG_LEVEL == "INFO"
    assert settings.STRICT_MONOIDS is False
    assert settings.LAW_SAMPLE_SIZE == 8


def test_load_from_environment():
    settings = Settings.load(
        {
            "PARADIGM_LOG_LEVEL": "DEBUG",
            "PARADIGM_STRICT_MONOIDS": "true",
            "PARADIGM_LAW_SAMPLE_SIZE": "3",
            "UNRELATED": "ignored",
        }
    )
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.STRICT_MONOIDS is True
    assert settings.LAW_SAMPLE_SIZE == 3


def test_load_reads_os_environ(monkeypatch):
    monkeypatch.setenv("PARADIGM_LAW_SAMPLE_SIZE", "5")
    assert Settings.load().LAW_SAMPLE_SIZE == 5


@pytest.mark.parametrize(
    "environ",
    [
        {"PARADIGM_LAW_SAMPLE_SIZE": "0"},
        {"PARADIGM_LAW_SAMPLE_SIZE": "many"},
        {"PARADIGM_STRICT_MONOIDS": "perhaps"},
        {"PARADIGM_LOG_LEVEL": "verbose"},
        {"PARADIGM_LOG_LEVEL": ""},
    ],
)
def test_invalid_values_raise(environ):
    with pytest.raises(ValidationError):
        Settings.load(environ)


def test_log_level_is_case_insensitive():
    assert Settings.load({"PARADIGM_LOG_LEVEL": "debug"}).LOG_LEVEL == "DEBUG"
    assert Settings(LOG_LEVEL="Warning").LOG_LEVEL == "WARNING"


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.STRICT_MONOIDS = True


def test_setup_logger_configures_once():
    logger = setup_logger(name="paradigm.test", level="WARNING")
    again = setup_logger(name="paradigm.test", level="DEBUG")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_setup_logger_accepts_lower_case_level():
    logger = setup_logger(name="paradigm.test.lower", level="error")
    assert logger.level == logging.ERROR


def test_setup_logger_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level 'verbose'"):
        setup_logger(name="paradigm.test.unknown", level="verbose")
