import json
import logging
from pathlib import Path

import pytest

from nullable.core.config import get_app_settings
from nullable.core.exceptions import DecodeError, NullableError, TypeMismatchError
from nullable.core.logger import config as logger_config
from nullable.core.root_logger import get_logger
from nullable.core.settings import AppSettings


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    logger_config.configured_logger(mode="testing", substitutions={"LOG_LEVEL": "DEBUG"})


def test_settings_from_environment():
    settings = get_app_settings()
    assert settings.TESTING
    assert settings.LOG_MODE == "testing"
    assert settings.LOG_LEVEL == "debug"


@pytest.mark.parametrize(
    "production, testing, mode",
    [(False, False, "development"), (True, False, "production"), (True, True, "testing")],
)
def test_log_mode(production: bool, testing: bool, mode: str):
    assert AppSettings(PRODUCTION=production, TESTING=testing).LOG_MODE == mode


def test_log_level_is_normalized():
    assert AppSettings(LOG_LEVEL=" WARNING ").LOG_LEVEL == "warning"
    with pytest.raises(ValueError):
        AppSettings(LOG_LEVEL="loud")


def test_get_logger():
    root = get_logger()
    assert root.name == "nullable"
    assert get_logger("db").name == "nullable.db"
    assert get_logger() is root


@pytest.mark.parametrize("production, testing", [(False, False), (True, False), (False, True)])
def test_every_log_mode_has_a_config_file(production: bool, testing: bool):
    mode = AppSettings(PRODUCTION=production, TESTING=testing).LOG_MODE
    assert logger_config.LOG_CONFIG_FILES[mode].is_file()


@pytest.mark.parametrize("mode", ["production", "development", "testing"])
def test_bundled_log_configs(mode: str):
    config = logger_config.load_log_config(logger_config.LOG_CONFIG_FILES[mode], {"LOG_LEVEL": "INFO"})
    assert config["loggers"]["nullable"]["level"] == "INFO"

    logger = logger_config.configured_logger(mode=mode, substitutions={"LOG_LEVEL": "INFO"})
    assert logger.level == logging.INFO


def test_unresolved_placeholder_is_rejected():
    with pytest.raises(ValueError, match="Unresolved placeholder"):
        logger_config.load_log_config(logger_config.LOG_CONFIG_FILES["testing"])


def test_log_config_override(tmp_path: Path):
    override = tmp_path / "logconf.json"
    override.write_text(
        json.dumps(
            {
                "version": 1,
                "disable_existing_loggers": False,
                "loggers": {"nullable": {"level": "${LOG_LEVEL}", "propagate": True}},
            }
        )
    )

    logger = logger_config.configured_logger(
        mode="unused", config_override=override, substitutions={"LOG_LEVEL": "ERROR"}
    )
    assert logger.level == logging.ERROR


def test_invalid_log_mode():
    with pytest.raises(ValueError):
        logger_config.configured_logger(mode="staging")


def test_exception_hierarchy():
    assert issubclass(DecodeError, ValueError)
    assert issubclass(DecodeError, NullableError)
    assert issubclass(TypeMismatchError, TypeError)
    assert issubclass(TypeMismatchError, NullableError)
    assert str(TypeMismatchError(1.5)) == "cannot scan float into Byte"
