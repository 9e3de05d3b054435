"""
This module configures logging for the nullable package.

Each `AppSettings.LOG_MODE` maps to a bundled dictConfig JSON file. `${NAME}`
placeholders in the file (e.g. `${LOG_LEVEL}`) are filled in before the
configuration is applied.
"""
import json
import logging
import pathlib
from logging import config as logging_config
from typing import Any

LOGGER_NAME = "nullable"

LOG_CONFIG_FILES: dict[str, pathlib.Path] = {
    "production": pathlib.Path(__file__).parent / "logconf.prod.json",
    "development": pathlib.Path(__file__).parent / "logconf.dev.json",
    "testing": pathlib.Path(__file__).parent / "logconf.test.json",
}


def load_log_config(path: pathlib.Path, substitutions: dict[str, str] | None = None) -> dict[str, Any]:
    """
    Reads a dictConfig JSON file, replacing `${KEY}` placeholders with `substitutions[KEY]`.

    Raises:
        ValueError: If a placeholder is left over after substitution.
    """
    contents = path.read_text()
    for key, value in (substitutions or {}).items():
        contents = contents.replace(f"${{{key}}}", value)

    if "${" in contents:
        raise ValueError(f"Unresolved placeholder in logging config {path}")

    return json.loads(contents)


def configured_logger(
    *,
    mode: str,
    config_override: pathlib.Path | None = None,
    substitutions: dict[str, str] | None = None,
) -> logging.Logger:
    """
    Applies the logging configuration for `mode` and returns the package logger.

    Args:
        mode (str): One of the keys of `LOG_CONFIG_FILES`. Ignored when
            `config_override` is given.
        config_override (pathlib.Path, optional): A custom logging config file.
        substitutions (dict[str, str], optional): Placeholder values for the config file.
    """
    if config_override:
        path = config_override
    elif mode in LOG_CONFIG_FILES:
        path = LOG_CONFIG_FILES[mode]
    else:
        raise ValueError(f"Invalid mode: {mode}")

    logging_config.dictConfig(load_log_config(path, substitutions))
    return logging.getLogger(LOGGER_NAME)
