import logging

from nullable.core.config import get_app_settings
from nullable.core.logger.config import configured_logger

__root_logger: None | logging.Logger = None


def get_logger(module: str | None = None) -> logging.Logger:
    """
    Returns the package logger, or a child of it when `module` is given.

    Logging is configured from the application settings the first time this is called.
    """
    global __root_logger

    if __root_logger is None:
        app_settings = get_app_settings()

        substitutions = {
            "LOG_LEVEL": app_settings.LOG_LEVEL.upper(),
        }

        __root_logger = configured_logger(
            mode=app_settings.LOG_MODE,
            config_override=app_settings.LOG_CONFIG_OVERRIDE,
            substitutions=substitutions,
        )

    if module is None:
        return __root_logger

    return __root_logger.getChild(module)
