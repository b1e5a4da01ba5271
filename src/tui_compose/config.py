"""Configuration constants and environment settings for tui_compose."""

import logging
import os
from pathlib import Path

VERSION = "0.1.0"

APP_NAME = "tui-compose"

# Screen layout budget (rows)
TITLE_HEIGHT = 1
MENU_HEIGHT = 2
# Status is drawn on the 2nd last row so the console never scrolls
STATUS_HEIGHT = 2

MENU_PREFIX = "Menu"
ITEM_GAP = 3  # Render gap between menu items
FORM_INPUT_COLUMN = 20

ENV_LOG_FILE = "TUI_COMPOSE_LOG_FILE"
ENV_LOG_LEVEL = "TUI_COMPOSE_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_log_file() -> Path | None:
    """Get the log file path from the environment, if one is configured.

    Returns:
        Path to the log file, or None when logging is disabled
    """
    env_file = os.environ.get(ENV_LOG_FILE)
    if not env_file:
        return None
    if env_file.startswith("~/"):
        return Path.home() / env_file[2:]
    return Path(env_file)


def get_log_level() -> int:
    """Get the logging level from the environment (default WARNING)."""
    name = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.WARNING


def configure_logging() -> None:
    """Route package logging to a file, never to the terminal being drawn on."""
    package_logger = logging.getLogger("tui_compose")
    package_logger.setLevel(get_log_level())
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    log_file = get_log_file()
    if log_file is None:
        package_logger.addHandler(logging.NullHandler())
        return

    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False
