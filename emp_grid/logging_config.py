from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

from emp_grid.core.exceptions import ConfigError

LOG_FORMAT_ENV = "EMP_GRID_LOG_FORMAT"
LOG_LEVEL_ENV = "EMP_GRID_LOG_LEVEL"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
# extra= fields from the loaders, validation and layout sizer are appended as keys
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# dash's dev server logs every request, including each clientside resize
NOISY_LOGGERS = ("werkzeug",)


def resolve_level(value: Union[int, str, None]) -> int:
    """
    Logging level from an int, a numeric string or a level name
    ("debug", "WARNING"). None means INFO.
    """
    if value is None or value == "":
        return logging.INFO
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level {value!r}")
    return level


def build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    if format_mode == "json":
        return jsonlogger.JsonFormatter(JSON_FORMAT)
    raise ConfigError(f"Unknown log format {format_mode!r} (expected 'json' or 'plain')")


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> logging.Handler:
    """
    Install a single stream handler on the root logger.

    Format: force_format, else $EMP_GRID_LOG_FORMAT, else "json".
    Level: level, else $EMP_GRID_LOG_LEVEL, else INFO.

    Request logging from the dev server is held at WARNING unless the root
    level is DEBUG. Returns the installed handler.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV) or "json").lower()
    root_level = resolve_level(level if level is not None else os.getenv(LOG_LEVEL_ENV))

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(format_mode))

    root = logging.getLogger()
    root.setLevel(root_level)
    # calling twice (tests, reloader) must not duplicate output
    root.handlers.clear()
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(root_level if root_level <= logging.DEBUG else logging.WARNING)

    return handler
