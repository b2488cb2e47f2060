"""
Multi-logger setup.
Logs to the console, and optionally to a rotating file under LOG_DIR.
"""

import logging
import os
from datetime import UTC, datetime
from logging.handlers import TimedRotatingFileHandler

import pytz

# Display timezone for console timestamps
TIMEZONE = pytz.timezone(os.getenv("LOG_TIMEZONE", "UTC"))
LOG_DIR = os.getenv("LOG_DIR", "/tmp/log/podsearch")

Logger_Cache: dict[str, logging.Logger] = {}
Default_Level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
if not isinstance(Default_Level, int):
    Default_Level = logging.INFO


def set_level(level: int) -> None:
    """Change the level used for loggers created after this call and for cached ones."""
    global Default_Level
    Default_Level = level
    for logger in Logger_Cache.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


class LocalTimeFormatter(logging.Formatter):
    def format(self, record):
        utc_dt = datetime.fromtimestamp(record.created, UTC).replace(tzinfo=pytz.utc)
        record.local_time = utc_dt.astimezone(TIMEZONE).strftime("%I:%M:%S %p")
        record.short_name = record.name[0:24]
        if record.levelno == logging.WARNING:
            self._style._fmt = "%(local_time)-10s %(short_name)-24s:%(levelname)-8s =====> %(message)s"
        elif record.levelno >= logging.ERROR:
            self._style._fmt = (
                "\n%(local_time)-10s %(short_name)-24s =====> ERROR \n%(message)s\n---END ERROR ---"
            )
        else:
            self._style._fmt = "%(local_time)-10s %(short_name)-24s:%(levelname)-8s %(message)s"
        return super().format(record)


class LocalFileFormatter(logging.Formatter):
    def format(self, record):
        utc_dt = datetime.fromtimestamp(record.created, UTC)
        record.utc_time = utc_dt.strftime("%Y-%m-%d %H:%M:%S")
        if record.levelno >= logging.WARNING:
            self._style._fmt = "\n===== %(levelname)s Source: %(name)s =====\n%(utc_time)s:%(message)s\n"
        else:
            self._style._fmt = "%(utc_time)s:%(name)15s:%(levelname)s %(message)s"
        return super().format(record)


def _file_handler(filename: str, level: int) -> logging.Handler:
    os.makedirs(LOG_DIR, exist_ok=True)
    fullpath = os.path.join(LOG_DIR, os.path.basename(filename))
    try:
        handler: logging.Handler = TimedRotatingFileHandler(fullpath, when="midnight", backupCount=30)
    except FileNotFoundError:
        handler = logging.FileHandler(fullpath)
    handler.setLevel(level)
    handler.setFormatter(LocalFileFormatter())
    return handler


def get_logger(name: str, level: int | None = None, filename: str | None = None) -> logging.Logger:
    """Return a cached logger with a console handler and an optional file handler."""
    if name in Logger_Cache:
        return Logger_Cache[name]

    if level is None:
        level = Default_Level
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(LocalTimeFormatter())
    logger.addHandler(console)

    if filename:
        logger.addHandler(_file_handler(filename, level))

    logger.propagate = False
    Logger_Cache[name] = logger
    return logger
