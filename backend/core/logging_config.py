from __future__ import annotations

import logging
import logging.config
from collections.abc import Iterable
from pathlib import Path

from backend.core.config import settings

LOG_DIR = settings.LOG_DIR
EXCLUDED_ACCESS_PATHS = ("/health",)


class AccessPathExcludeFilter(logging.Filter):
    """Drop uvicorn access lines for noisy endpoints such as health probes."""

    def __init__(self, paths: Iterable[str] = EXCLUDED_ACCESS_PATHS) -> None:
        super().__init__()
        self.paths = frozenset(paths)

    def filter(self, record: logging.LogRecord) -> bool:
        args = record.args
        # uvicorn.access: (client_addr, method, path, http_version, status_code)
        if isinstance(args, tuple) and len(args) >= 3:
            path = str(args[2]).split("?", 1)[0]
            return path not in self.paths
        return True


def configure_logging(log_dir: Path | None = None) -> None:
    """Configure application-wide logging with a rotating file handler."""

    target_dir = log_dir or LOG_DIR
    target_dir.mkdir(parents=True, exist_ok=True)

    logging.captureWarnings(True)

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            }
        },
        "filters": {
            "exclude_access_paths": {
                "()": AccessPathExcludeFilter,
                "paths": EXCLUDED_ACCESS_PATHS,
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG" if settings.DEBUG else "INFO",
                "formatter": "verbose",
            },
            "backend_file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "DEBUG",
                "formatter": "verbose",
                "filename": str(target_dir / "backend.log"),
                "maxBytes": 5 * 1024 * 1024,
                "backupCount": 5,
                "encoding": "utf-8",
            },
        },
        "loggers": {
            "": {
                "handlers": ["console", "backend_file"],
                "level": "DEBUG",
            },
            "uvicorn": {
                "handlers": ["console", "backend_file"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": ["console", "backend_file"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["console", "backend_file"],
                "filters": ["exclude_access_paths"],
                "level": "INFO",
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)


__all__ = ["AccessPathExcludeFilter", "configure_logging", "LOG_DIR"]
