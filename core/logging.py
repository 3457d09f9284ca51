"""Centralised logging configuration for the site backend."""
from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Dict

from core.utils.env import get_env

_PATH_TRIM_PREFIXES = ("/app/",)
_ORIGINAL_LOG_RECORD_FACTORY = logging.getLogRecordFactory()
_LOG_RECORD_FACTORY_CONFIGURED = False

_LOGGING_CONFIGURED = False


class _HealthCheckFilter(logging.Filter):
    """Drop access log lines produced by load balancer health probes."""

    def filter(self, record: logging.LogRecord) -> bool:
        return "GET /health" not in record.getMessage()


def _resolve_level(value: str | None, default: str) -> str:
    value = (value or "").strip().upper()
    if value and isinstance(getattr(logging, value, None), int):
        return value
    return default


def _install_log_record_factory() -> None:
    """Install a log record factory that exposes trimmed paths."""

    global _LOG_RECORD_FACTORY_CONFIGURED
    if _LOG_RECORD_FACTORY_CONFIGURED:
        return

    def factory(*args, **kwargs):
        record = _ORIGINAL_LOG_RECORD_FACTORY(*args, **kwargs)
        pathname = getattr(record, "pathname", "") or ""
        for prefix in _PATH_TRIM_PREFIXES:
            if pathname.startswith(prefix):
                record.shortpathname = pathname[len(prefix):]
                break
        else:
            record.shortpathname = pathname
        return record

    logging.setLogRecordFactory(factory)
    _LOG_RECORD_FACTORY_CONFIGURED = True


def build_logging_config() -> Dict[str, object]:
    """Return the ``dictConfig`` payload derived from environment variables."""

    log_level = _resolve_level(get_env("BACKEND_LOG_LEVEL", default="INFO"), "INFO")
    console_level = _resolve_level(get_env("BACKEND_LOG_CONSOLE_LEVEL"), log_level)
    file_level = _resolve_level(get_env("BACKEND_LOG_FILE_LEVEL"), log_level)

    handlers: Dict[str, object] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": console_level,
            "formatter": "standard",
            "stream": "ext://sys.stdout",
        },
    }
    root_handlers = ["console"]

    log_dir_value = get_env("BACKEND_LOG_DIR")
    if log_dir_value:
        log_dir = Path(log_dir_value)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / (get_env("BACKEND_LOG_FILE", default="backend.log") or "backend.log")
        handlers["file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "level": file_level,
            "formatter": "standard",
            "filename": str(log_file),
            "when": "midnight",
            "backupCount": int(get_env("BACKEND_LOG_RETENTION", default="7") or "7"),
            "encoding": "utf-8",
        }
        root_handlers.append("file")

    fmt = "%(asctime)s %(levelname)s [%(shortpathname)s:%(lineno)d] - %(message)s"
    access_level = _resolve_level(get_env("BACKEND_ACCESS_LOG_LEVEL"), "WARNING")

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": fmt,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "filters": {
            "no_health": {"()": _HealthCheckFilter},
        },
        "handlers": handlers,
        "root": {
            "level": log_level,
            "handlers": root_handlers,
        },
        "loggers": {
            "uvicorn": {
                "level": log_level,
                "handlers": root_handlers,
                "propagate": False,
            },
            "uvicorn.error": {
                "level": log_level,
                "handlers": root_handlers,
                "propagate": False,
            },
            # Request logging middleware already reports every call
            "uvicorn.access": {
                "level": access_level,
                "handlers": ["console"],
                "filters": ["no_health"],
                "propagate": False,
            },
        },
    }


def setup_logging(force: bool = False) -> None:
    """Configure root/application loggers for console and optional file output."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    _install_log_record_factory()

    logging.config.dictConfig(build_logging_config())
    logging.captureWarnings(True)

    for name in ("httpcore", "httpx", "multipart", "python_multipart", "h11"):
        logging.getLogger(name).setLevel(logging.WARNING)

    _LOGGING_CONFIGURED = True


__all__ = ["build_logging_config", "setup_logging"]
