"""로깅 설정 유틸리티."""

from __future__ import annotations

from logging.config import dictConfig
from pathlib import Path
from typing import Any, Dict

from ..config import get_settings

_LOG_CONFIGURED = False


def _ensure_directory(path: Path) -> None:
    """필요한 디렉터리를 생성한다."""
    path.parent.mkdir(parents=True, exist_ok=True)


def _build_logging_config() -> Dict[str, Any]:
    """dictConfig에 사용할 로깅 설정을 생성한다."""
    settings = get_settings()
    logging_settings = settings.logging

    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": logging_settings.normalized_level,
        },
    }
    if logging_settings.file_enabled:
        log_path = logging_settings.resolve_log_path(settings.root_dir)
        _ensure_directory(log_path)
        handlers["file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "formatter": "standard",
            "level": logging_settings.normalized_level,
            "filename": str(log_path),
            "when": logging_settings.rotation_when,
            "interval": logging_settings.rotation_interval,
            "backupCount": logging_settings.backup_count,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            }
        },
        "handlers": handlers,
        "loggers": {
            "trex": {
                "level": logging_settings.normalized_level,
                "handlers": list(handlers),
                "propagate": False,
            },
        },
    }


def configure_logging(force: bool = False) -> None:
    """`trex` 로거에 핸들러를 붙인다.

    라이브러리는 import 시점에 로깅을 설정하지 않으므로, 애플리케이션이 필요할 때 호출한다.
    """
    global _LOG_CONFIGURED
    if _LOG_CONFIGURED and not force:
        return
    dictConfig(_build_logging_config())
    _LOG_CONFIGURED = True


__all__ = ["configure_logging"]
