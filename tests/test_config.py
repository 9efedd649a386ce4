from __future__ import annotations

import logging
from pathlib import Path

import pytest
from dotenv import find_dotenv
from pydantic import ValidationError

from trex.config import DEFAULT_REST_BASE_URL, BittrexSettings, LoggingSettings, get_settings
import trex.utils.logger as logger_module
from trex.utils.logger import configure_logging


def test_bittrex_settings_defaults() -> None:
    settings = get_settings().bittrex

    assert settings.api_key is None
    assert settings.api_secret is None
    assert settings.rest_base_url == DEFAULT_REST_BASE_URL
    assert settings.keep_alive is True
    assert settings.timeout_ms is None


def test_bittrex_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("BITTREX_API_KEY", "key")
    monkeypatch.setenv("BITTREX_API_SECRET", "secret")
    monkeypatch.setenv("BITTREX_KEEP_ALIVE", "no")
    monkeypatch.setenv("BITTREX_TIMEOUT_MS", "3000")
    monkeypatch.setenv("BITTREX_REST_BASE_URL", "https://example.test/v3")

    settings = BittrexSettings.from_env()

    assert settings.api_key is not None and settings.api_key.get_secret_value() == "key"
    assert "secret" not in repr(settings)
    assert settings.keep_alive is False
    assert settings.timeout_ms == 3000
    assert settings.rest_base_url == "https://example.test/v3"


def test_invalid_timeout_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("BITTREX_TIMEOUT_MS", "soon")

    assert BittrexSettings.from_env().timeout_ms is None


def test_non_positive_timeout_is_rejected() -> None:
    with pytest.raises(ValidationError):
        BittrexSettings(timeout_ms=0)


def test_logging_settings_resolve_path(tmp_path) -> None:
    settings = LoggingSettings(level="debug", log_dir=Path("logs"), file_name="client.log")

    assert settings.normalized_level == "DEBUG"
    assert settings.file_enabled
    assert settings.resolve_log_path(tmp_path) == (tmp_path / "logs").resolve() / "client.log"


def test_configure_logging_with_file_handler(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LOG_FILE_NAME", "trex.log")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    configure_logging(force=True)
    try:
        logger = logging.getLogger("trex")
        handler_types = {type(handler).__name__ for handler in logger.handlers}
        assert "TimedRotatingFileHandler" in handler_types
        assert logger.level == logging.DEBUG
        logging.getLogger("trex.exchange").debug("hello")
        assert (tmp_path / "logs" / "trex.log").exists()
    finally:
        _reset_trex_logger()


def test_import_does_not_configure_logging() -> None:
    assert logging.getLogger("trex").handlers == []
    assert logger_module._LOG_CONFIGURED is False


def test_dotenv_is_read_from_working_directory(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("BITTREX_API_KEY=from-dotenv\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()

    assert Path(find_dotenv(usecwd=True)).resolve() == (tmp_path / ".env").resolve()
    assert get_settings().root_dir.resolve() == tmp_path.resolve()


def _reset_trex_logger() -> None:
    logger = logging.getLogger("trex")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logger_module._LOG_CONFIGURED = False
    get_settings.cache_clear()
