"""환경변수 기반 설정 로더."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr

# 설치 위치가 아닌 현재 작업 디렉터리 기준으로 .env를 찾는다.
load_dotenv(find_dotenv(usecwd=True))

DEFAULT_REST_BASE_URL = "https://api.bittrex.com/v3"


def _to_bool(value: str | bool | None, default: bool = False) -> bool:
    """문자열 값을 불리언으로 변환한다."""
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    normalized = value.strip().lower()
    return normalized in {"1", "true", "yes", "on"}


def _to_optional_int(value: str | int | None) -> Optional[int]:
    """문자열 값을 정수로 변환하고, 비어 있거나 잘못된 값이면 None을 반환한다."""
    if isinstance(value, int):
        return value
    if not value:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _to_int(value: str | int | None, default: int) -> int:
    converted = _to_optional_int(value)
    return default if converted is None else converted


class LoggingSettings(BaseModel):
    """로깅 관련 설정."""

    model_config = ConfigDict(populate_by_name=True)

    level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("logs"))
    file_name: Optional[str] = Field(default=None)
    rotation_when: str = Field(default="midnight")
    rotation_interval: int = Field(default=1, ge=1)
    backup_count: int = Field(default=7, ge=0)

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        """환경변수에서 로깅 설정을 생성한다."""
        log_dir_value = os.getenv("LOG_DIR", "logs")
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=Path(log_dir_value).expanduser(),
            file_name=os.getenv("LOG_FILE_NAME") or None,
            rotation_when=os.getenv("LOG_ROTATION_WHEN", "midnight"),
            rotation_interval=_to_int(os.getenv("LOG_ROTATION_INTERVAL"), 1),
            backup_count=_to_int(os.getenv("LOG_BACKUP_COUNT"), 7),
        )

    @property
    def normalized_level(self) -> str:
        """대문자로 정규화된 로그 레벨."""
        return self.level.upper()

    @property
    def file_enabled(self) -> bool:
        return bool(self.file_name)

    def resolve_log_path(self, root_dir: Path) -> Path:
        """루트 경로 기준 로그 파일 전체 경로."""
        log_dir = self.log_dir if self.log_dir.is_absolute() else (root_dir / self.log_dir).resolve()
        return log_dir / (self.file_name or "trex.log")


class BittrexSettings(BaseModel):
    """Bittrex API 관련 설정."""

    model_config = ConfigDict(populate_by_name=True)

    api_key: Optional[SecretStr] = Field(default=None)
    api_secret: Optional[SecretStr] = Field(default=None)
    rest_base_url: str = Field(default=DEFAULT_REST_BASE_URL)
    keep_alive: bool = Field(default=True)
    timeout_ms: Optional[int] = Field(default=None, gt=0)

    @classmethod
    def from_env(cls) -> "BittrexSettings":
        """환경변수에서 Bittrex API 설정을 생성한다."""
        api_key = os.getenv("BITTREX_API_KEY")
        api_secret = os.getenv("BITTREX_API_SECRET")
        return cls(
            api_key=SecretStr(api_key) if api_key else None,
            api_secret=SecretStr(api_secret) if api_secret else None,
            rest_base_url=os.getenv("BITTREX_REST_BASE_URL", DEFAULT_REST_BASE_URL),
            keep_alive=_to_bool(os.getenv("BITTREX_KEEP_ALIVE"), True),
            timeout_ms=_to_optional_int(os.getenv("BITTREX_TIMEOUT_MS")),
        )


class AppSettings(BaseModel):
    """라이브러리 전반에 사용되는 설정 묶음."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    root_dir: Path = Field(default_factory=Path.cwd)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    bittrex: BittrexSettings = Field(default_factory=BittrexSettings)

    @classmethod
    def load(cls) -> "AppSettings":
        """환경변수 및 기본값을 반영하여 설정 인스턴스를 생성한다."""
        return cls(
            root_dir=Path.cwd(),
            logging=LoggingSettings.from_env(),
            bittrex=BittrexSettings.from_env(),
        )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """전역 설정을 캐시하여 반환한다."""
    return AppSettings.load()


__all__ = [
    "AppSettings",
    "BittrexSettings",
    "DEFAULT_REST_BASE_URL",
    "LoggingSettings",
    "get_settings",
]
