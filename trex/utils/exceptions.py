"""라이브러리 공통 예외 계층."""

from __future__ import annotations

from typing import Optional

from requests import RequestException

# 네트워크 계층 오류는 requests 예외가 그대로 전파된다.
TransportError = RequestException


class AppError(Exception):
    """프로젝트 전반에서 사용하는 기본 예외 클래스."""


class ConfigurationError(AppError):
    """환경 설정이나 인증 정보가 누락된 경우 발생."""


class InvalidArgument(AppError, ValueError):
    """필수 인자가 없거나 허용되지 않은 값이 전달된 경우.

    네트워크 호출 전에 로컬 검증 단계에서만 발생한다.
    """


class ExchangeError(AppError):
    """거래소가 실패 응답을 돌려준 경우.

    메시지는 거래소가 보낸 오류 문자열을 그대로 사용한다.
    """

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code


__all__ = [
    "AppError",
    "ConfigurationError",
    "ExchangeError",
    "InvalidArgument",
    "TransportError",
]
