"""시간 관련 헬퍼 함수 모음."""

from __future__ import annotations

import re
import time
from datetime import datetime, timezone

# 초 이하 자리수는 거래소마다 1~7자리까지 다양하다.
_FRACTION_RE = re.compile(r"\.(\d+)")
_ZONE_RE = re.compile(r"(Z|[+-]\d{2}:?\d{2})$", re.IGNORECASE)


def now_millis() -> int:
    """현재 시각을 밀리초 단위 정수로 반환한다."""
    return int(time.time() * 1000)


def has_zone_marker(value: str) -> bool:
    """문자열 끝에 시간대 표기가 있는지 확인한다."""
    return bool(_ZONE_RE.search(value.strip()))


def parse_utc_timestamp(value: str) -> datetime:
    """거래소 날짜 문자열을 UTC datetime으로 변환한다.

    시간대 표기가 없는 값은 UTC로 간주하여 ``Z``를 덧붙인 뒤 해석한다.
    """
    text = value.strip()
    if not has_zone_marker(text):
        text = f"{text}Z"
    if text[-1] in "zZ":
        text = f"{text[:-1]}+00:00"
    text = _FRACTION_RE.sub(lambda match: "." + match.group(1)[:6].ljust(6, "0"), text, count=1)
    return datetime.fromisoformat(text).astimezone(timezone.utc)


__all__ = [
    "has_zone_marker",
    "now_millis",
    "parse_utc_timestamp",
]
