"""데이터 변환 관련 헬퍼 함수."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

NumberLike = Union[str, int, float, Decimal]


def to_decimal(value: NumberLike, quantize: Optional[str] = None) -> Decimal:
    """숫자형 또는 문자열 값을 Decimal로 변환한다."""
    if isinstance(value, Decimal):
        decimal_value = value
    else:
        try:
            decimal_value = Decimal(str(value))
        except (InvalidOperation, ValueError, TypeError) as exc:
            raise ValueError(f"Decimal 변환 실패: {value}") from exc
    if not decimal_value.is_finite():
        raise ValueError(f"유한한 숫자가 아닙니다: {value}")
    if quantize is not None:
        try:
            decimal_value = decimal_value.quantize(Decimal(quantize), rounding=ROUND_HALF_UP)
        except InvalidOperation as exc:
            raise ValueError(f"자리수 조정 실패: {value}") from exc
    return decimal_value


def format_decimal(value: NumberLike, precision: int = 8) -> str:
    """지정된 소수점 자리수로 문자열을 생성한다."""
    quantizer = Decimal(10) ** (-precision)
    decimal_value = to_decimal(value).quantize(quantizer, rounding=ROUND_HALF_UP)
    return f"{decimal_value:f}"


def format_amount(value: NumberLike) -> str:
    """주문·출금 수량을 지수 표기 없는 최소 문자열로 만든다."""
    decimal_value = to_decimal(value)
    text = f"{decimal_value:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"


__all__ = [
    "NumberLike",
    "format_amount",
    "format_decimal",
    "to_decimal",
]
