"""주문·출금·캔들 요청에 쓰이는 타입 및 열거형 정의."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar, Union

from ..utils.converters import NumberLike, format_amount, to_decimal
from ..utils.exceptions import InvalidArgument

E = TypeVar("E", bound=Enum)


class OrderDirection(str, Enum):
    """주문 방향."""
    BUY = "BUY"
    SELL = "SELL"


class OrderType(str, Enum):
    """주문 유형."""
    LIMIT = "LIMIT"
    MARKET = "MARKET"
    CEILING_LIMIT = "CEILING_LIMIT"    # 총 지불액 상한 + 지정가
    CEILING_MARKET = "CEILING_MARKET"  # 총 지불액 상한 + 시장가


class TimeInForce(str, Enum):
    """주문 유효기간."""
    GOOD_TIL_CANCELLED = "GOOD_TIL_CANCELLED"
    IMMEDIATE_OR_CANCEL = "IMMEDIATE_OR_CANCEL"
    FILL_OR_KILL = "FILL_OR_KILL"
    POST_ONLY_GOOD_TIL_CANCELLED = "POST_ONLY_GOOD_TIL_CANCELLED"
    BUY_NOW = "BUY_NOW"
    INSTANT = "INSTANT"


class CandleInterval(str, Enum):
    """캔들 주기."""
    MINUTE_1 = "MINUTE_1"
    MINUTE_5 = "MINUTE_5"
    HOUR_1 = "HOUR_1"
    DAY_1 = "DAY_1"


class CandleType(str, Enum):
    """캔들 가격 기준."""
    TRADE = "TRADE"
    MIDPOINT = "MIDPOINT"


# buy_limit/sell_limit이 받는 축약 표기
SHORT_TIME_IN_FORCE: Dict[str, TimeInForce] = {
    "GTC": TimeInForce.GOOD_TIL_CANCELLED,
    "IOC": TimeInForce.IMMEDIATE_OR_CANCEL,
}

QUANTITY_TYPES = frozenset({OrderType.LIMIT, OrderType.MARKET})
CEILING_TYPES = frozenset({OrderType.CEILING_LIMIT, OrderType.CEILING_MARKET})
LIMIT_PRICED_TYPES = frozenset({OrderType.LIMIT, OrderType.CEILING_LIMIT})


def coerce_enum(enum_cls: Type[E], value: Union[E, str, None], field_name: str) -> E:
    """문자열을 열거형으로 변환하고, 허용 값이 아니면 InvalidArgument를 던진다."""
    if isinstance(value, enum_cls):
        return value
    allowed = ", ".join(member.value for member in enum_cls)
    if not value:
        raise InvalidArgument(f"{field_name} is required ({allowed})")
    try:
        return enum_cls(str(value).strip().upper())
    except ValueError as exc:
        raise InvalidArgument(f"{field_name} must be one of [{allowed}], got {value!r}") from exc


def _positive_decimal(value: Optional[NumberLike], field_name: str) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        decimal_value = to_decimal(value)
    except ValueError as exc:
        raise InvalidArgument(f"{field_name} must be numeric, got {value!r}") from exc
    if decimal_value <= 0:
        raise InvalidArgument(f"{field_name} must be greater than 0")
    return decimal_value


def require(value: Any, field_name: str) -> Any:
    """값이 비어 있으면 InvalidArgument를 던진다."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgument(f"{field_name} is required")
    return value


@dataclass
class NewOrder:
    """신규 주문 요청 데이터.

    주문 유형에 따라 quantity/ceiling, limit 필드의 필수·금지 조건이 달라진다.
    생성 시점에 검증하므로 잘못된 조합은 네트워크 호출 전에 걸러진다.
    """
    market_symbol: str
    direction: OrderDirection
    type: OrderType
    quantity: Optional[Decimal] = None   # LIMIT, MARKET 전용
    ceiling: Optional[Decimal] = None    # CEILING_* 전용
    limit: Optional[Decimal] = None      # *_LIMIT 전용 주문 가격
    time_in_force: Optional[TimeInForce] = None
    client_order_id: Optional[str] = None
    use_awards: Optional[bool] = None

    def __post_init__(self) -> None:
        """초기화 후 검증."""
        require(self.market_symbol, "market")
        self.direction = coerce_enum(OrderDirection, self.direction, "direction")
        self.type = coerce_enum(OrderType, self.type, "type")
        self.quantity = _positive_decimal(self.quantity, "quantity")
        self.ceiling = _positive_decimal(self.ceiling, "ceiling")
        self.limit = _positive_decimal(self.limit, "limit")

        if self.type in QUANTITY_TYPES:
            if self.quantity is None:
                raise InvalidArgument("quantity must be included if type is MARKET or LIMIT")
            if self.ceiling is not None:
                raise InvalidArgument("Do not specify ceiling if type is MARKET or LIMIT")
        if self.type in CEILING_TYPES:
            if self.ceiling is None:
                raise InvalidArgument("ceiling must be included if type is CEILING_MARKET or CEILING_LIMIT")
            if self.quantity is not None:
                raise InvalidArgument("Do not specify quantity if type is CEILING_MARKET or CEILING_LIMIT")
        if self.type in LIMIT_PRICED_TYPES:
            if self.limit is None:
                raise InvalidArgument("limit must be included if type is LIMIT or CEILING_LIMIT")
        elif self.limit is not None:
            raise InvalidArgument("Do not specify limit if type is MARKET or CEILING_MARKET")

        if self.time_in_force is None:
            self.time_in_force = (
                TimeInForce.GOOD_TIL_CANCELLED
                if self.type in LIMIT_PRICED_TYPES
                else TimeInForce.IMMEDIATE_OR_CANCEL
            )
        else:
            self.time_in_force = coerce_enum(TimeInForce, self.time_in_force, "timeInForce")

    def to_payload(self) -> Dict[str, Any]:
        """요청 본문으로 직렬화한다. 값이 없는 필드는 None으로 남긴다."""
        return {
            "marketSymbol": self.market_symbol,
            "direction": self.direction.value,
            "type": self.type.value,
            "quantity": format_amount(self.quantity) if self.quantity is not None else None,
            "ceiling": format_amount(self.ceiling) if self.ceiling is not None else None,
            "limit": format_amount(self.limit) if self.limit is not None else None,
            "timeInForce": self.time_in_force.value if self.time_in_force else None,
            "clientOrderId": self.client_order_id,
            "useAwards": self.use_awards,
        }


@dataclass
class WithdrawalRequest:
    """출금 요청 데이터."""
    currency_symbol: str
    quantity: Decimal
    crypto_address: str
    crypto_address_tag: Optional[str] = None
    client_withdrawal_id: Optional[str] = None

    def __post_init__(self) -> None:
        require(self.currency_symbol, "currency")
        require(self.quantity, "quantity")
        require(self.crypto_address, "address")
        self.quantity = _positive_decimal(self.quantity, "quantity")

    def to_payload(self) -> Dict[str, Any]:
        return {
            "currencySymbol": self.currency_symbol,
            "quantity": format_amount(self.quantity),
            "cryptoAddress": self.crypto_address,
            "cryptoAddressTag": self.crypto_address_tag,
            "clientWithdrawalId": self.client_withdrawal_id,
        }


__all__ = [
    "CandleInterval",
    "CandleType",
    "NewOrder",
    "OrderDirection",
    "OrderType",
    "SHORT_TIME_IN_FORCE",
    "TimeInForce",
    "WithdrawalRequest",
    "coerce_enum",
    "require",
]
