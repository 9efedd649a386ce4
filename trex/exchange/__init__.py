"""Bittrex API 연동 래퍼 패키지."""

from .bittrex_client import (
    BittrexClient,
    BittrexEndpoint,
    ClientCredentials,
    DEFAULT_USER_AGENT,
    HttpMethod,
    content_hash,
    parse_dates,
    sanitize_params,
    sign_request,
)
from .order_types import (
    CandleInterval,
    CandleType,
    NewOrder,
    OrderDirection,
    OrderType,
    TimeInForce,
    WithdrawalRequest,
)

__all__ = [
    "BittrexClient",
    "BittrexEndpoint",
    "CandleInterval",
    "CandleType",
    "ClientCredentials",
    "DEFAULT_USER_AGENT",
    "HttpMethod",
    "NewOrder",
    "OrderDirection",
    "OrderType",
    "TimeInForce",
    "WithdrawalRequest",
    "content_hash",
    "parse_dates",
    "sanitize_params",
    "sign_request",
]
