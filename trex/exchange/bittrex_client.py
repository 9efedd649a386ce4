"""Bittrex v3 REST API 클라이언트."""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Mapping, MutableMapping, Optional, Sequence, Union
from urllib.parse import quote, urlencode

import requests
from requests import Response, Session

from ..config import get_settings
from ..utils.converters import NumberLike, format_decimal, to_decimal
from ..utils.exceptions import ConfigurationError, ExchangeError, InvalidArgument
from ..utils.time_utils import now_millis, parse_utc_timestamp
from .order_types import (
    SHORT_TIME_IN_FORCE,
    CandleInterval,
    CandleType,
    NewOrder,
    OrderDirection,
    OrderType,
    TimeInForce,
    WithdrawalRequest,
    coerce_enum,
    require,
)

JsonMapping = Mapping[str, Any]
MutableJsonMapping = MutableMapping[str, Any]
Headers = Mapping[str, str]

DEFAULT_USER_AGENT = "trex/0.1 (+https://github.com/user/trex)"
ORDER_BOOK_DEPTHS = (1, 25, 500)
DEFAULT_ORDER_BOOK_DEPTH = 25
LIMIT_ORDER_QUANTUM = "0.00000001"
EMPTY_CONTENT_HASH = hashlib.sha512(b"").hexdigest()

MARKET_DATE_FIELDS = ("createdAt",)
SUMMARY_DATE_FIELDS = ("updatedAt",)
TRADE_DATE_FIELDS = ("executedAt",)
CANDLE_DATE_FIELDS = ("startsAt",)
ORDER_DATE_FIELDS = ("createdAt", "updatedAt", "closedAt")
BALANCE_DATE_FIELDS = ("updatedAt",)
WITHDRAWAL_DATE_FIELDS = ("createdAt", "completedAt")
DEPOSIT_DATE_FIELDS = ("updatedAt", "completedAt")

HISTORY_STATES = {
    "open": "open",
    "closed": "closed",
    "pending": "open",
    "completed": "closed",
}

logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    """지원하는 HTTP 메서드."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class BittrexEndpoint(str, Enum):
    """Bittrex REST API v3 엔드포인트."""

    # Public
    PING = "/ping"
    MARKETS = "/markets"
    MARKET = "/markets/{market}"
    CURRENCIES = "/currencies"
    CURRENCY = "/currencies/{currency}"
    TICKERS = "/markets/tickers"
    TICKER = "/markets/{market}/ticker"
    SUMMARIES = "/markets/summaries"
    SUMMARY = "/markets/{market}/summary"
    TRADES = "/markets/{market}/trades"
    ORDERBOOK = "/markets/{market}/orderbook"
    CANDLES_RECENT = "/markets/{market}/candles/{candle_path}/recent"
    CANDLES_HISTORICAL = "/markets/{market}/candles/{candle_path}/historical/{date_path}"

    # Private
    ORDERS = "/orders"
    ORDER = "/orders/{order_id}"
    ORDERS_OPEN = "/orders/open"
    ORDERS_CLOSED = "/orders/closed"
    BALANCES = "/balances"
    BALANCE = "/balances/{currency}"
    ADDRESSES = "/addresses"
    ADDRESS = "/addresses/{currency}"
    WITHDRAWALS = "/withdrawals"
    WITHDRAWALS_HISTORY = "/withdrawals/{state}"
    DEPOSITS_HISTORY = "/deposits/{state}"


@dataclass(frozen=True)
class ClientCredentials:
    """Bittrex API 인증 정보를 담는 데이터 구조."""

    api_key: Optional[str]
    api_secret: Optional[str]

    @property
    def complete(self) -> bool:
        return bool(self.api_key and self.api_secret)


def sanitize_params(params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """값이 None인 항목을 제거한 새 딕셔너리를 반환한다."""
    return {key: value for key, value in (params or {}).items() if value is not None}


def parse_dates(results: Any, keys: Iterable[str]) -> Any:
    """응답 객체(또는 객체 목록)의 날짜 문자열 필드를 UTC datetime으로 바꾼다.

    필드가 없거나 비어 있으면 그대로 둔다. 입력 객체를 제자리에서 수정하고 반환한다.
    """
    items = results if isinstance(results, list) else [results]
    for item in items:
        if not isinstance(item, MutableMapping):
            continue
        for key in keys:
            value = item.get(key)
            if not value or isinstance(value, datetime):
                continue
            item[key] = parse_utc_timestamp(str(value))
    return results


def content_hash(body: str) -> str:
    """요청 본문의 SHA-512 해시(hex)."""
    return hashlib.sha512(body.encode("utf-8")).hexdigest()


def sign_request(api_secret: str, timestamp: str, uri: str, method: str, body_hash: str) -> str:
    """timestamp + uri + method + content hash를 HMAC-SHA512로 서명한다."""
    pre_sign = f"{timestamp}{uri}{method}{body_hash}"
    return hmac.new(
        api_secret.encode("utf-8"),
        pre_sign.encode("utf-8"),
        hashlib.sha512,
    ).hexdigest()


class BittrexClient:
    """Bittrex REST API v3 호출을 담당하는 클라이언트."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        keep_alive: Optional[bool] = None,
        timeout: Optional[float] = None,
        base_url: Optional[str] = None,
        session: Optional[Session] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """
        클라이언트 초기화.

        Args:
            api_key: 계정을 식별하는 API 키. 없으면 공개 API만 사용할 수 있다.
            api_secret: 서명에만 쓰이는 시크릿. 네트워크로 전송되지 않는다.
            keep_alive: 연결 재사용 여부 (기본 True)
            timeout: 요청 타임아웃 (밀리초)
            base_url: REST API 기본 URL
            session: 외부에서 주입하는 HTTP 세션
            user_agent: User-Agent 헤더 값
        """
        bittrex_settings = get_settings().bittrex

        self._base_url = (base_url or bittrex_settings.rest_base_url).rstrip("/")
        self._keep_alive = bittrex_settings.keep_alive if keep_alive is None else keep_alive
        timeout_ms = timeout if timeout is not None else bittrex_settings.timeout_ms
        if timeout_ms is not None and timeout_ms <= 0:
            raise InvalidArgument("timeout must be a positive number of milliseconds")
        self._timeout: Optional[float] = timeout_ms / 1000 if timeout_ms is not None else None

        if api_key is None and api_secret is None:
            api_key = bittrex_settings.api_key.get_secret_value() if bittrex_settings.api_key else None
            api_secret = bittrex_settings.api_secret.get_secret_value() if bittrex_settings.api_secret else None
        if api_key and not api_secret:
            raise InvalidArgument("apiSecret is required when apiKey is set")
        self._credentials = ClientCredentials(api_key or None, api_secret or None)

        self._session: Session = session or requests.Session()
        self._owns_session = session is None
        self._default_headers: dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": user_agent,
        }
        if not self._keep_alive:
            self._default_headers["Connection"] = "close"

        self._clock = now_millis
        self._nonce = self._clock()
        self._nonce_lock = threading.Lock()
        self._logger = logger

    @property
    def base_url(self) -> str:
        """REST API 기본 URL."""

        return self._base_url

    @property
    def timeout(self) -> Optional[float]:
        """요청 타임아웃 (초)."""

        return self._timeout

    @property
    def keep_alive(self) -> bool:
        return self._keep_alive

    @property
    def session(self) -> Session:
        """내부 HTTP 세션."""

        return self._session

    @property
    def credentials(self) -> ClientCredentials:
        """설정된 인증 정보."""

        return self._credentials

    def close(self) -> None:
        """직접 생성한 세션을 종료한다."""

        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "BittrexClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # 내부 유틸리티
    # ------------------------------------------------------------------
    def _resolve_endpoint_path(
        self,
        endpoint: Union[BittrexEndpoint, str],
        path_params: Optional[Mapping[str, Any]],
    ) -> str:
        path_template = endpoint.value if isinstance(endpoint, BittrexEndpoint) else str(endpoint)
        if not path_template.startswith("/"):
            path_template = f"/{path_template}"

        # 경로 구분자가 이미 포함된 값(candle_path 등)은 그대로 둔다.
        encoded = {
            key: value if key.endswith("_path") else quote(str(value), safe="")
            for key, value in (path_params or {}).items()
        }
        try:
            return path_template.format(**encoded)
        except KeyError as exc:
            raise InvalidArgument(f"path parameter '{exc.args[0]}' is missing: {path_template}") from exc

    def _merge_headers(self, extra_headers: Optional[Headers]) -> dict[str, str]:
        merged = dict(self._default_headers)
        if extra_headers:
            merged.update(extra_headers)
        return merged

    def _generate_nonce(self) -> str:
        """엄격히 증가하는 밀리초 타임스탬프를 발급한다."""
        with self._nonce_lock:
            self._nonce = max(self._nonce + 1, self._clock())
            return str(self._nonce)

    def _auth_headers(self, method: str, url: str, body: str) -> dict[str, str]:
        self._require_credentials()
        assert self._credentials.api_key is not None and self._credentials.api_secret is not None

        timestamp = self._generate_nonce()
        body_hash = content_hash(body) if body else EMPTY_CONTENT_HASH
        return {
            "Api-Key": self._credentials.api_key,
            "Api-Timestamp": timestamp,
            "Api-Content-Hash": body_hash,
            "Api-Signature": sign_request(
                self._credentials.api_secret, timestamp, url, method, body_hash
            ),
        }

    def _raise_for_error_response(self, response: Response) -> None:
        status_code = response.status_code
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, Mapping) and payload.get("code"):
            code = str(payload["code"])
            detail = payload.get("detail")
            message = f"{code}: {detail}" if detail else code
        elif isinstance(payload, Mapping) and payload.get("message"):
            code = None
            message = str(payload["message"])
        else:
            code = None
            detail = (response.text or "").strip()
            message = f"HTTP {status_code}: {detail}" if detail else f"HTTP {status_code}"
        raise ExchangeError(message, code=code, status_code=status_code)

    def _unwrap(self, payload: Any, status_code: int) -> Any:
        """구버전 {success, message, result} 봉투를 벗긴다."""
        if isinstance(payload, Mapping) and "success" in payload:
            if not payload.get("success"):
                message = str(payload.get("message") or "")
                raise ExchangeError(message, code=message or None, status_code=status_code)
            return payload.get("result")
        return payload

    def _handle_response(self, response: Response) -> Any:
        if not 200 <= response.status_code < 300:
            self._raise_for_error_response(response)
        if not response.text:
            return None
        try:
            payload = response.json()
        except ValueError as exc:
            raise ExchangeError(
                "Bittrex API 응답 JSON 디코딩 실패", status_code=response.status_code
            ) from exc
        return self._unwrap(payload, response.status_code)

    # ------------------------------------------------------------------
    # 공개 메서드
    # ------------------------------------------------------------------
    def request(
        self,
        method: Union[HttpMethod, str],
        endpoint: Union[BittrexEndpoint, str],
        *,
        params: Optional[JsonMapping] = None,
        data: Optional[JsonMapping] = None,
        headers: Optional[Headers] = None,
        path_params: Optional[Mapping[str, Any]] = None,
        private: bool = False,
    ) -> Any:
        """요청 한 건을 보내고 응답 본문을 반환한다.

        쿼리 문자열과 본문은 None 값을 제거한 뒤 직렬화되며, 서명 대상 URI는
        실제로 전송되는 URL과 동일하다.
        """
        method_value = method.value if isinstance(method, HttpMethod) else str(method).upper()
        path = self._resolve_endpoint_path(endpoint, path_params)

        query = urlencode(sanitize_params(params))
        url = f"{self._base_url}{path}?{query}" if query else f"{self._base_url}{path}"
        body = json.dumps(sanitize_params(data), separators=(",", ":")) if data is not None else ""

        merged_headers = self._merge_headers(headers)
        if body:
            merged_headers["Content-Type"] = "application/json"
        if private:
            merged_headers.update(self._auth_headers(method_value, url, body))

        self._logger.debug("%s %s", method_value, path)
        response = self._session.request(
            method=method_value,
            url=url,
            params=None,
            data=body or None,
            headers=merged_headers,
            timeout=self._timeout,
        )
        return self._handle_response(response)

    def get(self, endpoint: Union[BittrexEndpoint, str], **kwargs: Any) -> Any:
        return self.request(HttpMethod.GET, endpoint, **kwargs)

    def post(self, endpoint: Union[BittrexEndpoint, str], **kwargs: Any) -> Any:
        return self.request(HttpMethod.POST, endpoint, **kwargs)

    def delete(self, endpoint: Union[BittrexEndpoint, str], **kwargs: Any) -> Any:
        return self.request(HttpMethod.DELETE, endpoint, **kwargs)

    # ------------------------------------------------------------------
    # 공개 시세 API
    # ------------------------------------------------------------------
    def ping(self) -> JsonMapping:
        """서버 시간을 조회한다."""
        return self.get(BittrexEndpoint.PING)

    def markets(self) -> list[JsonMapping]:
        """전체 마켓 목록."""
        return parse_dates(self.get(BittrexEndpoint.MARKETS), MARKET_DATE_FIELDS)

    def market(self, market: str) -> JsonMapping:
        require(market, "market")
        return parse_dates(
            self.get(BittrexEndpoint.MARKET, path_params={"market": market}),
            MARKET_DATE_FIELDS,
        )

    def currencies(self) -> list[JsonMapping]:
        """전체 통화 목록."""
        return self.get(BittrexEndpoint.CURRENCIES)

    def currency(self, symbol: str) -> JsonMapping:
        require(symbol, "currency")
        return self.get(BittrexEndpoint.CURRENCY, path_params={"currency": symbol})

    def ticker(self, market: Optional[str] = None) -> Union[JsonMapping, list[JsonMapping]]:
        """현재 호가 스냅샷. market이 없으면 전체 마켓 목록을 반환한다."""
        if market:
            return self.get(BittrexEndpoint.TICKER, path_params={"market": market})
        return self.get(BittrexEndpoint.TICKERS)

    def market_summaries(self) -> list[JsonMapping]:
        """전체 마켓의 24시간 요약."""
        return parse_dates(self.get(BittrexEndpoint.SUMMARIES), SUMMARY_DATE_FIELDS)

    def market_summary(self, market: str) -> JsonMapping:
        """단일 마켓의 24시간 요약."""
        require(market, "market")
        return parse_dates(
            self.get(BittrexEndpoint.SUMMARY, path_params={"market": market}),
            SUMMARY_DATE_FIELDS,
        )

    def market_trades(self, market: str) -> list[JsonMapping]:
        """최근 체결 내역."""
        require(market, "market")
        return parse_dates(
            self.get(BittrexEndpoint.TRADES, path_params={"market": market}),
            TRADE_DATE_FIELDS,
        )

    def order_book(self, market: str, depth: int = DEFAULT_ORDER_BOOK_DEPTH) -> JsonMapping:
        """호가창. depth는 1, 25, 500 중 하나."""
        require(market, "market")
        require(depth, "depth")
        if depth not in ORDER_BOOK_DEPTHS:
            raise InvalidArgument(f"depth must be one of {list(ORDER_BOOK_DEPTHS)}, got {depth!r}")
        return self.get(
            BittrexEndpoint.ORDERBOOK,
            path_params={"market": market},
            params={"depth": depth},
        )

    def candles_recent(
        self,
        market: str,
        interval: Union[CandleInterval, str],
        *,
        candle_type: Union[CandleType, str, None] = None,
    ) -> list[JsonMapping]:
        """최근 캔들 목록."""
        require(market, "market")
        candle_path = self._candle_path(interval, candle_type)
        return parse_dates(
            self.get(
                BittrexEndpoint.CANDLES_RECENT,
                path_params={"market": market, "candle_path": candle_path},
            ),
            CANDLE_DATE_FIELDS,
        )

    def candles_historical(
        self,
        market: str,
        interval: Union[CandleInterval, str],
        year: int,
        month: Optional[int] = None,
        day: Optional[int] = None,
        *,
        candle_type: Union[CandleType, str, None] = None,
    ) -> list[JsonMapping]:
        """특정 연/월/일의 과거 캔들 목록.

        MINUTE_* 주기는 연·월·일, HOUR_1은 연·월, DAY_1은 연도만 경로에 쓴다.
        day는 요일이 아닌 그 달의 날짜다.
        """
        require(market, "market")
        resolved_interval = coerce_enum(CandleInterval, interval, "interval")
        candle_path = self._candle_path(resolved_interval, candle_type)

        date_parts = [str(self._calendar_part(year, "year", 1, 9999))]
        if resolved_interval is not CandleInterval.DAY_1:
            date_parts.append(str(self._calendar_part(month, "month", 1, 12)))
        if resolved_interval in (CandleInterval.MINUTE_1, CandleInterval.MINUTE_5):
            date_parts.append(str(self._calendar_part(day, "day", 1, 31)))

        return parse_dates(
            self.get(
                BittrexEndpoint.CANDLES_HISTORICAL,
                path_params={
                    "market": market,
                    "candle_path": candle_path,
                    "date_path": "/".join(date_parts),
                },
            ),
            CANDLE_DATE_FIELDS,
        )

    @staticmethod
    def _calendar_part(value: Any, field_name: str, low: int, high: int) -> int:
        require(value, field_name)
        try:
            number = int(str(value).strip())
        except ValueError as exc:
            raise InvalidArgument(f"{field_name} must be an integer, got {value!r}") from exc
        if not low <= number <= high:
            raise InvalidArgument(f"{field_name} must be between {low} and {high}, got {value!r}")
        return number

    @staticmethod
    def _candle_path(
        interval: Union[CandleInterval, str],
        candle_type: Union[CandleType, str, None],
    ) -> str:
        resolved_interval = coerce_enum(CandleInterval, interval, "interval")
        if candle_type is None:
            return resolved_interval.value
        resolved_type = coerce_enum(CandleType, candle_type, "candleType")
        return f"{resolved_type.value}/{resolved_interval.value}"

    # ------------------------------------------------------------------
    # 주문 API (인증 필요)
    # ------------------------------------------------------------------
    def send_order(self, order: NewOrder) -> JsonMapping:
        """검증된 주문 요청을 거래소에 제출한다."""
        return self._submit_order(order.to_payload())

    def place_order(
        self,
        market: str,
        direction: Union[OrderDirection, str],
        order_type: Union[OrderType, str],
        *,
        quantity: Optional[NumberLike] = None,
        ceiling: Optional[NumberLike] = None,
        limit: Optional[NumberLike] = None,
        time_in_force: Union[TimeInForce, str, None] = None,
        client_order_id: Optional[str] = None,
        use_awards: Optional[bool] = None,
    ) -> JsonMapping:
        """키워드 인자로 NewOrder를 만들어 제출한다."""
        order = NewOrder(
            market_symbol=market,
            direction=direction,  # type: ignore[arg-type]
            type=order_type,  # type: ignore[arg-type]
            quantity=quantity,  # type: ignore[arg-type]
            ceiling=ceiling,  # type: ignore[arg-type]
            limit=limit,  # type: ignore[arg-type]
            time_in_force=time_in_force,  # type: ignore[arg-type]
            client_order_id=client_order_id,
            use_awards=use_awards,
        )
        return self.send_order(order)

    def buy_limit(
        self,
        market: str,
        quantity: NumberLike,
        rate: NumberLike,
        time_in_force: str = "GTC",
    ) -> JsonMapping:
        return self._limit_order(OrderDirection.BUY, market, quantity, rate, time_in_force)

    def sell_limit(
        self,
        market: str,
        quantity: NumberLike,
        rate: NumberLike,
        time_in_force: str = "GTC",
    ) -> JsonMapping:
        return self._limit_order(OrderDirection.SELL, market, quantity, rate, time_in_force)

    def _limit_order(
        self,
        direction: OrderDirection,
        market: str,
        quantity: NumberLike,
        rate: NumberLike,
        time_in_force: str,
    ) -> JsonMapping:
        require(market, "market")
        require(quantity, "quantity")
        require(rate, "rate")
        resolved_tif = SHORT_TIME_IN_FORCE.get(str(time_in_force).upper())
        if resolved_tif is None:
            raise InvalidArgument("timeInForce not IOC or GTC")

        # 전송되는 8자리 값 기준으로 검증한다.
        order = NewOrder(
            market_symbol=market,
            direction=direction,
            type=OrderType.LIMIT,
            quantity=self._to_eight_places(quantity, "quantity"),
            limit=self._to_eight_places(rate, "rate"),
            time_in_force=resolved_tif,
        )
        assert order.quantity is not None and order.limit is not None
        payload = order.to_payload()
        payload["quantity"] = format_decimal(order.quantity, 8)
        payload["limit"] = format_decimal(order.limit, 8)
        return self._submit_order(payload)

    @staticmethod
    def _to_eight_places(value: NumberLike, field_name: str) -> Decimal:
        try:
            return to_decimal(value, quantize=LIMIT_ORDER_QUANTUM)
        except ValueError as exc:
            raise InvalidArgument(f"{field_name} must be numeric, got {value!r}") from exc

    def _submit_order(self, payload: JsonMapping) -> JsonMapping:
        self._require_credentials()
        return parse_dates(self.post(BittrexEndpoint.ORDERS, data=payload, private=True), ORDER_DATE_FIELDS)

    def cancel_order(self, order_id: str) -> JsonMapping:
        require(order_id, "orderId")
        self._require_credentials()
        return parse_dates(
            self.delete(BittrexEndpoint.ORDER, path_params={"order_id": order_id}, private=True),
            ORDER_DATE_FIELDS,
        )

    def order(self, order_id: str) -> JsonMapping:
        """단일 주문 조회."""
        require(order_id, "orderId")
        self._require_credentials()
        return parse_dates(
            self.get(BittrexEndpoint.ORDER, path_params={"order_id": order_id}, private=True),
            ORDER_DATE_FIELDS,
        )

    def open_orders(self, market: Optional[str] = None) -> list[JsonMapping]:
        """미체결 주문 목록."""
        self._require_credentials()
        return parse_dates(
            self.get(BittrexEndpoint.ORDERS_OPEN, params={"marketSymbol": market}, private=True),
            ORDER_DATE_FIELDS,
        )

    def order_history(self, market: Optional[str] = None) -> list[JsonMapping]:
        """종료된 주문 목록."""
        self._require_credentials()
        return parse_dates(
            self.get(BittrexEndpoint.ORDERS_CLOSED, params={"marketSymbol": market}, private=True),
            ORDER_DATE_FIELDS,
        )

    # ------------------------------------------------------------------
    # 계정 API (인증 필요)
    # ------------------------------------------------------------------
    def balances(self) -> list[JsonMapping]:
        self._require_credentials()
        return parse_dates(self.get(BittrexEndpoint.BALANCES, private=True), BALANCE_DATE_FIELDS)

    def balance(self, currency: str) -> JsonMapping:
        require(currency, "currency")
        self._require_credentials()
        return parse_dates(
            self.get(BittrexEndpoint.BALANCE, path_params={"currency": currency}, private=True),
            BALANCE_DATE_FIELDS,
        )

    def deposit_address(self, currency: str) -> JsonMapping:
        """통화의 입금 주소를 조회한다."""
        require(currency, "currency")
        self._require_credentials()
        return self.get(BittrexEndpoint.ADDRESS, path_params={"currency": currency}, private=True)

    def create_deposit_address(self, currency: str) -> JsonMapping:
        """입금 주소 발급을 요청한다."""
        require(currency, "currency")
        self._require_credentials()
        return self.post(BittrexEndpoint.ADDRESSES, data={"currencySymbol": currency}, private=True)

    def addresses(self) -> list[JsonMapping]:
        self._require_credentials()
        return self.get(BittrexEndpoint.ADDRESSES, private=True)

    def withdraw(
        self,
        currency: str,
        quantity: NumberLike,
        address: str,
        *,
        tag: Optional[str] = None,
        client_withdrawal_id: Optional[str] = None,
    ) -> JsonMapping:
        request = WithdrawalRequest(
            currency_symbol=currency,
            quantity=quantity,  # type: ignore[arg-type]
            crypto_address=address,
            crypto_address_tag=tag,
            client_withdrawal_id=client_withdrawal_id,
        )
        self._require_credentials()
        return parse_dates(
            self.post(BittrexEndpoint.WITHDRAWALS, data=request.to_payload(), private=True),
            WITHDRAWAL_DATE_FIELDS,
        )

    def withdrawal_history(self, currency: Optional[str] = None, state: str = "closed") -> list[JsonMapping]:
        """출금 내역 (open/closed)."""
        resolved_state = self._history_state(state, ("open", "closed"))
        self._require_credentials()
        return parse_dates(
            self.get(
                BittrexEndpoint.WITHDRAWALS_HISTORY,
                path_params={"state": resolved_state},
                params={"currencySymbol": currency},
                private=True,
            ),
            WITHDRAWAL_DATE_FIELDS,
        )

    def deposit_history(self, currency: Optional[str] = None, state: str = "closed") -> list[JsonMapping]:
        """입금 내역 (open/closed, pending/completed)."""
        resolved_state = self._history_state(state, tuple(HISTORY_STATES))
        self._require_credentials()
        return parse_dates(
            self.get(
                BittrexEndpoint.DEPOSITS_HISTORY,
                path_params={"state": resolved_state},
                params={"currencySymbol": currency},
                private=True,
            ),
            DEPOSIT_DATE_FIELDS,
        )

    @staticmethod
    def _history_state(state: str, allowed: Sequence[str]) -> str:
        normalized = str(state or "").strip().lower()
        if normalized not in allowed:
            raise InvalidArgument(f"state must be one of {list(allowed)}, got {state!r}")
        return HISTORY_STATES[normalized]

    def _require_credentials(self) -> None:
        if not self._credentials.complete:
            raise ConfigurationError("apiKey and apiSecret are required for authenticated endpoints")


__all__ = [
    "BittrexClient",
    "BittrexEndpoint",
    "ClientCredentials",
    "DEFAULT_USER_AGENT",
    "HttpMethod",
    "content_hash",
    "parse_dates",
    "sanitize_params",
    "sign_request",
]
