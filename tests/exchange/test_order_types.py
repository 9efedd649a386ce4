from __future__ import annotations

from decimal import Decimal

import pytest

from trex.exchange import NewOrder, OrderDirection, OrderType, TimeInForce, WithdrawalRequest
from trex.utils.exceptions import InvalidArgument


def test_limit_order_defaults_to_good_til_cancelled() -> None:
    order = NewOrder(market_symbol="BTC-USD", direction="buy", type="limit", quantity="0.1", limit="30000")

    assert order.direction is OrderDirection.BUY
    assert order.type is OrderType.LIMIT
    assert order.quantity == Decimal("0.1")
    assert order.time_in_force is TimeInForce.GOOD_TIL_CANCELLED


def test_market_order_defaults_to_immediate_or_cancel() -> None:
    order = NewOrder(market_symbol="BTC-USD", direction=OrderDirection.SELL, type=OrderType.MARKET, quantity=1)

    assert order.time_in_force is TimeInForce.IMMEDIATE_OR_CANCEL


def test_explicit_time_in_force_is_kept() -> None:
    order = NewOrder(
        market_symbol="BTC-USD",
        direction="BUY",
        type="LIMIT",
        quantity="1",
        limit="1",
        time_in_force="post_only_good_til_cancelled",
    )

    assert order.time_in_force is TimeInForce.POST_ONLY_GOOD_TIL_CANCELLED


@pytest.mark.parametrize("direction", ["HOLD", "", None, "BUYSELL"])
def test_direction_must_be_buy_or_sell(direction) -> None:
    with pytest.raises(InvalidArgument):
        NewOrder(market_symbol="BTC-USD", direction=direction, type="MARKET", quantity="1")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"type": "STOP", "quantity": "1"},
        {"type": "LIMIT", "limit": "1"},
        {"type": "LIMIT", "quantity": "1"},
        {"type": "LIMIT", "quantity": "1", "limit": "1", "ceiling": "5"},
        {"type": "MARKET", "quantity": "1", "limit": "1"},
        {"type": "CEILING_LIMIT", "ceiling": "10"},
        {"type": "CEILING_LIMIT", "quantity": "1", "ceiling": "10", "limit": "1"},
        {"type": "CEILING_MARKET", "limit": "1", "ceiling": "10"},
        {"type": "CEILING_MARKET"},
        {"type": "MARKET", "quantity": "-1"},
        {"type": "MARKET", "quantity": "abc"},
        {"type": "MARKET", "quantity": "1", "time_in_force": "DAY"},
    ],
)
def test_invalid_order_combinations(kwargs) -> None:
    with pytest.raises(InvalidArgument):
        NewOrder(market_symbol="BTC-USD", direction="BUY", **kwargs)


def test_ceiling_limit_payload_omits_quantity() -> None:
    order = NewOrder(market_symbol="BTC-USD", direction="BUY", type="CEILING_LIMIT", ceiling="250", limit="30000.10")

    payload = order.to_payload()

    assert payload["quantity"] is None
    assert payload["ceiling"] == "250"
    assert payload["limit"] == "30000.1"
    assert payload["timeInForce"] == "GOOD_TIL_CANCELLED"


def test_order_requires_market_symbol() -> None:
    with pytest.raises(InvalidArgument, match="market is required"):
        NewOrder(market_symbol="", direction="BUY", type="MARKET", quantity="1")


def test_withdrawal_payload() -> None:
    request = WithdrawalRequest(
        currency_symbol="XRP",
        quantity="25",
        crypto_address="rAddress",
        crypto_address_tag="12345",
    )

    assert request.to_payload() == {
        "currencySymbol": "XRP",
        "quantity": "25",
        "cryptoAddress": "rAddress",
        "cryptoAddressTag": "12345",
        "clientWithdrawalId": None,
    }


def test_withdrawal_rejects_non_positive_quantity() -> None:
    with pytest.raises(InvalidArgument):
        WithdrawalRequest(currency_symbol="BTC", quantity="0", crypto_address="1abc")
