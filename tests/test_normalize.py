"""Response normalizer unit tests."""
from dataclasses import asdict
from decimal import Decimal
from types import SimpleNamespace

import pytest

from conftest import gamma_market
from polytools.platforms.base import OrderRequest, OrderSide
from polytools.services.normalize import (
    decode_list_field,
    has_token_ids,
    summarize_positions,
    to_balance,
    to_market,
    to_order_book,
    to_order_result,
    to_trade,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ('["a", "b"]', ["a", "b"]),
        (["a", "b"], ["a", "b"]),
        (("a",), ["a"]),
        ("not json", ["fallback"]),
        ('{"a": 1}', ["fallback"]),
        (None, ["fallback"]),
        (42, ["fallback"]),
    ],
)
def test_decode_list_field(value, expected):
    assert decode_list_field(value, ["fallback"]) == expected


def test_to_market_string_and_native_encodings_match():
    encoded = gamma_market()
    native = gamma_market(
        outcomes=["Yes", "No"],
        outcomePrices=["0.62", "0.38"],
        clobTokenIds=["111", "222"],
    )
    assert to_market(encoded) == to_market(native)


def test_to_market_fields():
    market = asdict(to_market(gamma_market()))
    assert market == {
        "condition_id": "0xcond",
        "question": "Will it rain tomorrow?",
        "tokens": [
            {"token_id": "111", "outcome": "Yes", "price": 0.62},
            {"token_id": "222", "outcome": "No", "price": 0.38},
        ],
        "volume": "12345.6",
        "end_date": "2026-12-31T00:00:00Z",
        "active": True,
        "closed": False,
    }


def test_to_market_short_lists_use_defaults():
    market = to_market(gamma_market(
        outcomes='["A", "B", "C"]',
        outcomePrices='["0.5"]',
        clobTokenIds='["111", "222"]',
    ))
    assert [(t.token_id, t.outcome, t.price) for t in market.tokens] == [
        ("111", "A", 0.5),
        ("222", "B", 0),
        ("", "C", 0),
    ]


def test_to_market_missing_fields():
    market = to_market({"conditionId": "0xc", "question": "Q?"})
    assert [t.outcome for t in market.tokens] == ["Yes", "No"]
    assert all(t.token_id == "" and t.price == 0 for t in market.tokens)
    assert market.volume == "0"
    assert market.end_date == ""


def test_to_market_bad_price_is_zero():
    market = to_market(gamma_market(outcomePrices='["abc", "0.4"]'))
    assert [t.price for t in market.tokens] == [0, 0.4]


def test_to_market_non_finite_price_is_zero():
    market = to_market(gamma_market(outcomePrices=["NaN", "Infinity"]))
    assert [t.price for t in market.tokens] == [0, 0]


def test_has_token_ids():
    assert has_token_ids(gamma_market())
    assert not has_token_ids(gamma_market(clobTokenIds="[]"))
    assert not has_token_ids(gamma_market(clobTokenIds=None))


def test_order_book_accepts_dicts_and_objects():
    raw = SimpleNamespace(
        bids=[SimpleNamespace(price="0.48", size="100")],
        asks=[{"price": "0.52", "size": "80"}],
    )
    book = asdict(to_order_book("111", raw))
    assert book == {
        "token_id": "111",
        "bids": [{"price": "0.48", "size": "100"}],
        "asks": [{"price": "0.52", "size": "80"}],
    }


def test_order_book_missing_sides_are_empty():
    book = to_order_book("111", {"bids": None})
    assert book.bids == []
    assert book.asks == []


def test_balance_defaults_to_zero_strings():
    assert asdict(to_balance("0xabc", {})) == {"address": "0xabc", "balance": "0", "allowance": "0"}


def test_positions_empty():
    assert asdict(summarize_positions([])) == {"positions": [], "open_orders": []}
    assert asdict(summarize_positions(None)) == {"positions": [], "open_orders": []}


def test_positions_first_order_wins():
    orders = [
        {"id": "o1", "asset_id": "111", "side": "BUY", "price": "0.40", "original_size": "10",
         "size_matched": "0", "outcome": "Yes"},
        {"id": "o2", "asset_id": "111", "side": "BUY", "price": "0.45", "original_size": "20",
         "size_matched": "5", "market": "0xcond"},
    ]
    summary = summarize_positions(orders)
    assert len(summary.positions) == 1
    assert asdict(summary.positions[0]) == {
        "token_id": "111",
        "market": "Unknown",
        "outcome": "Yes",
        "size": "10",
        "avg_price": "0.40",
    }
    assert [o.id for o in summary.open_orders] == ["o1", "o2"]
    assert summary.open_orders[1].filled == "5"


def test_trade_timestamp_fallback():
    base = {"id": "t1", "asset_id": "111", "side": "SELL", "price": "0.5", "size": "7", "status": "MATCHED"}
    assert to_trade({**base, "timestamp": "100", "match_time": "200"}).timestamp == "100"
    assert to_trade({**base, "match_time": "200"}).timestamp == "200"
    assert to_trade(base).timestamp == ""


def test_order_result_passes_rejection_through():
    request = OrderRequest(token_id="111", side=OrderSide.BUY, size=Decimal("10"), price=Decimal("0.50"))
    result = to_order_result(request, {"errorMsg": "not enough balance"}, 0.01, False)
    assert result.to_dict() == {
        "order_id": "",
        "status": "unknown",
        "message": "not enough balance",
        "order_details": {
            "token_id": "111",
            "side": "BUY",
            "size": "10",
            "price": "0.5",
            "tick_size": 0.01,
            "neg_risk": False,
        },
    }


def test_order_result_omits_absent_message():
    request = OrderRequest(token_id="111", side=OrderSide.SELL, size=Decimal("5"), price=Decimal("0.75"))
    data = to_order_result(request, {"orderID": "0xabc", "status": "live"}, 0.001, True).to_dict()
    assert "message" not in data
    assert data["order_id"] == "0xabc"
    assert data["order_details"]["neg_risk"] is True
