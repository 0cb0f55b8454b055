"""
Response normalization: raw Gamma / CLOB payloads in, canonical records out.

Upstream shapes are loose. Gamma returns outcomes, outcomePrices and clobTokenIds
either as JSON-encoded strings or as real arrays depending on endpoint; the CLOB
client returns some payloads as dicts and others as dataclasses. Nothing in here
raises on a malformed payload: missing fields become documented defaults.
"""

import json
import math
from decimal import Decimal
from typing import Any, Iterable, Optional

from polytools.platforms.base import (
    Balance,
    Market,
    OpenOrder,
    OrderBook,
    OrderBookEntry,
    OrderDetails,
    OrderRequest,
    OrderResult,
    Position,
    PositionSummary,
    Token,
    Trade,
)

DEFAULT_OUTCOMES = ["Yes", "No"]
UNKNOWN = "Unknown"


def _get(raw: Any, key: str, default: Any = None) -> Any:
    if isinstance(raw, dict):
        return raw.get(key, default)
    return getattr(raw, key, default)


def decode_list_field(value: Any, fallback: list) -> list:
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except ValueError:
            return fallback
        return decoded if isinstance(decoded, list) else fallback
    if isinstance(value, (list, tuple)):
        return list(value)
    return fallback


def _to_price(value: Any) -> float:
    if not value:
        return 0
    try:
        price = float(value)
    except (TypeError, ValueError):
        return 0
    return price if math.isfinite(price) else 0


def to_market(raw: dict) -> Market:
    outcomes = decode_list_field(_get(raw, "outcomes"), DEFAULT_OUTCOMES)
    prices = decode_list_field(_get(raw, "outcomePrices"), [])
    token_ids = decode_list_field(_get(raw, "clobTokenIds"), [])

    tokens = []
    for i, outcome in enumerate(outcomes):
        tokens.append(Token(
            token_id=token_ids[i] if i < len(token_ids) and token_ids[i] else "",
            outcome=outcome,
            price=_to_price(prices[i]) if i < len(prices) else 0,
        ))

    return Market(
        condition_id=_get(raw, "conditionId"),
        question=_get(raw, "question"),
        tokens=tokens,
        volume=_get(raw, "volume") or "0",
        end_date=_get(raw, "endDate") or "",
        active=_get(raw, "active"),
        closed=_get(raw, "closed"),
    )


def has_token_ids(raw: dict) -> bool:
    return bool(decode_list_field(_get(raw, "clobTokenIds"), []))


def _to_entries(levels: Optional[Iterable]) -> list[OrderBookEntry]:
    return [OrderBookEntry(price=_get(lvl, "price"), size=_get(lvl, "size")) for lvl in levels or []]


def to_order_book(token_id: str, raw: Any) -> OrderBook:
    return OrderBook(
        token_id=token_id,
        bids=_to_entries(_get(raw, "bids")),
        asks=_to_entries(_get(raw, "asks")),
    )


def to_balance(address: str, raw: Any) -> Balance:
    return Balance(
        address=address,
        balance=_get(raw, "balance") or "0",
        allowance=_get(raw, "allowance") or "0",
    )


def to_open_order(raw: Any) -> OpenOrder:
    return OpenOrder(
        id=_get(raw, "id"),
        token_id=_get(raw, "asset_id"),
        side=_get(raw, "side"),
        price=_get(raw, "price"),
        size=_get(raw, "original_size"),
        filled=_get(raw, "size_matched"),
    )


def summarize_positions(orders: Optional[list]) -> PositionSummary:
    """
    One position per token, taken from the first open order seen for it.
    Later orders on the same token only show up in open_orders.
    """
    if not orders:
        return PositionSummary()

    positions: dict[str, Position] = {}
    for order in orders:
        token_id = _get(order, "asset_id")
        if token_id not in positions:
            positions[token_id] = Position(
                token_id=token_id,
                market=_get(order, "market") or UNKNOWN,
                outcome=_get(order, "outcome") or UNKNOWN,
                size=_get(order, "original_size"),
                avg_price=_get(order, "price"),
            )

    return PositionSummary(
        positions=list(positions.values()),
        open_orders=[to_open_order(o) for o in orders],
    )


def to_trade(raw: Any) -> Trade:
    return Trade(
        id=_get(raw, "id"),
        token_id=_get(raw, "asset_id"),
        side=_get(raw, "side"),
        price=_get(raw, "price"),
        size=_get(raw, "size"),
        timestamp=_get(raw, "timestamp") or _get(raw, "match_time") or "",
        status=_get(raw, "status"),
    )


def format_decimal(value: Decimal) -> str:
    return format(value.normalize(), "f")


def to_order_result(request: OrderRequest, raw: Any, tick_size: float, neg_risk: bool) -> OrderResult:
    return OrderResult(
        order_id=_get(raw, "orderID") or "",
        status=_get(raw, "status") or "unknown",
        message=_get(raw, "errorMsg"),
        order_details=OrderDetails(
            token_id=request.token_id,
            side=request.side.value,
            size=format_decimal(request.size),
            price=format_decimal(request.price),
            tick_size=tick_size,
            neg_risk=neg_risk,
        ),
    )
