"""Input checks that run before anything reaches the exchange."""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from polytools.platforms.base import InvalidParameterError, MissingParameterError, OrderRequest, OrderSide

MIN_ORDER_SIZE = Decimal("5")


def require(value: Any, name: str) -> str:
    if not value:
        raise MissingParameterError(f"{name} is required")
    return value


def _parse_decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return parsed if parsed.is_finite() else None


def validate_order_request(token_id: Any, side: Any, size: Any, price: Any) -> OrderRequest:
    require(token_id, "token_id")
    if side not in (OrderSide.BUY.value, OrderSide.SELL.value):
        raise MissingParameterError("side is required (BUY or SELL)")

    size_dec = _parse_decimal(size)
    if size_dec is None or size_dec < MIN_ORDER_SIZE:
        raise InvalidParameterError("size must be at least 5")

    price_dec = _parse_decimal(price)
    if price_dec is None or not (0 < price_dec < 1):
        raise InvalidParameterError("price must be between 0 and 1 (exclusive)")

    return OrderRequest(token_id=token_id, side=OrderSide(side), size=size_dec, price=price_dec)


def validate_order_id(order_id: Any) -> str:
    return require(order_id, "order_id")
