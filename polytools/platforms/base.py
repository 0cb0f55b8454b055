"""
Domain records and errors shared by the Polymarket tools.
Every record is built fresh from an upstream payload and never mutated.
"""

from dataclasses import asdict, dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


@dataclass
class Token:
    token_id: str
    outcome: str
    price: float


@dataclass
class Market:
    condition_id: Optional[str]
    question: Optional[str]
    tokens: list[Token]
    volume: Any
    end_date: str
    active: Optional[bool]
    closed: Optional[bool]


@dataclass
class OrderBookEntry:
    price: Any
    size: Any


@dataclass
class OrderBook:
    token_id: str
    bids: list[OrderBookEntry] = field(default_factory=list)
    asks: list[OrderBookEntry] = field(default_factory=list)


@dataclass
class Balance:
    address: str
    balance: str
    allowance: str


@dataclass
class OpenOrder:
    id: Optional[str]
    token_id: Optional[str]
    side: Optional[str]
    price: Any
    size: Any
    filled: Any


@dataclass
class Position:
    token_id: Optional[str]
    market: str
    outcome: str
    size: Any
    avg_price: Any


@dataclass
class PositionSummary:
    positions: list[Position] = field(default_factory=list)
    open_orders: list[OpenOrder] = field(default_factory=list)


@dataclass
class Trade:
    id: Optional[str]
    token_id: Optional[str]
    side: Optional[str]
    price: Any
    size: Any
    timestamp: str
    status: Optional[str]


@dataclass
class OrderRequest:
    token_id: str
    side: OrderSide
    size: Decimal
    price: Decimal


@dataclass
class OrderDetails:
    token_id: str
    side: str
    size: str
    price: str
    tick_size: float
    neg_risk: bool


@dataclass
class OrderResult:
    order_id: str
    status: str
    order_details: OrderDetails
    message: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"order_id": self.order_id, "status": self.status}
        if self.message is not None:
            data["message"] = self.message
        data["order_details"] = asdict(self.order_details)
        return data


@dataclass
class CancelResult:
    order_id: str
    response: Any
    status: str = "cancelled"

    def to_dict(self) -> dict:
        return {"order_id": self.order_id, "status": self.status, "response": self.response}


def to_payload(value: Any) -> Any:
    """Turn records (and lists of them) into plain JSON-ready structures."""
    if isinstance(value, list):
        return [to_payload(v) for v in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if hasattr(value, "__dataclass_fields__"):
        return asdict(value)
    return value


class PlatformError(Exception):
    def __init__(self, message: str, platform: str = "polymarket", code: Optional[str] = None):
        self.message = message
        self.platform = platform
        self.code = code
        super().__init__(f"[{platform}] {message}")


class MissingParameterError(PlatformError):
    pass


class InvalidParameterError(PlatformError):
    pass


class MarketNotFoundError(PlatformError):
    pass


class UpstreamError(PlatformError):
    pass


class WriteAccessError(PlatformError):
    pass
