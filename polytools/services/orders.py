"""
Order placement and cancellation.

Placement is a fixed pipeline:
    validate -> fetch market metadata -> build + sign -> submit -> normalize

Metadata is best effort (tick size 0.01, neg_risk False when unavailable). Submission
happens exactly once; a failed post is reported, never retried, since a retry could
double-fill. Business rejections (errorMsg, empty orderID) come back as normal results.
"""

import logging
from dataclasses import dataclass
from typing import Any

from py_clob_client.clob_types import OrderArgs, PartialCreateOrderOptions
from py_clob_client.order_builder.constants import BUY, SELL

from polytools.platforms.base import CancelResult, OrderRequest, OrderResult, OrderSide
from polytools.platforms.polymarket import PolymarketClient
from polytools.services import normalize
from polytools.services.validation import validate_order_id, validate_order_request

logger = logging.getLogger(__name__)

DEFAULT_TICK_SIZE = "0.01"
DEFAULT_NEG_RISK = False


@dataclass
class MarketMetadata:
    tick_size: str = DEFAULT_TICK_SIZE
    neg_risk: bool = DEFAULT_NEG_RISK


class OrderSubmitter:
    def __init__(self, client: PolymarketClient):
        self._client = client

    async def submit(self, token_id: Any, side: Any, size: Any, price: Any) -> OrderResult:
        self._client.ensure_write_access()
        request = validate_order_request(token_id, side, size, price)

        await self._client.initialize()
        metadata = await self._fetch_metadata(request.token_id)
        signed = await self._build_order(request, metadata)
        response = await self._client.post_order(signed)
        return normalize.to_order_result(request, response or {}, float(metadata.tick_size), metadata.neg_risk)

    async def _fetch_metadata(self, token_id: str) -> MarketMetadata:
        try:
            tick_size = await self._client.get_tick_size(token_id)
            neg_risk = await self._client.get_neg_risk(token_id)
        except Exception as e:
            logger.warning("Market metadata unavailable for %s, using defaults: %s", token_id, e)
            return MarketMetadata()
        return MarketMetadata(
            tick_size=str(tick_size) if tick_size else DEFAULT_TICK_SIZE,
            neg_risk=bool(neg_risk),
        )

    async def _build_order(self, request: OrderRequest, metadata: MarketMetadata) -> Any:
        args = OrderArgs(
            token_id=request.token_id,
            price=float(request.price),
            size=float(request.size),
            side=BUY if request.side == OrderSide.BUY else SELL,
            fee_rate_bps=0,
        )
        options = PartialCreateOrderOptions(tick_size=metadata.tick_size, neg_risk=metadata.neg_risk)
        return await self._client.create_order(args, options)


class OrderCanceller:
    def __init__(self, client: PolymarketClient):
        self._client = client

    async def cancel(self, order_id: Any) -> CancelResult:
        self._client.ensure_write_access()
        order_id = validate_order_id(order_id)
        await self._client.initialize()
        response = await self._client.cancel(order_id)
        return CancelResult(order_id=order_id, response=response)
