"""Read-only market data: markets, order books, balance, open orders, trades."""

from typing import Optional

from polytools.platforms.base import Balance, Market, OrderBook, PositionSummary, Trade
from polytools.platforms.polymarket import PolymarketClient
from polytools.services import normalize
from polytools.services.validation import require

# Gamma's closed=false filter misses some closed markets, so fetch extra and filter again.
OVERFETCH_MULTIPLIER = 3


class MarketDataReader:
    def __init__(self, client: PolymarketClient):
        self._client = client

    async def list_markets(self, limit: int = 10, offset: int = 0, search: Optional[str] = None) -> list[Market]:
        await self._client.initialize()
        params = {
            "limit": limit * OVERFETCH_MULTIPLIER,
            "offset": offset,
            "closed": "false",
        }
        if search:
            params["slug_contains"] = search.lower()

        data = await self._client.fetch_markets(params)
        if not isinstance(data, list):
            return []

        open_markets = [
            m for m in data
            if isinstance(m, dict) and not m.get("closed") and normalize.has_token_ids(m)
        ]
        return [normalize.to_market(m) for m in open_markets[:limit]]

    async def get_market(self, condition_id: str) -> Market:
        require(condition_id, "condition_id")
        await self._client.initialize()
        raw = await self._client.fetch_market(condition_id)
        return normalize.to_market(raw)

    async def get_order_book(self, token_id: str) -> OrderBook:
        require(token_id, "token_id")
        await self._client.initialize()
        raw = await self._client.get_order_book(token_id)
        return normalize.to_order_book(token_id, raw)

    async def get_balance(self) -> Balance:
        await self._client.initialize()
        raw = await self._client.get_collateral_balance()
        return normalize.to_balance(self._client.funder, raw)

    async def get_positions(self) -> PositionSummary:
        await self._client.initialize()
        orders = await self._client.get_open_orders()
        return normalize.summarize_positions(orders)

    async def get_trades(self, limit: int = 20) -> list[Trade]:
        await self._client.initialize()
        trades = await self._client.get_trades()
        return [normalize.to_trade(t) for t in (trades or [])[:limit]]
