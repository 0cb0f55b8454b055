"""
Polymarket exchange client.
Gamma (market metadata) over httpx, the CLOB (order book, orders, balances) via py-clob-client.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

import httpx
from eth_account import Account
from py_clob_client.client import ClobClient
from py_clob_client.clob_types import (
    ApiCreds,
    AssetType,
    BalanceAllowanceParams,
    OpenOrderParams,
    OrderArgs,
    PartialCreateOrderOptions,
    TradeParams,
)
from py_clob_client.exceptions import PolyException

from polytools.config import Settings
from polytools.platforms.base import MarketNotFoundError, UpstreamError, WriteAccessError

logger = logging.getLogger(__name__)


class PolymarketClient:
    def __init__(
        self,
        settings: Settings,
        clob: Optional[ClobClient] = None,
        gamma_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings
        self._clob = clob
        self._gamma_transport = gamma_transport
        self._gamma: Optional[httpx.AsyncClient] = None
        self._ready = False
        self._lock = asyncio.Lock()
        self._funder = settings.funder or (
            Account.from_key(settings.private_key).address if settings.private_key else ""
        )

    @property
    def funder(self) -> str:
        return self._funder

    async def initialize(self) -> None:
        if self._ready:
            return
        async with self._lock:
            if self._ready:
                return
            if self._gamma is None:
                self._gamma = httpx.AsyncClient(
                    base_url=self._settings.gamma_api_url,
                    timeout=self._settings.http_timeout,
                    headers={"Content-Type": "application/json"},
                    transport=self._gamma_transport,
                )
            if self._clob is None:
                # assigned only once credentials are set; a failed derivation leaves _clob unset
                clob = self._build_clob()
                if not self._settings.has_api_creds and self._settings.private_key:
                    creds = await asyncio.to_thread(clob.create_or_derive_api_creds)
                    clob.set_api_creds(creds)
                    logger.info("Derived CLOB API credentials for %s", self._funder)
                self._clob = clob
            self._ready = True

    def _build_clob(self) -> ClobClient:
        s = self._settings
        creds = None
        if s.has_api_creds:
            creds = ApiCreds(api_key=s.api_key, api_secret=s.api_secret, api_passphrase=s.passphrase)
        return ClobClient(
            host=s.clob_api_url,
            chain_id=s.chain_id,
            key=s.private_key or None,
            creds=creds,
            signature_type=s.effective_signature_type,
            funder=self._funder or None,
        )

    async def close(self) -> None:
        if self._gamma:
            await self._gamma.aclose()

    def ensure_write_access(self) -> None:
        if self._settings.readonly:
            raise WriteAccessError("Write operations are disabled in readonly mode", code="readonly")
        if not self._settings.private_key:
            raise WriteAccessError("A private key is required for write operations", code="no_key")

    # Gamma

    async def _gamma_get(
        self, endpoint: str, what: str, not_found: Optional[str] = None, **kwargs
    ) -> httpx.Response:
        try:
            resp = await self._gamma.get(endpoint, **kwargs)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Failed to fetch {what}: {e}") from e
        if not_found and resp.status_code == 404:
            raise MarketNotFoundError(not_found, code="404")
        if resp.is_error:
            raise UpstreamError(f"Failed to fetch {what}: {resp.reason_phrase}", code=str(resp.status_code))
        return resp

    async def fetch_markets(self, params: dict) -> Any:
        resp = await self._gamma_get("/markets", "markets", params=params)
        return resp.json()

    async def fetch_market(self, condition_id: str) -> Any:
        resp = await self._gamma_get(
            f"/markets/{condition_id}", "market", not_found=f"Market not found: {condition_id}"
        )
        return resp.json()

    # CLOB

    async def _clob_call(self, fn: Callable, *args) -> Any:
        try:
            return await asyncio.to_thread(fn, *args)
        except PolyException as e:
            raise UpstreamError(str(e)) from e

    async def get_order_book(self, token_id: str) -> Any:
        return await self._clob_call(self._clob.get_order_book, token_id)

    async def get_tick_size(self, token_id: str) -> Any:
        return await self._clob_call(self._clob.get_tick_size, token_id)

    async def get_neg_risk(self, token_id: str) -> Any:
        return await self._clob_call(self._clob.get_neg_risk, token_id)

    async def get_collateral_balance(self) -> Any:
        params = BalanceAllowanceParams(asset_type=AssetType.COLLATERAL)
        return await self._clob_call(self._clob.get_balance_allowance, params)

    async def get_open_orders(self) -> Any:
        return await self._clob_call(self._clob.get_orders, OpenOrderParams())

    async def get_trades(self) -> Any:
        return await self._clob_call(self._clob.get_trades, TradeParams())

    async def create_order(self, args: OrderArgs, options: PartialCreateOrderOptions) -> Any:
        return await self._clob_call(self._clob.create_order, args, options)

    async def post_order(self, signed_order: Any) -> Any:
        return await self._clob_call(self._clob.post_order, signed_order)

    async def cancel(self, order_id: str) -> Any:
        return await self._clob_call(self._clob.cancel, order_id)
