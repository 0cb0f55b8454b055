"""Shared fixtures: settings, a stubbed Gamma API and a mocked CLOB client."""
from __future__ import annotations

import json
from unittest.mock import MagicMock

import httpx
import pytest

from polytools.config import Settings
from polytools.platforms.polymarket import PolymarketClient

TEST_KEY = "0x" + "11" * 32
FUNDER = "0x000000000000000000000000000000000000f00d"


def make_settings(**overrides) -> Settings:
    values = {"private_key": TEST_KEY, "funder": FUNDER}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def result_data(result: dict):
    """Decode the JSON payload of a tool envelope."""
    return json.loads(result["content"][0]["text"])


class GammaStub:
    """Route table for the fake Gamma API, keyed by path."""

    def __init__(self):
        self.routes: dict[str, tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, {"error": "not found"}))
        return httpx.Response(status, json=body)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def gamma() -> GammaStub:
    return GammaStub()


@pytest.fixture
def clob() -> MagicMock:
    clob = MagicMock()
    clob.get_orders.return_value = []
    clob.get_trades.return_value = []
    clob.get_tick_size.return_value = "0.01"
    clob.get_neg_risk.return_value = False
    clob.get_balance_allowance.return_value = {"balance": "1000000", "allowance": "500000"}
    clob.get_order_book.return_value = {"bids": [], "asks": []}
    clob.create_order.return_value = {"signed": True}
    clob.post_order.return_value = {"orderID": "0xorder", "status": "live", "errorMsg": ""}
    clob.cancel.return_value = {"canceled": ["0xorder"], "not_canceled": {}}
    return clob


@pytest.fixture
def client(settings, clob, gamma) -> PolymarketClient:
    return PolymarketClient(settings, clob=clob, gamma_transport=httpx.MockTransport(gamma.handler))


def gamma_market(**overrides) -> dict:
    market = {
        "conditionId": "0xcond",
        "question": "Will it rain tomorrow?",
        "outcomes": '["Yes", "No"]',
        "outcomePrices": '["0.62", "0.38"]',
        "clobTokenIds": '["111", "222"]',
        "volume": "12345.6",
        "endDate": "2026-12-31T00:00:00Z",
        "active": True,
        "closed": False,
    }
    market.update(overrides)
    return market
