"""The Polymarket tool set: descriptions, parameter models and handlers."""

from polytools.platforms.base import MarketNotFoundError
from polytools.schemas.tools import (
    CancelOrderParams,
    GetMarketParams,
    GetOrderBookParams,
    GetTradesParams,
    ListMarketsParams,
    NoParams,
    PlaceOrderParams,
)
from polytools.services.market_data import MarketDataReader
from polytools.services.orders import OrderCanceller, OrderSubmitter
from polytools.tools.base import Tool

GET_MARKETS = "polymarket_get_markets"
GET_MARKET = "polymarket_get_market"
GET_ORDERBOOK = "polymarket_get_orderbook"
GET_BALANCE = "polymarket_get_balance"
GET_POSITIONS = "polymarket_get_positions"
GET_TRADES = "polymarket_get_trades"
PLACE_ORDER = "polymarket_place_order"
CANCEL_ORDER = "polymarket_cancel_order"

GET_MARKETS_DESCRIPTION = """List available prediction markets on Polymarket.

Returns market questions, current Yes/No prices, trading volume, and token IDs needed for trading.

**Example use cases:**
- "Show me markets about AI"
- "Find prediction markets about elections"
- "What markets are available on Polymarket?"

**Response includes:**
- condition_id: Unique market identifier
- question: The prediction question
- tokens: Array with token_id, outcome (Yes/No), and current price (0-1)
- volume: Total trading volume in USDC"""

GET_MARKET_DESCRIPTION = """Get detailed information about a specific prediction market.

Use this to get token IDs and current prices before placing orders.

**Parameters:**
- condition_id: The market's unique identifier (from polymarket_get_markets)

**Response includes:**
- Full market details including token_id for each outcome
- Current prices for Yes and No outcomes
- found: false when no market has that condition_id"""

GET_ORDERBOOK_DESCRIPTION = """Get the order book for a specific token showing current bids and asks.

Use this before placing orders to see market depth and best available prices.

**Parameters:**
- token_id: The token's unique identifier (from market's tokens array)

**Response includes:**
- bids: Buy orders sorted by price (highest first)
- asks: Sell orders sorted by price (lowest first)
- Each entry has price (0-1) and size (in shares)

**Trading tip:**
- To BUY immediately, use a price >= lowest ask
- To SELL immediately, use a price <= highest bid"""

GET_BALANCE_DESCRIPTION = """Get the USDC balance and allowance for the configured wallet.

Use this to check available funds before placing orders.

**Response includes:**
- address: The wallet address (funder/proxy wallet)
- balance: Available USDC balance (in smallest units, divide by 1e6 for dollars)
- allowance: Approved spending allowance"""

GET_POSITIONS_DESCRIPTION = """Get all open orders and positions for the configured wallet.

Use this to see current exposure and pending orders.

**Response includes:**
- positions: Grouped by token with size and price info
- open_orders: All pending orders with details"""

GET_TRADES_DESCRIPTION = """Get recent executed trades for the configured wallet.

Use this to see trade history and execution prices.

**Parameters:**
- limit: Maximum number of trades to return (default: 20)"""

PLACE_ORDER_DESCRIPTION = """Place a limit order on Polymarket.

CAUTION: This executes a REAL trade with REAL funds!

**Parameters:**
- token_id: The token to trade (from market's tokens array)
- side: "BUY" or "SELL"
- size: Number of shares (minimum 5)
- price: Price per share between 0 and 1 (exclusive)

**Examples:**
- BUY 10 shares of "Yes" at $0.60: side="BUY", size="10", price="0.60"
- SELL 5 shares at $0.75: side="SELL", size="5", price="0.75"

**Important:**
- Price represents probability (0.60 = 60% chance)
- For immediate fills, use price at or better than current market
- Minimum order size is 5 shares
- Orders may partially fill"""

CANCEL_ORDER_DESCRIPTION = """Cancel an existing order on Polymarket.

**Parameters:**
- order_id: The order ID to cancel (from polymarket_get_positions)

**Note:** Only open (unfilled) orders can be cancelled."""


def create_polymarket_tools(
    reader: MarketDataReader,
    submitter: OrderSubmitter,
    canceller: OrderCanceller,
) -> list[Tool]:
    async def get_markets(p: ListMarketsParams):
        return await reader.list_markets(p.limit, p.offset, p.search)

    async def get_market(p: GetMarketParams):
        try:
            return await reader.get_market(p.condition_id)
        except MarketNotFoundError as e:
            return {"condition_id": p.condition_id, "found": False, "message": e.message}

    async def get_orderbook(p: GetOrderBookParams):
        return await reader.get_order_book(p.token_id)

    async def get_balance(p: NoParams):
        return await reader.get_balance()

    async def get_positions(p: NoParams):
        return await reader.get_positions()

    async def get_trades(p: GetTradesParams):
        return await reader.get_trades(p.limit)

    async def place_order(p: PlaceOrderParams):
        return await submitter.submit(p.token_id, p.side, p.size, p.price)

    async def cancel_order(p: CancelOrderParams):
        return await canceller.cancel(p.order_id)

    return [
        Tool(GET_MARKETS, GET_MARKETS_DESCRIPTION, ListMarketsParams, get_markets),
        Tool(GET_MARKET, GET_MARKET_DESCRIPTION, GetMarketParams, get_market),
        Tool(GET_ORDERBOOK, GET_ORDERBOOK_DESCRIPTION, GetOrderBookParams, get_orderbook),
        Tool(GET_BALANCE, GET_BALANCE_DESCRIPTION, NoParams, get_balance),
        Tool(GET_POSITIONS, GET_POSITIONS_DESCRIPTION, NoParams, get_positions),
        Tool(GET_TRADES, GET_TRADES_DESCRIPTION, GetTradesParams, get_trades),
        Tool(PLACE_ORDER, PLACE_ORDER_DESCRIPTION, PlaceOrderParams, place_order, mutating=True),
        Tool(CANCEL_ORDER, CANCEL_ORDER_DESCRIPTION, CancelOrderParams, cancel_order, mutating=True),
    ]
