"""Parameter models for each tool. Their JSON Schema is what the host shows the model."""

from pydantic import BaseModel, ConfigDict, Field


class ListMarketsParams(BaseModel):
    limit: int = Field(default=10, ge=1, le=100, description="Maximum number of markets to return (1-100, default: 10)")
    offset: int = Field(default=0, ge=0, description="Number of markets to skip for pagination (default: 0)")
    search: str | None = Field(default=None, description="Search term to filter markets by question/slug")


class GetMarketParams(BaseModel):
    condition_id: str = Field(default="", description="The market's condition ID (unique identifier)")

    model_config = ConfigDict(json_schema_extra={"required": ["condition_id"]})


class GetOrderBookParams(BaseModel):
    token_id: str = Field(default="", description="The token ID to get orderbook for")

    model_config = ConfigDict(json_schema_extra={"required": ["token_id"]})


class NoParams(BaseModel):
    pass


class GetTradesParams(BaseModel):
    limit: int = Field(default=20, ge=1, le=100, description="Maximum number of trades to return (1-100, default: 20)")


class PlaceOrderParams(BaseModel):
    token_id: str = Field(default="", description="The token ID to trade")
    side: str = Field(default="", description='Order side: "BUY" or "SELL"', json_schema_extra={"enum": ["BUY", "SELL"]})
    size: str = Field(default="", description="Number of shares to trade (minimum 5)")
    price: str = Field(default="", description="Price per share (0 < price < 1)")

    # Agents often send size/price as JSON numbers.
    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={"required": ["token_id", "side", "size", "price"]},
    )


class CancelOrderParams(BaseModel):
    order_id: str = Field(default="", description="The order ID to cancel")

    model_config = ConfigDict(json_schema_extra={"required": ["order_id"]})
