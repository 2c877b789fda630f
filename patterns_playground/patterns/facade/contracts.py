"""Results returned by the trading facade."""
from typing import List, Optional, Protocol

from pydantic import BaseModel, Field

from patterns_playground.domain import (
    CancelOrderRequest,
    Order,
    PlaceOrderRequest,
    ReplaceOrderRequest,
)


class PlaceOrderResult(BaseModel):
    success: bool
    order: Optional[Order] = None
    errors: List[str] = Field(default_factory=list)


class CancelOrderResult(BaseModel):
    success: bool
    error_message: Optional[str] = None


class ReplaceOrderResult(BaseModel):
    success: bool
    order: Optional[Order] = None
    errors: List[str] = Field(default_factory=list)


class TradingOperations(Protocol):
    async def place_order(self, request: PlaceOrderRequest) -> PlaceOrderResult:
        ...

    async def cancel_order(self, request: CancelOrderRequest) -> CancelOrderResult:
        ...

    async def replace_order(self, request: ReplaceOrderRequest) -> ReplaceOrderResult:
        ...
