"""Order requests accepted by the trading facade."""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from .models import OrderSide


class PlaceOrderRequest(BaseModel):
    """Request to place an order. A missing limit price means a market order."""

    account_id: str
    symbol: str
    side: OrderSide
    quantity: Decimal
    limit_price: Optional[Decimal] = Field(default=None, description="Limit price (market if empty)")


class CancelOrderRequest(BaseModel):
    """Request to cancel an order."""

    order_id: str
    account_id: str


class ReplaceOrderRequest(BaseModel):
    """Request to replace an order's quantity and/or price."""

    order_id: str
    account_id: str
    new_quantity: Optional[Decimal] = None
    new_price: Optional[Decimal] = None
