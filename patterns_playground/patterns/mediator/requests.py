"""Order requests routed through the mediator and their handlers."""
import uuid
from decimal import Decimal
from typing import Optional

import structlog
from pydantic import BaseModel

from patterns_playground.domain import Order, OrderSide
from patterns_playground.patterns.repository import Repository

logger = structlog.get_logger(__name__)


class GetOrderRequest(BaseModel):
    order_id: str

    model_config = {"frozen": True}


class CreateOrderRequest(BaseModel):
    account_id: str
    symbol: str
    side: OrderSide
    quantity: Decimal
    price: Decimal

    model_config = {"frozen": True}


class GetOrderHandler:
    def __init__(self, repository: Repository):
        self.repository = repository

    async def handle(self, request: GetOrderRequest) -> Optional[Order]:
        logger.info("get_order_request_handled", order_id=request.order_id)
        return self.repository.get_by_id(request.order_id)


class CreateOrderHandler:
    def __init__(self, repository: Repository):
        self.repository = repository

    async def handle(self, request: CreateOrderRequest) -> Order:
        order = Order(
            order_id=f"ORD-{uuid.uuid4().hex}",
            account_id=request.account_id,
            symbol=request.symbol,
            side=request.side,
            quantity=request.quantity,
            price=request.price,
        )
        self.repository.add(order)
        logger.info("order_created_via_mediator", order_id=order.order_id)
        return order
