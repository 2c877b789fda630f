"""
Trading facade.

One entry point for order placement that hides validator selection,
command execution with retry and audit, persistence and event
publication. Callers get result objects; nothing raises out of here.
"""
import uuid
from decimal import Decimal

import structlog

from patterns_playground.domain import (
    CancelOrderRequest,
    Order,
    OrderStatus,
    PlaceOrderRequest,
    ReplaceOrderRequest,
)
from patterns_playground.patterns.command import (
    CommandHandler,
    InMemoryOrderRepository,
    PlaceOrderCommand,
)
from patterns_playground.patterns.factory_method import OrderValidatorFactory
from patterns_playground.patterns.observer import (
    EventPublisher,
    OrderCancelledEvent,
    OrderPlacedEvent,
)

from .contracts import CancelOrderResult, PlaceOrderResult, ReplaceOrderResult

logger = structlog.get_logger(__name__)

REPLACEABLE_STATUSES = (OrderStatus.PENDING, OrderStatus.PLACED, OrderStatus.PARTIALLY_FILLED)


class TradingFacade:
    def __init__(
        self,
        validator_factory: OrderValidatorFactory,
        command_handler: CommandHandler,
        order_repository: InMemoryOrderRepository,
        event_bus: EventPublisher,
    ):
        self.validator_factory = validator_factory
        self.command_handler = command_handler
        self.order_repository = order_repository
        self.event_bus = event_bus

    async def place_order(self, request: PlaceOrderRequest) -> PlaceOrderResult:
        try:
            order = Order(
                order_id=f"ORD-{uuid.uuid4().hex}",
                account_id=request.account_id,
                symbol=request.symbol,
                side=request.side,
                quantity=request.quantity,
                price=request.limit_price if request.limit_price is not None else Decimal("0"),
            )

            validation = self.validator_factory.create_validator(order).validate(order)
            if not validation.is_valid:
                logger.warning(
                    "facade_order_rejected",
                    order_id=order.order_id,
                    errors=validation.errors,
                )
                return PlaceOrderResult(success=False, errors=validation.errors)

            outcome = await self.command_handler.execute(
                PlaceOrderCommand(order, self.order_repository)
            )
            if not outcome.success:
                return PlaceOrderResult(
                    success=False, errors=[outcome.error_message or "Command failed"]
                )

            await self.event_bus.publish(
                OrderPlacedEvent(
                    order_id=order.order_id,
                    account_id=order.account_id,
                    symbol=order.symbol,
                    quantity=order.quantity,
                    price=order.price,
                )
            )

            logger.info("facade_order_placed", order_id=order.order_id, symbol=order.symbol)
            return PlaceOrderResult(success=True, order=order)

        except Exception as e:
            logger.error("facade_place_order_failed", error=str(e), exc_info=True)
            return PlaceOrderResult(success=False, errors=[str(e)])

    async def cancel_order(self, request: CancelOrderRequest) -> CancelOrderResult:
        try:
            order = self.order_repository.get_by_id(request.order_id)
            if order is None:
                return CancelOrderResult(success=False, error_message="Order not found")
            if order.account_id != request.account_id:
                return CancelOrderResult(success=False, error_message="Unauthorized")

            self.order_repository.update(order.transition(OrderStatus.CANCELLED))
            await self.event_bus.publish(
                OrderCancelledEvent(order_id=order.order_id, account_id=order.account_id)
            )

            logger.info("facade_order_cancelled", order_id=order.order_id)
            return CancelOrderResult(success=True)

        except Exception as e:
            logger.error("facade_cancel_order_failed", order_id=request.order_id, error=str(e))
            return CancelOrderResult(success=False, error_message=str(e))

    async def replace_order(self, request: ReplaceOrderRequest) -> ReplaceOrderResult:
        """Change quantity and/or price of an open order, revalidating the result."""
        try:
            order = self.order_repository.get_by_id(request.order_id)
            if order is None:
                return ReplaceOrderResult(success=False, errors=["Order not found"])
            if order.account_id != request.account_id:
                return ReplaceOrderResult(success=False, errors=["Unauthorized"])
            if order.status not in REPLACEABLE_STATUSES:
                return ReplaceOrderResult(
                    success=False,
                    errors=[f"Order cannot be replaced in {order.status.value} state"],
                )

            replaced = order.transition(
                order.status,
                quantity=request.new_quantity if request.new_quantity is not None else order.quantity,
                price=request.new_price if request.new_price is not None else order.price,
            )
            validation = self.validator_factory.create_validator(replaced).validate(replaced)
            if not validation.is_valid:
                return ReplaceOrderResult(success=False, errors=validation.errors)

            self.order_repository.update(replaced)
            logger.info(
                "facade_order_replaced",
                order_id=order.order_id,
                row_version=replaced.row_version,
            )
            return ReplaceOrderResult(success=True, order=replaced)

        except Exception as e:
            logger.error("facade_replace_order_failed", order_id=request.order_id, error=str(e))
            return ReplaceOrderResult(success=False, errors=[str(e)])
