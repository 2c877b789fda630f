"""Mediator: requests dispatched to registered handlers."""
from .contracts import HandlerNotFoundError, RequestHandler, RequestSender
from .mediator import Mediator
from .requests import CreateOrderHandler, CreateOrderRequest, GetOrderHandler, GetOrderRequest
from .scenario import MediatorScenario

__all__ = [
    "CreateOrderHandler",
    "CreateOrderRequest",
    "GetOrderHandler",
    "GetOrderRequest",
    "HandlerNotFoundError",
    "Mediator",
    "MediatorScenario",
    "RequestHandler",
    "RequestSender",
]
