"""Facade: a single trading interface over the order subsystems."""
from .contracts import CancelOrderResult, PlaceOrderResult, ReplaceOrderResult, TradingOperations
from .scenario import FacadeScenario
from .trading_facade import TradingFacade

__all__ = [
    "CancelOrderResult",
    "FacadeScenario",
    "PlaceOrderResult",
    "ReplaceOrderResult",
    "TradingFacade",
    "TradingOperations",
]
