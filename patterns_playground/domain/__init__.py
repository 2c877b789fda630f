"""Shared domain records."""
from .models import (
    Account,
    CurrencyMismatchError,
    LedgerEntry,
    Money,
    Order,
    OrderSide,
    OrderStatus,
    Quote,
    utc_now,
)
from .requests import CancelOrderRequest, PlaceOrderRequest, ReplaceOrderRequest
from .responses import PatternCheck, PatternDemoResponse, PatternTestResponse, check

__all__ = [
    "Account",
    "CancelOrderRequest",
    "CurrencyMismatchError",
    "LedgerEntry",
    "Money",
    "Order",
    "OrderSide",
    "OrderStatus",
    "PatternCheck",
    "PatternDemoResponse",
    "PatternTestResponse",
    "PlaceOrderRequest",
    "Quote",
    "ReplaceOrderRequest",
    "check",
    "utc_now",
]
