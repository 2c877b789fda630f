"""Pricing strategy contracts."""
from decimal import Decimal
from typing import Protocol

from patterns_playground.domain import Order, Quote


class PricingStrategy(Protocol):
    @property
    def name(self) -> str:
        ...

    def calculate_price(self, order: Order, quote: Quote) -> Decimal:
        ...


class StrategySelector(Protocol):
    def select_strategy(self, order: Order) -> PricingStrategy:
        ...
