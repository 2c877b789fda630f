"""
Pricing strategies and the rule-based selector.

Selection rules, first match wins:
1. order value > 500,000  -> RiskAdjusted
2. order carries a price  -> LimitPrice
3. quantity > 1,000       -> VWAP
4. otherwise              -> MarketPrice
"""
from decimal import Decimal
from typing import Dict, Iterable, List

from patterns_playground.domain import Order, OrderSide, Quote

from .contracts import PricingStrategy

RISK_SELECTION_THRESHOLD = Decimal("500000")
VWAP_QUANTITY_THRESHOLD = Decimal("1000")


def _touch_price(order: Order, quote: Quote) -> Decimal:
    """Price a market order would cross at: ask for buys, bid for sells."""
    return quote.ask if order.side == OrderSide.BUY else quote.bid


class MarketPriceStrategy:
    name = "MarketPrice"

    def calculate_price(self, order: Order, quote: Quote) -> Decimal:
        return _touch_price(order, quote)


class LimitPriceStrategy:
    """Use the order's own price unless it is unset or equal to the last trade."""

    name = "LimitPrice"

    def calculate_price(self, order: Order, quote: Quote) -> Decimal:
        if order.price > 0 and order.price != quote.last:
            return order.price
        return _touch_price(order, quote)


class VWAPStrategy:
    """Simplified VWAP: mid plus a tenth of the spread, a touch better for big orders."""

    name = "VWAP"

    def calculate_price(self, order: Order, quote: Quote) -> Decimal:
        size_adjustment = Decimal("-0.001") if order.quantity > VWAP_QUANTITY_THRESHOLD else Decimal("0")
        return quote.mid + quote.spread * Decimal("0.1") + size_adjustment


class RiskAdjustedStrategy:
    """Touch price plus a risk premium, 1.5x for notionals above 100,000."""

    name = "RiskAdjusted"

    def __init__(self, risk_premium: Decimal = Decimal("0.02")):
        self.risk_premium = risk_premium

    def calculate_price(self, order: Order, quote: Quote) -> Decimal:
        base_price = _touch_price(order, quote)
        multiplier = Decimal("1.5") if order.quantity * base_price > Decimal("100000") else Decimal("1.0")
        return base_price * (1 + self.risk_premium * multiplier)


def default_strategies() -> List[PricingStrategy]:
    return [MarketPriceStrategy(), LimitPriceStrategy(), VWAPStrategy(), RiskAdjustedStrategy()]


class PricingStrategySelector:
    def __init__(self, strategies: Iterable[PricingStrategy]):
        self._by_name: Dict[str, PricingStrategy] = {s.name: s for s in strategies}
        missing = {"MarketPrice", "LimitPrice", "VWAP", "RiskAdjusted"} - set(self._by_name)
        if missing:
            raise ValueError(f"Missing pricing strategies: {sorted(missing)}")

    @property
    def strategies(self) -> List[PricingStrategy]:
        return list(self._by_name.values())

    def select_strategy(self, order: Order) -> PricingStrategy:
        if order.value > RISK_SELECTION_THRESHOLD:
            return self._by_name["RiskAdjusted"]
        if order.price > 0:
            return self._by_name["LimitPrice"]
        if order.quantity > VWAP_QUANTITY_THRESHOLD:
            return self._by_name["VWAP"]
        return self._by_name["MarketPrice"]
