"""Strategy: interchangeable pricing algorithms chosen per order."""
from .contracts import PricingStrategy, StrategySelector
from .pricing import (
    LimitPriceStrategy,
    MarketPriceStrategy,
    PricingStrategySelector,
    RiskAdjustedStrategy,
    VWAPStrategy,
    default_strategies,
)
from .scenario import StrategyScenario

__all__ = [
    "LimitPriceStrategy",
    "MarketPriceStrategy",
    "PricingStrategy",
    "PricingStrategySelector",
    "RiskAdjustedStrategy",
    "StrategyScenario",
    "StrategySelector",
    "VWAPStrategy",
    "default_strategies",
]
