"""Builder: fluent, validated order construction."""
from .contracts import OrderBuildError, OrderBuilderContract
from .order_builder import OrderBuilder
from .scenario import BuilderScenario

__all__ = ["BuilderScenario", "OrderBuildError", "OrderBuilder", "OrderBuilderContract"]
