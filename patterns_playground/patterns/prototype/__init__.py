"""Prototype: independent copies of order and portfolio snapshots."""
from .contracts import Prototype
from .scenario import PrototypeScenario
from .snapshots import OrderSnapshot, PortfolioSnapshot

__all__ = ["OrderSnapshot", "PortfolioSnapshot", "Prototype", "PrototypeScenario"]
