"""Design patterns playground: sixteen patterns on an order and payment domain."""

__version__ = "1.0.0"
