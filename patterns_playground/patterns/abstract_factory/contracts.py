"""Contract for factories producing a matched gateway and configuration."""
from abc import ABC, abstractmethod
from typing import Dict

from pydantic import BaseModel

from patterns_playground.infrastructure import PaymentGateway


class GatewayConfig(BaseModel):
    """Provider-specific gateway configuration."""

    provider_name: str
    settings: Dict[str, str]


class PaymentGatewayFactory(ABC):
    """Creates a family of related objects: a gateway plus its configuration."""

    factory_type: str = ""

    @abstractmethod
    def create_payment_gateway(self) -> PaymentGateway:
        """Create the provider's gateway."""

    @abstractmethod
    def create_configuration(self) -> GatewayConfig:
        """Create configuration matching the gateway."""
