"""
Application service container.

Every long-lived service is built exactly once here, from settings, and
shared through get_container(). Tests build their own ServiceContainer
or override the get_container dependency.
"""
from decimal import Decimal
from functools import lru_cache
from typing import Any, Dict, List, Optional

import structlog

from patterns_playground.config import Settings, get_settings
from patterns_playground.infrastructure import FakeKafkaProducer, FakeStripeGateway, InMemoryMetrics
from patterns_playground.patterns.abstract_factory import (
    AbstractFactoryScenario,
    PayPalGatewayFactory,
    StripeGatewayFactory,
)
from patterns_playground.patterns.adapter import (
    AdapterScenario,
    LegacyMarketDataProvider,
    MarketDataAdapter,
)
from patterns_playground.patterns.builder import BuilderScenario
from patterns_playground.patterns.chain_of_responsibility import (
    ChainOfResponsibilityScenario,
    InMemoryAccountRepository,
    build_validation_chain,
)
from patterns_playground.patterns.command import (
    CommandHandler,
    CommandScenario,
    InMemoryOrderRepository,
)
from patterns_playground.patterns.decorator import DecoratorScenario, build_payment_pipeline
from patterns_playground.patterns.facade import FacadeScenario, TradingFacade
from patterns_playground.patterns.factory_method import (
    FactoryMethodScenario,
    ValueBasedValidatorFactory,
)
from patterns_playground.patterns.mediator import (
    CreateOrderHandler,
    CreateOrderRequest,
    GetOrderHandler,
    GetOrderRequest,
    Mediator,
    MediatorScenario,
)
from patterns_playground.patterns.observer import (
    InMemoryEventBus,
    ObserverScenario,
    default_handlers,
)
from patterns_playground.patterns.prototype import PrototypeScenario
from patterns_playground.patterns.repository import RepositoryScenario, order_repository
from patterns_playground.patterns.singleton import ConfigurationService, SingletonScenario
from patterns_playground.patterns.state import StateScenario
from patterns_playground.patterns.strategy import (
    PricingStrategySelector,
    StrategyScenario,
    default_strategies,
)
from patterns_playground.patterns.strategy_advanced import (
    CryptoPaymentProvider,
    PaymentProviderResolver,
    PayPalPaymentProvider,
    ProviderPaymentService,
    StrategyAdvancedScenario,
    StripePaymentProvider,
)

logger = structlog.get_logger(__name__)


class ServiceContainer:
    """Wires the shared services and one scenario per pattern."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        latency = self.settings.simulate_gateway_latency

        # Shared infrastructure
        self.config_service = ConfigurationService(self.settings)
        self.payment_metrics = InMemoryMetrics()
        self.kafka_producer = FakeKafkaProducer()

        self.event_bus = InMemoryEventBus(self.kafka_producer)
        self.event_handlers = default_handlers()
        for handler in self.event_handlers:
            self.event_bus.subscribe(handler.event_type, handler)

        # Order management
        self.validator_factory = ValueBasedValidatorFactory()
        self.order_store = InMemoryOrderRepository()
        self.command_handler = CommandHandler(
            max_attempts=self.settings.command_max_attempts,
            retry_delay_seconds=self.settings.command_retry_delay_seconds,
            max_audit_entries=self.settings.command_audit_max_entries,
        )
        self.trading_facade = TradingFacade(
            self.validator_factory, self.command_handler, self.order_store, self.event_bus
        )

        self.order_repository = order_repository()
        self.mediator = Mediator()
        self.mediator.register(GetOrderRequest, GetOrderHandler(self.order_repository))
        self.mediator.register(CreateOrderRequest, CreateOrderHandler(self.order_repository))

        self.account_repository = InMemoryAccountRepository()
        self.validation_chain = build_validation_chain(
            self.account_repository, Decimal(self.settings.max_order_size)
        )

        # Payments and market data
        self.gateway_factories = [
            StripeGatewayFactory(simulate_latency=latency),
            PayPalGatewayFactory(simulate_latency=latency),
        ]
        self.payment_service = build_payment_pipeline(
            FakeStripeGateway(simulate_latency=latency),
            self.payment_metrics,
            max_attempts=self.settings.payment_retry_max_attempts,
            base_delay_seconds=self.settings.payment_retry_base_delay,
        )
        self.provider_resolver = PaymentProviderResolver(
            [
                StripePaymentProvider(simulate_latency=latency),
                PayPalPaymentProvider(simulate_latency=latency),
                CryptoPaymentProvider(simulate_latency=latency),
            ]
        )
        self.provider_payment_service = ProviderPaymentService(self.provider_resolver)
        self.market_data = MarketDataAdapter(LegacyMarketDataProvider())
        self.strategy_selector = PricingStrategySelector(default_strategies())

        self.scenarios: Dict[str, Any] = {
            "singleton": SingletonScenario(self.config_service),
            "factory-method": FactoryMethodScenario(self.validator_factory),
            "abstract-factory": AbstractFactoryScenario(self.gateway_factories),
            "builder": BuilderScenario(),
            "adapter": AdapterScenario(self.market_data),
            "command": CommandScenario(self.command_handler, self.order_store),
            "decorator": DecoratorScenario(self.payment_service, self.payment_metrics),
            "strategy": StrategyScenario(self.strategy_selector),
            "strategy-advanced": StrategyAdvancedScenario(
                self.provider_resolver, self.provider_payment_service
            ),
            "observer": ObserverScenario(self.event_bus, self.event_handlers, self.kafka_producer),
            "facade": FacadeScenario(self.trading_facade),
            "repository": RepositoryScenario(self.order_repository),
            "mediator": MediatorScenario(self.mediator),
            "state": StateScenario(),
            "prototype": PrototypeScenario(),
            "chain-of-responsibility": ChainOfResponsibilityScenario(self.validation_chain),
        }

        logger.info(
            "service_container_initialized",
            config_instance_id=self.config_service.instance_id,
            patterns=len(self.scenarios),
            providers=self.provider_resolver.keys(),
        )

    def pattern_names(self) -> List[str]:
        return list(self.scenarios)

    def scenario(self, name: str) -> Any:
        """Scenario registered under name; KeyError if there is none."""
        return self.scenarios[name]


@lru_cache()
def get_container() -> ServiceContainer:
    """Process-wide container, built on first use."""
    return ServiceContainer()
