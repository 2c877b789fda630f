"""
Unit tests for pricing strategies and key-resolved payment providers.
"""
from decimal import Decimal

import pytest

from patterns_playground.domain import Order, OrderSide, Quote
from patterns_playground.patterns.strategy import (
    LimitPriceStrategy,
    MarketPriceStrategy,
    PricingStrategySelector,
    RiskAdjustedStrategy,
    VWAPStrategy,
    default_strategies,
)
from patterns_playground.patterns.strategy_advanced import (
    CryptoPaymentProvider,
    PaymentProviderResolver,
    PaymentValidationError,
    PayPalPaymentProvider,
    ProviderNotFoundError,
    ProviderPaymentService,
    StripePaymentProvider,
)

QUOTE = Quote(symbol="AAPL", bid=Decimal("150"), ask=Decimal("150.5"), last=Decimal("150.25"))


def _order(quantity: str, price: str, side: OrderSide = OrderSide.BUY) -> Order:
    return Order(
        order_id="ORD-T",
        account_id="ACC-001",
        symbol="AAPL",
        side=side,
        quantity=Decimal(quantity),
        price=Decimal(price),
    )


@pytest.fixture
def resolver() -> PaymentProviderResolver:
    return PaymentProviderResolver(
        [
            StripePaymentProvider(simulate_latency=False),
            PayPalPaymentProvider(simulate_latency=False),
            CryptoPaymentProvider(simulate_latency=False),
        ]
    )


class TestPricingStrategies:
    """Test suite for the pricing strategies."""

    @pytest.mark.unit
    def test_market_price_crosses_spread(self) -> None:
        """Test buys pay the ask and sells receive the bid."""
        strategy = MarketPriceStrategy()
        assert strategy.calculate_price(_order("100", "0"), QUOTE) == Decimal("150.5")
        assert strategy.calculate_price(_order("100", "0", OrderSide.SELL), QUOTE) == Decimal("150")

    @pytest.mark.unit
    def test_limit_price_falls_back_to_market(self) -> None:
        """Test the limit price is used unless unset or equal to the last trade."""
        strategy = LimitPriceStrategy()
        assert strategy.calculate_price(_order("100", "149"), QUOTE) == Decimal("149")
        assert strategy.calculate_price(_order("100", "150.25"), QUOTE) == Decimal("150.5")
        assert strategy.calculate_price(_order("100", "0"), QUOTE) == Decimal("150.5")

    @pytest.mark.unit
    def test_vwap_size_adjustment(self) -> None:
        """Test VWAP is mid plus a tenth of the spread, a touch lower for big orders."""
        strategy = VWAPStrategy()
        assert strategy.calculate_price(_order("100", "0"), QUOTE) == Decimal("150.30")
        assert strategy.calculate_price(_order("5000", "0"), QUOTE) == Decimal("150.299")

    @pytest.mark.unit
    def test_risk_premium_scales_with_notional(self) -> None:
        """Test the premium is 1.5x above 100,000 notional."""
        strategy = RiskAdjustedStrategy()
        assert strategy.calculate_price(_order("100", "0"), QUOTE) == Decimal("150.5") * Decimal("1.02")
        assert strategy.calculate_price(_order("1000", "0"), QUOTE) == Decimal("150.5") * Decimal("1.03")

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "quantity,price,expected",
        [
            ("10000", "300", "RiskAdjusted"),
            ("100", "150", "LimitPrice"),
            ("5000", "0", "VWAP"),
            ("100", "0", "MarketPrice"),
        ],
    )
    def test_selection_rules(self, quantity: str, price: str, expected: str) -> None:
        """Test the first matching rule picks the strategy."""
        selector = PricingStrategySelector(default_strategies())
        assert selector.select_strategy(_order(quantity, price)).name == expected

    @pytest.mark.unit
    def test_selector_requires_all_strategies(self) -> None:
        """Test a selector missing a strategy is rejected."""
        with pytest.raises(ValueError, match="Missing pricing strategies"):
            PricingStrategySelector([MarketPriceStrategy()])


class TestProviderResolver:
    """Test suite for PaymentProviderResolver."""

    @pytest.mark.unit
    def test_resolution_is_case_insensitive(self, resolver: PaymentProviderResolver) -> None:
        """Test STRIPE and stripe resolve to the same provider."""
        assert resolver.resolve("STRIPE") is resolver.resolve("stripe")
        assert resolver.resolve("Stripe").key == "stripe"

    @pytest.mark.unit
    @pytest.mark.parametrize("key", ["unknown", "", "   ", None])
    def test_unknown_or_empty_key(self, resolver: PaymentProviderResolver, key: str) -> None:
        """Test unknown and empty keys resolve to nothing."""
        assert resolver.resolve(key) is None

    @pytest.mark.unit
    def test_duplicate_keys_rejected(self) -> None:
        """Test two providers with the same key cannot be registered."""
        with pytest.raises(ValueError, match="Duplicate payment provider key"):
            PaymentProviderResolver([StripePaymentProvider(), StripePaymentProvider()])

    @pytest.mark.unit
    def test_list_available(self, resolver: PaymentProviderResolver) -> None:
        """Test every registered provider is listed."""
        assert resolver.keys() == ["stripe", "paypal", "crypto"]


class TestProviderPaymentService:
    """Test suite for ProviderPaymentService."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_not_found_lists_every_key(self, resolver: PaymentProviderResolver) -> None:
        """Test the not-found message names every registered provider."""
        service = ProviderPaymentService(resolver)

        with pytest.raises(ProviderNotFoundError) as exc_info:
            await service.process_payment(Decimal("10"), "USD", "unknown", "a@example.com")

        assert str(exc_info.value) == (
            "Payment provider 'unknown' not found. Available providers: stripe, paypal, crypto"
        )
        assert exc_info.value.provider_key == "unknown"

    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "amount,currency,key",
        [("0.99", "USD", "stripe"), ("100", "BTC", "stripe"), ("5", "BTC", "crypto")],
    )
    async def test_validation_failure(
        self, resolver: PaymentProviderResolver, amount: str, currency: str, key: str
    ) -> None:
        """Test amounts below minimum and unsupported currencies are rejected."""
        service = ProviderPaymentService(resolver)

        with pytest.raises(PaymentValidationError, match=f"Payment validation failed for provider '{key}'"):
            await service.process_payment(Decimal(amount), currency, key, "a@example.com")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delegates_to_provider(self, resolver: PaymentProviderResolver) -> None:
        """Test a valid payment is processed by the resolved provider."""
        service = ProviderPaymentService(resolver)

        result = await service.process_payment(Decimal("25"), "eth", "CRYPTO", "a@example.com")

        assert result.provider_used == "crypto"
        assert result.transaction_id.startswith("crypto_txn_")
        assert result.status in ("Success", "Failed")

    @pytest.mark.unit
    def test_available_providers(self, resolver: PaymentProviderResolver) -> None:
        """Test provider info exposes minimum amount and currencies."""
        info = {p.key: p for p in ProviderPaymentService(resolver).get_available_providers()}

        assert info["paypal"].minimum_amount == Decimal("0.50")
        assert info["crypto"].supported_currencies == ["BTC", "ETH", "USDT"]
