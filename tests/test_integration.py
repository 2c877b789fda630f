"""
Integration tests for the HTTP API.
"""
from datetime import datetime, timezone
from typing import Any, Dict

import pytest
from httpx import AsyncClient

PATTERN_NAMES = [
    "singleton",
    "factory-method",
    "abstract-factory",
    "builder",
    "adapter",
    "command",
    "decorator",
    "strategy",
    "strategy-advanced",
    "observer",
    "facade",
    "repository",
    "mediator",
    "state",
    "prototype",
    "chain-of-responsibility",
]


def _payment(**overrides: Any) -> Dict[str, Any]:
    body = {
        "amount": "100.00",
        "currency": "usd",
        "providerKey": "stripe",
        "customerEmail": "customer@example.com",
    }
    body.update(overrides)
    return body


class TestPatternEndpoints:
    """Tests for /api/patterns."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_list_patterns(self, client: AsyncClient) -> None:
        """Test listing returns every pattern with its routes."""
        response = await client.get("/api/patterns")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 16
        assert [p["name"] for p in data["patterns"]] == PATTERN_NAMES
        assert data["patterns"][0]["demo"] == "/api/patterns/singleton/demo"

    @pytest.mark.integration
    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", PATTERN_NAMES)
    async def test_demo_returns_envelope(self, client: AsyncClient, name: str) -> None:
        """Test every demo returns the demo envelope."""
        response = await client.get(f"/api/patterns/{name}/demo")

        assert response.status_code == 200
        data = response.json()
        assert data["pattern"]
        assert data["description"]
        assert "result" in data

    @pytest.mark.integration
    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", PATTERN_NAMES)
    async def test_self_test_passes(self, client: AsyncClient, name: str) -> None:
        """Test every self-test reports PASS with all checks passing."""
        response = await client.get(f"/api/patterns/{name}/test")

        assert response.status_code == 200
        data = response.json()
        failed = [c for c in data["checks"] if not c["pass"]]
        assert failed == []
        assert data["status"] == "PASS"
        assert data["checks"]

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_strategy_demo_selects_risk_adjusted(self, client: AsyncClient) -> None:
        """Test the strategy demo prices with each strategy and selects for large orders."""
        response = await client.get("/api/patterns/strategy/demo")

        results = response.json()["result"]
        priced = [r for r in results if "strategy" in r]
        selections = [r for r in results if "selection" in r]

        assert [r["strategy"] for r in priced] == ["MarketPrice", "LimitPrice", "VWAP", "RiskAdjusted"]
        assert len(selections) == 1
        assert selections[0]["selected_strategy"] == "RiskAdjusted"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_unknown_pattern(self, client: AsyncClient) -> None:
        """Test unknown pattern names return 404."""
        response = await client.get("/api/patterns/visitor/demo")

        assert response.status_code == 404
        assert response.json()["detail"] == "Pattern 'visitor' not found"


class TestStrategyAdvancedEndpoints:
    """Tests for /api/strategy-advanced."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_process_payment(self, client: AsyncClient) -> None:
        """Test a payment through a known provider succeeds."""
        response = await client.post("/api/strategy-advanced/process-payment", json=_payment())

        assert response.status_code == 200
        data = response.json()
        assert data["provider_used"] == "stripe"
        assert data["transaction_id"].startswith("stripe_txn_")
        assert data["status"] in ("Success", "Failed")

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_provider_key_is_case_insensitive(self, client: AsyncClient) -> None:
        """Test provider keys resolve regardless of case."""
        response = await client.post(
            "/api/strategy-advanced/process-payment",
            json=_payment(providerKey="PayPal", currency="CAD"),
        )

        assert response.status_code == 200
        assert response.json()["provider_used"] == "paypal"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_unknown_provider(self, client: AsyncClient) -> None:
        """Test an unknown provider returns 404 listing the available keys."""
        response = await client.post(
            "/api/strategy-advanced/process-payment", json=_payment(providerKey="venmo")
        )

        assert response.status_code == 404
        data = response.json()
        assert data["providerKey"] == "venmo"
        assert "stripe" in data["error"]
        assert "paypal" in data["error"]
        assert "crypto" in data["error"]

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_below_minimum(self, client: AsyncClient) -> None:
        """Test a provider rejecting the amount returns 400."""
        response = await client.post(
            "/api/strategy-advanced/process-payment",
            json=_payment(providerKey="crypto", currency="BTC", amount="5"),
        )

        assert response.status_code == 400
        assert response.json()["providerKey"] == "crypto"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_unsupported_currency(self, client: AsyncClient) -> None:
        """Test a provider rejecting the currency returns 400."""
        response = await client.post(
            "/api/strategy-advanced/process-payment", json=_payment(currency="JPY")
        )

        assert response.status_code == 400

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_negative_amount_rejected_by_provider(self, client: AsyncClient) -> None:
        """Test a negative amount reaches the provider and comes back as 400."""
        response = await client.post(
            "/api/strategy-advanced/process-payment", json=_payment(amount="-1")
        )

        assert response.status_code == 400
        assert response.json()["providerKey"] == "stripe"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_short_currency_rejected_by_provider(self, client: AsyncClient) -> None:
        """Test a two-letter currency is a provider rejection, not a schema error."""
        response = await client.post(
            "/api/strategy-advanced/process-payment", json=_payment(currency="EU")
        )

        assert response.status_code == 400

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_missing_provider_key(self, client: AsyncClient) -> None:
        """Test an omitted providerKey is treated as an unknown provider."""
        body = _payment()
        body.pop("providerKey")

        response = await client.post("/api/strategy-advanced/process-payment", json=body)

        assert response.status_code == 404
        data = response.json()
        assert data["providerKey"] == ""
        for key in ("stripe", "paypal", "crypto"):
            assert key in data["error"]

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_error_body_carries_timestamp(self, client: AsyncClient) -> None:
        """Test provider errors are stamped with an ISO-8601 UTC time."""
        response = await client.post(
            "/api/strategy-advanced/process-payment", json=_payment(providerKey="venmo")
        )

        timestamp = datetime.fromisoformat(response.json()["timestamp"].replace("Z", "+00:00"))
        assert timestamp.tzinfo is not None
        assert abs((datetime.now(timezone.utc) - timestamp).total_seconds()) < 60

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_list_providers(self, client: AsyncClient) -> None:
        """Test providers are listed with their limits."""
        response = await client.get("/api/strategy-advanced/providers")

        assert response.status_code == 200
        providers = {p["key"]: p for p in response.json()}
        assert set(providers) == {"stripe", "paypal", "crypto"}
        assert providers["crypto"]["supported_currencies"] == ["BTC", "ETH", "USDT"]


class TestMonitoringEndpoints:
    """Tests for health, metrics and root endpoints."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient) -> None:
        """Test health reports every service check healthy."""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert set(data["checks"]) == {"configuration", "payment_providers", "event_bus"}

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_probes(self, client: AsyncClient) -> None:
        """Test liveness and readiness probes."""
        live = await client.get("/health/live")
        ready = await client.get("/health/ready")

        assert live.json()["status"] == "alive"
        assert ready.status_code == 200

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_metrics(self, client: AsyncClient) -> None:
        """Test Prometheus metrics are exposed after a request."""
        await client.get("/api/patterns/singleton/demo")
        response = await client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "pattern_requests_total" in response.text

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_request_id_header(self, client: AsyncClient) -> None:
        """Test every response carries a request id."""
        response = await client.get("/")

        assert response.status_code == 200
        assert response.headers["X-Request-ID"]
        assert response.json()["status"] == "operational"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_inbound_request_id_is_echoed(self, client: AsyncClient) -> None:
        """Test a caller-supplied request id is kept."""
        response = await client.get("/health/live", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"
