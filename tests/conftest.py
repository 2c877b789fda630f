"""
Pytest configuration and fixtures.
"""
from decimal import Decimal
from typing import Any, AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from patterns_playground.api.main import app
from patterns_playground.config import Settings
from patterns_playground.container import ServiceContainer, get_container
from patterns_playground.domain import Order, OrderSide


def pytest_configure(config: Any) -> None:
    config.addinivalue_line("markers", "unit: fast tests with no I/O")
    config.addinivalue_line("markers", "integration: tests that go through the HTTP API")


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with no simulated latency or retry delays."""
    return Settings(
        app_name="patterns-playground-test",
        app_env="test",
        log_level="DEBUG",
        simulate_gateway_latency=False,
        command_retry_delay_seconds=0,
        payment_retry_base_delay=0,
    )


@pytest.fixture
def container(test_settings: Settings) -> ServiceContainer:
    """Fresh container per test so state never leaks between tests."""
    return ServiceContainer(test_settings)


@pytest_asyncio.fixture
async def client(container: ServiceContainer) -> AsyncGenerator[AsyncClient, Any]:
    """Create test HTTP client bound to the test container."""
    app.dependency_overrides[get_container] = lambda: container
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def sample_order() -> Order:
    """A small valid limit buy."""
    return Order(
        order_id="ORD-TEST-001",
        account_id="ACC-001",
        symbol="AAPL",
        side=OrderSide.BUY,
        quantity=Decimal("100"),
        price=Decimal("150"),
    )
