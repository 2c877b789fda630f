"""
Health checks for readiness/liveness probes.

Checks:
- Configuration service holds its trading settings
- Payment provider resolver has providers registered
- Event bus has subscribers wired
"""
from typing import TYPE_CHECKING, Any, Dict

import structlog

if TYPE_CHECKING:
    from patterns_playground.container import ServiceContainer

logger = structlog.get_logger(__name__)


class HealthCheckError(Exception):
    """Raised when health check fails."""

    pass


class HealthCheck:
    """
    Health check service for the in-process pattern services.

    Provides:
    - Configuration service check
    - Payment provider registry check
    - Event bus subscription check
    - Overall system health status
    """

    def __init__(self, container: "ServiceContainer") -> None:
        self.container = container

    async def check_configuration(self) -> Dict[str, Any]:
        """
        Check the configuration service is populated.

        Raises:
            HealthCheckError: If no configuration keys are present
        """
        config_service = self.container.config_service
        keys = config_service.keys()
        if not keys:
            raise HealthCheckError("Configuration service has no values")

        return {
            "status": "healthy",
            "service": "configuration",
            "instance_id": config_service.instance_id,
            "keys": len(keys),
        }

    async def check_payment_providers(self) -> Dict[str, Any]:
        """
        Check at least one payment provider is registered.

        Raises:
            HealthCheckError: If the resolver is empty
        """
        providers = self.container.provider_resolver.keys()
        if not providers:
            raise HealthCheckError("No payment providers registered")

        return {
            "status": "healthy",
            "service": "payment_providers",
            "providers": providers,
        }

    async def check_event_bus(self) -> Dict[str, Any]:
        """
        Check event handlers are subscribed.

        Raises:
            HealthCheckError: If nothing is subscribed
        """
        subscriptions = self.container.event_bus.subscription_count()
        if subscriptions == 0:
            raise HealthCheckError("Event bus has no subscribers")

        return {
            "status": "healthy",
            "service": "event_bus",
            "subscribed_event_types": subscriptions,
        }

    async def check_all(self) -> Dict[str, Any]:
        """
        Run all health checks.

        Returns:
            Dict[str, Any]: Overall health status
        """
        checks = {}
        all_healthy = True

        for name, probe in (
            ("configuration", self.check_configuration),
            ("payment_providers", self.check_payment_providers),
            ("event_bus", self.check_event_bus),
        ):
            try:
                checks[name] = await probe()
            except HealthCheckError as e:
                logger.error("health_check_failed", service=name, error=str(e))
                checks[name] = {"status": "unhealthy", "service": name, "error": str(e)}
                all_healthy = False

        return {
            "status": "healthy" if all_healthy else "unhealthy",
            "checks": checks,
        }

    async def liveness(self) -> Dict[str, Any]:
        """Simple check that the application is running."""
        return {
            "status": "alive",
            "message": "Application is running",
        }

    async def readiness(self) -> Dict[str, Any]:
        """Ready when every service check passes."""
        return await self.check_all()
