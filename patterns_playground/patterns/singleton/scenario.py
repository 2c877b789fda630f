"""Singleton demo and self-test."""
from patterns_playground.domain import PatternDemoResponse, PatternTestResponse, check

from .contracts import ConfigurationProvider

PATTERN = "Singleton"


class SingletonScenario:
    """Shows that every call reaches the same long-lived configuration service."""

    def __init__(self, config_service: ConfigurationProvider):
        self.config_service = config_service

    def run_demo(self) -> PatternDemoResponse:
        calls = []
        for call in range(1, 6):
            value = self.config_service.get_value("trading_api_url")
            calls.append(
                {
                    "call": call,
                    "instance_id": self.config_service.instance_id,
                    "config_value": value,
                    "access_count": self.config_service.access_count,
                }
            )

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates singleton pattern: same instance ID across multiple calls, "
                "shared state (access count)."
            ),
            result={
                "instance_id": self.config_service.instance_id,
                "calls": calls,
                "note": (
                    "Each API process owns its own instance. Use database constraints, "
                    "optimistic concurrency or distributed locks for cross-instance coordination."
                ),
            },
            metadata={
                "thread_safe": True,
                "scope": "process",
            },
        )

    def run_tests(self) -> PatternTestResponse:
        checks = []

        first_id = self.config_service.instance_id
        second_id = self.config_service.instance_id
        checks.append(
            check("Instance ID Consistency", first_id == second_id, f"Instance IDs match: {first_id}")
        )

        before = self.config_service.access_count
        self.config_service.get_value("test_key")
        after = self.config_service.access_count
        checks.append(
            check(
                "Access Count Increment",
                after == before + 1,
                f"Access count increased from {before} to {after}",
            )
        )

        api_url = self.config_service.get_value("trading_api_url")
        checks.append(
            check("Configuration Access", bool(api_url), f"Retrieved config value: {api_url}")
        )

        return PatternTestResponse.from_checks(PATTERN, checks)
