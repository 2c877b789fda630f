"""Contract for the shared configuration service."""
from typing import Protocol


class ConfigurationProvider(Protocol):
    """Read-only configuration with access accounting."""

    @property
    def instance_id(self) -> str:
        ...

    @property
    def access_count(self) -> int:
        ...

    def get_value(self, key: str) -> str:
        """Return the value for key, or an empty string if it is unknown."""
        ...
