"""Prototype contract."""
from typing import Protocol, TypeVar

T = TypeVar("T", bound="Prototype")


class Prototype(Protocol):
    def clone(self: T) -> T:
        """Return an independent deep copy."""
        ...
