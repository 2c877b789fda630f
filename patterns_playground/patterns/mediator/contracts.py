"""Mediator contracts: requests, their handlers and the dispatcher."""
from typing import Any, Protocol, Type


class HandlerNotFoundError(Exception):
    """Raised when no handler is registered for a request's type."""

    pass


class RequestHandler(Protocol):
    async def handle(self, request: Any) -> Any:
        ...


class RequestSender(Protocol):
    def register(self, request_type: Type[Any], handler: RequestHandler) -> None:
        ...

    async def send(self, request: Any) -> Any:
        ...
