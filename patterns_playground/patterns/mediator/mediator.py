"""
Mediator with an explicit handler registry.

Handlers are registered by request class when the container is built.
send() dispatches on the exact type of the request; there is no
subclass fallback and no discovery.
"""
import threading
from typing import Any, Dict, List, Type

import structlog

from .contracts import HandlerNotFoundError, RequestHandler

logger = structlog.get_logger(__name__)


class Mediator:
    def __init__(self) -> None:
        self._handlers: Dict[Type[Any], RequestHandler] = {}
        self._lock = threading.Lock()

    def register(self, request_type: Type[Any], handler: RequestHandler) -> None:
        with self._lock:
            if request_type in self._handlers:
                raise ValueError(f"Handler already registered for {request_type.__name__}")
            self._handlers[request_type] = handler
        logger.debug(
            "mediator_handler_registered",
            request_type=request_type.__name__,
            handler=type(handler).__name__,
        )

    def registered_types(self) -> List[str]:
        with self._lock:
            return [request_type.__name__ for request_type in self._handlers]

    async def send(self, request: Any) -> Any:
        request_type = type(request)
        with self._lock:
            handler = self._handlers.get(request_type)

        if handler is None:
            raise HandlerNotFoundError(
                f"No handler found for request type {request_type.__name__}"
            )

        logger.debug(
            "mediator_routing_request",
            request_type=request_type.__name__,
            handler=type(handler).__name__,
        )
        return await handler.handle(request)
