"""
Resolution of request handler chains and exception handlers.

Both mappers resolve by linear scan in registration order and return the
first candidate whose ``can_handle`` answers True. A miss is a normal
outcome and yields None; it is the dispatcher that turns a missing request
handler into an error.

Usage:
    mapper = RequestMapper([
        RequestHandlerChain(FooIntentHandler()),
        RequestHandlerChain(BarIntentHandler()),
    ])
    chain = mapper.get_request_handler_chain(handler_input)
    if chain is not None:
        handler = chain.request_handler
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from chorus.dispatch.chain import BaseRequestHandlerChain
from chorus.dispatch.components import BaseExceptionHandler
from chorus.dispatch.handler_input import HandlerInput

logger = logging.getLogger(__name__)


class BaseRequestMapper(ABC):
    """Finds the chain whose handler can handle an input."""

    @abstractmethod
    def get_request_handler_chain(
        self, handler_input: HandlerInput
    ) -> BaseRequestHandlerChain | None:
        ...


class RequestMapper(BaseRequestMapper):
    """Ordered, first-match-wins request mapper.

    Insertion order is the resolution priority. Only ``can_handle`` is
    called during resolution; no handler is invoked. The chains are fixed
    at construction, so a mapper held by a built skill cannot change.

    Raises:
        ValueError: If any chain is None
    """

    def __init__(self, chains: Iterable[BaseRequestHandlerChain] = ()) -> None:
        chains = tuple(chains)
        if any(chain is None for chain in chains):
            raise ValueError("Request handler chain cannot be None")
        self._chains: tuple[BaseRequestHandlerChain, ...] = chains

    @property
    def request_handler_chains(self) -> tuple[BaseRequestHandlerChain, ...]:
        return self._chains

    def get_request_handler_chain(
        self, handler_input: HandlerInput
    ) -> BaseRequestHandlerChain | None:
        for chain in self._chains:
            if chain.request_handler.can_handle(handler_input):
                logger.debug(f"Resolved request handler {type(chain.request_handler).__name__}")
                return chain
        return None

    def __len__(self) -> int:
        return len(self._chains)


class BaseExceptionMapper(ABC):
    """Finds the exception handler able to recover from a failure."""

    @abstractmethod
    def get_handler(
        self, handler_input: HandlerInput, exception: Exception
    ) -> BaseExceptionHandler | None:
        ...


class ExceptionMapper(BaseExceptionMapper):
    """Ordered, first-match-wins exception mapper keyed on (input, exception).

    Raises:
        ValueError: If any handler is None
    """

    def __init__(self, handlers: Iterable[BaseExceptionHandler] = ()) -> None:
        handlers = tuple(handlers)
        if any(handler is None for handler in handlers):
            raise ValueError("Exception handler cannot be None")
        self._handlers: tuple[BaseExceptionHandler, ...] = handlers

    @property
    def exception_handlers(self) -> tuple[BaseExceptionHandler, ...]:
        return self._handlers

    def get_handler(
        self, handler_input: HandlerInput, exception: Exception
    ) -> BaseExceptionHandler | None:
        for handler in self._handlers:
            if handler.can_handle(handler_input, exception):
                return handler
        return None

    def __len__(self) -> int:
        return len(self._handlers)
