"""
Request dispatch: the single linear pipeline run for every inbound request.

Pipeline for one dispatch:

    global request interceptors
      -> first chain from the request mappers
        -> first adapter supporting the chain's handler
          chain request interceptors
          adapter.execute(handler)
          chain response interceptors
      -> global response interceptors
    on failure: first matching exception handler, else
                UnrecoverableDispatchError

There is no retry and no looping. The dispatcher keeps no per-call state,
so concurrent dispatches need no synchronization as long as the handlers
themselves are safe to share.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from chorus.dispatch.adapter import BaseHandlerAdapter
from chorus.dispatch.chain import BaseRequestHandlerChain
from chorus.dispatch.handler_input import HandlerInput
from chorus.exceptions import (
    NoMatchingHandlerError,
    UnrecoverableDispatchError,
    UnsupportedHandlerAdapterError,
)
from chorus.model.response import Response

if TYPE_CHECKING:
    from chorus.skill.configuration import SkillConfiguration

logger = logging.getLogger(__name__)


class BaseRequestDispatcher(ABC):
    """Receives a request, dispatches it to skill code and returns the output."""

    @abstractmethod
    def dispatch(self, handler_input: HandlerInput) -> Response | None:
        """Dispatch an input to the matching handler.

        Args:
            handler_input: Input for this dispatch

        Returns:
            The response, or None when the skill produced no output

        Raises:
            DispatchError: When the request cannot be handled or recovered
        """
        ...


class RequestDispatcher(BaseRequestDispatcher):
    """Default dispatcher built from a frozen SkillConfiguration.

    Attributes:
        configuration: Read-only skill configuration shared by every dispatch
    """

    def __init__(self, configuration: SkillConfiguration) -> None:
        self.configuration = configuration

    def dispatch(self, handler_input: HandlerInput) -> Response | None:
        try:
            return self._dispatch_request(handler_input)
        except UnsupportedHandlerAdapterError:
            raise
        except Exception as exc:
            return self._recover(handler_input, exc)

    def _dispatch_request(self, handler_input: HandlerInput) -> Response | None:
        for interceptor in self.configuration.request_interceptors:
            interceptor.process(handler_input)

        chain = self._resolve_chain(handler_input)
        if chain is None:
            raise NoMatchingHandlerError(handler_input)

        handler = chain.request_handler
        adapter = self._resolve_adapter(handler)
        if adapter is None:
            raise UnsupportedHandlerAdapterError(handler)

        for interceptor in chain.request_interceptors:
            interceptor.process(handler_input)

        response = adapter.execute(handler_input, handler)

        for interceptor in chain.response_interceptors:
            response = interceptor.process(handler_input, response)

        for interceptor in self.configuration.response_interceptors:
            response = interceptor.process(handler_input, response)

        return response

    def _resolve_chain(self, handler_input: HandlerInput) -> BaseRequestHandlerChain | None:
        for mapper in self.configuration.request_mappers:
            chain = mapper.get_request_handler_chain(handler_input)
            if chain is not None:
                return chain
        return None

    def _resolve_adapter(self, handler: object) -> BaseHandlerAdapter | None:
        for adapter in self.configuration.handler_adapters:
            if adapter.supports(handler):
                return adapter
        return None

    def _recover(self, handler_input: HandlerInput, exc: Exception) -> Response | None:
        exception_mapper = self.configuration.exception_mapper
        handler = None
        if exception_mapper is not None:
            handler = exception_mapper.get_handler(handler_input, exc)

        if handler is None:
            logger.warning(f"No exception handler for {type(exc).__name__}: {exc}")
            raise UnrecoverableDispatchError(exc) from exc

        logger.debug(f"Recovering from {type(exc).__name__} with {type(handler).__name__}")
        return handler.handle(handler_input, exc)
