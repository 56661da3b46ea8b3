"""Handler adapters decouple the dispatcher from handler calling conventions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from chorus.dispatch.components import BaseRequestHandler
from chorus.dispatch.handler_input import HandlerInput
from chorus.model.response import Response


class BaseHandlerAdapter(ABC):
    """Executes handlers of the kinds it supports.

    Register extra adapters to run handlers that do not implement
    BaseRequestHandler; the dispatcher picks the first adapter whose
    ``supports`` returns True.
    """

    @abstractmethod
    def supports(self, handler: Any) -> bool:
        ...

    @abstractmethod
    def execute(self, handler_input: HandlerInput, handler: Any) -> Response | None:
        ...


class HandlerAdapter(BaseHandlerAdapter):
    """Default adapter: calls ``handler.handle(handler_input)`` directly.

    Results and failures propagate unchanged. Interceptors are applied by
    the dispatcher around the chain, not here.
    """

    def supports(self, handler: Any) -> bool:
        return True

    def execute(
        self, handler_input: HandlerInput, handler: BaseRequestHandler
    ) -> Response | None:
        return handler.handle(handler_input)
