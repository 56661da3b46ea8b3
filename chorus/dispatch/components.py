"""
Capabilities the dispatcher resolves and invokes.

Every capability separates "can I handle this?" from "handle it" so the
dispatcher can check candidates in registration order before committing to
one. ``can_handle`` implementations are expected to be side-effect free
queries.

Example:
    class HelloIntentHandler(BaseRequestHandler):
        def can_handle(self, handler_input):
            return is_intent_name("HelloIntent")(handler_input)

        def handle(self, handler_input):
            return handler_input.response_builder.speak("Hello!").response

    class CatchAllExceptionHandler(BaseExceptionHandler):
        def can_handle(self, handler_input, exception):
            return True

        def handle(self, handler_input, exception):
            return handler_input.response_builder.speak("Sorry.").response
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from chorus.model.response import Response

if TYPE_CHECKING:
    from chorus.dispatch.handler_input import HandlerInput


class BaseRequestHandler(ABC):
    """A request handler: a predicate plus the action it guards."""

    @abstractmethod
    def can_handle(self, handler_input: HandlerInput) -> bool:
        """Return True if this handler should handle the input."""
        ...

    @abstractmethod
    def handle(self, handler_input: HandlerInput) -> Response | None:
        """Handle the input and optionally return a response.

        Raises:
            Exception: Any failure is offered to the exception handlers
        """
        ...


class BaseExceptionHandler(ABC):
    """Recovers from a failure raised while dispatching an input."""

    @abstractmethod
    def can_handle(self, handler_input: HandlerInput, exception: Exception) -> bool:
        ...

    @abstractmethod
    def handle(self, handler_input: HandlerInput, exception: Exception) -> Response | None:
        """Produce the dispatch result for a failed input.

        Failures raised here are not recovered again.
        """
        ...


class BaseRequestInterceptor(ABC):
    """Runs before handler execution."""

    @abstractmethod
    def process(self, handler_input: HandlerInput) -> None:
        ...


class BaseResponseInterceptor(ABC):
    """Runs after handler execution and may reshape the in-flight response."""

    @abstractmethod
    def process(
        self, handler_input: HandlerInput, response: Response | None
    ) -> Response | None:
        """Return the response that continues down the pipeline.

        Return ``response`` unchanged to pass it through, a different value
        to replace it, or None to drop it.
        """
        ...
