"""Request handler chains: one handler plus interceptors scoped to it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from chorus.dispatch.components import (
    BaseRequestHandler,
    BaseRequestInterceptor,
    BaseResponseInterceptor,
)


class BaseRequestHandlerChain(ABC):
    """A resolved unit of work for the dispatcher.

    Chain-local interceptors run strictly inside the dispatcher's global
    interceptors and only around this chain's handler.
    """

    @property
    @abstractmethod
    def request_handler(self) -> BaseRequestHandler:
        ...

    @property
    @abstractmethod
    def request_interceptors(self) -> tuple[BaseRequestInterceptor, ...]:
        ...

    @property
    @abstractmethod
    def response_interceptors(self) -> tuple[BaseResponseInterceptor, ...]:
        ...


class RequestHandlerChain(BaseRequestHandlerChain):
    """Default chain owning exactly one handler.

    Example:
        chain = RequestHandlerChain(
            HelloIntentHandler(),
            request_interceptors=[AuditInterceptor()],
        )
    """

    def __init__(
        self,
        request_handler: BaseRequestHandler,
        request_interceptors: Iterable[BaseRequestInterceptor] = (),
        response_interceptors: Iterable[BaseResponseInterceptor] = (),
    ) -> None:
        if request_handler is None:
            raise ValueError("Request handler cannot be None")
        self._request_handler = request_handler
        self._request_interceptors = tuple(request_interceptors)
        self._response_interceptors = tuple(response_interceptors)

    @property
    def request_handler(self) -> BaseRequestHandler:
        return self._request_handler

    @property
    def request_interceptors(self) -> tuple[BaseRequestInterceptor, ...]:
        return self._request_interceptors

    @property
    def response_interceptors(self) -> tuple[BaseResponseInterceptor, ...]:
        return self._response_interceptors

    def __repr__(self) -> str:
        return (
            f"<RequestHandlerChain {type(self._request_handler).__name__} "
            f"req={len(self._request_interceptors)} "
            f"resp={len(self._response_interceptors)}>"
        )
