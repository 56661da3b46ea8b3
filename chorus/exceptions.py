"""
Error hierarchy for the chorus skill SDK.

Lookups (request mappers, exception mappers, adapters) never raise for
"not found"; they return None. Only execution raises. Failures raised by
interceptors or handlers are passed to exception handlers unwrapped.

Hierarchy:
    ChorusError
    ├── DispatchError
    │   ├── NoMatchingHandlerError
    │   ├── UnsupportedHandlerAdapterError
    │   └── UnrecoverableDispatchError
    ├── AttributesManagerError
    ├── SkillIdVerificationError
    └── ConfigurationFrozenError
"""

from __future__ import annotations

from typing import Any


class ChorusError(Exception):
    """Base class for every error raised by the SDK."""


class DispatchError(ChorusError):
    """Raised when a request cannot be dispatched to completion."""


class NoMatchingHandlerError(DispatchError):
    """No registered request mapper produced a chain for the input.

    Raised inside the dispatch pipeline so that a catch-all exception
    handler can recover from it.

    Attributes:
        handler_input: The input that no handler could handle.
    """

    def __init__(self, handler_input: Any, message: str | None = None) -> None:
        self.handler_input = handler_input
        super().__init__(message or "Unable to find a suitable request handler")


class UnsupportedHandlerAdapterError(DispatchError):
    """A handler was resolved but no registered adapter supports it.

    This is a wiring defect and is never offered to exception handlers.

    Attributes:
        handler: The resolved handler without an adapter.
    """

    def __init__(self, handler: Any) -> None:
        self.handler = handler
        super().__init__(
            f"Unable to find a suitable handler adapter for {type(handler).__name__}"
        )


class UnrecoverableDispatchError(DispatchError):
    """No exception handler could recover from a dispatch failure.

    The original failure is kept as ``cause`` and is also chained as
    ``__cause__`` for tracebacks.

    Attributes:
        cause: The original exception raised during dispatch.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Unable to find a suitable exception handler: {cause!r}")


class AttributesManagerError(ChorusError):
    """Raised when attributes are used outside of their valid scope."""


class SkillIdVerificationError(ChorusError):
    """Raised when a request targets a different skill than the configured one."""

    def __init__(self, expected: str, received: str | None) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"Skill ID verification failed: expected {expected!r}, got {received!r}"
        )


class ConfigurationFrozenError(ChorusError):
    """Raised when configuration is mutated after assembly has finished."""
