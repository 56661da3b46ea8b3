"""
API client plumbing for platform service calls.

The SDK does not ship an HTTP transport. Skills that call platform
services provide a BaseApiClient implementation; a ServiceClientFactory is
then built for every dispatch from the envelope's API endpoint and token.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass
class ApiClientRequest:
    """An outbound service call.

    Attributes:
        method: HTTP method
        url: Absolute URL
        headers: Header name/value pairs, repeated names allowed
        body: Serialized request body
    """

    method: str
    url: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: str | None = None


@dataclass
class ApiClientResponse:
    status_code: int
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: str | None = None


class BaseApiClient(ABC):
    """Executes ApiClientRequests against platform services."""

    @abstractmethod
    def invoke(self, request: ApiClientRequest) -> ApiClientResponse:
        ...


@dataclass(frozen=True)
class ApiConfiguration:
    """Everything a service client needs to reach the platform API.

    Attributes:
        api_client: Transport used for the calls
        api_endpoint: Base URL from the request context
        authorization_value: Bearer token from the request context
    """

    api_client: BaseApiClient
    api_endpoint: str | None = None
    authorization_value: str | None = None


class ServiceClientFactory:
    """Creates service clients bound to one dispatch's API configuration."""

    def __init__(self, api_configuration: ApiConfiguration) -> None:
        self.api_configuration = api_configuration

    def get_client(self, client_cls: type[T], **kwargs: Any) -> T:
        """Instantiate ``client_cls`` with this dispatch's API configuration.

        Args:
            client_cls: A service client class whose first constructor
                argument is an ApiConfiguration
            **kwargs: Extra constructor arguments

        Returns:
            The service client instance
        """
        return client_cls(self.api_configuration, **kwargs)


__all__ = [
    "ApiClientRequest",
    "ApiClientResponse",
    "ApiConfiguration",
    "BaseApiClient",
    "ServiceClientFactory",
]
