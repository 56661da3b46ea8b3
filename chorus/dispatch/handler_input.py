"""The context bundle passed to every handler and interceptor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from chorus.attributes.manager import AttributesManager
from chorus.model.request import Request, RequestEnvelope
from chorus.response.builder import ResponseBuilder
from chorus.services import BaseApiClient, ServiceClientFactory


@dataclass(frozen=True)
class HandlerInput:
    """Input for one dispatch.

    A new HandlerInput is created for every call to ``Skill.invoke``; the
    same instance is passed by reference to every interceptor, handler and
    exception handler in that dispatch and then discarded.

    Attributes:
        request_envelope: The immutable inbound request
        attributes_manager: Request, session and persistent attribute scopes.
            Created from the envelope when not supplied.
        context: Opaque transport context (e.g. a serverless runtime context)
        service_client_factory: Factory for platform service clients, present
            only when an API client is configured
        api_client: The configured API client, if any
        response_builder: Fresh builder for this dispatch

    Example:
        handler_input = HandlerInput(request_envelope=envelope)
        if is_intent_name("HelloIntent")(handler_input):
            handler_input.response_builder.speak("Hello")
    """

    request_envelope: RequestEnvelope
    attributes_manager: AttributesManager | None = None
    context: Any = None
    service_client_factory: ServiceClientFactory | None = None
    api_client: BaseApiClient | None = None
    response_builder: ResponseBuilder = field(default_factory=ResponseBuilder)

    def __post_init__(self) -> None:
        if self.attributes_manager is None:
            object.__setattr__(
                self, "attributes_manager", AttributesManager(self.request_envelope)
            )

    @property
    def request(self) -> Request:
        return self.request_envelope.request
