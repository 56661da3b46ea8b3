"""The runtime entry point that turns a request envelope into a response envelope."""

from __future__ import annotations

import logging
from typing import Any

from chorus.attributes.manager import AttributesManager
from chorus.config.settings import Settings, settings
from chorus.dispatch.dispatcher import RequestDispatcher
from chorus.dispatch.handler_input import HandlerInput
from chorus.exceptions import SkillIdVerificationError
from chorus.model.request import RequestEnvelope
from chorus.model.response import ResponseEnvelope
from chorus.services import ApiConfiguration, ServiceClientFactory
from chorus.skill.configuration import SkillConfiguration

logger = logging.getLogger(__name__)


class Skill:
    """A built skill.

    Holds the frozen configuration and one dispatcher. ``invoke`` may be
    called concurrently; every call gets its own HandlerInput,
    AttributesManager and ResponseBuilder.

    Attributes:
        configuration: The frozen skill configuration
        request_dispatcher: Dispatcher built from the configuration
    """

    def __init__(
        self,
        configuration: SkillConfiguration,
        app_settings: Settings | None = None,
    ) -> None:
        self.configuration = configuration
        self.request_dispatcher = RequestDispatcher(configuration)
        self._settings = app_settings or settings

    @property
    def skill_id(self) -> str | None:
        return self.configuration.skill_id

    def invoke(self, request_envelope: RequestEnvelope, context: Any = None) -> ResponseEnvelope:
        """Dispatch one request.

        Args:
            request_envelope: The inbound request
            context: Opaque transport context passed through to handlers

        Returns:
            The response envelope. Its ``response`` is None when the skill
            produced no output.

        Raises:
            SkillIdVerificationError: If the request targets another skill
            DispatchError: If dispatch fails and cannot be recovered
        """
        self._verify_skill_id(request_envelope)

        attributes_manager = AttributesManager(
            request_envelope, self.configuration.persistence_adapter
        )
        handler_input = HandlerInput(
            request_envelope=request_envelope,
            attributes_manager=attributes_manager,
            context=context,
            service_client_factory=self._service_client_factory(request_envelope),
            api_client=self.configuration.api_client,
        )

        logger.debug(f"Dispatching {request_envelope.request.type}")
        response = self.request_dispatcher.dispatch(handler_input)

        session_attributes = None
        if attributes_manager.in_session:
            session_attributes = attributes_manager.session_attributes

        return ResponseEnvelope(
            version=self._settings.RESPONSE_VERSION,
            session_attributes=session_attributes,
            user_agent=self._settings.USER_AGENT,
            response=response,
        )

    def _verify_skill_id(self, request_envelope: RequestEnvelope) -> None:
        skill_id = self.configuration.skill_id
        if skill_id is None or not self._settings.VERIFY_SKILL_ID:
            return
        received = request_envelope.application_id
        if received != skill_id:
            raise SkillIdVerificationError(skill_id, received)

    def _service_client_factory(
        self, request_envelope: RequestEnvelope
    ) -> ServiceClientFactory | None:
        api_client = self.configuration.api_client
        if api_client is None:
            return None
        system = request_envelope.context.system if request_envelope.context else None
        return ServiceClientFactory(
            ApiConfiguration(
                api_client=api_client,
                api_endpoint=system.api_endpoint if system else None,
                authorization_value=system.api_access_token if system else None,
            )
        )
