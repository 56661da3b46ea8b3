"""Pydantic models for the outbound response.

``Response`` is what handlers return; ``ResponseEnvelope`` is what the
skill hands back to the transport layer.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ResponseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ---------------------------------------------------------------------------
# Speech
# ---------------------------------------------------------------------------

class OutputSpeech(_ResponseModel):
    """Speech the device says. SSML speech is wrapped in ``<speak>`` tags."""

    type: Literal["SSML", "PlainText"] = "SSML"
    ssml: str | None = None
    text: str | None = None
    play_behavior: str | None = None


class Reprompt(_ResponseModel):
    output_speech: OutputSpeech


# ---------------------------------------------------------------------------
# Cards
# ---------------------------------------------------------------------------

class Image(_ResponseModel):
    small_image_url: str | None = None
    large_image_url: str | None = None


class Card(_ResponseModel):
    """A companion-app card.

    Only the fields relevant to ``type`` are populated: Simple uses
    ``title``/``content``, Standard uses ``title``/``text``/``image``,
    AskForPermissionsConsent uses ``permissions``.
    """

    type: Literal["Simple", "Standard", "LinkAccount", "AskForPermissionsConsent"]
    title: str | None = None
    content: str | None = None
    text: str | None = None
    image: Image | None = None
    permissions: list[str] | None = None


# ---------------------------------------------------------------------------
# Directives
# ---------------------------------------------------------------------------

class Directive(_ResponseModel):
    """A device directive identified by its ``type`` discriminator.

    Payload fields vary per directive type and are stored as extras.

    Example:
        Directive(type="AudioPlayer.Stop")
        Directive(type="Dialog.ElicitSlot", slotToElicit="city")
    """

    model_config = ConfigDict(extra="allow")

    type: str


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------

class Response(_ResponseModel):
    """The response a handler produces. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    output_speech: OutputSpeech | None = None
    card: Card | None = None
    reprompt: Reprompt | None = None
    directives: list[Directive] | None = None
    should_end_session: bool | None = None


class ResponseEnvelope(_ResponseModel):
    """The value returned by ``Skill.invoke``."""

    version: str = "1.0"
    session_attributes: dict[str, Any] | None = None
    user_agent: str | None = None
    response: Response | None = Field(default=None)

    def to_wire(self) -> dict[str, Any]:
        """Dump as a camelCase dict without unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
