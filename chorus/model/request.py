"""Pydantic models for the inbound request envelope.

The envelope is the immutable value a skill receives for every dispatch.
Field names are snake_case in Python and camelCase on the wire, so a
platform JSON body can be validated with ``RequestEnvelope.model_validate``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ---------------------------------------------------------------------------
# Intent
# ---------------------------------------------------------------------------

class Slot(_RequestModel):
    """A named slot value captured for an intent."""

    name: str
    value: str | None = None
    confirmation_status: str | None = None


class Intent(_RequestModel):
    """The intent the platform resolved from the user's utterance."""

    name: str
    slots: dict[str, Slot] = Field(default_factory=dict)
    confirmation_status: str | None = None


class Request(_RequestModel):
    """The request body. ``type`` discriminates LaunchRequest, IntentRequest, etc.

    Request types other than intents carry fields this model does not
    declare; those are kept as extra attributes.
    """

    model_config = ConfigDict(extra="allow")

    type: str
    request_id: str | None = None
    timestamp: datetime | None = None
    locale: str | None = None
    intent: Intent | None = None
    dialog_state: str | None = None
    reason: str | None = None


# ---------------------------------------------------------------------------
# Session and context
# ---------------------------------------------------------------------------

class Application(_RequestModel):
    application_id: str


class User(_RequestModel):
    user_id: str
    access_token: str | None = None


class Session(_RequestModel):
    """Conversation session state carried across turns."""

    new: bool = False
    session_id: str | None = None
    application: Application | None = None
    user: User | None = None
    attributes: dict[str, Any] | None = None


class SystemState(_RequestModel):
    application: Application | None = None
    user: User | None = None
    api_endpoint: str | None = None
    api_access_token: str | None = None


class Context(_RequestModel):
    system: SystemState | None = Field(default=None, alias="System")


class RequestEnvelope(_RequestModel):
    """Top-level inbound value wrapped into every HandlerInput."""

    version: str = "1.0"
    session: Session | None = None
    context: Context | None = None
    request: Request

    @property
    def application_id(self) -> str | None:
        """Application id from the context, falling back to the session."""
        if self.context and self.context.system and self.context.system.application:
            return self.context.system.application.application_id
        if self.session and self.session.application:
            return self.session.application.application_id
        return None
