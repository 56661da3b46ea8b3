"""
Helpers for writing ``can_handle`` predicates and reading the request.

Usage:
    class HelloIntentHandler(BaseRequestHandler):
        def can_handle(self, handler_input):
            return is_intent_name("HelloIntent")(handler_input)

        def handle(self, handler_input):
            name = get_slot_value(handler_input, "name") or "friend"
            return handler_input.response_builder.speak(f"Hello {name}").response
"""

from __future__ import annotations

from typing import Callable

from chorus.dispatch.handler_input import HandlerInput
from chorus.model.request import Slot

INTENT_REQUEST = "IntentRequest"


def is_request_type(request_type: str) -> Callable[[HandlerInput], bool]:
    """Predicate matching the request ``type`` (e.g. "LaunchRequest")."""
    def can_handle(handler_input: HandlerInput) -> bool:
        return get_request_type(handler_input) == request_type
    return can_handle


def is_intent_name(name: str) -> Callable[[HandlerInput], bool]:
    """Predicate matching an IntentRequest for the named intent."""
    def can_handle(handler_input: HandlerInput) -> bool:
        return get_intent_name(handler_input) == name
    return can_handle


def get_request_type(handler_input: HandlerInput) -> str:
    return handler_input.request_envelope.request.type


def get_intent_name(handler_input: HandlerInput) -> str | None:
    """Return the intent name, or None when the request is not an IntentRequest."""
    request = handler_input.request_envelope.request
    if request.type != INTENT_REQUEST or request.intent is None:
        return None
    return request.intent.name


def get_slot(handler_input: HandlerInput, slot_name: str) -> Slot | None:
    request = handler_input.request_envelope.request
    if request.type != INTENT_REQUEST or request.intent is None:
        return None
    return request.intent.slots.get(slot_name)


def get_slot_value(handler_input: HandlerInput, slot_name: str) -> str | None:
    slot = get_slot(handler_input, slot_name)
    return slot.value if slot is not None else None


def get_locale(handler_input: HandlerInput) -> str | None:
    return handler_input.request_envelope.request.locale


def is_new_session(handler_input: HandlerInput) -> bool:
    """Return True for the first turn of a session.

    Raises:
        TypeError: If the request is out of session
    """
    session = handler_input.request_envelope.session
    if session is None:
        raise TypeError("The provided request doesn't have a session")
    return session.new
