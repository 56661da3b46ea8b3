"""Request inspection helpers."""

from .predicates import (
    get_intent_name,
    get_locale,
    get_request_type,
    get_slot,
    get_slot_value,
    is_intent_name,
    is_new_session,
    is_request_type,
)

__all__ = [
    "get_intent_name",
    "get_locale",
    "get_request_type",
    "get_slot",
    "get_slot_value",
    "is_intent_name",
    "is_new_session",
    "is_request_type",
]
