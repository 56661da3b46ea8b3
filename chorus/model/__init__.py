"""Request and response value types."""

from .request import (
    Application,
    Context,
    Intent,
    Request,
    RequestEnvelope,
    Session,
    Slot,
    SystemState,
    User,
)
from .response import (
    Card,
    Directive,
    Image,
    OutputSpeech,
    Reprompt,
    Response,
    ResponseEnvelope,
)

__all__ = [
    # Request
    "Application",
    "Context",
    "Intent",
    "Request",
    "RequestEnvelope",
    "Session",
    "Slot",
    "SystemState",
    "User",
    # Response
    "Card",
    "Directive",
    "Image",
    "OutputSpeech",
    "Reprompt",
    "Response",
    "ResponseEnvelope",
]
