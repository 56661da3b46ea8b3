"""
chorus: request dispatch SDK for voice-assistant skill backends.

A skill registers request handlers, exception handlers and interceptors on
a SkillBuilder. Every inbound request envelope is wrapped in a HandlerInput
and dispatched to the first handler (in registration order) whose
``can_handle`` returns True. Failures are recovered by the first matching
exception handler.

Usage:
    from chorus import (
        BaseExceptionHandler,
        BaseRequestHandler,
        SkillBuilder,
        is_intent_name,
    )

    class HelloIntentHandler(BaseRequestHandler):
        def can_handle(self, handler_input):
            return is_intent_name("HelloIntent")(handler_input)

        def handle(self, handler_input):
            return handler_input.response_builder.speak("Hello!").response

    sb = SkillBuilder()
    sb.add_request_handler(HelloIntentHandler())
    skill = sb.build()
    envelope = skill.invoke(request_envelope)
"""

__version__ = "0.1.0"

from .dispatch import (
    BaseExceptionHandler,
    BaseHandlerAdapter,
    BaseRequestHandler,
    BaseRequestInterceptor,
    BaseResponseInterceptor,
    HandlerInput,
    RequestDispatcher,
)
from .exceptions import (
    ChorusError,
    DispatchError,
    NoMatchingHandlerError,
    UnrecoverableDispatchError,
    UnsupportedHandlerAdapterError,
)
from .model import RequestEnvelope, Response, ResponseEnvelope
from .response import ResponseBuilder
from .skill import BaseSdkModule, Skill, SkillBuilder, SkillConfiguration
from .utils import is_intent_name, is_request_type

__all__ = [
    "__version__",
    # Dispatch
    "BaseExceptionHandler",
    "BaseHandlerAdapter",
    "BaseRequestHandler",
    "BaseRequestInterceptor",
    "BaseResponseInterceptor",
    "HandlerInput",
    "RequestDispatcher",
    # Errors
    "ChorusError",
    "DispatchError",
    "NoMatchingHandlerError",
    "UnrecoverableDispatchError",
    "UnsupportedHandlerAdapterError",
    # Model
    "RequestEnvelope",
    "Response",
    "ResponseEnvelope",
    "ResponseBuilder",
    # Skill
    "BaseSdkModule",
    "Skill",
    "SkillBuilder",
    "SkillConfiguration",
    # Utils
    "is_intent_name",
    "is_request_type",
]
