"""
Skill assembly from user-registered handlers, interceptors and modules.

Usage:
    sb = SkillBuilder()
    sb.add_request_handler(LaunchRequestHandler())
    sb.add_request_handler(HelloIntentHandler())
    sb.add_exception_handler(CatchAllExceptionHandler())
    sb.add_global_request_interceptor(RequestLogger())

    @sb.request_handler(can_handle_func=is_intent_name("AMAZON.HelpIntent"))
    def help_intent(handler_input):
        return handler_input.response_builder.speak("Try saying hello.").response

    skill = sb.build()
    handler = sb.lambda_handler()

Registration order is resolution priority: put specific handlers before
catch-alls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Callable

from chorus.attributes.persistence import BasePersistenceAdapter
from chorus.config.settings import settings
from chorus.dispatch.adapter import HandlerAdapter
from chorus.dispatch.chain import RequestHandlerChain
from chorus.dispatch.components import (
    BaseExceptionHandler,
    BaseRequestHandler,
    BaseRequestInterceptor,
    BaseResponseInterceptor,
)
from chorus.dispatch.handler_input import HandlerInput
from chorus.dispatch.mapper import ExceptionMapper, RequestMapper
from chorus.model.request import RequestEnvelope
from chorus.model.response import Response
from chorus.services import BaseApiClient
from chorus.skill.configuration import SkillConfigurationBuilder
from chorus.skill.module import BaseSdkModule, SdkModuleContext
from chorus.skill.skill import Skill

logger = logging.getLogger(__name__)

# Function-style capability signatures
RequestPredicate = Callable[[HandlerInput], bool]
RequestHandlerFunc = Callable[[HandlerInput], "Response | None"]
ExceptionPredicate = Callable[[HandlerInput, Exception], bool]
ExceptionHandlerFunc = Callable[[HandlerInput, Exception], "Response | None"]
RequestInterceptorFunc = Callable[[HandlerInput], None]
ResponseInterceptorFunc = Callable[[HandlerInput, "Response | None"], "Response | None"]


# ---------------------------------------------------------------------------
# Function-backed capabilities
# ---------------------------------------------------------------------------

class FunctionRequestHandler(BaseRequestHandler):
    """Request handler built from a predicate and a handle function."""

    def __init__(self, can_handle_func: RequestPredicate, handle_func: RequestHandlerFunc) -> None:
        self.can_handle_func = can_handle_func
        self.handle_func = handle_func

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return self.can_handle_func(handler_input)

    def handle(self, handler_input: HandlerInput) -> Response | None:
        return self.handle_func(handler_input)

    def __repr__(self) -> str:
        return f"<FunctionRequestHandler {getattr(self.handle_func, '__name__', '?')}>"


class FunctionExceptionHandler(BaseExceptionHandler):
    def __init__(
        self, can_handle_func: ExceptionPredicate, handle_func: ExceptionHandlerFunc
    ) -> None:
        self.can_handle_func = can_handle_func
        self.handle_func = handle_func

    def can_handle(self, handler_input: HandlerInput, exception: Exception) -> bool:
        return self.can_handle_func(handler_input, exception)

    def handle(self, handler_input: HandlerInput, exception: Exception) -> Response | None:
        return self.handle_func(handler_input, exception)


class FunctionRequestInterceptor(BaseRequestInterceptor):
    def __init__(self, process_func: RequestInterceptorFunc) -> None:
        self.process_func = process_func

    def process(self, handler_input: HandlerInput) -> None:
        self.process_func(handler_input)


class FunctionResponseInterceptor(BaseResponseInterceptor):
    def __init__(self, process_func: ResponseInterceptorFunc) -> None:
        self.process_func = process_func

    def process(self, handler_input: HandlerInput, response: Response | None) -> Response | None:
        return self.process_func(handler_input, response)


def _require_callable(*funcs: Any) -> None:
    for func in funcs:
        if not callable(func):
            raise TypeError(f"Expected a callable, got {type(func).__name__}")


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class SkillBuilder:
    """Collects skill components and assembles them into a Skill.

    Attributes:
        request_handlers: Request handlers in priority order
        exception_handlers: Exception handlers in priority order
        request_interceptors: Global request interceptors
        response_interceptors: Global response interceptors
        sdk_modules: Modules applied during assembly, in registration order
        persistence_adapter: Optional persistent attribute store
        api_client: Optional platform API transport
        skill_id: Optional expected application id
    """

    def __init__(self) -> None:
        self.request_handlers: list[BaseRequestHandler] = []
        self.exception_handlers: list[BaseExceptionHandler] = []
        self.request_interceptors: list[BaseRequestInterceptor] = []
        self.response_interceptors: list[BaseResponseInterceptor] = []
        self.sdk_modules: list[BaseSdkModule] = []
        self.persistence_adapter: BasePersistenceAdapter | None = None
        self.api_client: BaseApiClient | None = None
        self.skill_id: str | None = None

    # -- registration ----------------------------------------------------

    def add_request_handler(self, handler: BaseRequestHandler) -> SkillBuilder:
        if handler is None:
            raise ValueError("Request handler cannot be None")
        self.request_handlers.append(handler)
        return self

    def add_request_handlers(self, handlers: Iterable[BaseRequestHandler]) -> SkillBuilder:
        for handler in handlers:
            self.add_request_handler(handler)
        return self

    def add_exception_handler(self, handler: BaseExceptionHandler) -> SkillBuilder:
        if handler is None:
            raise ValueError("Exception handler cannot be None")
        self.exception_handlers.append(handler)
        return self

    def add_exception_handlers(self, handlers: Iterable[BaseExceptionHandler]) -> SkillBuilder:
        for handler in handlers:
            self.add_exception_handler(handler)
        return self

    def add_global_request_interceptor(self, interceptor: BaseRequestInterceptor) -> SkillBuilder:
        self.request_interceptors.append(interceptor)
        return self

    def add_global_request_interceptors(
        self, interceptors: Iterable[BaseRequestInterceptor]
    ) -> SkillBuilder:
        self.request_interceptors.extend(interceptors)
        return self

    def add_global_response_interceptor(
        self, interceptor: BaseResponseInterceptor
    ) -> SkillBuilder:
        self.response_interceptors.append(interceptor)
        return self

    def add_global_response_interceptors(
        self, interceptors: Iterable[BaseResponseInterceptor]
    ) -> SkillBuilder:
        self.response_interceptors.extend(interceptors)
        return self

    def register_sdk_module(self, module: BaseSdkModule) -> SkillBuilder:
        self.sdk_modules.append(module)
        return self

    def with_persistence_adapter(self, adapter: BasePersistenceAdapter | None) -> SkillBuilder:
        self.persistence_adapter = adapter
        return self

    def with_api_client(self, api_client: BaseApiClient | None) -> SkillBuilder:
        self.api_client = api_client
        return self

    def with_skill_id(self, skill_id: str | None) -> SkillBuilder:
        self.skill_id = skill_id
        return self

    # -- decorators ------------------------------------------------------

    def request_handler(
        self, can_handle_func: RequestPredicate
    ) -> Callable[[RequestHandlerFunc], RequestHandlerFunc]:
        """Register a plain function as a request handler.

        Example:
            @sb.request_handler(can_handle_func=is_request_type("LaunchRequest"))
            def launch(handler_input):
                return handler_input.response_builder.speak("Welcome").response
        """
        def wrapper(handle_func: RequestHandlerFunc) -> RequestHandlerFunc:
            _require_callable(can_handle_func, handle_func)
            self.add_request_handler(FunctionRequestHandler(can_handle_func, handle_func))
            return handle_func
        return wrapper

    def exception_handler(
        self, can_handle_func: ExceptionPredicate
    ) -> Callable[[ExceptionHandlerFunc], ExceptionHandlerFunc]:
        """Register a plain function as an exception handler."""
        def wrapper(handle_func: ExceptionHandlerFunc) -> ExceptionHandlerFunc:
            _require_callable(can_handle_func, handle_func)
            self.add_exception_handler(FunctionExceptionHandler(can_handle_func, handle_func))
            return handle_func
        return wrapper

    def global_request_interceptor(
        self,
    ) -> Callable[[RequestInterceptorFunc], RequestInterceptorFunc]:
        def wrapper(process_func: RequestInterceptorFunc) -> RequestInterceptorFunc:
            _require_callable(process_func)
            self.add_global_request_interceptor(FunctionRequestInterceptor(process_func))
            return process_func
        return wrapper

    def global_response_interceptor(
        self,
    ) -> Callable[[ResponseInterceptorFunc], ResponseInterceptorFunc]:
        def wrapper(process_func: ResponseInterceptorFunc) -> ResponseInterceptorFunc:
            _require_callable(process_func)
            self.add_global_response_interceptor(FunctionResponseInterceptor(process_func))
            return process_func
        return wrapper

    # -- assembly --------------------------------------------------------

    def get_config_builder(self) -> SkillConfigurationBuilder:
        """Assemble a configuration builder from everything registered.

        Each request handler gets its own chain inside a single request
        mapper. The mapper and the default handler adapter are only added
        when at least one handler is registered; the exception mapper only
        when at least one exception handler is. Modules run last, in
        registration order, and lose access to the builder afterwards.
        """
        config_builder = SkillConfigurationBuilder()

        if self.request_handlers:
            chains = [RequestHandlerChain(handler) for handler in self.request_handlers]
            config_builder.add_request_mapper(RequestMapper(chains))
            config_builder.add_handler_adapter(HandlerAdapter())

        if self.exception_handlers:
            config_builder.with_exception_mapper(ExceptionMapper(self.exception_handlers))

        skill_id = self.skill_id if self.skill_id is not None else settings.SKILL_ID
        (
            config_builder
            .add_request_interceptors(self.request_interceptors)
            .add_response_interceptors(self.response_interceptors)
            .with_persistence_adapter(self.persistence_adapter)
            .with_api_client(self.api_client)
            .with_skill_id(skill_id)
        )

        context = SdkModuleContext(config_builder)
        try:
            for module in self.sdk_modules:
                logger.debug(f"Setting up SDK module {type(module).__name__}")
                module.setup_module(context)
        finally:
            context.close()

        return config_builder

    def build(self) -> Skill:
        return Skill(self.get_config_builder().build())

    def lambda_handler(self) -> Callable[[dict[str, Any], Any], dict[str, Any]]:
        """Build the skill and wrap it as a ``(event, context) -> dict`` function.

        The event is validated into a RequestEnvelope and the response
        envelope is returned as a camelCase dict.
        """
        skill = self.build()

        def wrapper(event: dict[str, Any], context: Any) -> dict[str, Any]:
            request_envelope = RequestEnvelope.model_validate(event)
            return skill.invoke(request_envelope, context).to_wire()

        return wrapper
