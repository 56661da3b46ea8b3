"""
Request dispatch and handler-chain resolution.

Core Components:
- HandlerInput: Per-dispatch context bundle
- RequestHandlerChain: A handler plus interceptors scoped to it
- RequestMapper: First-match-wins chain resolution
- HandlerAdapter: Executes the resolved handler
- ExceptionMapper: First-match-wins exception handler resolution
- RequestDispatcher: Orchestrates interceptors, resolution and recovery
"""

from .adapter import BaseHandlerAdapter, HandlerAdapter
from .chain import BaseRequestHandlerChain, RequestHandlerChain
from .components import (
    BaseExceptionHandler,
    BaseRequestHandler,
    BaseRequestInterceptor,
    BaseResponseInterceptor,
)
from .dispatcher import BaseRequestDispatcher, RequestDispatcher
from .handler_input import HandlerInput
from .mapper import (
    BaseExceptionMapper,
    BaseRequestMapper,
    ExceptionMapper,
    RequestMapper,
)

__all__ = [
    # Capabilities
    "BaseExceptionHandler",
    "BaseRequestHandler",
    "BaseRequestInterceptor",
    "BaseResponseInterceptor",
    # Input
    "HandlerInput",
    # Chains
    "BaseRequestHandlerChain",
    "RequestHandlerChain",
    # Mappers
    "BaseExceptionMapper",
    "BaseRequestMapper",
    "ExceptionMapper",
    "RequestMapper",
    # Adapters
    "BaseHandlerAdapter",
    "HandlerAdapter",
    # Dispatcher
    "BaseRequestDispatcher",
    "RequestDispatcher",
]
