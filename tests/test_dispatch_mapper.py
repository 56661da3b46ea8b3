"""
Tests for handler chains, request/exception mappers and handler adapters.

Tests the resolution layer from:
- chorus/dispatch/chain.py
- chorus/dispatch/mapper.py
- chorus/dispatch/adapter.py
"""

from unittest.mock import MagicMock

import pytest

from chorus.dispatch import (
    BaseExceptionHandler,
    BaseRequestHandler,
    BaseRequestInterceptor,
    BaseResponseInterceptor,
    ExceptionMapper,
    HandlerAdapter,
    HandlerInput,
    RequestHandlerChain,
    RequestMapper,
)
from chorus.model import Intent, Request, RequestEnvelope, Response


# ============================================================================
# Fixtures
# ============================================================================


def make_input(intent_name: str) -> HandlerInput:
    return HandlerInput(
        request_envelope=RequestEnvelope(
            request=Request(type="IntentRequest", intent=Intent(name=intent_name))
        )
    )


class IntentHandler(BaseRequestHandler):
    """Handles one intent name and records every call."""

    def __init__(self, intent_name: str) -> None:
        self.intent_name = intent_name
        self.can_handle_calls = 0
        self.handle_calls = 0

    def can_handle(self, handler_input):
        self.can_handle_calls += 1
        return handler_input.request.intent.name == self.intent_name

    def handle(self, handler_input):
        self.handle_calls += 1
        return Response(should_end_session=True)


class TypeErrorHandler(BaseExceptionHandler):
    def can_handle(self, handler_input, exception):
        return isinstance(exception, TypeError)

    def handle(self, handler_input, exception):
        return Response()


@pytest.fixture
def foo_handler():
    return IntentHandler("FooIntent")


@pytest.fixture
def bar_handler():
    return IntentHandler("BarIntent")


# ============================================================================
# RequestHandlerChain Tests
# ============================================================================


class TestRequestHandlerChain:
    """Tests for the default chain."""

    def test_holds_handler_and_interceptors(self, foo_handler):
        """Chain exposes its handler and interceptors as tuples."""
        req = MagicMock(spec=BaseRequestInterceptor)
        resp = MagicMock(spec=BaseResponseInterceptor)
        chain = RequestHandlerChain(foo_handler, [req], [resp])

        assert chain.request_handler is foo_handler
        assert chain.request_interceptors == (req,)
        assert chain.response_interceptors == (resp,)

    def test_interceptors_default_empty(self, foo_handler):
        """Interceptors are optional."""
        chain = RequestHandlerChain(foo_handler)
        assert chain.request_interceptors == ()
        assert chain.response_interceptors == ()

    def test_none_handler_rejected(self):
        """A chain without a handler is a wiring error."""
        with pytest.raises(ValueError):
            RequestHandlerChain(None)

    def test_interceptor_list_copied(self, foo_handler):
        """Mutating the source list does not change the chain."""
        interceptors = [MagicMock(spec=BaseRequestInterceptor)]
        chain = RequestHandlerChain(foo_handler, interceptors)
        interceptors.append(MagicMock(spec=BaseRequestInterceptor))
        assert len(chain.request_interceptors) == 1


# ============================================================================
# RequestMapper Tests
# ============================================================================


class TestRequestMapper:
    """Tests for first-match-wins chain resolution."""

    def test_returns_matching_chain(self, foo_handler, bar_handler):
        """The chain whose handler can handle the input is returned."""
        mapper = RequestMapper([RequestHandlerChain(foo_handler), RequestHandlerChain(bar_handler)])
        chain = mapper.get_request_handler_chain(make_input("BarIntent"))
        assert chain.request_handler is bar_handler

    def test_first_registered_wins(self):
        """When several handlers match, the earliest registered is selected."""
        first = IntentHandler("FooIntent")
        second = IntentHandler("FooIntent")
        mapper = RequestMapper([RequestHandlerChain(first), RequestHandlerChain(second)])

        chain = mapper.get_request_handler_chain(make_input("FooIntent"))

        assert chain.request_handler is first
        assert second.can_handle_calls == 0

    def test_no_match_returns_none(self, foo_handler, bar_handler):
        """A miss is a normal outcome, not an error."""
        mapper = RequestMapper([RequestHandlerChain(foo_handler), RequestHandlerChain(bar_handler)])
        assert mapper.get_request_handler_chain(make_input("BazIntent")) is None

    def test_empty_mapper_returns_none(self):
        """A mapper with no chains never matches."""
        assert RequestMapper().get_request_handler_chain(make_input("FooIntent")) is None

    def test_resolution_does_not_invoke_handlers(self, foo_handler, bar_handler):
        """Only can_handle runs during resolution."""
        mapper = RequestMapper([RequestHandlerChain(foo_handler), RequestHandlerChain(bar_handler)])
        mapper.get_request_handler_chain(make_input("BarIntent"))
        assert foo_handler.handle_calls == 0
        assert bar_handler.handle_calls == 0

    def test_chains_fixed_at_construction(self, foo_handler):
        """Mutating the source list does not change the mapper."""
        chains = [RequestHandlerChain(foo_handler)]
        mapper = RequestMapper(chains)
        chains.append(RequestHandlerChain(IntentHandler("BazIntent")))

        assert len(mapper) == 1
        assert mapper.request_handler_chains == (chains[0],)
        assert not hasattr(mapper, "add_request_handler_chain")
        assert mapper.get_request_handler_chain(make_input("BazIntent")) is None

    def test_none_chain_rejected(self):
        with pytest.raises(ValueError):
            RequestMapper([None])


# ============================================================================
# ExceptionMapper Tests
# ============================================================================


class TestExceptionMapper:
    """Tests for first-match-wins exception handler resolution."""

    def test_returns_matching_handler(self):
        """Handler is selected on the (input, exception) pair."""
        handler = TypeErrorHandler()
        mapper = ExceptionMapper([handler])
        assert mapper.get_handler(make_input("FooIntent"), TypeError("bad")) is handler

    def test_no_match_returns_none(self):
        mapper = ExceptionMapper([TypeErrorHandler()])
        assert mapper.get_handler(make_input("FooIntent"), KeyError("x")) is None

    def test_first_registered_wins(self):
        """Earliest matching exception handler is chosen."""
        first = MagicMock(spec=BaseExceptionHandler)
        first.can_handle.return_value = True
        second = MagicMock(spec=BaseExceptionHandler)
        second.can_handle.return_value = True

        mapper = ExceptionMapper([first, second])

        assert mapper.get_handler(make_input("FooIntent"), Exception()) is first
        second.can_handle.assert_not_called()

    def test_predicate_receives_input_and_exception(self):
        handler = MagicMock(spec=BaseExceptionHandler)
        handler.can_handle.return_value = False
        handler_input = make_input("FooIntent")
        error = RuntimeError("boom")

        ExceptionMapper([handler]).get_handler(handler_input, error)

        handler.can_handle.assert_called_once_with(handler_input, error)

    def test_handlers_fixed_at_construction(self):
        """Mutating the source list does not change the mapper."""
        handlers = [TypeErrorHandler()]
        mapper = ExceptionMapper(handlers)
        handlers.append(MagicMock(spec=BaseExceptionHandler))

        assert mapper.exception_handlers == (handlers[0],)
        assert not hasattr(mapper, "add_exception_handler")

    def test_none_handler_rejected(self):
        with pytest.raises(ValueError):
            ExceptionMapper([None])


# ============================================================================
# HandlerAdapter Tests
# ============================================================================


class TestHandlerAdapter:
    """Tests for the default adapter."""

    def test_supports_any_handler(self, foo_handler):
        adapter = HandlerAdapter()
        assert adapter.supports(foo_handler) is True
        assert adapter.supports(object()) is True

    def test_execute_calls_handle(self, foo_handler):
        """execute returns exactly what the handler returns."""
        response = HandlerAdapter().execute(make_input("FooIntent"), foo_handler)
        assert response == Response(should_end_session=True)
        assert foo_handler.handle_calls == 1

    def test_execute_propagates_failure(self):
        """Handler failures are not swallowed."""
        handler = MagicMock(spec=BaseRequestHandler)
        handler.handle.side_effect = ValueError("nope")
        with pytest.raises(ValueError, match="nope"):
            HandlerAdapter().execute(make_input("FooIntent"), handler)

    def test_execute_may_return_none(self):
        handler = MagicMock(spec=BaseRequestHandler)
        handler.handle.return_value = None
        assert HandlerAdapter().execute(make_input("FooIntent"), handler) is None
