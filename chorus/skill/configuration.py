"""
Skill configuration: mutable while assembling, frozen once built.

SkillConfigurationBuilder owns growable ordered lists. ``build()`` copies
them into tuples on a frozen SkillConfiguration, which is then shared
read-only by every dispatch for the lifetime of the skill.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from chorus.attributes.persistence import BasePersistenceAdapter
from chorus.dispatch.adapter import BaseHandlerAdapter
from chorus.dispatch.components import BaseRequestInterceptor, BaseResponseInterceptor
from chorus.dispatch.mapper import BaseExceptionMapper, BaseRequestMapper
from chorus.services import BaseApiClient


@dataclass(frozen=True)
class SkillConfiguration:
    """Immutable aggregate of everything the dispatcher needs.

    Attributes:
        request_mappers: Tried in order; first non-empty result wins
        handler_adapters: Tried in order; first supporting adapter wins
        exception_mapper: Resolves recovery handlers, or None
        request_interceptors: Global interceptors run before resolution
        response_interceptors: Global interceptors run after execution
        persistence_adapter: Backing store for persistent attributes
        api_client: Transport for platform service calls
        skill_id: Expected application id of inbound requests
    """

    request_mappers: tuple[BaseRequestMapper, ...] = ()
    handler_adapters: tuple[BaseHandlerAdapter, ...] = ()
    exception_mapper: BaseExceptionMapper | None = None
    request_interceptors: tuple[BaseRequestInterceptor, ...] = ()
    response_interceptors: tuple[BaseResponseInterceptor, ...] = ()
    persistence_adapter: BasePersistenceAdapter | None = None
    api_client: BaseApiClient | None = None
    skill_id: str | None = None

    @classmethod
    def builder(cls) -> SkillConfigurationBuilder:
        return SkillConfigurationBuilder()


class SkillConfigurationBuilder:
    """Accumulates configuration before it is frozen.

    Every method returns the builder so calls can be chained:

        configuration = (
            SkillConfiguration.builder()
            .add_request_mapper(mapper)
            .add_handler_adapter(HandlerAdapter())
            .with_skill_id("amzn1.ask.skill.1234")
            .build()
        )
    """

    def __init__(self) -> None:
        self.request_mappers: list[BaseRequestMapper] = []
        self.handler_adapters: list[BaseHandlerAdapter] = []
        self.exception_mapper: BaseExceptionMapper | None = None
        self.request_interceptors: list[BaseRequestInterceptor] = []
        self.response_interceptors: list[BaseResponseInterceptor] = []
        self.persistence_adapter: BasePersistenceAdapter | None = None
        self.api_client: BaseApiClient | None = None
        self.skill_id: str | None = None

    def add_request_mapper(self, mapper: BaseRequestMapper) -> SkillConfigurationBuilder:
        self.request_mappers.append(mapper)
        return self

    def add_request_mappers(
        self, mappers: Iterable[BaseRequestMapper]
    ) -> SkillConfigurationBuilder:
        self.request_mappers.extend(mappers)
        return self

    def add_handler_adapter(self, adapter: BaseHandlerAdapter) -> SkillConfigurationBuilder:
        self.handler_adapters.append(adapter)
        return self

    def add_handler_adapters(
        self, adapters: Iterable[BaseHandlerAdapter]
    ) -> SkillConfigurationBuilder:
        self.handler_adapters.extend(adapters)
        return self

    def with_exception_mapper(
        self, mapper: BaseExceptionMapper | None
    ) -> SkillConfigurationBuilder:
        self.exception_mapper = mapper
        return self

    def add_request_interceptor(
        self, interceptor: BaseRequestInterceptor
    ) -> SkillConfigurationBuilder:
        self.request_interceptors.append(interceptor)
        return self

    def add_request_interceptors(
        self, interceptors: Iterable[BaseRequestInterceptor]
    ) -> SkillConfigurationBuilder:
        self.request_interceptors.extend(interceptors)
        return self

    def add_response_interceptor(
        self, interceptor: BaseResponseInterceptor
    ) -> SkillConfigurationBuilder:
        self.response_interceptors.append(interceptor)
        return self

    def add_response_interceptors(
        self, interceptors: Iterable[BaseResponseInterceptor]
    ) -> SkillConfigurationBuilder:
        self.response_interceptors.extend(interceptors)
        return self

    def with_persistence_adapter(
        self, adapter: BasePersistenceAdapter | None
    ) -> SkillConfigurationBuilder:
        self.persistence_adapter = adapter
        return self

    def with_api_client(self, api_client: BaseApiClient | None) -> SkillConfigurationBuilder:
        self.api_client = api_client
        return self

    def with_skill_id(self, skill_id: str | None) -> SkillConfigurationBuilder:
        self.skill_id = skill_id
        return self

    def build(self) -> SkillConfiguration:
        """Freeze the accumulated configuration.

        Later changes to this builder do not affect the returned value.
        """
        return SkillConfiguration(
            request_mappers=tuple(self.request_mappers),
            handler_adapters=tuple(self.handler_adapters),
            exception_mapper=self.exception_mapper,
            request_interceptors=tuple(self.request_interceptors),
            response_interceptors=tuple(self.response_interceptors),
            persistence_adapter=self.persistence_adapter,
            api_client=self.api_client,
            skill_id=self.skill_id,
        )
