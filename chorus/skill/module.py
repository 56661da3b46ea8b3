"""
SDK modules: plugins that extend a skill's configuration at assembly time.

A module receives an SdkModuleContext wrapping the configuration builder.
The context is closed as soon as assembly finishes; any later use raises
ConfigurationFrozenError, so a module cannot mutate a built skill.

Example:
    class AuditModule(BaseSdkModule):
        def setup_module(self, context):
            context.add_request_interceptor(AuditInterceptor())
            context.add_response_interceptor(AuditInterceptor())
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from chorus.attributes.persistence import BasePersistenceAdapter
from chorus.dispatch.adapter import BaseHandlerAdapter
from chorus.dispatch.components import BaseRequestInterceptor, BaseResponseInterceptor
from chorus.dispatch.mapper import BaseExceptionMapper, BaseRequestMapper
from chorus.exceptions import ConfigurationFrozenError
from chorus.services import BaseApiClient
from chorus.skill.configuration import SkillConfigurationBuilder


class SdkModuleContext:
    """Temporary, exclusive access to a configuration builder."""

    def __init__(self, config_builder: SkillConfigurationBuilder) -> None:
        self._config_builder: SkillConfigurationBuilder | None = config_builder

    @property
    def closed(self) -> bool:
        return self._config_builder is None

    def close(self) -> None:
        self._config_builder = None

    def _builder(self) -> SkillConfigurationBuilder:
        if self._config_builder is None:
            raise ConfigurationFrozenError(
                "Skill configuration can only be changed while modules are being set up"
            )
        return self._config_builder

    def add_request_mapper(self, mapper: BaseRequestMapper) -> SdkModuleContext:
        self._builder().add_request_mapper(mapper)
        return self

    def add_handler_adapter(self, adapter: BaseHandlerAdapter) -> SdkModuleContext:
        self._builder().add_handler_adapter(adapter)
        return self

    def set_exception_mapper(self, mapper: BaseExceptionMapper) -> SdkModuleContext:
        self._builder().with_exception_mapper(mapper)
        return self

    def add_request_interceptor(self, interceptor: BaseRequestInterceptor) -> SdkModuleContext:
        self._builder().add_request_interceptor(interceptor)
        return self

    def add_response_interceptor(self, interceptor: BaseResponseInterceptor) -> SdkModuleContext:
        self._builder().add_response_interceptor(interceptor)
        return self

    def set_persistence_adapter(self, adapter: BasePersistenceAdapter) -> SdkModuleContext:
        self._builder().with_persistence_adapter(adapter)
        return self

    def set_api_client(self, api_client: BaseApiClient) -> SdkModuleContext:
        self._builder().with_api_client(api_client)
        return self

    def set_skill_id(self, skill_id: str) -> SdkModuleContext:
        self._builder().with_skill_id(skill_id)
        return self


class BaseSdkModule(ABC):
    """A reusable bundle of configuration applied during skill assembly."""

    @abstractmethod
    def setup_module(self, context: SdkModuleContext) -> None:
        ...
