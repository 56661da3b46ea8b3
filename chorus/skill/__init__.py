"""Skill assembly and runtime."""

from .builder import (
    FunctionExceptionHandler,
    FunctionRequestHandler,
    FunctionRequestInterceptor,
    FunctionResponseInterceptor,
    SkillBuilder,
)
from .configuration import SkillConfiguration, SkillConfigurationBuilder
from .module import BaseSdkModule, SdkModuleContext
from .skill import Skill

__all__ = [
    # Builder
    "SkillBuilder",
    "FunctionExceptionHandler",
    "FunctionRequestHandler",
    "FunctionRequestInterceptor",
    "FunctionResponseInterceptor",
    # Configuration
    "SkillConfiguration",
    "SkillConfigurationBuilder",
    # Modules
    "BaseSdkModule",
    "SdkModuleContext",
    # Runtime
    "Skill",
]
