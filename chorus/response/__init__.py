"""Response construction helpers."""

from .builder import (
    SESSION_HOLDING_DIRECTIVES,
    ResponseBuilder,
    ssml_speech,
    trim_output_speech,
)

__all__ = [
    "SESSION_HOLDING_DIRECTIVES",
    "ResponseBuilder",
    "ssml_speech",
    "trim_output_speech",
]
