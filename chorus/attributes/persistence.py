"""Persistence contract for skill attributes that outlive a session.

Concrete adapters (DynamoDB, Redis, S3, ...) live outside the SDK; they only
need to implement BasePersistenceAdapter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from chorus.model.request import RequestEnvelope


class BasePersistenceAdapter(ABC):
    """Stores persistent attributes keyed by something in the request envelope.

    Implementations decide how a key is derived from the envelope
    (typically the user id or device id).

    Example:
        class DictPersistenceAdapter(BasePersistenceAdapter):
            def __init__(self):
                self._store = {}

            def get_attributes(self, request_envelope):
                return dict(self._store.get(_user_id(request_envelope), {}))

            def save_attributes(self, request_envelope, attributes):
                self._store[_user_id(request_envelope)] = dict(attributes)

            def delete_attributes(self, request_envelope):
                self._store.pop(_user_id(request_envelope), None)
    """

    @abstractmethod
    def get_attributes(self, request_envelope: RequestEnvelope) -> dict[str, Any]:
        """Load attributes for the envelope's key. Missing keys yield an empty dict."""
        ...

    @abstractmethod
    def save_attributes(
        self, request_envelope: RequestEnvelope, attributes: dict[str, Any]
    ) -> None:
        """Store attributes under the envelope's key."""
        ...

    @abstractmethod
    def delete_attributes(self, request_envelope: RequestEnvelope) -> None:
        """Remove any attributes stored under the envelope's key."""
        ...
