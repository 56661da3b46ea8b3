"""
Per-dispatch attribute scopes.

An AttributesManager is created for every dispatch and exposes three scopes:

- request attributes: live for one dispatch only
- session attributes: copied from the envelope session and returned in the
  response envelope
- persistent attributes: loaded lazily from a persistence adapter and
  written back only when ``save_persistent_attributes`` is called

The manager is not thread-safe. The dispatch pipeline is sequential, so
nothing inside one dispatch touches it concurrently.
"""

from __future__ import annotations

import logging
from typing import Any

from chorus.attributes.persistence import BasePersistenceAdapter
from chorus.exceptions import AttributesManagerError
from chorus.model.request import RequestEnvelope

logger = logging.getLogger(__name__)


class AttributesManager:
    """Holds request, session and persistent attributes for one dispatch.

    Attributes:
        request_envelope: The envelope being dispatched
        request_attributes: Scratch space shared by interceptors and handlers
    """

    def __init__(
        self,
        request_envelope: RequestEnvelope,
        persistence_adapter: BasePersistenceAdapter | None = None,
    ) -> None:
        if request_envelope is None:
            raise AttributesManagerError("Request envelope cannot be None")
        self.request_envelope = request_envelope
        self.request_attributes: dict[str, Any] = {}
        self._persistence_adapter = persistence_adapter
        self._persistent_attributes: dict[str, Any] = {}
        self._persistent_loaded = False

        session = request_envelope.session
        if session is None:
            self._session_attributes: dict[str, Any] | None = None
        else:
            self._session_attributes = dict(session.attributes or {})

    @property
    def in_session(self) -> bool:
        return self._session_attributes is not None

    @property
    def session_attributes(self) -> dict[str, Any]:
        """Session attributes for this turn.

        Raises:
            AttributesManagerError: If the request is out of session
        """
        if self._session_attributes is None:
            raise AttributesManagerError(
                "Cannot get session attributes from out of session request"
            )
        return self._session_attributes

    @session_attributes.setter
    def session_attributes(self, attributes: dict[str, Any]) -> None:
        if self._session_attributes is None:
            raise AttributesManagerError(
                "Cannot set session attributes to out of session request"
            )
        self._session_attributes = attributes

    @property
    def persistent_attributes(self) -> dict[str, Any]:
        """Persistent attributes, loaded from the adapter on first access.

        Raises:
            AttributesManagerError: If no persistence adapter is configured
        """
        adapter = self._require_adapter("get")
        if not self._persistent_loaded:
            self._persistent_attributes = dict(adapter.get_attributes(self.request_envelope) or {})
            self._persistent_loaded = True
            logger.debug(f"Loaded {len(self._persistent_attributes)} persistent attributes")
        return self._persistent_attributes

    @persistent_attributes.setter
    def persistent_attributes(self, attributes: dict[str, Any]) -> None:
        self._require_adapter("set")
        self._persistent_attributes = attributes
        self._persistent_loaded = True

    def save_persistent_attributes(self) -> None:
        """Write persistent attributes back if they were read or set this turn.

        Raises:
            AttributesManagerError: If no persistence adapter is configured
        """
        adapter = self._require_adapter("save")
        if self._persistent_loaded:
            adapter.save_attributes(self.request_envelope, self._persistent_attributes)

    def delete_persistent_attributes(self) -> None:
        """Remove stored persistent attributes and reset the local copy.

        Raises:
            AttributesManagerError: If no persistence adapter is configured
        """
        adapter = self._require_adapter("delete")
        adapter.delete_attributes(self.request_envelope)
        self._persistent_attributes = {}
        self._persistent_loaded = False

    def _require_adapter(self, action: str) -> BasePersistenceAdapter:
        if self._persistence_adapter is None:
            raise AttributesManagerError(
                f"Cannot {action} persistent attributes without a persistence adapter"
            )
        return self._persistence_adapter
