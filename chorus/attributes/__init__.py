"""Attribute scopes and the persistence adapter contract."""

from .manager import AttributesManager
from .persistence import BasePersistenceAdapter

__all__ = [
    "AttributesManager",
    "BasePersistenceAdapter",
]
