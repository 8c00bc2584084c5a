"""Identity-keyed caches of live entity instances."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, Mapping, Optional, Tuple, Type

if TYPE_CHECKING:
    from pyffl.models.base import Entity


logger = logging.getLogger(__name__)

Identity = Tuple[Any, ...]


def compute_identity(entity_type: Type["Entity"], params: Any = None) -> Optional[Identity]:
    """Return the identity tuple for ``params`` or ``None`` when any field is missing.

    ``params`` may be a mapping keyed by attribute name or an entity instance.
    """

    if params is None or not entity_type.identity_fields:
        return None
    values = []
    for name in entity_type.identity_fields:
        if isinstance(params, Mapping):
            value = params.get(name)
        else:
            value = getattr(params, name, None)
        if value is None:
            return None
        values.append(value)
    return tuple(values)


class IdentityCache:
    """At most one live instance per identity for a single entity type."""

    def __init__(self, entity_type: Type["Entity"]):
        self.entity_type = entity_type
        self._instances: Dict[Identity, "Entity"] = {}

    def compute_identity(self, params: Any = None) -> Optional[Identity]:
        return compute_identity(self.entity_type, params)

    def register(self, instance: "Entity") -> Optional[Identity]:
        identity = self.compute_identity(instance)
        if identity is None:
            logger.debug("%s has no resolvable identity; not cached", self.entity_type.display_name)
            return None
        # Upsert: a refresh replaces whatever was cached for this identity.
        self._instances[identity] = instance
        logger.debug("Cached %s %s", self.entity_type.display_name, identity)
        return identity

    def get(self, identity: Optional[Identity]) -> Optional["Entity"]:
        if identity is None:
            return None
        return self._instances.get(identity)

    def lookup(self, params: Any) -> Optional["Entity"]:
        return self.get(self.compute_identity(params))

    def clear(self) -> None:
        self._instances.clear()

    def __contains__(self, identity: object) -> bool:
        return identity in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> Iterator["Entity"]:
        return iter(list(self._instances.values()))


class EntityRegistry:
    """Session-owned collection of identity caches, one per entity type."""

    def __init__(self) -> None:
        self._caches: Dict[Type["Entity"], IdentityCache] = {}

    def cache_for(self, entity_type: Type["Entity"]) -> IdentityCache:
        cache = self._caches.get(entity_type)
        if cache is None:
            cache = IdentityCache(entity_type)
            self._caches[entity_type] = cache
        return cache

    def register(self, instance: "Entity") -> Optional[Identity]:
        return self.cache_for(type(instance)).register(instance)

    def lookup(self, entity_type: Type["Entity"], params: Any) -> Optional["Entity"]:
        return self.cache_for(entity_type).lookup(params)

    def clear(self, entity_type: Optional[Type["Entity"]] = None) -> None:
        if entity_type is not None:
            self.cache_for(entity_type).clear()
            return
        for cache in self._caches.values():
            cache.clear()
