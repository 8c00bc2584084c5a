"""Generic interpreter that projects JSON payloads onto entity instances."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from pyffl.exceptions import ConfigurationError
from pyffl.mapping.cache import EntityRegistry
from pyffl.mapping.rules import Direct, NestedArray, NestedSingle, Rule, Transform, get_path

if TYPE_CHECKING:
    from pyffl.models.base import Entity


logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Entity")


class EntityMapper:
    """Populate entities from response maps and register them in a registry.

    Mapping is synchronous and free of I/O: the only side effect of ``populate`` is
    the cache write at the end.
    """

    def __init__(self, registry: Optional[EntityRegistry] = None):
        self.registry = registry if registry is not None else EntityRegistry()

    def populate(self, payload: Any, instance: E, *, from_origin: bool) -> E:
        """Assign every attribute of ``instance`` named in its response map.

        When ``from_origin`` is true the payload uses the provider's wire names and
        each rule is applied; otherwise the payload is already keyed by attribute
        name. Missing source fields resolve to ``None``.
        """

        entity_type = type(instance)
        for attribute, rule in entity_type.response_map.items():
            if from_origin:
                value = self._resolve(entity_type, attribute, rule, payload, instance)
            else:
                value = get_path(payload, attribute)
            setattr(instance, attribute, value)
        self.registry.register(instance)
        return instance

    def build_from_origin(
        self,
        entity_type: Type[E],
        payload: Any,
        context: Optional[Mapping[str, Any]] = None,
    ) -> E:
        return self._build(entity_type, payload, context, from_origin=True)

    def build_from_local(
        self,
        entity_type: Type[E],
        payload: Any,
        context: Optional[Mapping[str, Any]] = None,
    ) -> E:
        return self._build(entity_type, payload, context, from_origin=False)

    def _build(
        self,
        entity_type: Type[E],
        payload: Any,
        context: Optional[Mapping[str, Any]],
        *,
        from_origin: bool,
    ) -> E:
        instance = entity_type(**dict(context or {}))
        return self.populate(payload, instance, from_origin=from_origin)

    def _resolve(
        self,
        entity_type: Type["Entity"],
        attribute: str,
        rule: Rule,
        payload: Any,
        instance: "Entity",
    ) -> Any:
        if isinstance(rule, str):
            return get_path(payload, rule)
        if isinstance(rule, Direct):
            return get_path(payload, rule.wire_field)
        if isinstance(rule, Transform):
            raw = get_path(payload, rule.wire_field)
            if raw is None:
                return None
            return rule.fn(raw, instance) if rule.with_entity else rule.fn(raw)
        if isinstance(rule, NestedSingle):
            raw = get_path(payload, rule.wire_field)
            if raw is None:
                return None
            return self.build_from_origin(rule.entity_type, raw, _context(instance, rule.context))
        if isinstance(rule, NestedArray):
            raw = get_path(payload, rule.wire_field)
            if raw is None:
                return None
            if not isinstance(raw, Sequence) or isinstance(raw, (str, bytes)):
                logger.warning(
                    "%s.%s expected a list at %r, got %s; leaving it unset",
                    entity_type.display_name,
                    attribute,
                    rule.wire_field,
                    type(raw).__name__,
                )
                return None
            context = _context(instance, rule.context)
            items: List[Any] = []
            for element in raw:
                item_payload = get_path(element, rule.item_field)
                items.append(self.build_from_origin(rule.entity_type, item_payload, context))
            return items
        raise ConfigurationError(
            f"{entity_type.display_name}: populate: did not recognize rule {rule!r} "
            f"for attribute {attribute!r}"
        )


def _context(instance: "Entity", names: Tuple[str, ...]) -> Dict[str, Any]:
    return {name: getattr(instance, name) for name in names}
