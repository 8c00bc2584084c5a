"""Network refresh of entities through the transport collaborator."""

from __future__ import annotations

import logging
from string import Formatter
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, TypeVar

from pyffl.exceptions import InvalidStateError, UnsupportedOperationError
from pyffl.mapping.mapper import EntityMapper
from pyffl.transport import RequestConfig, Transport

if TYPE_CHECKING:
    from pyffl.models.base import Entity


logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Entity")


class EntityRepository:
    def __init__(self, transport: Transport, mapper: EntityMapper):
        self.transport = transport
        self.mapper = mapper

    async def read(
        self,
        instance: E,
        route: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        *,
        force_reload: bool = True,
        config: Optional[RequestConfig] = None,
    ) -> E:
        """Re-fetch ``instance`` from the provider and repopulate it in place.

        With ``force_reload=False`` a cached instance for the same identity is
        returned without touching the network. Transport failures propagate.
        """

        entity_type = type(instance)
        if entity_type.route is None:
            raise UnsupportedOperationError(f"{entity_type.display_name}: read: no known endpoint")

        entity_id = instance.get_id()
        if entity_id is None:
            raise InvalidStateError(
                f"{entity_type.display_name}: read: cannot read on instance without an id"
            )

        if not force_reload:
            cached = self.mapper.registry.lookup(entity_type, instance)
            if cached is not None:
                logger.debug("Serving %s %s from cache", entity_type.display_name, entity_id)
                return cached

        resolved_route = _format_route(route or entity_type.route, instance)
        request_params: Dict[str, Any] = dict(entity_type.route_params)
        request_params.update(params or {})
        request_params[entity_type.id_param] = entity_id

        data = await self.transport.fetch_json(resolved_route, request_params, config)
        payload = entity_type.select_payload(data, instance)
        if not isinstance(payload, Mapping):
            raise InvalidStateError(
                f"{entity_type.display_name}: read: response has no entry for id {entity_id!r}"
            )
        return self.mapper.populate(payload, instance, from_origin=True)


def _format_route(template: str, instance: "Entity") -> str:
    values: Dict[str, Any] = {}
    for _, field_name, _, _ in Formatter().parse(template):
        if not field_name:
            continue
        value = getattr(instance, field_name, None)
        if value is None:
            raise InvalidStateError(
                f"{type(instance).display_name}: read: route needs {field_name!r} but it is not set"
            )
        values[field_name] = value
    return template.format(**values)
