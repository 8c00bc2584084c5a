"""Base data contract shared by every ESPN entity type."""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, Optional, Tuple

from pydantic import BaseModel
from pydantic.config import ConfigDict

from pyffl.exceptions import ConfigurationError
from pyffl.mapping.rules import Rule, get_path, response_map


class Entity(BaseModel):
    """Plain data model populated by :class:`pyffl.mapping.EntityMapper`.

    Subclasses declare their fields and supply type-level configuration through
    class variables:

    ``response_map``
        Attribute name to mapping rule, in population order.
    ``identity_fields``
        Attributes forming the cache identity.
    ``id_name`` / ``id_param``
        Attribute holding the id, and the query parameter it is sent as on read.
    ``route`` / ``route_params`` / ``response_path``
        Endpoint template (formatted with instance attributes), default query
        params and where the entity payload sits in the response. ``route=None``
        means the type cannot be read from the provider.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    display_name: ClassVar[str] = "Entity"
    id_name: ClassVar[str] = "id"
    id_param: ClassVar[str] = "id"
    identity_fields: ClassVar[Tuple[str, ...]] = ("id",)
    response_map: ClassVar[Mapping[str, Rule]] = response_map({})
    route: ClassVar[Optional[str]] = None
    route_params: ClassVar[Mapping[str, Any]] = {}
    response_path: ClassVar[Optional[str]] = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        declared = set(cls.model_fields)
        unknown = [name for name in cls.response_map if name not in declared]
        if unknown:
            raise ConfigurationError(
                f"{cls.display_name}: response map names undeclared fields {sorted(unknown)}"
            )
        required = set(cls.identity_fields)
        if cls.route is not None:
            required.add(cls.id_name)
        missing = required - declared
        if missing:
            raise ConfigurationError(
                f"{cls.display_name}: identity names undeclared fields {sorted(missing)}"
            )

    @classmethod
    def select_payload(cls, data: Any, instance: "Entity") -> Any:
        """Narrow a read response down to this entity's own payload."""

        return get_path(data, cls.response_path)

    def get_id(self) -> Any:
        return getattr(self, self.id_name, None)

    def set_id(self, value: Any) -> None:
        setattr(self, self.id_name, value)
