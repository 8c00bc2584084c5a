"""Field-mapping rules describing how a wire payload projects onto an entity.

A response map is a plain table from attribute name to rule. A rule is either a
string (a direct copy from a dotted wire path) or one of the tagged variants
below. The mapper interprets the table; entity types never carry mapping code.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Sequence, Tuple, Type, Union

if TYPE_CHECKING:
    from pyffl.models.base import Entity


@dataclass(frozen=True)
class Direct:
    """Copy the value found at ``wire_field`` without changing it."""

    wire_field: str


@dataclass(frozen=True)
class Transform:
    """Apply ``fn`` to the raw value at ``wire_field``.

    ``wire_field=None`` hands the whole payload to ``fn``. With ``with_entity`` the
    instance being populated is passed as a second argument so the transform can
    read context such as ``scoring_period_id``.
    """

    wire_field: Optional[str]
    fn: Callable[..., Any]
    with_entity: bool = False


@dataclass(frozen=True)
class NestedSingle:
    """Build one child entity from the sub-payload at ``wire_field``."""

    wire_field: Optional[str]
    entity_type: Type["Entity"]
    context: Tuple[str, ...] = ()


@dataclass(frozen=True)
class NestedArray:
    """Build one child entity per element of the sequence at ``wire_field``.

    ``item_field`` narrows each element before it is mapped (for example the
    ``playerPoolEntry`` of a roster entry). ``context`` names parent attributes
    handed to every child constructor.
    """

    wire_field: str
    entity_type: Type["Entity"]
    item_field: Optional[str] = None
    context: Tuple[str, ...] = ()


Rule = Union[str, Direct, Transform, NestedSingle, NestedArray]


def response_map(rules: Mapping[str, Rule]) -> Mapping[str, Rule]:
    """Freeze a response map so it can be shared across every instance of a type."""

    return MappingProxyType(dict(rules))


def get_path(payload: Any, path: Optional[str]) -> Any:
    """Resolve a dotted path (``record.overall.wins``, ``entries.0``) or return ``None``."""

    if path is None:
        return payload
    current = payload
    for part in path.split("."):
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(part)
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)) and part.isdigit():
            index = int(part)
            current = current[index] if index < len(current) else None
        else:
            return None
    return current
