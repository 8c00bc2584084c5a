"""Declarative response mapping, identity caching and the read protocol."""

from .cache import EntityRegistry, IdentityCache, compute_identity
from .mapper import EntityMapper
from .repository import EntityRepository
from .rules import Direct, NestedArray, NestedSingle, Rule, Transform, get_path, response_map

__all__ = [
    "Direct",
    "EntityMapper",
    "EntityRegistry",
    "EntityRepository",
    "IdentityCache",
    "NestedArray",
    "NestedSingle",
    "Rule",
    "Transform",
    "compute_identity",
    "get_path",
    "response_map",
]
