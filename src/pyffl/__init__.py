"""Async ESPN fantasy football client built on a declarative response mapper."""

from .client import Client
from .constants import (
    GAME_STATUS_LABELS,
    NFL_TEAM_ID_TO_ABBREVIATION,
    NFL_TEAM_ID_TO_NAME,
    NFL_TEAMS,
    SLOT_CATEGORY_ID_TO_POSITION,
    NFLTeam,
)
from .exceptions import (
    ConfigurationError,
    InvalidStateError,
    PyfflError,
    TransportError,
    UnsupportedOperationError,
)
from .mapping import (
    Direct,
    EntityMapper,
    EntityRegistry,
    EntityRepository,
    IdentityCache,
    NestedArray,
    NestedSingle,
    Transform,
)
from .models import (
    Boxscore,
    BoxscorePlayer,
    DraftPlayer,
    Entity,
    FreeAgentPlayer,
    League,
    NFLGame,
    Player,
    Team,
)
from .settings import Settings
from .transport import HttpTransport, RequestConfig, Transport

__all__ = [
    "Boxscore",
    "BoxscorePlayer",
    "Client",
    "ConfigurationError",
    "Direct",
    "DraftPlayer",
    "Entity",
    "EntityMapper",
    "EntityRegistry",
    "EntityRepository",
    "FreeAgentPlayer",
    "GAME_STATUS_LABELS",
    "HttpTransport",
    "IdentityCache",
    "InvalidStateError",
    "League",
    "NFLGame",
    "NFLTeam",
    "NFL_TEAMS",
    "NFL_TEAM_ID_TO_ABBREVIATION",
    "NFL_TEAM_ID_TO_NAME",
    "NestedArray",
    "NestedSingle",
    "Player",
    "PyfflError",
    "RequestConfig",
    "SLOT_CATEGORY_ID_TO_POSITION",
    "Settings",
    "Team",
    "Transform",
    "Transport",
    "TransportError",
    "UnsupportedOperationError",
]
