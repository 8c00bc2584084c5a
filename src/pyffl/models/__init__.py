"""Entity types populated from ESPN fantasy football payloads."""

from .base import Entity
from .boxscore import Boxscore, BoxscorePlayer
from .draft_player import DraftPlayer
from .free_agent_player import FreeAgentPlayer
from .league import (
    AcquisitionSettings,
    DraftSettings,
    League,
    RosterSettings,
    ScheduleSettings,
    ScoringSettings,
    TradeSettings,
)
from .nfl_game import NFLGame
from .player import Player
from .team import Team

__all__ = [
    "AcquisitionSettings",
    "Boxscore",
    "BoxscorePlayer",
    "DraftPlayer",
    "DraftSettings",
    "Entity",
    "FreeAgentPlayer",
    "League",
    "NFLGame",
    "Player",
    "RosterSettings",
    "ScheduleSettings",
    "ScoringSettings",
    "Team",
    "TradeSettings",
]
