"""Real-world NFL games from ESPN's site API."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Optional, Tuple

from pyffl.constants import NFLTeam, game_status_label, nfl_team
from pyffl.mapping.rules import Transform, response_map
from pyffl.models.base import Entity
from pyffl.models.player import epoch_millis_to_datetime


def _game_date(value: Any) -> Optional[datetime]:
    if isinstance(value, (int, float)):
        return epoch_millis_to_datetime(value)
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


class NFLGame(Entity):
    """An NFL game. ``id`` has no known endpoint of its own.

    ``quarter`` is ``0`` before kickoff and ``4`` once the game is finished.
    """

    display_name: ClassVar[str] = "NFLGame"
    identity_fields: ClassVar[Tuple[str, ...]] = ("id",)

    id: Optional[int] = None
    game_date: Optional[datetime] = None
    game_status: Optional[str] = None
    home_team: Optional[NFLTeam] = None
    away_team: Optional[NFLTeam] = None
    home_team_score: Optional[int] = None
    away_team_score: Optional[int] = None
    quarter: Optional[int] = None
    time_left_in_quarter: Optional[str] = None

    response_map = response_map(
        {
            "id": "gameId",
            "game_date": Transform("gameDate", _game_date),
            "game_status": Transform("status", game_status_label),
            "home_team": Transform("homeProTeamId", nfl_team),
            "away_team": Transform("awayProTeamId", nfl_team),
            "home_team_score": "homeScore",
            "away_team_score": "awayScore",
            "quarter": "period",
            "time_left_in_quarter": "timeRemainingInPeriod",
        }
    )
