"""NFL players as they appear in rosters, boxscores and the player pool."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, ClassVar, List, Optional, Tuple

from pyffl.constants import nfl_team_abbreviation, nfl_team_name, slot_position
from pyffl.mapping.rules import Transform, response_map
from pyffl.models.base import Entity


def _jersey_number(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _positions(slot_ids: Any) -> List[Optional[str]]:
    return [slot_position(slot_id) for slot_id in slot_ids or []]


def epoch_millis_to_datetime(value: Any) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(float(value) / 1000.0, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError):
        return None


class Player(Entity):
    """A player pool entry (``{"id": ..., "player": {...}}``) for one scoring period.

    There is no known endpoint to fetch a player directly; players are built from
    team rosters, boxscores and free agent listings.
    """

    display_name: ClassVar[str] = "Player"
    identity_fields: ClassVar[Tuple[str, ...]] = ("id", "season_id", "scoring_period_id")

    season_id: Optional[int] = None
    scoring_period_id: Optional[int] = None

    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    jersey_number: Optional[int] = None
    pro_team: Optional[str] = None
    pro_team_abbreviation: Optional[str] = None
    default_position: Optional[str] = None
    eligible_positions: Optional[List[Optional[str]]] = None
    injury_status: Optional[str] = None
    is_injured: Optional[bool] = None
    is_droppable: Optional[bool] = None
    percent_owned: Optional[float] = None
    percent_change: Optional[float] = None
    percent_started: Optional[float] = None
    average_draft_position: Optional[float] = None
    last_news_date: Optional[datetime] = None

    response_map = response_map(
        {
            "id": "id",
            "first_name": "player.firstName",
            "last_name": "player.lastName",
            "full_name": "player.fullName",
            "jersey_number": Transform("player.jersey", _jersey_number),
            "pro_team": Transform("player.proTeamId", nfl_team_name),
            "pro_team_abbreviation": Transform("player.proTeamId", nfl_team_abbreviation),
            "default_position": Transform("player.defaultPositionId", slot_position),
            "eligible_positions": Transform("player.eligibleSlots", _positions),
            "injury_status": "player.injuryStatus",
            "is_injured": "player.injured",
            "is_droppable": "player.droppable",
            "percent_owned": "player.ownership.percentOwned",
            "percent_change": "player.ownership.percentChange",
            "percent_started": "player.ownership.percentStarted",
            "average_draft_position": "player.ownership.averageDraftPosition",
            "last_news_date": Transform("player.lastNewsDate", epoch_millis_to_datetime),
        }
    )
