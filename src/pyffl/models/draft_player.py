"""Draft picks from a league's draft detail."""

from __future__ import annotations

from typing import ClassVar, Optional, Tuple

from pyffl.mapping.rules import response_map
from pyffl.models.base import Entity


class DraftPlayer(Entity):
    """A single pick; ``id`` is the drafted player's id."""

    display_name: ClassVar[str] = "DraftPlayer"
    identity_fields: ClassVar[Tuple[str, ...]] = ("id", "league_id", "season_id")

    league_id: Optional[int] = None
    season_id: Optional[int] = None

    id: Optional[int] = None
    team_id: Optional[int] = None
    round_id: Optional[int] = None
    round_pick_number: Optional[int] = None
    overall_pick_number: Optional[int] = None
    bid_amount: Optional[int] = None
    is_keeper: Optional[bool] = None
    nominating_team_id: Optional[int] = None

    response_map = response_map(
        {
            "id": "playerId",
            "team_id": "teamId",
            "round_id": "roundId",
            "round_pick_number": "roundPickNumber",
            "overall_pick_number": "overallPickNumber",
            "bid_amount": "bidAmount",
            "is_keeper": "keeper",
            "nominating_team_id": "nominatingTeamId",
        }
    )
