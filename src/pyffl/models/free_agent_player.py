"""Players available on the waiver wire for a scoring period."""

from __future__ import annotations

from typing import ClassVar, Optional, Tuple

from pyffl.mapping.rules import NestedSingle, Transform, response_map
from pyffl.models.base import Entity
from pyffl.models.player import Player
from pyffl.models.stats import actual_points as _actual_points
from pyffl.models.stats import projected_points as _projected_points


class FreeAgentPlayer(Entity):
    display_name: ClassVar[str] = "FreeAgentPlayer"
    identity_fields: ClassVar[Tuple[str, ...]] = ("id", "league_id", "season_id", "scoring_period_id")

    league_id: Optional[int] = None
    season_id: Optional[int] = None
    scoring_period_id: Optional[int] = None

    id: Optional[int] = None
    status: Optional[str] = None
    on_team_id: Optional[int] = None
    player: Optional[Player] = None
    points: Optional[float] = None
    projected_points: Optional[float] = None

    response_map = response_map(
        {
            "id": "id",
            "status": "status",
            "on_team_id": "onTeamId",
            # Free agent entries share the player pool shape, so the whole entry feeds Player.
            "player": NestedSingle(None, Player, context=("season_id", "scoring_period_id")),
            "points": Transform("player.stats", _actual_points, with_entity=True),
            "projected_points": Transform("player.stats", _projected_points, with_entity=True),
        }
    )
