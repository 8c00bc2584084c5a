"""Weekly head-to-head matchups and the players that scored in them."""

from __future__ import annotations

from typing import ClassVar, Dict, List, Optional, Tuple

from pyffl.constants import slot_position
from pyffl.mapping.rules import NestedArray, NestedSingle, Transform, response_map
from pyffl.models.base import Entity
from pyffl.models.player import Player
from pyffl.models.stats import points_breakdown as _points_breakdown
from pyffl.models.stats import projected_points as _projected_points


class BoxscorePlayer(Entity):
    """One roster entry of a boxscore side; never cached on its own."""

    display_name: ClassVar[str] = "BoxscorePlayer"
    identity_fields: ClassVar[Tuple[str, ...]] = ()

    season_id: Optional[int] = None
    scoring_period_id: Optional[int] = None

    player: Optional[Player] = None
    position: Optional[str] = None
    total_points: Optional[float] = None
    projected_points: Optional[float] = None
    points_breakdown: Optional[Dict[str, float]] = None

    response_map = response_map(
        {
            "player": NestedSingle("playerPoolEntry", Player, context=("season_id", "scoring_period_id")),
            "position": Transform("lineupSlotId", slot_position),
            "total_points": "playerPoolEntry.appliedStatTotal",
            "projected_points": Transform("playerPoolEntry.player.stats", _projected_points, with_entity=True),
            "points_breakdown": Transform("playerPoolEntry.player.stats", _points_breakdown, with_entity=True),
        }
    )


_ROSTER_CONTEXT = ("season_id", "scoring_period_id")


class Boxscore(Entity):
    """A matchup from the league schedule (views ``mMatchup`` and ``mMatchupScore``).

    There is no known endpoint to read a single boxscore; use
    ``Client.get_boxscore_for_week``.
    """

    display_name: ClassVar[str] = "Boxscore"
    identity_fields: ClassVar[Tuple[str, ...]] = ("id", "league_id", "season_id")

    league_id: Optional[int] = None
    season_id: Optional[int] = None
    scoring_period_id: Optional[int] = None

    id: Optional[int] = None
    matchup_period_id: Optional[int] = None
    winner: Optional[str] = None
    home_team_id: Optional[int] = None
    home_score: Optional[float] = None
    home_roster: Optional[List[BoxscorePlayer]] = None
    away_team_id: Optional[int] = None
    away_score: Optional[float] = None
    away_roster: Optional[List[BoxscorePlayer]] = None

    response_map = response_map(
        {
            "id": "id",
            "matchup_period_id": "matchupPeriodId",
            "winner": "winner",
            "home_team_id": "home.teamId",
            "home_score": "home.totalPoints",
            "home_roster": NestedArray(
                "home.rosterForCurrentScoringPeriod.entries", BoxscorePlayer, context=_ROSTER_CONTEXT
            ),
            "away_team_id": "away.teamId",
            "away_score": "away.totalPoints",
            "away_roster": NestedArray(
                "away.rosterForCurrentScoringPeriod.entries", BoxscorePlayer, context=_ROSTER_CONTEXT
            ),
        }
    )
