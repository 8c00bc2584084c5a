"""Fantasy teams within a league season."""

from __future__ import annotations

from typing import Any, ClassVar, List, Mapping, Optional, Tuple

from pyffl.mapping.rules import NestedArray, response_map
from pyffl.models.base import Entity
from pyffl.models.player import Player


class Team(Entity):
    display_name: ClassVar[str] = "Team"
    identity_fields: ClassVar[Tuple[str, ...]] = ("id", "league_id", "season_id")
    id_param: ClassVar[str] = "teamId"
    route: ClassVar[Optional[str]] = "{season_id}/segments/0/leagues/{league_id}"
    route_params: ClassVar[Mapping[str, Any]] = {"view": ["mRoster", "mTeam"]}

    league_id: Optional[int] = None
    season_id: Optional[int] = None
    scoring_period_id: Optional[int] = None

    id: Optional[int] = None
    abbreviation: Optional[str] = None
    name: Optional[str] = None
    logo_url: Optional[str] = None
    division_id: Optional[int] = None
    owner_ids: Optional[List[str]] = None

    wins: Optional[int] = None
    losses: Optional[int] = None
    ties: Optional[int] = None
    win_percentage: Optional[float] = None
    points_for: Optional[float] = None
    points_against: Optional[float] = None
    streak_length: Optional[int] = None
    streak_type: Optional[str] = None

    playoff_seed: Optional[int] = None
    draft_day_projected_rank: Optional[int] = None
    current_projected_rank: Optional[int] = None
    waiver_rank: Optional[int] = None
    acquisitions: Optional[int] = None
    drops: Optional[int] = None
    trades: Optional[int] = None

    roster: Optional[List[Player]] = None

    response_map = response_map(
        {
            "id": "id",
            "abbreviation": "abbrev",
            "name": "name",
            "logo_url": "logo",
            "division_id": "divisionId",
            "owner_ids": "owners",
            "wins": "record.overall.wins",
            "losses": "record.overall.losses",
            "ties": "record.overall.ties",
            "win_percentage": "record.overall.percentage",
            "points_for": "record.overall.pointsFor",
            "points_against": "record.overall.pointsAgainst",
            "streak_length": "record.overall.streakLength",
            "streak_type": "record.overall.streakType",
            "playoff_seed": "playoffSeed",
            "draft_day_projected_rank": "draftDayProjectedRank",
            "current_projected_rank": "currentProjectedRank",
            "waiver_rank": "waiverRank",
            "acquisitions": "transactionCounter.acquisitions",
            "drops": "transactionCounter.drops",
            "trades": "transactionCounter.trades",
            "roster": NestedArray(
                "roster.entries",
                Player,
                item_field="playerPoolEntry",
                context=("season_id", "scoring_period_id"),
            ),
        }
    )

    @classmethod
    def select_payload(cls, data: Any, instance: Entity) -> Any:
        """Pick this team out of the league-wide ``teams`` list."""

        teams = data.get("teams") if isinstance(data, Mapping) else None
        for team in teams or []:
            if isinstance(team, Mapping) and team.get("id") == instance.get_id():
                return team
        return None
