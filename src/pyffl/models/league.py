"""League-wide settings for a season."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple

from pyffl.constants import slot_position
from pyffl.mapping.rules import NestedSingle, Transform, response_map
from pyffl.models.base import Entity


def _slot_counts(counts: Any) -> Dict[str, int]:
    if not isinstance(counts, Mapping):
        return {}
    result: Dict[str, int] = {}
    for slot_id, count in counts.items():
        position = slot_position(slot_id) or str(slot_id)
        result[position] = int(count)
    return result


def _scoring_items(items: Any) -> List[Dict[str, Any]]:
    return [
        {
            "stat_id": item.get("statId"),
            "points": item.get("points"),
            "is_reverse": item.get("isReverseItem", False),
        }
        for item in items or []
        if isinstance(item, Mapping)
    ]


class DraftSettings(Entity):
    display_name: ClassVar[str] = "DraftSettings"
    identity_fields: ClassVar[Tuple[str, ...]] = ()

    draft_type: Optional[str] = None
    date: Optional[int] = None
    time_per_pick: Optional[int] = None
    pick_order: Optional[List[int]] = None
    can_trade_draft_picks: Optional[bool] = None
    keeper_count: Optional[int] = None
    auction_budget: Optional[int] = None

    response_map = response_map(
        {
            "draft_type": "type",
            "date": "date",
            "time_per_pick": "timePerSelection",
            "pick_order": "pickOrder",
            "can_trade_draft_picks": "isTradingEnabled",
            "keeper_count": "keeperCount",
            "auction_budget": "auctionBudget",
        }
    )


class RosterSettings(Entity):
    display_name: ClassVar[str] = "RosterSettings"
    identity_fields: ClassVar[Tuple[str, ...]] = ()

    lineup_slot_counts: Optional[Dict[str, int]] = None
    position_limits: Optional[Dict[str, int]] = None
    lock_type: Optional[str] = None

    response_map = response_map(
        {
            "lineup_slot_counts": Transform("lineupSlotCounts", _slot_counts),
            "position_limits": Transform("positionLimits", _slot_counts),
            "lock_type": "rosterLocktimeType",
        }
    )


class ScheduleSettings(Entity):
    display_name: ClassVar[str] = "ScheduleSettings"
    identity_fields: ClassVar[Tuple[str, ...]] = ()

    number_of_regular_season_matchups: Optional[int] = None
    regular_season_matchup_length: Optional[int] = None
    playoff_matchup_length: Optional[int] = None
    number_of_playoff_teams: Optional[int] = None
    divisions: Optional[List[Dict[str, Any]]] = None

    response_map = response_map(
        {
            "number_of_regular_season_matchups": "matchupPeriodCount",
            "regular_season_matchup_length": "matchupPeriodLength",
            "playoff_matchup_length": "playoffMatchupPeriodLength",
            "number_of_playoff_teams": "playoffTeamCount",
            "divisions": "divisions",
        }
    )


class ScoringSettings(Entity):
    display_name: ClassVar[str] = "ScoringSettings"
    identity_fields: ClassVar[Tuple[str, ...]] = ()

    scoring_type: Optional[str] = None
    matchup_tie_rule: Optional[str] = None
    playoff_matchup_tie_rule: Optional[str] = None
    scoring_items: Optional[List[Dict[str, Any]]] = None

    response_map = response_map(
        {
            "scoring_type": "scoringType",
            "matchup_tie_rule": "matchupTieRule",
            "playoff_matchup_tie_rule": "playoffMatchupTieRule",
            "scoring_items": Transform("scoringItems", _scoring_items),
        }
    )


class AcquisitionSettings(Entity):
    display_name: ClassVar[str] = "AcquisitionSettings"
    identity_fields: ClassVar[Tuple[str, ...]] = ()

    acquisition_limit: Optional[int] = None
    acquisition_budget: Optional[int] = None
    acquisition_type: Optional[str] = None
    waiver_hours: Optional[int] = None
    is_using_acquisition_budget: Optional[bool] = None

    response_map = response_map(
        {
            "acquisition_limit": "acquisitionLimit",
            "acquisition_budget": "acquisitionBudget",
            "acquisition_type": "acquisitionType",
            "waiver_hours": "waiverHours",
            "is_using_acquisition_budget": "isUsingAcquisitionBudget",
        }
    )


class TradeSettings(Entity):
    display_name: ClassVar[str] = "TradeSettings"
    identity_fields: ClassVar[Tuple[str, ...]] = ()

    allow_out_of_universe: Optional[bool] = None
    deadline_date: Optional[int] = None
    max_trades: Optional[int] = None
    revision_hours: Optional[int] = None
    veto_votes_required: Optional[int] = None

    response_map = response_map(
        {
            "allow_out_of_universe": "allowOutOfUniverse",
            "deadline_date": "deadlineDate",
            "max_trades": "max",
            "revision_hours": "revisionHours",
            "veto_votes_required": "vetoVotesRequired",
        }
    )


class League(Entity):
    """The ``settings`` block of a league season (view ``mSettings``)."""

    display_name: ClassVar[str] = "League"
    id_name: ClassVar[str] = "league_id"
    id_param: ClassVar[str] = "leagueId"
    identity_fields: ClassVar[Tuple[str, ...]] = ("league_id", "season_id")
    route: ClassVar[Optional[str]] = "{season_id}/segments/0/leagues/{league_id}"
    route_params: ClassVar[Mapping[str, Any]] = {"view": "mSettings"}
    response_path: ClassVar[Optional[str]] = "settings"

    league_id: Optional[int] = None
    season_id: Optional[int] = None

    name: Optional[str] = None
    size: Optional[int] = None
    is_public: Optional[bool] = None

    draft_settings: Optional[DraftSettings] = None
    roster_settings: Optional[RosterSettings] = None
    schedule_settings: Optional[ScheduleSettings] = None
    scoring_settings: Optional[ScoringSettings] = None
    acquisition_settings: Optional[AcquisitionSettings] = None
    trade_settings: Optional[TradeSettings] = None

    response_map = response_map(
        {
            "name": "name",
            "size": "size",
            "is_public": "isPublic",
            "draft_settings": NestedSingle("draftSettings", DraftSettings),
            "roster_settings": NestedSingle("rosterSettings", RosterSettings),
            "schedule_settings": NestedSingle("scheduleSettings", ScheduleSettings),
            "scoring_settings": NestedSingle("scoringSettings", ScoringSettings),
            "acquisition_settings": NestedSingle("acquisitionSettings", AcquisitionSettings),
            "trade_settings": NestedSingle("tradeSettings", TradeSettings),
        }
    )
