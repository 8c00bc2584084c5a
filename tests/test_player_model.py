from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from pyffl.constants import NFL_TEAM_ID_TO_ABBREVIATION, NFL_TEAM_ID_TO_NAME, SLOT_CATEGORY_ID_TO_POSITION
from pyffl.mapping import EntityMapper
from pyffl.models import Player


def _build(player: dict, **context) -> Player:
    return EntityMapper().build_from_origin(Player, {"id": 3139477, "player": player}, context)


def test_constructor_leaves_context_unset():
    player = Player()
    assert player.season_id is None
    assert player.scoring_period_id is None


def test_constructor_copies_context():
    player = Player(season_id=25, scoring_period_id=25)
    assert player.season_id == 25
    assert player.scoring_period_id == 25


def test_constructor_rejects_undeclared_options():
    with pytest.raises(ValidationError):
        Player(nickname="Mahomes")


def test_jersey_number_is_coerced_to_int():
    assert _build({"jersey": "23"}).jersey_number == 23


def test_pro_team_lookups():
    player = _build({"proTeamId": 22})
    assert player.pro_team == NFL_TEAM_ID_TO_NAME[22]
    assert player.pro_team_abbreviation == NFL_TEAM_ID_TO_ABBREVIATION[22]


def test_default_position_lookup():
    assert _build({"defaultPositionId": 2}).default_position == SLOT_CATEGORY_ID_TO_POSITION[2]


def test_eligible_positions_map_each_slot():
    slots = [0, 1, 2]
    player = _build({"eligibleSlots": slots})
    assert player.eligible_positions == [SLOT_CATEGORY_ID_TO_POSITION[slot] for slot in slots]


def test_last_news_date_is_utc_datetime():
    player = _build({"lastNewsDate": 1545432134218})
    assert player.last_news_date == datetime.fromtimestamp(1545432134.218, tz=timezone.utc)


def test_ownership_fields_follow_nested_paths():
    player = _build({"ownership": {"percentOwned": 99.5, "percentChange": -0.2, "averageDraftPosition": 4.1}})
    assert player.percent_owned == pytest.approx(99.5)
    assert player.percent_change == pytest.approx(-0.2)
    assert player.average_draft_position == pytest.approx(4.1)
    assert player.percent_started is None


def test_get_and_set_id():
    player = Player()
    player.set_id(12)
    assert player.get_id() == 12
    assert player.id == 12
