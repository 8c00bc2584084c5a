from typing import Any

import pytest

from pyffl.exceptions import InvalidStateError, TransportError, UnsupportedOperationError
from pyffl.mapping import EntityMapper, EntityRegistry, EntityRepository
from pyffl.models import League, NFLGame, Player, Team


class RecordingTransport:
    def __init__(self, response: Any = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[tuple] = []

    async def fetch_json(self, route, params=None, config=None):
        self.calls.append((route, dict(params or {}), config))
        if self.error is not None:
            raise self.error
        return self.response


def _repository(transport: RecordingTransport) -> EntityRepository:
    return EntityRepository(transport, EntityMapper(EntityRegistry()))


@pytest.mark.anyio
async def test_read_without_id_raises_and_skips_transport():
    transport = RecordingTransport()
    with pytest.raises(InvalidStateError):
        await _repository(transport).read(League(season_id=2022))
    assert transport.calls == []


@pytest.mark.anyio
async def test_read_unsupported_type_always_fails():
    transport = RecordingTransport()
    repository = _repository(transport)
    with pytest.raises(UnsupportedOperationError):
        await repository.read(Player(id=1, season_id=2022, scoring_period_id=1), route="anything")
    with pytest.raises(UnsupportedOperationError):
        await repository.read(NFLGame(id=1))
    assert transport.calls == []


@pytest.mark.anyio
async def test_read_cache_hit_skips_transport_when_not_reloading():
    transport = RecordingTransport()
    repository = _repository(transport)
    cached = repository.mapper.build_from_origin(
        League, {"name": "Cached"}, {"league_id": 336358, "season_id": 2022}
    )

    result = await repository.read(League(league_id=336358, season_id=2022), force_reload=False)

    assert result is cached
    assert transport.calls == []


@pytest.mark.anyio
async def test_read_refreshes_instance_in_place():
    transport = RecordingTransport({"settings": {"name": "Refreshed", "size": 12}})
    repository = _repository(transport)
    league = League(league_id=336358, season_id=2022)

    result = await repository.read(league, params={"extra": "1"})

    assert result is league
    assert league.name == "Refreshed"
    assert league.size == 12
    route, params, _ = transport.calls[0]
    assert route == "2022/segments/0/leagues/336358"
    assert params == {"view": "mSettings", "extra": "1", "leagueId": 336358}
    assert repository.mapper.registry.lookup(League, league) is league


@pytest.mark.anyio
async def test_read_cache_miss_fetches_even_without_reload():
    transport = RecordingTransport({"settings": {"name": "Fresh"}})
    league = League(league_id=1, season_id=2022)
    await _repository(transport).read(league, force_reload=False)
    assert league.name == "Fresh"
    assert len(transport.calls) == 1


@pytest.mark.anyio
async def test_read_team_selects_matching_entry():
    payload = {"teams": [{"id": 1, "name": "Other"}, {"id": 4, "name": "Mine", "roster": {"entries": []}}]}
    transport = RecordingTransport(payload)
    team = Team(id=4, league_id=336358, season_id=2022)

    await _repository(transport).read(team)

    assert team.name == "Mine"
    assert team.roster == []
    assert transport.calls[0][1]["teamId"] == 4


@pytest.mark.anyio
async def test_read_route_needs_context_fields():
    transport = RecordingTransport()
    with pytest.raises(InvalidStateError):
        await _repository(transport).read(Team(id=4, league_id=336358))
    assert transport.calls == []


@pytest.mark.anyio
async def test_read_propagates_transport_errors():
    transport = RecordingTransport(error=TransportError("boom", status_code=500))
    league = League(league_id=1, season_id=2022, name="Before")

    with pytest.raises(TransportError):
        await _repository(transport).read(league)

    assert league.name == "Before"


@pytest.mark.anyio
async def test_read_without_matching_entry_leaves_instance_intact():
    transport = RecordingTransport({"teams": [{"id": 1, "name": "Other"}]})
    repository = _repository(transport)
    team = repository.mapper.build_from_local(
        Team, {"id": 4, "name": "Mine"}, {"league_id": 1, "season_id": 2022}
    )

    with pytest.raises(InvalidStateError):
        await repository.read(team)

    assert team.id == 4
    assert team.name == "Mine"
    assert repository.mapper.registry.lookup(Team, team) is team
    assert len(transport.calls) == 1
