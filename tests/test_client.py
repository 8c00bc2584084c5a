import httpx
import pytest

from pyffl import Client, Settings
from pyffl.exceptions import InvalidStateError, TransportError
from pyffl.models import Boxscore, DraftPlayer, FreeAgentPlayer, League, NFLGame, Team
from pyffl.transport import HttpTransport


LEAGUE_ID = 336358
SETTINGS = Settings(
    fantasy_base_url="https://fantasy.example.test/seasons/",
    site_base_url="https://site.example.test/",
)


def _client(handler, **kwargs) -> Client:
    transport = HttpTransport(
        SETTINGS.fantasy_base_url,
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    return Client(LEAGUE_ID, settings=SETTINGS, transport=transport, **kwargs)


def _league_payload() -> dict:
    return {
        "settings": {"name": "Office League", "size": 10},
        "teams": [
            {
                "id": 1,
                "abbrev": "ONE",
                "roster": {"entries": [{"playerPoolEntry": {"id": 10, "player": {"fullName": "A"}}}]},
            },
            {"id": 2, "abbrev": "TWO"},
        ],
        "schedule": [
            {"id": 1, "matchupPeriodId": 1, "home": {"teamId": 1}, "away": {"teamId": 2}},
            {"id": 2, "matchupPeriodId": 1, "home": {"teamId": 3}, "away": {"teamId": 4}},
            {"id": 3, "matchupPeriodId": 2, "home": {"teamId": 1}, "away": {"teamId": 3}},
        ],
        "players": [{"id": 99, "status": "FREEAGENT", "player": {"fullName": "Waiver Guy"}}],
        "draftDetail": {"picks": [{"playerId": 5, "teamId": 1, "overallPickNumber": 1}]},
    }


class Recorder:
    def __init__(self, payload: dict):
        self.payload = payload
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, json=self.payload)


@pytest.mark.anyio
async def test_get_league_info():
    recorder = Recorder(_league_payload())
    client = _client(recorder)

    league = await client.get_league_info(season_id=2022)

    assert isinstance(league, League)
    assert league.name == "Office League"
    assert (league.league_id, league.season_id) == (LEAGUE_ID, 2022)
    request = recorder.requests[0]
    assert request.url.path == f"/seasons/2022/segments/0/leagues/{LEAGUE_ID}"
    assert request.url.params["view"] == "mSettings"


@pytest.mark.anyio
async def test_get_teams_at_week_passes_context_to_rosters():
    recorder = Recorder(_league_payload())
    client = _client(recorder)

    teams = await client.get_teams_at_week(season_id=2022, scoring_period_id=3)

    assert [team.abbreviation for team in teams] == ["ONE", "TWO"]
    assert all(isinstance(team, Team) for team in teams)
    player = teams[0].roster[0]
    assert (player.id, player.season_id, player.scoring_period_id) == (10, 2022, 3)
    params = recorder.requests[0].url.params
    assert params.get_list("view") == ["mRoster", "mTeam"]
    assert params["scoringPeriodId"] == "3"


@pytest.mark.anyio
async def test_get_boxscore_for_week_filters_matchup_period():
    client = _client(Recorder(_league_payload()))

    boxscores = await client.get_boxscore_for_week(season_id=2022, matchup_period_id=1, scoring_period_id=1)

    assert [boxscore.id for boxscore in boxscores] == [1, 2]
    assert all(isinstance(boxscore, Boxscore) for boxscore in boxscores)
    assert boxscores[0].league_id == LEAGUE_ID


@pytest.mark.anyio
async def test_get_free_agents():
    client = _client(Recorder(_league_payload()))

    players = await client.get_free_agents(season_id=2022, scoring_period_id=1)

    [free_agent] = players
    assert isinstance(free_agent, FreeAgentPlayer)
    assert free_agent.player.full_name == "Waiver Guy"


@pytest.mark.anyio
async def test_get_draft_info():
    client = _client(Recorder(_league_payload()))

    [pick] = await client.get_draft_info(season_id=2022)

    assert isinstance(pick, DraftPlayer)
    assert (pick.id, pick.team_id, pick.overall_pick_number) == (5, 1, 1)


@pytest.mark.anyio
async def test_get_nfl_games_uses_site_api():
    recorder = Recorder({"events": [{"gameId": 1, "status": 2, "homeProTeamId": 1}]})
    client = _client(recorder)

    [game] = await client.get_nfl_games_for_period(start_date="20181003", end_date="20181008")

    assert isinstance(game, NFLGame)
    assert game.game_status == "in progress"
    request = recorder.requests[0]
    assert request.url.host == "site.example.test"
    assert request.url.params["dates"] == "20181003-20181008"
    assert request.url.params["pbpOnly"] == "true"


@pytest.mark.anyio
async def test_get_nfl_games_rejects_bad_dates():
    client = _client(Recorder({}))
    with pytest.raises(ValueError):
        await client.get_nfl_games_for_period(start_date="2018-10-03", end_date="20181008")


@pytest.mark.anyio
async def test_cookies_are_sent_when_both_are_set():
    recorder = Recorder(_league_payload())
    client = _client(recorder, espn_s2="s2value", swid="{SWID}")

    await client.get_league_info(season_id=2022)

    assert recorder.requests[0].headers["Cookie"] == "espn_s2=s2value; SWID={SWID};"


@pytest.mark.anyio
async def test_partial_cookies_are_ignored():
    recorder = Recorder(_league_payload())
    client = _client(recorder, espn_s2="s2value")

    await client.get_league_info(season_id=2022)

    assert client.espn_s2 is None
    assert "Cookie" not in recorder.requests[0].headers


@pytest.mark.anyio
async def test_top_level_fetch_propagates_transport_errors():
    client = _client(lambda request: httpx.Response(500))
    with pytest.raises(TransportError):
        await client.get_teams_at_week(season_id=2022, scoring_period_id=1)


@pytest.mark.anyio
async def test_read_uses_session_cache():
    recorder = Recorder(_league_payload())
    client = _client(recorder)
    league = await client.get_league_info(season_id=2022)

    cached = await client.read(League(league_id=LEAGUE_ID, season_id=2022), force_reload=False)
    assert cached is league
    assert len(recorder.requests) == 1

    refreshed = await client.read(league)
    assert refreshed is league
    assert len(recorder.requests) == 2

    client.clear_cache()
    assert client.registry.lookup(League, league) is None


@pytest.mark.anyio
async def test_clients_do_not_share_caches():
    first = _client(Recorder(_league_payload()))
    second = _client(Recorder(_league_payload()))

    league = await first.get_league_info(season_id=2022)

    assert first.registry.lookup(League, league) is league
    assert second.registry.lookup(League, league) is None


@pytest.mark.anyio
async def test_league_fetch_without_league_id_skips_network():
    recorder = Recorder(_league_payload())
    transport = HttpTransport(
        SETTINGS.fantasy_base_url,
        client=httpx.AsyncClient(transport=httpx.MockTransport(recorder)),
    )
    client = Client(settings=SETTINGS, transport=transport)

    with pytest.raises(InvalidStateError):
        await client.get_league_info(season_id=2022)
    with pytest.raises(InvalidStateError):
        await client.get_draft_info(season_id=2022)

    assert recorder.requests == []
