"""Async client for ESPN fantasy football leagues."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, TypeVar

from pyffl.exceptions import InvalidStateError
from pyffl.mapping import EntityMapper, EntityRegistry, EntityRepository, get_path
from pyffl.models import Boxscore, DraftPlayer, Entity, FreeAgentPlayer, League, NFLGame, Team
from pyffl.settings import Settings
from pyffl.transport import HttpTransport, RequestConfig, Transport


logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)

NFL_GAMES_ROUTE = "apis/fantasy/v2/games/ffl/games"

_DATE_PATTERN = re.compile(r"^\d{8}$")


def _league_route(season_id: int, league_id: Any) -> str:
    return f"{season_id}/segments/0/leagues/{league_id}"


class Client:
    """Fetches league data and maps it onto entities.

    Each client owns its own entity registry, so cached instances never leak
    between sessions. Top-level fetches propagate ``TransportError`` unchanged.
    """

    def __init__(
        self,
        league_id: Optional[int] = None,
        espn_s2: Optional[str] = None,
        swid: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        transport: Optional[Transport] = None,
    ):
        self.settings = settings or Settings.from_env()
        self.league_id = league_id if league_id is not None else self.settings.league_id
        self.espn_s2: Optional[str] = None
        self.swid: Optional[str] = None
        self.set_cookies(
            espn_s2=espn_s2 or self.settings.espn_s2,
            swid=swid or self.settings.swid,
        )

        self._owns_transport = transport is None
        self.transport: Transport = transport or HttpTransport(
            self.settings.fantasy_base_url,
            timeout=self.settings.timeout,
        )
        self.registry = EntityRegistry()
        self.mapper = EntityMapper(self.registry)
        self.repository = EntityRepository(self.transport, self.mapper)

    def set_cookies(self, espn_s2: Optional[str], swid: Optional[str]) -> None:
        """Store the cookies needed for private leagues; both must be provided."""

        if espn_s2 and swid:
            self.espn_s2 = espn_s2
            self.swid = swid

    def _request_config(self, base_url: Optional[str] = None) -> RequestConfig:
        headers: Dict[str, str] = {}
        if self.espn_s2 and self.swid:
            headers["Cookie"] = f"espn_s2={self.espn_s2}; SWID={self.swid};"
        return RequestConfig(headers=headers, base_url=base_url)

    def _context(self, season_id: int, **extra: Any) -> Dict[str, Any]:
        return {"league_id": self.league_id, "season_id": season_id, **extra}

    async def _fetch_league_view(self, season_id: int, params: Mapping[str, Any]) -> Any:
        if self.league_id is None:
            raise InvalidStateError(
                "Client: league-scoped fetch needs a league id; pass one or set PYFFL_LEAGUE_ID"
            )
        route = _league_route(season_id, self.league_id)
        return await self.transport.fetch_json(route, params, self._request_config())

    async def get_league_info(self, season_id: int) -> League:
        data = await self._fetch_league_view(season_id, {"view": "mSettings"})
        league = self.mapper.build_from_origin(
            League, get_path(data, "settings"), {"league_id": self.league_id, "season_id": season_id}
        )
        logger.info("Loaded league %s settings for %s", self.league_id, season_id)
        return league

    async def get_teams_at_week(self, season_id: int, scoring_period_id: int) -> List[Team]:
        data = await self._fetch_league_view(
            season_id,
            {"scoringPeriodId": scoring_period_id, "view": ["mRoster", "mTeam"]},
        )
        context = self._context(season_id, scoring_period_id=scoring_period_id)
        teams = [self.mapper.build_from_origin(Team, team, context) for team in get_path(data, "teams") or []]
        logger.info("Loaded %s teams for league %s week %s", len(teams), self.league_id, scoring_period_id)
        return teams

    async def get_boxscore_for_week(
        self,
        season_id: int,
        matchup_period_id: int,
        scoring_period_id: int,
    ) -> List[Boxscore]:
        """Return every boxscore of a matchup period.

        ESPN needs both ids and they must correspond: the schedule is fetched for
        ``scoring_period_id`` and filtered down to ``matchup_period_id``.
        """

        data = await self._fetch_league_view(
            season_id,
            {"view": ["mMatchup", "mMatchupScore"], "scoringPeriodId": scoring_period_id},
        )
        context = self._context(season_id, scoring_period_id=scoring_period_id)
        boxscores = [
            self.mapper.build_from_origin(Boxscore, matchup, context)
            for matchup in get_path(data, "schedule") or []
            if isinstance(matchup, Mapping) and matchup.get("matchupPeriodId") == matchup_period_id
        ]
        logger.info(
            "Loaded %s boxscores for league %s matchup period %s",
            len(boxscores),
            self.league_id,
            matchup_period_id,
        )
        return boxscores

    async def get_free_agents(self, season_id: int, scoring_period_id: int) -> List[FreeAgentPlayer]:
        """Return free agents for a week; period ``0`` is the preseason."""

        data = await self._fetch_league_view(
            season_id,
            {"scoringPeriodId": scoring_period_id, "view": "kona_player_info"},
        )
        context = self._context(season_id, scoring_period_id=scoring_period_id)
        players = [
            self.mapper.build_from_origin(FreeAgentPlayer, player, context)
            for player in get_path(data, "players") or []
        ]
        logger.info("Loaded %s free agents for league %s week %s", len(players), self.league_id, scoring_period_id)
        return players

    async def get_draft_info(self, season_id: int) -> List[DraftPlayer]:
        data = await self._fetch_league_view(season_id, {"view": "mDraftDetail"})
        context = self._context(season_id)
        picks = [
            self.mapper.build_from_origin(DraftPlayer, pick, context)
            for pick in get_path(data, "draftDetail.picks") or []
        ]
        logger.info("Loaded %s draft picks for league %s season %s", len(picks), self.league_id, season_id)
        return picks

    async def get_nfl_games_for_period(self, start_date: str, end_date: str) -> List[NFLGame]:
        """Return NFL games between two dates given as ``YYYYMMDD``."""

        for label, value in (("start_date", start_date), ("end_date", end_date)):
            if not _DATE_PATTERN.match(str(value)):
                raise ValueError(f"{label} must look like 'YYYYMMDD', got {value!r}")

        params = {"dates": f"{start_date}-{end_date}", "pbpOnly": "true"}
        data = await self.transport.fetch_json(
            NFL_GAMES_ROUTE,
            params,
            self._request_config(base_url=self.settings.site_base_url),
        )
        games = [self.mapper.build_from_origin(NFLGame, game) for game in get_path(data, "events") or []]
        logger.info("Loaded %s NFL games for %s-%s", len(games), start_date, end_date)
        return games

    async def read(
        self,
        instance: E,
        route: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        *,
        force_reload: bool = True,
    ) -> E:
        return await self.repository.read(
            instance,
            route,
            params,
            force_reload=force_reload,
            config=self._request_config(),
        )

    def clear_cache(self) -> None:
        self.registry.clear()

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self.transport, HttpTransport):
            await self.transport.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
