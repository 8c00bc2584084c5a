"""Static lookup tables for ESPN numeric codes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class NFLTeam:
    id: int
    name: str
    abbreviation: str


NFL_TEAMS: Mapping[int, NFLTeam] = {
    team.id: team
    for team in (
        NFLTeam(0, "Free Agent", "FA"),
        NFLTeam(1, "Atlanta Falcons", "ATL"),
        NFLTeam(2, "Buffalo Bills", "BUF"),
        NFLTeam(3, "Chicago Bears", "CHI"),
        NFLTeam(4, "Cincinnati Bengals", "CIN"),
        NFLTeam(5, "Cleveland Browns", "CLE"),
        NFLTeam(6, "Dallas Cowboys", "DAL"),
        NFLTeam(7, "Denver Broncos", "DEN"),
        NFLTeam(8, "Detroit Lions", "DET"),
        NFLTeam(9, "Green Bay Packers", "GB"),
        NFLTeam(10, "Tennessee Titans", "TEN"),
        NFLTeam(11, "Indianapolis Colts", "IND"),
        NFLTeam(12, "Kansas City Chiefs", "KC"),
        NFLTeam(13, "Las Vegas Raiders", "LV"),
        NFLTeam(14, "Los Angeles Rams", "LAR"),
        NFLTeam(15, "Miami Dolphins", "MIA"),
        NFLTeam(16, "Minnesota Vikings", "MIN"),
        NFLTeam(17, "New England Patriots", "NE"),
        NFLTeam(18, "New Orleans Saints", "NO"),
        NFLTeam(19, "New York Giants", "NYG"),
        NFLTeam(20, "New York Jets", "NYJ"),
        NFLTeam(21, "Philadelphia Eagles", "PHI"),
        NFLTeam(22, "Arizona Cardinals", "ARI"),
        NFLTeam(23, "Pittsburgh Steelers", "PIT"),
        NFLTeam(24, "Los Angeles Chargers", "LAC"),
        NFLTeam(25, "San Francisco 49ers", "SF"),
        NFLTeam(26, "Seattle Seahawks", "SEA"),
        NFLTeam(27, "Tampa Bay Buccaneers", "TB"),
        NFLTeam(28, "Washington Commanders", "WSH"),
        NFLTeam(29, "Carolina Panthers", "CAR"),
        NFLTeam(30, "Jacksonville Jaguars", "JAX"),
        NFLTeam(33, "Baltimore Ravens", "BAL"),
        NFLTeam(34, "Houston Texans", "HOU"),
    )
}

NFL_TEAM_ID_TO_NAME: Mapping[int, str] = {team_id: team.name for team_id, team in NFL_TEAMS.items()}

NFL_TEAM_ID_TO_ABBREVIATION: Mapping[int, str] = {
    team_id: team.abbreviation for team_id, team in NFL_TEAMS.items()
}

SLOT_CATEGORY_ID_TO_POSITION: Mapping[int, str] = {
    0: "QB",
    1: "TQB",
    2: "RB",
    3: "RB/WR",
    4: "WR",
    5: "WR/TE",
    6: "TE",
    7: "OP",
    8: "DT",
    9: "DE",
    10: "LB",
    11: "DL",
    12: "CB",
    13: "S",
    14: "DB",
    15: "DP",
    16: "D/ST",
    17: "K",
    18: "P",
    19: "HC",
    20: "Bench",
    21: "IR",
    22: "Unknown",
    23: "RB/WR/TE",
    24: "ER",
    25: "Rookie",
}

GAME_STATUS_LABELS: Mapping[int, str] = {
    1: "not started",
    2: "in progress",
    3: "finished",
}

UNKNOWN_GAME_STATUS = "unknown"

# ESPN stat split sources: 0 is actual scoring, 1 is the projection.
STAT_SOURCE_ACTUAL = 0
STAT_SOURCE_PROJECTED = 1


def _coerce_code(value: object) -> Optional[int]:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def nfl_team(team_id: object) -> Optional[NFLTeam]:
    code = _coerce_code(team_id)
    return NFL_TEAMS.get(code) if code is not None else None


def nfl_team_name(team_id: object) -> Optional[str]:
    team = nfl_team(team_id)
    return team.name if team else None


def nfl_team_abbreviation(team_id: object) -> Optional[str]:
    team = nfl_team(team_id)
    return team.abbreviation if team else None


def slot_position(slot_id: object) -> Optional[str]:
    code = _coerce_code(slot_id)
    return SLOT_CATEGORY_ID_TO_POSITION.get(code) if code is not None else None


def game_status_label(code: object) -> str:
    status = _coerce_code(code)
    if status is None:
        return UNKNOWN_GAME_STATUS
    return GAME_STATUS_LABELS.get(status, UNKNOWN_GAME_STATUS)


__all__ = [
    "NFLTeam",
    "NFL_TEAMS",
    "NFL_TEAM_ID_TO_NAME",
    "NFL_TEAM_ID_TO_ABBREVIATION",
    "SLOT_CATEGORY_ID_TO_POSITION",
    "GAME_STATUS_LABELS",
    "UNKNOWN_GAME_STATUS",
    "STAT_SOURCE_ACTUAL",
    "STAT_SOURCE_PROJECTED",
    "nfl_team",
    "nfl_team_name",
    "nfl_team_abbreviation",
    "slot_position",
    "game_status_label",
]
