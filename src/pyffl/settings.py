"""Environment-driven configuration for the ESPN client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional


logger = logging.getLogger(__name__)

_LEAGUE_ID_ENV = "PYFFL_LEAGUE_ID"
_ESPN_S2_ENV = "PYFFL_ESPN_S2"
_SWID_ENV = "PYFFL_SWID"
_FANTASY_BASE_URL_ENV = "PYFFL_FANTASY_BASE_URL"
_SITE_BASE_URL_ENV = "PYFFL_SITE_BASE_URL"
_TIMEOUT_ENV = "PYFFL_TIMEOUT"

DEFAULT_FANTASY_BASE_URL = "https://lm-api-reads.fantasy.espn.com/apis/v3/games/ffl/seasons/"
DEFAULT_SITE_BASE_URL = "https://site.api.espn.com/"
DEFAULT_TIMEOUT = 10.0


def _env_str(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(name: str) -> Optional[int]:
    raw = _env_str(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; ignoring", name, raw)
        return None


@dataclass(frozen=True)
class Settings:
    league_id: Optional[int] = None
    espn_s2: Optional[str] = None
    swid: Optional[str] = None
    fantasy_base_url: str = DEFAULT_FANTASY_BASE_URL
    site_base_url: str = DEFAULT_SITE_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "Settings":
        """Resolve settings from ``PYFFL_*`` environment variables."""

        return cls(
            league_id=_env_int(_LEAGUE_ID_ENV),
            espn_s2=_env_str(_ESPN_S2_ENV),
            swid=_env_str(_SWID_ENV),
            fantasy_base_url=_env_str(_FANTASY_BASE_URL_ENV) or DEFAULT_FANTASY_BASE_URL,
            site_base_url=_env_str(_SITE_BASE_URL_ENV) or DEFAULT_SITE_BASE_URL,
            timeout=_env_float(_TIMEOUT_ENV, DEFAULT_TIMEOUT, clamp_min=0.1),
        )
