"""Helpers for reading ESPN per-period stat lines."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pyffl.constants import STAT_SOURCE_ACTUAL, STAT_SOURCE_PROJECTED


def find_stat_line(stats: Any, scoring_period_id: Optional[int], source: int) -> Optional[Mapping[str, Any]]:
    """Return the stat line for ``scoring_period_id`` from the given source, if any."""

    if scoring_period_id is None:
        return None
    for line in stats or []:
        if not isinstance(line, Mapping):
            continue
        if line.get("scoringPeriodId") == scoring_period_id and line.get("statSourceId") == source:
            return line
    return None


def actual_points(stats: Any, entity: Any) -> Optional[float]:
    line = find_stat_line(stats, getattr(entity, "scoring_period_id", None), STAT_SOURCE_ACTUAL)
    return line.get("appliedTotal") if line else None


def projected_points(stats: Any, entity: Any) -> Optional[float]:
    line = find_stat_line(stats, getattr(entity, "scoring_period_id", None), STAT_SOURCE_PROJECTED)
    return line.get("appliedTotal") if line else None


def points_breakdown(stats: Any, entity: Any) -> Optional[Dict[str, float]]:
    """Fantasy points per ESPN stat id for the entity's scoring period."""

    line = find_stat_line(stats, getattr(entity, "scoring_period_id", None), STAT_SOURCE_ACTUAL)
    if not line:
        return None
    applied = line.get("appliedStats") or {}
    return {str(stat_id): points for stat_id, points in applied.items()}
