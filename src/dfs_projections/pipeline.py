"""High-level orchestration helpers for building projection reports."""

from __future__ import annotations

from typing import Iterable, List, Sequence

import pandas as pd

from . import config
from .data_loader import PropLineSource, load_prop_lines
from .engine import project
from .logging_utils import configure_logging
from .schemas import PlayerGameProjection

LOGGER = configure_logging(__name__)

_INFO_COLUMNS = ["description", "game_id", "home_team", "away_team", "bookmaker", "fantasy_points"]
_TAIL_COLUMNS = ["available_props", "projection_confidence"]
REPORT_COLUMNS: list[str] = [*_INFO_COLUMNS, *config.STAT_CATEGORIES, *_TAIL_COLUMNS]


def projections_to_dataframe(projections: Iterable[PlayerGameProjection]) -> pd.DataFrame:
    """Flatten projections into a tidy DataFrame, one stat column per category.

    Categories with no prop line are left as ``NaN``; row order is preserved.
    """

    records = []
    for projection in projections:
        record = {column: getattr(projection, column) for column in _INFO_COLUMNS}
        for category in config.STAT_CATEGORIES:
            record[category] = projection.stats.get(category, float("nan"))
        for column in _TAIL_COLUMNS:
            record[column] = getattr(projection, column)
        records.append(record)
    if not records:
        return pd.DataFrame(columns=REPORT_COLUMNS)
    return pd.DataFrame(records, columns=REPORT_COLUMNS)


def top_projections(
    projections: Sequence[PlayerGameProjection], n: int = config.DEFAULT_TOP_N
) -> List[PlayerGameProjection]:
    """Return the first ``n`` ranked projections."""

    if n < 0:
        raise ValueError("n must be non-negative")
    return list(projections[:n])


def build_projection_report(source: PropLineSource | None) -> pd.DataFrame:
    """Load prop lines from ``source`` and return the ranked projection report."""

    lines = load_prop_lines(source)
    projections = project(lines)
    report = projections_to_dataframe(projections)
    LOGGER.info("Built projection report for %d player-games from %d prop lines", len(report), len(lines))
    return report
