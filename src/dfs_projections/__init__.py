"""Fantasy basketball projections built from sportsbook prop lines."""

from .engine import aggregate, project, rank, score
from .exceptions import MalformedInput, SourceUnavailable
from .mapping import normalize_market
from .pipeline import build_projection_report, projections_to_dataframe
from .schemas import PlayerGameProjection, RawPropLine
from .settings import get_settings

__all__ = [
    "aggregate",
    "project",
    "rank",
    "score",
    "normalize_market",
    "build_projection_report",
    "projections_to_dataframe",
    "PlayerGameProjection",
    "RawPropLine",
    "MalformedInput",
    "SourceUnavailable",
    "get_settings",
]
