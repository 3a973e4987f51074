"""Static scoring configuration for the DFS projection engine."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

# Canonical stat category codes, in display order.
STAT_CATEGORIES: Final[tuple[str, ...]] = ("PTS", "TRB", "AST", "3P", "STL", "BLK", "TOV")

# Player prop market identifiers that feed a stat category.
MARKET_STATS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "player_points": "PTS",
        "player_rebounds": "TRB",
        "player_assists": "AST",
        "player_threes": "3P",
        "player_steals": "STL",
        "player_blocks": "BLK",
        "player_turnovers": "TOV",
    }
)

# Fantasy points awarded per unit of each stat category.
SCORING: Final[Mapping[str, float]] = MappingProxyType(
    {
        "PTS": 1.0,
        "3P": 0.5,
        "TRB": 1.25,
        "AST": 1.5,
        "STL": 2.0,
        "BLK": 2.0,
        "TOV": -0.5,
    }
)

# Categories that count toward double-double and triple-double bonuses.
DOUBLE_DIGIT_STATS: Final[tuple[str, ...]] = ("PTS", "TRB", "AST", "STL", "BLK")
# Minimum value for a category to count as double digits.
DOUBLE_DIGIT_THRESHOLD: Final[float] = 10.0
# Bonus for two or more double-digit categories.
DOUBLE_DOUBLE_BONUS: Final[float] = 1.5
# Additional bonus for three or more double-digit categories.
TRIPLE_DOUBLE_BONUS: Final[float] = 3.0

# Direction label of the prop lines used to build projections.
OVER_LABEL: Final[str] = "Over"

# Number of ranked players shown in summaries.
DEFAULT_TOP_N: Final[int] = 50
