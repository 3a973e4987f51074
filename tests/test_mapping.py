"""Tests for market identifier normalisation."""

from __future__ import annotations

import pytest

from dfs_projections import config
from dfs_projections.mapping import normalize_market


@pytest.mark.parametrize(
    ("market", "expected"),
    [
        ("player_points", "PTS"),
        ("player_rebounds", "TRB"),
        ("player_assists", "AST"),
        ("player_threes", "3P"),
        ("player_steals", "STL"),
        ("player_blocks", "BLK"),
        ("player_turnovers", "TOV"),
    ],
)
def test_known_markets_map_to_categories(market: str, expected: str) -> None:
    assert normalize_market(market) == expected


@pytest.mark.parametrize("market", ["player_fouls", "", "PLAYER_POINTS", " player_points", None, 12])
def test_unknown_markets_return_none(market: object) -> None:
    assert normalize_market(market) is None


def test_tables_cover_the_same_categories() -> None:
    assert set(config.MARKET_STATS.values()) == set(config.STAT_CATEGORIES)
    assert set(config.SCORING) == set(config.STAT_CATEGORIES)
    assert set(config.DOUBLE_DIGIT_STATS) < set(config.STAT_CATEGORIES)


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        config.MARKET_STATS["player_fouls"] = "PF"  # type: ignore[index]
