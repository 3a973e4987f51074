"""Tests for prop line and projection schemas."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from dfs_projections.schemas import PlayerGameProjection, RawPropLine


def _line_payload(**overrides: object) -> dict[str, object]:
    base: dict[str, object] = {
        "description": " Nikola Jokic ",
        "game_id": " evt-1 ",
        "home_team": " Denver Nuggets ",
        "away_team": " Phoenix Suns ",
        "bookmaker": " FanDuel ",
        "market": " player_assists ",
        "point": "9.5",
        "label": " Over ",
    }
    base.update(overrides)
    return base


def _projection_payload(**overrides: object) -> dict[str, object]:
    base: dict[str, object] = {
        "description": "Nikola Jokic",
        "game_id": "evt-1",
        "stats": {"PTS": 26.5, "TRB": 12.5, "AST": 9.5},
        "fantasy_points": 58.375,
        "available_props": 3,
        "projection_confidence": 3 / 7 * 100,
    }
    base.update(overrides)
    return base


def test_raw_prop_line_casts_and_trims() -> None:
    line = RawPropLine(**_line_payload())
    assert line.description == "Nikola Jokic"
    assert line.game_id == "evt-1"
    assert line.market == "player_assists"
    assert line.label == "Over"
    assert line.bookmaker == "FanDuel"
    assert line.point == pytest.approx(9.5)


@pytest.mark.parametrize(("raw", "expected"), [(401585, "401585"), (7.0, "7"), ("12", "12")])
def test_raw_prop_line_coerces_game_id(raw: object, expected: str) -> None:
    assert RawPropLine(**_line_payload(game_id=raw)).game_id == expected


@pytest.mark.parametrize("blank", [None, "", "  ", math.nan])
def test_raw_prop_line_blank_point_is_none(blank: object) -> None:
    assert RawPropLine(**_line_payload(point=blank)).point is None


def test_raw_prop_line_optional_context_fields() -> None:
    line = RawPropLine(**_line_payload(home_team=None, away_team=None, bookmaker=None))
    assert line.home_team is None
    assert line.bookmaker is None


def test_raw_prop_line_coerces_numeric_context_fields() -> None:
    line = RawPropLine(**_line_payload(home_team=1610612743, away_team=1610612756.0, bookmaker=math.nan))
    assert line.home_team == "1610612743"
    assert line.away_team == "1610612756"
    assert line.bookmaker is None


@pytest.mark.parametrize("blank", [None, "", "  ", math.nan])
def test_raw_prop_line_blank_label_is_none(blank: object) -> None:
    assert RawPropLine(**_line_payload(label=blank)).label is None


def test_raw_prop_line_requires_player_name() -> None:
    payload = _line_payload()
    del payload["description"]
    with pytest.raises(ValidationError):
        RawPropLine(**payload)


def test_raw_prop_line_rejects_non_numeric_point() -> None:
    with pytest.raises(ValidationError):
        RawPropLine(**_line_payload(point="nine"))


def test_projection_is_frozen() -> None:
    projection = PlayerGameProjection(**_projection_payload())
    with pytest.raises(ValidationError):
        projection.fantasy_points = 0.0  # type: ignore[misc]


def test_projection_rejects_out_of_range_counts() -> None:
    with pytest.raises(ValidationError):
        PlayerGameProjection(**_projection_payload(available_props=8))
    with pytest.raises(ValidationError):
        PlayerGameProjection(**_projection_payload(projection_confidence=101.0))
