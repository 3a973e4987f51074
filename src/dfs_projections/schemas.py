"""Pydantic schemas describing prop line input and projection output."""

from __future__ import annotations

import math
import numbers
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return isinstance(value, float) and math.isnan(value)


def _number_to_str(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return str(int(value))
    if isinstance(value, numbers.Real):
        return str(value)
    return value


class RawPropLine(BaseModel):
    """A single sportsbook prop line for one player market in one game."""

    description: str = Field(..., description="Player display name; part of the player-game identity.")
    game_id: str = Field(..., description="Identifier of the game the line belongs to.")
    home_team: Optional[str] = Field(None, description="Home team name.")
    away_team: Optional[str] = Field(None, description="Away team name.")
    bookmaker: Optional[str] = Field(None, description="Bookmaker posting the line.")
    market: str = Field(..., description="Prop market identifier, e.g. player_points.")
    point: Optional[float] = Field(None, description="Posted line value for the market.")
    label: Optional[str] = Field(None, description="Direction of the line, e.g. Over or Under.")

    @field_validator("game_id", mode="before")
    @classmethod
    def _coerce_game_id(cls, value: Any) -> Any:
        """Accept numeric game ids by converting them to strings."""

        return _number_to_str(value)

    @field_validator("home_team", "away_team", "bookmaker", "label", mode="before")
    @classmethod
    def _coerce_context(cls, value: Any) -> Any:
        """Numeric identifiers become strings; blank and NaN cells become ``None``."""

        if _is_blank(value):
            return None
        return _number_to_str(value)

    @field_validator("point", mode="before")
    @classmethod
    def _blank_point_to_none(cls, value: Any) -> Any:
        return None if _is_blank(value) else value

    @field_validator("description", "game_id", "market")
    @classmethod
    def _strip_strings(cls, value: str) -> str:
        """Trim whitespace from string-based fields."""

        return value.strip()

    @field_validator("home_team", "away_team", "bookmaker", "label")
    @classmethod
    def _strip_optional(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None


class PlayerGameProjection(BaseModel):
    """Scored fantasy projection for one player in one game."""

    model_config = ConfigDict(frozen=True)

    description: str
    game_id: str
    home_team: Optional[str] = None
    away_team: Optional[str] = None
    bookmaker: Optional[str] = None
    stats: Dict[str, float] = Field(default_factory=dict)
    fantasy_points: float
    available_props: int = Field(..., ge=0, le=7)
    projection_confidence: float = Field(..., ge=0.0, le=100.0)
