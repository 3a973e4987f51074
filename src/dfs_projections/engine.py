"""Core aggregation and scoring logic for fantasy projections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from . import config
from .logging_utils import configure_logging
from .mapping import normalize_market
from .schemas import PlayerGameProjection, RawPropLine
from .settings import get_settings

LOGGER = configure_logging(__name__)


@dataclass
class PlayerGameEntry:
    """Stats collected so far for one (player, game) pair."""

    description: str
    game_id: str
    home_team: Optional[str] = None
    away_team: Optional[str] = None
    bookmaker: Optional[str] = None
    stats: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_row(cls, row: RawPropLine) -> "PlayerGameEntry":
        return cls(
            description=row.description,
            game_id=row.game_id,
            home_team=row.home_team,
            away_team=row.away_team,
            bookmaker=row.bookmaker,
        )


def filter_over(rows: Iterable[RawPropLine], label: Optional[str] = None) -> List[RawPropLine]:
    """Keep only the rows whose direction label equals ``label`` (default ``"Over"``)."""

    wanted = label if label is not None else get_settings().OVER_LABEL
    kept = [row for row in rows if row.label == wanted]
    LOGGER.debug("Kept %d rows labelled %r", len(kept), wanted)
    return kept


def aggregate(rows: Iterable[RawPropLine]) -> List[PlayerGameEntry]:
    """Group prop lines into one entry per (player, game), in first-seen order.

    Rows are expected to be filtered to a single direction already. The first
    row seen for a pair supplies the team and bookmaker fields; stat values
    are overwritten by every later row for the same category.
    """

    entries: Dict[tuple[str, str], PlayerGameEntry] = {}
    for row in rows:
        key = (row.description, row.game_id)
        entry = entries.get(key)
        if entry is None:
            entry = PlayerGameEntry.from_row(row)
            entries[key] = entry

        category = normalize_market(row.market)
        if category is None:
            LOGGER.debug("Ignoring unrecognised market %r for %s", row.market, row.description)
            continue
        entry.stats[category] = row.point if row.point is not None else 0.0
    return list(entries.values())


def double_digit_count(stats: Mapping[str, float]) -> int:
    """Number of bonus-eligible categories at or above the double-digit threshold."""

    return sum(
        1
        for category in config.DOUBLE_DIGIT_STATS
        if stats.get(category, 0.0) >= config.DOUBLE_DIGIT_THRESHOLD
    )


def bonus_points(count: int) -> float:
    """Return the cumulative double-double/triple-double bonus for ``count``."""

    bonus = 0.0
    if count >= 2:
        bonus += config.DOUBLE_DOUBLE_BONUS
    if count >= 3:
        bonus += config.TRIPLE_DOUBLE_BONUS
    return bonus


def fantasy_points(stats: Mapping[str, float]) -> float:
    """Weighted stat total plus milestone bonuses; missing categories count as zero."""

    total = 0.0
    for category, multiplier in config.SCORING.items():
        total += stats.get(category, 0.0) * multiplier
    return total + bonus_points(double_digit_count(stats))


def score(entry: PlayerGameEntry) -> PlayerGameProjection:
    """Build the scored projection for a single aggregated entry."""

    available_props = len(entry.stats)
    return PlayerGameProjection(
        description=entry.description,
        game_id=entry.game_id,
        home_team=entry.home_team,
        away_team=entry.away_team,
        bookmaker=entry.bookmaker,
        stats=dict(entry.stats),
        fantasy_points=fantasy_points(entry.stats),
        available_props=available_props,
        projection_confidence=available_props / len(config.STAT_CATEGORIES) * 100,
    )


def rank(projections: Iterable[PlayerGameProjection]) -> List[PlayerGameProjection]:
    """Order projections by fantasy points, highest first; ties keep input order."""

    return sorted(projections, key=lambda projection: projection.fantasy_points, reverse=True)


def project(rows: Iterable[RawPropLine], label: Optional[str] = None) -> List[PlayerGameProjection]:
    """Turn raw prop lines into ranked fantasy projections.

    Only lines labelled ``"Over"`` (or ``label``) participate. An empty input
    yields an empty list.
    """

    rows = list(rows)
    over_rows = filter_over(rows, label=label)
    entries = aggregate(over_rows)
    ranked = rank(score(entry) for entry in entries)
    LOGGER.info(
        "Projected %d player-games from %d of %d prop lines",
        len(ranked),
        len(over_rows),
        len(rows),
    )
    return ranked
