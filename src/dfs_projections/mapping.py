"""Mapping of sportsbook market identifiers onto canonical stat categories."""
from __future__ import annotations

from typing import Optional

from . import config


def normalize_market(market: object) -> Optional[str]:
    """Return the stat category code for ``market`` or ``None`` when unrecognised.

    Lookup is an exact match against :data:`config.MARKET_STATS`; unknown,
    empty and non-string markets are not errors.
    """
    if not isinstance(market, str):
        return None
    return config.MARKET_STATS.get(market)
