"""Utilities for turning already-parsed tabular data into prop line models."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Union

import pandas as pd
from pydantic import ValidationError

from .exceptions import MalformedInput, SourceUnavailable
from .logging_utils import configure_logging
from .schemas import RawPropLine

LOGGER = configure_logging(__name__)

REQUIRED_COLUMNS: tuple[str, ...] = (
    "description",
    "game_id",
    "home_team",
    "away_team",
    "bookmaker",
    "market",
    "point",
    "label",
)

PropLineSource = Union[pd.DataFrame, Iterable[Mapping[str, Any]]]


def load_prop_lines_from_records(records: Iterable[Mapping[str, Any]]) -> List[RawPropLine]:
    """Validate an iterable of dictionaries into :class:`RawPropLine` models."""

    lines: List[RawPropLine] = []
    for index, record in enumerate(records):
        try:
            payload = dict(record)
        except (TypeError, ValueError) as exc:
            LOGGER.error("Prop line record %d is not a mapping: %r", index, record)
            raise MalformedInput(f"Prop line record {index} is not a mapping: {record!r}") from exc
        try:
            lines.append(RawPropLine.model_validate(payload))
        except ValidationError as exc:
            LOGGER.error("Prop line record %d failed validation: %s", index, exc)
            raise MalformedInput(f"Prop line record {index} is malformed: {exc}") from exc
    return lines


def load_prop_lines_from_dataframe(df: pd.DataFrame) -> List[RawPropLine]:
    """Convert a DataFrame into a list of :class:`RawPropLine` models."""

    missing = set(REQUIRED_COLUMNS).difference(df.columns)
    if missing:
        raise MalformedInput(f"Prop line DataFrame is missing columns: {', '.join(sorted(missing))}")
    frame = df[list(REQUIRED_COLUMNS)].astype(object)
    frame = frame.where(pd.notna(frame), None)
    return load_prop_lines_from_records(frame.to_dict(orient="records"))


def load_prop_lines(source: PropLineSource | None) -> List[RawPropLine]:
    """Load prop lines from a DataFrame or an iterable of record mappings."""

    if source is None:
        raise SourceUnavailable("No prop line source was provided.")
    if isinstance(source, pd.DataFrame):
        LOGGER.debug("Loading %d prop lines from DataFrame", len(source))
        return load_prop_lines_from_dataframe(source)
    return load_prop_lines_from_records(source)
