"""Explode the semi-structured list columns into one row per nested record.

TMDB stores cast, crew, keywords, genres, spoken languages and production
companies as JSON arrays of small objects, for example::

    [{"id": 28, "name": "Action"}, {"id": 12, "name": "Adventure"}]

Each cell is parsed as structured data and every record carrying the
expected keys becomes one row associated with its film.
"""

from __future__ import annotations

import ast
import json
from typing import Any

import pandas as pd

ENTITY_KEY_COLUMNS = ("id", "title", "budget", "revenue", "profitability", "profit_loss")

FIELD_NAMES = {
    "cast": "cast_name",
    "keywords": "keyword",
    "genres": "genre",
    "spoken_languages": "language",
    "production_companies": "production_company",
}

DIRECTOR_JOB = "Director"


class MalformedFieldError(ValueError):
    """Raised when a cell is not a list of records."""


def parse_records(value: Any) -> list[dict]:
    """Return the records held in a semi-structured cell.

    Missing or blank cells give an empty list. Strings are read as JSON first
    and as Python literals second, which covers dumps written with single
    quotes. Entries that are not mappings are discarded.
    """

    if isinstance(value, list):
        records = value
    elif value is None:
        return []
    elif not isinstance(value, str) and pd.api.types.is_scalar(value) and pd.isna(value):
        return []
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        try:
            records = json.loads(text)
        except RecursionError as exc:
            raise MalformedFieldError(f"Field value nested too deeply: {text[:60]!r}") from exc
        except json.JSONDecodeError:
            try:
                records = ast.literal_eval(text)
            except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError) as exc:
                raise MalformedFieldError(f"Cannot parse field value: {text[:60]!r}") from exc
    else:
        raise MalformedFieldError(f"Unsupported field value of type {type(value).__name__}")

    if not isinstance(records, list):
        raise MalformedFieldError(f"Expected a list of records, got {type(records).__name__}")
    return [record for record in records if isinstance(record, dict)]


def _key_columns(df: pd.DataFrame) -> list[str]:
    return [column for column in ENTITY_KEY_COLUMNS if column in df.columns]


def _collect(df: pd.DataFrame, column: str, keys: tuple[str, ...]) -> pd.Series:
    """Map every cell to a list of value tuples for ``keys``.

    Records missing any of ``keys`` are skipped; malformed cells yield an empty
    list and are counted in a notice.
    """

    malformed = 0

    def pick(value: Any) -> list[tuple]:
        nonlocal malformed
        try:
            records = parse_records(value)
        except MalformedFieldError:
            malformed += 1
            return []
        return [
            tuple(record[key] for key in keys)
            for record in records
            if all(record.get(key) is not None for key in keys)
        ]

    values = df[column].map(pick)
    if malformed:
        print(f"Skipped {malformed} malformed '{column}' value(s)")
    return values


def explode_names(df: pd.DataFrame, column: str, value_column: str | None = None) -> pd.DataFrame:
    """Return one row per ``name`` found in ``column``, with the film's key columns."""

    value_column = value_column or FIELD_NAMES.get(column, "name")
    names = _collect(df, column, ("name",)).map(lambda picked: [item[0] for item in picked])

    exploded = (
        df[_key_columns(df)]
        .assign(**{value_column: names})
        .explode(value_column)
        .dropna(subset=[value_column])
        .reset_index(drop=True)
    )
    exploded[value_column] = exploded[value_column].astype(str)
    return exploded


def explode_crew(df: pd.DataFrame, column: str = "crew") -> pd.DataFrame:
    """Return one row per crew member with separate ``job`` and ``name`` columns."""

    pairs = _collect(df, column, ("job", "name"))
    exploded = (
        df[_key_columns(df)]
        .assign(_pair=pairs)
        .explode("_pair")
        .dropna(subset=["_pair"])
        .reset_index(drop=True)
    )
    exploded["job"] = exploded["_pair"].map(lambda pair: str(pair[0]))
    exploded["name"] = exploded["_pair"].map(lambda pair: str(pair[1]))
    return exploded.drop(columns="_pair")


def extract_directors(df: pd.DataFrame) -> pd.DataFrame:
    """Return the crew rows whose job is exactly ``Director``."""

    crew = explode_crew(df)
    directors = crew[crew["job"] == DIRECTOR_JOB]
    return directors.rename(columns={"name": "director_name"}).reset_index(drop=True)
