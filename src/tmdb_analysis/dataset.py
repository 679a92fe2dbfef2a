"""Acquire, join and clean the TMDB 5000 credits and movies tables.

The Kaggle release ships two CSV files keyed by the same film identifier,
named ``movie_id`` in the credits table and ``id`` in the movies table. Both
are read from ``data/raw/``; when a file is missing and a download URL is
configured through the environment, it is fetched first.
"""

from __future__ import annotations

import os
from pathlib import Path

import pandas as pd
import requests

BASE_DIR = Path(__file__).resolve().parents[2]
RAW_DIR = BASE_DIR / "data" / "raw"

CREDITS_PATH = RAW_DIR / "tmdb_5000_credits.csv"
MOVIES_PATH = RAW_DIR / "tmdb_5000_movies.csv"
CREDITS_URL_ENV = "TMDB_CREDITS_URL"
MOVIES_URL_ENV = "TMDB_MOVIES_URL"

CREDITS_KEY = "movie_id"
MOVIES_KEY = "id"

IRRELEVANT_COLUMNS = ["homepage", "tagline", "overview", "original_title", "status"]

RUNTIME_CORRECTIONS = {
    "Chiamatemi Francesco - Il Papa della gente": 98,
    "To Be Frank, Sinatra at 100": 81,
}

# Listed in the movies table without a release date; not a real film.
EXCLUDED_TITLES = ("America Is Still the Place",)


def ensure_dataset(path: Path, url_env: str) -> Path:
    """Return ``path``, downloading it from ``$url_env`` when it is missing."""

    if path.exists():
        print(f"Reusing cached file at {path}")
        return path

    url = os.environ.get(url_env)
    if not url:
        raise FileNotFoundError(
            f"Expected dataset file {path}; place it there or set {url_env} to a download URL"
        )

    path.parent.mkdir(parents=True, exist_ok=True)
    print(f"Downloading {path.name} from {url}")
    response = requests.get(url, timeout=60)
    response.raise_for_status()
    path.write_bytes(response.content)
    print(f"Saved {path.name} to {path}")
    return path


def load_credits(csv_path: Path = CREDITS_PATH) -> pd.DataFrame:
    """Load the cast/crew table."""

    return pd.read_csv(csv_path)


def load_movies(csv_path: Path = MOVIES_PATH) -> pd.DataFrame:
    """Load the financial/production table with parsed release dates."""

    df = pd.read_csv(csv_path)
    df["release_date"] = pd.to_datetime(df["release_date"], errors="coerce")
    return df


def normalize_identifier(series: pd.Series) -> pd.Series:
    """Coerce a film identifier column to ``int64``.

    String identifiers such as ``"19995"`` are accepted. Anything that is not
    an integral number (text, blanks, fractions) raises ``ValueError`` rather
    than being dropped from the join.
    """

    try:
        numeric = pd.to_numeric(series, errors="raise")
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Identifier column '{series.name}' is not numeric: {exc}") from exc

    if numeric.isna().any():
        raise ValueError(f"Identifier column '{series.name}' contains missing values")
    if (numeric % 1 != 0).any():
        raise ValueError(f"Identifier column '{series.name}' contains non-integral values")
    return numeric.astype("int64")


def merge_datasets(credits: pd.DataFrame, movies: pd.DataFrame) -> pd.DataFrame:
    """Left-join the credits table into the movies table on the film identifier.

    The result has one ``id`` and one ``title`` column; the movies table's copy
    of the title and the free-text columns unused by the analysis are dropped.
    Duplicate identifiers on either side raise ``pandas.errors.MergeError``.
    """

    left = credits.rename(columns={CREDITS_KEY: MOVIES_KEY}).copy()
    right = movies.copy()
    left[MOVIES_KEY] = normalize_identifier(left[MOVIES_KEY])
    right[MOVIES_KEY] = normalize_identifier(right[MOVIES_KEY])

    merged = left.merge(
        right,
        on=MOVIES_KEY,
        how="left",
        suffixes=("", "_movies"),
        validate="one_to_one",
    )
    duplicates = [column for column in merged.columns if column.endswith("_movies")]
    merged = merged.drop(columns=duplicates + IRRELEVANT_COLUMNS, errors="ignore")
    print(f"Joined {len(credits)} credit rows with {len(movies)} movie rows")
    return merged


def apply_runtime_corrections(
    df: pd.DataFrame, corrections: dict[str, float] = RUNTIME_CORRECTIONS
) -> pd.DataFrame:
    """Return a copy of ``df`` with known-missing runtimes filled in by title."""

    corrected = df.copy()
    for title, runtime in corrections.items():
        mask = corrected["title"] == title
        if not mask.any():
            print(f"Runtime correction skipped: '{title}' not found")
            continue
        corrected.loc[mask, "runtime"] = runtime
    return corrected


def drop_invalid_rows(
    df: pd.DataFrame, excluded_titles: tuple[str, ...] = EXCLUDED_TITLES
) -> pd.DataFrame:
    """Remove excluded titles and rows without a release date."""

    keep = ~df["title"].isin(excluded_titles) & df["release_date"].notna()
    dropped = int((~keep).sum())
    if dropped:
        print(f"Dropped {dropped} invalid row(s)")
    return df.loc[keep].reset_index(drop=True)


def clean_dataset(df: pd.DataFrame) -> pd.DataFrame:
    """Apply the manual corrections, then drop invalid rows."""

    return drop_invalid_rows(apply_runtime_corrections(df))


def load_dataset(
    credits_path: Path = CREDITS_PATH, movies_path: Path = MOVIES_PATH
) -> pd.DataFrame:
    """Load, join and clean both tables into the working film table."""

    credits = load_credits(ensure_dataset(credits_path, CREDITS_URL_ENV))
    movies = load_movies(ensure_dataset(movies_path, MOVIES_URL_ENV))
    return clean_dataset(merge_datasets(credits, movies))
