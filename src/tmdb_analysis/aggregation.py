"""Rankings, frequency counts and grouped summaries over films and exploded rows.

All rankings use stable sorts: rows with equal values keep their input order,
so repeated runs over the same files produce identical tables.
"""

from __future__ import annotations

import pandas as pd

from .profitability import OUTCOME_ORDER

TOP_K = 20
WORDCLOUD_TOP_N = 100
OTHER_BRAND = "Others"

# Checked in order against each production company name; the first substring
# contained in the name wins.
BRAND_RULES = [
    ("Warner Bros", "Warner Bros"),
    ("Universal", "Universal"),
    ("Paramount", "Paramount"),
    ("Twentieth Century Fox", "20th Century Fox"),
    ("Fox", "20th Century Fox"),
    ("Columbia", "Columbia"),
    ("Sony", "Columbia"),
    ("Walt Disney", "Disney"),
    ("Disney", "Disney"),
    ("Pixar", "Disney"),
    ("Marvel", "Disney"),
    ("New Line", "New Line"),
    ("Metro-Goldwyn-Mayer", "MGM"),
    ("DreamWorks", "DreamWorks"),
    ("Lionsgate", "Lionsgate"),
    ("Lions Gate", "Lionsgate"),
    ("Miramax", "Miramax"),
]


def top_by_profitability(df: pd.DataFrame, k: int = TOP_K, ascending: bool = False) -> pd.DataFrame:
    """Return the ``k`` most profitable films, or the ``k`` biggest losses when ``ascending``."""

    ranked = df.sort_values("profitability", ascending=ascending, kind="stable")
    return ranked.head(k).reset_index(drop=True)


def directors_of(films: pd.DataFrame, directors: pd.DataFrame) -> pd.DataFrame:
    """Attach director names to ``films``, keeping the order of ``films``."""

    names = directors[["id", "director_name"]]
    attached = films[["id", "title", "profitability"]].merge(names, on="id", how="left", sort=False)
    return attached.reset_index(drop=True)


def entity_frequencies(rows: pd.DataFrame, column: str, top_n: int = WORDCLOUD_TOP_N) -> pd.DataFrame:
    """Count values of ``column`` and keep the ``top_n`` most frequent.

    Equal counts are ordered by first appearance in ``rows``.
    """

    counts = rows.groupby(column, sort=False).size().rename("count")
    ranked = counts.sort_values(ascending=False, kind="stable").head(top_n)
    return ranked.reset_index()


def count_by_outcome(rows: pd.DataFrame, column: str) -> pd.DataFrame:
    """Count exploded rows per (``column``, outcome label) pair."""

    counts = (
        rows.groupby([column, "profit_loss"], observed=False)
        .size()
        .rename("count")
        .reset_index()
    )
    counts["profit_loss"] = pd.Categorical(counts["profit_loss"], categories=OUTCOME_ORDER)
    return counts


def map_company_brand(name: str, rules: list[tuple[str, str]] = BRAND_RULES) -> str:
    for keyword, brand in rules:
        if keyword in name:
            return brand
    return OTHER_BRAND


def assign_brands(rows: pd.DataFrame, column: str = "production_company") -> pd.DataFrame:
    """Return a copy of ``rows`` with a ``brand`` column derived from company names."""

    branded = rows.copy()
    branded["brand"] = branded[column].map(map_company_brand)
    return branded


def correlation_matrix(df: pd.DataFrame, exclude: tuple[str, ...] = ("id",)) -> pd.DataFrame:
    """Pearson correlation across the numeric columns of ``df``."""

    numeric = df.select_dtypes(include="number").drop(columns=list(exclude), errors="ignore")
    return numeric.corr(method="pearson")


def strongest_correlations(matrix: pd.DataFrame, column: str, top_n: int = 5) -> pd.Series:
    """Return the ``top_n`` columns most strongly correlated with ``column``."""

    others = matrix[column].drop(labels=[column]).dropna()
    order = others.abs().sort_values(ascending=False, kind="stable").index
    return others.loc[order].head(top_n)


def summarize_outcomes(df: pd.DataFrame) -> pd.DataFrame:
    """Film count and share per outcome label."""

    counts = (
        df["profit_loss"]
        .value_counts(sort=False)
        .reindex(OUTCOME_ORDER, fill_value=0)
        .rename("film_count")
    )
    summary = counts.to_frame()
    total = summary["film_count"].sum()
    summary["share"] = summary["film_count"] / total if total else 0.0
    summary.index.name = "profit_loss"
    return summary


def summarize_genres(genre_rows: pd.DataFrame, df: pd.DataFrame) -> pd.DataFrame:
    """Per-genre film count, mean profitability and mean vote average."""

    enriched = genre_rows[["id", "genre"]].merge(
        df[["id", "profitability", "vote_average"]], on="id", how="left"
    )
    genre_stats = (
        enriched.groupby("genre", sort=False)
        .agg(
            film_count=("id", "count"),
            mean_profitability=("profitability", "mean"),
            mean_vote=("vote_average", "mean"),
        )
        .sort_values("mean_profitability", ascending=False, kind="stable")
    )
    return genre_stats


def top_directors(director_rows: pd.DataFrame, top_n: int = 15) -> pd.DataFrame:
    """Directors ranked by the total profitability of the films they directed."""

    director_stats = (
        director_rows.groupby("director_name", sort=False)
        .agg(
            film_count=("id", "count"),
            total_profitability=("profitability", "sum"),
            mean_profitability=("profitability", "mean"),
        )
        .sort_values("total_profitability", ascending=False, kind="stable")
    )
    return director_stats.head(top_n)
