"""Run the TMDB 5000 profitability analysis end to end.

The run loads and joins the credits and movies tables, derives profitability
in millions, explodes the cast, crew, keyword, genre, language and production
company lists, and writes charts to ``charts/`` and a Markdown report to
``reports/``.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import seaborn as sns

from . import aggregation, charts, extraction, report
from .dataset import BASE_DIR, CREDITS_PATH, MOVIES_PATH, load_dataset
from .profitability import derive_profitability, rescale_currency

CHARTS_DIR = BASE_DIR / "charts"
REPORTS_DIR = BASE_DIR / "reports"


def prepare_films(df: pd.DataFrame) -> pd.DataFrame:
    """Rescale currency and derive profitability on the cleaned film table."""

    return derive_profitability(rescale_currency(df))


def run_analysis(
    films: pd.DataFrame, charts_dir: Path = CHARTS_DIR, reports_dir: Path = REPORTS_DIR
) -> Path:
    """Aggregate ``films`` (already prepared), render charts and write the report."""

    directors = extraction.extract_directors(films)
    cast = extraction.explode_names(films, "cast")
    keywords = extraction.explode_names(films, "keywords")
    genres = extraction.explode_names(films, "genres")
    languages = extraction.explode_names(films, "spoken_languages")
    companies = aggregation.assign_brands(extraction.explode_names(films, "production_companies"))

    top_profit = aggregation.top_by_profitability(films)
    top_loss = aggregation.top_by_profitability(films, ascending=True)
    top_film_directors = aggregation.directors_of(
        pd.concat([top_profit, top_loss]).drop_duplicates("id"), directors
    )

    matrix = aggregation.correlation_matrix(films)
    correlations = aggregation.strongest_correlations(matrix, "profitability")

    chart_paths = {
        "Correlation matrix": charts_dir / "correlation_matrix.png",
        "Most profitable films": charts_dir / "top_profit.png",
        "Biggest losses": charts_dir / "top_loss.png",
        "Keyword word cloud": charts_dir / "keywords_wordcloud.png",
        "Genre word cloud": charts_dir / "genres_wordcloud.png",
        "Cast word cloud": charts_dir / "cast_wordcloud.png",
        "Director word cloud": charts_dir / "directors_wordcloud.png",
        "Genres by outcome": charts_dir / "genre_outcomes.png",
        "Languages by outcome": charts_dir / "language_outcomes.png",
        "Production brands by outcome": charts_dir / "brand_outcomes.png",
    }

    charts.generate_correlation_chart(matrix, chart_paths["Correlation matrix"])
    charts.generate_top_films_chart(
        top_profit, chart_paths["Most profitable films"], f"Top {len(top_profit)} most profitable films"
    )
    charts.generate_top_films_chart(
        top_loss, chart_paths["Biggest losses"], f"Top {len(top_loss)} biggest losses"
    )

    for caption, rows, column in (
        ("Keyword word cloud", keywords, "keyword"),
        ("Genre word cloud", genres, "genre"),
        ("Cast word cloud", cast, "cast_name"),
        ("Director word cloud", directors, "director_name"),
    ):
        charts.generate_wordcloud(
            aggregation.entity_frequencies(rows, column), column, chart_paths[caption], caption
        )

    charts.generate_outcome_breakdown_chart(
        aggregation.count_by_outcome(genres, "genre"),
        "genre",
        chart_paths["Genres by outcome"],
        "Profit and loss by genre",
    )
    charts.generate_outcome_breakdown_chart(
        aggregation.count_by_outcome(languages, "language"),
        "language",
        chart_paths["Languages by outcome"],
        "Profit and loss by spoken language (top 15)",
        top_n=15,
    )
    charts.generate_outcome_breakdown_chart(
        aggregation.count_by_outcome(companies, "brand"),
        "brand",
        chart_paths["Production brands by outcome"],
        "Profit and loss by production brand",
    )

    report_path = reports_dir / "insights.md"
    report.create_report(
        df=films,
        outcome_summary=aggregation.summarize_outcomes(films),
        top_profit=top_profit,
        top_loss=top_loss,
        top_directors_attached=top_film_directors,
        genre_stats=aggregation.summarize_genres(genres, films),
        director_stats=aggregation.top_directors(directors),
        correlations=correlations,
        charts=chart_paths,
        output_path=report_path,
    )
    return report_path


def main(credits_path: Path = CREDITS_PATH, movies_path: Path = MOVIES_PATH) -> None:
    sns.set_theme(style="whitegrid", context="notebook")

    films = prepare_films(load_dataset(credits_path, movies_path))
    run_analysis(films, CHARTS_DIR, REPORTS_DIR)

    print("Analysis complete. Charts available in the 'charts' directory.")


if __name__ == "__main__":
    main()
