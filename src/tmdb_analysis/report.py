"""Markdown report for the profitability analysis."""

from __future__ import annotations

import os
from pathlib import Path

import pandas as pd


def _director_list(directors: pd.DataFrame, film_id: int) -> str:
    names = directors.loc[directors["id"] == film_id, "director_name"].dropna()
    return ", ".join(names) if not names.empty else "n/a"


def _top_films_table(films: pd.DataFrame, directors: pd.DataFrame) -> list[str]:
    lines = [
        "| # | Title | Director(s) | Budget | Revenue | Profitability |",
        "| ---: | --- | --- | ---: | ---: | ---: |",
    ]
    for rank, row in enumerate(films.itertuples(index=False), start=1):
        lines.append(
            f"| {rank} | {row.title} | {_director_list(directors, row.id)} | {row.budget:,.2f} | "
            f"{row.revenue:,.2f} | {row.profitability:,.2f} |"
        )
    return lines


def create_report(
    df: pd.DataFrame,
    outcome_summary: pd.DataFrame,
    top_profit: pd.DataFrame,
    top_loss: pd.DataFrame,
    top_directors_attached: pd.DataFrame,
    genre_stats: pd.DataFrame,
    director_stats: pd.DataFrame,
    correlations: pd.Series,
    charts: dict[str, Path],
    output_path: Path,
) -> None:
    """Write a Markdown report summarizing the analysis.

    ``top_directors_attached`` holds the director rows for both top-K tables,
    as returned by :func:`tmdb_analysis.aggregation.directors_of`. Chart paths
    are linked relative to the report's directory.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)

    report_lines = [
        "# TMDB 5000 profitability analysis",
        "",
        "## Dataset",
        f"* Films analysed: {len(df)}",
        "* Currency values are expressed in millions.",
        "",
        "## Key findings",
    ]

    if "Profit" in outcome_summary.index:
        profit = outcome_summary.loc["Profit"]
        if profit["share"] > 0.5:
            headline = "Most films make money."
        else:
            headline = "Most films do not turn a profit."
        report_lines.append(
            f"- **{headline}** {int(profit['film_count'])} films"
            f" ({profit['share']:.1%}) earned more than their budget."
        )
    if not top_profit.empty:
        leader = top_profit.iloc[0]
        report_lines.append(
            f"- **{leader['title']} leads profitability** with {leader['profitability']:,.2f} million"
            f" on a {leader['budget']:,.2f} million budget."
        )
    if not top_loss.empty:
        worst = top_loss.iloc[0]
        report_lines.append(
            f"- **{worst['title']} posts the largest loss** at {worst['profitability']:,.2f} million."
        )
    if not correlations.empty:
        best = correlations.index[0]
        report_lines.append(
            f"- **Profitability tracks {best}** most closely (Pearson r = {correlations.iloc[0]:.2f})."
        )

    report_lines.extend(
        [
            "",
            "## Outcomes",
            "",
            "| Outcome | Films | Share |",
            "| --- | ---: | ---: |",
        ]
    )
    for label, row in outcome_summary.iterrows():
        report_lines.append(f"| {label} | {int(row['film_count'])} | {row['share']:.1%} |")

    report_lines.extend(["", f"## Top {len(top_profit)} most profitable films", ""])
    report_lines.extend(_top_films_table(top_profit, top_directors_attached))
    report_lines.extend(["", f"## Top {len(top_loss)} biggest losses", ""])
    report_lines.extend(_top_films_table(top_loss, top_directors_attached))

    report_lines.extend(
        [
            "",
            "## Genre overview",
            "",
            "| Genre | Films | Avg profitability | Avg vote |",
            "| --- | ---: | ---: | ---: |",
        ]
    )
    for genre, row in genre_stats.iterrows():
        report_lines.append(
            f"| {genre} | {int(row['film_count'])} | {row['mean_profitability']:,.2f} | {row['mean_vote']:.2f} |"
        )

    report_lines.extend(
        [
            "",
            "## Most profitable directors",
            "",
            "| Director | Films | Total profitability | Avg profitability |",
            "| --- | ---: | ---: | ---: |",
        ]
    )
    for director, row in director_stats.iterrows():
        report_lines.append(
            f"| {director} | {int(row['film_count'])} | {row['total_profitability']:,.2f} | "
            f"{row['mean_profitability']:,.2f} |"
        )

    if not correlations.empty:
        report_lines.extend(
            [
                "",
                "## Correlation with profitability",
                "",
                "| Attribute | Pearson r |",
                "| --- | ---: |",
            ]
        )
        for attribute, value in correlations.items():
            report_lines.append(f"| {attribute} | {value:.2f} |")

    if charts:
        report_lines.extend(["", "## Charts", ""])
        for caption, path in charts.items():
            relative = Path(os.path.relpath(path, output_path.parent)).as_posix()
            report_lines.append(f"![{caption}]({relative})")

    report_lines.append("")

    output_path.write_text("\n".join(report_lines), encoding="utf-8")
    print(f"Wrote report to {output_path}")
