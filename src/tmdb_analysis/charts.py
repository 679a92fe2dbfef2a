"""Charts and word clouds for the profitability analysis."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from wordcloud import WordCloud

from .profitability import OUTCOME_ORDER

OUTCOME_PALETTE = {"Profit": "#2e7d32", "Break Even": "#9e9e9e", "Loss": "#c62828"}


def _save_figure(fig: plt.Figure, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"Saved chart to {path}")


def generate_correlation_chart(matrix: pd.DataFrame, output_path: Path) -> None:
    """Heatmap of the Pearson correlation matrix."""

    if matrix.empty:
        raise ValueError("Correlation matrix is empty")

    fig, ax = plt.subplots(figsize=(10, 8))
    sns.heatmap(
        matrix,
        annot=True,
        fmt=".2f",
        cmap="coolwarm",
        vmin=-1,
        vmax=1,
        linewidths=0.5,
        square=True,
        ax=ax,
    )
    ax.set_title("Correlation between numeric film attributes")
    _save_figure(fig, output_path)


def generate_top_films_chart(films: pd.DataFrame, output_path: Path, title: str) -> None:
    """Horizontal bar chart of a top-K profitability table."""

    if films.empty:
        raise ValueError("No films to plot")

    ordered = films.iloc[::-1]
    colors = [
        OUTCOME_PALETTE["Profit"] if value > 0 else OUTCOME_PALETTE["Loss"]
        for value in ordered["profitability"]
    ]

    fig, ax = plt.subplots(figsize=(10, 9))
    # Positional bars: repeated titles must not collapse into one category.
    positions = range(len(ordered))
    bars = ax.barh(positions, ordered["profitability"], color=colors)
    ax.set_yticks(positions, labels=ordered["title"])
    ax.set_xlabel("Profitability (millions)")
    ax.set_ylabel("")
    ax.set_title(title)

    for bar, value in zip(bars, ordered["profitability"]):
        ax.text(
            bar.get_width(),
            bar.get_y() + bar.get_height() / 2,
            f" {value:,.0f}",
            va="center",
            ha="left" if value >= 0 else "right",
            fontsize=8,
            color="dimgray",
        )

    _save_figure(fig, output_path)


def generate_wordcloud(frequencies: pd.DataFrame, column: str, output_path: Path, title: str) -> None:
    """Render a word cloud from a frequency table with ``column`` and ``count``."""

    if frequencies.empty:
        raise ValueError(f"No '{column}' values to draw")

    weights = dict(zip(frequencies[column], frequencies["count"]))
    cloud = WordCloud(
        width=1000,
        height=500,
        background_color="white",
        max_words=len(weights),
        colormap="viridis",
    ).generate_from_frequencies(weights)

    fig, ax = plt.subplots(figsize=(12, 6))
    ax.imshow(cloud, interpolation="bilinear")
    ax.axis("off")
    ax.set_title(title)
    _save_figure(fig, output_path)


def generate_outcome_breakdown_chart(
    counts: pd.DataFrame, column: str, output_path: Path, title: str, top_n: int | None = None
) -> None:
    """Grouped bar chart of film counts per category and outcome label.

    With ``top_n`` only the categories with the most films are drawn.
    """

    if counts.empty:
        raise ValueError(f"No '{column}' counts to plot")

    totals = counts.groupby(column, sort=False)["count"].sum().sort_values(ascending=False, kind="stable")
    order = list(totals.index[:top_n] if top_n else totals.index)
    data = counts[counts[column].isin(order)]

    fig, ax = plt.subplots(figsize=(12, 7))
    sns.barplot(
        data=data,
        x=column,
        y="count",
        hue="profit_loss",
        order=order,
        hue_order=OUTCOME_ORDER,
        palette=OUTCOME_PALETTE,
        ax=ax,
    )
    ax.set_xlabel("")
    ax.set_ylabel("Number of films")
    ax.set_title(title)
    ax.tick_params(axis="x", rotation=45)
    for label in ax.get_xticklabels():
        label.set_horizontalalignment("right")
    ax.get_legend().set_title("")
    _save_figure(fig, output_path)
