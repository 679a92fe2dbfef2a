"""Shared pytest fixtures: small credits/movies tables shaped like TMDB 5000."""

import json

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest


def _names(*names: str) -> str:
    return json.dumps([{"id": index, "name": name} for index, name in enumerate(names)])


def _crew(*members: tuple[str, str]) -> str:
    return json.dumps(
        [
            {"credit_id": f"c{index}", "department": "Crew", "id": index, "job": job, "name": name}
            for index, (job, name) in enumerate(members)
        ]
    )


def _cast(*names: str) -> str:
    return json.dumps(
        [
            {"cast_id": index, "character": "", "id": index, "name": name, "order": index}
            for index, name in enumerate(names)
        ]
    )


@pytest.fixture
def credits_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "movie_id": [19995, 285, 206647, 49026, 1, 2, 3],
            "title": [
                "Avatar",
                "Pirates of the Caribbean: At World's End",
                "Spectre",
                "The Lone Ranger",
                "Chiamatemi Francesco - Il Papa della gente",
                "To Be Frank, Sinatra at 100",
                "America Is Still the Place",
            ],
            "cast": [
                _cast("Sam Worthington", "Zoe Saldana"),
                _cast("Johnny Depp", "Orlando Bloom"),
                _cast("Daniel Craig"),
                _cast("Johnny Depp", "Armie Hammer"),
                _cast("Rodrigo de la Serna"),
                "[]",
                "[]",
            ],
            "crew": [
                _crew(("Editor", "Stephen E. Rivkin"), ("Director", "James Cameron")),
                _crew(("Director", "Gore Verbinski")),
                _crew(("Director", "Sam Mendes"), ("Producer", "Barbara Broccoli")),
                _crew(("Director", "Gore Verbinski")),
                _crew(("Director", "Daniele Luchetti")),
                "[]",
                "[]",
            ],
        }
    )


@pytest.fixture
def movies_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "id": [19995, 285, 206647, 49026, 1, 2, 3],
            "title": [
                "Avatar",
                "Pirates of the Caribbean: At World's End",
                "Spectre",
                "The Lone Ranger",
                "Chiamatemi Francesco - Il Papa della gente",
                "To Be Frank, Sinatra at 100",
                "America Is Still the Place",
            ],
            "budget": [237000000, 300000000, 245000000, 255000000, 15000000, 2, 0],
            "revenue": [2787965087, 961000000, 880674609, 89289910, 0, 2, 0],
            "runtime": [162.0, 169.0, 148.0, 149.0, None, None, 0.0],
            "popularity": [150.44, 139.08, 107.38, 49.05, 0.74, 1.20, 0.0],
            "vote_average": [7.2, 6.9, 6.3, 5.9, 7.3, 0.0, 0.0],
            "vote_count": [11800, 4500, 4466, 2311, 12, 0, 0],
            "release_date": pd.to_datetime(
                ["2009-12-10", "2007-05-19", "2015-10-26", "2013-07-03", "2015-12-03", "2015-12-01", None]
            ),
            "original_language": ["en", "en", "en", "en", "es", "en", "en"],
            "homepage": ["http://www.avatarmovie.com/", None, None, None, None, None, None],
            "tagline": ["Enter the World of Pandora.", None, None, None, None, None, None],
            "overview": ["", "", "", "", "", "", ""],
            "original_title": ["Avatar", "", "", "", "", "", ""],
            "status": ["Released"] * 7,
            "genres": [
                _names("Action", "Adventure", "Fantasy", "Science Fiction"),
                _names("Adventure", "Fantasy", "Action"),
                _names("Action", "Adventure", "Crime"),
                _names("Action", "Adventure", "Western"),
                _names("Drama"),
                _names("Music", "Documentary"),
                "[]",
            ],
            "keywords": [
                _names("culture clash", "future", "space war"),
                _names("ocean", "drug abuse", "exotic island"),
                _names("spy", "based on novel", "secret agent"),
                _names("texas", "horse", "survivor"),
                _names("pope", "biography"),
                "[]",
                "[]",
            ],
            "spoken_languages": [
                json.dumps([{"iso_639_1": "en", "name": "English"}, {"iso_639_1": "es", "name": "Español"}]),
                json.dumps([{"iso_639_1": "en", "name": "English"}]),
                json.dumps([{"iso_639_1": "fr", "name": "Français"}, {"iso_639_1": "en", "name": "English"}]),
                json.dumps([{"iso_639_1": "en", "name": "English"}]),
                json.dumps([{"iso_639_1": "es", "name": "Español"}]),
                "[]",
                "[]",
            ],
            "production_companies": [
                _names("Ingenious Film Partners", "Twentieth Century Fox Film Corporation"),
                _names("Walt Disney Pictures", "Jerry Bruckheimer Films"),
                _names("Columbia Pictures", "Danjaq"),
                _names("Walt Disney Pictures", "Jerry Bruckheimer Films"),
                _names("Taodue Film"),
                "[]",
                "[]",
            ],
        }
    )


@pytest.fixture
def merged_df(credits_df: pd.DataFrame, movies_df: pd.DataFrame) -> pd.DataFrame:
    from tmdb_analysis.dataset import merge_datasets

    return merge_datasets(credits_df, movies_df)


@pytest.fixture
def films_df(merged_df: pd.DataFrame) -> pd.DataFrame:
    from tmdb_analysis.analysis import prepare_films
    from tmdb_analysis.dataset import clean_dataset

    return prepare_films(clean_dataset(merged_df))
