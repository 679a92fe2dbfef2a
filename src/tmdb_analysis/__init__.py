"""Profitability analysis of the TMDB 5000 film dataset."""

__version__ = "0.1.0"
