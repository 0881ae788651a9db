"""
Data Transformers - Transform Layer

Pure functions answering country queries over the flat country table.
Every function leaves its input untouched and returns plain Python values.
"""

import logging
from typing import List

import polars as pl

from .schemas import GiniResult

logger = logging.getLogger(__name__)

SORTABLE_COLUMNS = ("area", "population")


def _names(df: pl.DataFrame) -> List[str]:
    return df.get_column("name").to_list()


def top_countries_by(df: pl.DataFrame, column: str, n: int) -> List[str]:
    """
    Names of the n countries with the largest value in a numeric column

    Args:
        df: Flat country DataFrame
        column: "area" or "population"
        n: Number of countries to return

    Returns:
        List[str]: At most n names, largest first; empty when n <= 0
    """
    if column not in SORTABLE_COLUMNS:
        raise ValueError(f"Cannot rank countries by {column!r}")
    if n <= 0:
        return []

    top = df.sort(column, descending=True, nulls_last=True, maintain_order=True)
    return _names(top.head(n))


def countries_with_language(df: pl.DataFrame, language: str) -> List[str]:
    """Countries listing the exact language name among their languages"""
    return _names(df.filter(pl.col("languages").list.contains(pl.lit(language))))


def countries_with_currency(df: pl.DataFrame, currency: str) -> List[str]:
    """Countries having a currency whose name matches exactly"""
    return _names(df.filter(pl.col("currencies").list.contains(pl.lit(currency))))


def landlocked_countries(df: pl.DataFrame) -> List[str]:
    return _names(df.filter(pl.col("landlocked")))


def countries_in_subregion(df: pl.DataFrame, subregion: str) -> List[str]:
    # Case-sensitive, no normalization
    return _names(df.filter(pl.col("subregion") == subregion))


def countries_in_timezone(df: pl.DataFrame, timezone: str) -> List[str]:
    return _names(df.filter(pl.col("timezones").list.contains(pl.lit(timezone))))


def country_with_highest_gini(df: pl.DataFrame) -> GiniResult:
    """
    Country with the highest Gini index in any reported year

    Ties go to the first country in dataset order.

    Args:
        df: Flat country DataFrame (gini already reduced to per-country max)

    Returns:
        GiniResult: name=None and gini=-1 when no country has Gini data
    """
    candidates = df.filter(pl.col("gini").is_not_null() & (pl.col("gini") > -1))
    if candidates.height == 0:
        logger.info("No country reports a Gini index")
        return GiniResult()

    highest = candidates.get_column("gini").max()
    winner = candidates.filter(pl.col("gini") == highest).row(0, named=True)
    return GiniResult(name=winner["name"], gini=winner["gini"])
