"""
Country Queries - Orchestration Layer

Each query fetches the full dataset exactly once from its data source,
validates the flat table, and hands it to a pure transformer. Nothing is
cached between calls, so two calls against an unchanged upstream return
identical results.
"""

import logging
from typing import List, Optional

import polars as pl

# Extract layer imports
from src.extract.data_fetcher import fetch_raw_countries_data
from src.extract.sources import CountriesDataSource

# Transform layer imports
from src.transformation.schemas import GiniResult
from src.transformation.transformers import (
    countries_in_subregion,
    countries_in_timezone,
    countries_with_currency,
    countries_with_language,
    country_with_highest_gini,
    landlocked_countries,
    top_countries_by,
)
from src.transformation.validators import validate_countries_schema

logger = logging.getLogger(__name__)


class CountryQueries:
    """Runs country queries against a data source"""

    def __init__(self, source: Optional[CountriesDataSource] = None):
        """
        Initialize the query runner

        Args:
            source: Data source to query (live REST Countries API if omitted,
                with a new client per fetch)
        """
        self.source = source

    def _load(self) -> pl.DataFrame:
        df = fetch_raw_countries_data(self.source)
        validate_countries_schema(df)
        return df

    def top_countries_by_area(self, n: int) -> List[str]:
        logger.info(f"Querying top {n} countries by area")
        return top_countries_by(self._load(), "area", n)

    def top_countries_by_population(self, n: int) -> List[str]:
        logger.info(f"Querying top {n} countries by population")
        return top_countries_by(self._load(), "population", n)

    def countries_by_language(self, language: str) -> List[str]:
        logger.info(f"Querying countries speaking {language!r}")
        return countries_with_language(self._load(), language)

    def countries_by_currency(self, currency: str) -> List[str]:
        logger.info(f"Querying countries using {currency!r}")
        return countries_with_currency(self._load(), currency)

    def landlocked_countries(self) -> List[str]:
        logger.info("Querying landlocked countries")
        return landlocked_countries(self._load())

    def country_with_highest_gini(self) -> GiniResult:
        logger.info("Querying country with the highest Gini index")
        return country_with_highest_gini(self._load())

    def countries_by_subregion(self, subregion: str) -> List[str]:
        logger.info(f"Querying countries in subregion {subregion!r}")
        return countries_in_subregion(self._load(), subregion)

    def countries_by_timezone(self, timezone: str) -> List[str]:
        logger.info(f"Querying countries in timezone {timezone!r}")
        return countries_in_timezone(self._load(), timezone)


# Convenience functions for direct use
def get_top_countries_by_area(
    n: int, source: Optional[CountriesDataSource] = None
) -> List[str]:
    return CountryQueries(source).top_countries_by_area(n)


def get_top_countries_by_population(
    n: int, source: Optional[CountriesDataSource] = None
) -> List[str]:
    return CountryQueries(source).top_countries_by_population(n)


def get_countries_by_language(
    language: str, source: Optional[CountriesDataSource] = None
) -> List[str]:
    return CountryQueries(source).countries_by_language(language)


def get_countries_by_currency(
    currency: str, source: Optional[CountriesDataSource] = None
) -> List[str]:
    return CountryQueries(source).countries_by_currency(currency)


def get_landlocked_countries(
    source: Optional[CountriesDataSource] = None,
) -> List[str]:
    return CountryQueries(source).landlocked_countries()


def get_country_with_highest_gini(
    source: Optional[CountriesDataSource] = None,
) -> GiniResult:
    return CountryQueries(source).country_with_highest_gini()


def get_countries_by_subregion(
    subregion: str, source: Optional[CountriesDataSource] = None
) -> List[str]:
    return CountryQueries(source).countries_by_subregion(subregion)


def get_countries_by_timezone(
    timezone: str, source: Optional[CountriesDataSource] = None
) -> List[str]:
    return CountryQueries(source).countries_by_timezone(timezone)
