"""
Data Fetcher - Extract Layer

Functions for fetching the country dataset and flattening it into a table.
No business logic, just I/O and reshaping of the raw records.
"""

import logging
from typing import Any, Dict, List, Optional

import polars as pl

from .restcountries_api import RestCountriesAPIClient
from .schemas import RAW_COUNTRIES_SCHEMA
from .sources import CountriesDataSource

logger = logging.getLogger(__name__)


def _number(value: Any) -> Optional[float]:
    # bool is an int subclass but never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _string_list(values: Any) -> Optional[List[str]]:
    if not isinstance(values, list):
        return None
    return [v for v in values if isinstance(v, str)]


def flatten_country(record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Flatten one raw country record into a RAW_COUNTRIES_SCHEMA row

    Args:
        record: Country record as served by REST Countries

    Returns:
        Optional[Dict]: Flat row, or None when the record has no name.common
    """
    name = record.get("name")
    common_name = name.get("common") if isinstance(name, dict) else None
    if not isinstance(common_name, str):
        return None

    languages = record.get("languages")
    currencies = record.get("currencies")
    gini = record.get("gini")
    population = _number(record.get("population"))
    landlocked = record.get("landlocked")
    subregion = record.get("subregion")

    gini_values = []
    if isinstance(gini, dict):
        gini_values = [v for v in map(_number, gini.values()) if v is not None]

    return {
        "name": common_name,
        "area": _number(record.get("area")),
        "population": int(population) if population is not None else None,
        "languages": (
            [v for v in languages.values() if isinstance(v, str)]
            if isinstance(languages, dict)
            else None
        ),
        "currencies": (
            [
                c["name"]
                for c in currencies.values()
                if isinstance(c, dict) and isinstance(c.get("name"), str)
            ]
            if isinstance(currencies, dict)
            else None
        ),
        "landlocked": landlocked if isinstance(landlocked, bool) else None,
        "gini": max(gini_values) if gini_values else None,
        "subregion": subregion if isinstance(subregion, str) else None,
        "timezones": _string_list(record.get("timezones")),
    }


def countries_to_dataframe(records: List[Dict[str, Any]]) -> pl.DataFrame:
    """
    Convert raw country records to a flat DataFrame in upstream order

    Records without name.common are dropped.

    Args:
        records: Raw country records

    Returns:
        pl.DataFrame: Country data with RAW_COUNTRIES_SCHEMA
    """
    rows = []
    skipped = 0
    for record in records:
        row = flatten_country(record) if isinstance(record, dict) else None
        if row is None:
            skipped += 1
            continue
        rows.append(row)

    if skipped:
        logger.warning(f"Skipped {skipped} country records without name.common")

    return pl.DataFrame(rows, schema=RAW_COUNTRIES_SCHEMA)


def fetch_raw_countries_data(
    source: Optional[CountriesDataSource] = None,
) -> pl.DataFrame:
    """
    Fetch the country dataset once and flatten it

    Args:
        source: Data source to read from (live REST Countries API if omitted)

    Returns:
        pl.DataFrame: Country data with RAW_COUNTRIES_SCHEMA
    """
    owns_source = source is None
    if owns_source:
        source = RestCountriesAPIClient()

    try:
        raw_data = source.get_all_countries()
    except Exception as e:
        logger.error(f"❌ Error fetching raw countries data: {e}")
        raise
    finally:
        if owns_source:
            source.close()

    df = countries_to_dataframe(raw_data)
    logger.info(f"Flattened {df.height} country records")
    return df
