"""
Data Validators - Transform Layer

Pure functions for validating the flat country table before querying.
"""

import logging

import polars as pl

from src.extract.schemas import RAW_COUNTRIES_SCHEMA

logger = logging.getLogger(__name__)


def validate_countries_schema(df: pl.DataFrame) -> bool:
    """
    Validate country data matches expected schema

    Args:
        df: Flat country DataFrame

    Returns:
        bool: True if valid, raises exception if invalid
    """
    if df.schema != RAW_COUNTRIES_SCHEMA:
        raise ValueError(
            f"Schema mismatch: expected {RAW_COUNTRIES_SCHEMA}, got {df.schema}"
        )

    null_count = df.select(pl.col("name").is_null().sum()).item()
    if null_count > 0:
        raise ValueError(f"Null values found in required field 'name': {null_count}")

    logger.debug(f"Country data validation passed: {df.height} records")
    return True
