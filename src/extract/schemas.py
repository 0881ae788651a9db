"""
Extract Layer Schemas

Flat data schema for country records coming from REST Countries.
Nested mappings are reduced to the lists the queries look at.
"""

import polars as pl

# Flattened country records from REST Countries API
RAW_COUNTRIES_SCHEMA = pl.Schema(
    [
        ("name", pl.String()),
        ("area", pl.Float64()),
        ("population", pl.Int64()),
        ("languages", pl.List(pl.String())),
        ("currencies", pl.List(pl.String())),
        ("landlocked", pl.Boolean()),
        ("gini", pl.Float64()),
        ("subregion", pl.String()),
        ("timezones", pl.List(pl.String())),
    ]
)
