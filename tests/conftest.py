"""
Shared fixtures - synthetic REST Countries records (no network access)
"""

import copy
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

SAMPLE_COUNTRIES = [
    {
        "name": {"common": "Brazil", "official": "Federative Republic of Brazil"},
        "area": 8515767.0,
        "population": 212559409,
        "languages": {"por": "Portuguese"},
        "currencies": {"BRL": {"name": "Brazilian real", "symbol": "R$"}},
        "landlocked": False,
        "gini": {"2019": 53.4},
        "subregion": "South America",
        "timezones": ["UTC-05:00", "UTC-04:00", "UTC-03:00", "UTC-02:00"],
    },
    {
        "name": {"common": "Portugal", "official": "Portuguese Republic"},
        "area": 92090.0,
        "population": 10305564,
        "languages": {"por": "Portuguese"},
        "currencies": {"EUR": {"name": "Euro", "symbol": "€"}},
        "landlocked": False,
        "gini": {"2018": 33.5},
        "subregion": "Southern Europe",
        "timezones": ["UTC-01:00", "UTC"],
    },
    {
        "name": {"common": "Chad", "official": "Republic of Chad"},
        "area": 1284000.0,
        "population": 16425864,
        "languages": {"ara": "Arabic", "fra": "French"},
        "currencies": {"XAF": {"name": "Central African CFA franc", "symbol": "Fr"}},
        "landlocked": True,
        "gini": {"2011": 43.3},
        "subregion": "Middle Africa",
        "timezones": ["UTC+01:00"],
    },
    {
        "name": {"common": "Ecuador", "official": "Republic of Ecuador"},
        "area": 276841.0,
        "population": 17643060,
        "languages": {"spa": "Spanish"},
        "currencies": {"USD": {"name": "United States dollar", "symbol": "$"}},
        "landlocked": False,
        "gini": {"2019": 45.7},
        "subregion": "South America",
        "timezones": ["UTC-06:00", "UTC-05:00"],
    },
    {
        "name": {"common": "Antarctica", "official": "Antarctica"},
        "area": 14000000.0,
        "population": 1000,
        "landlocked": False,
        "timezones": ["UTC-03:00", "UTC+03:00", "UTC+05:00", "UTC+06:00"],
    },
    {
        "name": {"common": "Switzerland", "official": "Swiss Confederation"},
        "area": 41284.0,
        "population": 8654622,
        "languages": {
            "fra": "French",
            "gsw": "Swiss German",
            "ita": "Italian",
            "roh": "Romansh",
        },
        "currencies": {"CHF": {"name": "Swiss franc", "symbol": "Fr."}},
        "landlocked": True,
        "gini": {"2018": 33.1},
        "subregion": "Western Europe",
        "timezones": ["UTC+01:00"],
    },
]


@pytest.fixture
def sample_countries():
    """Raw country records as served by the /all endpoint"""
    return copy.deepcopy(SAMPLE_COUNTRIES)


@pytest.fixture
def sample_df(sample_countries):
    """Flat country table built from the sample records"""
    from src.extract.data_fetcher import countries_to_dataframe

    return countries_to_dataframe(sample_countries)


@pytest.fixture
def sample_source(sample_countries):
    """In-memory data source serving the sample records"""
    from src.extract.sources import StaticCountriesSource

    return StaticCountriesSource(sample_countries)
