"""
Test Country Queries - public query operations composed over a data source
"""

import os
import sys
from unittest.mock import Mock, patch

import pytest
import requests

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.extract.sources import StaticCountriesSource
from src.orchestration.queries import (
    CountryQueries,
    get_countries_by_currency,
    get_countries_by_language,
    get_countries_by_subregion,
    get_countries_by_timezone,
    get_country_with_highest_gini,
    get_landlocked_countries,
    get_top_countries_by_area,
    get_top_countries_by_population,
)
from src.transformation.schemas import GiniResult


def test_each_query_fetches_exactly_once(sample_source):
    queries = CountryQueries(sample_source)

    queries.top_countries_by_area(3)
    queries.top_countries_by_population(3)
    queries.countries_by_language("Portuguese")
    queries.countries_by_currency("Euro")
    queries.landlocked_countries()
    queries.country_with_highest_gini()
    queries.countries_by_subregion("Middle Africa")
    queries.countries_by_timezone("UTC+01:00")

    assert sample_source.calls == 8


def test_convenience_functions(sample_source):
    assert get_top_countries_by_area(2, sample_source) == ["Antarctica", "Brazil"]
    assert get_top_countries_by_population(1, sample_source) == ["Brazil"]
    assert get_countries_by_language("Portuguese", sample_source) == [
        "Brazil",
        "Portugal",
    ]
    assert get_countries_by_currency("Euro", sample_source) == ["Portugal"]
    assert get_landlocked_countries(sample_source) == ["Chad", "Switzerland"]
    assert get_country_with_highest_gini(sample_source) == GiniResult(
        name="Brazil", gini=53.4
    )
    assert get_countries_by_subregion("Middle Africa", sample_source) == ["Chad"]
    assert get_countries_by_timezone("UTC+01:00", sample_source) == [
        "Chad",
        "Switzerland",
    ]


def test_queries_are_idempotent(sample_source):
    queries = CountryQueries(sample_source)

    assert queries.top_countries_by_area(4) == queries.top_countries_by_area(4)
    assert queries.landlocked_countries() == queries.landlocked_countries()
    assert queries.country_with_highest_gini() == queries.country_with_highest_gini()


def test_queries_do_not_change_source_data(sample_source, sample_countries):
    queries = CountryQueries(sample_source)

    queries.top_countries_by_population(6)

    assert sample_source.get_all_countries() == sample_countries


def test_top_n_larger_than_dataset(sample_source):
    assert len(get_top_countries_by_area(50, sample_source)) == 6


def test_top_n_zero(sample_source):
    assert get_top_countries_by_area(0, sample_source) == []


def test_highest_gini_without_any_gini_data():
    source = StaticCountriesSource(
        [{"name": {"common": "A"}}, {"name": {"common": "B"}}]
    )

    assert get_country_with_highest_gini(source) == GiniResult(name=None, gini=-1)


def test_language_query_ignores_countries_without_languages():
    source = StaticCountriesSource(
        [
            {"name": {"common": "Lusitania"}, "languages": {"por": "Portuguese"}},
            {"name": {"common": "Silentia"}},
        ]
    )

    assert get_countries_by_language("Portuguese", source) == ["Lusitania"]


def test_fetch_failure_propagates_from_query():
    source = Mock()
    source.get_all_countries.side_effect = requests.ConnectionError("down")

    with pytest.raises(requests.ConnectionError):
        CountryQueries(source).landlocked_countries()

    source.get_all_countries.assert_called_once()


def test_default_source_is_live_client(sample_countries):
    client = Mock()
    client.get_all_countries.return_value = sample_countries

    with patch(
        "src.extract.data_fetcher.RestCountriesAPIClient", return_value=client
    ) as client_cls:
        names = get_top_countries_by_area(1)

    assert names == ["Antarctica"]
    client_cls.assert_called_once_with()
    client.close.assert_called_once()
