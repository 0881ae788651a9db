"""
Main Entry Point - Country Queries Demo

Runs the country queries against the live REST Countries API and prints
labelled results. Every query performs its own fetch.
"""

import logging
import sys
import os
from typing import Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import requests

from src.coreutils.logging import setup_logging
from src.extract.restcountries_api import RestCountriesAPIClient
from src.orchestration.queries import CountryQueries

logger = setup_logging()

QUERY_CHOICES = [
    "area",
    "population",
    "language",
    "currency",
    "landlocked",
    "gini",
    "subregion",
    "timezone",
]

DEFAULT_VALUES = {
    "language": "Portuguese",
    "currency": "United States dollar",
    "subregion": "Middle Africa",
    "timezone": "UTC+01:00",
}


def run_query(
    queries: CountryQueries, query: str, n: int = 5, value: Optional[str] = None
):
    """
    Run one query and return its label and result

    Args:
        queries: Query runner to use
        query: One of QUERY_CHOICES
        n: Size of top-N queries
        value: Match value for language/currency/subregion/timezone queries

    Returns:
        tuple: (label, result)
    """
    value = value if value is not None else DEFAULT_VALUES.get(query)

    if query == "area":
        return f"Top {n} countries by area:", queries.top_countries_by_area(n)
    elif query == "population":
        return (
            f"Top {n} countries by population:",
            queries.top_countries_by_population(n),
        )
    elif query == "language":
        return (
            f"Countries where {value} is spoken:",
            queries.countries_by_language(value),
        )
    elif query == "currency":
        return (
            f"Countries that use the {value}:",
            queries.countries_by_currency(value),
        )
    elif query == "landlocked":
        return "Landlocked countries:", queries.landlocked_countries()
    elif query == "gini":
        return (
            "Country with the highest Gini index:",
            queries.country_with_highest_gini().model_dump(),
        )
    elif query == "subregion":
        return f"Countries in {value}:", queries.countries_by_subregion(value)
    elif query == "timezone":
        return (
            f"Countries in timezone {value}:",
            queries.countries_by_timezone(value),
        )
    else:
        raise ValueError(f"Unknown query: {query}")


def main(argv=None) -> int:
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="REST Countries queries")
    parser.add_argument(
        "--query",
        choices=QUERY_CHOICES,
        help="Run a single query instead of all of them",
    )
    parser.add_argument(
        "--n", type=int, default=5, help="Number of countries for top-N queries"
    )
    parser.add_argument(
        "--value", help="Match value for language/currency/subregion/timezone"
    )
    parser.add_argument(
        "--retries", type=int, help="Fetch attempts per query (default: 3)"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logs")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    client = RestCountriesAPIClient(retries=args.retries)
    queries = CountryQueries(client)
    selected = [args.query] if args.query else QUERY_CHOICES

    try:
        for query in selected:
            label, result = run_query(queries, query, n=args.n, value=args.value)
            print(label)
            print(result)
    except (requests.RequestException, ValueError) as e:
        logger.error(f"❌ Query failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        client.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
