"""
Country Data Sources

Anything with a get_all_countries() method can feed the query layer.
The live API client re-fetches on every call; StaticCountriesSource serves
a fixed in-memory dataset for tests and offline runs.
"""

import copy
from typing import Any, Dict, List, Protocol, runtime_checkable


@runtime_checkable
class CountriesDataSource(Protocol):
    """Capability to produce the full list of raw country records"""

    def get_all_countries(self) -> List[Dict[str, Any]]: ...


class StaticCountriesSource:
    """In-memory data source returning an independent copy on every call"""

    def __init__(self, records: List[Dict[str, Any]]):
        self._records = copy.deepcopy(list(records))
        self.calls = 0

    def get_all_countries(self) -> List[Dict[str, Any]]:
        self.calls += 1
        return copy.deepcopy(self._records)
