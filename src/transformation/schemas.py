"""
Transformation Layer Schemas

Result models for query outputs that are more than a list of names.
"""

from typing import Optional

from pydantic import BaseModel, Field


class GiniResult(BaseModel):
    """Country with the highest Gini index across all reported years"""

    name: Optional[str] = Field(
        None, description="Common name of the country (None when no Gini data)"
    )
    gini: float = Field(-1, description="Highest Gini index found (-1 when none)")
