from __future__ import annotations

from typing import Any, Dict

from pydantic import Field

from .common import ToolInput


class SearchFormTemplatesInput(ToolInput):
    query: str = Field(
        min_length=1,
        description="Search query to find matching form templates",
    )
    limit: int = Field(default=5, ge=1, le=20, description="Maximum number of results to return")


# Template records are defined by the backend and passed through untouched.
SearchFormTemplatesOutput = Dict[str, Any]
