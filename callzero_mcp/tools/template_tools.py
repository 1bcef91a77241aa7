from __future__ import annotations

from typing import Any, Dict

from mcp import types

from ..http_client import CallZeroClient
from ..models import SearchFormTemplatesInput
from . import ToolRegistry
from .helpers import validated_tool


def register_tools(registry: ToolRegistry, client: CallZeroClient) -> None:
    search_schema: Dict[str, Any] = {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "minLength": 1,
                "description": "Search query to find matching form templates (e.g., 'xfinity bill', 'cancel att')",
            },
            "limit": {
                "type": "integer",
                "minimum": 1,
                "maximum": 20,
                "default": 5,
                "description": "Maximum number of results to return",
            },
        },
        "required": ["query"],
        "additionalProperties": False,
    }

    # Errors are reported as a text payload like every other tool.
    registry.add_tool(
        types.Tool(
            name="search_form_templates",
            description=(
                "Search for public form templates that match the query. Returns templates "
                "with pre-filled task details and may include extracted phone numbers for "
                "known companies. Use this before making calls to leverage existing templates."
            ),
            inputSchema=search_schema,
        ),
        validated_tool(
            "search form templates",
            SearchFormTemplatesInput,
            client.search_form_templates,
        ),
    )
