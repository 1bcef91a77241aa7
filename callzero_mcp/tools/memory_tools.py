from __future__ import annotations

from typing import Any, Dict

from mcp import types

from ..http_client import CallZeroClient
from ..models import (
    CreateMemoryInput,
    GetContactMemoriesInput,
    SearchMemoriesInput,
    US_PHONE_PATTERN,
)
from . import ToolRegistry
from .helpers import validated_tool

MEMORY_CATEGORIES = ["contact", "task", "preference", "general"]


def register_tools(registry: ToolRegistry, client: CallZeroClient) -> None:
    create_schema: Dict[str, Any] = {
        "type": "object",
        "properties": {
            "content": {
                "type": "string",
                "minLength": 1,
                "description": "Memory content to store",
            },
            "category": {
                "type": "string",
                "enum": MEMORY_CATEGORIES,
                "description": "Category of the memory (default: general)",
            },
            "relatedPhone": {
                "type": "string",
                "pattern": US_PHONE_PATTERN,
                "description": "Phone number this memory relates to (E.164 format)",
            },
            "tags": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Tags for categorization",
            },
            "sensitivity": {
                "type": "string",
                "enum": ["low", "medium", "high"],
                "description": "Sensitivity level of the information (default: medium)",
            },
        },
        "required": ["content"],
    }

    search_schema: Dict[str, Any] = {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Search query to find relevant memories"},
            "category": {
                "type": "string",
                "enum": MEMORY_CATEGORIES,
                "description": "Filter by memory category",
            },
            "relatedPhone": {
                "type": "string",
                "pattern": US_PHONE_PATTERN,
                "description": "Filter by related phone number (E.164 format)",
            },
            "limit": {
                "type": "integer",
                "minimum": 1,
                "maximum": 50,
                "description": "Maximum number of results to return (default: 10)",
            },
        },
        "required": ["query"],
    }

    contact_schema: Dict[str, Any] = {
        "type": "object",
        "properties": {
            "phoneNumber": {
                "type": "string",
                "pattern": US_PHONE_PATTERN,
                "description": "Phone number to get memories for (E.164 format, e.g., +15551234567)",
            },
            "limit": {
                "type": "integer",
                "minimum": 1,
                "maximum": 100,
                "description": "Maximum number of memories to return (default: 20)",
            },
        },
        "required": ["phoneNumber"],
    }

    registry.add_tool(
        types.Tool(
            name="create_memory",
            description=(
                "Store information about contacts, preferences, or tasks that the AI "
                "should remember for future calls."
            ),
            inputSchema=create_schema,
        ),
        validated_tool("create memory", CreateMemoryInput, client.create_memory),
    )
    registry.add_tool(
        types.Tool(
            name="search_memories",
            description=(
                "Search stored memories by query, category, or related phone number "
                "to retrieve context for calls."
            ),
            inputSchema=search_schema,
        ),
        validated_tool("search memories", SearchMemoriesInput, client.search_memories),
    )
    registry.add_tool(
        types.Tool(
            name="get_contact_memories",
            description=(
                "Get all stored memories related to a specific phone number, including "
                "an AI-generated summary of the contact."
            ),
            inputSchema=contact_schema,
        ),
        validated_tool(
            "get contact memories",
            GetContactMemoriesInput,
            client.get_contact_memories,
        ),
    )
