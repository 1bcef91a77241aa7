from __future__ import annotations

from typing import Any, Dict

from mcp import types

from ..http_client import CallZeroClient
from ..models import (
    CancelCallInput,
    GetCreditBalanceInput,
    GetCreditBalanceOutput,
    ListCallsInput,
    ShareCallInput,
)
from . import ToolRegistry
from .helpers import validated_tool

BILLING_URL = "callzero.ai/billing"


def with_credit_message(result: GetCreditBalanceOutput) -> Dict[str, Any]:
    """Attach a human-readable summary of the remaining minutes."""
    minutes = result.get("creditMinutes") or 0
    if minutes > 0:
        message = f"You have {minutes} minutes remaining"
    else:
        message = f"No credits remaining. Visit {BILLING_URL} to add more."
    return {**result, "message": message}


def register_tools(registry: ToolRegistry, client: CallZeroClient) -> None:
    cancel_schema: Dict[str, Any] = {
        "type": "object",
        "properties": {
            "callId": {"type": "string", "description": "ID of the scheduled call to cancel"},
        },
        "required": ["callId"],
    }

    list_calls_schema: Dict[str, Any] = {
        "type": "object",
        "properties": {
            "status": {
                "type": "string",
                "enum": ["pending", "in_progress", "completed", "failed", "all"],
                "description": "Filter by call status (default: all)",
            },
            "limit": {
                "type": "integer",
                "minimum": 1,
                "maximum": 100,
                "description": "Number of calls to return (default: 20)",
            },
            "offset": {
                "type": "integer",
                "minimum": 0,
                "description": "Number of calls to skip for pagination (default: 0)",
            },
            "startDate": {
                "type": "string",
                "format": "date-time",
                "description": "Filter calls after this date (ISO format)",
            },
            "endDate": {
                "type": "string",
                "format": "date-time",
                "description": "Filter calls before this date (ISO format)",
            },
        },
        "required": [],
    }

    credit_schema: Dict[str, Any] = {
        "type": "object",
        "properties": {},
        "required": [],
    }

    share_schema: Dict[str, Any] = {
        "type": "object",
        "properties": {
            "callId": {"type": "string", "description": "ID of the call to share"},
            "expiresInDays": {
                "type": "integer",
                "minimum": 1,
                "maximum": 30,
                "description": "Number of days before the share link expires (default: 7)",
            },
        },
        "required": ["callId"],
    }

    registry.add_tool(
        types.Tool(
            name="cancel_call",
            description=(
                "Cancel a scheduled call before it starts. "
                "Only works for calls that haven't started yet."
            ),
            inputSchema=cancel_schema,
        ),
        validated_tool("cancel call", CancelCallInput, client.cancel_call),
    )
    registry.add_tool(
        types.Tool(
            name="list_calls",
            description="List all calls with optional filters for status, date range, and pagination.",
            inputSchema=list_calls_schema,
        ),
        validated_tool("list calls", ListCallsInput, client.list_calls),
    )
    registry.add_tool(
        types.Tool(
            name="get_credit_balance",
            description="Get the current credit balance in minutes for making AI phone calls.",
            inputSchema=credit_schema,
        ),
        validated_tool(
            "get credit balance",
            GetCreditBalanceInput,
            client.get_credit_balance,
            augment=with_credit_message,
        ),
    )
    registry.add_tool(
        types.Tool(
            name="share_call",
            description=(
                "Generate a shareable link for a call transcript that others can "
                "view without authentication."
            ),
            inputSchema=share_schema,
        ),
        validated_tool("share call", ShareCallInput, client.share_call),
    )
