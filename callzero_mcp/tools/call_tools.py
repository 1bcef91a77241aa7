from __future__ import annotations

from typing import Any, Dict

from mcp import types

from ..http_client import CallZeroClient
from ..models import (
    GetCallStatusInput,
    GetCallTranscriptInput,
    MakeCallInput,
    US_PHONE_PATTERN,
)
from . import ToolRegistry
from .helpers import validated_tool


def register_tools(registry: ToolRegistry, client: CallZeroClient) -> None:
    make_call_schema: Dict[str, Any] = {
        "type": "object",
        "properties": {
            "recipientPhone": {
                "type": "string",
                "pattern": US_PHONE_PATTERN,
                "description": "Recipient phone number in E.164 format (e.g., +15551234567)",
            },
            "taskDetails": {
                "type": "string",
                "minLength": 1,
                "description": "What the AI should accomplish on the call",
            },
            "yourInfo": {
                "type": "string",
                "description": "Additional context about the caller for the AI",
            },
            "scheduledFor": {
                "type": "string",
                "format": "date-time",
                "description": "ISO datetime string for scheduling the call (e.g., 2024-01-15T14:30:00Z)",
            },
        },
        "required": ["recipientPhone", "taskDetails"],
    }

    call_status_schema: Dict[str, Any] = {
        "type": "object",
        "properties": {
            "callId": {"type": "string", "description": "ID of the call to get status for"},
        },
        "required": ["callId"],
    }

    transcript_schema: Dict[str, Any] = {
        "type": "object",
        "properties": {
            "callId": {"type": "string", "description": "ID of the call to get transcript for"},
        },
        "required": ["callId"],
    }

    registry.add_tool(
        types.Tool(
            name="make_call",
            description=(
                "Make an outbound phone call through CallZero AI assistant. "
                "Can schedule calls for future times or initiate immediately."
            ),
            inputSchema=make_call_schema,
        ),
        validated_tool("make call", MakeCallInput, client.make_call),
    )
    registry.add_tool(
        types.Tool(
            name="get_call_status",
            description="Get the current status and basic information of a phone call by its ID.",
            inputSchema=call_status_schema,
        ),
        validated_tool("get call status", GetCallStatusInput, client.get_call_status),
    )
    registry.add_tool(
        types.Tool(
            name="get_call_transcript",
            description=(
                "Get the full transcript and detailed information of a completed "
                "phone call by its ID."
            ),
            inputSchema=transcript_schema,
        ),
        validated_tool("get call transcript", GetCallTranscriptInput, client.get_call_transcript),
    )
