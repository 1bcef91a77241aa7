from __future__ import annotations

from typing import List, Optional

from pydantic import Field
from typing_extensions import NotRequired, TypedDict

from .common import (
    CallStatus,
    CallStatusFilter,
    IsoDateTime,
    ToolInput,
    UsPhone,
)


# ===== Inputs =====


class MakeCallInput(ToolInput):
    recipientPhone: UsPhone = Field(description="Recipient phone number in E.164 format")
    taskDetails: str = Field(
        min_length=1,
        description="What the AI should accomplish on the call",
    )
    yourInfo: Optional[str] = Field(
        default=None,
        description="Additional context about the caller for the AI",
    )
    scheduledFor: Optional[IsoDateTime] = Field(
        default=None,
        description="ISO datetime string for scheduling the call (e.g., '2024-01-15T14:30:00Z')",
    )


class CallIdInput(ToolInput):
    callId: str = Field(description="ID of the call")


class GetCallStatusInput(CallIdInput):
    pass


class GetCallTranscriptInput(CallIdInput):
    pass


class CancelCallInput(CallIdInput):
    pass


class ListCallsInput(ToolInput):
    status: CallStatusFilter = Field(default="all", description="Filter by call status")
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    startDate: Optional[IsoDateTime] = Field(default=None, description="Filter by start date")
    endDate: Optional[IsoDateTime] = Field(default=None, description="Filter by end date")


class GetCreditBalanceInput(ToolInput):
    pass


class ShareCallInput(ToolInput):
    callId: str = Field(description="ID of the call to share")
    expiresInDays: int = Field(
        default=7,
        ge=1,
        le=30,
        description="Number of days before the share link expires",
    )


# ===== Outputs =====
# Backend responses are trusted; these shapes are for typing only.


class MakeCallOutput(TypedDict):
    success: bool
    status: str  # "initiated" | "scheduled"
    message: str
    callId: str
    scheduledFor: NotRequired[str]


class GetCallStatusOutput(TypedDict):
    callId: str
    status: CallStatus
    startTime: NotRequired[str]
    endTime: NotRequired[str]
    duration: NotRequired[float]
    isComplete: bool
    recipientPhone: str
    summary: NotRequired[str]


class TranscriptMessage(TypedDict):
    role: str
    content: str
    timestamp: str


class TranscriptMetadata(TypedDict):
    vapiCallId: NotRequired[str]
    totalMessages: int


class GetCallTranscriptOutput(TypedDict):
    callId: str
    status: str
    startTime: NotRequired[str]
    endTime: NotRequired[str]
    duration: NotRequired[float]
    summary: NotRequired[str]
    recipientPhone: str
    taskDetails: str
    transcript: List[TranscriptMessage]
    metadata: TranscriptMetadata


class CancelCallOutput(TypedDict):
    success: bool
    message: str
    callId: str


class CallSummary(TypedDict):
    callId: str
    status: CallStatus
    recipientPhone: str
    taskDetails: str
    startTime: NotRequired[str]
    endTime: NotRequired[str]
    duration: NotRequired[float]
    summary: NotRequired[str]


class ListCallsOutput(TypedDict):
    calls: List[CallSummary]
    total: int
    hasMore: bool


class GetCreditBalanceOutput(TypedDict):
    creditMinutes: float
    planType: NotRequired[str]
    nextRefillDate: NotRequired[str]


class ShareCallOutput(TypedDict):
    shareUrl: str
    expiresAt: str
    callId: str
