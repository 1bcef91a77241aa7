"""
Input and output shapes for every CallZero tool.

Inputs are pydantic models and are validated before anything is sent to the
backend. Outputs are TypedDicts: backend responses are trusted as-is.
"""

from .calls import (
    CallSummary,
    CancelCallInput,
    CancelCallOutput,
    GetCallStatusInput,
    GetCallStatusOutput,
    GetCallTranscriptInput,
    GetCallTranscriptOutput,
    GetCreditBalanceInput,
    GetCreditBalanceOutput,
    ListCallsInput,
    ListCallsOutput,
    MakeCallInput,
    MakeCallOutput,
    ShareCallInput,
    ShareCallOutput,
    TranscriptMessage,
)
from .common import ISO_DATETIME_PATTERN, US_PHONE_PATTERN, ToolInput
from .memories import (
    CreateMemoryInput,
    CreateMemoryOutput,
    GetContactMemoriesInput,
    GetContactMemoriesOutput,
    Memory,
    SearchMemoriesInput,
    SearchMemoriesOutput,
)
from .templates import SearchFormTemplatesInput, SearchFormTemplatesOutput

__all__ = [
    "CallSummary",
    "CancelCallInput",
    "CancelCallOutput",
    "CreateMemoryInput",
    "CreateMemoryOutput",
    "GetCallStatusInput",
    "GetCallStatusOutput",
    "GetCallTranscriptInput",
    "GetCallTranscriptOutput",
    "GetContactMemoriesInput",
    "GetContactMemoriesOutput",
    "GetCreditBalanceInput",
    "GetCreditBalanceOutput",
    "ISO_DATETIME_PATTERN",
    "ListCallsInput",
    "ListCallsOutput",
    "MakeCallInput",
    "MakeCallOutput",
    "Memory",
    "SearchFormTemplatesInput",
    "SearchFormTemplatesOutput",
    "SearchMemoriesInput",
    "SearchMemoriesOutput",
    "ShareCallInput",
    "ShareCallOutput",
    "ToolInput",
    "TranscriptMessage",
    "US_PHONE_PATTERN",
]
