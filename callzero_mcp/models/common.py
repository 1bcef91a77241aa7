from __future__ import annotations

import re
from typing import Any, Dict, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError
from typing_extensions import Annotated

US_PHONE_PATTERN = r"^\+1[2-9]\d{9}$"
ISO_DATETIME_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?Z$"

_US_PHONE_RE = re.compile(US_PHONE_PATTERN)
_ISO_DATETIME_RE = re.compile(ISO_DATETIME_PATTERN)

CallStatus = Literal["pending", "in_progress", "completed", "failed"]
CallStatusFilter = Literal["pending", "in_progress", "completed", "failed", "all"]
MemoryCategory = Literal["contact", "task", "preference", "general"]
Sensitivity = Literal["low", "medium", "high"]


def check_us_phone(value: str) -> str:
    if not _US_PHONE_RE.match(value):
        raise PydanticCustomError(
            "us_phone",
            "Phone number must be a valid US number in E.164 format (e.g., +15551234567)",
        )
    return value


def check_iso_datetime(value: str) -> str:
    if not _ISO_DATETIME_RE.match(value):
        raise PydanticCustomError(
            "iso_datetime",
            "Invalid datetime, expected ISO 8601 UTC (e.g., 2024-01-15T14:30:00Z)",
        )
    return value


# Kept as strings so the caller's value is forwarded verbatim.
UsPhone = Annotated[str, AfterValidator(check_us_phone)]
IsoDateTime = Annotated[str, AfterValidator(check_iso_datetime)]


class ToolInput(BaseModel):
    """
    Base class for tool inputs.

    Unknown keys are dropped. Values are not coerced ("20" is not an int) and
    optional fields may be omitted but not sent as null. `to_payload()` gives
    the JSON body sent to the backend: defaults applied, absent optional
    fields left out.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise PydanticCustomError("null_value", "Input should not be null")
        return value

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
