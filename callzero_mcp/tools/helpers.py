from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar

from pydantic import ValidationError

from ..models import ToolInput
from . import ToolHandler

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=ToolInput)


def format_validation_error(exc: ValidationError) -> str:
    """Render a pydantic error as `field: message` pairs joined by `; `."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "Invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or str(exc)


def error_payload(operation: str, message: str) -> Dict[str, Any]:
    return {"error": f"Failed to {operation}: {message}"}


def validated_tool(
    operation: str,
    input_model: Type[InputT],
    call: Callable[[InputT], Awaitable[Any]],
    augment: Optional[Callable[[Any], Dict[str, Any]]] = None,
) -> ToolHandler:
    """
    Build a tool handler that validates, calls the backend and formats the result.

    Every failure (bad input, rate limit, backend or network error) comes back
    as `{"error": "Failed to <operation>: <message>"}` instead of raising, so
    the calling model always gets a parseable result.
    """

    async def handler(arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        try:
            data = input_model.model_validate(arguments or {})
        except ValidationError as exc:
            message = format_validation_error(exc)
            logger.info("Rejected %s arguments: %s", operation, message)
            return error_payload(operation, message)

        try:
            result = await call(data)
            if augment is not None:
                result = augment(result)
        except Exception as exc:
            logger.warning("Failed to %s: %s", operation, exc)
            return error_payload(operation, str(exc) or "Unknown error occurred")

        return result

    return handler
