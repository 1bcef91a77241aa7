from __future__ import annotations

import logging
from typing import Any, Dict, Optional, cast

import httpx

from . import __version__
from .config import DEFAULT_API_URL, Settings
from .errors import (
    BackendConnectionError,
    BackendError,
    BackendTimeoutError,
    ConfigurationError,
)
from .models import (
    CancelCallInput,
    CancelCallOutput,
    CreateMemoryInput,
    CreateMemoryOutput,
    GetCallStatusInput,
    GetCallStatusOutput,
    GetCallTranscriptInput,
    GetCallTranscriptOutput,
    GetContactMemoriesInput,
    GetContactMemoriesOutput,
    GetCreditBalanceInput,
    GetCreditBalanceOutput,
    ListCallsInput,
    ListCallsOutput,
    MakeCallInput,
    MakeCallOutput,
    SearchFormTemplatesInput,
    SearchFormTemplatesOutput,
    SearchMemoriesInput,
    SearchMemoriesOutput,
    ShareCallInput,
    ShareCallOutput,
    ToolInput,
)
from .rate_limit import SlidingWindowRateLimiter

logger = logging.getLogger(__name__)

LOCAL_DEV_HOSTS = ("localhost", "127.0.0.1", "0.0.0.0")
TRUSTED_HOSTS = ("callzero.ai", "localhost", "127.0.0.1")
MAX_REQUESTS_PER_MINUTE = 50
USER_AGENT = f"callzero-mcp/{__version__}"


def normalize_api_url(url: str) -> str:
    """
    Validate the backend address and strip a trailing slash.

    Plain HTTP is only accepted for local development hosts. Hosts outside
    the trusted list are allowed but logged as a warning.
    """
    if url.endswith("/"):
        url = url[:-1]

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid API URL: {url}") from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigurationError(f"Invalid API URL: {url}")

    host = parsed.host
    is_local_dev = any(local in host for local in LOCAL_DEV_HOSTS)
    if parsed.scheme == "http" and not is_local_dev:
        raise ConfigurationError(
            "Insecure HTTP is only allowed for localhost. Use HTTPS for production URLs."
        )

    if not any(domain in host for domain in TRUSTED_HOSTS):
        logger.warning(
            "Using non-standard API domain: %s. Make sure this is intentional "
            "and the domain is trusted.",
            host,
        )

    return url


class CallZeroClient:
    """
    Async client for the CallZero tools API.

    Every operation is a POST to `<base>/api/tools/<operation>` with the
    validated tool input as JSON body. Requests are rate limited in-process
    (50 per rolling minute) before any network I/O happens.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rate_limiter: Optional[SlidingWindowRateLimiter] = None,
    ) -> None:
        self._settings = settings
        self._base_url = normalize_api_url(settings.base_url)

        if settings.api_url is not None and self._base_url != DEFAULT_API_URL:
            logger.info("Using custom API URL: %s", httpx.URL(self._base_url).host)

        self._rate_limiter = rate_limiter or SlidingWindowRateLimiter(
            max_requests=MAX_REQUESTS_PER_MINUTE,
            window_seconds=60.0,
        )
        self._request_count = 0
        self._client = httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {settings.api_key}",
                "Content-Type": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=httpx.Timeout(settings.request_timeout),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def request_count(self) -> int:
        """Number of requests that passed the rate limiter."""
        return self._request_count

    async def _request(self, endpoint: str, payload: Dict[str, Any]) -> Any:
        self._rate_limiter.acquire()
        self._request_count += 1

        url = f"{self._base_url}/api/tools/{endpoint}"
        try:
            response = await self._client.post(url, json=payload)
        except httpx.TimeoutException as exc:
            raise BackendTimeoutError(
                f"Request to {endpoint} timed out after {self._settings.request_timeout:g}s"
            ) from exc
        except httpx.RequestError as exc:
            raise BackendConnectionError(f"Could not reach CallZero API: {exc}") from exc

        if not response.is_success:
            raise _error_from_response(response)

        try:
            return response.json()
        except ValueError as exc:
            raise BackendError(
                "Invalid JSON response from backend",
                status_code=response.status_code,
            ) from exc

    async def _call(self, endpoint: str, data: ToolInput) -> Any:
        return await self._request(endpoint, data.to_payload())

    # ===== Calls =====

    async def make_call(self, data: MakeCallInput) -> MakeCallOutput:
        return cast(MakeCallOutput, await self._call("make-call", data))

    async def get_call_status(self, data: GetCallStatusInput) -> GetCallStatusOutput:
        return cast(GetCallStatusOutput, await self._call("get-call-status", data))

    async def get_call_transcript(
        self, data: GetCallTranscriptInput
    ) -> GetCallTranscriptOutput:
        return cast(GetCallTranscriptOutput, await self._call("get-call-transcript", data))

    # ===== Call management =====

    async def cancel_call(self, data: CancelCallInput) -> CancelCallOutput:
        return cast(CancelCallOutput, await self._call("cancel-call", data))

    async def list_calls(self, data: ListCallsInput) -> ListCallsOutput:
        return cast(ListCallsOutput, await self._call("list-calls", data))

    async def get_credit_balance(
        self, data: GetCreditBalanceInput
    ) -> GetCreditBalanceOutput:
        return cast(GetCreditBalanceOutput, await self._call("get-credit-balance", data))

    async def share_call(self, data: ShareCallInput) -> ShareCallOutput:
        return cast(ShareCallOutput, await self._call("share-call", data))

    # ===== Memory =====

    async def create_memory(self, data: CreateMemoryInput) -> CreateMemoryOutput:
        return cast(CreateMemoryOutput, await self._call("create-memory", data))

    async def search_memories(self, data: SearchMemoriesInput) -> SearchMemoriesOutput:
        return cast(SearchMemoriesOutput, await self._call("search-memories", data))

    async def get_contact_memories(
        self, data: GetContactMemoriesInput
    ) -> GetContactMemoriesOutput:
        return cast(
            GetContactMemoriesOutput,
            await self._call("get-contact-memories", data),
        )

    # ===== Form templates =====

    async def search_form_templates(
        self, data: SearchFormTemplatesInput
    ) -> SearchFormTemplatesOutput:
        return cast(
            SearchFormTemplatesOutput,
            await self._call("search-form-templates", data),
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "CallZeroClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def _error_from_response(response: httpx.Response) -> BackendError:
    message = f"HTTP {response.status_code}: {response.reason_phrase}"
    details = None
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        if body.get("error"):
            message = str(body["error"])
        details = body.get("details")

    return BackendError(message, status_code=response.status_code, details=details)
