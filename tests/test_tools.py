"""
Unit Tests for tool handlers
Validation, backend delegation and the uniform error envelope.
"""
import pytest

from callzero_mcp.errors import UnknownToolError
from callzero_mcp.tools.management_tools import with_credit_message

CATALOGUE = [
    "make_call",
    "get_call_status",
    "get_call_transcript",
    "cancel_call",
    "list_calls",
    "get_credit_balance",
    "share_call",
    "create_memory",
    "search_memories",
    "get_contact_memories",
    "search_form_templates",
]


class TestRegistry:
    """Tests for tool registration and lookup."""

    def test_catalogue_order(self, registry):
        assert [tool.name for tool in registry.list_tools()] == CATALOGUE

    def test_descriptors_have_object_schemas(self, registry):
        for tool in registry.list_tools():
            assert tool.description
            assert tool.inputSchema["type"] == "object"

    def test_phone_fields_advertise_pattern(self, registry):
        tools = {tool.name: tool for tool in registry.list_tools()}
        pattern = tools["make_call"].inputSchema["properties"]["recipientPhone"]["pattern"]
        assert pattern == r"^\+1[2-9]\d{9}$"
        assert tools["make_call"].inputSchema["required"] == ["recipientPhone", "taskDetails"]

    def test_duplicate_registration_rejected(self, registry):
        tool = registry.list_tools()[0]
        with pytest.raises(ValueError, match="already registered"):
            registry.add_tool(tool, registry.get_handler(tool.name))

    @pytest.mark.asyncio
    async def test_unknown_tool_raises(self, registry, backend):
        with pytest.raises(UnknownToolError, match='Tool "place_order" not found'):
            await registry.dispatch("place_order", {})

        assert backend.requests == []

    def test_membership(self, registry):
        assert "make_call" in registry
        assert "place_order" not in registry


class TestMakeCall:
    """Tests for the make_call tool."""

    @pytest.mark.asyncio
    async def test_forwards_arguments(self, registry, backend):
        backend.respond(
            "make-call",
            json_body={
                "success": True,
                "status": "initiated",
                "message": "Call initiated",
                "callId": "call_123",
            },
        )

        result = await registry.dispatch(
            "make_call",
            {"recipientPhone": "+15551234567", "taskDetails": "Book a table"},
        )

        assert result["callId"] == "call_123"
        assert backend.requests[-1].url.path == "/api/tools/make-call"
        assert backend.last_body == {"recipientPhone": "+15551234567", "taskDetails": "Book a table"}

    @pytest.mark.asyncio
    async def test_invalid_phone_reported_as_error_payload(self, registry, backend):
        result = await registry.dispatch(
            "make_call",
            {"recipientPhone": "555-1234", "taskDetails": "Book a table"},
        )

        assert result["error"].startswith("Failed to make call: recipientPhone:")
        assert "E.164" in result["error"]
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_missing_arguments(self, registry):
        result = await registry.dispatch("make_call", None)

        assert result["error"].startswith("Failed to make call:")
        assert "recipientPhone: Field required" in result["error"]
        assert "taskDetails: Field required" in result["error"]


class TestCallStatus:
    """Tests for get_call_status and get_call_transcript."""

    @pytest.mark.asyncio
    async def test_backend_not_found(self, registry, backend):
        backend.respond("get-call-status", status_code=404, json_body={"error": "Call not found"})

        result = await registry.dispatch("get_call_status", {"callId": "nope"})

        assert result == {"error": "Failed to get call status: Call not found"}

    @pytest.mark.asyncio
    async def test_transcript_passed_through(self, registry, backend):
        transcript = {
            "callId": "c1",
            "status": "completed",
            "recipientPhone": "+15551234567",
            "taskDetails": "Book a table",
            "transcript": [
                {"role": "assistant", "content": "Hello", "timestamp": "2024-01-15T14:30:00Z"},
            ],
            "metadata": {"vapiCallId": "v1", "totalMessages": 1},
        }
        backend.respond("get-call-transcript", json_body=transcript)

        result = await registry.dispatch("get_call_transcript", {"callId": "c1"})

        assert result == transcript

    @pytest.mark.asyncio
    async def test_backend_status_error_without_message(self, registry, backend):
        backend.respond("get-call-transcript", status_code=503, content=b"")

        result = await registry.dispatch("get_call_transcript", {"callId": "c1"})

        assert result == {"error": "Failed to get call transcript: HTTP 503: Service Unavailable"}


class TestManagementTools:
    """Tests for list_calls, cancel_call, share_call and get_credit_balance."""

    @pytest.mark.asyncio
    async def test_list_calls_defaults(self, registry, backend):
        backend.respond("list-calls", json_body={"calls": [], "total": 0, "hasMore": False})

        result = await registry.dispatch("list_calls", {})

        assert backend.last_body == {"status": "all", "limit": 20, "offset": 0}
        assert result == {"calls": [], "total": 0, "hasMore": False}

    @pytest.mark.asyncio
    async def test_list_calls_bad_limit(self, registry, backend):
        result = await registry.dispatch("list_calls", {"limit": 500})

        assert result["error"].startswith("Failed to list calls: limit:")
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_cancel_call(self, registry, backend):
        backend.respond(
            "cancel-call",
            json_body={"success": True, "message": "Call cancelled", "callId": "c1"},
        )

        result = await registry.dispatch("cancel_call", {"callId": "c1"})

        assert result["success"] is True
        assert backend.last_body == {"callId": "c1"}

    @pytest.mark.asyncio
    async def test_share_call_default_expiry(self, registry, backend):
        backend.respond(
            "share-call",
            json_body={
                "shareUrl": "https://callzero.ai/share/abc",
                "expiresAt": "2024-01-22T14:30:00Z",
                "callId": "c1",
            },
        )

        result = await registry.dispatch("share_call", {"callId": "c1"})

        assert backend.last_body == {"callId": "c1", "expiresInDays": 7}
        assert result["shareUrl"] == "https://callzero.ai/share/abc"

    @pytest.mark.asyncio
    async def test_credit_balance_with_minutes(self, registry, backend):
        backend.respond("get-credit-balance", json_body={"creditMinutes": 45, "planType": "pro"})

        result = await registry.dispatch("get_credit_balance", {})

        assert result == {
            "creditMinutes": 45,
            "planType": "pro",
            "message": "You have 45 minutes remaining",
        }

    @pytest.mark.asyncio
    async def test_credit_balance_empty(self, registry, backend):
        backend.respond("get-credit-balance", json_body={"creditMinutes": 0})

        result = await registry.dispatch("get_credit_balance", None)

        assert result["message"] == "No credits remaining. Visit callzero.ai/billing to add more."

    @pytest.mark.asyncio
    async def test_list_calls_rejects_string_and_bool_numbers(self, registry, backend):
        result = await registry.dispatch("list_calls", {"limit": "20", "offset": True})

        assert result["error"].startswith("Failed to list calls:")
        assert "limit:" in result["error"]
        assert "offset:" in result["error"]
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_make_call_null_optional_rejected(self, registry, backend):
        result = await registry.dispatch(
            "make_call",
            {"recipientPhone": "+15551234567", "taskDetails": "x", "scheduledFor": None},
        )

        assert result["error"].startswith("Failed to make call: scheduledFor:")
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_credit_balance_null_body(self, registry, backend):
        backend.respond("get-credit-balance", content=b"null")

        result = await registry.dispatch("get_credit_balance", {})

        assert list(result) == ["error"]
        assert result["error"].startswith("Failed to get credit balance:")

    @pytest.mark.asyncio
    async def test_credit_balance_non_numeric_minutes(self, registry, backend):
        backend.respond("get-credit-balance", json_body={"creditMinutes": "45"})

        result = await registry.dispatch("get_credit_balance", {})

        assert list(result) == ["error"]
        assert result["error"].startswith("Failed to get credit balance:")

    def test_credit_message_does_not_mutate_result(self):
        original = {"creditMinutes": 10}
        with_credit_message(original)
        assert original == {"creditMinutes": 10}

    @pytest.mark.asyncio
    async def test_rate_limit_reported_as_error_payload(self, registry, backend):
        for _ in range(50):
            await registry.dispatch("get_credit_balance", {})

        result = await registry.dispatch("get_credit_balance", {})

        assert result == {
            "error": "Failed to get credit balance: Rate limit exceeded. "
            "Please wait before making more requests."
        }
        assert len(backend.requests) == 50


class TestMemoryTools:
    """Tests for create_memory, search_memories and get_contact_memories."""

    @pytest.mark.asyncio
    async def test_create_memory_applies_defaults(self, registry, backend):
        await registry.dispatch(
            "create_memory",
            {"content": "Prefers afternoon calls", "relatedPhone": "+15551234567", "tags": ["schedule"]},
        )

        assert backend.last_body == {
            "content": "Prefers afternoon calls",
            "category": "general",
            "relatedPhone": "+15551234567",
            "tags": ["schedule"],
            "sensitivity": "medium",
        }

    @pytest.mark.asyncio
    async def test_create_memory_bad_category(self, registry, backend):
        result = await registry.dispatch("create_memory", {"content": "x", "category": "secret"})

        assert result["error"].startswith("Failed to create memory: category:")
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_search_memories(self, registry, backend):
        backend.respond("search-memories", json_body={"memories": [], "total": 0})

        result = await registry.dispatch("search_memories", {"query": "dentist", "category": "contact"})

        assert backend.last_body == {"query": "dentist", "category": "contact", "limit": 10}
        assert result == {"memories": [], "total": 0}

    @pytest.mark.asyncio
    async def test_contact_memories_invalid_phone(self, registry, backend):
        result = await registry.dispatch("get_contact_memories", {"phoneNumber": "+11234567890"})

        assert result["error"].startswith("Failed to get contact memories: phoneNumber:")
        assert backend.requests == []


class TestFormTemplates:
    """search_form_templates reports errors the same way as every other tool."""

    @pytest.mark.asyncio
    async def test_search(self, registry, backend):
        backend.respond("search-form-templates", json_body={"templates": [{"id": "t1"}]})

        result = await registry.dispatch("search_form_templates", {"query": "cancel att"})

        assert backend.last_body == {"query": "cancel att", "limit": 5}
        assert result == {"templates": [{"id": "t1"}]}

    @pytest.mark.asyncio
    async def test_backend_error_is_caught(self, registry, backend):
        backend.respond("search-form-templates", status_code=500, json_body={"error": "Search unavailable"})

        result = await registry.dispatch("search_form_templates", {"query": "xfinity bill"})

        assert result == {"error": "Failed to search form templates: Search unavailable"}

    @pytest.mark.asyncio
    async def test_validation_error_is_caught(self, registry):
        result = await registry.dispatch("search_form_templates", {"query": "x", "limit": 50})

        assert result["error"].startswith("Failed to search form templates: limit:")
