import asyncio
import json
import pytest
import httpx
from google.genai import errors as genai_errors
from backend.api import app
from client.errors import GatewayFailure, InvalidInput, NetworkFailure
from client.gateway import GatewayClient
from client.session import Level, ReviewSession, ReviewState


class RecordingClipboard:
    def __init__(self):
        self.writes = []

    def copy(self, text):
        self.writes.append(text)


def gateway_with(handler):
    return GatewayClient("http://gateway.test/", transport=httpx.MockTransport(handler))

# --- GatewayClient against a mocked transport ---

def test_review_posts_code():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"text": "## Review"})

    result = asyncio.run(gateway_with(handler).review("x = 1"))

    assert result.text == "## Review"
    assert result.message is None
    assert str(seen[0].url) == "http://gateway.test/get-service"
    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == {"code": "x = 1"}

def test_review_raw_string_body():
    def handler(request):
        return httpx.Response(200, text="plain markdown")

    result = asyncio.run(gateway_with(handler).review("x = 1"))
    assert result.text == "plain markdown"

def test_review_object_without_text_is_pretty_printed():
    def handler(request):
        return httpx.Response(200, json={"message": "done", "review": "abc"})

    result = asyncio.run(gateway_with(handler).review("x = 1"))

    assert result.message == "done"
    assert result.text == json.dumps({"message": "done", "review": "abc"}, indent=2)

def test_review_gateway_error_body():
    def handler(request):
        return httpx.Response(502, json={
            "detail": "AI provider returned an error (503): overloaded",
            "error": "provider_failure",
            "retryable": True,
        })

    with pytest.raises(GatewayFailure) as exc_info:
        asyncio.run(gateway_with(handler).review("x = 1"))

    failure = exc_info.value
    assert failure.status_code == 502
    assert failure.error == "provider_failure"
    assert failure.retryable is True
    assert "overloaded" in failure.message

def test_review_gateway_unreachable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkFailure):
        asyncio.run(gateway_with(handler).review("x = 1"))

def test_review_undecodable_body_is_network_failure():
    def handler(request):
        return httpx.Response(200, headers={"content-encoding": "gzip"}, content=b"not gzip")

    with pytest.raises(NetworkFailure):
        asyncio.run(gateway_with(handler).review("x = 1"))

@pytest.mark.parametrize("code", ["", "  \n "])
def test_review_empty_code_never_sent(code):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"text": "never"})

    with pytest.raises(InvalidInput):
        asyncio.run(gateway_with(handler).review(code))
    assert seen == []

# --- End to end: client session -> gateway app -> mocked Gemini ---

@pytest.fixture
def asgi_gateway():
    return GatewayClient("http://gateway.test", transport=httpx.ASGITransport(app=app))

def test_end_to_end_review_and_copy_code(asgi_gateway, mock_gemini_client, review_markdown):
    clipboard = RecordingClipboard()
    transitions = []
    session = ReviewSession(asgi_gateway, clipboard, on_state_change=transitions.append)
    session.code = "function add(a,b){return a+b}"

    assert asyncio.run(session.submit()) is True

    assert transitions == [ReviewState.SUBMITTING, ReviewState.SUCCEEDED, ReviewState.IDLE]
    assert session.review == review_markdown
    assert "### 📝 Corrected Code" in session.review

    assert session.copy_code() is True
    assert clipboard.writes == ["function add(a, b) {\n  return a + b;\n}"]

def test_end_to_end_provider_failure(asgi_gateway, mock_gemini_client):
    mock_gemini_client.return_value.aio.models.generate_content.side_effect = genai_errors.ClientError(
        403, {"error": {"code": 403, "message": "permission denied", "status": "PERMISSION_DENIED"}}
    )
    clipboard = RecordingClipboard()
    session = ReviewSession(asgi_gateway, clipboard)
    session.review = "earlier review"
    session.code = "x = 1"

    assert asyncio.run(session.submit()) is False

    assert session.loading is False
    assert session.state == ReviewState.IDLE
    assert session.review == "earlier review"
    assert session.notifications[-1].level == Level.ERROR
    assert session.notifications[-1].message == "Failed to review code"
