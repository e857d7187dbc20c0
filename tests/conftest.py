import pytest
from unittest import mock
from fastapi.testclient import TestClient
from backend.api import app, get_gateway, settings

REVIEW_MARKDOWN = """## 🔴 Bugs / Problems
- Missing spaces and semicolon.

### 📝 Corrected Code (Full Snippet)
```javascript
function add(a, b) {
  return a + b;
}
```

### 👀 Preview (if applicable)
- Returns the sum of two numbers.
"""

@pytest.fixture(scope="module")
def client():
    return TestClient(app)

@pytest.fixture
def base_payload():
    return {
        "code": "function add(a,b){return a+b}",
    }

@pytest.fixture
def no_backoff():
    original_backoff = settings.PROVIDER_BACKOFF_SECONDS
    original_retries = settings.PROVIDER_MAX_RETRIES

    settings.PROVIDER_BACKOFF_SECONDS = 0
    settings.PROVIDER_MAX_RETRIES = 2

    yield settings

    settings.PROVIDER_BACKOFF_SECONDS = original_backoff
    settings.PROVIDER_MAX_RETRIES = original_retries

@pytest.fixture
def mock_gemini_client(no_backoff):
    get_gateway.cache_clear()
    with mock.patch("backend.gemini.genai.Client") as mock_client:
        instance = mock_client.return_value
        instance.aio.models.generate_content = mock.AsyncMock(
            return_value=mock.Mock(text=REVIEW_MARKDOWN)
        )
        yield mock_client
    get_gateway.cache_clear()

@pytest.fixture
def review_markdown():
    return REVIEW_MARKDOWN
