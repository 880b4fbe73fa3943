"""
Pytest configuration and shared fixtures for the function context library.

This module provides a fake host execution context that mimics the object the
function runtime passes to ``main(context)``, plus environment helpers.
"""

from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from function_context.utils import env_var

PLATFORM_ENV_KEYS = (
    env_var.API_ENDPOINT,
    env_var.VERSION,
    env_var.REGION,
    env_var.API_KEY,
    env_var.FUNCTION_ID,
    env_var.FUNCTION_NAME,
    env_var.DEPLOYMENT_ID,
    env_var.PROJECT_ID,
    env_var.RUNTIME_NAME,
    env_var.RUNTIME_VERSION,
)


class FakeResponse:
    """Response builder returning plain dicts, shaped like the runtime's output."""

    def __init__(self):
        self.calls: List[tuple] = []

    def _build(self, body: Any, status_code: int, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return {"body": body, "statusCode": status_code, "headers": dict(headers or {})}

    def empty(self):
        self.calls.append(("empty",))
        return self._build("", 204)

    def json(self, obj, status_code=200):
        self.calls.append(("json", obj, status_code))
        return self._build(obj, status_code, {"content-type": "application/json"})

    def binary(self, content, status_code=200):
        self.calls.append(("binary", content, status_code))
        return self._build(content, status_code)

    def redirect(self, url, status_code=301):
        self.calls.append(("redirect", url, status_code))
        return self._build("", status_code, {"location": url})

    def text(self, body, status_code=200, headers=None):
        self.calls.append(("text", body, status_code, headers))
        merged = {"content-type": "text/plain"}
        merged.update(headers or {})
        return self._build(body, status_code, merged)


class FakeContext:
    """Execution context double recording log lines."""

    def __init__(self, req: SimpleNamespace, res: FakeResponse):
        self.req = req
        self.res = res
        self.logs: List[str] = []
        self.errors: List[str] = []

    def log(self, message):
        self.logs.append(message)

    def error(self, message):
        self.errors.append(message)


def make_request(**overrides) -> SimpleNamespace:
    """Build a host request object with sensible defaults."""
    fields = {
        "body_text": '{"hello": "world"}',
        "body_json": {"hello": "world"},
        "body_binary": b'{"hello": "world"}',
        "headers": {
            "content-type": "application/json",
            "x-appwrite-trigger": "http",
            "x-appwrite-execution-id": "exec-123",
        },
        "scheme": "https",
        "method": "GET",
        "url": "https://awesome.appwrite.io:8000/v1/hooks?limit=12&offset=50",
        "host": "awesome.appwrite.io",
        "port": 8000,
        "path": "/v1/hooks",
        "query_string": "limit=12&offset=50",
        "query": {"limit": "12", "offset": "50"},
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.fixture
def request_factory():
    """Factory building host request objects, keyword arguments override defaults."""
    return make_request


@pytest.fixture
def host_request() -> SimpleNamespace:
    """A host request object with default values."""
    return make_request()


@pytest.fixture
def host_response() -> FakeResponse:
    """A recording host response builder."""
    return FakeResponse()


@pytest.fixture
def host_context(host_request, host_response) -> FakeContext:
    """A host execution context wrapping the default request and response."""
    return FakeContext(host_request, host_response)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove platform variables so tests never depend on the developer's shell."""
    for key in PLATFORM_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def platform_environment(monkeypatch) -> Dict[str, str]:
    """Set every platform variable to a known value."""
    values = {
        env_var.API_ENDPOINT: "https://cloud.appwrite.io/v1",
        env_var.VERSION: "1.6.0",
        env_var.REGION: "fra",
        env_var.API_KEY: "standard_key",
        env_var.FUNCTION_ID: "function-1",
        env_var.FUNCTION_NAME: "starter",
        env_var.DEPLOYMENT_ID: "deployment-1",
        env_var.PROJECT_ID: "project-1",
        env_var.RUNTIME_NAME: "python-3.11",
        env_var.RUNTIME_VERSION: "3.11",
    }
    for key, value in values.items():
        monkeypatch.setenv(key, value)
    return values


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
