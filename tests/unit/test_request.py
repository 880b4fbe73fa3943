"""Unit tests for the ExecutionRequest view."""

import pytest

from function_context.context.headers import RequestHeaders
from function_context.context.request import ExecutionRequest

PASS_THROUGH_PROPERTIES = (
    "body_text",
    "body_json",
    "body_binary",
    "headers",
    "scheme",
    "method",
    "url",
    "host",
    "port",
    "path",
    "query_string",
    "query",
)


class TestExecutionRequest:
    """Test cases for the request properties."""

    @pytest.mark.parametrize("attribute", PASS_THROUGH_PROPERTIES)
    def test_property_reads_host_request(self, host_request, attribute):
        """Test that each property reads the matching host request field."""
        request = ExecutionRequest(host_request)
        assert getattr(request, attribute) == getattr(host_request, attribute)

    def test_values(self, host_request):
        """Test the values of the default request."""
        request = ExecutionRequest(host_request)

        assert request.method == "GET"
        assert request.scheme == "https"
        assert request.host == "awesome.appwrite.io"
        assert request.port == 8000
        assert request.path == "/v1/hooks"
        assert request.query_string == "limit=12&offset=50"
        assert request.query["limit"] == "12"

    def test_body_json_falls_back_to_host_value(self, request_factory):
        """Test that body_json returns whatever the host parsed, including a raw string."""
        host_request = request_factory(body_text="not json", body_json="not json")
        request = ExecutionRequest(host_request)

        assert request.body_json == "not json"
        assert request.body_text == "not json"

    def test_body_binary(self, request_factory):
        """Test reading the binary body."""
        host_request = request_factory(body_binary=b"\x00\x01\x02")
        assert ExecutionRequest(host_request).body_binary == b"\x00\x01\x02"

    def test_headers_are_the_host_mapping(self, host_request):
        """Test that headers returns the host mapping itself."""
        request = ExecutionRequest(host_request)
        assert request.headers is host_request.headers

    def test_request_headers(self, host_request):
        """Test that request_headers wraps the headers in a projection."""
        request = ExecutionRequest(host_request)

        headers = request.request_headers

        assert isinstance(headers, RequestHeaders)
        assert headers.trigger == "http"
        assert headers.execution_id == "exec-123"

    def test_properties_are_stable(self, host_request):
        """Test that repeated reads return the same values."""
        request = ExecutionRequest(host_request)
        assert request.url == request.url
        assert request.query == request.query

    def test_missing_attribute_fails_on_use(self):
        """Test that a request missing a field fails when the field is read."""
        request = ExecutionRequest(object())
        with pytest.raises(AttributeError):
            request.method
