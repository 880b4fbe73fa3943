"""Typed view over the execution request (``context.req``)."""

from typing import Any, Dict

from function_context.context.headers import RequestHeaders
from function_context.models.host import HostRequest


class ExecutionRequest:
    """
    Wrapper for the request object of the execution context.

    Every property is a direct read from the host object, nothing is parsed
    or cached here.
    """

    def __init__(self, req: HostRequest):
        self._req = req

    @property
    def body_text(self) -> str:
        """The raw request body as a string."""
        return self._req.body_text

    @property
    def body_json(self) -> Any:
        """
        The parsed JSON request body.

        An object if the body was valid JSON, otherwise the raw string.
        """
        return self._req.body_json

    @property
    def body_binary(self) -> bytes:
        """The raw binary body of the request."""
        return self._req.body_binary

    @property
    def headers(self) -> Dict[str, Any]:
        """Raw request headers (lower case keys)."""
        return self._req.headers

    @property
    def request_headers(self) -> RequestHeaders:
        """The request headers as a ``RequestHeaders`` projection."""
        return RequestHeaders(self._req.headers)

    @property
    def scheme(self) -> str:
        """'http' or 'https', derived from the 'x-forwarded-proto' header."""
        return self._req.scheme

    @property
    def method(self) -> str:
        """The HTTP method, e.g. 'GET' or 'POST'."""
        return self._req.method

    @property
    def url(self) -> str:
        """
        The full request URL.

        For example: 'http://awesome.appwrite.io:8000/v1/hooks?limit=12&offset=50'
        """
        return self._req.url

    @property
    def host(self) -> str:
        """The hostname from the 'host' header, e.g. 'awesome.appwrite.io'."""
        return self._req.host

    @property
    def port(self) -> int:
        """The port from the 'host' header."""
        return self._req.port

    @property
    def path(self) -> str:
        """The path part of the URL, e.g. '/v1/hooks'."""
        return self._req.path

    @property
    def query_string(self) -> str:
        """The raw query string without the leading '?', e.g. 'limit=12&offset=50'."""
        return self._req.query_string

    @property
    def query(self) -> Dict[str, Any]:
        """The parsed query parameters, e.g. ``query['limit']``."""
        return self._req.query
