"""Typed view over the execution response builder (``context.res``)."""

from typing import Any, Mapping

from function_context.models.host import HostResponse

HTML_HEADERS = {'content-type': 'text/html'}


class ExecutionResponse:
    """
    Wrapper for the response builder of the execution context.

    Each method builds the host's response object and returns it untouched.
    The function must return that object to the host, and only one response
    can be produced per execution.
    """

    def __init__(self, res: HostResponse):
        self._res = res

    def empty(self) -> Any:
        """Send a 204 No Content response."""
        return self._res.empty()

    def json(self, data: Mapping[str, Any], status_code: int = 200) -> Any:
        """Serialize ``data`` as JSON with the content-type header set to application/json."""
        return self._res.json(data, status_code)

    def binary(self, content: bytes, status_code: int = 200) -> Any:
        """Send raw bytes."""
        return self._res.binary(content, status_code)

    def redirect(self, url: str, status_code: int = 301) -> Any:
        """Redirect the client to ``url``."""
        return self._res.redirect(url, status_code)

    def html(self, html: str, status_code: int = 200) -> Any:
        """Send an HTML document with the content-type header set to text/html."""
        return self._res.text(html, status_code, dict(HTML_HEADERS))

    def text(self, text: str, status_code: int = 200) -> Any:
        """Send a UTF-8 encoded text body."""
        return self._res.text(text, status_code)

    def success(self, message: str = '', status_code: int = 200) -> Any:
        """Send a success response with an optional message."""
        return self._res.text(message, status_code)

    def error(self, message: str = '', status_code: int = 500) -> Any:
        """Send an error response with an optional message."""
        return self._res.text(message, status_code)
