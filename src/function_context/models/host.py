"""
Shape of the execution context handed over by the function host.

The host passes a plain, untyped object. These protocols describe exactly what
the wrappers in ``function_context.context`` read from it, so any object with
matching attributes (the real runtime context, a ``SimpleNamespace`` or a test
double) can be wrapped.
"""

from typing import Any, Dict, Mapping, Optional, Protocol


class HostRequest(Protocol):
    """The ``context.req`` object."""

    body_text: str
    body_json: Any
    body_binary: bytes
    headers: Dict[str, Any]
    scheme: str
    method: str
    url: str
    host: str
    port: int
    path: str
    query_string: str
    query: Dict[str, Any]


class HostResponse(Protocol):
    """
    The ``context.res`` object.

    Status codes and headers are always passed positionally, the host runtimes
    do not agree on keyword names.
    """

    def empty(self) -> Any:
        ...

    def json(self, obj: Mapping[str, Any], status_code: int = 200) -> Any:
        ...

    def binary(self, content: bytes, status_code: int = 200) -> Any:
        ...

    def redirect(self, url: str, status_code: int = 301) -> Any:
        ...

    def text(
        self,
        body: str,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        ...


class HostContext(Protocol):
    """The context object the host passes to ``main(context)``."""

    req: HostRequest
    res: HostResponse

    def log(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...
