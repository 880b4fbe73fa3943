"""
Typed wrapper around the execution context passed to a function.

Full documentation: https://appwrite.io/docs/products/functions/develop#request
"""

from function_context.context.headers import RequestHeaders
from function_context.context.request import ExecutionRequest
from function_context.context.response import ExecutionResponse
from function_context.models.host import HostContext


class ExecutionContext:
    """
    Wrapper around the context to provide type safety.

    Every execution has its own context holding the request and response
    objects. Wrap it once at the top of ``main(context)``. The host object is
    not validated up front; a context without the expected attributes fails
    with the host's ``AttributeError`` when the attribute is first used.
    """

    def __init__(self, context: HostContext):
        self._context = context

    @property
    def req(self) -> ExecutionRequest:
        """The request that invoked the function."""
        return ExecutionRequest(self._context.req)

    @property
    def res(self) -> ExecutionResponse:
        """The response builder used to answer the invocation."""
        return ExecutionResponse(self._context.res)

    request = req
    response = res

    @property
    def headers(self) -> RequestHeaders:
        """The request headers of the execution."""
        return RequestHeaders(self._context.req.headers)

    def log(self, message: str) -> None:
        """Write a message to the execution log."""
        self._context.log(message)

    def error(self, message: str) -> None:
        """Write an error message to the execution log."""
        self._context.error(message)
