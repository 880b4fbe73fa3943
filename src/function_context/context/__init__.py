"""Wrappers over the host execution context."""

from function_context.context.execution_context import ExecutionContext
from function_context.context.headers import RequestHeaders
from function_context.context.request import ExecutionRequest
from function_context.context.response import ExecutionResponse

__all__ = [
    "ExecutionContext",
    "ExecutionRequest",
    "ExecutionResponse",
    "RequestHeaders",
]
