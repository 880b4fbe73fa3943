"""
Typed access to the execution context of a serverless function.

The host passes every invocation a single untyped context object. This package
wraps it in a documented surface:

- context: execution context facade, request and response views, headers
- models: host shape protocols, reserved headers, configuration model
- utils: environment variable parsers, errors and logging
"""

__version__ = "1.0.0"

from function_context.context import ExecutionContext, ExecutionRequest, ExecutionResponse, RequestHeaders
from function_context.models import FunctionEnvVars, Trigger, get_function_env_vars
from function_context.utils import (
    EnvVar,
    ErrorKind,
    FunctionContextError,
    HeaderTypeError,
    InvalidBooleanError,
    InvalidDoubleError,
    InvalidIntegerError,
    MissingEnvironmentVariableError,
)

__all__ = [
    "ExecutionContext",
    "ExecutionRequest",
    "ExecutionResponse",
    "RequestHeaders",
    "FunctionEnvVars",
    "Trigger",
    "get_function_env_vars",
    "EnvVar",
    "ErrorKind",
    "FunctionContextError",
    "HeaderTypeError",
    "InvalidBooleanError",
    "InvalidDoubleError",
    "InvalidIntegerError",
    "MissingEnvironmentVariableError",
]
