"""Environment parsing, error types and logging."""

from function_context.utils.env_var import EnvVar
from function_context.utils.errors import (
    ErrorKind,
    FunctionContextError,
    HeaderTypeError,
    InvalidBooleanError,
    InvalidDoubleError,
    InvalidIntegerError,
    MissingEnvironmentVariableError,
)
from function_context.utils.observability import logger

__all__ = [
    "EnvVar",
    "ErrorKind",
    "FunctionContextError",
    "HeaderTypeError",
    "InvalidBooleanError",
    "InvalidDoubleError",
    "InvalidIntegerError",
    "MissingEnvironmentVariableError",
    "logger",
]
