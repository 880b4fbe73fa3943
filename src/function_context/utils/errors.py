"""
Error taxonomy for the function context library.

Every failure the library raises on its own behalf derives from
``FunctionContextError`` and carries a discriminated ``kind`` together with the
offending key and value, so callers can branch on ``error.kind`` instead of
parsing messages. Each concrete error also subclasses the closest builtin
exception, which keeps plain ``except ValueError`` handlers working.

Errors produced by the host object itself (for example a context missing its
``req`` attribute) are never wrapped here.
"""

from enum import Enum
from typing import Any, Dict


class ErrorKind(str, Enum):
    """Discriminator for library errors."""
    MISSING = "MISSING"
    INVALID_BOOL = "INVALID_BOOL"
    INVALID_INT = "INVALID_INT"
    INVALID_DOUBLE = "INVALID_DOUBLE"
    HEADER_TYPE_MISMATCH = "HEADER_TYPE_MISMATCH"


class FunctionContextError(Exception):
    """Base exception class for function context errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        key: str,
        value: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.key = key
        self.value = value

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for structured logging."""
        return {
            "kind": self.kind.value,
            "key": self.key,
            "value": self.value,
            "message": self.message,
        }


class MissingEnvironmentVariableError(FunctionContextError, KeyError):
    """Raised when a required environment variable is not set."""

    def __init__(self, key: str):
        super().__init__(
            message=f"Environment variable {key} is not set",
            kind=ErrorKind.MISSING,
            key=key,
        )


class InvalidBooleanError(FunctionContextError, ValueError):
    """Raised when an environment variable is not a recognised boolean."""

    def __init__(self, key: str, value: str):
        super().__init__(
            message=f"parse_bool: Key {key} with value {value} is not a valid boolean",
            kind=ErrorKind.INVALID_BOOL,
            key=key,
            value=value,
        )


class InvalidIntegerError(FunctionContextError, ValueError):
    """Raised when an environment variable is not a base-10 integer."""

    def __init__(self, key: str, value: str):
        super().__init__(
            message=f"parse_int: Key {key} with value {value} is not a valid integer",
            kind=ErrorKind.INVALID_INT,
            key=key,
            value=value,
        )


class InvalidDoubleError(FunctionContextError, ValueError):
    """Raised when an environment variable is not a floating point number."""

    def __init__(self, key: str, value: str):
        super().__init__(
            message=f"parse_double: Key {key} with value {value} is not a valid double",
            kind=ErrorKind.INVALID_DOUBLE,
            key=key,
            value=value,
        )


class HeaderTypeError(FunctionContextError, TypeError):
    """Raised when a header value does not have the requested type."""

    def __init__(self, key: str, expected_type: type, value: Any):
        self.expected_type = expected_type
        self.actual_type = type(value)
        super().__init__(
            message=(
                f'Expected header "{key}" to be of type {_type_name(expected_type)} '
                f'but got {_type_name(self.actual_type)}'
            ),
            kind=ErrorKind.HEADER_TYPE_MISMATCH,
            key=key,
            value=value,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["expected_type"] = _type_name(self.expected_type)
        data["actual_type"] = _type_name(self.actual_type)
        return data


def _type_name(tp: Any) -> str:
    if isinstance(tp, tuple):
        return " | ".join(_type_name(t) for t in tp)
    return getattr(tp, "__name__", repr(tp))
