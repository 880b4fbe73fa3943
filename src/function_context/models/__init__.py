"""Host shape, reserved headers and configuration models."""

from function_context.models.env_vars import FunctionEnvVars, get_function_env_vars
from function_context.models.headers import RESERVED_HEADERS, Trigger
from function_context.models.host import HostContext, HostRequest, HostResponse

__all__ = [
    "FunctionEnvVars",
    "get_function_env_vars",
    "RESERVED_HEADERS",
    "Trigger",
    "HostContext",
    "HostRequest",
    "HostResponse",
]
