"""
Typed access to the environment variables the platform injects into a function.

Every accessor reads ``os.environ`` on each call, nothing is cached. Prefer the
``FunctionEnvVars`` model for configuration that is read once at startup and
handed to the components that need it.
"""

import os

from function_context.utils.errors import (
    InvalidBooleanError,
    InvalidDoubleError,
    InvalidIntegerError,
    MissingEnvironmentVariableError,
)
from function_context.utils.observability import logger

# Platform supplied variables
API_ENDPOINT = 'APPWRITE_FUNCTION_API_ENDPOINT'
VERSION = 'APPWRITE_VERSION'
REGION = 'APPWRITE_REGION'
API_KEY = 'APPWRITE_FUNCTION_API_KEY'
FUNCTION_ID = 'APPWRITE_FUNCTION_ID'
FUNCTION_NAME = 'APPWRITE_FUNCTION_NAME'
DEPLOYMENT_ID = 'APPWRITE_FUNCTION_DEPLOYMENT'
PROJECT_ID = 'APPWRITE_FUNCTION_PROJECT_ID'
RUNTIME_NAME = 'APPWRITE_FUNCTION_RUNTIME_NAME'
RUNTIME_VERSION = 'APPWRITE_FUNCTION_RUNTIME_VERSION'

_TRUE_VALUES = ('true', '1')
_FALSE_VALUES = ('false', '0')
_DIGIT_SEPARATOR = '_'


class EnvVar:
    """Static parsers over the process environment."""

    @staticmethod
    def endpoint() -> str:
        """The API endpoint of the running function."""
        return EnvVar.parse_string(API_ENDPOINT)

    @staticmethod
    def appwrite_version() -> str:
        """The platform version running the function. Available at build and run time."""
        return EnvVar.parse_string(VERSION)

    @staticmethod
    def region() -> str:
        """The region where the function is running. Available at build and run time."""
        return EnvVar.parse_string(REGION)

    @staticmethod
    def api_key() -> str:
        """The function's API key, used for server authentication. Available at build time."""
        return EnvVar.parse_string(API_KEY)

    @staticmethod
    def function_id() -> str:
        """The unique ID of the running function."""
        return EnvVar.parse_string(FUNCTION_ID)

    @staticmethod
    def function_name() -> str:
        """The name of the running function."""
        return EnvVar.parse_string(FUNCTION_NAME)

    @staticmethod
    def deployment_id() -> str:
        """The deployment ID of the current execution."""
        return EnvVar.parse_string(DEPLOYMENT_ID)

    @staticmethod
    def project_id() -> str:
        """The project ID the function belongs to."""
        return EnvVar.parse_string(PROJECT_ID)

    @staticmethod
    def runtime_name() -> str:
        """The name of the function's runtime, e.g. 'python-3.11'."""
        return EnvVar.parse_string(RUNTIME_NAME)

    @staticmethod
    def runtime_version() -> str:
        """The version of the function's runtime."""
        return EnvVar.parse_string(RUNTIME_VERSION)

    @staticmethod
    def parse_string(key: str) -> str:
        """
        Read an environment variable as a string.

        Args:
            key: Environment variable name

        Returns:
            The raw value

        Raises:
            MissingEnvironmentVariableError: If the variable is not set
        """
        value = os.environ.get(key)
        if value is None:
            logger.debug('Environment variable not set', extra={'key': key})
            raise MissingEnvironmentVariableError(key)
        return value

    @staticmethod
    def parse_bool(key: str) -> bool:
        """
        Read an environment variable as a boolean.

        Accepts 'true'/'1' and 'false'/'0', case-insensitive.

        Raises:
            MissingEnvironmentVariableError: If the variable is not set
            InvalidBooleanError: For any other value
        """
        value = EnvVar.parse_string(key).lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        logger.debug('Invalid boolean environment variable', extra={'key': key, 'value': value})
        raise InvalidBooleanError(key, value)

    @staticmethod
    def parse_int(key: str) -> int:
        """
        Read an environment variable as a base-10 integer.

        Raises:
            MissingEnvironmentVariableError: If the variable is not set
            InvalidIntegerError: If the value is not an integer
        """
        value = EnvVar.parse_string(key)
        # int() also accepts digit separators like "1_000"
        if _DIGIT_SEPARATOR not in value:
            try:
                return int(value, 10)
            except ValueError:
                pass
        logger.debug('Invalid integer environment variable', extra={'key': key, 'value': value})
        raise InvalidIntegerError(key, value)

    @staticmethod
    def parse_double(key: str) -> float:
        """
        Read an environment variable as a floating point number.

        Raises:
            MissingEnvironmentVariableError: If the variable is not set
            InvalidDoubleError: If the value is not a number
        """
        value = EnvVar.parse_string(key)
        if _DIGIT_SEPARATOR not in value:
            try:
                return float(value)
            except ValueError:
                pass
        logger.debug('Invalid double environment variable', extra={'key': key, 'value': value})
        raise InvalidDoubleError(key, value)
