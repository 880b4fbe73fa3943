"""Typed projection over the execution request headers."""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, Optional, Type, TypeVar

from function_context.models import headers as reserved
from function_context.utils.errors import HeaderTypeError
from function_context.utils.observability import logger

T = TypeVar('T')


class RequestHeaders(Mapping):
    """
    Execution request headers.

    All keys are lower case. The named properties cover the headers the
    platform reserves for execution metadata; anything else is reachable
    through the regular read-only mapping interface. Lookups through the
    mapping interface are not case-normalised.
    """

    def __init__(self, headers: Dict[str, Any]):
        self._headers = headers

    @property
    def trigger(self) -> str:
        """
        Describes how the function execution was invoked.

        One of ``http``, ``schedule`` or ``event``, see ``Trigger``.
        """
        return self._headers.get(reserved.TRIGGER)

    @property
    def event(self) -> Any:
        """The triggering event, only set for event triggered executions."""
        return self._headers.get(reserved.EVENT)

    @property
    def key(self) -> Optional[str]:
        """The dynamic API key used for server authentication."""
        return self._headers.get(reserved.KEY)

    @property
    def user_id(self) -> Optional[str]:
        """
        ID of the user that invoked the execution.

        ``None`` for executions triggered from the console or with an API key.
        """
        return self._headers.get(reserved.USER_ID)

    @property
    def user_jwt(self) -> Optional[str]:
        """JWT generated from the invoking user's session, for user scoped SDK calls."""
        return self._headers.get(reserved.USER_JWT)

    @property
    def country_code(self) -> Optional[str]:
        return self._headers.get(reserved.COUNTRY_CODE)

    @property
    def continent_code(self) -> Optional[str]:
        return self._headers.get(reserved.CONTINENT_CODE)

    @property
    def continent_eu(self) -> Optional[str]:
        """Whether the configured locale is within the EU, as the string 'true' or 'false'."""
        return self._headers.get(reserved.CONTINENT_EU)

    @property
    def client_ip(self) -> Optional[str]:
        """IP address of the client that triggered the execution."""
        return self._headers.get(reserved.CLIENT_IP)

    @property
    def execution_id(self) -> str:
        """Unique ID of the current execution."""
        return self._headers.get(reserved.EXECUTION_ID)

    def require_value(self, key: str, expected_type: Type[T]) -> T:
        """
        Return a header value, asserting its runtime type.

        Args:
            key: Lower case header name
            expected_type: Type (or tuple of types) the value must be an instance of

        Returns:
            The header value

        Raises:
            HeaderTypeError: If the header is absent or has another type
        """
        value = self._headers.get(key)
        if not isinstance(value, expected_type):
            error = HeaderTypeError(key, expected_type, value)
            details = error.to_dict()
            # 'message' is reserved on log records
            details.pop('message')
            logger.debug('Header type mismatch', extra=details)
            raise error
        return value

    def for_each(self, action: Callable[[str, Any], None]) -> None:
        """Call ``action(key, value)`` for every header."""
        for key, value in self._headers.items():
            action(key, value)

    def __getitem__(self, key: str) -> Any:
        return self._headers[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f'RequestHeaders({self._headers!r})'
