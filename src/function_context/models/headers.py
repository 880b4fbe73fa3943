"""
Reserved request headers set by the platform on every execution.

All keys are lower case, the host normalises header names before handing them
to the function.
"""

from enum import Enum


class Trigger(str, Enum):
    """How a function execution was invoked."""

    HTTP = 'http'
    SCHEDULE = 'schedule'
    EVENT = 'event'


TRIGGER = 'x-appwrite-trigger'
EVENT = 'x-appwrite-event'
KEY = 'x-appwrite-key'
USER_ID = 'x-appwrite-user-id'
USER_JWT = 'x-appwrite-user-jwt'
COUNTRY_CODE = 'x-appwrite-country-code'
CONTINENT_CODE = 'x-appwrite-continent-code'
CONTINENT_EU = 'x-appwrite-continent-eu'
CLIENT_IP = 'x-appwrite-client-ip'
EXECUTION_ID = 'x-appwrite-execution-id'

RESERVED_HEADERS = (
    TRIGGER,
    EVENT,
    KEY,
    USER_ID,
    USER_JWT,
    COUNTRY_CODE,
    CONTINENT_CODE,
    CONTINENT_EU,
    CLIENT_IP,
    EXECUTION_ID,
)
