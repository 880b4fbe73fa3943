"""
Centralized logging for the function context library.

Function authors log through ``ExecutionContext.log`` and ``ExecutionContext.error``
so their lines show up in the platform console. This logger only carries the
library's own diagnostics.
"""

from aws_lambda_powertools.logging import Logger

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
# Level can be set by environment variable "POWERTOOLS_LOG_LEVEL"
logger: Logger = Logger(service='function-context')
