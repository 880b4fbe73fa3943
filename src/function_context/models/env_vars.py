"""
Environment variable model for type-safe function configuration.

The platform injects the same set of variables into every function. Build the
model once at startup with ``get_function_env_vars`` and pass it to whatever
needs it instead of reading ``os.environ`` from deep inside the code.
"""

from typing import Annotated

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, ConfigDict, Field


class FunctionEnvVars(BaseModel):
    """Platform supplied environment variables."""

    model_config = ConfigDict(frozen=True)

    # Always set by the platform at run time
    APPWRITE_FUNCTION_API_ENDPOINT: Annotated[str, Field(
        description='API endpoint of the running function',
        min_length=1
    )]

    APPWRITE_FUNCTION_ID: Annotated[str, Field(
        description='Unique ID of the running function',
        min_length=1
    )]

    APPWRITE_FUNCTION_PROJECT_ID: Annotated[str, Field(
        description='Project ID the function belongs to',
        min_length=1
    )]

    APPWRITE_VERSION: Annotated[str | None, Field(
        default=None,
        description='Platform version running the function'
    )] = None

    APPWRITE_REGION: Annotated[str | None, Field(
        default=None,
        description='Region where the function is running'
    )] = None

    # Only available at build time
    APPWRITE_FUNCTION_API_KEY: Annotated[str | None, Field(
        default=None,
        description='Function API key used for server authentication'
    )] = None

    APPWRITE_FUNCTION_NAME: Annotated[str | None, Field(
        default=None,
        description='Name of the running function'
    )] = None

    APPWRITE_FUNCTION_DEPLOYMENT: Annotated[str | None, Field(
        default=None,
        description='Deployment ID of the current execution'
    )] = None

    APPWRITE_FUNCTION_RUNTIME_NAME: Annotated[str | None, Field(
        default=None,
        description="Name of the function's runtime"
    )] = None

    APPWRITE_FUNCTION_RUNTIME_VERSION: Annotated[str | None, Field(
        default=None,
        description="Version of the function's runtime"
    )] = None

    @property
    def endpoint(self) -> str:
        return self.APPWRITE_FUNCTION_API_ENDPOINT

    @property
    def project_id(self) -> str:
        return self.APPWRITE_FUNCTION_PROJECT_ID

    @property
    def function_id(self) -> str:
        return self.APPWRITE_FUNCTION_ID

    @property
    def api_key(self) -> str | None:
        return self.APPWRITE_FUNCTION_API_KEY


def get_function_env_vars() -> FunctionEnvVars:
    """
    Get typed platform environment variables.

    The model is parsed once per process and cached by the modeler.

    Returns:
        Validated environment variables model instance

    Raises:
        pydantic.ValidationError: If a required variable is missing
    """
    return get_environment_variables(model=FunctionEnvVars)
