from typing import Any

from appwrite.client import Client
from appwrite.services.users import Users

from function_context import ExecutionContext, get_function_env_vars

MOTTO = {
    "motto": "Build like a team of hundreds_",
    "learn": "https://appwrite.io/docs",
    "connect": "https://appwrite.io/discord",
    "getInspired": "https://builtwith.appwrite.io",
}


def build_users_service(execution: ExecutionContext) -> Users:
    """Create a Users service authenticated with the execution's dynamic API key."""
    env = get_function_env_vars()
    client = (
        Client()
        .set_endpoint(env.endpoint)
        .set_project(env.project_id)
        .set_key(execution.headers.key or "")
    )
    return Users(client)


def main(context: Any) -> Any:
    """
    Starter function entry point.

    Args:
        context: Execution context passed by the function runtime

    Returns:
        The runtime response object
    """
    # Wrap the untyped context once per execution
    execution = ExecutionContext(context)

    try:
        response = build_users_service(execution).list()
        # Logs are visible in the console, not to end users
        execution.log("Total users: " + str(response["total"]))
    except Exception as e:
        execution.error("Could not list users: " + str(e))

    if execution.req.path == "/ping":
        return execution.res.text("Pong")

    return execution.res.json(MOTTO)
