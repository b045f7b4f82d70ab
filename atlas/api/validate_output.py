"""Validate command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` of a ``cmd_*`` function against its schema.

    The domain is the package containing the command module; the command
    name is the function name without the ``cmd_`` prefix.

    Raises:
        ValueError: If no schema is registered or the output does not match
    """
    domain = func.__module__.split(".")[-2]
    command_name = func.__name__.removeprefix("cmd_")
    schema = get_output_schema(domain, command_name)
    if schema is None:
        raise ValueError(f"No output schema registered for {domain}.{command_name}")
    try:
        return schema(**output).model_dump(mode="python")
    except Exception as e:
        raise ValueError(f"{domain}.{command_name}: {e}") from e
