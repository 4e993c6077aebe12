"""Check a command's output dict against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas._registry import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` produced by ``func``.

    The schema is looked up from the function's location:
    ``picup.api.image.cmd_rewrite.cmd_rewrite`` maps to ``("image", "rewrite")``.
    Functions outside ``picup.api`` or without a registered schema pass
    through unchanged.

    Returns:
        The output re-dumped from the schema, with defaults filled in

    Raises:
        ValueError: If the output does not match the schema
    """
    package, _, domain = func.__module__.partition(".api.")
    if package != "picup" or not func.__name__.startswith("cmd_"):
        return output

    command_name = func.__name__.removeprefix("cmd_")
    schema_class = get_output_schema(domain.split(".")[0], command_name)
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"Output of {func.__module__}.{func.__name__} does not match {schema_class.__name__}: {e}") from e
