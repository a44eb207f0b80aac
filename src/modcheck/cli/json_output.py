"""JSON output utilities for CLI commands with machine-parseable output."""

import json
from collections.abc import Callable
from functools import wraps
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from modcheck.cli.ensure import Ensure
from modcheck.cli.output import machine_output
from modcheck.core.errors import ModcheckError


class ErrorResponse(BaseModel):
    """Pydantic model for error JSON responses.

    Attributes:
        error: Error message
        error_type: Error class name (e.g., "RegistryUnreachable")
        exit_code: Exit code for the process
    """

    model_config = ConfigDict(strict=True)

    error: str
    error_type: str
    exit_code: int = Field(default=1, ge=0, le=255)


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    For Pydantic models, call model.model_dump(mode='json') before
    passing to this function.
    """
    machine_output(json.dumps(data, indent=2))


def emit_json_error(error: str, error_type: str, exit_code: int = 1) -> None:
    """Output error as JSON and exit.

    Raises:
        SystemExit: Always raises to terminate with specified exit code
    """
    error_response = ErrorResponse(
        error=error,
        error_type=error_type,
        exit_code=exit_code,
    )
    emit_json(error_response.model_dump(mode="json"))
    raise SystemExit(exit_code)


def error_boundary(func: Callable) -> Callable:
    """Decorator turning modcheck errors into CLI failures.

    Inspects function kwargs for 'output_format'. In JSON mode any exception is
    emitted as a JSON error document. In text mode ModcheckError is reported
    with a styled "Error:" line; other exceptions bubble up unchanged.

    Example:
        @click.command()
        @click.option("--format", "output_format", type=click.Choice(["text", "json"]))
        @error_boundary
        def my_command(output_format: str) -> None:
            ...
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except Exception as e:
            if kwargs.get("output_format", "text") == "json":
                emit_json_error(str(e), type(e).__name__, exit_code=1)
            if isinstance(e, ModcheckError):
                Ensure.fail(str(e))
            raise

    return wrapper
