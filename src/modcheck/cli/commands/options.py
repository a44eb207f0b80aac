"""Shared click options for commands that talk to a module registry."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from click.core import ParameterSource

from modcheck.core.context import ModcheckContext

registry_option_decorators = [
    click.argument(
        "path",
        required=False,
        type=click.Path(file_okay=False, path_type=Path),
    ),
    click.option(
        "--public/--private",
        "public_registry",
        default=False,
        help="Check against the public registry instead of the private one.",
    ),
    click.option(
        "--address",
        envvar="MODCHECK_ADDRESS",
        help="Private registry host (default: app.terraform.io).",
    ),
    click.option(
        "--organization",
        envvar="MODCHECK_ORGANIZATION",
        help="Private organization, or public namespace with --public.",
    ),
    click.option(
        "--token",
        envvar="TFE_TOKEN",
        help="API token for the private registry.",
    ),
    click.option(
        "--format",
        "output_format",
        type=click.Choice(["text", "json"]),
        default="text",
        help="Output format (text or json)",
    ),
]


def registry_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Apply the PATH argument and registry connection options to a command."""
    for decorator in reversed(registry_option_decorators):
        func = decorator(func)
    return func


def explicit_flag(name: str, value: bool) -> bool | None:
    """Return a boolean flag's value, or None when the user did not pass it.

    Unset flags must not override values from .modcheck.toml.
    """
    source = click.get_current_context().get_parameter_source(name)
    if source is None or source == ParameterSource.DEFAULT:
        return None
    return value


def resolve_root_dir(ctx: ModcheckContext, path: Path | None) -> Path:
    """Configuration directory to check, relative paths taken from the invocation cwd."""
    if path is None:
        return ctx.cwd
    if path.is_absolute():
        return path
    return ctx.cwd / path
