"""Check command - validates module calls pin the latest registry version."""

from pathlib import Path

import click

from modcheck.cli.commands.options import explicit_flag, registry_options, resolve_root_dir
from modcheck.cli.config import load_config, resolve_registry_config
from modcheck.cli.json_output import emit_json, error_boundary
from modcheck.cli.json_schemas import CheckCommandResponse
from modcheck.cli.output import machine_output, user_output
from modcheck.core.context import ModcheckContext
from modcheck.core.validate import validate_modules


@click.command("check")
@registry_options
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Also report private registry sources that are not published in the registry.",
)
@click.pass_obj
@error_boundary
def check_cmd(
    ctx: ModcheckContext,
    path: Path | None,
    public_registry: bool,
    address: str | None,
    organization: str | None,
    token: str | None,
    output_format: str,
    strict: bool,
) -> None:
    """Check that every module call under PATH pins the latest registry version.

    PATH defaults to the current directory. Exits with status 1 when any
    module is not on its latest version.
    """
    root_dir = resolve_root_dir(ctx, path)
    config = resolve_registry_config(
        load_config(root_dir),
        public_registry=explicit_flag("public_registry", public_registry),
        address=address,
        organization=organization,
        token=token,
        strict=explicit_flag("strict", strict),
    )

    result = validate_modules(ctx, config, root_dir)

    if output_format == "json":
        response = CheckCommandResponse.from_result(result, str(root_dir))
        emit_json(response.model_dump(mode="json"))
    else:
        for finding in result.findings:
            machine_output(finding.describe())

        if result.validated:
            user_output(click.style("✓ ", fg="green") + "All modules use the most recent version")
        else:
            user_output(
                click.style("✗ ", fg="red")
                + f"{len(result.findings)} module(s) not on the most recent version"
            )

    if not result.validated:
        raise SystemExit(1)
