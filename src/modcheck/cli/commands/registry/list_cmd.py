"""Registry list command - shows the latest version of each registry module."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from modcheck.cli.commands.options import explicit_flag, registry_options, resolve_root_dir
from modcheck.cli.config import load_config, resolve_registry_config
from modcheck.cli.json_output import emit_json, error_boundary
from modcheck.cli.json_schemas import RegistryListResponse
from modcheck.cli.output import user_output
from modcheck.core.context import ModcheckContext
from modcheck.core.snapshot import RegistrySnapshot, build_snapshot


def _render_snapshot_table(snapshot: RegistrySnapshot) -> Table:
    table = Table(title=f"{snapshot.kind.value} registry modules")
    table.add_column("Module", style="cyan")
    table.add_column("Latest version", style="green")
    for key, version in sorted(snapshot.items()):
        table.add_row(key, version)
    return table


@click.command("list")
@registry_options
@click.pass_obj
@error_boundary
def list_registry_modules(
    ctx: ModcheckContext,
    path: Path | None,
    public_registry: bool,
    address: str | None,
    organization: str | None,
    token: str | None,
    output_format: str,
) -> None:
    """List registry modules and their latest versions.

    Reads defaults from .modcheck.toml in PATH (default: current directory).
    """
    config = resolve_registry_config(
        load_config(resolve_root_dir(ctx, path)),
        public_registry=explicit_flag("public_registry", public_registry),
        address=address,
        organization=organization,
        token=token,
        strict=None,
    )

    snapshot = build_snapshot(ctx.registry, config)

    if output_format == "json":
        emit_json(RegistryListResponse.from_snapshot(snapshot).model_dump(mode="json"))
        return

    if not snapshot:
        user_output(f"No modules found for {config.organization}")
        return

    Console().print(_render_snapshot_table(snapshot))
