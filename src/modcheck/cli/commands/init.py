"""Init command - writes registry defaults to .modcheck.toml."""

from pathlib import Path

import click

from modcheck.cli.commands.options import explicit_flag, resolve_root_dir
from modcheck.cli.config import LoadedConfig, save_config
from modcheck.cli.ensure import Ensure
from modcheck.cli.output import user_output
from modcheck.core.context import ModcheckContext


@click.command("init")
@click.argument(
    "path",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option("--organization", required=True, help="Private organization or public namespace.")
@click.option("--address", help="Private registry host.")
@click.option("--public/--private", "public_registry", default=False, help="Registry to check.")
@click.option("--strict/--no-strict", default=False, help="Report unpublished private modules.")
@click.pass_obj
def init_cmd(
    ctx: ModcheckContext,
    path: Path | None,
    organization: str,
    address: str | None,
    public_registry: bool,
    strict: bool,
) -> None:
    """Write registry settings to .modcheck.toml in PATH.

    Existing settings and comments in the file are preserved. Tokens are
    never written; provide them with --token or TFE_TOKEN.
    """
    root_dir = resolve_root_dir(ctx, path)
    Ensure.invariant(root_dir.is_dir(), f"Directory not found: {root_dir}")
    Ensure.invariant(bool(organization.strip()), "Organization cannot be empty")

    cfg_path = save_config(
        root_dir,
        LoadedConfig(
            organization=organization.strip(),
            address=address,
            public_registry=explicit_flag("public_registry", public_registry),
            strict=explicit_flag("strict", strict),
        ),
    )
    user_output(click.style("✓ ", fg="green") + f"Wrote {cfg_path}")
