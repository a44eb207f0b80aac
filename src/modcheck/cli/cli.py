import logging

import click

from modcheck.cli.commands.check import check_cmd
from modcheck.cli.commands.init import init_cmd
from modcheck.cli.commands.registry import registry_group
from modcheck.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="modcheck")
@click.option("--debug", is_flag=True, help="Show debug logging on stderr.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Check that Terraform module calls pin the latest registry version."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    ctx.call_on_close(ctx.obj.registry.close)


cli.add_command(check_cmd)
cli.add_command(init_cmd)
cli.add_command(registry_group)


def main() -> None:
    """CLI entry point used by the `modcheck` console script."""
    cli()
