"""Registry command group."""

import click

from modcheck.cli.commands.registry.list_cmd import list_registry_modules


@click.group("registry")
def registry_group() -> None:
    """Inspect the module registry."""
    pass


registry_group.add_command(list_registry_modules)
