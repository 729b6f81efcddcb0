"""Modules command for listing the enabled module registry."""

from pathlib import Path

import click

from distro_doctor.commands.options import root_option
from distro_doctor.config import load_doctor_config
from distro_doctor.error_boundary import cli_error_boundary
from distro_doctor.operations.registry import load_registry


@click.command(name="modules")
@root_option
@cli_error_boundary
def list_modules(root: Path) -> None:
    """List the modules enabled by the selection file."""
    config = load_doctor_config(root)
    registry = load_registry(config)

    if len(registry) == 0:
        click.echo("No modules enabled")
        return

    click.echo(f"Enabled {len(registry)} module(s):\n")

    for key, module in registry.items():
        flags = " ".join(sorted(module.flags))
        description = module.metadata.description or ""
        line = f"  {str(key):<24} {flags:<20} {description}"
        click.echo(line.rstrip())
