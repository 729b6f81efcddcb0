import logging
import os

import click

from distro_doctor import __version__
from distro_doctor.commands.doctor import doctor
from distro_doctor.commands.modules import list_modules
from distro_doctor.constants import DEBUG_ENV_VAR

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Diagnose an editor distribution's modules and packages."""
    debug = debug or bool(os.environ.get(DEBUG_ENV_VAR))
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    ctx.obj = {"debug": debug}

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register top-level commands
cli.add_command(doctor)
cli.add_command(list_modules)


if __name__ == "__main__":
    cli()
