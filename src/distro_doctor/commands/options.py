"""Options shared by several commands."""

from pathlib import Path

import click

from distro_doctor.constants import ROOT_ENV_VAR

root_option = click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path.cwd,
    envvar=ROOT_ENV_VAR,
    show_envvar=True,
    help="Distribution root directory (defaults to the current directory)",
)
