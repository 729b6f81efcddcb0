"""Doctor command for diagnosing module and package installation state."""

from pathlib import Path

import click

from distro_doctor.commands.options import root_option
from distro_doctor.context import create_context
from distro_doctor.error_boundary import cli_error_boundary
from distro_doctor.operations.doctor import run_doctor


@click.command()
@root_option
@click.option(
    "--jobs",
    "-j",
    type=click.IntRange(min=1),
    default=None,
    help="Resolve modules with this many workers (overrides doctor.toml)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Let module files print to the console",
)
@click.pass_context
@cli_error_boundary
def doctor(ctx: click.Context, root: Path, jobs: int | None, verbose: bool) -> None:
    """Check enabled modules for missing packages and failing self-checks.

    Findings are informational: the command exits 0 once every module has
    been checked, and 1 only if the module selection cannot be loaded.
    """
    debug = bool(ctx.obj and ctx.obj.get("debug"))
    doctor_ctx = create_context(root=root, jobs=jobs, verbose=verbose, debug=debug)
    run_doctor(doctor_ctx)
