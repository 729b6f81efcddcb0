"""distro-doctor: environment and module diagnostics for an editor distribution.

Import from submodules:
- version: __version__
- operations.doctor: run_doctor
- cli: cli (console entry point)
"""

from distro_doctor.version import __version__ as __version__
