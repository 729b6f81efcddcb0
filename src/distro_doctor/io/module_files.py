"""Isolated evaluation of module-supplied files (packages.py and doctor.py).

Each file is compiled and executed against a namespace created for that one
evaluation. Nothing a module file defines is visible to any other module, and
the requirement collector handed to packages.py is sealed as soon as the file
finishes, so a leaked reference to ``package`` cannot add requirements later.
"""

import logging
import shutil
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from distro_doctor.constants import REQUIREMENTS_FILE, SELF_CHECK_FILE
from distro_doctor.errors import RequirementLoadError, SelfCheckError
from distro_doctor.integrations.package_index.abc import PackageIndex
from distro_doctor.models.diagnostic import DiagnosticEvent, Severity
from distro_doctor.models.module import ModuleDescriptor, ModuleKey
from distro_doctor.models.requirement import (
    PackageRequirement,
    RequirementPredicate,
    ResolvedRequirement,
)

logger = logging.getLogger(__name__)


class RequirementCollector:
    """Receives package() calls from one module's packages.py."""

    def __init__(self, module_key: ModuleKey) -> None:
        self._module_key = module_key
        self._requirements: list[PackageRequirement] = []
        self._sealed = False

    def package(
        self,
        name: str,
        *,
        disable: bool | RequirementPredicate = False,
        ignore: bool | RequirementPredicate = False,
        recipe: Mapping[str, Any] | None = None,
        pin: str | None = None,
    ) -> None:
        """Declare a package requirement for the module being evaluated."""
        if self._sealed:
            raise RuntimeError(
                f"package({name!r}) called after {self._module_key} finished declaring packages"
            )
        if not isinstance(name, str) or not name:
            raise ValueError(f"Package name must be a non-empty string, got {name!r}")

        self._requirements.append(
            PackageRequirement(
                module_key=self._module_key,
                name=name,
                disable=disable,
                ignore=ignore,
                recipe=dict(recipe) if recipe is not None else None,
                pin=pin,
            )
        )

    def seal(self) -> tuple[PackageRequirement, ...]:
        """Stop accepting declarations and return what was collected."""
        self._sealed = True
        return tuple(self._requirements)


class SelfCheckScope:
    """Functions exposed to a module's doctor.py.

    Events are recorded in the order the self-check emits them. ``packages``
    holds the module's own requirements as resolved from its packages.py.
    """

    def __init__(
        self,
        module: ModuleDescriptor,
        package_index: PackageIndex,
        *,
        packages: tuple[ResolvedRequirement, ...] = (),
    ) -> None:
        self._module = module
        self._package_index = package_index
        self._packages = packages
        self._events: list[DiagnosticEvent] = []

    @property
    def events(self) -> list[DiagnosticEvent]:
        return list(self._events)

    @property
    def packages(self) -> tuple[ResolvedRequirement, ...]:
        return self._packages

    def warn(self, message: str) -> None:
        self._record("warning", message)

    def error(self, message: str) -> None:
        self._record("error", message)

    def explain(self, message: str) -> None:
        self._record("info", message)

    def package_installed(self, name: str) -> bool:
        return self._package_index.is_builtin(name) or self._package_index.is_installed(name)

    def executable_find(self, program: str) -> str | None:
        return shutil.which(program)

    def _record(self, severity: Severity, message: str) -> None:
        self._events.append(
            DiagnosticEvent(
                severity=severity,
                message=str(message),
                module_key=self._module.key,
            )
        )


def load_requirements(
    module: ModuleDescriptor, *, verbose: bool
) -> tuple[PackageRequirement, ...]:
    """Evaluate a module's packages.py and return its declared requirements.

    Returns an empty tuple if the module has no packages.py.

    Raises:
        RequirementLoadError: If the file fails to compile or raises
    """
    path = module.path / REQUIREMENTS_FILE
    if not path.exists():
        logger.debug("%s has no %s", module.key, REQUIREMENTS_FILE)
        return ()

    collector = RequirementCollector(module.key)
    namespace = _module_namespace(module, path, verbose=verbose)
    namespace["package"] = collector.package

    try:
        _evaluate_file(path, namespace)
    except SyntaxError as e:
        raise RequirementLoadError(
            module.key, f"syntax error in {REQUIREMENTS_FILE} line {e.lineno}: {e.msg}"
        ) from e
    except Exception as e:
        raise RequirementLoadError(
            module.key, f"{REQUIREMENTS_FILE} raised {type(e).__name__}: {e}"
        ) from e
    finally:
        requirements = collector.seal()

    logger.debug("%s declares %d package(s)", module.key, len(requirements))
    return requirements


def run_self_check(module: ModuleDescriptor, scope: SelfCheckScope, *, verbose: bool) -> bool:
    """Run a module's doctor.py against the given scope.

    Returns False if the module has no doctor.py, True once it ran.

    Raises:
        SelfCheckError: If the file fails to compile or raises
    """
    path = module.path / SELF_CHECK_FILE
    if not path.exists():
        return False

    namespace = _module_namespace(module, path, verbose=verbose)
    namespace.update(
        warn=scope.warn,
        error=scope.error,
        explain=scope.explain,
        package_installed=scope.package_installed,
        executable_find=scope.executable_find,
        packages=scope.packages,
    )

    try:
        _evaluate_file(path, namespace)
    except SyntaxError as e:
        raise SelfCheckError(
            module.key, f"syntax error in {SELF_CHECK_FILE} line {e.lineno}: {e.msg}"
        ) from e
    except Exception as e:
        raise SelfCheckError(module.key, f"{SELF_CHECK_FILE} raised {type(e).__name__}: {e}") from e

    return True


def make_print(verbose: bool, source: Path) -> Callable[..., None]:
    """Build the print() a module file sees.

    Verbose runs get the real print. Quiet runs send module output to the
    debug log instead of the console.
    """
    if verbose:
        return print

    def quiet_print(*args: object, sep: str | None = " ", **_kwargs: object) -> None:
        logger.debug("[%s] %s", source, (sep or " ").join(str(arg) for arg in args))

    return quiet_print


def _module_namespace(module: ModuleDescriptor, path: Path, *, verbose: bool) -> dict[str, Any]:
    return {
        "__name__": f"distro_doctor.modules.{module.key.category_dir}.{module.key.name}",
        "__file__": str(path),
        "print": make_print(verbose, path),
        "module": module,
        "has_flag": module.has_flag,
    }


def _evaluate_file(path: Path, namespace: dict[str, Any]) -> None:
    source = path.read_text(encoding="utf-8")
    code = compile(source, str(path), "exec")
    exec(code, namespace)
