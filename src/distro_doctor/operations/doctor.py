"""Doctor run orchestration: load registry, resolve modules, summarize."""

import logging
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor

from distro_doctor.context import DoctorContext
from distro_doctor.models.diagnostic import ModuleResolution, RunSummary
from distro_doctor.models.module import ModuleDescriptor
from distro_doctor.operations.registry import load_registry
from distro_doctor.operations.resolution import RequirementResolver

logger = logging.getLogger(__name__)


def run_doctor(ctx: DoctorContext) -> RunSummary:
    """Run every check once and render the summary.

    Raises:
        ConfigurationError: If the registry cannot be loaded. Nothing is
            resolved in that case.
    """
    reporter = ctx.reporter
    reporter.reset()

    registry = load_registry(ctx.config)
    modules = list(registry.values())

    with reporter.section(f"Checking {_module_count(len(modules))}..."):
        for resolution in resolve_modules(ctx, modules):
            reporter.report_module(resolution)

    reporter.render_summary()
    return reporter.summary


def resolve_modules(
    ctx: DoctorContext, modules: list[ModuleDescriptor]
) -> Iterator[ModuleResolution]:
    """Yield one resolution per module, in registry order.

    With more than one job, modules are resolved on a thread pool; results are
    still yielded in registry order and the pool is joined before returning.
    """
    resolver = RequirementResolver(ctx.package_index, verbose=ctx.verbose)

    if ctx.config.jobs <= 1 or len(modules) <= 1:
        for module in modules:
            yield resolver.resolve_module(module)
        return

    logger.debug("Resolving %d modules with %d workers", len(modules), ctx.config.jobs)
    with ThreadPoolExecutor(max_workers=ctx.config.jobs) as executor:
        yield from executor.map(resolver.resolve_module, modules)


def _module_count(count: int) -> str:
    if count == 1:
        return "1 enabled module"
    return f"{count} enabled modules"
