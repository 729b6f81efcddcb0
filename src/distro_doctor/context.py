"""Application context with dependency injection.

The DoctorContext dataclass holds every dependency of a doctor run (config,
package index, reporter) and is created once at the CLI entry point, then
threaded through the loader, resolver and reporter.
"""

from dataclasses import dataclass
from pathlib import Path

from distro_doctor.config import DoctorConfig, load_doctor_config
from distro_doctor.integrations.package_index.abc import PackageIndex
from distro_doctor.reporting.reporter import DiagnosticReporter


@dataclass(frozen=True)
class DoctorContext:
    """Immutable context holding all dependencies for a doctor run.

    Attributes:
        config: Loaded doctor configuration
        package_index: Built-in / installed package lookups
        reporter: Streaming diagnostic output and counters
        verbose: Whether module files may print to the console
        debug: Debug flag for error handling (full stack traces)
    """

    config: DoctorConfig
    package_index: PackageIndex
    reporter: DiagnosticReporter
    verbose: bool
    debug: bool

    @staticmethod
    def for_test(
        config: DoctorConfig | None = None,
        package_index: PackageIndex | None = None,
        reporter: DiagnosticReporter | None = None,
        verbose: bool = False,
        debug: bool = False,
        root: Path | None = None,
    ) -> "DoctorContext":
        """Create test context with optional pre-configured implementations.

        Uses FakePackageIndex and an uncolored reporter that writes to a
        discarded list unless given others.

        Args:
            config: Optional config. If None, defaults rooted at root.
            package_index: Optional index. If None, creates an empty FakePackageIndex.
            reporter: Optional reporter. If None, creates a silent reporter.
            verbose: Whether module files may print (default False).
            debug: Whether to enable debug mode (default False).
            root: Distribution root used for default config (defaults to Path("/fake/distro"))

        Example:
            >>> from distro_doctor.integrations.package_index.fake import FakePackageIndex
            >>> ctx = DoctorContext.for_test(
            ...     package_index=FakePackageIndex(installed={"magit"}), root=tmp_path
            ... )
        """
        from distro_doctor.integrations.package_index.fake import FakePackageIndex

        resolved_root = root if root is not None else Path("/fake/distro")
        resolved_config = config if config is not None else DoctorConfig.defaults(resolved_root)
        resolved_index: PackageIndex = (
            package_index if package_index is not None else FakePackageIndex()
        )
        discarded: list[str] = []
        resolved_reporter = (
            reporter
            if reporter is not None
            else DiagnosticReporter(sink=discarded.append, color=False)
        )

        return DoctorContext(
            config=resolved_config,
            package_index=resolved_index,
            reporter=resolved_reporter,
            verbose=verbose,
            debug=debug,
        )


def create_context(
    *, root: Path, jobs: int | None, verbose: bool, debug: bool
) -> DoctorContext:
    """Create production context with real implementations.

    Called once at CLI entry point.

    Args:
        root: Distribution root directory
        jobs: Worker count override (None keeps the doctor.toml value)
        verbose: Whether module files may print to the console
        debug: If True, enable debug mode

    Raises:
        ConfigurationError: If doctor.toml is malformed
    """
    from distro_doctor.integrations.package_index.real import RealPackageIndex

    config = load_doctor_config(root)
    if jobs is not None:
        config = config.with_jobs(jobs)

    return DoctorContext(
        config=config,
        package_index=RealPackageIndex(config.packages_dir, config.builtin_packages),
        reporter=DiagnosticReporter(),
        verbose=verbose,
        debug=debug,
    )
