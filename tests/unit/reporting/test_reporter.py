"""Tests for the diagnostic reporter."""

import click

from distro_doctor.models.diagnostic import DiagnosticEvent, ModuleResolution, Severity
from distro_doctor.models.module import ModuleKey
from distro_doctor.reporting.reporter import DiagnosticReporter


def _event(severity: Severity, message: str) -> DiagnosticEvent:
    return DiagnosticEvent(severity=severity, message=message)


def test_emit_counts_by_severity(reporter: DiagnosticReporter) -> None:
    """Test that only warnings and errors are counted."""
    reporter.emit(_event("info", "checking"))
    reporter.emit(_event("success", "fine"))
    reporter.emit(_event("warning", "hmm"))
    reporter.emit(_event("error", "bad"))
    reporter.emit(_event("error", "worse"))

    assert reporter.summary.warnings == 1
    assert reporter.summary.errors == 2


def test_emit_writes_immediately(reporter: DiagnosticReporter, output_lines: list[str]) -> None:
    """Test that each event is written as soon as it is emitted."""
    reporter.emit(_event("warning", "first"))
    assert output_lines == ["⚠ first"]

    reporter.emit(_event("error", "second"))
    assert output_lines == ["⚠ first", "✗ second"]


def test_section_indents_and_restores(
    reporter: DiagnosticReporter, output_lines: list[str]
) -> None:
    """Test that sections push and pop indentation."""
    with reporter.section("Outer"):
        reporter.emit(_event("info", "one"))
        with reporter.section():
            reporter.emit(_event("info", "two"))
        reporter.emit(_event("info", "three"))
    reporter.emit(_event("info", "four"))

    assert output_lines == ["Outer", "  - one", "    - two", "  - three", "- four"]


def test_section_pops_on_exception(reporter: DiagnosticReporter, output_lines: list[str]) -> None:
    """Test that indentation is restored even if the block raises."""
    try:
        with reporter.section():
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    reporter.emit(_event("info", "after"))

    assert output_lines == ["- after"]


def test_multiline_messages_are_aligned(
    reporter: DiagnosticReporter, output_lines: list[str]
) -> None:
    """Test continuation lines line up under the message text."""
    reporter.emit(_event("error", "line one\nline two"))

    assert output_lines == ["✗ line one", "  line two"]


def test_report_module_skips_clean_modules(
    reporter: DiagnosticReporter, output_lines: list[str]
) -> None:
    """Test that modules without events print nothing."""
    reporter.report_module(ModuleResolution(module_key=ModuleKey(":ui", "modeline")))

    assert output_lines == []


def test_report_module_writes_heading_and_events(
    reporter: DiagnosticReporter, output_lines: list[str]
) -> None:
    """Test module blocks are a heading with indented events."""
    key = ModuleKey(":lang", "python")
    reporter.report_module(
        ModuleResolution(
            module_key=key,
            events=(DiagnosticEvent(severity="error", message="flake8 is not installed"),),
        )
    )

    assert output_lines == [":lang python", "  ✗ flake8 is not installed"]


def test_summary_success(reporter: DiagnosticReporter, output_lines: list[str]) -> None:
    """Test that a clean run renders only the success line."""
    reporter.render_summary()

    assert output_lines == ["✓ Everything seems fine, happy hacking!"]


def test_summary_singular(reporter: DiagnosticReporter, output_lines: list[str]) -> None:
    """Test singular phrasing."""
    reporter.emit(_event("error", "bad"))
    output_lines.clear()

    reporter.render_summary()

    assert output_lines == ["✗ There is 1 error!"]


def test_summary_plural_warnings_before_errors(
    reporter: DiagnosticReporter, output_lines: list[str]
) -> None:
    """Test plural phrasing with one line per nonzero counter."""
    for _ in range(3):
        reporter.emit(_event("warning", "hmm"))
    reporter.emit(_event("error", "a"))
    reporter.emit(_event("error", "b"))
    output_lines.clear()

    reporter.render_summary()

    assert output_lines == ["⚠ There are 3 warnings!", "✗ There are 2 errors!"]


def test_reset_clears_state(reporter: DiagnosticReporter) -> None:
    """Test that reset empties counters and the event log."""
    reporter.emit(_event("warning", "hmm"))
    reporter.reset()

    assert reporter.summary.is_clean
    assert reporter.events == []


def test_color_styles_by_severity() -> None:
    """Test that colored output wraps lines in ANSI styles."""
    lines: list[str] = []
    reporter = DiagnosticReporter(sink=lines.append)

    reporter.emit(_event("error", "bad"))
    reporter.emit(_event("info", "plain"))

    assert lines == [click.style("✗ bad", fg="red"), "- plain"]
