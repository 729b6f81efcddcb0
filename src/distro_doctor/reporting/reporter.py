"""Streaming diagnostic output with warning/error accounting."""

import threading
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

import click

from distro_doctor.models.diagnostic import DiagnosticEvent, ModuleResolution, RunSummary, Severity


def user_output(message: str) -> None:
    """Write one line of user-facing output to stdout."""
    click.echo(message)


_SEVERITY_STYLE: dict[Severity, tuple[str, str | None]] = {
    "info": ("-", None),
    "success": ("✓", "green"),
    "warning": ("⚠", "yellow"),
    "error": ("✗", "red"),
}


class DiagnosticReporter:
    """Writes diagnostic events as they arrive and keeps the run's counters.

    Every warning or error event increments the matching RunSummary counter.
    Indentation is a scoped override: ``with reporter.section(...)`` indents
    everything written inside the block and restores the previous level on
    exit. Writes are serialized, so output from concurrent callers never
    interleaves within a line or within a module block.

    Usage:
        reporter.reset()
        with reporter.section("Checking your enabled modules..."):
            reporter.report_module(resolution)
        reporter.render_summary()
    """

    def __init__(
        self,
        sink: Callable[[str], None] | None = None,
        *,
        color: bool = True,
        indent_width: int = 2,
    ) -> None:
        self._sink = sink if sink is not None else user_output
        self._color = color
        self._indent_width = indent_width
        self._depth = 0
        self._summary = RunSummary()
        self._events: list[DiagnosticEvent] = []
        self._lock = threading.RLock()

    @property
    def summary(self) -> RunSummary:
        return self._summary

    @property
    def events(self) -> list[DiagnosticEvent]:
        """All events accepted since the last reset, in arrival order."""
        return list(self._events)

    def reset(self) -> None:
        """Clear counters and the event log at the start of a run."""
        with self._lock:
            self._summary.reset()
            self._events.clear()
            self._depth = 0

    @contextmanager
    def section(self, heading: str | None = None) -> Iterator[None]:
        """Write an optional heading, then indent output until the block exits."""
        with self._lock:
            if heading is not None:
                self._write_line("info", heading, bullet=False)
            self._depth += 1
        try:
            yield
        finally:
            with self._lock:
                self._depth -= 1

    def emit(self, event: DiagnosticEvent) -> None:
        """Count and immediately write a single event."""
        with self._lock:
            self._events.append(event)
            if event.severity == "warning":
                self._summary.warnings += 1
            elif event.severity == "error":
                self._summary.errors += 1
            self._write_line(event.severity, event.message)

    def emit_all(self, events: Iterable[DiagnosticEvent]) -> None:
        with self._lock:
            for event in events:
                self.emit(event)

    def report_module(self, resolution: ModuleResolution) -> None:
        """Write one module's findings as an atomic, indented block.

        Modules without findings produce no output.
        """
        if not resolution.events:
            return
        with self._lock:
            with self.section(str(resolution.module_key)):
                self.emit_all(resolution.events)

    def render_summary(self) -> None:
        """Write the final summary line(s) for the run."""
        with self._lock:
            summary = self._summary
            if summary.is_clean:
                self._write_line("success", "Everything seems fine, happy hacking!")
                return
            if summary.warnings > 0:
                self._write_line("warning", _count_sentence(summary.warnings, "warning"))
            if summary.errors > 0:
                self._write_line("error", _count_sentence(summary.errors, "error"))

    def _write_line(self, severity: Severity, message: str, *, bullet: bool = True) -> None:
        bullet_char, color = _SEVERITY_STYLE[severity]
        indent = " " * (self._depth * self._indent_width)
        continuation = indent + " " * (len(bullet_char) + 1 if bullet else 0)

        first, *rest = message.splitlines() or [""]
        lines = [f"{indent}{bullet_char} {first}" if bullet else f"{indent}{first}"]
        lines.extend(f"{continuation}{line}" for line in rest)

        for line in lines:
            if self._color and color is not None:
                line = click.style(line, fg=color)
            self._sink(line)


def _count_sentence(count: int, noun: str) -> str:
    if count == 1:
        return f"There is 1 {noun}!"
    return f"There are {count} {noun}s!"
