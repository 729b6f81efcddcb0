from distro_doctor.reporting.reporter import DiagnosticReporter

__all__ = [
    "DiagnosticReporter",
]
