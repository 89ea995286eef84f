"""Reporters for violation lists.

Users can implement custom reporters via ReporterProtocol.
"""

from violationlist.application.reporters.console import ConsoleConfig, ConsoleReporter
from violationlist.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "ReporterProtocol",
]
