"""Report output for analysis results."""

from .console import ConsoleReporter

__all__ = ["ConsoleReporter"]
