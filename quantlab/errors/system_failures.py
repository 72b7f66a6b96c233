"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures of the analysis pipeline itself rather
than problems with the data it was given.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class AnalysisError(SystemFailureError):
    """Unexpected failure inside an analysis step."""

    def __init__(self, message: str, step: Optional[str] = None,
                 analysis_input: Optional[dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.step = step
        self.analysis_input = analysis_input
