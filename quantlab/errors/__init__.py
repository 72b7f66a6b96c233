"""
Error classification system for the analytics toolkit.

Degenerate inputs (too little data, empty book sides, unprofitable spreads)
produce sentinel values rather than exceptions. The exceptions below are
raised only for contract violations and for failures of the analysis layer.
"""

from .data_quality import (
    DataQualityError,
    InvalidParameterError,
    MalformedDataError,
    SeriesMismatchError,
)
from .system_failures import (
    AnalysisError,
    SystemFailureError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    "SeriesMismatchError",
    "InvalidParameterError",
    # System Failures
    "SystemFailureError",
    "AnalysisError",
]
