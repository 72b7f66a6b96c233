"""
Data quality error classifications for price and return series.

These exceptions categorize problems with caller-supplied data. They are
recoverable: the analysis step that hit them is skipped, the rest continue.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedDataError(DataQualityError):
    """Data exists but is not a usable value (e.g. a non-positive price)."""

    def __init__(self, message: str, raw_data: Optional[Any] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class SeriesMismatchError(DataQualityError):
    """Two series that must be index-aligned have different lengths."""

    def __init__(self, message: str, left_length: Optional[int] = None,
                 right_length: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.left_length = left_length
        self.right_length = right_length


class InvalidParameterError(DataQualityError):
    """A parameter is outside the domain the calculation is defined for."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.value = value
