"""Exceptions raised by the dataset collaborators.

The statistics engine itself never raises; these errors come from input
validation, the dataset store and bulk import.
"""


class StatlabError(Exception):
    """Base class for every statlab error."""


class InvalidValueError(StatlabError, ValueError):
    """Raised when a typed value is not a number or is out of range."""


class DatasetFullError(StatlabError):
    """Raised when adding to a dataset that already holds the maximum."""


class NoNumbersFoundError(StatlabError):
    """Raised when an imported file contains no usable numbers."""


class UnsupportedFileError(StatlabError):
    """Raised for files that are neither ``.csv`` nor ``.txt``."""
