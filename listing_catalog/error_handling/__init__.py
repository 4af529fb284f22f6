"""
Error handling module for the listing catalog.

Provides the validation error taxonomy and retry logic for storage setup.
"""

from .errors import (
    CatalogError,
    InvalidInputError,
    FilterError,
    InvalidFieldError,
    InvalidOperatorError,
    UnsupportedOperatorForFieldError,
    InvalidFilterValueError,
    InvalidPageSizeError,
    InvalidCoordinateError,
)
from .retry import RetryConfig, retry_with_backoff

__all__ = [
    'CatalogError',
    'InvalidInputError',
    'FilterError',
    'InvalidFieldError',
    'InvalidOperatorError',
    'UnsupportedOperatorForFieldError',
    'InvalidFilterValueError',
    'InvalidPageSizeError',
    'InvalidCoordinateError',
    'RetryConfig',
    'retry_with_backoff',
]
