"""
Error taxonomy for the listing catalog.

Every error defined here is a local validation failure: it is raised before
any storage access, it is deterministic for a given input, and it is never
retried.
"""

from typing import Iterable, Optional


def _join(values: Iterable[str]) -> str:
    return ", ".join(values)


class CatalogError(Exception):
    """Base class for all catalog validation errors."""


class InvalidInputError(CatalogError):
    """Raised when a geohash is empty or contains a non base-32 character.

    Attributes:
        character: The offending character, when one was found
    """

    def __init__(self, message: str, character: Optional[str] = None):
        super().__init__(message)
        self.character = character


class FilterError(CatalogError):
    """Base class for filter compilation failures.

    Attributes:
        field: Field name of the offending criterion
        operator: Operator of the offending criterion
    """

    def __init__(self, message: str, field: str, operator: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.operator = operator


class InvalidFieldError(FilterError):
    """Filter field is not in the whitelist."""

    def __init__(self, field: str, valid_fields: Iterable[str]):
        super().__init__(
            f"Unsupported filter field: {field}. Supported fields: {_join(valid_fields)}",
            field=field,
        )


class InvalidOperatorError(FilterError):
    """Filter operator is neither `contains` nor `equals`."""

    def __init__(self, field: str, operator: str, valid_operators: Iterable[str]):
        super().__init__(
            f"Unknown operator: {operator}. Supported operators: {_join(valid_operators)}",
            field=field,
            operator=operator,
        )


class UnsupportedOperatorForFieldError(FilterError):
    """Operator is valid in general but not for this field."""

    def __init__(self, field: str, operator: str, allowed_operator: str):
        super().__init__(
            f"{field} field only supports '{allowed_operator}' operator, got '{operator}'",
            field=field,
            operator=operator,
        )
        self.allowed_operator = allowed_operator


class InvalidFilterValueError(FilterError):
    """Filter value does not belong to the target field's domain."""


class InvalidPageSizeError(CatalogError):
    """Page or page size is outside the accepted range."""


class InvalidCoordinateError(CatalogError):
    """Reference point is out of range or only partially supplied."""
