"""
Filter predicate compiler for listing searches.

This module validates client-supplied filter criteria against a fixed schema
and compiles them into a storage-agnostic conjunction of conditions. It never
touches storage; repositories decide how to execute the compiled predicate.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Tuple, Union

from listing_catalog.error_handling import (
    InvalidFieldError,
    InvalidFilterValueError,
    InvalidOperatorError,
    UnsupportedOperatorForFieldError,
)
from listing_catalog.models import Category, Listing


class FilterOperator(str, Enum):
    """Supported filter operators"""
    CONTAINS = "contains"
    EQUALS = "equals"


@dataclass(frozen=True)
class FieldRule:
    """Schema entry for a filterable field.

    Attributes:
        column: Storage column backing the field
        operator: The only operator the field accepts
    """
    column: str
    operator: FilterOperator


FILTER_SCHEMA = {
    "name": FieldRule(column="name", operator=FilterOperator.CONTAINS),
    "description": FieldRule(column="description", operator=FilterOperator.CONTAINS),
    "category": FieldRule(column="category", operator=FilterOperator.EQUALS),
    "location.country": FieldRule(column="location_country", operator=FilterOperator.CONTAINS),
    "location.municipality": FieldRule(column="location_municipality", operator=FilterOperator.CONTAINS),
}

SUPPORTED_FIELDS = tuple(FILTER_SCHEMA)
SUPPORTED_OPERATORS = tuple(operator.value for operator in FilterOperator)


def _field_value(listing: Listing, field: str) -> Any:
    value = listing
    for part in field.split("."):
        value = getattr(value, part)
    return value


@dataclass(frozen=True)
class ContainsCondition:
    """Case-insensitive substring match on a text field."""
    field: str
    column: str
    needle: str

    @property
    def operator(self) -> FilterOperator:
        return FilterOperator.CONTAINS

    def matches(self, listing: Listing) -> bool:
        return self.needle.lower() in str(_field_value(listing, self.field)).lower()


@dataclass(frozen=True)
class EqualsCondition:
    """Exact match of a category against its canonical display string."""
    field: str
    column: str
    value: Category

    @property
    def operator(self) -> FilterOperator:
        return FilterOperator.EQUALS

    def matches(self, listing: Listing) -> bool:
        return _field_value(listing, self.field) == self.value


Condition = Union[ContainsCondition, EqualsCondition]


@dataclass(frozen=True)
class CompiledPredicate:
    """Ordered conjunction (AND) of compiled conditions.

    An empty predicate matches every listing.
    """
    conditions: Tuple[Condition, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.conditions

    def matches(self, listing: Listing) -> bool:
        return all(condition.matches(listing) for condition in self.conditions)


def _unpack(criterion: Any) -> Tuple[Any, Any, Any]:
    if isinstance(criterion, dict):
        return criterion.get("field"), criterion.get("operator"), criterion.get("value")
    return criterion.field, criterion.operator, criterion.value


def _parse_operator(field: str, raw_operator: Any) -> FilterOperator:
    if isinstance(raw_operator, FilterOperator):
        return raw_operator
    normalized = raw_operator.lower() if isinstance(raw_operator, str) else raw_operator
    try:
        return FilterOperator(normalized)
    except ValueError:
        raise InvalidOperatorError(field, str(raw_operator), SUPPORTED_OPERATORS) from None


def compile_criterion(criterion: Any) -> Condition:
    """Validate and compile a single filter criterion.

    Args:
        criterion: FilterCriterion (or dict with field/operator/value keys)

    Returns:
        The compiled condition

    Raises:
        InvalidFieldError: Field is not filterable
        InvalidOperatorError: Operator is not one of contains/equals
        UnsupportedOperatorForFieldError: Operator is not allowed on the field
        InvalidFilterValueError: Value does not fit the field's domain
    """
    field, raw_operator, value = _unpack(criterion)

    rule: Optional[FieldRule] = FILTER_SCHEMA.get(field) if isinstance(field, str) else None
    if rule is None:
        raise InvalidFieldError(str(field), SUPPORTED_FIELDS)

    operator = _parse_operator(field, raw_operator)
    if operator is not rule.operator:
        raise UnsupportedOperatorForFieldError(field, operator.value, rule.operator.value)

    if operator is FilterOperator.EQUALS:
        try:
            category = Category(value)
        except ValueError:
            raise InvalidFilterValueError(
                f"Invalid category value: {value}. "
                f"Must be one of: {', '.join(Category.display_names())}",
                field=field,
                operator=operator.value,
            ) from None
        return EqualsCondition(field=field, column=rule.column, value=category)

    if not isinstance(value, str):
        raise InvalidFilterValueError(
            f"{field} filter value must be a string",
            field=field,
            operator=operator.value,
        )
    return ContainsCondition(field=field, column=rule.column, needle=value)


def compile_filters(criteria: Optional[Iterable[Any]]) -> CompiledPredicate:
    """Validate every criterion and compile them into a conjunction.

    Criteria are checked in input order and the first violation is raised;
    nothing is returned until the whole list has been validated.

    Args:
        criteria: Filter criteria, or None for no filtering

    Returns:
        CompiledPredicate with one condition per criterion, in input order
    """
    if not criteria:
        return CompiledPredicate()
    return CompiledPredicate(conditions=tuple(compile_criterion(c) for c in criteria))
