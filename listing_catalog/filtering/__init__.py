"""
Filtering module for catalog listings.

Validates whitelisted filter criteria and compiles them into a predicate
that repositories can execute.
"""

from .predicate_compiler import (
    FilterOperator,
    FieldRule,
    FILTER_SCHEMA,
    SUPPORTED_FIELDS,
    SUPPORTED_OPERATORS,
    ContainsCondition,
    EqualsCondition,
    CompiledPredicate,
    compile_criterion,
    compile_filters,
)

__all__ = [
    'FilterOperator',
    'FieldRule',
    'FILTER_SCHEMA',
    'SUPPORTED_FIELDS',
    'SUPPORTED_OPERATORS',
    'ContainsCondition',
    'EqualsCondition',
    'CompiledPredicate',
    'compile_criterion',
    'compile_filters',
]
