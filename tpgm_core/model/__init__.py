"""
TPGM Core Model

Typed expression nodes for temporal graph pattern predicates.
"""

from .base import (
    GLOBAL_SELECTOR,
    Comparator,
    ComparableExpression,
    ValidationError,
    ArgumentCountError,
    TimeFieldError,
    TimeLiteralError,
    ComparatorError,
    VariablesError,
    validate_variables,
)

from .comparables import (
    ElementSelector,
    PropertySelector,
    Literal,
)

from .time_points import (
    TimeField,
    TemporalExpression,
    TimePoint,
    TimeConstant,
    TimeLiteral,
    TimeSelector,
)

from .time_terms import (
    TimeTerm,
    MinTimePoint,
    MaxTimePoint,
    Duration,
)

from .predicates import (
    Predicate,
    And,
    Or,
    Not,
    Comparison,
)

__all__ = [
    # Base
    'GLOBAL_SELECTOR',
    'Comparator',
    'ComparableExpression',
    'ValidationError',
    'ArgumentCountError',
    'TimeFieldError',
    'TimeLiteralError',
    'ComparatorError',
    'VariablesError',
    'validate_variables',

    # Non-temporal comparables
    'ElementSelector',
    'PropertySelector',
    'Literal',

    # Time points
    'TimeField',
    'TemporalExpression',
    'TimePoint',
    'TimeConstant',
    'TimeLiteral',
    'TimeSelector',

    # Time terms
    'TimeTerm',
    'MinTimePoint',
    'MaxTimePoint',
    'Duration',

    # Predicates
    'Predicate',
    'And',
    'Or',
    'Not',
    'Comparison',
]
