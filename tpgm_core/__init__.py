"""
TPGM Core

Temporal predicates for graph pattern queries: time point algebra and the
rewrite of global (pattern-wide) time selectors into local ones.
"""

from tpgm_core.model import (
    GLOBAL_SELECTOR,
    Comparator,
    ComparableExpression,
    ValidationError,
    ArgumentCountError,
    TimeFieldError,
    TimeLiteralError,
    ComparatorError,
    VariablesError,
    ElementSelector,
    PropertySelector,
    Literal,
    TimeField,
    TemporalExpression,
    TimePoint,
    TimeConstant,
    TimeLiteral,
    TimeSelector,
    TimeTerm,
    MinTimePoint,
    MaxTimePoint,
    Duration,
    Predicate,
    And,
    Or,
    Not,
    Comparison,
)
from tpgm_core.operators import (
    exists_variable,
    for_all_variables,
    unfold_global,
    unfold_comparison,
    unfold_global_predicates,
)
from tpgm_core.utils import SETTINGS, setup_logging

__version__ = "0.1.0"

__all__ = [
    # Model
    "GLOBAL_SELECTOR",
    "Comparator",
    "ComparableExpression",
    "ValidationError",
    "ArgumentCountError",
    "TimeFieldError",
    "TimeLiteralError",
    "ComparatorError",
    "VariablesError",
    "ElementSelector",
    "PropertySelector",
    "Literal",
    "TimeField",
    "TemporalExpression",
    "TimePoint",
    "TimeConstant",
    "TimeLiteral",
    "TimeSelector",
    "TimeTerm",
    "MinTimePoint",
    "MaxTimePoint",
    "Duration",
    "Predicate",
    "And",
    "Or",
    "Not",
    "Comparison",

    # Operators
    "exists_variable",
    "for_all_variables",
    "unfold_global",
    "unfold_comparison",
    "unfold_global_predicates",

    # Utils
    "SETTINGS",
    "setup_logging",
]
