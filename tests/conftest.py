"""
Pytest configuration for tpgm_core tests.

Provides common time expressions and a reference evaluator that computes
the truth value of a predicate tree against concrete variable bindings.
"""

import operator

import pytest

from tpgm_core.model import (
    And,
    Comparator,
    Comparison,
    Duration,
    MaxTimePoint,
    MinTimePoint,
    Not,
    Or,
    TimeConstant,
    TimeField,
    TimeLiteral,
    TimeSelector,
)

COMPARATOR_FUNCTIONS = {
    Comparator.EQ: operator.eq,
    Comparator.NEQ: operator.ne,
    Comparator.LT: operator.lt,
    Comparator.LTE: operator.le,
    Comparator.GT: operator.gt,
    Comparator.GTE: operator.ge,
}


def evaluate_time(expression, bindings):
    """
    Value of a time expression for bindings {variable: {TimeField: millis}}.

    Global selectors resolve to the latest start / earliest end over all
    bound variables.
    """
    if isinstance(expression, (TimeConstant, TimeLiteral)):
        return expression.millis
    if isinstance(expression, TimeSelector):
        if expression.is_global():
            values = [fields[expression.field] for fields in bindings.values()]
            return max(values) if expression.field.is_start else min(values)
        return bindings[expression.variable][expression.field]
    if isinstance(expression, MinTimePoint):
        return min(evaluate_time(arg, bindings) for arg in expression.args)
    if isinstance(expression, MaxTimePoint):
        return max(evaluate_time(arg, bindings) for arg in expression.args)
    if isinstance(expression, Duration):
        return evaluate_time(expression.to, bindings) - evaluate_time(expression.from_, bindings)
    raise TypeError(f"Unexpected expression {expression!r}")


def evaluate_predicate(predicate, bindings):
    if isinstance(predicate, Comparison):
        compare = COMPARATOR_FUNCTIONS[predicate.comparator]
        return compare(evaluate_time(predicate.lhs, bindings), evaluate_time(predicate.rhs, bindings))
    if isinstance(predicate, And):
        return evaluate_predicate(predicate.lhs, bindings) and evaluate_predicate(predicate.rhs, bindings)
    if isinstance(predicate, Or):
        return evaluate_predicate(predicate.lhs, bindings) or evaluate_predicate(predicate.rhs, bindings)
    if isinstance(predicate, Not):
        return not evaluate_predicate(predicate.expression, bindings)
    raise TypeError(f"Unexpected predicate {predicate!r}")


@pytest.fixture(scope="session")
def evaluator():
    """Reference evaluator: (predicate, bindings) -> bool"""
    return evaluate_predicate


@pytest.fixture(scope="session")
def time_evaluator():
    """Reference evaluator: (time expression, bindings) -> int"""
    return evaluate_time


@pytest.fixture
def epoch_literal():
    return TimeLiteral("1970-01-01T00:00:00")


@pytest.fixture
def global_tx_from():
    return TimeSelector.global_selector(TimeField.TX_FROM)


@pytest.fixture
def local_val_to():
    return TimeSelector("var", TimeField.VAL_TO)
