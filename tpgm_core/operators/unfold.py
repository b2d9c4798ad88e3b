"""
Global selector unfolding.

A global selector stands for a timestamp of the whole match. A match exists
while all of its elements exist: the global start (val_from, tx_from) is the
MAX of the local starts of all query variables, the global end (val_to,
tx_to) the MIN of their local ends.

A comparison `global.field op rhs` is therefore equivalent to a finite
quantified formula over the local selectors, with the quantifiers ranging
over the query variables:

    op  | start field (global = MAX)    | end field (global = MIN)
    ----+-------------------------------+------------------------------
    =   | (E v: v = rhs) & (A v: v <= rhs) | (E v: v = rhs) & (A v: v >= rhs)
    !=  | A v: v != rhs                 | A v: v != rhs
    <   | A v: v < rhs                  | E v: v < rhs
    <=  | A v: v <= rhs                 | E v: v <= rhs
    >   | E v: v > rhs                  | A v: v > rhs
    >=  | E v: v >= rhs                 | A v: v >= rhs

E is expanded into a left-deep Or chain, A into a left-deep And chain.
"""

from functools import reduce
from typing import Sequence, Union

from tpgm_core.model.base import (
    ComparableExpression,
    Comparator,
    ValidationError,
    validate_variables,
)
from tpgm_core.model.predicates import And, Comparison, Not, Or, Predicate
from tpgm_core.model.time_points import TimeField, TimeSelector
from tpgm_core.utils.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Quantifier expansion
# =============================================================================

def _local_comparisons(field: TimeField, comparator: Comparator,
                       rhs: ComparableExpression, variables: Sequence[str]):
    return [Comparison(TimeSelector(variable, field), comparator, rhs) for variable in variables]


def exists_variable(field: Union[str, TimeField], comparator: Comparator,
                    rhs: ComparableExpression, variables: Sequence[str]) -> Predicate:
    """
    E v in variables: v.field comparator rhs

    Returns the single comparison for one variable, otherwise
    Or(Or(c0, c1), c2)...
    """
    field = TimeField.parse(field)
    validate_variables(variables)
    return reduce(Or, _local_comparisons(field, comparator, rhs, variables))


def for_all_variables(field: Union[str, TimeField], comparator: Comparator,
                      rhs: ComparableExpression, variables: Sequence[str]) -> Predicate:
    """
    A v in variables: v.field comparator rhs

    Returns the single comparison for one variable, otherwise
    And(And(c0, c1), c2)...
    """
    field = TimeField.parse(field)
    validate_variables(variables)
    return reduce(And, _local_comparisons(field, comparator, rhs, variables))


# =============================================================================
# Unfolding
# =============================================================================

def unfold_global(field: Union[str, TimeField], comparator: Comparator,
                  rhs: ComparableExpression, variables: Sequence[str]) -> Predicate:
    """
    Translate `global.field comparator rhs` into a predicate over the local
    selectors of `variables`.

    @:param     field: Time field of the global selector
    @:param     comparator: Comparator between global selector and rhs
    @:param     rhs: Right-hand side, must not be global itself
    @:param     variables: All variables bound in the pattern (non-empty)

    Raises:
        VariablesError: If variables is empty
    """
    field = TimeField.parse(field)
    validate_variables(variables)
    logger.debug("Unfolding global %s %s %s over %s", field.name, comparator, rhs, list(variables))

    start = field.is_start

    if comparator is Comparator.EQ:
        # MAX of starts == rhs: some start equals rhs and no start is later
        # MIN of ends == rhs: some end equals rhs and no end is earlier
        bound = Comparator.LTE if start else Comparator.GTE
        return And(
            exists_variable(field, Comparator.EQ, rhs, variables),
            for_all_variables(field, bound, rhs, variables)
        )
    if comparator is Comparator.NEQ:
        return for_all_variables(field, Comparator.NEQ, rhs, variables)
    if comparator in (Comparator.LT, Comparator.LTE):
        quantifier = for_all_variables if start else exists_variable
    elif comparator in (Comparator.GT, Comparator.GTE):
        quantifier = exists_variable if start else for_all_variables
    else:
        raise ValidationError(f"Unsupported comparator: {comparator!r}")
    return quantifier(field, comparator, rhs, variables)


def unfold_comparison(comparison: Comparison, variables: Sequence[str]) -> Predicate:
    """
    Remove global selectors from a single comparison.

    - global selector op local expression: unfolded via the quantifier table
    - local expression op global selector: sides switched, then unfolded
    - any other global comparison: both sides rewritten with
      replace_global_by_local (MAX/MIN of local selectors)
    """
    if not comparison.is_global():
        return comparison

    lhs, rhs = comparison.lhs, comparison.rhs
    if isinstance(lhs, TimeSelector) and lhs.is_global() and not rhs.is_global():
        return lhs.unfold_global(comparison.comparator, rhs, variables)
    if isinstance(rhs, TimeSelector) and rhs.is_global() and not lhs.is_global():
        return unfold_comparison(comparison.switch_sides(), variables)

    logger.debug("Replacing global selectors structurally in %s", comparison)
    validate_variables(variables)
    return comparison.replace_global_by_local(variables)


def unfold_global_predicates(predicate: Predicate, variables: Sequence[str]) -> Predicate:
    """
    Rewrite every global comparison in a predicate tree.

    Subtrees without global selectors are returned as they are.
    """
    if not predicate.is_global():
        return predicate
    if isinstance(predicate, Comparison):
        return unfold_comparison(predicate, variables)
    if isinstance(predicate, Not):
        return Not(unfold_global_predicates(predicate.expression, variables))
    if isinstance(predicate, (And, Or)):
        return type(predicate)(
            unfold_global_predicates(predicate.lhs, variables),
            unfold_global_predicates(predicate.rhs, variables)
        )
    raise ValidationError(f"Unknown predicate type: {type(predicate).__name__}")
