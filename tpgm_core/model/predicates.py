"""
TPGM Core Model - Predicates

Boolean predicate tree handed back to the query compiler: And, Or, Not and
Comparison. All nodes are immutable.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence, Set, Tuple

from .base import ComparableExpression, Comparator
from .time_points import TemporalExpression


class Predicate(ABC):
    """Node of a boolean predicate tree"""

    @abstractmethod
    def get_arguments(self) -> Tuple['Predicate', ...]:
        """Direct sub-predicates (empty for comparisons)"""
        pass

    @abstractmethod
    def get_variables(self) -> Set[str]:
        pass

    @abstractmethod
    def contains_selector_type(self, field) -> bool:
        pass

    @abstractmethod
    def is_global(self) -> bool:
        pass

    @abstractmethod
    def is_temporal(self) -> bool:
        pass

    @abstractmethod
    def replace_global_by_local(self, variables: Sequence[str]) -> 'Predicate':
        pass

    def unfold_global(self, variables: Sequence[str]) -> 'Predicate':
        """
        Rewrite every global comparison below this node into local ones.

        See tpgm_core.operators.unfold.unfold_global_predicates.
        """
        from tpgm_core.operators.unfold import unfold_global_predicates

        return unfold_global_predicates(self, variables)


# =============================================================================
# Boolean Combinators
# =============================================================================

class _BinaryPredicate(Predicate):
    """Shared behaviour of And / Or"""

    keyword = ""
    lhs: Predicate
    rhs: Predicate

    def get_arguments(self) -> Tuple[Predicate, ...]:
        return (self.lhs, self.rhs)

    def get_variables(self) -> Set[str]:
        return self.lhs.get_variables() | self.rhs.get_variables()

    def contains_selector_type(self, field) -> bool:
        return self.lhs.contains_selector_type(field) or self.rhs.contains_selector_type(field)

    def is_global(self) -> bool:
        return self.lhs.is_global() or self.rhs.is_global()

    def is_temporal(self) -> bool:
        return self.lhs.is_temporal() or self.rhs.is_temporal()

    def replace_global_by_local(self, variables: Sequence[str]) -> Predicate:
        lhs = self.lhs.replace_global_by_local(variables)
        rhs = self.rhs.replace_global_by_local(variables)
        if lhs is self.lhs and rhs is self.rhs:
            return self
        return type(self)(lhs, rhs)

    def __str__(self) -> str:
        return f"({self.lhs} {self.keyword} {self.rhs})"


@dataclass(frozen=True)
class And(_BinaryPredicate):
    """Conjunction of two predicates"""

    lhs: Predicate
    rhs: Predicate

    keyword = "AND"


@dataclass(frozen=True)
class Or(_BinaryPredicate):
    """Disjunction of two predicates"""

    lhs: Predicate
    rhs: Predicate

    keyword = "OR"


@dataclass(frozen=True)
class Not(Predicate):
    """Negation of a predicate"""

    expression: Predicate

    def get_arguments(self) -> Tuple[Predicate, ...]:
        return (self.expression,)

    def get_variables(self) -> Set[str]:
        return self.expression.get_variables()

    def contains_selector_type(self, field) -> bool:
        return self.expression.contains_selector_type(field)

    def is_global(self) -> bool:
        return self.expression.is_global()

    def is_temporal(self) -> bool:
        return self.expression.is_temporal()

    def replace_global_by_local(self, variables: Sequence[str]) -> Predicate:
        expression = self.expression.replace_global_by_local(variables)
        if expression is self.expression:
            return self
        return Not(expression)

    def __str__(self) -> str:
        return f"(NOT {self.expression})"


# =============================================================================
# Comparison
# =============================================================================

@dataclass(frozen=True)
class Comparison(Predicate):
    """
    Leaf predicate `lhs comparator rhs`.

    Example:
        Comparison(TimeSelector("a", TimeField.VAL_FROM), Comparator.LT,
                   TimeLiteral("2020-01-01"))
    """

    lhs: ComparableExpression
    comparator: Comparator
    rhs: ComparableExpression

    def get_arguments(self) -> Tuple[Predicate, ...]:
        return ()

    def get_comparable_expressions(self) -> Tuple[ComparableExpression, ComparableExpression]:
        return (self.lhs, self.rhs)

    def get_variables(self) -> Set[str]:
        return self.lhs.get_variables() | self.rhs.get_variables()

    def contains_selector_type(self, field) -> bool:
        return self.lhs.contains_selector_type(field) or self.rhs.contains_selector_type(field)

    def is_global(self) -> bool:
        return self.lhs.is_global() or self.rhs.is_global()

    def is_temporal(self) -> bool:
        """True if a time expression takes part in this comparison."""
        return isinstance(self.lhs, TemporalExpression) or isinstance(self.rhs, TemporalExpression)

    def switch_sides(self) -> 'Comparison':
        """Equivalent comparison with both operands swapped (a < b -> b > a)."""
        return Comparison(self.rhs, self.comparator.switch_sides(), self.lhs)

    def replace_global_by_local(self, variables: Sequence[str]) -> Predicate:
        lhs = self.lhs.replace_global_by_local(variables)
        rhs = self.rhs.replace_global_by_local(variables)
        if lhs is self.lhs and rhs is self.rhs:
            return self
        return Comparison(lhs, self.comparator, rhs)

    def __str__(self) -> str:
        return f"{self.lhs} {self.comparator} {self.rhs}"
