"""
TPGM Core Model - Base Classes

Comparator enum, the comparable-expression interface shared by every
operand of a comparison, and the validation errors of the model layer.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Sequence, Set

from tpgm_core.utils.config import SETTINGS

# =============================================================================
# Constants
# =============================================================================

# Variable name reported by global selectors. Must never be used as a query
# variable; the compiler owns that contract.
GLOBAL_SELECTOR = SETTINGS.global_selector


# =============================================================================
# Validation
# =============================================================================

class ValidationError(Exception):
    """Raised when a model node can not be constructed"""
    pass


class ArgumentCountError(ValidationError):
    """Raised when a MIN/MAX term gets fewer than two arguments"""
    pass


class TimeFieldError(ValidationError):
    """Raised when a string does not name one of the four time fields"""
    pass


class TimeLiteralError(ValidationError):
    """Raised when a time literal string can not be parsed"""
    pass


class ComparatorError(ValidationError):
    """Raised when a string does not name a comparator"""
    pass


class VariablesError(ValidationError):
    """Raised when a global rewrite gets no query variables"""
    pass


def validate_variables(variables: Sequence[str]) -> None:
    """
    Validate the query variable list used by global rewrites.

    Raises:
        VariablesError: If the list is empty
    """
    if not variables:
        raise VariablesError(
            "At least one query variable is needed to resolve a global selector"
        )


# =============================================================================
# Enums
# =============================================================================

class Comparator(Enum):
    """Relational operators of temporal and property comparisons"""
    EQ = "="
    NEQ = "!="
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="

    def switch_sides(self) -> 'Comparator':
        """
        Comparator to use when both operands swap places.

        a < b  <=>  b > a, so LT maps to GT; EQ and NEQ are symmetric.
        """
        return _SWITCHED[self]

    @classmethod
    def from_string(cls, symbol: str) -> 'Comparator':
        """
        Parse a comparator symbol.

        Raises:
            ComparatorError: If the symbol is unknown
        """
        if not isinstance(symbol, str):
            raise ComparatorError(
                f"Comparator symbol must be a string, got {type(symbol).__name__} [{symbol!r}]"
            )
        try:
            return _SYMBOLS[symbol.strip()]
        except KeyError:
            raise ComparatorError(
                f"The given string [{symbol}] can not be parsed to a comparator."
            ) from None

    def __str__(self) -> str:
        return self.value


_SWITCHED = {
    Comparator.EQ: Comparator.EQ,
    Comparator.NEQ: Comparator.NEQ,
    Comparator.LT: Comparator.GT,
    Comparator.LTE: Comparator.GTE,
    Comparator.GT: Comparator.LT,
    Comparator.GTE: Comparator.LTE,
}

_SYMBOLS = {c.value: c for c in Comparator}
_SYMBOLS["=="] = Comparator.EQ
_SYMBOLS["<>"] = Comparator.NEQ


# =============================================================================
# Comparable Expression
# =============================================================================

class ComparableExpression(ABC):
    """
    Operand of a comparison.

    Implemented by time points, durations and the non-temporal selectors.
    Implementations are immutable.
    """

    @abstractmethod
    def get_variables(self) -> Set[str]:
        """Distinct variable names referenced by this expression"""
        pass

    @abstractmethod
    def get_variable(self) -> Optional[str]:
        """The single variable of an atomic selector, None otherwise"""
        pass

    @abstractmethod
    def contains_selector_type(self, field) -> bool:
        """Check if a time selector of the given field is reachable"""
        pass

    @abstractmethod
    def is_global(self) -> bool:
        """Check if a global time selector is reachable"""
        pass

    @abstractmethod
    def replace_global_by_local(self, variables: Sequence[str]) -> 'ComparableExpression':
        """Rewrite every global selector in terms of the given variables"""
        pass
