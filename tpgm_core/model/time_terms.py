"""
TPGM Core Model - Time Terms

Derived time expressions: MIN/MAX over time points and durations between
two time points.
"""

from collections import Counter
from typing import Callable, Iterable, Optional, Sequence, Set, Tuple

from .base import ArgumentCountError
from .time_points import TemporalExpression, TimePoint


# =============================================================================
# MIN / MAX
# =============================================================================

class TimeTerm(TimePoint):
    """
    An operator applied to two or more time points.

    Terms are immutable; use replace_global_by_local() (or build a new term)
    instead of changing arguments in place. Equality ignores argument order
    but counts duplicates.
    """

    operator: str = ""
    _aggregate: Callable[[Iterable[int]], int]

    __slots__ = ('_args',)

    def __init__(self, *args: TimePoint):
        if len(args) < 2:
            raise ArgumentCountError(
                f"{self.operator} needs at least two arguments, got {len(args)}."
            )
        self._args: Tuple[TimePoint, ...] = tuple(args)

    @property
    def args(self) -> Tuple[TimePoint, ...]:
        return self._args

    def __setattr__(self, name, value):
        if hasattr(self, '_args'):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def evaluate(self) -> Optional[int]:
        values = []
        for arg in self._args:
            value = arg.evaluate()
            if value is None:
                return None
            values.append(value)
        return type(self)._aggregate(values)

    def get_variables(self) -> Set[str]:
        variables = set()
        for arg in self._args:
            variables |= arg.get_variables()
        return variables

    def get_variable(self) -> Optional[str]:
        return None

    def contains_selector_type(self, field) -> bool:
        return any(arg.contains_selector_type(field) for arg in self._args)

    def is_global(self) -> bool:
        return any(arg.is_global() for arg in self._args)

    def replace_global_by_local(self, variables: Sequence[str]) -> 'TimeTerm':
        new_args = [arg.replace_global_by_local(variables) for arg in self._args]
        if all(new is old for new, old in zip(new_args, self._args)):
            return self
        return type(self)(*new_args)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return False
        return Counter(self._args) == Counter(other._args)

    def __hash__(self) -> int:
        return hash((self.operator, frozenset(Counter(self._args).items())))

    def __str__(self) -> str:
        return f"{self.operator}({', '.join(str(arg) for arg in self._args)})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(arg) for arg in self._args)})"


class MinTimePoint(TimeTerm):
    """MIN(p1, ..., pn): the earliest of its arguments"""

    operator = "MIN"
    _aggregate = min

    __slots__ = ()


class MaxTimePoint(TimeTerm):
    """MAX(p1, ..., pn): the latest of its arguments"""

    operator = "MAX"
    _aggregate = max

    __slots__ = ()


# =============================================================================
# Duration
# =============================================================================

class Duration(TemporalExpression):
    """
    Signed length of the interval from `from_` to `to`.

    Example:
        Duration(TimeLiteral("1970-01-01T00:00:00"),
                 TimeLiteral("1970-01-01T00:00:01")).evaluate()  # 1000
    """

    __slots__ = ('_from', '_to')

    def __init__(self, from_: TimePoint, to: TimePoint):
        object.__setattr__(self, '_from', from_)
        object.__setattr__(self, '_to', to)

    def __setattr__(self, name, value):
        raise AttributeError("Duration is immutable")

    @property
    def from_(self) -> TimePoint:
        return self._from

    @property
    def to(self) -> TimePoint:
        return self._to

    def evaluate(self) -> Optional[int]:
        start = self._from.evaluate()
        end = self._to.evaluate()
        if start is None or end is None:
            return None
        return end - start

    def get_variables(self) -> Set[str]:
        return self._from.get_variables() | self._to.get_variables()

    def get_variable(self) -> Optional[str]:
        return None

    def contains_selector_type(self, field) -> bool:
        return self._from.contains_selector_type(field) or self._to.contains_selector_type(field)

    def is_global(self) -> bool:
        return self._from.is_global() or self._to.is_global()

    def replace_global_by_local(self, variables: Sequence[str]) -> 'Duration':
        new_from = self._from.replace_global_by_local(variables)
        new_to = self._to.replace_global_by_local(variables)
        if new_from is self._from and new_to is self._to:
            return self
        return Duration(new_from, new_to)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Duration):
            return False
        return self._from == other._from and self._to == other._to

    def __hash__(self) -> int:
        return hash(("Duration", self._from, self._to))

    def __str__(self) -> str:
        return f"Duration({self._from}, {self._to})"

    def __repr__(self) -> str:
        return f"Duration({self._from!r}, {self._to!r})"
