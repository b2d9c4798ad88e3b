"""
TPGM Core Model - Time Points

Atomic time expressions: constants, literals and selectors.

Every element of a TPGM graph carries four timestamps (valid-from/to and
transaction-from/to). A selector refers to one of them, either for a single
query variable (local) or for the pattern as a whole (global).

Example:
    TimeSelector("a", TimeField.VAL_FROM)          # a.val_from
    TimeSelector.global_selector("tx_to")          # tx_to of the whole match
    TimeLiteral("2020-04-06T15:33:00").evaluate()  # 1586187180000
"""

from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Sequence, Set, Union

from tpgm_core.utils.time_utils import (
    as_millis,
    format_millis,
    millis_to_datetime,
    millis_to_fields,
    now_millis,
    parse_time_string,
)
from .base import (
    GLOBAL_SELECTOR,
    ComparableExpression,
    Comparator,
    TimeFieldError,
    TimeLiteralError,
    validate_variables,
)

# =============================================================================
# Enums
# =============================================================================

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY = 24 * MILLIS_PER_HOUR


class TimeField(Enum):
    """The four TPGM timestamps of a graph element"""
    VAL_FROM = "val_from"
    VAL_TO = "val_to"
    TX_FROM = "tx_from"
    TX_TO = "tx_to"

    @property
    def is_start(self) -> bool:
        """True for the start of a validity interval (val_from, tx_from)"""
        return self in (TimeField.VAL_FROM, TimeField.TX_FROM)

    @classmethod
    def parse(cls, field: Union[str, 'TimeField']) -> 'TimeField':
        """
        Parse a field name, ignoring case and surrounding whitespace.

        Raises:
            TimeFieldError: If the name is not one of the four fields
        """
        if isinstance(field, TimeField):
            return field
        if isinstance(field, str):
            try:
                return cls(field.strip().lower())
            except ValueError:
                pass
        raise TimeFieldError(
            f"The given string [{field}] can not be parsed to a time field."
        )


# =============================================================================
# Base Classes
# =============================================================================

class TemporalExpression(ComparableExpression):
    """
    Comparable expression with a time value.

    Base of TimePoint and Duration.
    """

    @abstractmethod
    def evaluate(self) -> Optional[int]:
        """
        Milliseconds denoted by this expression.

        Returns None when the value depends on bound graph data.
        """
        pass


class TimePoint(TemporalExpression):
    """A point in time, possibly symbolic"""
    pass


# =============================================================================
# Atoms
# =============================================================================

@dataclass(frozen=True)
class TimeConstant(TimePoint):
    """
    A plain amount of milliseconds, not anchored to the epoch.

    Example:
        TimeConstant.from_components(days=1, hours=2).millis  # 93600000
    """

    millis: int

    @classmethod
    def from_components(cls, days: int = 0, hours: int = 0, minutes: int = 0,
                        seconds: int = 0, millis: int = 0) -> 'TimeConstant':
        """Build a constant from day/hour/minute/second/millisecond parts."""
        total = (millis
                 + MILLIS_PER_SECOND * seconds
                 + MILLIS_PER_MINUTE * minutes
                 + MILLIS_PER_HOUR * hours
                 + MILLIS_PER_DAY * days)
        return cls(total)

    def evaluate(self) -> Optional[int]:
        return self.millis

    def get_variables(self) -> Set[str]:
        return set()

    def get_variable(self) -> Optional[str]:
        return None

    def contains_selector_type(self, field) -> bool:
        return False

    def is_global(self) -> bool:
        return False

    def replace_global_by_local(self, variables: Sequence[str]) -> 'TimeConstant':
        return self

    def __str__(self) -> str:
        return f"Constant({self.millis})"


@dataclass(frozen=True, init=False)
class TimeLiteral(TimePoint):
    """
    An absolute UTC timestamp in epoch milliseconds.

    TimeLiteral(0)                      -> 1970-01-01T00:00:00
    TimeLiteral("2020-04-05")           -> midnight of that day
    TimeLiteral("2020-04-05T10:00:00")
    TimeLiteral("now") / TimeLiteral()  -> current time, captured here
    """

    millis: int

    def __init__(self, value: Union[int, str, datetime, None] = None):
        if value is None:
            millis = now_millis()
        elif isinstance(value, str):
            try:
                millis = parse_time_string(value)
            except ValueError as e:
                raise TimeLiteralError(str(e)) from e
        else:
            try:
                millis = as_millis(value)
            except TypeError as e:
                raise TimeLiteralError(str(e)) from e
        object.__setattr__(self, 'millis', millis)

    @classmethod
    def now(cls) -> 'TimeLiteral':
        """Literal for the current time."""
        return cls()

    @classmethod
    def from_fields(cls, year: int, month: int, day: int, hour: int = 0,
                    minute: int = 0, second: int = 0, millisecond: int = 0) -> 'TimeLiteral':
        """
        Build a literal from UTC calendar fields.

        Raises:
            TimeLiteralError: If the fields do not form a valid date
        """
        try:
            value = datetime(year, month, day, hour, minute, second, millisecond * 1000)
        except ValueError as e:
            raise TimeLiteralError(f"Invalid calendar fields: {e}") from e
        return cls(value)

    # -------------------------------------------------------------------------
    # Calendar accessors (UTC)
    # -------------------------------------------------------------------------

    def to_datetime(self) -> datetime:
        """
        Aware UTC datetime of this literal.

        Raises:
            TimeLiteralError: If the literal lies outside years 1..9999
        """
        try:
            return millis_to_datetime(self.millis)
        except OverflowError as e:
            raise TimeLiteralError(
                f"{self.millis} is outside the range of datetime: {e}"
            ) from e

    # The accessors below are defined for every millis value

    @property
    def year(self) -> int:
        return millis_to_fields(self.millis)[0]

    @property
    def month(self) -> int:
        return millis_to_fields(self.millis)[1]

    @property
    def day(self) -> int:
        return millis_to_fields(self.millis)[2]

    @property
    def hour(self) -> int:
        return millis_to_fields(self.millis)[3]

    @property
    def minute(self) -> int:
        return millis_to_fields(self.millis)[4]

    @property
    def second(self) -> int:
        return millis_to_fields(self.millis)[5]

    @property
    def millisecond(self) -> int:
        return self.millis % MILLIS_PER_SECOND

    # -------------------------------------------------------------------------
    # Expression interface
    # -------------------------------------------------------------------------

    def evaluate(self) -> Optional[int]:
        return self.millis

    def get_variables(self) -> Set[str]:
        return set()

    def get_variable(self) -> Optional[str]:
        return None

    def contains_selector_type(self, field) -> bool:
        return False

    def is_global(self) -> bool:
        return False

    def replace_global_by_local(self, variables: Sequence[str]) -> 'TimeLiteral':
        return self

    def __str__(self) -> str:
        return format_millis(self.millis)


@dataclass(frozen=True)
class TimeSelector(TimePoint):
    """
    One of the four timestamps of a query variable.

    A selector without variable (variable=None) is global: it stands for the
    timestamp of the whole match. The match exists while all of its elements
    exist, so the global start (val_from, tx_from) is the latest local start
    and the global end (val_to, tx_to) the earliest local end. The sentinel
    name GLOBAL_SELECTOR is accepted as variable and means the same.
    """

    variable: Optional[str]
    field: TimeField

    def __post_init__(self):
        object.__setattr__(self, 'field', TimeField.parse(self.field))
        if self.variable == GLOBAL_SELECTOR:
            object.__setattr__(self, 'variable', None)

    @classmethod
    def global_selector(cls, field: Union[str, TimeField]) -> 'TimeSelector':
        """Selector for a field of the whole pattern."""
        return cls(None, field)

    def evaluate(self) -> Optional[int]:
        # Depends on the element bound at execution time
        return None

    def get_variables(self) -> Set[str]:
        return {self.get_variable()}

    def get_variable(self) -> Optional[str]:
        return GLOBAL_SELECTOR if self.variable is None else self.variable

    def contains_selector_type(self, field) -> bool:
        return self.field == TimeField.parse(field)

    def is_global(self) -> bool:
        return self.variable is None

    def local(self, variable: str) -> 'TimeSelector':
        """Same field, scoped to one variable."""
        return TimeSelector(variable, self.field)

    def replace_global_by_local(self, variables: Sequence[str]) -> TimePoint:
        """
        Express a global selector through the selectors of all variables.

        One variable yields its local selector. Otherwise start fields become
        MAX(...) and end fields MIN(...) of the local selectors. Local
        selectors are returned unchanged.
        """
        if not self.is_global():
            return self
        validate_variables(variables)
        selectors = [self.local(variable) for variable in variables]
        if len(selectors) == 1:
            return selectors[0]

        from .time_terms import MaxTimePoint, MinTimePoint

        if self.field.is_start:
            return MaxTimePoint(*selectors)
        return MinTimePoint(*selectors)

    def unfold_global(self, comparator: Comparator, rhs: ComparableExpression,
                      variables: Sequence[str]):
        """
        Rewrite `self comparator rhs` into a predicate over local selectors.

        For a local selector this is just the comparison itself.
        """
        from .predicates import Comparison

        if not self.is_global():
            return Comparison(self, comparator, rhs)

        from tpgm_core.operators.unfold import unfold_global

        return unfold_global(self.field, comparator, rhs, variables)

    def __str__(self) -> str:
        return f"{self.get_variable()}.{self.field.name}"
