"""
TPGM Core Model - Non-temporal Comparables

Element and property selectors and plain literals. They take part in
comparisons next to time expressions but never carry time fields.
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Set

from .base import ComparableExpression


@dataclass(frozen=True)
class ElementSelector(ComparableExpression):
    """Refers to the graph element bound to a variable (e.g. a = b)"""

    variable: str

    def get_variables(self) -> Set[str]:
        return {self.variable}

    def get_variable(self) -> Optional[str]:
        return self.variable

    def contains_selector_type(self, field) -> bool:
        return False

    def is_global(self) -> bool:
        return False

    def replace_global_by_local(self, variables: Sequence[str]) -> 'ElementSelector':
        return self

    def __str__(self) -> str:
        return self.variable


@dataclass(frozen=True)
class PropertySelector(ComparableExpression):
    """Refers to a property of the element bound to a variable (e.g. a.name)"""

    variable: str
    property_name: str

    def get_variables(self) -> Set[str]:
        return {self.variable}

    def get_variable(self) -> Optional[str]:
        return self.variable

    def contains_selector_type(self, field) -> bool:
        return False

    def is_global(self) -> bool:
        return False

    def replace_global_by_local(self, variables: Sequence[str]) -> 'PropertySelector':
        return self

    def __str__(self) -> str:
        return f"{self.variable}.{self.property_name}"


@dataclass(frozen=True)
class Literal(ComparableExpression):
    """A constant property value (string, number, boolean)"""

    value: Any

    def get_variables(self) -> Set[str]:
        return set()

    def get_variable(self) -> Optional[str]:
        return None

    def contains_selector_type(self, field) -> bool:
        return False

    def is_global(self) -> bool:
        return False

    def replace_global_by_local(self, variables: Sequence[str]) -> 'Literal':
        return self

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return f"'{self.value}'"
        return str(self.value)
