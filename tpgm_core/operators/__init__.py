# File: tpgm_core/operators/__init__.py
"""
TPGM Operators Module

Exports:
- unfold_global: global selector comparison -> predicate over local selectors
- exists_variable / for_all_variables: quantifier expansion over query variables
- unfold_comparison / unfold_global_predicates: rewrite of whole predicate trees
"""

from tpgm_core.operators.unfold import (
    exists_variable,
    for_all_variables,
    unfold_global,
    unfold_comparison,
    unfold_global_predicates,
)

__all__ = [
    "exists_variable",
    "for_all_variables",
    "unfold_global",
    "unfold_comparison",
    "unfold_global_predicates",
]
