"""
Core types: discrete variables, canonical variable collections and errors.
"""

from factorindex.core.errors import (
    require_contains,
    IndexPreconditionError,
    ContainmentError,
    DuplicateVariableError,
)
from factorindex.core.variables import Variable, VariableSet

__all__ = [
    "IndexPreconditionError",
    "ContainmentError",
    "DuplicateVariableError",
    "require_contains",
    "Variable",
    "VariableSet",
]
