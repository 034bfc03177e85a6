"""
factorindex: mixed-radix index arithmetic for discrete variable tables.

Enumerate, project, embed and permute the joint state space of a set of
discrete variables without materializing it.
"""

from factorindex.core import (
    Variable,
    VariableSet,
    IndexPreconditionError,
    ContainmentError,
    DuplicateVariableError,
)
from factorindex.indexing import (
    ProjectingIndex,
    EmbeddingIndex,
    rest_offsets,
    PermutationIndex,
)

__version__ = "0.1.0"

__all__ = [
    "Variable",
    "VariableSet",
    "IndexPreconditionError",
    "ContainmentError",
    "DuplicateVariableError",
    "ProjectingIndex",
    "EmbeddingIndex",
    "rest_offsets",
    "PermutationIndex",
]
