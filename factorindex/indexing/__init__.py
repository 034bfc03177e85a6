"""
Index cursors over mixed-radix configuration spaces.

Key components:
  - projecting.py: ProjectingIndex, full-space walk tracking a subspace index
  - embedding.py: EmbeddingIndex, subspace walk reporting full-space indices
  - permutation.py: PermutationIndex, index transform between variable orders
"""

from factorindex.indexing.projecting import ProjectingIndex
from factorindex.indexing.embedding import EmbeddingIndex, rest_offsets
from factorindex.indexing.permutation import PermutationIndex

__all__ = [
    "ProjectingIndex",
    "EmbeddingIndex",
    "rest_offsets",
    "PermutationIndex",
]
