"""
Domain models and value objects.

Contains RationalMatrix and the immutable output models of a computation.
"""

from fourspaces.core.domain.matrix import RationalMatrix, Vector, vector_to_typeset_string
from fourspaces.core.domain.results import (
    ComputationResult,
    DimensionCheck,
    MatrixShape,
    RREFSummary,
    SubspaceSummary,
)

__all__ = [
    # Matrix
    "RationalMatrix",
    "Vector",
    "vector_to_typeset_string",
    # Output models
    "ComputationResult",
    "DimensionCheck",
    "MatrixShape",
    "RREFSummary",
    "SubspaceSummary",
]
