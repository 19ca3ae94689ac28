"""
fourspaces — точный движок линейной алгебры над рациональными числами.

RREF, ранг и четыре фундаментальных подпространства матрицы
(column space, row space, null space, left null space) с проверкой
теоремы о размерности для A и Aᵗ.
"""

from fourspaces.core.errors import (
    DimensionError,
    DivisionByZero,
    FourSpacesError,
    InternalInvariantError,
    MatrixInputError,
    ParseError,
)
from fourspaces.engine.pipeline import (
    EngineConfig,
    EngineResult,
    FourSpacesEngine,
    compute_fundamental_subspaces,
)

__version__ = "0.1.0"

__all__ = [
    "DimensionError",
    "DivisionByZero",
    "FourSpacesError",
    "InternalInvariantError",
    "MatrixInputError",
    "ParseError",
    "EngineConfig",
    "EngineResult",
    "FourSpacesEngine",
    "compute_fundamental_subspaces",
]
