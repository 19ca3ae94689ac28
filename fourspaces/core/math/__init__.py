"""
Core math modules для fourspaces

Точная рациональная арифметика и разбор ячеек матрицы.
"""

# Rational
from fourspaces.core.math.rational import (
    MAX_DECIMAL_EXPONENT,
    MAX_LITERAL_LENGTH,
    ONE,
    ZERO,
    Rational,
    RationalLike,
)

# Parsing
from fourspaces.core.math.parsing import (
    DEFAULT_CELL_TEXT,
    MATRIX_MAX_DIMENSION,
    MATRIX_MIN_DIMENSION,
    clamp_dimension,
    empty_grid,
    parse_cell,
    parse_grid,
    resize_grid,
    validate_grid_shape,
)

__all__ = [
    # Rational: Constants
    "MAX_DECIMAL_EXPONENT",
    "MAX_LITERAL_LENGTH",
    "ONE",
    "ZERO",
    # Rational: Types
    "Rational",
    "RationalLike",
    # Parsing: Constants
    "DEFAULT_CELL_TEXT",
    "MATRIX_MAX_DIMENSION",
    "MATRIX_MIN_DIMENSION",
    # Parsing: Functions
    "clamp_dimension",
    "empty_grid",
    "parse_cell",
    "parse_grid",
    "resize_grid",
    "validate_grid_shape",
]
