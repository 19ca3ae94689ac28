"""Subspace Extractor — четыре фундаментальных подпространства

Для A (m×n) и её RREF:
- C(A)   — столбцы ИСХОДНОЙ A с pivot-индексами; dim = rank, ambient = m
- C(Aᵗ)  — ненулевые строки RREF; dim = rank, ambient = n
- N(A)   — по одному вектору на свободный столбец f:
           x_f = 1, прочие свободные = 0, x_{pivot_k} = -rref[k][f];
           dim = n - rank, ambient = n
- N(Aᵗ)  — та же конструкция для RREF(Aᵗ); dim = m - rank, ambient = m

Проверка теоремы о размерности (rank + nullity) вычисляется и возвращается,
а не только утверждается.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Final, List, Optional, Tuple

from fourspaces.core.domain.matrix import RationalMatrix, Vector
from fourspaces.core.math.rational import ONE, ZERO, Rational
from fourspaces.engine.rref import RREFResult, compute_rref


# =============================================================================
# ENUMS & TEMPLATES
# =============================================================================


class SubspaceKind(str, Enum):
    """Вид фундаментального подпространства."""

    COLUMN_SPACE = "column_space"
    ROW_SPACE = "row_space"
    NULL_SPACE = "null_space"
    LEFT_NULL_SPACE = "left_null_space"


# Фиксированные шаблоны описаний; {ambient}: размерность объемлющего ℝ^k
SUBSPACE_DESCRIPTIONS: Final[Dict[SubspaceKind, str]] = {
    SubspaceKind.COLUMN_SPACE: "Span of the pivot columns of A, a subspace of R^{ambient}",
    SubspaceKind.ROW_SPACE: "Span of the non-zero rows of RREF(A), a subspace of R^{ambient}",
    SubspaceKind.NULL_SPACE: "All solutions of Ax = 0, a subspace of R^{ambient}",
    SubspaceKind.LEFT_NULL_SPACE: "All solutions of A^T y = 0, a subspace of R^{ambient}",
}


# =============================================================================
# VALUE TYPES
# =============================================================================


@dataclass(frozen=True)
class Subspace:
    """Подпространство: базис и размерность.

    Инварианты:
    - len(basis) == dimension
    - каждый вектор базиса имеет длину ambient_dimension
    - dimension == 0 ⇔ basis пуст (тривиальное подпространство)
    """

    kind: SubspaceKind
    ambient_dimension: int
    basis: Tuple[Vector, ...]

    def __post_init__(self):
        for vector in self.basis:
            if len(vector) != self.ambient_dimension:
                raise ValueError(
                    f"{self.kind.value}: basis vector of length {len(vector)} "
                    f"in R^{self.ambient_dimension}"
                )

    @property
    def dimension(self) -> int:
        return len(self.basis)

    @property
    def is_trivial(self) -> bool:
        return not self.basis

    @property
    def description(self) -> str:
        return SUBSPACE_DESCRIPTIONS[self.kind].format(ambient=self.ambient_dimension)


@dataclass(frozen=True)
class DimensionTheoremCheck:
    """rank + dim N(A) == n и rank + dim N(Aᵗ) == m."""

    rows: int
    cols: int
    rank: int
    nullity: int
    left_nullity: int

    @property
    def rank_plus_nullity(self) -> int:
        return self.rank + self.nullity

    @property
    def rank_plus_left_nullity(self) -> int:
        return self.rank + self.left_nullity

    @property
    def holds(self) -> bool:
        return self.rank_plus_nullity == self.cols and self.rank_plus_left_nullity == self.rows


@dataclass(frozen=True)
class FundamentalSubspaces:
    """Полный числовой результат извлечения."""

    matrix: RationalMatrix
    rref: RREFResult
    transpose_rref: RREFResult
    column_space: Subspace
    row_space: Subspace
    null_space: Subspace
    left_null_space: Subspace
    dimension_check: DimensionTheoremCheck

    @property
    def rank(self) -> int:
        return self.rref.rank

    def subspaces(self) -> Tuple[Subspace, ...]:
        return (self.column_space, self.row_space, self.null_space, self.left_null_space)


# =============================================================================
# EXTRACTION
# =============================================================================


def column_space(matrix: RationalMatrix, rref_result: RREFResult) -> Subspace:
    """Базис C(A): столбцы исходной матрицы в pivot-позициях."""
    basis = tuple(matrix.column(j) for j in rref_result.pivots)
    return Subspace(kind=SubspaceKind.COLUMN_SPACE, ambient_dimension=matrix.rows, basis=basis)


def row_space(rref_result: RREFResult) -> Subspace:
    """Базис C(Aᵗ): первые rank строк RREF (остальные нулевые по построению)."""
    rref = rref_result.rref
    basis = tuple(rref.row(k) for k in range(rref_result.rank))
    return Subspace(kind=SubspaceKind.ROW_SPACE, ambient_dimension=rref.cols, basis=basis)


def null_space_basis(rref_result: RREFResult) -> Tuple[Vector, ...]:
    """Базис ядра через свободные переменные.

    Строка k RREF кодирует x_{pivot_k} + Σ_{free j} rref[k][j]·x_j = 0,
    поэтому при x_f = 1 и прочих свободных = 0: x_{pivot_k} = -rref[k][f].
    """
    rref = rref_result.rref
    basis: List[Vector] = []

    for free in rref_result.free_columns:
        vector: List[Rational] = [ZERO] * rref.cols
        vector[free] = ONE
        for k, pivot_col in enumerate(rref_result.pivots):
            vector[pivot_col] = rref.get(k, free).negate()
        basis.append(tuple(vector))

    return tuple(basis)


def null_space(rref_result: RREFResult) -> Subspace:
    return Subspace(
        kind=SubspaceKind.NULL_SPACE,
        ambient_dimension=rref_result.rref.cols,
        basis=null_space_basis(rref_result),
    )


def left_null_space(
    matrix: RationalMatrix,
    transpose_rref: Optional[RREFResult] = None,
) -> Subspace:
    """N(Aᵗ) = ядро транспонированной матрицы."""
    if transpose_rref is None:
        transpose_rref = compute_rref(matrix.transpose())
    return Subspace(
        kind=SubspaceKind.LEFT_NULL_SPACE,
        ambient_dimension=matrix.rows,
        basis=null_space_basis(transpose_rref),
    )


def extract_fundamental_subspaces(
    matrix: RationalMatrix,
    rref_result: Optional[RREFResult] = None,
    transpose_rref: Optional[RREFResult] = None,
) -> FundamentalSubspaces:
    """Все четыре подпространства и проверка теоремы о размерности.

    Args:
        matrix: исходная матрица A
        rref_result: RREF(A), если уже вычислен
        transpose_rref: RREF(Aᵗ), если уже вычислен

    Returns:
        FundamentalSubspaces
    """
    if rref_result is None:
        rref_result = compute_rref(matrix)
    if transpose_rref is None:
        transpose_rref = compute_rref(matrix.transpose())

    null = null_space(rref_result)
    left_null = left_null_space(matrix, transpose_rref)

    check = DimensionTheoremCheck(
        rows=matrix.rows,
        cols=matrix.cols,
        rank=rref_result.rank,
        nullity=null.dimension,
        left_nullity=left_null.dimension,
    )

    return FundamentalSubspaces(
        matrix=matrix,
        rref=rref_result,
        transpose_rref=transpose_rref,
        column_space=column_space(matrix, rref_result),
        row_space=row_space(rref_result),
        null_space=null,
        left_null_space=left_null,
        dimension_check=check,
    )
