"""Result Assembler — упаковка числового результата в ComputationResult

Чистая упаковка: описания подпространств (фиксированные шаблоны), LaTeX для
RREF и каждого базисного вектора, суммы теоремы о размерности.

Числовых вычислений здесь нет. Typesetting best-effort: сбой рендеринга
одного элемента логируется и заменяется plain-text представлением, числовые
поля от этого не меняются.
"""

import logging
from typing import Callable, List

from fourspaces.core.domain.matrix import RationalMatrix, Vector, vector_to_typeset_string
from fourspaces.core.domain.results import (
    ComputationResult,
    DimensionCheck,
    MatrixShape,
    RREFSummary,
    SubspaceSummary,
)
from fourspaces.engine.subspaces import FundamentalSubspaces, Subspace

logger = logging.getLogger(__name__)


# =============================================================================
# TYPESETTING (best-effort)
# =============================================================================


def _plain_vector(vector: Vector) -> str:
    return "[" + ", ".join(str(value) for value in vector) + "]"


def _plain_matrix(matrix: RationalMatrix) -> str:
    return "[" + ", ".join(_plain_vector(matrix.row(i)) for i in range(matrix.rows)) + "]"


def _typeset(render: Callable[[], str], fallback: Callable[[], str], what: str) -> str:
    try:
        return render()
    except Exception:
        logger.warning("typesetting of %s failed, using plain text", what, exc_info=True)
        return fallback()


def typeset_matrix(matrix: RationalMatrix) -> str:
    return _typeset(matrix.to_typeset_string, lambda: _plain_matrix(matrix), "RREF matrix")


def typeset_vector(vector: Vector) -> str:
    return _typeset(
        lambda: vector_to_typeset_string(vector),
        lambda: _plain_vector(vector),
        "basis vector",
    )


# =============================================================================
# ASSEMBLER
# =============================================================================


class ResultAssembler:
    """Сборка ComputationResult из FundamentalSubspaces.

    Stateless: один экземпляр можно переиспользовать между вызовами.
    """

    def summarize_subspace(self, subspace: Subspace) -> SubspaceSummary:
        latex: List[str] = [typeset_vector(vector) for vector in subspace.basis]
        return SubspaceSummary(
            dimension=subspace.dimension,
            description=subspace.description,
            latex=latex,
        )

    def assemble(self, spaces: FundamentalSubspaces) -> ComputationResult:
        """
        Args:
            spaces: результат Subspace Extractor

        Returns:
            ComputationResult (immutable)
        """
        check = spaces.dimension_check
        return ComputationResult(
            matrix=MatrixShape(rows=spaces.matrix.rows, cols=spaces.matrix.cols),
            rank=spaces.rank,
            rref=RREFSummary(
                latex=typeset_matrix(spaces.rref.rref),
                pivots=list(spaces.rref.pivots),
            ),
            dimension_check=DimensionCheck(
                rank_plus_nullity=check.rank_plus_nullity,
                rank_plus_left_nullity=check.rank_plus_left_nullity,
            ),
            column_space=self.summarize_subspace(spaces.column_space),
            row_space=self.summarize_subspace(spaces.row_space),
            null_space=self.summarize_subspace(spaces.null_space),
            left_null_space=self.summarize_subspace(spaces.left_null_space),
        )
