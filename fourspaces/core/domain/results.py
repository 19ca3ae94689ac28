"""
ComputationResult — модель выходного контракта движка

Immutable Pydantic модели, model_dump() которых в точности совпадает с
payload, потребляемым внешними UI/persistence слоями:

    {
      "matrix": {"rows", "cols"},
      "rank": int,
      "rref": {"latex", "pivots"},
      "dimension_check": {"rank_plus_nullity", "rank_plus_left_nullity"},
      "column_space" | "row_space" | "null_space" | "left_null_space":
          {"dimension", "description", "latex": [...]}
    }

Совместимость с JSON Schema: fourspaces/core/contracts/schema/computation_result.json
"""

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# NESTED MODELS
# =============================================================================


class MatrixShape(BaseModel):
    """Размер входной матрицы."""

    rows: int = Field(..., ge=1, description="Количество строк m")
    cols: int = Field(..., ge=1, description="Количество столбцов n")

    model_config = {"frozen": True}


class RREFSummary(BaseModel):
    """RREF в LaTeX и pivot-столбцы (zero-based)."""

    latex: str = Field(..., description="RREF в виде LaTeX bmatrix")
    pivots: List[int] = Field(..., description="Pivot-столбцы по возрастанию")

    model_config = {"frozen": True}

    @field_validator("pivots")
    @classmethod
    def validate_pivots_ascending(cls, v: List[int]) -> List[int]:
        """Pivot-столбцы неотрицательны и строго возрастают."""
        if any(p < 0 for p in v):
            raise ValueError(f"pivots must be non-negative, got {v}")
        if any(a >= b for a, b in zip(v, v[1:])):
            raise ValueError(f"pivots must be strictly ascending, got {v}")
        return v


class DimensionCheck(BaseModel):
    """Суммы теоремы о размерности."""

    rank_plus_nullity: int = Field(..., ge=0, description="rank(A) + dim N(A)")
    rank_plus_left_nullity: int = Field(..., ge=0, description="rank(A) + dim N(Aᵗ)")

    model_config = {"frozen": True}


class SubspaceSummary(BaseModel):
    """Подпространство: размерность, описание, базис в LaTeX."""

    dimension: int = Field(..., ge=0, description="Размерность подпространства")
    description: str = Field(..., description="Описание подпространства")
    latex: List[str] = Field(..., description="Базисные векторы в LaTeX (по одному)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_basis_size(self) -> "SubspaceSummary":
        if len(self.latex) != self.dimension:
            raise ValueError(
                f"dimension {self.dimension} but {len(self.latex)} basis vectors"
            )
        return self


# =============================================================================
# COMPUTATION RESULT
# =============================================================================


class ComputationResult(BaseModel):
    """
    Результат вычисления для внешнего потребителя.

    Immutable модель (frozen=True). Инварианты:
    - len(rref.pivots) == rank
    - rank_plus_nullity == cols, rank_plus_left_nullity == rows
    - dim C(A) == dim C(Aᵗ) == rank
    """

    matrix: MatrixShape
    rank: int = Field(..., ge=0, description="Ранг матрицы")
    rref: RREFSummary
    dimension_check: DimensionCheck
    column_space: SubspaceSummary
    row_space: SubspaceSummary
    null_space: SubspaceSummary
    left_null_space: SubspaceSummary

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_rank_nullity(self) -> "ComputationResult":
        if len(self.rref.pivots) != self.rank:
            raise ValueError(
                f"rank {self.rank} does not match {len(self.rref.pivots)} pivots"
            )
        if self.rank > min(self.matrix.rows, self.matrix.cols):
            raise ValueError(
                f"rank {self.rank} exceeds min({self.matrix.rows}, {self.matrix.cols})"
            )
        if self.column_space.dimension != self.rank or self.row_space.dimension != self.rank:
            raise ValueError("column/row space dimension must equal rank")
        if self.dimension_check.rank_plus_nullity != self.matrix.cols:
            raise ValueError(
                f"rank + nullity = {self.dimension_check.rank_plus_nullity}, "
                f"expected {self.matrix.cols}"
            )
        if self.dimension_check.rank_plus_left_nullity != self.matrix.rows:
            raise ValueError(
                f"rank + left nullity = {self.dimension_check.rank_plus_left_nullity}, "
                f"expected {self.matrix.rows}"
            )
        return self
