"""Pipeline — точка входа движка

parse → RREF(A) и RREF(Aᵗ) → Subspace Extractor → Result Assembler

Вычисление чистое и синхронное: у каждого вызова своя матрица, своя рабочая
копия и независимый результат. Общего изменяемого состояния между вызовами
нет, поэтому FourSpacesEngine можно вызывать конкурентно из разных потоков.

Ошибки:
- ParseError / DimensionError — ввод, исправимый пользователем
- InternalInvariantError — дефект движка (деление на нулевой pivot,
  провал rank-nullity, выход не соответствует контракту)
Частичный результат не возвращается никогда.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from jsonschema import ValidationError
from jsonschema.exceptions import best_match

from fourspaces.core.contracts.validators import (
    ComputationResultValidator,
    ComputeRequestValidator,
)
from fourspaces.core.domain.matrix import RationalMatrix
from fourspaces.core.domain.results import ComputationResult
from fourspaces.core.errors import (
    DimensionError,
    DivisionByZero,
    InternalInvariantError,
    MatrixInputError,
    ParseError,
)
from fourspaces.core.math.parsing import parse_grid
from fourspaces.engine.assembler import ResultAssembler
from fourspaces.engine.rref import compute_rref
from fourspaces.engine.subspaces import FundamentalSubspaces, extract_fundamental_subspaces

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация движка.

    max_rows / max_cols: None — без ограничения
    empty_cell_as_zero: пустая ячейка трактуется как 0 (иначе ParseError)
    validate_output: проверять payload по computation_result.json
    """

    max_rows: Optional[int] = None
    max_cols: Optional[int] = None
    empty_cell_as_zero: bool = True
    validate_output: bool = True


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EngineResult:
    """Точные значения (spaces) вместе с отрендеренным результатом."""

    spaces: FundamentalSubspaces
    result: ComputationResult

    @property
    def rank(self) -> int:
        return self.result.rank

    def to_dict(self) -> Dict[str, Any]:
        return self.result.model_dump()


# =============================================================================
# ENGINE
# =============================================================================


class FourSpacesEngine:
    """RREF, ранг и четыре фундаментальных подпространства матрицы."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        assembler: Optional[ResultAssembler] = None,
    ):
        self.config = config or EngineConfig()
        self.assembler = assembler or ResultAssembler()
        self._result_validator = (
            ComputationResultValidator() if self.config.validate_output else None
        )

    def parse(self, grid: Sequence[Sequence[object]]) -> RationalMatrix:
        """
        Raises:
            DimensionError: форма сетки
            ParseError: невалидная ячейка
        """
        return RationalMatrix.from_rows(
            parse_grid(
                grid,
                empty_as_zero=self.config.empty_cell_as_zero,
                max_rows=self.config.max_rows,
                max_cols=self.config.max_cols,
            )
        )

    def compute(self, grid: Sequence[Sequence[object]]) -> EngineResult:
        """Полное вычисление по текстовой/числовой сетке."""
        return self.compute_matrix(self.parse(grid))

    def compute_matrix(self, matrix: RationalMatrix) -> EngineResult:
        """
        Args:
            matrix: входная матрица (не изменяется)

        Returns:
            EngineResult

        Raises:
            InternalInvariantError: нарушение инварианта движка
        """
        try:
            rref_result = compute_rref(matrix)
            transpose_rref = compute_rref(matrix.transpose())
        except DivisionByZero as e:
            raise InternalInvariantError(f"Zero pivot used as divisor: {e}") from e

        spaces = extract_fundamental_subspaces(matrix, rref_result, transpose_rref)

        check = spaces.dimension_check
        if not check.holds:
            raise InternalInvariantError(
                f"Dimension theorem violated for {matrix.rows}x{matrix.cols}: "
                f"rank + nullity = {check.rank_plus_nullity}, "
                f"rank + left nullity = {check.rank_plus_left_nullity}"
            )

        result = self.assembler.assemble(spaces)

        if self._result_validator is not None:
            try:
                self._result_validator.validate(result.model_dump())
            except ValidationError as e:
                raise InternalInvariantError(f"Result violates contract: {e.message}") from e

        logger.info(
            "computed %dx%d matrix: rank=%d nullity=%d left_nullity=%d",
            matrix.rows,
            matrix.cols,
            spaces.rank,
            check.nullity,
            check.left_nullity,
        )
        return EngineResult(spaces=spaces, result=result)

    def compute_request(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """
        JSON-in / JSON-out: {"matrix": [[...]]} → payload ComputationResult.

        Raises:
            DimensionError: пустая матрица/строка в запросе
            ParseError: ячейка не строка и не число
            MatrixInputError: прочие нарушения compute_request.json
        """
        errors = list(ComputeRequestValidator().iter_errors(request))
        if errors:
            raise _request_error(best_match(errors))
        return self.compute(request["matrix"]).to_dict()


def _request_error(error: ValidationError) -> MatrixInputError:
    path = list(error.absolute_path)
    if error.validator == "minItems":
        return DimensionError(f"Invalid compute request: {error.message}")
    if len(path) == 3 and path[0] == "matrix":
        return ParseError(error.instance, "cell must be text or a number", row=path[1], col=path[2])
    return MatrixInputError(f"Invalid compute request: {error.message}")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def compute_fundamental_subspaces(
    grid: Sequence[Sequence[object]],
    config: Optional[EngineConfig] = None,
) -> ComputationResult:
    """Вычисление для одной сетки с конфигурацией по умолчанию."""
    return FourSpacesEngine(config).compute(grid).result
