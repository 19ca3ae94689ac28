"""RREF Engine — Gauss–Jordan elimination с частичным выбором pivot

Алгоритм (currentRow = 0; для каждого столбца col, пока currentRow < rows):
1. Pivot-строка: наибольший |entry| (по to_approximate_float) среди строк
   currentRow..rows-1; при равенстве — наименьший индекс строки
2. Pivot == 0 → столбец свободный, currentRow не сдвигается
3. Swap currentRow ↔ pivot-строка
4. Масштабирование currentRow на 1/pivot (pivot становится ровно 1)
5. Обнуление col во всех остальных строках
6. col записывается в pivots, currentRow += 1

Float используется только для ранжирования кандидатов; вся арифметика точная.
Входная матрица не изменяется — исключение работает на copy().

Сложность: O(rows · cols · min(rows, cols)).
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from fourspaces.core.domain.matrix import RationalMatrix

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class RREFResult:
    """Результат приведения к RREF.

    Инварианты:
    - pivots строго возрастают
    - len(pivots) == rank
    - столбец pivots[k] матрицы rref — базисный вектор e_k
    """

    rref: RationalMatrix
    pivots: Tuple[int, ...]

    @property
    def rank(self) -> int:
        return len(self.pivots)

    @property
    def free_columns(self) -> Tuple[int, ...]:
        """Столбцы без pivot (свободные переменные), по возрастанию."""
        pivot_set = set(self.pivots)
        return tuple(j for j in range(self.rref.cols) if j not in pivot_set)


# =============================================================================
# ENGINE
# =============================================================================


def _select_pivot_row(matrix: RationalMatrix, col: int, start_row: int) -> int:
    """Строка с максимальным |entry| в столбце col (ties → меньший индекс)."""
    pivot_row = start_row
    max_magnitude = abs(matrix.get(start_row, col).to_approximate_float())

    for row in range(start_row + 1, matrix.rows):
        magnitude = abs(matrix.get(row, col).to_approximate_float())
        if magnitude > max_magnitude:
            max_magnitude = magnitude
            pivot_row = row

    # Ненулевое значение может округлиться до 0.0 (underflow)
    if max_magnitude == 0.0:
        for row in range(start_row, matrix.rows):
            if not matrix.get(row, col).is_zero():
                return row

    return pivot_row


def compute_rref(matrix: RationalMatrix) -> RREFResult:
    """Приведение матрицы к Row-Reduced Echelon Form.

    Args:
        matrix: исходная матрица (не изменяется)

    Returns:
        RREFResult с reduced-матрицей и pivot-столбцами

    Raises:
        DivisionByZero: только при нарушении инварианта выбора pivot
    """
    work = matrix.copy()
    pivots: List[int] = []
    current_row = 0

    for col in range(work.cols):
        if current_row >= work.rows:
            break

        pivot_row = _select_pivot_row(work, col, current_row)
        pivot = work.get(pivot_row, col)

        if pivot.is_zero():
            logger.debug("column %d: no pivot (free column)", col)
            continue

        if pivot_row != current_row:
            logger.debug("column %d: swap rows %d <-> %d", col, current_row, pivot_row)
            work.swap_rows(current_row, pivot_row)

        work.scale_row(current_row, pivot.reciprocal())

        for row in range(work.rows):
            if row == current_row:
                continue
            entry = work.get(row, col)
            if not entry.is_zero():
                work.add_row_multiple(row, current_row, entry.negate())

        logger.debug("column %d: pivot %s at row %d", col, pivot, current_row)
        pivots.append(col)
        current_row += 1

    return RREFResult(rref=work, pivots=tuple(pivots))


def compute_rank(matrix: RationalMatrix) -> int:
    return compute_rref(matrix).rank
