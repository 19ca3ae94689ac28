"""
Parsing — текстовая сетка ячеек → сетка Rational

Входной контракт:
- непустая прямоугольная сетка (≥1 строки, ≥1 столбца)
- ячейка: число (int/Fraction/Decimal/float) или текст —
  десятичный литерал ("-2.5") либо дробь ("3/4")

Порядок проверок:
1. Форма сетки (DimensionError) — до разбора ячеек
2. Разбор всех ячеек (ParseError с позицией ячейки)

Частичная матрица никогда не создаётся: ошибка в любой ячейке прерывает
разбор целиком.
"""

from typing import Final, List, Optional, Sequence, Tuple

from fourspaces.core.errors import DimensionError, ParseError
from fourspaces.core.math.rational import ZERO, Rational

# =============================================================================
# GRID LIMITS (редактор сетки)
# =============================================================================

MATRIX_MIN_DIMENSION: Final[int] = 1
MATRIX_MAX_DIMENSION: Final[int] = 5
DEFAULT_CELL_TEXT: Final[str] = "0"


# =============================================================================
# CELL PARSING
# =============================================================================


def parse_cell(
    value: object,
    empty_as_zero: bool = True,
    row: Optional[int] = None,
    col: Optional[int] = None,
) -> Rational:
    """
    Разбор одной ячейки.

    Args:
        value: текст или число
        empty_as_zero: пустая/пробельная ячейка трактуется как 0
        row, col: позиция (для сообщения об ошибке)

    Returns:
        Точное значение ячейки

    Raises:
        ParseError: невалидный литерал (с позицией ячейки)
    """
    try:
        if isinstance(value, str):
            if not value.strip():
                if empty_as_zero:
                    return ZERO
                raise ParseError(value, "empty cell")
            return Rational.parse(value)
        return Rational.from_number(value)
    except ParseError as e:
        if e.row is not None or row is None:
            raise
        raise ParseError(e.literal, e.reason, row=row, col=col) from e


def validate_grid_shape(
    grid: Sequence[Sequence[object]],
    max_rows: Optional[int] = None,
    max_cols: Optional[int] = None,
) -> Tuple[int, int]:
    """
    Проверка формы сетки.

    Returns:
        (rows, cols)

    Raises:
        DimensionError: пустая сетка, рваные строки или превышен лимит
    """
    if isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
        raise DimensionError("Matrix must be a sequence of rows")
    if len(grid) == 0:
        raise DimensionError("Matrix must have at least 1 row")

    first = grid[0]
    if isinstance(first, (str, bytes)) or not isinstance(first, Sequence):
        raise DimensionError("Row 1 is not a sequence of cells")

    cols = len(first)
    if cols == 0:
        raise DimensionError("Matrix must have at least 1 column")

    for i, row in enumerate(grid):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise DimensionError(f"Row {i + 1} is not a sequence of cells")
        if len(row) != cols:
            raise DimensionError(
                f"All rows must have the same length: row 1 has {cols} entries, "
                f"row {i + 1} has {len(row)}"
            )

    rows = len(grid)
    if max_rows is not None and rows > max_rows:
        raise DimensionError(f"Matrix has {rows} rows, limit is {max_rows}")
    if max_cols is not None and cols > max_cols:
        raise DimensionError(f"Matrix has {cols} columns, limit is {max_cols}")

    return rows, cols


def parse_grid(
    grid: Sequence[Sequence[object]],
    empty_as_zero: bool = True,
    max_rows: Optional[int] = None,
    max_cols: Optional[int] = None,
) -> List[List[Rational]]:
    """
    Разбор всей сетки в точные значения.

    Raises:
        DimensionError: некорректная форма (проверяется первой)
        ParseError: первая невалидная ячейка (в порядке строк)
    """
    validate_grid_shape(grid, max_rows=max_rows, max_cols=max_cols)
    return [
        [parse_cell(value, empty_as_zero=empty_as_zero, row=i, col=j) for j, value in enumerate(row)]
        for i, row in enumerate(grid)
    ]


# =============================================================================
# GRID HELPERS (редактор сетки)
# =============================================================================


def clamp_dimension(value: int) -> int:
    """Ограничение размера диапазоном [MATRIX_MIN_DIMENSION, MATRIX_MAX_DIMENSION]."""
    return max(MATRIX_MIN_DIMENSION, min(MATRIX_MAX_DIMENSION, value))


def empty_grid(rows: int, cols: int, default: str = DEFAULT_CELL_TEXT) -> List[List[str]]:
    """Новая текстовая сетка rows×cols, заполненная default."""
    return [[default for _ in range(cols)] for _ in range(rows)]


def resize_grid(
    grid: Sequence[Sequence[str]],
    rows: int,
    cols: int,
    default: str = DEFAULT_CELL_TEXT,
) -> List[List[str]]:
    """
    Изменение размера текстовой сетки с сохранением существующих значений.

    Размеры ограничиваются лимитами редактора; новые и пустые ячейки
    заполняются default.
    """
    rows = clamp_dimension(rows)
    cols = clamp_dimension(cols)

    def cell(i: int, j: int) -> str:
        if i < len(grid) and j < len(grid[i]) and grid[i][j]:
            return grid[i][j]
        return default

    return [[cell(i, j) for j in range(cols)] for i in range(rows)]
