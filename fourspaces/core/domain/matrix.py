"""
RationalMatrix — прямоугольная сетка Rational

Инварианты:
- rows ≥ 1, cols ≥ 1
- каждая строка содержит ровно cols элементов

Построчные операции (swap_rows, scale_row, add_row_multiple) изменяют матрицу
на месте и используются только на рабочей копии внутри RREF Engine.
Исходная матрица вызывающего кода никогда не изменяется: copy() и transpose()
возвращают новые независимые экземпляры.
"""

from typing import Iterable, List, Sequence, Tuple

from fourspaces.core.errors import DimensionError
from fourspaces.core.math.parsing import parse_grid, validate_grid_shape
from fourspaces.core.math.rational import ONE, ZERO, Rational, RationalLike

Vector = Tuple[Rational, ...]


# =============================================================================
# RATIONAL MATRIX
# =============================================================================


class RationalMatrix:
    """Матрица точных дробей."""

    __slots__ = ("_data", "_rows", "_cols")

    def __init__(self, rows: Sequence[Sequence[RationalLike]]):
        """
        Args:
            rows: строки значений, приводимых к Rational (Rational, int, Fraction)

        Raises:
            DimensionError: пустая или рваная сетка
        """
        n_rows, n_cols = validate_grid_shape(rows)
        self._data: List[List[Rational]] = [
            [Rational.from_number(value) for value in row] for row in rows
        ]
        self._rows = n_rows
        self._cols = n_cols

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[RationalLike]]) -> "RationalMatrix":
        return cls(rows)

    @classmethod
    def from_text_grid(
        cls,
        grid: Sequence[Sequence[object]],
        empty_as_zero: bool = True,
    ) -> "RationalMatrix":
        """Разбор текстовой сетки (ParseError/DimensionError до создания матрицы)."""
        return cls._from_owned(parse_grid(grid, empty_as_zero=empty_as_zero))

    @classmethod
    def identity(cls, n: int) -> "RationalMatrix":
        if n < 1:
            raise DimensionError(f"Identity size must be >= 1, got {n}")
        return cls._from_owned([[ONE if i == j else ZERO for j in range(n)] for i in range(n)])

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "RationalMatrix":
        if rows < 1 or cols < 1:
            raise DimensionError(f"Matrix must be at least 1x1, got {rows}x{cols}")
        return cls._from_owned([[ZERO] * cols for _ in range(rows)])

    @classmethod
    def _from_owned(cls, data: List[List[Rational]]) -> "RationalMatrix":
        # data уже проверена и больше нигде не используется
        matrix = cls.__new__(cls)
        matrix._data = data
        matrix._rows = len(data)
        matrix._cols = len(data[0])
        return matrix

    def copy(self) -> "RationalMatrix":
        """Независимая копия (Rational immutable, поэтому копируются только строки)."""
        return RationalMatrix._from_owned([list(row) for row in self._data])

    def transpose(self) -> "RationalMatrix":
        return RationalMatrix._from_owned(
            [[self._data[i][j] for i in range(self._rows)] for j in range(self._cols)]
        )

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    def get(self, i: int, j: int) -> Rational:
        return self._data[i][j]

    def row(self, i: int) -> Vector:
        return tuple(self._data[i])

    def column(self, j: int) -> Vector:
        return tuple(row[j] for row in self._data)

    def rows_as_lists(self) -> List[List[Rational]]:
        return [list(row) for row in self._data]

    def is_zero_row(self, i: int) -> bool:
        return all(value.is_zero() for value in self._data[i])

    def non_zero_rows(self) -> List[Vector]:
        return [tuple(row) for i, row in enumerate(self._data) if not self.is_zero_row(i)]

    # -------------------------------------------------------------------------
    # Row operations (только на рабочей копии)
    # -------------------------------------------------------------------------

    def swap_rows(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def scale_row(self, i: int, scalar: RationalLike) -> None:
        self._data[i] = [value.multiply(scalar) for value in self._data[i]]

    def add_row_multiple(self, target: int, source: int, factor: RationalLike) -> None:
        """row[target] += factor * row[source]"""
        src = self._data[source]
        self._data[target] = [
            value.add(src[k].multiply(factor)) for k, value in enumerate(self._data[target])
        ]

    # -------------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------------

    def multiply_vector(self, vector: Sequence[RationalLike]) -> Vector:
        """
        Точное произведение A·v.

        Raises:
            DimensionError: len(vector) != cols
        """
        if len(vector) != self._cols:
            raise DimensionError(
                f"Vector of length {len(vector)} cannot multiply a {self._rows}x{self._cols} matrix"
            )
        v = [Rational.from_number(x) for x in vector]
        result = []
        for row in self._data:
            acc = ZERO
            for a, b in zip(row, v):
                acc = acc.add(a.multiply(b))
            result.append(acc)
        return tuple(result)

    def rank(self) -> int:
        from fourspaces.engine.rref import compute_rref

        return compute_rref(self).rank

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def to_float_rows(self) -> List[List[float]]:
        """Приближённые значения для отображения."""
        return [[value.to_approximate_float() for value in row] for row in self._data]

    def to_typeset_string(self) -> str:
        body = " \\\\ ".join(
            " & ".join(value.to_typeset_string() for value in row) for row in self._data
        )
        return f"\\begin{{bmatrix}} {body} \\end{{bmatrix}}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None

    def __repr__(self) -> str:
        body = ", ".join("[" + ", ".join(str(v) for v in row) + "]" for row in self._data)
        return f"RationalMatrix([{body}])"


def vector_to_typeset_string(vector: Iterable[Rational]) -> str:
    """Столбец-вектор в виде одностолбцовой bmatrix."""
    body = " \\\\ ".join(value.to_typeset_string() for value in vector)
    return f"\\begin{{bmatrix}} {body} \\end{{bmatrix}}"
