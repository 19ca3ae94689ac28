"""
Errors — таксономия ошибок движка

Две группы:
- MatrixInputError (ParseError, DimensionError): ошибки ввода, которые
  пользователь может исправить сам
- DivisionByZero / InternalInvariantError: нарушение внутренних инвариантов,
  в нормальной работе недостижимо

Любая ошибка прерывает вычисление целиком: частичный результат не возвращается.
"""

from typing import Optional


class FourSpacesError(Exception):
    """Базовый класс всех ошибок fourspaces."""


# =============================================================================
# INPUT ERRORS (user-correctable)
# =============================================================================


class MatrixInputError(FourSpacesError, ValueError):
    """Некорректный ввод: ячейка или форма матрицы."""


class ParseError(MatrixInputError):
    """
    Текст ячейки не является ни десятичным литералом, ни дробью "p/q",
    либо знаменатель дроби равен нулю.

    Attributes:
        literal: исходный текст ячейки
        row, col: позиция ячейки в сетке (если известна)
    """

    def __init__(
        self,
        literal: object,
        reason: str = "not a decimal or p/q fraction literal",
        row: Optional[int] = None,
        col: Optional[int] = None,
    ):
        self.literal = literal
        self.reason = reason
        self.row = row
        self.col = col
        location = ""
        if row is not None and col is not None:
            location = f" at row {row + 1}, column {col + 1}"
        super().__init__(f"Invalid matrix entry {literal!r}{location}: {reason}")


class DimensionError(MatrixInputError):
    """Пустая сетка, строки разной длины или превышен лимит размера."""


# =============================================================================
# INTERNAL FAULTS
# =============================================================================


class DivisionByZero(FourSpacesError, ZeroDivisionError):
    """Деление на нулевой Rational (или нулевой знаменатель дроби)."""


class InternalInvariantError(FourSpacesError, ArithmeticError):
    """
    Нарушен инвариант движка (деление на нулевой pivot, провал rank-nullity).

    Не является ошибкой ввода: сигнализирует о дефекте реализации.
    """
