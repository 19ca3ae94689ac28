"""
Rational — точная дробь p/q

Фундамент всего движка. Значение хранится во внутреннем fractions.Fraction
и никогда не проходит через float на пути вычислений.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 (знак всегда в числителе)
2. gcd(|numerator|, denominator) == 1 (несократимая форма)
3. Ноль хранится как 0/1
4. Immutable: любая операция возвращает новый экземпляр

Инварианты 1-3 обеспечивает Fraction; Rational добавляет строгую
грамматику литералов, собственную таксономию ошибок (DivisionByZero,
ParseError) и LaTeX рендеринг.

to_approximate_float() существует только для отображения и выбора pivot;
результат этого метода не должен влиять на хранимые значения.
"""

import math
import re
from decimal import Decimal
from fractions import Fraction
from typing import Final, Union

from fourspaces.core.errors import DivisionByZero, ParseError

# =============================================================================
# GRAMMAR
# =============================================================================

# Десятичный литерал: знак, цифры, необязательная дробная часть и экспонента.
# Хотя бы одна цифра обязательна ("." и "-" не являются числами).
# Строже, чем Fraction(str): без "_" в цифрах и без "p/q".
DECIMAL_LITERAL_RE: Final[re.Pattern] = re.compile(
    r"^(?P<sign>[+-]?)"
    r"(?=\d|\.\d)(?P<int>\d*)(?:\.(?P<frac>\d*))?"
    r"(?:[eE](?P<exp>[+-]?\d+))?$"
)

# Целое со знаком (части дроби "p/q")
INTEGER_LITERAL_RE: Final[re.Pattern] = re.compile(r"^[+-]?\d+$")

# Предел экспоненты "1e..." (защита от гигантских 10**k)
MAX_DECIMAL_EXPONENT: Final[int] = 1000

# Предел длины литерала ячейки (символов после strip)
MAX_LITERAL_LENGTH: Final[int] = 1000

# Целые длиннее этого числа бит переводятся в текст по частям
# (int → str ограничен sys.get_int_max_str_digits(), по умолчанию 4300 цифр)
_CHUNKED_TEXT_BITS: Final[int] = 10_000
_TEXT_CHUNK_DIGITS: Final[int] = 1000

RationalLike = Union["Rational", int, Fraction]


# =============================================================================
# RATIONAL
# =============================================================================


class Rational:
    """
    Точное рациональное число поверх fractions.Fraction.

    Examples:
        >>> Rational(2, -4)
        Rational(-1, 2)
        >>> Rational.parse("0.1") == Rational(1, 10)
        True
        >>> Rational.parse("1/2").to_typeset_string()
        '\\\\frac{1}{2}'
    """

    __slots__ = ("_value",)

    def __init__(self, numerator: int = 0, denominator: int = 1):
        if isinstance(numerator, bool) or not isinstance(numerator, int):
            raise TypeError(f"numerator must be int, got {type(numerator).__name__}")
        if isinstance(denominator, bool) or not isinstance(denominator, int):
            raise TypeError(f"denominator must be int, got {type(denominator).__name__}")
        if denominator == 0:
            raise DivisionByZero("Zero denominator")

        object.__setattr__(self, "_value", Fraction(numerator, denominator))

    @classmethod
    def _wrap(cls, value: Fraction) -> "Rational":
        result = cls.__new__(cls)
        object.__setattr__(result, "_value", value)
        return result

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    def __delattr__(self, name):
        raise AttributeError("Rational is immutable")

    @property
    def numerator(self) -> int:
        return self._value.numerator

    @property
    def denominator(self) -> int:
        return self._value.denominator

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_integer(cls, n: int) -> "Rational":
        return cls(n, 1)

    @classmethod
    def from_fraction(cls, numerator: int, denominator: int) -> "Rational":
        """
        Дробь numerator/denominator в несократимой форме.

        Raises:
            DivisionByZero: если denominator == 0
        """
        return cls(numerator, denominator)

    @classmethod
    def from_decimal_text(cls, text: str) -> "Rational":
        """
        Точный разбор десятичного литерала.

        Цифры литерала переводятся в дробь напрямую (Fraction(str)), без
        float: "0.1" → 1/10, "-2.50" → -5/2, "1e-3" → 1/1000.

        Raises:
            ParseError: если текст не является десятичным литералом
        """
        if not isinstance(text, str):
            raise ParseError(text, "expected text")

        stripped = _check_length(text)
        match = DECIMAL_LITERAL_RE.match(stripped)
        if match is None:
            raise ParseError(text)

        if abs(int(match.group("exp") or 0)) > MAX_DECIMAL_EXPONENT:
            raise ParseError(text, f"exponent exceeds {MAX_DECIMAL_EXPONENT}")

        try:
            return cls._wrap(Fraction(stripped))
        except ValueError as e:
            raise ParseError(text, str(e)) from e

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """
        Разбор текста ячейки: "p/q" или десятичный литерал.

        Raises:
            ParseError: невалидный литерал или нулевой знаменатель
        """
        if not isinstance(text, str):
            raise ParseError(text, "expected text")

        stripped = _check_length(text)
        if "/" not in stripped:
            return cls.from_decimal_text(stripped)

        parts = [p.strip() for p in stripped.split("/")]
        if len(parts) != 2 or not all(INTEGER_LITERAL_RE.match(p) for p in parts):
            raise ParseError(text, "fraction must be two signed integers separated by '/'")

        try:
            return cls.from_fraction(int(parts[0]), int(parts[1]))
        except DivisionByZero as e:
            raise ParseError(text, "zero denominator") from e
        except ValueError as e:
            raise ParseError(text, str(e)) from e

    @classmethod
    def from_number(cls, value: object) -> "Rational":
        """
        Конверсия уже числового значения.

        Точность:
        - int, Fraction, Decimal, Rational: точно
        - float: берётся кратчайший десятичный repr (0.1 → 1/10), то есть то
          число, которое float печатает, а не его двоичное значение.
          Float, полученный из неточного вычисления (0.1 + 0.2), так и
          останется неточным (30000000000000004/10**17).

        Raises:
            ParseError: NaN/Inf, bool или неподдерживаемый тип
        """
        if isinstance(value, Rational):
            return value
        if isinstance(value, bool):
            raise ParseError(value, "boolean is not a number")
        if isinstance(value, (int, Fraction)):
            return cls._wrap(Fraction(value))
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise ParseError(value, "non-finite number")
            return cls._wrap(Fraction(value))
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ParseError(value, "non-finite number")
            return cls.from_decimal_text(repr(value))
        raise ParseError(value, f"unsupported type {type(value).__name__}")

    # -------------------------------------------------------------------------
    # Arithmetic (exact, closed)
    # -------------------------------------------------------------------------

    def add(self, other: RationalLike) -> "Rational":
        return Rational._wrap(self._value + _coerce(other)._value)

    def subtract(self, other: RationalLike) -> "Rational":
        return Rational._wrap(self._value - _coerce(other)._value)

    def multiply(self, other: RationalLike) -> "Rational":
        return Rational._wrap(self._value * _coerce(other)._value)

    def divide(self, other: RationalLike) -> "Rational":
        """
        Raises:
            DivisionByZero: если делитель равен нулю
        """
        divisor = _coerce(other)._value
        try:
            return Rational._wrap(self._value / divisor)
        except ZeroDivisionError as e:
            raise DivisionByZero(f"Division of {self} by zero") from e

    def negate(self) -> "Rational":
        return Rational._wrap(-self._value)

    def reciprocal(self) -> "Rational":
        return ONE.divide(self)

    # -------------------------------------------------------------------------
    # Predicates & comparisons
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self._value == 0

    def is_integer(self) -> bool:
        return self._value.denominator == 1

    def sign(self) -> int:
        return (self._value > 0) - (self._value < 0)

    def compare_magnitude(self, other: RationalLike) -> int:
        """
        Точное сравнение |self| и |other|: -1, 0 или 1.
        """
        lhs = abs(self._value)
        rhs = abs(_coerce(other)._value)
        return (lhs > rhs) - (lhs < rhs)

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_approximate_float(self) -> float:
        """
        Только для отображения и ранжирования pivot.

        |value| > max float → ±inf, а не OverflowError.
        """
        try:
            magnitude = float(abs(self._value))
        except OverflowError:
            magnitude = math.inf
        return -magnitude if self._value < 0 else magnitude

    def to_fraction(self) -> Fraction:
        return self._value

    def to_typeset_string(self) -> str:
        """
        LaTeX: "a" для целых, "\\frac{a}{b}" для дробей; минус выносится
        перед дробью ("-\\frac{1}{2}").
        """
        numerator, denominator = self._value.numerator, self._value.denominator
        if denominator == 1:
            return _int_to_text(numerator)
        sign = "-" if numerator < 0 else ""
        return f"{sign}\\frac{{{_int_to_text(abs(numerator))}}}{{{_int_to_text(denominator)}}}"

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __add__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return _coerce(other).subtract(self)

    def __mul__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return _coerce(other).divide(self)

    def __neg__(self) -> "Rational":
        return self.negate()

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return Rational._wrap(abs(self._value))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other) -> bool:
        if not _is_rational_like(other):
            return NotImplemented
        return self._value == _coerce(other)._value

    def __hash__(self) -> int:
        # Совпадает с hash(int) / hash(Fraction) для равных значений
        return hash(self._value)

    def __lt__(self, other) -> bool:
        if not _is_rational_like(other):
            return NotImplemented
        return self._value < _coerce(other)._value

    def __le__(self, other) -> bool:
        if not _is_rational_like(other):
            return NotImplemented
        return self._value <= _coerce(other)._value

    def __gt__(self, other) -> bool:
        if not _is_rational_like(other):
            return NotImplemented
        return self._value > _coerce(other)._value

    def __ge__(self, other) -> bool:
        if not _is_rational_like(other):
            return NotImplemented
        return self._value >= _coerce(other)._value

    def __float__(self) -> float:
        return self.to_approximate_float()

    def __repr__(self) -> str:
        return f"Rational({_int_to_text(self.numerator)}, {_int_to_text(self.denominator)})"

    def __str__(self) -> str:
        if self._value.denominator == 1:
            return _int_to_text(self._value.numerator)
        return f"{_int_to_text(self._value.numerator)}/{_int_to_text(self._value.denominator)}"

    def __reduce__(self):
        return (Rational, (self._value.numerator, self._value.denominator))


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO: Final[Rational] = Rational(0)
ONE: Final[Rational] = Rational(1)


# =============================================================================
# HELPERS
# =============================================================================


def _is_rational_like(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (Rational, int, Fraction))


def _coerce(value: RationalLike) -> Rational:
    if isinstance(value, Rational):
        return value
    if _is_rational_like(value):
        return Rational._wrap(Fraction(value))
    raise TypeError(f"Cannot use {type(value).__name__} in exact arithmetic")


def _check_length(text: str) -> str:
    stripped = text.strip()
    if len(stripped) > MAX_LITERAL_LENGTH:
        raise ParseError(text, f"literal longer than {MAX_LITERAL_LENGTH} characters")
    return stripped


def _int_to_text(n: int) -> str:
    """Десятичная запись целого любой длины."""
    if n.bit_length() <= _CHUNKED_TEXT_BITS:
        return str(n)

    sign = "-" if n < 0 else ""
    n = abs(n)
    base = 10**_TEXT_CHUNK_DIGITS
    chunks = []
    while n >= base:
        n, chunk = divmod(n, base)
        chunks.append(chunk)
    tail = "".join(str(chunk).zfill(_TEXT_CHUNK_DIGITS) for chunk in reversed(chunks))
    return sign + str(n) + tail
