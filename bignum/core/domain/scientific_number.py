"""
ScientificNumber — число в научной нотации mantissa * 10^exponent

Immutable Pydantic модель для величин, выходящих за диапазон float
(инкрементальные симуляции, idle-игры).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любой экземпляр нормализован: (0.0, 0) или 1.0 <= |mantissa| < 10.0
2. Каноничный ноль единственный: (0.0, 0)
3. Все операции возвращают новый экземпляр (frozen=True)
4. Деление на ноль → DivisionByZeroError, никогда не Inf/NaN
5. Сравнение точное по нормализованной паре (без epsilon)
"""

import logging
from typing import Any, Union

from pydantic import BaseModel, Field, model_validator

from bignum.core.formatting import to_display_string
from bignum.core.math.normalization import (
    PRECISION_DIGITS,
    align_mantissa,
    is_negligible,
    normalize,
)

logger = logging.getLogger(__name__)

Operand = Union["ScientificNumber", int, float]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZeroError(ZeroDivisionError):
    """
    Деление на каноничный ноль.

    Единственное ошибочное условие арифметики. Вызывающая сторона
    (например, цикл симуляции) должна отличать его от легитимного
    очень малого результата.
    """

    def __init__(self, dividend: "ScientificNumber"):
        self.dividend = dividend
        super().__init__(f"Division of {dividend} by zero")


# =============================================================================
# SCIENTIFIC NUMBER MODEL
# =============================================================================


class ScientificNumber(BaseModel):
    """
    Значение mantissa * 10^exponent.

    Нормализация выполняется при любом способе создания:
    ScientificNumber(mantissa=25.0, exponent=0) == ScientificNumber.new(2.5, 1)

    Examples:
        >>> ScientificNumber.new(5.0, 3) * ScientificNumber.new(4.0, 2)
        ScientificNumber(mantissa=2.0, exponent=6)
        >>> str(ScientificNumber.new(2.5, 10))
        '2.500e10'
    """

    mantissa: float = Field(..., description="Коэффициент, 1.0 <= |m| < 10.0 либо 0.0")
    exponent: int = Field(0, description="Степень 10 (signed 32-bit)")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="before")
    @classmethod
    def normalize_parts(cls, data: Any) -> Any:
        """Нормализация входной пары до валидации полей."""
        if not isinstance(data, dict):
            return data

        mantissa = data.get("mantissa")
        exponent = data.get("exponent", 0)

        # Некорректные типы отклоняются strict-валидацией полей
        if isinstance(mantissa, bool) or not isinstance(mantissa, (int, float)):
            return data
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return data

        m, e = normalize(mantissa, exponent)
        return {**data, "mantissa": m, "exponent": e}

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, mantissa: float, exponent: int = 0) -> "ScientificNumber":
        """
        Нормализующий конструктор.

        Raises:
            pydantic.ValidationError: mantissa NaN/Inf или неверные типы
            ExponentOverflowError: exponent вне signed 32-bit
        """
        return cls(mantissa=mantissa, exponent=exponent)

    @classmethod
    def zero(cls) -> "ScientificNumber":
        """Каноничный ноль (0.0, 0)."""
        return cls.model_construct(mantissa=0.0, exponent=0)

    @classmethod
    def one(cls) -> "ScientificNumber":
        """Единица (1.0, 0)."""
        return cls.model_construct(mantissa=1.0, exponent=0)

    @classmethod
    def from_float(cls, value: Union[int, float]) -> "ScientificNumber":
        """
        Конверсия встроенного числа.

        int любой величины конвертируется без переполнения float:
        exponent берётся из количества цифр, mantissa = value / 10^exponent.
        """
        if isinstance(value, bool):
            raise TypeError(f"Cannot convert bool to {cls.__name__}")
        if isinstance(value, int):
            exponent = len(str(abs(value))) - 1
            return cls._from_parts(value / 10**exponent, exponent)
        return cls.new(float(value), 0)

    @classmethod
    def _from_parts(cls, mantissa: float, exponent: int) -> "ScientificNumber":
        """Нормализация сырых частей без повторной валидации модели."""
        m, e = normalize(mantissa, exponent)
        return cls.model_construct(mantissa=m, exponent=e)

    @classmethod
    def _coerce(cls, value: Any) -> "ScientificNumber":
        if isinstance(value, ScientificNumber):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls.from_float(value)
        return NotImplemented

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        """Check if value is exactly zero"""
        return self.mantissa == 0.0

    def is_positive(self) -> bool:
        """Check if value is positive"""
        return self.mantissa > 0.0

    def is_negative(self) -> bool:
        """Check if value is negative"""
        return self.mantissa < 0.0

    @property
    def sign(self) -> int:
        """-1, 0 или +1."""
        return (self.mantissa > 0.0) - (self.mantissa < 0.0)

    def to_float(self) -> float:
        """
        Конверсия в float.

        Вне диапазона float возвращает ±inf (переполнение) или 0.0 (underflow).
        """
        # Парсинг decimal-строки корректно округляет и не бросает OverflowError
        return float(f"{self.mantissa!r}e{self.exponent}")

    def _order_key(self) -> tuple[int, int, float]:
        if self.mantissa > 0.0:
            return 1, self.exponent, self.mantissa
        if self.mantissa < 0.0:
            # Для отрицательных больший exponent означает меньшее значение
            return -1, -self.exponent, self.mantissa
        return 0, 0, 0.0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Operand) -> "ScientificNumber":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: Operand) -> "ScientificNumber":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return add(other, self)

    def __sub__(self, other: Operand) -> "ScientificNumber":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return sub(self, other)

    def __rsub__(self, other: Operand) -> "ScientificNumber":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return sub(other, self)

    def __mul__(self, other: Operand) -> "ScientificNumber":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return mul(self, other)

    def __rmul__(self, other: Operand) -> "ScientificNumber":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return mul(other, self)

    def __truediv__(self, other: Operand) -> "ScientificNumber":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return div(self, other)

    def __rtruediv__(self, other: Operand) -> "ScientificNumber":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return div(other, self)

    def __neg__(self) -> "ScientificNumber":
        if self.is_zero():
            return self
        return type(self).model_construct(mantissa=-self.mantissa, exponent=self.exponent)

    def __abs__(self) -> "ScientificNumber":
        if self.mantissa >= 0.0:
            return self
        return -self

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScientificNumber):
            return NotImplemented
        return self.mantissa == other.mantissa and self.exponent == other.exponent

    def __hash__(self) -> int:
        return hash((self.mantissa, self.exponent))

    def __lt__(self, other: "ScientificNumber") -> bool:
        if not isinstance(other, ScientificNumber):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __le__(self, other: "ScientificNumber") -> bool:
        if not isinstance(other, ScientificNumber):
            return NotImplemented
        return self._order_key() <= other._order_key()

    def __gt__(self, other: "ScientificNumber") -> bool:
        if not isinstance(other, ScientificNumber):
            return NotImplemented
        return self._order_key() > other._order_key()

    def __ge__(self, other: "ScientificNumber") -> bool:
        if not isinstance(other, ScientificNumber):
            return NotImplemented
        return self._order_key() >= other._order_key()

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return to_display_string(self)


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def zero() -> ScientificNumber:
    """Каноничный ноль."""
    return ScientificNumber.zero()


def one() -> ScientificNumber:
    """Единица."""
    return ScientificNumber.one()


def add(a: ScientificNumber, b: ScientificNumber) -> ScientificNumber:
    """
    Сложение с выравниванием exponent.

    Алгоритм:
        1. Ноль не меняет другой операнд
        2. d = a.exponent - b.exponent
        3. |d| > PRECISION_DIGITS → меньший операнд пренебрежимо мал,
           возвращается операнд с большим exponent
        4. Иначе mantissa меньшего делится на 10^|d|, складывается
           с mantissa большего и результат нормализуется

    Examples:
        >>> str(add(ScientificNumber.new(2.5, 10), ScientificNumber.new(3.0, 5)))
        '2.500e10'
    """
    if a.is_zero():
        return b
    if b.is_zero():
        return a

    diff = a.exponent - b.exponent
    if diff == 0:
        return ScientificNumber._from_parts(a.mantissa + b.mantissa, a.exponent)

    larger, smaller = (a, b) if diff > 0 else (b, a)
    if is_negligible(diff, PRECISION_DIGITS):
        logger.debug(
            "Negligible addend dropped: %r + %r (exponent diff %d)",
            larger, smaller, abs(diff),
        )
        return larger

    shifted = align_mantissa(smaller.mantissa, abs(diff))
    return ScientificNumber._from_parts(larger.mantissa + shifted, larger.exponent)


def sub(a: ScientificNumber, b: ScientificNumber) -> ScientificNumber:
    """Вычитание: add(a, -b)."""
    return add(a, -b)


def mul(a: ScientificNumber, b: ScientificNumber) -> ScientificNumber:
    """
    Умножение: mantissa перемножаются, exponent складываются.

    Ноль поглощает любой операнд без арифметики над exponent.

    Raises:
        ExponentOverflowError: Если результат вне диапазона exponent
    """
    if a.is_zero() or b.is_zero():
        return ScientificNumber.zero()
    return ScientificNumber._from_parts(a.mantissa * b.mantissa, a.exponent + b.exponent)


def div(a: ScientificNumber, b: ScientificNumber) -> ScientificNumber:
    """
    Деление: mantissa делятся, exponent вычитаются.

    Raises:
        DivisionByZeroError: Если b каноничный ноль
        ExponentOverflowError: Если результат вне диапазона exponent
    """
    if b.is_zero():
        logger.debug("Division by zero: %r / 0", a)
        raise DivisionByZeroError(a)
    if a.is_zero():
        return ScientificNumber.zero()
    return ScientificNumber._from_parts(a.mantissa / b.mantissa, a.exponent - b.exponent)


def compare(a: ScientificNumber, b: ScientificNumber) -> int:
    """
    Полное упорядочение по вещественному значению.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    key_a = a._order_key()
    key_b = b._order_key()
    return (key_a > key_b) - (key_a < key_b)
