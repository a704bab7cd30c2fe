"""
Normalization — нормализация пары mantissa/exponent

Модуль работает с "сырыми" частями числа в научной нотации
(mantissa * 10^exponent) и не зависит от доменной модели:
- Валидация mantissa (NaN/Inf запрещены)
- Нормализация к инварианту 1.0 <= |mantissa| < 10.0
- Каноничный ноль (0.0, 0)
- Выравнивание mantissa при сложении с разными exponent

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После normalize() либо (0.0, 0), либо 1.0 <= |mantissa| < 10.0
2. Знак mantissa сохраняется
3. Exponent никогда не выходит за [EXPONENT_MIN, EXPONENT_MAX] (ExponentOverflowError)
4. Масштабирующий множитель 10^k никогда не переполняет float
"""

import logging
import math
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Количество надёжных десятичных цифр float64.
# При разнице exponent больше этого порога меньший операнд пренебрежимо мал.
PRECISION_DIGITS: Final[int] = 15

# Границы exponent (signed 32-bit)
EXPONENT_MIN: Final[int] = -(2**31)
EXPONENT_MAX: Final[int] = 2**31 - 1

# Максимальная степень 10 за один шаг масштабирования.
# 10.0 ** 300 и 10.0 ** -300 представимы без переполнения и без ухода в ноль.
SCALE_CHUNK: Final[int] = 300

# Нормализованный диапазон |mantissa|
MANTISSA_LOWER: Final[float] = 1.0
MANTISSA_UPPER: Final[float] = 10.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExponentOverflowError(OverflowError):
    """
    Exponent вышел за допустимый диапазон [EXPONENT_MIN, EXPONENT_MAX].

    Возникает при нормализации результата (чаще всего после многократного
    умножения или деления). Значение не насыщается и не "заворачивается".
    """

    def __init__(self, exponent: int):
        self.exponent = exponent
        super().__init__(
            f"Exponent {exponent} outside of [{EXPONENT_MIN}, {EXPONENT_MAX}]"
        )


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_mantissa(mantissa: float) -> float:
    """
    Проверка, что mantissa конечна.

    Args:
        mantissa: Исходная mantissa

    Returns:
        mantissa как float

    Raises:
        ValueError: Если mantissa NaN или Inf
    """
    try:
        value = float(mantissa)
    except OverflowError:
        raise ValueError(f"mantissa out of float range: {mantissa}") from None
    if not math.isfinite(value):
        raise ValueError(f"mantissa must be a finite float (not NaN/Inf), got {mantissa}")
    return value


def check_exponent(exponent: int) -> int:
    """
    Проверка границ exponent.

    Raises:
        ExponentOverflowError: Если exponent вне [EXPONENT_MIN, EXPONENT_MAX]
    """
    if exponent < EXPONENT_MIN or exponent > EXPONENT_MAX:
        logger.debug("Exponent overflow: %d", exponent)
        raise ExponentOverflowError(exponent)
    return exponent


# =============================================================================
# МАСШТАБИРОВАНИЕ
# =============================================================================


def scale_by_power_of_ten(value: float, power: int) -> float:
    """
    Умножение value на 10^power без переполнения множителя.

    Множитель применяется частями не больше SCALE_CHUNK, поэтому
    субнормальные значения (5e-324) и значения около float max
    масштабируются корректно.

    Examples:
        >>> scale_by_power_of_ten(2.5, 3)
        2500.0
    """
    while power > SCALE_CHUNK:
        value *= 10.0**SCALE_CHUNK
        power -= SCALE_CHUNK
    while power < -SCALE_CHUNK:
        value /= 10.0**SCALE_CHUNK
        power += SCALE_CHUNK
    if power >= 0:
        return value * 10.0**power
    # Деление на 10^k точнее, чем умножение на неточное 10^-k
    return value / 10.0**-power


def align_mantissa(mantissa: float, exponent_diff: int) -> float:
    """
    Сдвиг mantissa меньшего операнда к большему exponent.

    Args:
        mantissa: Mantissa операнда с меньшим exponent
        exponent_diff: Разница exponent (>= 0, не больше PRECISION_DIGITS)

    Returns:
        mantissa / 10^exponent_diff
    """
    if exponent_diff < 0:
        raise ValueError(f"exponent_diff must be non-negative, got {exponent_diff}")
    if exponent_diff == 0:
        return mantissa
    return mantissa / 10.0**exponent_diff


def is_negligible(exponent_diff: int, precision_digits: int = PRECISION_DIGITS) -> bool:
    """
    Пренебрежимо ли мал операнд при данной разнице exponent.

    Returns:
        True если |exponent_diff| > precision_digits
    """
    return abs(exponent_diff) > precision_digits


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(mantissa: float, exponent: int = 0) -> tuple[float, int]:
    """
    Нормализация пары (mantissa, exponent).

    Алгоритм:
        1. mantissa == 0 (включая -0.0) → каноничный ноль (0.0, 0)
        2. shift = floor(log10(|mantissa|)); mantissa /= 10^shift; exponent += shift
        3. Корректирующие циклы на случай округления на границе:
           |m| >= 10 → m /= 10, e += 1
           |m| < 1   → m *= 10, e -= 1
        4. Проверка границ exponent

    Args:
        mantissa: Произвольная конечная mantissa
        exponent: Произвольный целый exponent

    Returns:
        (mantissa, exponent) с 1.0 <= |mantissa| < 10.0, либо (0.0, 0)

    Raises:
        ValueError: Если mantissa NaN/Inf
        ExponentOverflowError: Если нормализованный exponent вне границ

    Examples:
        >>> normalize(25.0, 0)
        (2.5, 1)
        >>> normalize(0.0, 999)
        (0.0, 0)
        >>> normalize(-0.05, 3)
        (-5.0, 1)
    """
    m = validate_mantissa(mantissa)
    e = int(exponent)

    if m == 0.0:
        return 0.0, 0

    shift = math.floor(math.log10(abs(m)))
    if shift != 0:
        m = scale_by_power_of_ten(m, -shift)
        e += shift

    # log10 может ошибиться на единицу около степеней 10
    while abs(m) >= MANTISSA_UPPER:
        m /= 10.0
        e += 1
    while abs(m) < MANTISSA_LOWER:
        m *= 10.0
        e -= 1

    return m, check_exponent(e)


def is_normalized(mantissa: float, exponent: int) -> bool:
    """
    Проверка инварианта нормализации.

    Returns:
        True для (0.0, 0) или для 1.0 <= |mantissa| < 10.0
    """
    if mantissa == 0.0:
        return exponent == 0
    return MANTISSA_LOWER <= abs(mantissa) < MANTISSA_UPPER
