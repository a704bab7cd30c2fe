"""
Formatting — строковое представление ScientificNumber

Два формата:
- display: фиксированное число знаков mantissa и явный exponent ("2.500e10")
- short: человекочитаемый формат с суффиксами K/M и обрезкой нулей ("1.23K")

Контракт display-формата:
    [-]<mantissa с display_decimals знаками>e<exponent>
    Каноничный ноль: "0.000e0" (при display_decimals=3)
    Exponent без знака "+" и без дополнения нулями: "1.000e-5", "2.500e10"
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Optional

from bignum.core.math.normalization import MANTISSA_UPPER, scale_by_power_of_ten

if TYPE_CHECKING:
    from bignum.core.domain.scientific_number import ScientificNumber


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Знаков mantissa в display-формате
DISPLAY_DECIMALS_DEFAULT: Final[int] = 3

# Знаков после точки в short-формате (до обрезки нулей)
SHORT_PRECISION_DEFAULT: Final[int] = 2

# (exponent начала диапазона, суффикс)
SHORT_SUFFIXES_DEFAULT: Final[tuple[tuple[int, str], ...]] = ((3, "K"), (6, "M"))


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация форматирования.

    Суффиксы задаются по возрастанию exponent; каждый покрывает
    три порядка, после последнего используется научная нотация.
    """

    display_decimals: int = DISPLAY_DECIMALS_DEFAULT
    short_precision: int = SHORT_PRECISION_DEFAULT
    suffixes: tuple[tuple[int, str], ...] = SHORT_SUFFIXES_DEFAULT

    def __post_init__(self):
        _check_digits(self.display_decimals, "display_decimals")
        _check_digits(self.short_precision, "short_precision")

        previous = 0
        for exponent, suffix in self.suffixes:
            if exponent <= previous:
                raise ValueError(
                    f"suffix exponents must be positive and ascending, got {self.suffixes}"
                )
            if not suffix:
                raise ValueError("suffix must be a non-empty string")
            previous = exponent


def _check_digits(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def _trim_zeros(text: str) -> str:
    if "." in text:
        return text.rstrip("0").rstrip(".")
    return text


# =============================================================================
# FORMATTER
# =============================================================================


class NumberFormatter:
    """Форматирование ScientificNumber согласно FormatConfig."""

    def __init__(self, config: Optional[FormatConfig] = None):
        """
        Args:
            config: Конфигурация форматирования (default: FormatConfig())
        """
        self.config = config or FormatConfig()

    def display(self, value: "ScientificNumber", decimals: Optional[int] = None) -> str:
        """
        Display-формат с фиксированным числом знаков.

        Если округление mantissa даёт 10.000, результат переносится
        в следующий порядок: 9.9996e4 → "1.000e5".

        Examples:
            >>> NumberFormatter().display(ScientificNumber.new(2.5, 10))
            '2.500e10'
            >>> NumberFormatter().display(ScientificNumber.new(-1.0, -5))
            '-1.000e-5'
        """
        if decimals is None:
            decimals = self.config.display_decimals
        _check_digits(decimals, "decimals")

        if value.mantissa == 0.0:
            return f"{0.0:.{decimals}f}e0"

        sign = "-" if value.mantissa < 0.0 else ""
        magnitude = abs(value.mantissa)
        exponent = value.exponent

        text = f"{magnitude:.{decimals}f}"
        if float(text) >= MANTISSA_UPPER:
            exponent += 1
            text = f"{magnitude / 10.0:.{decimals}f}"

        return f"{sign}{text}e{exponent}"

    def short(self, value: "ScientificNumber", precision: Optional[int] = None) -> str:
        """
        Короткий формат для интерфейсов.

        |value| < 1e3 → "123.45", < 1e6 → "1.23K", < 1e9 → "5M",
        иначе "1.5e12". Нули в конце дробной части обрезаются.

        Examples:
            >>> NumberFormatter().short(ScientificNumber.new(3.0, 5))
            '300K'
            >>> NumberFormatter().short(ScientificNumber.new(1.0, 9))
            '1e9'
        """
        if precision is None:
            precision = self.config.short_precision
        _check_digits(precision, "precision")

        if value.mantissa == 0.0:
            return "0"

        sign = "-" if value.mantissa < 0.0 else ""
        magnitude = abs(value.mantissa)
        exponent = value.exponent

        # Мелкие значения, которые округлились бы до "0", уходят в научную нотацию
        if exponent >= -precision:
            for base, suffix, limit in self._tiers():
                if exponent >= limit:
                    continue
                text = _trim_zeros(
                    f"{scale_by_power_of_ten(magnitude, exponent - base):.{precision}f}"
                )
                # 999.999 → "1000" переходит в следующий диапазон
                if float(text) < 10.0 ** (limit - base):
                    return f"{sign}{text}{suffix}"

        text = _trim_zeros(f"{magnitude:.{precision}f}")
        if float(text) >= MANTISSA_UPPER:
            exponent += 1
            text = _trim_zeros(f"{magnitude / 10.0:.{precision}f}")
        return f"{sign}{text}e{exponent}"

    def _tiers(self) -> list[tuple[int, str, int]]:
        bases = [(0, "")] + list(self.config.suffixes)
        tiers = []
        for index, (base, suffix) in enumerate(bases):
            if index + 1 < len(bases):
                limit = bases[index + 1][0]
            else:
                limit = base + 3
            tiers.append((base, suffix, limit))
        return tiers


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Форматтер с конфигурацией по умолчанию
_DEFAULT_FORMATTER = NumberFormatter()


def to_display_string(value: "ScientificNumber", decimals: Optional[int] = None) -> str:
    """
    Display-формат: "2.500e10".

    Args:
        value: Число для форматирования
        decimals: Знаков mantissa (default: DISPLAY_DECIMALS_DEFAULT)
    """
    return _DEFAULT_FORMATTER.display(value, decimals)


def to_short_string(value: "ScientificNumber", precision: Optional[int] = None) -> str:
    """
    Короткий формат с суффиксами K/M: "1.23K", "300K", "5M", "3e10".

    Args:
        value: Число для форматирования
        precision: Знаков после точки до обрезки нулей (default: SHORT_PRECISION_DEFAULT)
    """
    return _DEFAULT_FORMATTER.short(value, precision)
