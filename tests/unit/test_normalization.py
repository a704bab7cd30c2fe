"""
Тесты для модуля Normalization

Проверяет:
1. Инвариант нормализации 1.0 <= |mantissa| < 10.0
2. Каноничный ноль (0.0, 0)
3. Граничные значения float (субнормальные, float max)
4. NaN/Inf валидацию
5. Политику переполнения exponent
6. Выравнивание mantissa и порог пренебрежимости
"""

import math

import pytest

from bignum.core.math.normalization import (
    EXPONENT_MAX,
    EXPONENT_MIN,
    PRECISION_DIGITS,
    SCALE_CHUNK,
    ExponentOverflowError,
    align_mantissa,
    check_exponent,
    is_negligible,
    is_normalized,
    normalize,
    scale_by_power_of_ten,
    validate_mantissa,
)


def _value_of(mantissa: float, exponent: int) -> float:
    return float(f"{mantissa!r}e{exponent}")


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestNormalize:
    """Тесты normalize"""

    def test_already_normalized_unchanged(self) -> None:
        """Нормализованная пара не меняется"""
        assert normalize(2.5, 10) == (2.5, 10)
        assert normalize(1.0, 0) == (1.0, 0)
        assert normalize(-7.25, -3) == (-7.25, -3)

    def test_large_mantissa_shifted_down(self) -> None:
        """Большая mantissa переносится в exponent"""
        assert normalize(2500.0, 0) == (2.5, 3)
        assert normalize(10.0, 0) == (1.0, 1)

    def test_small_mantissa_shifted_up(self) -> None:
        """Малая mantissa переносится в exponent"""
        assert normalize(0.25, 0) == (2.5, -1)
        m, e = normalize(0.1, 5)
        assert m == pytest.approx(1.0)
        assert e == 4

    def test_sign_preserved(self) -> None:
        """Знак mantissa сохраняется"""
        m, e = normalize(-0.05, 3)
        assert m == pytest.approx(-5.0)
        assert e == 1

        m, e = normalize(-2500.0, 0)
        assert m == -2.5
        assert e == 3

    def test_zero_is_canonical(self) -> None:
        """Ноль с любым exponent → (0.0, 0)"""
        assert normalize(0.0, 999) == (0.0, 0)
        assert normalize(0.0, -999) == (0.0, 0)
        assert normalize(0.0, EXPONENT_MAX + 10) == (0.0, 0)

    def test_negative_zero_is_canonical(self) -> None:
        """-0.0 → положительный каноничный ноль"""
        m, e = normalize(-0.0, 7)
        assert (m, e) == (0.0, 0)
        assert math.copysign(1.0, m) == 1.0

    def test_int_mantissa_accepted(self) -> None:
        """int mantissa конвертируется в float"""
        m, e = normalize(2500, 0)
        assert isinstance(m, float)
        assert (m, e) == (2.5, 3)

    @pytest.mark.parametrize(
        "value",
        [
            1e-300,
            0.1,
            0.3,
            9.999999999999998,
            99.99999999999999,
            1e23,
            123456789.0,
            -7.5e-10,
            -1e300,
        ],
    )
    def test_invariant_and_value_preserved(self, value: float) -> None:
        """Инвариант выполняется, значение сохраняется"""
        m, e = normalize(value, 0)
        assert is_normalized(m, e)
        assert _value_of(m, e) == pytest.approx(value, rel=1e-12)

    def test_subnormal_input(self) -> None:
        """Субнормальное значение нормализуется без деления на ноль"""
        m, e = normalize(5e-324, 0)
        assert is_normalized(m, e)
        assert e == -324
        assert m == pytest.approx(4.94065645841247, rel=1e-6)

    def test_float_max_input(self) -> None:
        """float max нормализуется без переполнения множителя"""
        m, e = normalize(1.7976931348623157e308, 0)
        assert is_normalized(m, e)
        assert e == 308
        assert m == pytest.approx(1.7976931348623157, rel=1e-12)

    def test_exponent_combined_with_shift(self) -> None:
        """Сдвиг складывается с исходным exponent"""
        m, e = normalize(1e200, 200)
        assert m == pytest.approx(1.0)
        assert e == 400


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты validate_mantissa и check_exponent"""

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            normalize(float("nan"), 0)

    def test_inf_rejected(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            normalize(float("inf"), 0)
        with pytest.raises(ValueError, match="finite"):
            validate_mantissa(float("-inf"))

    def test_huge_int_rejected(self) -> None:
        """int вне диапазона float → ValueError, не OverflowError"""
        with pytest.raises(ValueError, match="out of float range"):
            validate_mantissa(10**400)

    def test_exponent_bounds(self) -> None:
        assert check_exponent(EXPONENT_MAX) == EXPONENT_MAX
        assert check_exponent(EXPONENT_MIN) == EXPONENT_MIN

        with pytest.raises(ExponentOverflowError):
            check_exponent(EXPONENT_MAX + 1)
        with pytest.raises(ExponentOverflowError):
            check_exponent(EXPONENT_MIN - 1)

    def test_exponent_bounds_are_signed_32_bit(self) -> None:
        assert EXPONENT_MAX == 2**31 - 1
        assert EXPONENT_MIN == -(2**31)


class TestExponentOverflow:
    """Переполнение exponent при нормализации"""

    def test_shift_past_max_raises(self) -> None:
        """Сдвиг за EXPONENT_MAX → ExponentOverflowError"""
        with pytest.raises(ExponentOverflowError) as exc_info:
            normalize(50.0, EXPONENT_MAX)
        assert exc_info.value.exponent == EXPONENT_MAX + 1

    def test_shift_past_min_raises(self) -> None:
        with pytest.raises(ExponentOverflowError):
            normalize(0.5, EXPONENT_MIN)

    def test_is_overflow_error(self) -> None:
        """ExponentOverflowError ловится как OverflowError"""
        with pytest.raises(OverflowError, match="outside of"):
            normalize(50.0, EXPONENT_MAX)

    def test_shift_back_into_range_allowed(self) -> None:
        """Сдвиг, возвращающий exponent в диапазон, допустим"""
        assert normalize(0.5, EXPONENT_MAX + 1) == (5.0, EXPONENT_MAX)


# =============================================================================
# ТЕСТЫ МАСШТАБИРОВАНИЯ И ВЫРАВНИВАНИЯ
# =============================================================================


class TestScaleByPowerOfTen:
    """Тесты scale_by_power_of_ten"""

    def test_small_powers(self) -> None:
        assert scale_by_power_of_ten(2.5, 3) == 2500.0
        assert scale_by_power_of_ten(2500.0, -3) == 2.5
        assert scale_by_power_of_ten(7.0, 0) == 7.0

    def test_power_beyond_chunk(self) -> None:
        """Степень больше SCALE_CHUNK применяется частями"""
        assert scale_by_power_of_ten(5e-324, 324) == pytest.approx(4.94065645841247, rel=1e-6)
        assert scale_by_power_of_ten(1e308, -(SCALE_CHUNK + 8)) == pytest.approx(1.0)


class TestAlignMantissa:
    """Тесты align_mantissa и is_negligible"""

    def test_align(self) -> None:
        assert align_mantissa(3.0, 0) == 3.0
        assert align_mantissa(3.0, 5) == pytest.approx(3e-5)
        assert align_mantissa(-3.0, 2) == pytest.approx(-0.03)

    def test_negative_diff_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            align_mantissa(3.0, -1)

    def test_negligible_threshold(self) -> None:
        """Порог: разница строго больше PRECISION_DIGITS"""
        assert PRECISION_DIGITS == 15
        assert not is_negligible(PRECISION_DIGITS)
        assert is_negligible(PRECISION_DIGITS + 1)
        assert is_negligible(-(PRECISION_DIGITS + 1))
        assert not is_negligible(0)


class TestIsNormalized:
    """Тесты is_normalized"""

    def test_normalized_pairs(self) -> None:
        assert is_normalized(0.0, 0)
        assert is_normalized(1.0, 5)
        assert is_normalized(-9.99, -5)

    def test_not_normalized_pairs(self) -> None:
        assert not is_normalized(0.0, 3)
        assert not is_normalized(10.0, 0)
        assert not is_normalized(0.5, 0)
