import pytest

from planelab.rational import Rational


def test_reduces_common_factor():
    assert Rational(4, 8) == Rational(1, 2)
    assert Rational(12, 18) == Rational(2, 3)


def test_negative_denominator_moves_sign_to_numerator():
    r = Rational(3, -6)
    assert r.denominator > 0
    assert r.numerator < 0
    assert r == Rational(-1, 2)


def test_single_argument_has_unit_denominator():
    r = Rational(7)
    assert r.denominator == 1
    assert r.numerator == 7
    assert r.is_integer()


def test_is_integer():
    assert Rational(6, 3).is_integer()
    assert not Rational(1, 2).is_integer()
    assert not Rational(2.5).is_integer()


def test_fractional_parts_reduce_by_integer_gcd():
    r = Rational(2.5, 4)
    assert r.denominator == 2
    assert r.value() == pytest.approx(2.5 / 4)


def test_value_and_float_agree():
    r = Rational(1, 4)
    assert r.value() == 1 / 4
    assert float(r) == r.value()


def test_add_then_subtract_round_trips():
    a, b = Rational(1, 2), Rational(1, 3)
    assert (a + b) - b == a
    assert (a + b).value() == pytest.approx(a.value() + b.value())


def test_multiply_then_divide_round_trips():
    a, b = Rational(2, 3), Rational(5, 7)
    assert (a * b) / b == a
    assert (a * b).value() == pytest.approx(a.value() * b.value())


def test_mixed_with_plain_numbers():
    r = Rational(2, 3) * 3
    assert r.is_integer()
    assert r == 2
    assert 1 + Rational(1, 2) == Rational(3, 2)
    assert Rational(-1) * Rational(4, 2) + 1 == -1


def test_ratio_matches_division():
    top, bottom = Rational(1, 2), Rational(3, 4)
    assert Rational.ratio(top, bottom) == top / bottom


def test_ratio_rejects_non_numbers():
    with pytest.raises(TypeError):
        Rational.ratio("1", Rational(1))


def test_zero_over_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Rational(0, 0)


def test_zero_numerator_reduces():
    assert Rational(0, 5) == Rational(0)
    assert Rational(0, 5).is_integer()


def test_equality_with_other_types():
    assert (Rational(1) == "1") is False


def test_division_by_zero_value_raises():
    r = Rational(3, 1) / Rational(0)
    assert not r.is_integer()
    with pytest.raises(ZeroDivisionError):
        r.value()