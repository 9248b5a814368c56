from decimal import Decimal

import pytest

from adapters.evaluator.real_evaluator import RealEvaluator
from adapters.simplifier.rational_simplifier import RationalSimplifier
from builders import (
    E, I, PI, cos, cot, csc, dec, frac, ln, log, num, power, root, sec, sin, tan, var,
)
from contracts import EvalFailure, Product, Sum


def test_evaluate_fraction_rounds_to_ten_digits():
    evaluator = RealEvaluator()
    node = frac(num(12), num(18))

    assert str(evaluator.evaluate(node)) == "0.6666666667"
    assert str(evaluator.evaluate(RationalSimplifier().simplify(node))) == "0.6666666667"


def test_evaluate_power_with_bound_variable():
    evaluator = RealEvaluator()

    result = evaluator.evaluate(power(var("x"), num(2)), {"x": 4.0})

    assert str(result) == "16.0000000000"


def test_evaluate_sum_and_product():
    evaluator = RealEvaluator()

    result = evaluator.evaluate(Sum(left=num(5), right=Product(left=num(3), right=num(4))))

    assert str(result) == "17.0000000000"


def test_evaluate_sine_of_half_pi():
    evaluator = RealEvaluator()

    assert str(evaluator.evaluate(sin(frac(PI, num(2))))) == "1.0000000000"


def test_evaluate_logarithm_with_base():
    evaluator = RealEvaluator()

    assert str(evaluator.evaluate(log(num(2), num(8)))) == "3.0000000000"
    assert str(evaluator.evaluate(ln(power(E, num(3))))) == "3.0000000000"


def test_evaluate_constants():
    evaluator = RealEvaluator()

    assert evaluator.evaluate(PI) == Decimal("3.1415926536")
    assert evaluator.evaluate(E) == Decimal("2.7182818285")


def test_evaluate_division_by_zero_returns_none():
    evaluator = RealEvaluator()
    node = frac(num(5), num(0))

    assert evaluator.evaluate(node) is None
    detailed = evaluator.evaluate_detailed(node)
    assert detailed.failure == EvalFailure.DIVISION_BY_ZERO
    assert not detailed.ok


def test_evaluate_division_by_expression_equal_to_zero():
    evaluator = RealEvaluator()

    assert evaluator.evaluate(frac(num(1), var("x") - num(2)), {"x": 2}) is None


def test_evaluate_missing_variable_returns_none():
    evaluator = RealEvaluator()
    node = var("y") + num(1)

    assert evaluator.evaluate(node) is None
    assert evaluator.evaluate(node, {}) is None
    detailed = evaluator.evaluate_detailed(node)
    assert detailed.failure == EvalFailure.MISSING_VARIABLE
    assert "'y'" in detailed.message


def test_evaluate_imaginary_unit_is_unsupported():
    evaluator = RealEvaluator()

    assert evaluator.evaluate(I + num(1)) is None
    assert evaluator.evaluate_detailed(I).failure == EvalFailure.UNSUPPORTED_OPERATION


def test_evaluate_reciprocal_trig_domain_errors():
    evaluator = RealEvaluator()

    assert evaluator.evaluate_detailed(cot(num(0))).failure == EvalFailure.DOMAIN_ERROR
    assert evaluator.evaluate_detailed(csc(num(0))).failure == EvalFailure.DOMAIN_ERROR
    assert evaluator.evaluate(sec(num(0))) == Decimal("1")


def test_evaluate_basic_trig():
    evaluator = RealEvaluator()

    assert evaluator.evaluate(cos(num(0))) == Decimal("1")
    assert evaluator.evaluate(tan(frac(PI, num(4)))) == Decimal("1")
    assert evaluator.evaluate(cos(frac(PI, num(2)))) == Decimal("0")
    assert evaluator.evaluate(csc(frac(PI, num(2)))) == Decimal("1")


def test_evaluate_negative_integer_exponent():
    evaluator = RealEvaluator()

    assert str(evaluator.evaluate(power(var("x"), num(-2)), {"x": 2})) == "0.2500000000"


def test_evaluate_zero_exponent_is_one():
    evaluator = RealEvaluator()

    assert evaluator.evaluate(power(num(0), num(0))) == Decimal("1")


def test_evaluate_fractional_exponent_uses_real_power():
    evaluator = RealEvaluator()

    assert str(evaluator.evaluate(power(num(2), dec("0.5")))) == "1.4142135624"


def test_evaluate_radical():
    evaluator = RealEvaluator()

    assert str(evaluator.evaluate(root(num(27), num(3)))) == "3.0000000000"
    assert str(evaluator.evaluate(root(num(2)))) == "1.4142135624"


def test_evaluate_log_of_non_positive_is_non_finite():
    evaluator = RealEvaluator()

    zero = evaluator.evaluate(ln(num(0)))
    negative = evaluator.evaluate(ln(num(-1)))

    assert zero is not None and zero.is_infinite() and zero < 0
    assert negative is not None and negative.is_nan()


def test_evaluate_non_finite_propagates_through_trig():
    evaluator = RealEvaluator()

    result = evaluator.evaluate(sin(ln(num(-1))))

    assert result is not None and result.is_nan()


def test_evaluate_non_finite_propagates_through_power_and_radical():
    evaluator = RealEvaluator()

    inverse_zero = evaluator.evaluate(power(num(0), num(-1)))
    odd_root_of_negative = evaluator.evaluate(root(num(-8), num(3)))
    zero_degree = evaluator.evaluate(root(num(8), num(0)))

    assert inverse_zero is not None and inverse_zero.is_infinite() and inverse_zero > 0
    assert odd_root_of_negative is not None and odd_root_of_negative.is_nan()
    assert zero_degree is not None and zero_degree.is_infinite() and zero_degree > 0


def test_evaluate_rounds_once_at_the_end():
    evaluator = RealEvaluator()
    third = frac(num(1), num(3))

    assert str(evaluator.evaluate(third + third + third)) == "1.0000000000"


def test_evaluate_rounds_half_up():
    evaluator = RealEvaluator()

    assert evaluator.evaluate(dec("0.00000000005")) == Decimal("0.0000000001")
    assert evaluator.evaluate(dec("0.00000000004")) == Decimal("0")


def test_evaluate_keeps_large_integers_exact():
    evaluator = RealEvaluator()

    result = evaluator.evaluate(num(10 ** 30) + num(1))

    assert result == Decimal(10 ** 30 + 1)


def test_evaluate_accepts_int_float_and_decimal_bindings():
    evaluator = RealEvaluator()
    node = var("a") + var("b") + var("c")

    assert evaluator.evaluate(node, {"a": 1, "b": 0.1, "c": Decimal("0.2")}) == Decimal("1.3")


def test_evaluate_rejects_non_numeric_binding():
    evaluator = RealEvaluator()

    with pytest.raises(TypeError):
        evaluator.evaluate(var("x"), {"x": "4"})
    with pytest.raises(TypeError):
        evaluator.evaluate(var("x"), {"x": True})


def test_evaluate_custom_scale():
    evaluator = RealEvaluator(scale=2)

    assert str(evaluator.evaluate(frac(num(1), num(3)))) == "0.33"
