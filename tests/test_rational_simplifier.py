from fractions import Fraction as Q

from adapters.simplifier.rational_simplifier import RationalSimplifier, extract_radical_factor
from builders import E, PI, frac, ln, log, num, power, root, sin, var
from contracts import Fraction, IntegerLiteral, Logarithm, Power, Product, Radical, Sine, Sum


def test_simplify_reduces_fraction_by_gcd():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(frac(num(12), num(18))) == frac(num(2), num(3))


def test_simplify_moves_sign_to_numerator():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(frac(num(4), num(-6))) == frac(num(-2), num(3))
    assert simplifier.simplify(frac(num(-4), num(-6))) == frac(num(2), num(3))


def test_simplify_collapses_unit_denominator_to_integer():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(frac(num(6), num(3))) == num(2)
    assert simplifier.simplify(frac(num(6), num(-3))) == num(-2)
    assert simplifier.simplify(frac(num(0), num(5))) == num(0)


def test_simplify_leaves_zero_denominator_untouched():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(frac(num(5), num(0))) == frac(num(5), num(0))
    assert simplifier.simplify(frac(num(0), num(0))) == frac(num(0), num(0))


def test_fraction_reduction_is_idempotent():
    simplifier = RationalSimplifier()
    cases = [
        frac(num(12), num(18)),
        frac(num(-7), num(-21)),
        frac(num(9), num(0)),
        frac(var("x"), num(4)),
        frac(frac(num(1), num(2)), num(3)),
    ]

    for node in cases:
        once = simplifier.simplify(node)
        assert simplifier.simplify(once) == once


def test_reduced_fraction_keeps_value_and_positive_denominator():
    simplifier = RationalSimplifier()

    for a, b in [(12, 18), (-12, 18), (12, -18), (-35, -49), (7, 13), (100, -4)]:
        result = simplifier.simplify(frac(num(a), num(b)))
        if isinstance(result, IntegerLiteral):
            assert Q(result.value) == Q(a, b)
            continue
        assert isinstance(result, Fraction)
        assert result.denominator.value > 0
        assert Q(result.numerator.value, result.denominator.value) == Q(a, b)


def test_simplify_sum_of_integers():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(num(2) + num(3)) == num(5)


def test_simplify_sum_of_fractions():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(frac(num(1), num(2)) + frac(num(3), num(4))) == frac(num(5), num(4))
    assert simplifier.simplify(frac(num(1), num(2)) + frac(num(2), num(10))) == frac(num(7), num(10))
    assert simplifier.simplify(frac(num(1), num(2)) + frac(num(1), num(2))) == num(1)


def test_simplify_sum_of_integer_and_fraction():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(num(1) + frac(num(1), num(3))) == frac(num(4), num(3))


def test_simplify_sum_with_variable_stays_unreduced():
    simplifier = RationalSimplifier()

    result = simplifier.simplify(Sum(left=var("x"), right=frac(num(2), num(4))))

    assert result == Sum(left=var("x"), right=frac(num(1), num(2)))


def test_simplify_sum_with_symbolic_fraction_stays_unreduced():
    simplifier = RationalSimplifier()
    node = Sum(left=frac(var("x"), num(2)), right=num(1))

    assert simplifier.simplify(node) == node


def test_simplify_product_of_integers_and_fractions():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(num(3) * num(4)) == num(12)
    assert simplifier.simplify(frac(num(2), num(3)) * frac(num(3), num(4))) == frac(num(1), num(2))


def test_simplify_product_folds_integer_into_numerator():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(Product(left=frac(num(2), num(3)), right=num(3))) == num(2)
    assert simplifier.simplify(Product(left=num(3), right=frac(num(2), num(9)))) == frac(num(2), num(3))


def test_simplify_product_keeps_symbolic_denominator():
    simplifier = RationalSimplifier()

    result = simplifier.simplify(Product(left=frac(num(2), var("y")), right=num(3)))

    assert result == frac(num(6), var("y"))


def test_simplify_product_with_variable_stays_unreduced():
    simplifier = RationalSimplifier()
    node = Product(left=num(2), right=var("x"))

    assert simplifier.simplify(node) == node


def test_simplify_folds_nested_arithmetic():
    simplifier = RationalSimplifier()
    node = (num(3) + num(5)) * (num(7) - num(2))

    assert simplifier.simplify(node) == num(40)


def test_simplify_square_root_extracts_factor():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(root(num(72))) == Product(left=num(6), right=root(num(2)))
    assert simplifier.simplify(root(num(16))) == num(4)


def test_simplify_cube_root_extracts_factor():
    simplifier = RationalSimplifier()

    result = simplifier.simplify(root(num(54), num(3)))

    assert result == Product(left=num(3), right=Radical(radicand=num(2), degree=num(3)))


def test_simplify_radical_without_square_factor_is_unchanged():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(root(num(2))) == root(num(2))
    assert simplifier.simplify(root(num(30))) == root(num(30))


def test_simplify_radical_simplifies_children_first():
    simplifier = RationalSimplifier()

    result = simplifier.simplify(root(frac(num(16), num(2)), num(1) + num(1)))

    assert result == Product(left=num(2), right=root(num(2)))


def test_simplify_radical_degenerate_inputs_are_unchanged():
    simplifier = RationalSimplifier()

    for node in [
        root(num(8), num(0)),
        root(num(8), num(-2)),
        root(num(-16)),
        root(num(0)),
        root(num(1)),
        root(var("x")),
        root(num(8), var("n")),
    ]:
        assert simplifier.simplify(node) == node


def test_simplify_first_degree_radical_is_its_radicand():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(root(num(12), num(1))) == num(12)
    assert simplifier.simplify(root(num(1_000_000_007), num(1))) == num(1_000_000_007)


def test_simplify_radical_with_degree_beyond_radicand_bits_is_unchanged():
    simplifier = RationalSimplifier()

    huge = root(num(8), num(10 ** 12))

    assert simplifier.simplify(huge) == huge
    assert simplifier.simplify(root(num(7), num(3))) == root(num(7), num(3))
    assert simplifier.simplify(root(num(8), num(3))) == num(2)


def test_extract_radical_factor_reconstructs_radicand():
    for radicand, degree in [(72, 2), (54, 3), (1000, 3), (97, 2), (2 ** 10 * 3, 4), (360, 2)]:
        factor, remainder = extract_radical_factor(radicand, degree)
        assert factor ** degree * remainder == radicand


def test_simplify_recurses_into_power_log_and_trig():
    simplifier = RationalSimplifier()

    assert simplifier.simplify(power(frac(num(2), num(4)), num(1) + num(1))) == Power(
        base=frac(num(1), num(2)), exponent=num(2)
    )
    assert simplifier.simplify(log(num(1) + num(1), num(8))) == Logarithm(argument=num(8), base=num(2))
    assert simplifier.simplify(ln(E)) == Logarithm(argument=E, base=E)
    assert simplifier.simplify(sin(num(1) + num(2))) == Sine(argument=num(3))


def test_simplify_leaves_atoms_alone():
    simplifier = RationalSimplifier()

    for node in [num(7), var("x"), E, PI]:
        assert simplifier.simplify(node) is node


def test_simplify_does_not_mutate_input():
    simplifier = RationalSimplifier()
    node = frac(num(12), num(18)) + root(num(72))
    snapshot = node.model_copy(deep=True)

    simplifier.simplify(node)

    assert node == snapshot
