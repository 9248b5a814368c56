"""
Adapter: RationalSimplifier
Implementuje port Simplifier: rekurencyjne, oddolne upraszczanie drzewa wyrażenia.

Dokładna arytmetyka na int (bez zmiennoprzecinkowych):
  Sum / Product:  składanie literałów całkowitych i ułamków całkowitych
  Fraction:       skracanie przez NWD, mianownik zawsze dodatni
  Radical:        wyciąganie czynników całkowitych spod pierwiastka

Pozostałe węzły (Power, Logarithm, trygonometria) są tylko przebudowywane
z uproszczonych dzieci; liczenie ich wartości należy do ewaluatora.
"""
from __future__ import annotations

import logging
from math import gcd
from typing import Optional

from contracts import (
    ATOMIC_NODES,
    TRIG_NODES,
    ExprNode,
    Fraction,
    IntegerLiteral,
    Logarithm,
    Power,
    Product,
    Radical,
    Sum,
)

logger = logging.getLogger("symath.simplifier")


def _as_fraction(node: ExprNode) -> Optional[Fraction]:
    """n → n/1, Fraction bez zmian, reszta → None."""
    if isinstance(node, Fraction):
        return node
    if isinstance(node, IntegerLiteral):
        return Fraction(numerator=node, denominator=IntegerLiteral(value=1))
    return None


def _integer_parts(fraction: Fraction) -> Optional[tuple[int, int]]:
    num, den = fraction.numerator, fraction.denominator
    if isinstance(num, IntegerLiteral) and isinstance(den, IntegerLiteral):
        return num.value, den.value
    return None


def extract_radical_factor(radicand: int, degree: int) -> tuple[int, int]:
    """
    Rozkłada radicand = factor**degree * remainder z największym możliwym factor.
    Dzielenie próbne i = 2, 3, … dopóki i**degree nie przekroczy reszty.
    """
    factor = 1
    remainder = radicand
    i = 2
    while i ** degree <= remainder:
        step = i ** degree
        while remainder % step == 0:
            factor *= i
            remainder //= step
        i += 1
    return factor, remainder


class RationalSimplifier:
    """Upraszczanie strukturalne z dokładną arytmetyką wymierną."""

    # -- Simplifier protocol -----------------------------------------------

    def simplify(self, node: ExprNode) -> ExprNode:
        if isinstance(node, ATOMIC_NODES):
            return node
        if isinstance(node, Fraction):
            return self._simplify_fraction(node)
        if isinstance(node, Radical):
            return self._simplify_radical(node)
        if isinstance(node, Sum):
            return self._simplify_sum(node)
        if isinstance(node, Product):
            return self._simplify_product(node)
        if isinstance(node, Power):
            return Power(base=self.simplify(node.base), exponent=self.simplify(node.exponent))
        if isinstance(node, Logarithm):
            return Logarithm(argument=self.simplify(node.argument), base=self.simplify(node.base))
        if isinstance(node, TRIG_NODES):
            return type(node)(argument=self.simplify(node.argument))
        raise TypeError(f"Nieznany typ węzła: {type(node)}")

    # -- Prywatne ----------------------------------------------------------

    def _simplify_sum(self, node: Sum) -> ExprNode:
        left = self.simplify(node.left)
        right = self.simplify(node.right)

        if isinstance(left, IntegerLiteral) and isinstance(right, IntegerLiteral):
            return IntegerLiteral(value=left.value + right.value)

        left_frac = _as_fraction(left)
        right_frac = _as_fraction(right)
        if left_frac is not None and right_frac is not None:
            lhs = _integer_parts(left_frac)
            rhs = _integer_parts(right_frac)
            if lhs is not None and rhs is not None:
                a, b = lhs
                c, d = rhs
                return self._reduce(a * d + c * b, b * d)

        return Sum(left=left, right=right)

    def _simplify_product(self, node: Product) -> ExprNode:
        left = self.simplify(node.left)
        right = self.simplify(node.right)

        if isinstance(left, IntegerLiteral) and isinstance(right, IntegerLiteral):
            return IntegerLiteral(value=left.value * right.value)

        if isinstance(left, Fraction) and isinstance(right, Fraction):
            lhs = _integer_parts(left)
            rhs = _integer_parts(right)
            if lhs is not None and rhs is not None:
                return self._reduce(lhs[0] * rhs[0], lhs[1] * rhs[1])
        elif isinstance(left, Fraction) and isinstance(right, IntegerLiteral):
            folded = self._fold_into_numerator(left, right)
            if folded is not None:
                return folded
        elif isinstance(right, Fraction) and isinstance(left, IntegerLiteral):
            folded = self._fold_into_numerator(right, left)
            if folded is not None:
                return folded

        return Product(left=left, right=right)

    def _fold_into_numerator(
        self, fraction: Fraction, factor: IntegerLiteral
    ) -> Optional[ExprNode]:
        if not isinstance(fraction.numerator, IntegerLiteral):
            return None
        return self._simplify_fraction(Fraction(
            numerator=IntegerLiteral(value=fraction.numerator.value * factor.value),
            denominator=fraction.denominator,
        ))

    def _simplify_fraction(self, node: Fraction) -> ExprNode:
        numerator = self.simplify(node.numerator)
        denominator = self.simplify(node.denominator)
        if isinstance(numerator, IntegerLiteral) and isinstance(denominator, IntegerLiteral):
            return self._reduce(numerator.value, denominator.value)
        return Fraction(numerator=numerator, denominator=denominator)

    def _reduce(self, num: int, den: int) -> ExprNode:
        """Skraca num/den; mianownik 0 zostaje bez zmian (błąd zgłosi ewaluator)."""
        if den == 0:
            logger.debug("Fraction with zero denominator left unreduced: %d/0", num)
            return Fraction(numerator=IntegerLiteral(value=num), denominator=IntegerLiteral(value=0))

        divisor = gcd(abs(num), abs(den))
        sign = -1 if den < 0 else 1
        num = sign * num // divisor
        den = sign * den // divisor
        if den == 1:
            return IntegerLiteral(value=num)
        return Fraction(numerator=IntegerLiteral(value=num), denominator=IntegerLiteral(value=den))

    def _simplify_radical(self, node: Radical) -> ExprNode:
        radicand = self.simplify(node.radicand)
        degree = self.simplify(node.degree)
        unchanged = Radical(radicand=radicand, degree=degree)

        if not (isinstance(radicand, IntegerLiteral) and isinstance(degree, IntegerLiteral)):
            return unchanged
        # Stopień < 1 i radicand < 2 pozostają nietknięte (brak sensownego rozkładu)
        if degree.value < 1 or radicand.value < 2:
            return unchanged
        if degree.value == 1:
            return IntegerLiteral(value=radicand.value)
        # 2**degree > radicand: żaden czynnik nie istnieje
        if radicand.value.bit_length() <= degree.value:
            return unchanged

        factor, remainder = extract_radical_factor(radicand.value, degree.value)
        if remainder == 1:
            return IntegerLiteral(value=factor)
        if factor > 1:
            return Product(
                left=IntegerLiteral(value=factor),
                right=Radical(radicand=IntegerLiteral(value=remainder), degree=degree),
            )
        return unchanged
