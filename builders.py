"""
builders.py: wygodne konstruktory drzew wyrażeń i DSL z jednym slotem wyniku.

Brak własnej logiki: każda funkcja tylko buduje odpowiedni węzeł z contracts.

Użycie:
    from builders import build, num, frac

    def block(m):
        m.expr = (m.num(3) + m.num(5)) * (m.num(7) - m.num(2))

    expr = build(block)
    half = frac(num(1), num(2))
"""
from __future__ import annotations

from decimal import Decimal
from typing import Callable, Optional, Union

from contracts import (
    ConstantE,
    ConstantPi,
    Cosecant,
    Cosine,
    Cotangent,
    DecimalLiteral,
    ExpressionNotDefinedError,
    ExprNode,
    Fraction,
    ImaginaryUnit,
    IntegerLiteral,
    Logarithm,
    Power,
    Product,
    Radical,
    Secant,
    Sine,
    Sum,
    Tangent,
    VariableRef,
)

E = ConstantE()
PI = ConstantPi()
I = ImaginaryUnit()  # noqa: E741


# ─────────────────────────── Liście ──────────────────────────────────────

def num(value: int) -> IntegerLiteral:
    return IntegerLiteral(value=value)


def dec(value: Union[Decimal, str, float]) -> DecimalLiteral:
    if isinstance(value, float):
        value = repr(value)
    return DecimalLiteral(value=Decimal(value))


def var(name: str) -> VariableRef:
    return VariableRef(name=name)


# ─────────────────────────── Funkcje ─────────────────────────────────────

def frac(numerator: ExprNode, denominator: ExprNode) -> Fraction:
    return Fraction(numerator=numerator, denominator=denominator)


def ln(argument: ExprNode) -> Logarithm:
    return Logarithm(argument=argument, base=E)


def log(base: ExprNode, argument: ExprNode) -> Logarithm:
    """Logarytm o podstawie `base` (kolejność argumentów: podstawa, argument)."""
    return Logarithm(argument=argument, base=base)


def sin(argument: ExprNode) -> Sine:
    return Sine(argument=argument)


def cos(argument: ExprNode) -> Cosine:
    return Cosine(argument=argument)


def tan(argument: ExprNode) -> Tangent:
    return Tangent(argument=argument)


def cot(argument: ExprNode) -> Cotangent:
    return Cotangent(argument=argument)


def sec(argument: ExprNode) -> Secant:
    return Secant(argument=argument)


def csc(argument: ExprNode) -> Cosecant:
    return Cosecant(argument=argument)


def root(radicand: ExprNode, degree: Optional[ExprNode] = None) -> Radical:
    return Radical(radicand=radicand, degree=degree if degree is not None else num(2))


def power(base: ExprNode, exponent: ExprNode) -> Power:
    return Power(base=base, exponent=exponent)


# ─────────────────────────── Operatory ───────────────────────────────────

def add(left: ExprNode, right: ExprNode) -> Sum:
    return Sum(left=left, right=right)


def subtract(left: ExprNode, right: ExprNode) -> Sum:
    return Sum(left=left, right=negate(right))


def multiply(left: ExprNode, right: ExprNode) -> Product:
    return Product(left=left, right=right)


def divide(numerator: ExprNode, denominator: ExprNode) -> Fraction:
    return frac(numerator, denominator)


def negate(node: ExprNode) -> Product:
    return Product(left=num(-1), right=node)


# ─────────────────────────── DSL ─────────────────────────────────────────

class MathBuilder:
    """
    Kontekst DSL: konstruktory jako metody + jeden slot `expr` na wynik.
    Przekazywany do bloku w build(); blok musi ustawić `expr`.
    """

    E = E
    PI = PI
    I = I  # noqa: E741

    def __init__(self) -> None:
        self.expr: Optional[ExprNode] = None

    @property
    def result(self) -> ExprNode:
        if self.expr is None:
            raise ExpressionNotDefinedError("No expression defined")
        return self.expr

    def num(self, value: int) -> IntegerLiteral:
        return num(value)

    def dec(self, value: Union[Decimal, str, float]) -> DecimalLiteral:
        return dec(value)

    def variable(self, name: str) -> VariableRef:
        return var(name)

    def frac(self, numerator: ExprNode, denominator: ExprNode) -> Fraction:
        return frac(numerator, denominator)

    def ln(self, argument: ExprNode) -> Logarithm:
        return ln(argument)

    def log(self, base: ExprNode, argument: ExprNode) -> Logarithm:
        return log(base, argument)

    def sin(self, argument: ExprNode) -> Sine:
        return sin(argument)

    def cos(self, argument: ExprNode) -> Cosine:
        return cos(argument)

    def tan(self, argument: ExprNode) -> Tangent:
        return tan(argument)

    def cot(self, argument: ExprNode) -> Cotangent:
        return cot(argument)

    def sec(self, argument: ExprNode) -> Secant:
        return sec(argument)

    def csc(self, argument: ExprNode) -> Cosecant:
        return csc(argument)

    def root(self, radicand: ExprNode, degree: Optional[ExprNode] = None) -> Radical:
        return root(radicand, degree)

    def pow(self, base: ExprNode, exponent: ExprNode) -> Power:
        return power(base, exponent)


def build(block: Callable[[MathBuilder], None]) -> ExprNode:
    """Uruchamia blok na świeżym MathBuilder i zwraca ustawione wyrażenie."""
    builder = MathBuilder()
    block(builder)
    return builder.result
