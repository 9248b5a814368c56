"""
Adapter: RealEvaluator
Implementuje port Evaluator: rekurencyjne przejście drzewa z arytmetyką Decimal.

Obliczenia idą w lokalnym kontekście Decimal (precyzja `precision`, bez pułapek),
więc wartości nieskończone i NaN (np. ln liczby ujemnej) propagują się bez wyjątków.
Porażki typowane (brak zmiennej, dzielenie przez zero, dziedzina cot/sec/csc,
jednostka urojona) zgłaszane są wyjątkami EvaluationError; evaluate() zamienia je
na None, evaluate_detailed() na EvalResult z rodzajem porażki.

Wynik zaokrąglany jest RAZ, na końcu, do `scale` cyfr po przecinku (ROUND_HALF_UP).
"""
from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Callable, Mapping, Optional

from contracts import (
    ConstantE,
    ConstantPi,
    Cosecant,
    Cosine,
    Cotangent,
    DecimalLiteral,
    DivisionByZeroError,
    DomainError,
    EvalResult,
    EvaluationError,
    ExprNode,
    Fraction,
    ImaginaryUnit,
    IntegerLiteral,
    Logarithm,
    MissingVariableError,
    Power,
    Product,
    Radical,
    Secant,
    Sine,
    Sum,
    Tangent,
    UnsupportedOperationError,
    VariableRef,
)
from ports.evaluator import Number

logger = logging.getLogger("symath.evaluator")

DEFAULT_SCALE = 10
DEFAULT_PRECISION = 50

_E = Decimal(math.e)
_PI = Decimal(math.pi)


def to_decimal(value: Number) -> Decimal:
    """Wartość wiązania → Decimal; float przez repr (0.1 → Decimal('0.1'))."""
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid numeric binding")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    raise TypeError(f"Unsupported binding value type: {type(value).__name__}")


def _real(fn: Callable[[float], float], x: Decimal) -> float:
    """Funkcja rzeczywista na float; argument nieskończony → nan."""
    xf = float(x)
    if not math.isfinite(xf):
        return math.nan
    return fn(xf)


def _from_float(value: float) -> Decimal:
    return Decimal(repr(value))


class RealEvaluator:
    """Ewaluator rzeczywisty z zaokrągleniem do stałej skali."""

    def __init__(self, scale: int = DEFAULT_SCALE, precision: int = DEFAULT_PRECISION) -> None:
        self._scale = scale
        self._precision = precision
        self._quantum = Decimal(1).scaleb(-scale)

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(
        self,
        node: ExprNode,
        bindings: Optional[Mapping[str, Number]] = None,
    ) -> Optional[Decimal]:
        return self.evaluate_detailed(node, bindings).value

    def evaluate_detailed(
        self,
        node: ExprNode,
        bindings: Optional[Mapping[str, Number]] = None,
    ) -> EvalResult:
        env = {name: to_decimal(v) for name, v in (bindings or {}).items()}
        ctx = Context(prec=self._precision, rounding=ROUND_HALF_UP, traps=[])
        try:
            with localcontext(ctx):
                raw = self._eval(node, env)
        except EvaluationError as exc:
            logger.debug("Evaluation failed (%s): %s", exc.kind.value, exc.message)
            return EvalResult(failure=exc.kind, message=exc.message)
        return EvalResult(value=self._round(raw))

    # -- Prywatne ----------------------------------------------------------

    def _round(self, value: Decimal) -> Decimal:
        if not value.is_finite():
            return value
        # Precyzja musi pomieścić wszystkie cyfry całkowite + skalę
        digits = max(self._precision, value.adjusted() + self._scale + 2)
        rounded = value.quantize(self._quantum, context=Context(prec=digits, rounding=ROUND_HALF_UP))
        # -0E-10 → 0E-10
        return rounded.copy_abs() if rounded.is_zero() else rounded

    def _eval(self, node: ExprNode, env: dict[str, Decimal]) -> Decimal:
        if isinstance(node, IntegerLiteral):
            return Decimal(node.value)

        if isinstance(node, DecimalLiteral):
            return node.value

        if isinstance(node, VariableRef):
            if node.name not in env:
                raise MissingVariableError(node.name)
            return env[node.name]

        if isinstance(node, ConstantE):
            return _E

        if isinstance(node, ConstantPi):
            return _PI

        if isinstance(node, ImaginaryUnit):
            raise UnsupportedOperationError("Complex arithmetic is not supported")

        if isinstance(node, Fraction):
            num = self._eval(node.numerator, env)
            den = self._eval(node.denominator, env)
            if den == 0:
                raise DivisionByZeroError("Division by zero")
            return num / den

        if isinstance(node, Sum):
            return self._eval(node.left, env) + self._eval(node.right, env)

        if isinstance(node, Product):
            return self._eval(node.left, env) * self._eval(node.right, env)

        if isinstance(node, Power):
            return self._power(self._eval(node.base, env), self._eval(node.exponent, env))

        if isinstance(node, Radical):
            radicand = self._eval(node.radicand, env)
            degree = self._eval(node.degree, env)
            return radicand ** (Decimal(1) / degree)

        if isinstance(node, Logarithm):
            argument = self._eval(node.argument, env)
            base = self._eval(node.base, env)
            return argument.ln() / base.ln()

        if isinstance(node, Sine):
            return _from_float(_real(math.sin, self._eval(node.argument, env)))

        if isinstance(node, Cosine):
            return _from_float(_real(math.cos, self._eval(node.argument, env)))

        if isinstance(node, Tangent):
            return _from_float(_real(math.tan, self._eval(node.argument, env)))

        if isinstance(node, Cotangent):
            return self._reciprocal(math.tan, "cot", self._eval(node.argument, env))

        if isinstance(node, Secant):
            return self._reciprocal(math.cos, "sec", self._eval(node.argument, env))

        if isinstance(node, Cosecant):
            return self._reciprocal(math.sin, "csc", self._eval(node.argument, env))

        raise TypeError(f"Nieznany typ węzła: {type(node)}")

    @staticmethod
    def _power(base: Decimal, exponent: Decimal) -> Decimal:
        if exponent.is_finite() and exponent == exponent.to_integral_value():
            n = int(exponent)
            if n == 0:
                return Decimal(1)
            result = base ** abs(n)
            return result if n > 0 else Decimal(1) / result
        return base ** exponent

    @staticmethod
    def _reciprocal(fn: Callable[[float], float], name: str, x: Decimal) -> Decimal:
        value = _real(fn, x)
        if value == 0.0:
            raise DomainError(f"{name} is undefined where {fn.__name__} is zero")
        return _from_float(1.0 / value)
