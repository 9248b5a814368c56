"""
Adapter: NotationFormatter
Implementuje port Formatter: kanoniczny zapis matematyczny drzewa.

Jedyny mechanizm priorytetów to `_wrap`: atomy (literały, zmienne, stałe) bez
nawiasów, każdy węzeł złożony w nawiasach. Sum nigdy nie owija swoich dzieci.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

from contracts import (
    ATOMIC_NODES,
    ConstantE,
    ConstantPi,
    Cosecant,
    Cosine,
    Cotangent,
    DecimalLiteral,
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

_TRIG_NAMES = {
    Sine: "sin",
    Cosine: "cos",
    Tangent: "tan",
    Cotangent: "cot",
    Secant: "sec",
    Cosecant: "csc",
}


class NotationFormatter:
    """Zapis tekstowy z minimalnym nawiasowaniem."""

    def __init__(self, decimal_places: int = 4) -> None:
        self._places = decimal_places
        self._quantum = Decimal(1).scaleb(-decimal_places)

    # -- Formatter protocol ------------------------------------------------

    def format(self, node: ExprNode) -> str:
        if isinstance(node, IntegerLiteral):
            # format() omija limit cyfr konwersji int -> str
            return format(Decimal(node.value), "f")
        if isinstance(node, DecimalLiteral):
            return self._format_decimal(node.value)
        if isinstance(node, VariableRef):
            return node.name
        if isinstance(node, ConstantE):
            return "e"
        if isinstance(node, ConstantPi):
            return "π"
        if isinstance(node, ImaginaryUnit):
            return "i"
        if isinstance(node, Fraction):
            return f"{self._wrap(node.numerator)}/{self._wrap(node.denominator)}"
        if isinstance(node, Logarithm):
            return self._format_log(node)
        if isinstance(node, Sum):
            return f"{self.format(node.left)} + {self.format(node.right)}"
        if isinstance(node, Product):
            return f"{self._wrap(node.left)} * {self._wrap(node.right)}"
        if isinstance(node, Power):
            return f"{self._wrap(node.base)}^{self._wrap(node.exponent)}"
        if isinstance(node, Radical):
            if node.degree == IntegerLiteral(value=2):
                return f"√{self._wrap(node.radicand)}"
            return f"{self.format(node.degree)}√{self._wrap(node.radicand)}"
        name = _TRIG_NAMES.get(type(node))
        if name is not None:
            return f"{name}({self.format(node.argument)})"  # type: ignore[union-attr]
        raise TypeError(f"Nieznany typ węzła: {type(node)}")

    # -- Prywatne ----------------------------------------------------------

    def _wrap(self, node: ExprNode) -> str:
        if isinstance(node, ATOMIC_NODES):
            return self.format(node)
        return f"({self.format(node)})"

    def _format_log(self, node: Logarithm) -> str:
        arg = self.format(node.argument)
        if isinstance(node.base, ConstantE):
            return f"ln({arg})"
        base = self.format(node.base)
        if isinstance(node.base, (IntegerLiteral, DecimalLiteral, VariableRef)):
            return f"log_{base}({arg})"
        # Złożona podstawa w klamrach
        return f"log_{{{base}}}({arg})"

    def _format_decimal(self, value: Decimal) -> str:
        if value == value.to_integral_value():
            text = format(value.to_integral_value(), "f")
            return "0" if text == "-0" else text
        ctx = Context(prec=max(28, value.adjusted() + self._places + 2), rounding=ROUND_HALF_UP)
        text = format(value.quantize(self._quantum, context=ctx), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        # -0.00001 → "-0" po zaokrągleniu
        return "0" if text == "-0" else text
