"""
contracts.py: jedyne źródło prawdy dla typów danych symath.
Wszystkie moduły importują węzły wyrażeń, wyniki ewaluacji i błędy WYŁĄCZNIE stąd.

Węzły są zamrożonymi modelami pydantic: porównywanie strukturalne, hashowalne,
serializowalne do JSON przez dyskryminator `node_type`.
"""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Baza węzłów ─────────────────────────────────

class _Node(BaseModel):
    """Wspólna baza: niemutowalność + operatory budujące drzewa."""

    model_config = ConfigDict(frozen=True)

    def __add__(self, other: Any) -> Any:
        rhs = _operand(other)
        if rhs is None:
            return NotImplemented
        return Sum(left=self, right=rhs)

    def __radd__(self, other: Any) -> Any:
        lhs = _operand(other)
        if lhs is None:
            return NotImplemented
        return Sum(left=lhs, right=self)

    def __sub__(self, other: Any) -> Any:
        rhs = _operand(other)
        if rhs is None:
            return NotImplemented
        return Sum(left=self, right=Product(left=IntegerLiteral(value=-1), right=rhs))

    def __rsub__(self, other: Any) -> Any:
        lhs = _operand(other)
        if lhs is None:
            return NotImplemented
        return Sum(left=lhs, right=Product(left=IntegerLiteral(value=-1), right=self))

    def __mul__(self, other: Any) -> Any:
        rhs = _operand(other)
        if rhs is None:
            return NotImplemented
        return Product(left=self, right=rhs)

    def __rmul__(self, other: Any) -> Any:
        lhs = _operand(other)
        if lhs is None:
            return NotImplemented
        return Product(left=lhs, right=self)

    def __truediv__(self, other: Any) -> Any:
        rhs = _operand(other)
        if rhs is None:
            return NotImplemented
        return Fraction(numerator=self, denominator=rhs)

    def __rtruediv__(self, other: Any) -> Any:
        lhs = _operand(other)
        if lhs is None:
            return NotImplemented
        return Fraction(numerator=lhs, denominator=self)

    def __pow__(self, other: Any) -> Any:
        rhs = _operand(other)
        if rhs is None:
            return NotImplemented
        return Power(base=self, exponent=rhs)

    def __rpow__(self, other: Any) -> Any:
        lhs = _operand(other)
        if lhs is None:
            return NotImplemented
        return Power(base=lhs, exponent=self)

    def __neg__(self) -> Product:
        return Product(left=IntegerLiteral(value=-1), right=self)


def _operand(value: Any) -> Optional[ExprNode]:
    """Zamienia operand operatora na węzeł; None = typ nieobsługiwany."""
    if isinstance(value, _Node):
        return value  # type: ignore[return-value]
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return IntegerLiteral(value=value)
    if isinstance(value, Decimal):
        return DecimalLiteral(value=value)
    if isinstance(value, float):
        # repr daje najkrótszy zapis, np. 0.1 zamiast 0.1000000000000000055…
        return DecimalLiteral(value=Decimal(repr(value)))
    return None


# ─────────────────────────── Liście ──────────────────────────────────────

class IntegerLiteral(_Node):
    node_type: Literal["integer"] = "integer"
    value: int


class DecimalLiteral(_Node):
    node_type: Literal["decimal"] = "decimal"
    value: Decimal  # skończona; NaN/Infinity odrzucane przez walidację


class VariableRef(_Node):
    node_type: Literal["variable"] = "variable"
    name: str = Field(min_length=1)


class ConstantE(_Node):
    node_type: Literal["e"] = "e"


class ConstantPi(_Node):
    node_type: Literal["pi"] = "pi"


class ImaginaryUnit(_Node):
    node_type: Literal["imaginary"] = "imaginary"


# ─────────────────────────── Węzły złożone ───────────────────────────────

class Fraction(_Node):
    node_type: Literal["fraction"] = "fraction"
    numerator: "ExprNode"
    denominator: "ExprNode"


class Logarithm(_Node):
    node_type: Literal["log"] = "log"
    argument: "ExprNode"
    base: "ExprNode" = Field(default_factory=ConstantE)


class Sum(_Node):
    node_type: Literal["sum"] = "sum"
    left: "ExprNode"
    right: "ExprNode"


class Product(_Node):
    node_type: Literal["product"] = "product"
    left: "ExprNode"
    right: "ExprNode"


class Power(_Node):
    node_type: Literal["power"] = "power"
    base: "ExprNode"
    exponent: "ExprNode"


class Radical(_Node):
    node_type: Literal["radical"] = "radical"
    radicand: "ExprNode"
    degree: "ExprNode" = Field(default_factory=lambda: IntegerLiteral(value=2))


class Sine(_Node):
    node_type: Literal["sin"] = "sin"
    argument: "ExprNode"


class Cosine(_Node):
    node_type: Literal["cos"] = "cos"
    argument: "ExprNode"


class Tangent(_Node):
    node_type: Literal["tan"] = "tan"
    argument: "ExprNode"


class Cotangent(_Node):
    node_type: Literal["cot"] = "cot"
    argument: "ExprNode"


class Secant(_Node):
    node_type: Literal["sec"] = "sec"
    argument: "ExprNode"


class Cosecant(_Node):
    node_type: Literal["csc"] = "csc"
    argument: "ExprNode"


ExprNode = Annotated[
    Union[
        IntegerLiteral, DecimalLiteral, VariableRef,
        ConstantE, ConstantPi, ImaginaryUnit,
        Fraction, Logarithm, Sum, Product, Power, Radical,
        Sine, Cosine, Tangent, Cotangent, Secant, Cosecant,
    ],
    Field(discriminator="node_type"),
]

for _model in (
    Fraction, Logarithm, Sum, Product, Power, Radical,
    Sine, Cosine, Tangent, Cotangent, Secant, Cosecant,
):
    _model.model_rebuild()

# Węzły renderowane bez nawiasów (formatter) i traktowane jako atomy.
ATOMIC_NODES = (IntegerLiteral, DecimalLiteral, VariableRef, ConstantE, ConstantPi, ImaginaryUnit)
TRIG_NODES = (Sine, Cosine, Tangent, Cotangent, Secant, Cosecant)

# Wczytywanie drzew z JSON (CLI, API): dane strukturalne, nie parsowanie wzorów.
EXPR_NODE_ADAPTER: TypeAdapter[ExprNode] = TypeAdapter(ExprNode)


def node_from_json(data: str | bytes) -> ExprNode:
    return EXPR_NODE_ADAPTER.validate_json(data)


def node_to_json(node: ExprNode, indent: int | None = None) -> str:
    return EXPR_NODE_ADAPTER.dump_json(node, indent=indent).decode("utf-8")


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalFailure(str, Enum):
    MISSING_VARIABLE = "MissingVariable"
    DIVISION_BY_ZERO = "DivisionByZero"
    DOMAIN_ERROR = "DomainError"
    UNSUPPORTED_OPERATION = "UnsupportedOperation"


class EvalResult(BaseModel):
    """Kanał diagnostyczny ewaluacji: wartość albo rodzaj porażki."""

    # NaN/Infinity są dozwolone: logarytm/potęga poza dziedziną propagują je dalej
    value: Optional[Annotated[Decimal, Field(allow_inf_nan=True)]] = None
    failure: Optional[EvalFailure] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


# ─────────────────────────── Błędy ───────────────────────────────────────

class EvaluationError(Exception):
    """Baza porażek ewaluacji; publiczne evaluate() zamienia je na None."""

    kind: EvalFailure

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingVariableError(EvaluationError):
    kind = EvalFailure.MISSING_VARIABLE

    def __init__(self, name: str) -> None:
        super().__init__(f"No value bound for variable {name!r}")
        self.name = name


class DivisionByZeroError(EvaluationError):
    kind = EvalFailure.DIVISION_BY_ZERO


class DomainError(EvaluationError):
    kind = EvalFailure.DOMAIN_ERROR


class UnsupportedOperationError(EvaluationError):
    kind = EvalFailure.UNSUPPORTED_OPERATION


class ExpressionNotDefinedError(ValueError):
    """Builder zakończył blok bez ustawienia wyrażenia."""
