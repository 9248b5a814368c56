"""
expression.py: fasada nad trzema operacjami rdzenia (simplify, evaluate, format).

Adaptery są bezstanowe, więc domyślny zestaw jest współdzielony przez funkcje
modułu i przez Expression. from_settings() buduje zestaw z konfiguracji.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping, Optional

from adapters.evaluator.real_evaluator import RealEvaluator
from adapters.formatter.notation_formatter import NotationFormatter
from adapters.simplifier.rational_simplifier import RationalSimplifier
from config import Settings
from contracts import EvalResult, ExprNode
from ports.evaluator import Evaluator, Number
from ports.formatter import Formatter
from ports.simplifier import Simplifier


@dataclass(frozen=True)
class Engine:
    simplifier: Simplifier = field(default_factory=RationalSimplifier)
    evaluator: Evaluator = field(default_factory=RealEvaluator)
    formatter: Formatter = field(default_factory=NotationFormatter)


def from_settings(settings: Settings) -> Engine:
    return Engine(
        simplifier=RationalSimplifier(),
        evaluator=RealEvaluator(scale=settings.eval_scale, precision=settings.eval_precision),
        formatter=NotationFormatter(decimal_places=settings.display_places),
    )


_DEFAULT_ENGINE = Engine()


def simplify(node: ExprNode) -> ExprNode:
    return _DEFAULT_ENGINE.simplifier.simplify(node)


def evaluate(node: ExprNode, bindings: Optional[Mapping[str, Number]] = None) -> Optional[Decimal]:
    return _DEFAULT_ENGINE.evaluator.evaluate(node, bindings)


def evaluate_detailed(node: ExprNode, bindings: Optional[Mapping[str, Number]] = None) -> EvalResult:
    return _DEFAULT_ENGINE.evaluator.evaluate_detailed(node, bindings)


def format_expression(node: ExprNode) -> str:
    return _DEFAULT_ENGINE.formatter.format(node)


class Expression:
    """Opakowanie węzła: Expression(node).simplify(), .evaluate({...}), str(...)."""

    def __init__(self, node: ExprNode, engine: Optional[Engine] = None) -> None:
        self._node = node
        self._engine = engine or _DEFAULT_ENGINE

    @property
    def node(self) -> ExprNode:
        return self._node

    def simplify(self) -> Expression:
        return Expression(self._engine.simplifier.simplify(self._node), self._engine)

    def evaluate(self, bindings: Optional[Mapping[str, Number]] = None) -> Optional[Decimal]:
        return self._engine.evaluator.evaluate(self._node, bindings)

    def evaluate_detailed(self, bindings: Optional[Mapping[str, Number]] = None) -> EvalResult:
        return self._engine.evaluator.evaluate_detailed(self._node, bindings)

    def __str__(self) -> str:
        return self._engine.formatter.format(self._node)

    def __repr__(self) -> str:
        return f"Expression({self})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Expression):
            return self._node == other._node
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._node)
