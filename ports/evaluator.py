"""
Port: Evaluator
Odpowiedzialność: numeryczna ewaluacja drzewa wyrażenia z podstawieniem zmiennych.
"""
from decimal import Decimal
from typing import Mapping, Optional, Protocol, Union, runtime_checkable

from contracts import EvalResult, ExprNode

Number = Union[int, float, Decimal]


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(
        self,
        node: ExprNode,
        bindings: Optional[Mapping[str, Number]] = None,
    ) -> Optional[Decimal]:
        """
        Reduces a node tree to a single value rounded half-up to a fixed
        number of fractional digits.
        bindings: values for VariableRef nodes (e.g. {"x": 4}).
        Returns None when evaluation fails (unbound variable, division by
        zero, trig domain error, imaginary unit). Never raises for those.
        Non-finite results (log of a non-positive number) are returned as
        Decimal NaN / Infinity.
        """
        ...

    def evaluate_detailed(
        self,
        node: ExprNode,
        bindings: Optional[Mapping[str, Number]] = None,
    ) -> EvalResult:
        """
        Same as evaluate(), but reports the failure kind and message
        in the returned EvalResult instead of collapsing it to None.
        """
        ...
