"""
Port: Simplifier
Odpowiedzialność: normalizacja drzewa wyrażenia (dokładna arytmetyka wymierna, pierwiastki).
"""
from typing import Protocol, runtime_checkable

from contracts import ExprNode


@runtime_checkable
class Simplifier(Protocol):
    def simplify(self, node: ExprNode) -> ExprNode:
        """
        Rewrites a node tree into an equivalent, reduced tree (bottom-up).
        Folds integer sums/products, reduces integer fractions and extracts
        integer factors from integer radicals. Other nodes are only rebuilt
        from their simplified children.
        Never raises; never mutates the input tree.
        """
        ...
