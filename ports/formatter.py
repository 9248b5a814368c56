"""
Port: Formatter
Odpowiedzialność: kanoniczny zapis tekstowy drzewa wyrażenia.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprNode


@runtime_checkable
class Formatter(Protocol):
    def format(self, node: ExprNode) -> str:
        """
        Renders a node tree in canonical notation, e.g. "2 * (3 + 4)".
        Composite children of fractions, products, powers and radicals are
        parenthesized; literals, variables and constants never are.
        Never raises.
        """
        ...
