"""
Router: POST /simplify

Upraszcza drzewo wyrażenia i zwraca je razem z kanonicznym zapisem.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from api.dependencies import get_formatter, get_simplifier
from api.schemas import SimplifyRequest, SimplifyResponse
from ports.formatter import Formatter
from ports.simplifier import Simplifier

router = APIRouter(prefix="/simplify", tags=["simplify"])


@router.post("", response_model=SimplifyResponse)
def simplify(
    body: SimplifyRequest,
    simplifier: Simplifier = Depends(get_simplifier),
    formatter: Formatter = Depends(get_formatter),
) -> SimplifyResponse:
    simplified = simplifier.simplify(body.expression)
    return SimplifyResponse(expression=simplified, rendered=formatter.format(simplified))
