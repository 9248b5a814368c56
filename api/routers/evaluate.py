"""
Router: POST /evaluate

Oblicza wartość drzewa z podanymi zmiennymi. Porażka ewaluacji nie jest
błędem HTTP: odpowiedź 200 z result.value = null i rodzajem porażki.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_evaluator, get_formatter
from api.schemas import EvaluateRequest, EvaluateResponse
from ports.evaluator import Evaluator
from ports.formatter import Formatter

logger = logging.getLogger("symath.api.evaluate")

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse)
def evaluate(
    body: EvaluateRequest,
    evaluator: Evaluator = Depends(get_evaluator),
    formatter: Formatter = Depends(get_formatter),
) -> EvaluateResponse:
    rendered = formatter.format(body.expression)
    result = evaluator.evaluate_detailed(body.expression, body.bindings)
    if not result.ok:
        logger.info("No value for %s (%s)", rendered, result.failure.value)
    return EvaluateResponse(rendered=rendered, result=result)
