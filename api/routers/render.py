"""
Router: POST /format

Zwraca kanoniczny zapis drzewa wyrażenia.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from api.dependencies import get_formatter
from api.schemas import FormatRequest, FormatResponse
from ports.formatter import Formatter

router = APIRouter(prefix="/format", tags=["format"])


@router.post("", response_model=FormatResponse)
def format_expression(
    body: FormatRequest,
    formatter: Formatter = Depends(get_formatter),
) -> FormatResponse:
    return FormatResponse(rendered=formatter.format(body.expression))
