"""
schemas.py: Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from contracts import EvalResult, ExprNode


# ─────────────────────────── /simplify ───────────────────────────

class SimplifyRequest(BaseModel):
    expression: ExprNode


class SimplifyResponse(BaseModel):
    expression: ExprNode   # drzewo po uproszczeniu
    rendered: str          # jego kanoniczny zapis


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: ExprNode
    bindings: dict[str, Decimal] = Field(default_factory=dict)


class EvaluateResponse(BaseModel):
    rendered: str
    result: EvalResult


# ─────────────────────────── /format ─────────────────────────────

class FormatRequest(BaseModel):
    expression: ExprNode


class FormatResponse(BaseModel):
    rendered: str


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
