"""
dependencies.py: FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from ports.evaluator import Evaluator
from ports.formatter import Formatter
from ports.simplifier import Simplifier


def get_simplifier(request: Request) -> Simplifier:
    return request.app.state.engine.simplifier


def get_evaluator(request: Request) -> Evaluator:
    return request.app.state.engine.evaluator


def get_formatter(request: Request) -> Formatter:
    return request.app.state.engine.formatter
