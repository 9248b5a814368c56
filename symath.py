#!/usr/bin/env python3
"""
symath.py: CLI narzędzie symath.

Działa całkowicie lokalnie. Wyrażenia przyjmowane są jako drzewa JSON
(pole "node_type" w każdym węźle); tekstowe wzory nie są parsowane.

Podkomendy:
    demo:     przykładowe wyrażenia: zapis, uproszczenie, wartość
    simplify: uprość drzewo i wypisz wynik
    format:   wypisz kanoniczny zapis drzewa
    evaluate: oblicz wartość drzewa (z --var nazwa=wartość)

Użycie:
    python symath.py demo
    python symath.py format --json '{"node_type": "sum", "left": {"node_type": "integer", "value": 2}, "right": {"node_type": "integer", "value": 3}}'
    python symath.py simplify --file expr.json --dump
    python symath.py evaluate --file expr.json --var x=4 --var y=0.5
"""
from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.table import Table


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = str(value)
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(_safe_terminal_text(key), _safe_terminal_text(value))
    _console().print(table)


def _format_value(value: Decimal | None) -> str:
    if value is None:
        return "brak wyniku"
    return format(value, "f")


def _read_tree(args: argparse.Namespace):
    from contracts import node_from_json

    if getattr(args, "file", None):
        try:
            raw = open(args.file, encoding="utf-8").read()
        except OSError as e:
            print(f"Błąd odczytu pliku: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        raw = getattr(args, "json", None) or sys.stdin.read().strip()
    if not raw:
        print("Błąd: podaj drzewo JSON przez --json, --file lub stdin", file=sys.stderr)
        sys.exit(1)
    try:
        return node_from_json(raw)
    except ValidationError as exc:
        print(f"Błąd: niepoprawne drzewo wyrażenia ({exc.error_count()} błędów)", file=sys.stderr)
        print(str(exc), file=sys.stderr)
        sys.exit(1)


def _parse_bindings(pairs: list[str]) -> dict[str, Decimal]:
    bindings: dict[str, Decimal] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        name = name.strip()
        if not sep or not name:
            print(f"Błąd: oczekiwano nazwa=wartość, otrzymano {pair!r}", file=sys.stderr)
            sys.exit(1)
        try:
            bindings[name] = Decimal(raw.strip())
        except InvalidOperation:
            print(f"Błąd: {raw!r} nie jest liczbą (zmienna {name})", file=sys.stderr)
            sys.exit(1)
    return bindings


def _engine():
    from config import Settings
    from expression import from_settings

    return from_settings(Settings())


def _demo_expressions() -> list[tuple[Any, dict[str, Decimal]]]:
    from builders import E, PI, build, cot, frac, ln, log, num, power, root, sin, var

    def _product_of_sums(m):
        m.expr = (m.num(3) + m.num(5)) * (m.num(7) - m.num(2))

    def _fraction_sum(m):
        m.expr = m.frac(m.num(1), m.num(2)) + m.frac(m.num(3), m.num(4))

    def _division_sum(m):
        m.expr = m.num(1) / m.num(2) + m.num(2) / m.num(10)

    return [
        (build(_product_of_sums), {}),
        (build(_fraction_sum), {}),
        (build(_division_sum), {}),
        (frac(num(12), num(18)), {}),
        (root(num(72)), {}),
        (root(num(54), num(3)), {}),
        (power(var("x"), num(2)) + num(1), {"x": Decimal(4)}),
        (sin(frac(PI, num(2))), {}),
        (log(num(2), num(8)), {}),
        (ln(power(E, num(3))), {}),
        (cot(num(0)), {}),
        (frac(num(5), num(0)), {}),
    ]


# -- podkomendy ------------------------------------------------------------

def _demo(args: argparse.Namespace) -> None:
    engine = _engine()
    table = Table(title="symath demo", box=box.ASCII)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Wyrażenie")
    table.add_column("Uproszczone")
    table.add_column("Zmienne")
    table.add_column("Wartość", justify="right")
    for i, (node, bindings) in enumerate(_demo_expressions(), 1):
        simplified = engine.simplifier.simplify(node)
        result = engine.evaluator.evaluate_detailed(node, bindings)
        value = _format_value(result.value) if result.ok else f"brak ({result.failure.value})"
        table.add_row(
            str(i),
            _safe_terminal_text(engine.formatter.format(node)),
            _safe_terminal_text(engine.formatter.format(simplified)),
            ", ".join(f"{k}={v}" for k, v in bindings.items()) or "-",
            value,
        )
    _console().print(table)


def _simplify(args: argparse.Namespace) -> None:
    from contracts import node_to_json

    engine = _engine()
    node = _read_tree(args)
    simplified = engine.simplifier.simplify(node)
    if args.dump:
        print(node_to_json(simplified, indent=2))
        return
    print(_safe_terminal_text(engine.formatter.format(simplified)))


def _format(args: argparse.Namespace) -> None:
    engine = _engine()
    print(_safe_terminal_text(engine.formatter.format(_read_tree(args))))


def _evaluate(args: argparse.Namespace) -> None:
    engine = _engine()
    node = _read_tree(args)
    bindings = _parse_bindings(args.var)
    result = engine.evaluator.evaluate_detailed(node, bindings)

    if args.verbose:
        _print_kv_table("Ewaluacja", [
            ("wyrażenie", engine.formatter.format(node)),
            ("zmienne", ", ".join(f"{k}={v}" for k, v in bindings.items()) or "-"),
            ("wynik", _format_value(result.value)),
            ("porażka", result.failure.value if result.failure else "-"),
        ])
    if not result.ok:
        print(f"Błąd ewaluacji: {result.failure.value}: {result.message}", file=sys.stderr)
        sys.exit(1)
    if not args.verbose:
        print(_format_value(result.value))


# -- main ------------------------------------------------------------------

def _add_tree_input(p: argparse.ArgumentParser) -> None:
    p.add_argument("--json", "-j", help="Drzewo wyrażenia jako JSON (lub stdin)")
    p.add_argument("--file", "-f", help="Ścieżka do pliku z drzewem JSON")


def main(argv: list[str] | None = None) -> None:
    from config import Settings

    parser = argparse.ArgumentParser(
        prog="symath",
        description="symath: upraszczanie, ewaluacja i zapis wyrażeń",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # demo
    sub.add_parser("demo", help="Pokaż przykładowe wyrażenia")

    # simplify
    p = sub.add_parser("simplify", help="Uprość drzewo wyrażenia")
    _add_tree_input(p)
    p.add_argument("--dump", action="store_true",
                   help="Wypisz uproszczone drzewo jako JSON")

    # format
    p = sub.add_parser("format", help="Wypisz kanoniczny zapis drzewa")
    _add_tree_input(p)

    # evaluate
    p = sub.add_parser("evaluate", help="Oblicz wartość drzewa")
    _add_tree_input(p)
    p.add_argument("--var", "-x", action="append", default=[], metavar="NAZWA=WARTOŚĆ",
                   help="Wartość zmiennej (można powtarzać)")
    p.add_argument("--verbose", "-v", action="store_true",
                   help="Wyświetl tabelę z wyrażeniem i wynikiem")

    args = parser.parse_args(argv)
    logging.basicConfig(level=Settings().log_level.upper())

    cmds = {
        "demo":     _demo,
        "simplify": _simplify,
        "format":   _format,
        "evaluate": _evaluate,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
