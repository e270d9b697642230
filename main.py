#!/usr/bin/env python3
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional
import typer
from errors import SolverError
from polynomial_parser import parse_equation
from rational import Rational
from solver import solve

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = typer.Typer(add_completion=False)


def format_roots(var: str, roots: List[Rational]) -> str:
    return f"=> {var} = {{{', '.join(str(r) for r in roots)}}}"


def read_equations(path: Path) -> List[str]:
    """One equation per line; blank lines and '#' comments are skipped."""
    lines = []
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if line and not line.startswith("#"):
            lines.append(line)
    return lines


def print_solutions(equation: str, var: Optional[str] = None) -> bool:
    """Solve one equation and print the result. Returns False if it failed."""
    typer.echo(equation)
    try:
        poly, found_var = parse_equation(equation)
        # scaling by a constant keeps the roots and lets the rational root search run
        roots = solve(poly.clear_denominators())
    except SolverError as exc:
        typer.echo(f"error: {exc.kind}: {exc}", err=True)
        typer.echo("")
        return False
    typer.echo(format_roots(var or found_var, roots))
    typer.echo("")
    return True


@app.command()
def main(
    equations: Optional[List[str]] = typer.Argument(None, help="Equations such as 'x^2 + 5x + 6 = 0'."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Read equations from a file, one per line."),
    var: Optional[str] = typer.Option(None, "--var", help="Variable name used when printing roots."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log solver steps."),
) -> None:
    """Find the exact rational roots of polynomial equations."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)

    todo = list(equations or [])
    if file is not None:
        todo.extend(read_equations(file))
    if not todo:
        raise typer.BadParameter("give at least one equation or --file")

    failures = 0
    for equation in todo:
        if not print_solutions(equation, var):
            failures += 1
    if failures:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
