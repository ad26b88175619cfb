"""Command line interface: evaluate complex functions and run the verification checks."""

import json
import logging
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from complexplane.core.domain.complex_number import Complex
from complexplane.core.domain.parsing import ParseError
from complexplane.core.math.numerical_safeguards import EPS_COMPLEX_COMPARE_ABS
from complexplane.transcendental import (
    cos,
    cosh,
    cot,
    coth,
    csc,
    csch,
    exp,
    ln,
    log_base,
    power,
    sec,
    sech,
    sin,
    sinh,
    tan,
    tanh,
)
from complexplane.verification import DEFAULT_CHECKS, VerificationConfig, run_checks

console = Console()

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
    help="Complex-number calculator with branch-aware logarithms and powers.",
)

UNARY_FUNCTIONS: dict[str, Callable[[Complex], Complex]] = {
    "exp": exp,
    "sin": sin,
    "cos": cos,
    "tan": tan,
    "sec": sec,
    "csc": csc,
    "cot": cot,
    "sinh": sinh,
    "cosh": cosh,
    "tanh": tanh,
    "sech": sech,
    "csch": csch,
    "coth": coth,
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _parse_complex(text: str) -> Complex:
    try:
        return Complex.parse(text)
    except ParseError as e:
        raise typer.BadParameter(str(e))


def _parse_operand(text: str) -> Complex | float:
    """Text ending in 'i' is a complex literal, anything else a real number (inf included)."""
    if text.rstrip().endswith("i"):
        return _parse_complex(text)
    try:
        return float(text)
    except ValueError:
        raise typer.BadParameter(f"{text!r} is neither a real nor a complex number")


# =============================================================================
# Commands
# =============================================================================


@app.command()
def evaluate(
    function: str = typer.Argument(..., help=f"One of: {', '.join(UNARY_FUNCTIONS)}"),
    value: str = typer.Argument(..., help="Complex argument, e.g. '1 + 2i'"),
):
    """Evaluate a single-valued function at a complex argument."""
    func = UNARY_FUNCTIONS.get(function.lower())
    if func is None:
        raise typer.BadParameter(f"Unknown function {function!r}", param_hint="FUNCTION")

    console.print(func(_parse_complex(value)).format())


@app.command()
def log(
    value: str = typer.Argument(..., help="Complex argument, e.g. '-1 + 0i'"),
    base: Optional[float] = typer.Option(None, "--base", "-b", help="Logarithm base (default: e)"),
    branch: int = typer.Option(0, "--branch", "-n", help="Branch index N"),
):
    """Logarithm of a complex number on a chosen branch."""
    z = _parse_complex(value)
    result = ln(z, branch) if base is None else log_base(z, base, branch)
    console.print(result.format())


@app.command("pow")
def pow_command(
    base: str = typer.Argument(..., help="Real or complex base"),
    exponent: str = typer.Argument(..., help="Real or complex exponent"),
    branch: int = typer.Option(0, "--branch", "-n", help="Branch index N"),
):
    """Raise a real or complex base to a real or complex exponent."""
    console.print(power(_parse_operand(base), _parse_operand(exponent), branch).format())


@app.command()
def verify(
    tolerance: float = typer.Option(
        EPS_COMPLEX_COMPARE_ABS, "--tolerance", "-t", help="Absolute comparison tolerance"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every check"),
):
    """Run the built-in example computations and report failures."""
    _configure_logging(verbose)

    try:
        config = VerificationConfig(tolerance=tolerance)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--tolerance")

    report = run_checks(DEFAULT_CHECKS, config)

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
    else:
        table = Table(title=f"Verification (tolerance {report.tolerance:g})")
        table.add_column("Check")
        table.add_column("Result")
        table.add_column("Returned")
        for result in report.results:
            status = "[green]passed[/green]" if result.passed else "[red]failed[/red]"
            table.add_row(result.description, status, str(result.actual))
        console.print(table)
        console.print(f"Failed: {report.failed}")

    if not report.all_passed:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
