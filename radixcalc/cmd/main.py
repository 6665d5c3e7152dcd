from typing import List, Optional

import typer

from radixcalc.errors import EvalError
from radixcalc.evaluate import evaluate
from radixcalc.helper import setup_logging
from radixcalc.utils import check_bits

app = typer.Typer()


def validate_bits(value: Optional[int]) -> Optional[int]:
    try:
        return check_bits(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expressions: List[str],
    bits: Optional[int] = typer.Option(
        None, envvar="RADIXCALC_BITS", callback=validate_bits
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    setup_logging(verbose)
    failed = False
    for expression in expressions:
        try:
            typer.echo(evaluate(expression, bits))
        except EvalError as e:
            typer.echo(f"Error: {e}", err=True)
            typer.echo(e.diagnostic(), err=True, nl=False)
            failed = True
    if failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
