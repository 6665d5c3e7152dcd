import readline
from typing import Optional

import click

from radixcalc.errors import EvalError
from radixcalc.evaluate import evaluate
from radixcalc.helper import setup_logging
from radixcalc.utils import check_bits

DEFAULT_PROMPT = "Enter an expression (or 'q' to quit): "
QUIT_COMMANDS = {"q", "quit"}
CLEAR_COMMANDS = {"c", "clear"}


def validate_bits(ctx: click.Context, param: click.Parameter, value: Optional[int]) -> Optional[int]:
    try:
        return check_bits(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def report(error: EvalError) -> None:
    click.echo(f"Error: {error}", err=True)
    click.echo(error.diagnostic(), err=True, nl=False)


def forget_history(line: str) -> None:
    """Drop ``line`` from the readline history if input() just recorded it."""
    length = readline.get_current_history_length()
    if length and readline.get_history_item(length) == line:
        readline.remove_history_item(length - 1)


def run_shell(prompt: str, bits: Optional[int]) -> None:
    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            click.echo()
            return
        command = line.strip()
        if not command or command in QUIT_COMMANDS or command in CLEAR_COMMANDS:
            # only expressions are kept in history
            forget_history(line)
        if not command:
            continue
        if command in QUIT_COMMANDS:
            return
        if command in CLEAR_COMMANDS:
            click.clear()
            continue
        try:
            click.echo(evaluate(line, bits))
        except EvalError as e:
            report(e)


@click.command()
@click.option(
    "--bits",
    type=int,
    default=None,
    envvar="RADIXCALC_BITS",
    callback=validate_bits,
    help="Signed integer width used for overflow checks (8, 16, 32 or 64).",
)
@click.option("--prompt", default=DEFAULT_PROMPT, envvar="RADIXCALC_PROMPT", show_default=True)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(bits: Optional[int], prompt: str, verbose: bool):
    """Interactive calculator for d(ecimal) and h(exadecimal) literals.

    End each line with d or h to pick the output radix, e.g. "d10 + hA d".
    """
    setup_logging(verbose)
    run_shell(prompt, bits)


if __name__ == "__main__":
    main()
