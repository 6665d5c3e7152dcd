import logging


def error_message(expression: str, location: int, message: str) -> str:
    messages = [f"{expression}\n", f"{' ' * location}^ {message}\n"]
    return "".join(messages)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
