import logging

from radixcalc.errors import (
    MissingDigits,
    MissingOutputRadix,
    Overflow,
    UnexpectedChar,
)
from radixcalc.token import (
    PUNCTUATORS,
    Radix,
    Token,
    new_number,
    new_output_radix,
    new_punctuator,
)
from radixcalc.utils import Peekable

logger = logging.getLogger(__name__)


def read_output_radix(expression: str) -> Token:
    # the marker is always the last non-whitespace character of the line
    stripped = expression.rstrip()
    if not stripped:
        raise MissingOutputRadix(expression, len(expression))
    location = len(stripped) - 1
    radix = Radix.from_prefix(stripped[-1])
    if radix is None:
        raise MissingOutputRadix(expression, location, stripped[-1])
    return new_output_radix(radix, location)


def read_number(expression: str, index: int, limit: int, radix: Radix) -> tuple[Token, int]:
    end = index + 1
    while end < limit and expression[end] in radix.digits:
        end += 1
    if end == index + 1:
        raise MissingDigits(expression, index, expression[index])
    lexeme = expression[index:end]
    try:
        value = int(lexeme[1:], radix)
    except ValueError:
        # interpreter limit on int/str conversion digits
        raise Overflow(
            expression, index, lexeme[:16], "literal has too many digits"
        ) from None
    return new_number(value, radix, index, lexeme), end


def tokenize(expression: str) -> Peekable[Token]:
    marker = read_output_radix(expression)
    index = 0
    tokens = []
    while index < marker.location:
        char = expression[index]
        if char.isspace():
            index += 1
            continue
        if (radix := Radix.from_prefix(char)) is not None:
            token, index = read_number(expression, index, marker.location, radix)
            tokens.append(token)
            continue
        if char in PUNCTUATORS:
            tokens.append(new_punctuator(char, index))
            index += 1
            continue
        raise UnexpectedChar(expression, index, char)
    tokens.append(marker)
    logger.debug("tokens for %r: %s", expression, [token.expression for token in tokens])
    return Peekable(tokens)
