from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    Number = 1
    Plus = 2
    Minus = 3
    Star = 4
    LParen = 5
    RParen = 6
    OutputRadix = 7


class Radix(IntEnum):
    Decimal = 10
    Hexadecimal = 16

    @property
    def prefix(self) -> str:
        return "d" if self == Radix.Decimal else "h"

    @property
    def digits(self) -> str:
        if self == Radix.Decimal:
            return "0123456789"
        return "0123456789abcdefABCDEF"

    @classmethod
    def from_prefix(cls, char: str) -> Optional["Radix"]:
        match char:
            case "d":
                return cls.Decimal
            case "h":
                return cls.Hexadecimal
        return None


PUNCTUATORS = {
    "+": TokenType.Plus,
    "-": TokenType.Minus,
    "*": TokenType.Star,
    "(": TokenType.LParen,
    ")": TokenType.RParen,
}


@dataclass(frozen=True)
class Token:
    kind: TokenType
    location: int
    expression: str
    value: Optional[int] = None
    radix: Optional[Radix] = None


def new_number(value: int, radix: Radix, start: int, lexeme: str) -> Token:
    return Token(TokenType.Number, start, lexeme, value, radix)


def new_punctuator(char: str, start: int) -> Token:
    return Token(PUNCTUATORS[char], start, char)


def new_output_radix(radix: Radix, start: int) -> Token:
    return Token(TokenType.OutputRadix, start, radix.prefix, None, radix)


def equal(token: Token, kind: TokenType) -> bool:
    return token.kind == kind
