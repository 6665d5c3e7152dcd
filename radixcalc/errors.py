from radixcalc.helper import error_message


class EvalError(Exception):
    """Base class for every failure of a single evaluation.

    ``expression`` is the source line, ``location`` the 0-based column of the
    offending character or token and ``lexeme`` its text.
    """

    message = "invalid expression"

    def __init__(self, expression: str, location: int, lexeme: str = "", message: str = ""):
        self.expression = expression
        self.location = location
        self.lexeme = lexeme
        if message:
            self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.lexeme:
            return f"{self.message} at column {self.location}: {self.lexeme!r}"
        return f"{self.message} at column {self.location}"

    def diagnostic(self) -> str:
        return error_message(self.expression, self.location, self.message)


class LexError(EvalError):
    pass


class UnexpectedChar(LexError):
    message = "invalid character"


class MissingDigits(LexError):
    message = "expected digits after radix prefix"


class MissingOutputRadix(LexError):
    message = "expected trailing output radix 'd' or 'h'"


class ParseError(EvalError):
    pass


class UnexpectedToken(ParseError):
    message = "expected a number or '('"


class UnbalancedParens(ParseError):
    message = "unbalanced parenthesis"


class TrailingTokens(ParseError):
    message = "unexpected token after expression"


class EmptyExpression(ParseError):
    message = "empty expression"


class Overflow(ParseError):
    message = "integer overflow"
